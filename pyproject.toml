[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nmeafix"
version = "0.1.0"
description = "Track position, heading, speed and fix status from NMEA GGA and VTG telegrams of a u-blox NEO-7M GPS receiver"
requires-python = ">=3.10"
dependencies = []
keywords = ["gps", "nmea", "gga", "vtg", "u-blox", "rhumb line", "wgs84", "navigation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nmeafix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
