"""Track position, heading, speed and fix status from NMEA GGA/VTG telegrams."""

__version__ = "0.1.0"
__all__ = ["geo", "nmea", "receiver"]