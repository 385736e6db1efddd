# nmeafix

`nmeafix` reads NMEA telegrams from a u-blox NEO-7M GPS receiver, or from
anything that can hand over one line at a time, and keeps the latest position,
heading, speed and fix status.

Only two sentence types are used; the talker prefix is ignored:

- **GGA** gives latitude, longitude, fix quality, number of satellites, HDOP and
  the fix timestamp. The heading is the rhumb-line bearing from the previous
  position to the new one, computed on the WGS84 ellipsoid and reported in
  the range 0–360°.
- **VTG** gives the speed over ground in km/h.

A telegram is dropped when it does not start with `$`, has no `*hh` trailer,
or fails its checksum. Any other sentence type is ignored. A field that cannot
be parsed counts as zero.

Before the first GGA telegram the pose is at latitude 0, longitude 0 with
orientation 0, and every status field is -1. The heading of the first fix is
measured from that starting point.

## Installation

```
pip install nmeafix
```

## Reading a receiver

`UbloxNeo7m` takes any object with a `read_line()` method returning one
telegram as a string; the `LineSource` protocol in `nmeafix.receiver`
describes it.

```python
from nmeafix.receiver import UbloxNeo7m

class Replay:
    def read_line(self):
        return "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"

gps = UbloxNeo7m(Replay())
thread = gps.setup()        # starts a daemon thread that calls run()
# ... later
gps.stop_thread()           # the thread finishes after its current telegram
thread.join()

print(gps.pose)             # Pose(coordinate=Coordinate(latitude=48.1173, ...), orientation=...)
print(gps.speed)            # km/h from the last VTG telegram
print(gps.status)           # GPSStatus(fix=..., satellites=..., hdop=..., fix_timestamp=..., pose=...)
```

`pose`, `speed` and `status` are read-only properties and are safe to read
while the background thread is running.

Telegrams can also be fed by hand, without a thread:

```python
gps.handle_telegram("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48")
assert gps.speed == 10.2
```

## Helpers

```python
from nmeafix.nmea import nmea_checksum, has_valid_checksum, degree_minutes_to_degrees
from nmeafix.geo import Coordinate, Pose, rhumb_bearing, pose_from_fix

nmea_checksum("GPZAS,")                 # 0x73, XOR of the characters
has_valid_checksum("$GPZAS,*73")        # True
degree_minutes_to_degrees("4807.038")   # 48.1173

rhumb_bearing(Coordinate(56.0, 10.0), Coordinate(56.01, 10.01))   # degrees in [-180, 180]
pose_from_fix(Coordinate(56.0, 10.0), Coordinate(56.01, 10.01))   # Pose with orientation in [0, 360)
```

The checksum is compared as upper-case hexadecimal without zero padding.

## What it does not do

`nmeafix` does not open serial ports or configure the receiver; you supply the
line source. It has no command-line program, and it does not store or log the
telegrams it reads.

## Running the tests

```
pip install nmeafix[test]
pytest
```