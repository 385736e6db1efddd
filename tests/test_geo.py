import pytest

from nmeafix.geo import Coordinate, Pose, pose_from_fix, rhumb_bearing


def test_coordinate_and_pose_equality():
    assert Pose(Coordinate(1.0, 2.0), 3.0) == Pose(Coordinate(1.0, 2.0), 3.0)
    assert Coordinate(1.0, 2.0) != Coordinate(2.0, 1.0)


def test_due_north_bearing():
    assert rhumb_bearing(Coordinate(56.0, 10.0), Coordinate(56.01, 10.0)) == 0.0


def test_due_east_bearing():
    assert rhumb_bearing(Coordinate(56.0, 10.0), Coordinate(56.0, 10.01)) == pytest.approx(90.0)


@pytest.mark.parametrize(
    "start, end",
    [
        (Coordinate(56.0, 10.0), Coordinate(56.01, 10.01)),
        (Coordinate(56.0, 10.0), Coordinate(55.99, 9.99)),
        (Coordinate(0.0, 0.0), Coordinate(48.1173, 11.5167)),
        (Coordinate(-33.0, 151.0), Coordinate(-34.0, 150.0)),
    ],
)
def test_reverse_bearing_differs_by_half_turn(start, end):
    forward = pose_from_fix(start, end).orientation
    backward = pose_from_fix(end, start).orientation
    assert (forward - backward) % 360 == pytest.approx(180.0)


def test_westward_bearing_is_negative_and_pose_wraps():
    start, end = Coordinate(56.0, 10.0), Coordinate(56.01, 9.99)
    bearing = rhumb_bearing(start, end)
    pose = pose_from_fix(start, end)
    assert bearing < 0
    assert pose.orientation == pytest.approx(bearing + 360)
    assert pose.coordinate == end


def test_crossing_antimeridian_takes_short_way():
    bearing = rhumb_bearing(Coordinate(10.0, 179.5), Coordinate(10.0, -179.5))
    assert bearing == pytest.approx(90.0)


def test_coincident_points_face_north():
    here = Coordinate(56.0, 10.0)
    assert pose_from_fix(here, here) == Pose(here, 0.0)


@pytest.mark.parametrize("lat, lon", [(1.0, -1.0), (-1.0, -1.0), (-1.0, 1.0), (1.0, 1.0)])
def test_pose_orientation_in_range(lat, lon):
    pose = pose_from_fix(Coordinate(0.0, 0.0), Coordinate(lat, lon))
    assert 0.0 <= pose.orientation < 360.0