import math
import pytest

from limelight_client.transform import (
    Pose2d,
    Pose3d,
    Rotation3d,
    Translation3d,
    pose2d_from_array,
    pose3d_from_array,
    pose3d_to_array,
    translation3d_to_array,
)


def test_pose3d_from_array():
    pose = pose3d_from_array([1.0, 2.0, 3.0, 30.0, -45.0, 90.0])

    assert pose.translation == Translation3d(1.0, 2.0, 3.0)
    assert pose.rotation.roll_degrees == pytest.approx(30.0)
    assert pose.rotation.pitch_degrees == pytest.approx(-45.0)
    assert pose.rotation.yaw_degrees == pytest.approx(90.0)


@pytest.mark.parametrize("values", [[], [1.0, 2.0, 3.0, 4.0, 5.0], None])
def test_short_arrays_give_zero_pose(values):
    assert pose3d_from_array(values) == Pose3d()
    assert pose2d_from_array(values) == Pose2d()


def test_pose2d_keeps_x_y_yaw():
    pose = pose2d_from_array([4.0, 5.0, 6.0, 10.0, 20.0, -90.0])

    assert pose.x == 4.0
    assert pose.y == 5.0
    assert pose.rotation_degrees == pytest.approx(-90.0)


def test_pose_array_round_trip():
    values = [0.5, -1.5, 0.25, 12.0, -30.0, 170.0]
    assert pose3d_to_array(pose3d_from_array(values)) == pytest.approx(values)


def test_translation_to_array():
    assert translation3d_to_array(Translation3d(1.0, 2.0, 3.0)) == [1.0, 2.0, 3.0]


def test_pose3d_to_pose2d():
    pose = Pose3d(Translation3d(1.0, 2.0, 3.0), Rotation3d(roll=0.2, yaw=math.pi))

    assert pose.x == 1.0
    assert pose.z == 3.0
    assert pose.to_pose2d() == Pose2d(1.0, 2.0, math.pi)


def test_rotation_from_degrees():
    rotation = Rotation3d.from_degrees(20.0, -35.0, 110.0)

    assert rotation.roll == pytest.approx(math.radians(20.0))
    assert rotation.pitch_degrees == pytest.approx(-35.0)
    assert rotation.yaw_degrees == pytest.approx(110.0)
