import logging
import math
from dataclasses import dataclass, field
from typing import List, Sequence

logger = logging.getLogger("PoseTransform")


@dataclass(frozen=True)
class Translation3d:
    """Position in meters."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Rotation3d:
    """Extrinsic roll/pitch/yaw rotation in radians."""
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    @classmethod
    def from_degrees(cls, roll, pitch, yaw):
        return cls(math.radians(roll), math.radians(pitch), math.radians(yaw))

    @property
    def roll_degrees(self) -> float:
        return math.degrees(self.roll)

    @property
    def pitch_degrees(self) -> float:
        return math.degrees(self.pitch)

    @property
    def yaw_degrees(self) -> float:
        return math.degrees(self.yaw)


@dataclass(frozen=True)
class Pose2d:
    """Planar pose: x/y in meters, rotation (heading) in radians."""
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0

    @property
    def rotation_degrees(self) -> float:
        return math.degrees(self.rotation)


@dataclass(frozen=True)
class Pose3d:
    translation: Translation3d = field(default_factory=Translation3d)
    rotation: Rotation3d = field(default_factory=Rotation3d)

    @property
    def x(self) -> float:
        return self.translation.x

    @property
    def y(self) -> float:
        return self.translation.y

    @property
    def z(self) -> float:
        return self.translation.z

    def to_pose2d(self) -> Pose2d:
        return Pose2d(self.translation.x, self.translation.y, self.rotation.yaw)


def pose3d_from_array(values: Sequence[float]) -> Pose3d:
    """Build a Pose3d from [x, y, z, roll, pitch, yaw] (meters, degrees).

    Arrays shorter than six values give the zero pose.
    """
    if values is None or len(values) < 6:
        logger.warning("Bad 3D pose data, expected 6 values")
        return Pose3d()

    translation = Translation3d(values[0], values[1], values[2])
    rotation = Rotation3d.from_degrees(values[3], values[4], values[5])
    return Pose3d(translation, rotation)


def pose2d_from_array(values: Sequence[float]) -> Pose2d:
    """Build a Pose2d from a 6-value pose array, keeping x, y and yaw."""
    if values is None or len(values) < 6:
        logger.warning("Bad 2D pose data, expected 6 values")
        return Pose2d()

    return Pose2d(values[0], values[1], math.radians(values[5]))


def pose3d_to_array(pose: Pose3d) -> List[float]:
    return [
        pose.translation.x,
        pose.translation.y,
        pose.translation.z,
        pose.rotation.roll_degrees,
        pose.rotation.pitch_degrees,
        pose.rotation.yaw_degrees,
    ]


def translation3d_to_array(translation: Translation3d) -> List[float]:
    return [translation.x, translation.y, translation.z]
