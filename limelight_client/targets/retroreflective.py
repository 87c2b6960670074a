from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..transform import Pose2d, Pose3d, pose2d_from_array, pose3d_from_array


def _zero_pose():
    return [0.0] * 6


class RetroreflectiveTarget(BaseModel):
    """Color/retroreflective result from the JSON results output.

    Pose arrays are [x, y, z, roll, pitch, yaw] in meters/degrees.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    camera_pose_target_space: List[float] = Field(default_factory=_zero_pose, alias="t6c_ts")
    robot_pose_field_space: List[float] = Field(default_factory=_zero_pose, alias="t6r_fs")
    robot_pose_target_space: List[float] = Field(default_factory=_zero_pose, alias="t6r_ts")
    target_pose_camera_space: List[float] = Field(default_factory=_zero_pose, alias="t6t_cs")
    target_pose_robot_space: List[float] = Field(default_factory=_zero_pose, alias="t6t_rs")

    ta: float = 0.0
    tx: float = 0.0
    ty: float = 0.0
    tx_pixels: float = Field(0.0, alias="txp")
    ty_pixels: float = Field(0.0, alias="typ")
    tx_nocrosshair: float = Field(0.0, alias="tx_nocross")
    ty_nocrosshair: float = Field(0.0, alias="ty_nocross")
    ts: float = 0.0

    def get_camera_pose_target_space(self) -> Pose3d:
        return pose3d_from_array(self.camera_pose_target_space)

    def get_robot_pose_field_space(self) -> Pose3d:
        return pose3d_from_array(self.robot_pose_field_space)

    def get_robot_pose_target_space(self) -> Pose3d:
        return pose3d_from_array(self.robot_pose_target_space)

    def get_target_pose_camera_space(self) -> Pose3d:
        return pose3d_from_array(self.target_pose_camera_space)

    def get_target_pose_robot_space(self) -> Pose3d:
        return pose3d_from_array(self.target_pose_robot_space)

    def get_camera_pose_target_space_2d(self) -> Pose2d:
        return pose2d_from_array(self.camera_pose_target_space)

    def get_robot_pose_field_space_2d(self) -> Pose2d:
        return pose2d_from_array(self.robot_pose_field_space)

    def get_robot_pose_target_space_2d(self) -> Pose2d:
        return pose2d_from_array(self.robot_pose_target_space)

    def get_target_pose_camera_space_2d(self) -> Pose2d:
        return pose2d_from_array(self.target_pose_camera_space)

    def get_target_pose_robot_space_2d(self) -> Pose2d:
        return pose2d_from_array(self.target_pose_robot_space)
