from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..targets import (
    BarcodeTarget,
    ClassifierTarget,
    DetectorTarget,
    FiducialTarget,
    RetroreflectiveTarget,
)
from ..transform import Pose2d, Pose3d, pose2d_from_array, pose3d_from_array


def _zero_pose():
    return [0.0] * 6


class PipelineResult(BaseModel):
    """One processing cycle, parsed from the Limelight's JSON results output.

    Unknown fields are ignored so newer firmware can add keys. Pose arrays are
    [x, y, z, roll, pitch, yaw] in meters/degrees.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Set by the collator when the JSON could not be parsed
    error: Optional[str] = None

    pipeline_id: float = Field(0.0, alias="pID")
    latency_pipeline: float = Field(0.0, alias="tl")
    latency_capture: float = Field(0.0, alias="cl")
    latency_json_parse: float = 0.0

    # Milliseconds since Limelight boot
    timestamp_limelight_publish: float = Field(0.0, alias="ts")
    timestamp_rio_fpga_capture: float = Field(0.0, alias="ts_rio")

    valid: bool = Field(False, alias="v")

    botpose: List[float] = Field(default_factory=_zero_pose)
    botpose_wpired: List[float] = Field(default_factory=_zero_pose)
    botpose_wpiblue: List[float] = Field(default_factory=_zero_pose)
    botpose_tagcount: float = 0.0
    botpose_span: float = 0.0
    botpose_avgdist: float = 0.0
    botpose_avgarea: float = 0.0
    camerapose_robotspace: List[float] = Field(default_factory=_zero_pose, alias="t6c_rs")

    targets_retro: List[RetroreflectiveTarget] = Field(default_factory=list, alias="Retro")
    targets_fiducials: List[FiducialTarget] = Field(default_factory=list, alias="Fiducial")
    targets_classifier: List[ClassifierTarget] = Field(default_factory=list, alias="Classifier")
    targets_detector: List[DetectorTarget] = Field(default_factory=list, alias="Detector")
    targets_barcode: List[BarcodeTarget] = Field(default_factory=list, alias="Barcode")

    @field_validator("valid", mode="before")
    @classmethod
    def _numeric_flag(cls, value):
        # Published as a number
        if isinstance(value, (int, float)):
            return value != 0
        return value

    def get_bot_pose3d(self) -> Pose3d:
        return pose3d_from_array(self.botpose)

    def get_bot_pose3d_wpi_red(self) -> Pose3d:
        return pose3d_from_array(self.botpose_wpired)

    def get_bot_pose3d_wpi_blue(self) -> Pose3d:
        return pose3d_from_array(self.botpose_wpiblue)

    def get_bot_pose2d(self) -> Pose2d:
        return pose2d_from_array(self.botpose)

    def get_bot_pose2d_wpi_red(self) -> Pose2d:
        return pose2d_from_array(self.botpose_wpired)

    def get_bot_pose2d_wpi_blue(self) -> Pose2d:
        return pose2d_from_array(self.botpose_wpiblue)
