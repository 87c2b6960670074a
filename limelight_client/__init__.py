"""Typed client for the telemetry a Limelight camera publishes over NetworkTables."""

from .base import setup_logging
from .config import LimelightConfig
from .limelight import Limelight
from .pipeline import PipelineDataCollator, PipelineResult
from .pose import PoseEstimate, PoseEstimator, PoseEstimators, decode_pose_estimate, valid_pose_estimate
from .settings import DownscalingOverride, ImuMode, LEDMode, LimelightSettings, StreamMode
from .transform import Pose2d, Pose3d, Rotation3d, Translation3d

__version__ = "0.1.0"

__all__ = [
    "DownscalingOverride",
    "ImuMode",
    "LEDMode",
    "Limelight",
    "LimelightConfig",
    "LimelightSettings",
    "PipelineDataCollator",
    "PipelineResult",
    "Pose2d",
    "Pose3d",
    "PoseEstimate",
    "PoseEstimator",
    "PoseEstimators",
    "Rotation3d",
    "StreamMode",
    "Translation3d",
    "decode_pose_estimate",
    "setup_logging",
    "valid_pose_estimate",
]
