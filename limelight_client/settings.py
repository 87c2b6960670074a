from enum import Enum
from typing import Iterable

from . import nt_schema
from .base import BaseComponent
from .transform import Pose3d, Translation3d, pose3d_to_array, translation3d_to_array


class LEDMode(Enum):
    PIPELINE_CONTROL = 0
    FORCE_OFF = 1
    FORCE_BLINK = 2
    FORCE_ON = 3


class StreamMode(Enum):
    STANDARD = 0
    PICTURE_IN_PICTURE_MAIN = 1
    PICTURE_IN_PICTURE_SECONDARY = 2


class DownscalingOverride(Enum):
    PIPELINE = 0
    NO_DOWNSCALE = 1
    HALF_DOWNSCALE = 2
    DOUBLE_DOWNSCALE = 3
    TRIPLE_DOWNSCALE = 4
    QUADRUPLE_DOWNSCALE = 5


class ImuMode(Enum):
    EXTERNAL_IMU = 0
    SYNC_INTERNAL_IMU = 1
    INTERNAL_IMU = 2
    MT1_ASSIST_INTERNAL_IMU = 3
    EXTERNAL_ASSIST_INTERNAL_IMU = 4


class LimelightSettings(BaseComponent):
    """Writes Limelight configuration to NetworkTables.

    Every with_* call is one immediate write and returns self, so calls chain:

        limelight.settings.with_pipeline_index(1).with_led_mode(LEDMode.FORCE_ON).save()

    Values are never read back.
    """

    def __init__(self, limelight):
        super().__init__()
        self.limelight = limelight
        self.network_table = limelight.network_table

        entry = self.network_table.getEntry
        self.led_mode = entry(nt_schema.LED_MODE)
        self.pipeline_index = entry(nt_schema.PIPELINE_INDEX)
        self.priority_tag_id = entry(nt_schema.PRIORITY_TAG_ID)
        self.stream_mode = entry(nt_schema.STREAM_MODE)
        self.crop_window = entry(nt_schema.CROP_WINDOW)
        self.imu_mode = entry(nt_schema.IMU_MODE)
        self.imu_assist_alpha = entry(nt_schema.IMU_ASSIST_ALPHA)
        self.process_frame_frequency = entry(nt_schema.THROTTLE)
        self.downscale = entry(nt_schema.FIDUCIAL_DOWNSCALE)
        self.fiducial_3d_offset = entry(nt_schema.FIDUCIAL_OFFSET)
        self.camera_to_robot = entry(nt_schema.CAMERAPOSE_ROBOT_SPACE_SET)
        self.fiducial_id_filters_override = entry(nt_schema.FIDUCIAL_ID_FILTERS)

    def with_led_mode(self, mode: LEDMode):
        self.led_mode.setNumber(mode.value)
        return self

    def with_pipeline_index(self, index: int):
        self.pipeline_index.setNumber(index)
        return self

    def with_priority_tag_id(self, april_tag_id: int):
        """Tag used for tx/ty targeting when several are in view."""
        self.priority_tag_id.setNumber(april_tag_id)
        return self

    def with_stream_mode(self, mode: StreamMode):
        self.stream_mode.setNumber(mode.value)
        return self

    def with_crop_window(self, min_x: float, max_x: float, min_y: float, max_y: float):
        """Crop window in normalized coordinates (-1 to 1)."""
        self.crop_window.setDoubleArray([min_x, max_x, min_y, max_y])
        return self

    def with_imu_mode(self, mode: ImuMode):
        self.imu_mode.setNumber(mode.value)
        return self

    def with_imu_assist_alpha(self, alpha: float):
        """Complementary filter alpha for the IMU assist modes."""
        self.imu_assist_alpha.setDouble(alpha)
        return self

    def with_processed_frame_frequency(self, skipped_frames: int):
        """Process one frame, then skip this many."""
        self.process_frame_frequency.setNumber(skipped_frames)
        return self

    def with_fiducial_downscaling_override(self, downscaling_override: DownscalingOverride):
        self.downscale.setDouble(downscaling_override.value)
        return self

    def with_april_tag_offset(self, offset: Translation3d):
        """3D point of interest offset from the AprilTag center, in meters."""
        self.fiducial_3d_offset.setDoubleArray(translation3d_to_array(offset))
        return self

    def with_april_tag_id_filter(self, id_filter: Iterable[float]):
        """Only tags in this list are used for localization."""
        self.fiducial_id_filters_override.setDoubleArray([float(i) for i in id_filter])
        return self

    def with_camera_offset(self, offset: Pose3d):
        """Camera pose relative to the robot center."""
        self.camera_to_robot.setDoubleArray(pose3d_to_array(offset))
        return self

    def save(self):
        """Push pending writes to the network immediately."""
        self.limelight.flush()
