import time
from typing import Tuple

from pydantic import ValidationError

from .. import nt_schema
from ..base import BaseComponent
from ..decoding import (
    decode_raw_detections,
    decode_raw_fiducials,
    extract_array_entry,
    extract_int_entry,
)
from ..targets import RawDetection, RawFiducialTarget
from ..transform import Pose3d, pose3d_from_array
from .result import PipelineResult


class PipelineDataCollator(BaseComponent):
    """Fetches pipeline data from a Limelight.

    Every accessor reads the table again; nothing is cached between calls.
    """

    def __init__(self, limelight):
        super().__init__()
        self.network_table = limelight.network_table
        self.show_parse_time = getattr(limelight, "show_parse_time", False)

        entry = self.network_table.getEntry
        self.raw_detections_entry = entry(nt_schema.RAW_DETECTIONS)
        self.raw_fiducials_entry = entry(nt_schema.RAW_FIDUCIALS)
        self.target_valid_entry = entry(nt_schema.TARGET_VALID)
        self.target_x_entry = entry(nt_schema.TARGET_X)
        self.target_y_entry = entry(nt_schema.TARGET_Y)
        self.target_x_nc_entry = entry(nt_schema.TARGET_X_NC)
        self.target_y_nc_entry = entry(nt_schema.TARGET_Y_NC)
        self.target_area_entry = entry(nt_schema.TARGET_AREA)
        self.target_t2d_entry = entry(nt_schema.TARGET_T2D)
        self.classifier_class_entry = entry(nt_schema.CLASSIFIER_CLASS)
        self.detector_class_entry = entry(nt_schema.DETECTOR_CLASS)
        self.pipeline_latency_entry = entry(nt_schema.PIPELINE_LATENCY)
        self.capture_latency_entry = entry(nt_schema.CAPTURE_LATENCY)
        self.pipeline_index_entry = entry(nt_schema.CURRENT_PIPELINE)
        self.pipeline_type_entry = entry(nt_schema.CURRENT_PIPELINE_TYPE)
        self.json_entry = entry(nt_schema.JSON_RESULTS)
        self.botpose_target_space_entry = entry(nt_schema.BOTPOSE_TARGET_SPACE)
        self.camerapose_target_space_entry = entry(nt_schema.CAMERAPOSE_TARGET_SPACE)
        self.targetpose_camera_space_entry = entry(nt_schema.TARGETPOSE_CAMERA_SPACE)
        self.targetpose_robot_space_entry = entry(nt_schema.TARGETPOSE_ROBOT_SPACE)
        self.camerapose_robot_space_entry = entry(nt_schema.CAMERAPOSE_ROBOT_SPACE)
        # Lags a few seconds behind and is only accurate while stationary
        self.standard_deviations_entry = entry(nt_schema.STANDARD_DEVIATIONS)
        self.target_color_entry = entry(nt_schema.TARGET_COLOR)
        self.tag_id_entry = entry(nt_schema.TAG_ID)
        self.target_class_entry = entry(nt_schema.TARGET_CLASS)
        self.raw_barcodes_entry = entry(nt_schema.RAW_BARCODES)
        self.hardware_metrics_entry = entry(nt_schema.HARDWARE_METRICS)

    # Raw arrays

    def get_raw_detections(self) -> Tuple[RawDetection, ...]:
        return decode_raw_detections(self.raw_detections_entry.getDoubleArray([]))

    def get_raw_fiducial_targets(self) -> Tuple[RawFiducialTarget, ...]:
        return decode_raw_fiducials(self.raw_fiducials_entry.getDoubleArray([]))

    # JSON results

    def get_latest_results(self, show_parse_time=None) -> PipelineResult:
        """Parse the latest JSON results dump.

        Args:
            show_parse_time: Log how long parsing took (default: the camera setting)

        Returns:
            The parsed result. On a parse failure, a default result with
            `error` set.
        """
        start = time.perf_counter()
        try:
            results = PipelineResult.model_validate_json(self.get_json_dump())
        except ValidationError as e:
            results = PipelineResult()
            results.error = f"lljson error: {e}"

        millis = (time.perf_counter() - start) * 1000.0
        results.latency_json_parse = millis
        if show_parse_time is None:
            show_parse_time = self.show_parse_time
        if show_parse_time:
            self.logger.info(f"lljson: {millis:.2f}")

        return results

    def get_json_dump(self) -> str:
        return self.json_entry.getString("")

    # Primary target

    def get_tv(self) -> bool:
        """Does the Limelight have a valid target?"""
        return self.target_valid_entry.getDouble(0) == 1.0

    def get_tx(self) -> float:
        """Horizontal offset from the crosshair to the target in degrees."""
        return self.target_x_entry.getDouble(0)

    def get_ty(self) -> float:
        """Vertical offset from the crosshair to the target in degrees."""
        return self.target_y_entry.getDouble(0)

    def get_txnc(self) -> float:
        """Horizontal offset from the principal pixel to the target in degrees."""
        return self.target_x_nc_entry.getDouble(0)

    def get_tync(self) -> float:
        """Vertical offset from the principal pixel to the target in degrees."""
        return self.target_y_nc_entry.getDouble(0)

    def get_ta(self) -> float:
        """Target area as a percentage of the image (0-100)."""
        return self.target_area_entry.getDouble(0)

    def get_t2d_array(self) -> Tuple[float, ...]:
        """[targetValid, targetCount, targetLatency, captureLatency, tx, ty, txnc, tync,
        ta, tid, detectorClassIndex, classifierClassIndex, longSidePixels,
        shortSidePixels, horizontalExtentPixels, verticalExtentPixels, skewDegrees]
        """
        return tuple(self.target_t2d_entry.getDoubleArray([]))

    def _t2d_value(self, index):
        t2d = self.get_t2d_array()
        if len(t2d) == nt_schema.T2D_LENGTH:
            return extract_int_entry(t2d, index)
        return 0

    def get_target_count(self) -> int:
        return self._t2d_value(1)

    def get_classifier_class_index(self) -> int:
        return self._t2d_value(10)

    def get_detector_class_index(self) -> int:
        return self._t2d_value(11)

    def get_classifier_class(self) -> str:
        return self.classifier_class_entry.getString("")

    def get_detector_class(self) -> str:
        return self.detector_class_entry.getString("")

    def get_target_color(self) -> Tuple[float, ...]:
        """Target color as [H, S, V]."""
        return tuple(self.target_color_entry.getDoubleArray([]))

    def get_fiducial_id(self) -> float:
        return self.tag_id_entry.getDouble(0)

    def get_neural_class_id(self) -> str:
        return self.target_class_entry.getString("")

    def get_raw_barcode_data(self) -> Tuple[str, ...]:
        return tuple(self.raw_barcodes_entry.getStringArray([]))

    # Pipeline state

    def get_latency_pipeline(self) -> float:
        return self.pipeline_latency_entry.getDouble(0)

    def get_latency_capture(self) -> float:
        return self.capture_latency_entry.getDouble(0)

    def get_current_pipeline_index(self) -> float:
        return self.pipeline_index_entry.getDouble(0)

    def get_current_pipeline_type(self) -> str:
        return self.pipeline_type_entry.getString("")

    # 3D transforms

    def get_bot_pose3d_target_space(self) -> Pose3d:
        return pose3d_from_array(self.botpose_target_space_entry.getDoubleArray([]))

    def get_camera_pose3d_target_space(self) -> Pose3d:
        return pose3d_from_array(self.camerapose_target_space_entry.getDoubleArray([]))

    def get_target_pose3d_camera_space(self) -> Pose3d:
        return pose3d_from_array(self.targetpose_camera_space_entry.getDoubleArray([]))

    def get_target_pose3d_robot_space(self) -> Pose3d:
        return pose3d_from_array(self.targetpose_robot_space_entry.getDoubleArray([]))

    def get_camera_pose3d_robot_space(self) -> Pose3d:
        return pose3d_from_array(self.camerapose_robot_space_entry.getDoubleArray([]))

    def get_standard_deviations(self) -> Tuple[float, ...]:
        """[MT1 x, y, z, roll, pitch, yaw, MT2 x, y, z, roll, pitch, yaw]"""
        return tuple(self.standard_deviations_entry.getDoubleArray([]))

    # Hardware

    def get_hardware_metrics(self) -> Tuple[float, ...]:
        """[FPS, CPU temp, RAM usage, temp]"""
        return tuple(self.hardware_metrics_entry.getDoubleArray([]))

    def get_fps(self) -> float:
        return extract_array_entry(self.get_hardware_metrics(), 0)

    def get_cpu_temperature(self) -> float:
        return extract_array_entry(self.get_hardware_metrics(), 1)

    def get_ram_usage(self) -> float:
        return extract_array_entry(self.get_hardware_metrics(), 2)

    def get_temperature(self) -> float:
        return extract_array_entry(self.get_hardware_metrics(), 3)
