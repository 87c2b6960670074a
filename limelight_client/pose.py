import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from networktables import NetworkTablesInstance

from . import nt_schema
from .base import BaseComponent
from .decoding import (
    FIDUCIAL_STRIDE,
    decode_raw_fiducials,
    extract_array_entry,
    extract_int_entry,
    raw_fiducial_at,
)
from .targets.fiducial import RawFiducialTarget
from .transform import Pose2d, Pose3d, pose3d_from_array


@dataclass(frozen=True)
class PoseEstimate:
    """A robot pose estimate from one of the Limelight's botpose topics.

    Attributes:
        pose: Estimated robot pose
        timestamp_seconds: Capture time estimate (publish time minus latency)
        latency: Total latency in milliseconds
        tag_count: Number of tags used to compute this pose
        tag_span: Maximum distance between the tags used, in meters
        avg_tag_dist: Average distance to the tags used, in meters
        avg_tag_area: Average area of the tags used (% of image)
        raw_fiducials: Per-tag data, empty when the array layout did not match tag_count
        is_megatag2: Computed with MegaTag2
    """
    pose: Pose3d = field(default_factory=Pose3d)
    timestamp_seconds: float = 0.0
    latency: float = 0.0
    tag_count: int = 0
    tag_span: float = 0.0
    avg_tag_dist: float = 0.0
    avg_tag_area: float = 0.0
    raw_fiducials: Tuple[RawFiducialTarget, ...] = ()
    is_megatag2: bool = False

    @property
    def pose2d(self) -> Pose2d:
        return self.pose.to_pose2d()

    def print_summary(self):
        """Print timestamp, latency, tag metrics and every fiducial to stdout."""
        print("Pose Estimate Information:")
        print(f"Timestamp (Seconds): {self.timestamp_seconds:.3f}")
        print(f"Latency: {self.latency:.3f} ms")
        print(f"Tag Count: {self.tag_count}")
        print(f"Tag Span: {self.tag_span:.2f} meters")
        print(f"Average Tag Distance: {self.avg_tag_dist:.2f} meters")
        print(f"Average Tag Area: {self.avg_tag_area:.2f}% of image")
        print(f"Is MegaTag2: {self.is_megatag2}")
        print()

        if not self.raw_fiducials:
            print("No RawFiducials data available.")
            return

        print("Raw Fiducials Details:")
        for i, fiducial in enumerate(self.raw_fiducials, start=1):
            print(f" Fiducial #{i}:")
            print(f"  ID: {fiducial.id}")
            print(f"  TXNC: {fiducial.txnc:.2f}")
            print(f"  TYNC: {fiducial.tync:.2f}")
            print(f"  TA: {fiducial.ta:.2f}")
            print(f"  Distance to Camera: {fiducial.dist_to_camera:.2f} meters")
            print(f"  Distance to Robot: {fiducial.dist_to_robot:.2f} meters")
            print(f"  Ambiguity: {fiducial.ambiguity:.2f}")
            print()


def decode_pose_estimate(values: Sequence[float], timestamp_micros: float,
                         is_megatag2: bool) -> Optional[PoseEstimate]:
    """Decode one botpose array into a PoseEstimate.

    Layout: [x, y, z, roll, pitch, yaw, latency, tagCount, tagSpan, avgDist,
    avgArea] followed by 7 values per tag.

    Args:
        values: The published array
        timestamp_micros: Time the array was published, in microseconds
        is_megatag2: Whether the array came from a MegaTag2 topic

    Returns:
        The estimate, or None if the array is empty
    """
    if values is None or len(values) == 0:
        return None

    pose = pose3d_from_array(values)
    latency = extract_array_entry(values, 6)
    tag_count = extract_int_entry(values, 7)
    tag_span = extract_array_entry(values, 8)
    tag_dist = extract_array_entry(values, 9)
    tag_area = extract_array_entry(values, 10)

    # Microseconds to seconds, minus latency in milliseconds
    adjusted_timestamp = (timestamp_micros / 1000000.0) - (latency / 1000.0)

    raw_fiducials = ()
    expected_total = nt_schema.POSE_ARRAY_PREFIX + FIDUCIAL_STRIDE * tag_count
    if tag_count > 0 and len(values) == expected_total:
        raw_fiducials = tuple(
            raw_fiducial_at(values, nt_schema.POSE_ARRAY_PREFIX + i * FIDUCIAL_STRIDE)
            for i in range(tag_count)
        )

    return PoseEstimate(
        pose=pose,
        timestamp_seconds=adjusted_timestamp,
        latency=latency,
        tag_count=tag_count,
        tag_span=tag_span,
        avg_tag_dist=tag_dist,
        avg_tag_area=tag_area,
        raw_fiducials=raw_fiducials,
        is_megatag2=is_megatag2,
    )


def valid_pose_estimate(estimate: Optional[PoseEstimate]) -> bool:
    """A pose estimate is usable only if it exists and saw at least one tag."""
    return estimate is not None and len(estimate.raw_fiducials) != 0


class PoseEstimators(Enum):
    """The botpose topics available to query, with their MegaTag2 state."""

    # (Not recommended) WPILib red alliance coordinate system
    RED = (nt_schema.BOTPOSE_WPIRED, False)
    RED_MEGATAG2 = (nt_schema.BOTPOSE_ORB_WPIRED, True)
    # (Recommended) WPILib blue alliance coordinate system
    BLUE = (nt_schema.BOTPOSE_WPIBLUE, False)
    BLUE_MEGATAG2 = (nt_schema.BOTPOSE_ORB_WPIBLUE, True)

    def __init__(self, entry, is_megatag2):
        self.entry = entry
        self.is_megatag2 = is_megatag2


def _now_micros() -> int:
    return int(time.time() * 1000000)


class PoseEstimator(BaseComponent):
    """Collects pose estimates published by a Limelight on one botpose topic.

    Every update to the topic is queued with its arrival time;
    get_bot_pose_estimates() drains the queue. Only the newest
    nt_schema.POSE_QUEUE_DEPTH samples are kept between drains.

    NetworkTables 3 does not expose server publish times, so samples are
    stamped by `clock` when the listener fires. timestamp_seconds therefore
    includes network transit time; pass a clock synchronised with the robot
    to reduce the error.
    """

    def __init__(self, limelight, estimator: PoseEstimators,
                 clock: Optional[Callable[[], float]] = None):
        super().__init__()
        self.network_table = limelight.network_table
        self.estimator = estimator
        self.clock = clock or _now_micros

        self._samples = deque(maxlen=nt_schema.POSE_QUEUE_DEPTH)
        self._pose_entry = self.network_table.getEntry(estimator.entry)
        self._raw_fiducials_entry = self.network_table.getEntry(nt_schema.RAW_FIDUCIALS)

        flags = NetworkTablesInstance.NotifyFlags.NEW | NetworkTablesInstance.NotifyFlags.UPDATE
        self._pose_entry.addListener(self._on_pose_update, flags)

    def _on_pose_update(self, entry, key, value, param):
        # Called from the NetworkTables dispatch thread
        self._samples.append((self.clock(), tuple(value or ())))

    def get_bot_pose_estimates(self) -> List[PoseEstimate]:
        """Decode every pose sample received since the last call."""
        estimates = []
        while self._samples:
            timestamp, values = self._samples.popleft()
            estimate = decode_pose_estimate(values, timestamp, self.estimator.is_megatag2)
            if estimate is not None:
                estimates.append(estimate)
        return estimates

    def get_raw_fiducial_targets(self) -> Tuple[RawFiducialTarget, ...]:
        return decode_raw_fiducials(self._raw_fiducials_entry.getDoubleArray([]))

    @staticmethod
    def valid_pose_estimate(estimate: Optional[PoseEstimate]) -> bool:
        return valid_pose_estimate(estimate)
