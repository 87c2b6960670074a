"""Decoders for the flat numeric arrays the Limelight publishes.

Every decoder degrades instead of failing: arrays whose length is not a
multiple of the record stride decode to an empty tuple, and reads past the
end of an array return 0.
"""
import math
from typing import Callable, Sequence, Tuple, TypeVar

from .targets.fiducial import RawFiducialTarget
from .targets.neural import RawDetection

T = TypeVar("T")

FIDUCIAL_STRIDE = 7
DETECTION_STRIDE = 12


def extract_array_entry(values: Sequence[float], index: int) -> float:
    """Return values[index], or 0.0 if the array is too short."""
    if values is None or index < 0 or index >= len(values):
        return 0.0
    return float(values[index])


def extract_int_entry(values: Sequence[float], index: int) -> int:
    """Truncate values[index] to an int. NaN, infinities and missing values give 0."""
    value = extract_array_entry(values, index)
    if not math.isfinite(value):
        return 0
    return int(value)


def decode_strided(values: Sequence[float], stride: int,
                   factory: Callable[[Sequence[float], int], T]) -> Tuple[T, ...]:
    """Split a flat array into fixed-stride records.

    Args:
        values: Flat array as published
        stride: Number of values per record
        factory: Called with (values, base_index) for each record

    Returns:
        Tuple of records, empty when len(values) is not a multiple of stride
    """
    if values is None or len(values) % stride != 0:
        return ()

    return tuple(factory(values, i * stride) for i in range(len(values) // stride))


def raw_fiducial_at(values: Sequence[float], base: int) -> RawFiducialTarget:
    return RawFiducialTarget(
        id=extract_int_entry(values, base),
        txnc=extract_array_entry(values, base + 1),
        tync=extract_array_entry(values, base + 2),
        ta=extract_array_entry(values, base + 3),
        dist_to_camera=extract_array_entry(values, base + 4),
        dist_to_robot=extract_array_entry(values, base + 5),
        ambiguity=extract_array_entry(values, base + 6),
    )


def raw_detection_at(values: Sequence[float], base: int) -> RawDetection:
    return RawDetection(
        class_id=extract_int_entry(values, base),
        txnc=extract_array_entry(values, base + 1),
        tync=extract_array_entry(values, base + 2),
        ta=extract_array_entry(values, base + 3),
        corner0_x=extract_array_entry(values, base + 4),
        corner0_y=extract_array_entry(values, base + 5),
        corner1_x=extract_array_entry(values, base + 6),
        corner1_y=extract_array_entry(values, base + 7),
        corner2_x=extract_array_entry(values, base + 8),
        corner2_y=extract_array_entry(values, base + 9),
        corner3_x=extract_array_entry(values, base + 10),
        corner3_y=extract_array_entry(values, base + 11),
    )


def decode_raw_fiducials(values: Sequence[float]) -> Tuple[RawFiducialTarget, ...]:
    """[id, txnc, tync, ta, distToCamera, distToRobot, ambiguity] per tag."""
    return decode_strided(values, FIDUCIAL_STRIDE, raw_fiducial_at)


def decode_raw_detections(values: Sequence[float]) -> Tuple[RawDetection, ...]:
    """[classId, txnc, tync, ta, then four corner x/y pairs] per detection."""
    return decode_strided(values, DETECTION_STRIDE, raw_detection_at)
