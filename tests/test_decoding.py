import math

import pytest

from limelight_client.decoding import (
    DETECTION_STRIDE,
    FIDUCIAL_STRIDE,
    decode_raw_detections,
    decode_raw_fiducials,
    decode_strided,
    extract_array_entry,
    extract_int_entry,
)


def _fiducial_values(count):
    values = []
    for i in range(count):
        values.extend([10 + i, 1.5 * i, -2.0, 0.4, 3.0 + i, 3.5 + i, 0.05 * i])
    return values


def test_extract_array_entry_in_range():
    assert extract_array_entry([1.0, 2.0, 3.0], 2) == 3.0


@pytest.mark.parametrize("index", [3, 10, -1])
def test_extract_array_entry_out_of_range_is_zero(index):
    assert extract_array_entry([1.0, 2.0, 3.0], index) == 0.0


def test_extract_array_entry_none():
    assert extract_array_entry(None, 0) == 0.0


@pytest.mark.parametrize("stride", [1, 3, 7, 12])
@pytest.mark.parametrize("count", [0, 1, 4])
def test_decode_strided_record_count(stride, count):
    values = [float(i) for i in range(stride * count)]
    records = decode_strided(values, stride, lambda v, base: base)
    assert len(records) == count
    assert list(records) == [i * stride for i in range(count)]


@pytest.mark.parametrize("length", [1, 6, 8, 13])
def test_decode_raw_fiducials_bad_length_is_empty(length):
    assert decode_raw_fiducials([1.0] * length) == ()


def test_decode_raw_fiducials_fields():
    values = _fiducial_values(3)
    fiducials = decode_raw_fiducials(values)

    assert len(fiducials) == 3
    for i, fiducial in enumerate(fiducials):
        base = i * FIDUCIAL_STRIDE
        assert fiducial.id == int(values[base])
        assert fiducial.txnc == values[base + 1]
        assert fiducial.tync == values[base + 2]
        assert fiducial.ta == values[base + 3]
        assert fiducial.dist_to_camera == values[base + 4]
        assert fiducial.dist_to_robot == values[base + 5]
        assert fiducial.ambiguity == values[base + 6]


def test_decode_raw_fiducials_truncates_id():
    fiducial, = decode_raw_fiducials([7.9, 0, 0, 0, 0, 0, 0])
    assert fiducial.id == 7
    assert isinstance(fiducial.id, int)


def test_raw_fiducials_are_immutable():
    fiducial, = decode_raw_fiducials(_fiducial_values(1))
    with pytest.raises(AttributeError):
        fiducial.id = 99


def test_decode_raw_detections_fields():
    values = [2, 1.0, -1.0, 5.5, 10, 11, 20, 21, 30, 31, 40, 41]
    detection, = decode_raw_detections(values)

    assert detection.class_id == 2
    assert detection.txnc == 1.0
    assert detection.tync == -1.0
    assert detection.ta == 5.5
    assert detection.corners == [(10, 11), (20, 21), (30, 31), (40, 41)]


def test_decode_raw_detections_multiple_and_malformed():
    values = list(range(DETECTION_STRIDE * 2))
    assert len(decode_raw_detections(values)) == 2
    assert decode_raw_detections(values[:-1]) == ()
    assert decode_raw_detections([]) == ()


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_extract_int_entry_non_finite_is_zero(value):
    assert extract_int_entry([value], 0) == 0


def test_extract_int_entry_truncates():
    assert extract_int_entry([3.9, -2.5], 0) == 3
    assert extract_int_entry([3.9, -2.5], 1) == -2
    assert extract_int_entry([3.9], 5) == 0


@pytest.mark.parametrize("value", [math.nan, math.inf])
def test_non_finite_ids_decode_to_zero(value):
    fiducial, = decode_raw_fiducials([value, 0.1, 0.2, 0.3, 1.0, 1.1, 0.01])
    detection, = decode_raw_detections([value] + [0.0] * 11)

    assert fiducial.id == 0
    assert fiducial.txnc == 0.1
    assert detection.class_id == 0
