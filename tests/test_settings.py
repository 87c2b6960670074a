import pytest

from limelight_client import (
    DownscalingOverride,
    ImuMode,
    LEDMode,
    Pose3d,
    Rotation3d,
    StreamMode,
    Translation3d,
)


def test_construction_writes_nothing(table):
    assert table.writes == []


def test_with_pipeline_index_touches_only_pipeline(limelight, table):
    limelight.settings.with_pipeline_index(3)

    assert table.writes == [("pipeline", 3)]
    assert table.getEntry("pipeline").value == 3


def test_settings_chain(limelight, table):
    settings = limelight.settings
    result = (
        settings.with_led_mode(LEDMode.FORCE_ON)
        .with_stream_mode(StreamMode.PICTURE_IN_PICTURE_SECONDARY)
        .with_priority_tag_id(12)
        .with_imu_mode(ImuMode.MT1_ASSIST_INTERNAL_IMU)
        .with_imu_assist_alpha(0.01)
        .with_processed_frame_frequency(50)
        .with_fiducial_downscaling_override(DownscalingOverride.HALF_DOWNSCALE)
    )

    assert result is settings
    assert table.writes == [
        ("ledMode", 3),
        ("stream", 2),
        ("priorityid", 12),
        ("imumode_set", 3),
        ("imuassistalpha_set", 0.01),
        ("throttle_set", 50),
        ("fiducial_downscale_set", 2.0),
    ]


@pytest.mark.parametrize("mode, value", [
    (LEDMode.PIPELINE_CONTROL, 0),
    (LEDMode.FORCE_OFF, 1),
    (LEDMode.FORCE_BLINK, 2),
    (LEDMode.FORCE_ON, 3),
])
def test_led_mode_wire_values(limelight, table, mode, value):
    limelight.settings.with_led_mode(mode)
    assert table.written("ledMode") == [value]


def test_enum_wire_values():
    assert [m.value for m in StreamMode] == [0, 1, 2]
    assert [m.value for m in ImuMode] == [0, 1, 2, 3, 4]
    assert [m.value for m in DownscalingOverride] == [0, 1, 2, 3, 4, 5]


def test_crop_window(limelight, table):
    limelight.settings.with_crop_window(-1.0, 1.0, -0.5, 0.5)
    assert table.written("crop") == [(-1.0, 1.0, -0.5, 0.5)]


def test_april_tag_offset(limelight, table):
    limelight.settings.with_april_tag_offset(Translation3d(0.1, 0.0, -0.2))
    assert table.written("fiducial_offset_set") == [(0.1, 0.0, -0.2)]


def test_april_tag_id_filter(limelight, table):
    limelight.settings.with_april_tag_id_filter([1, 2, 7])
    assert table.written("fiducial_id_filters_set") == [(1.0, 2.0, 7.0)]


def test_camera_offset(limelight, table):
    offset = Pose3d(Translation3d(0.3, -0.1, 0.5), Rotation3d.from_degrees(0.0, 15.0, 180.0))
    limelight.settings.with_camera_offset(offset)

    written, = table.written("camerapose_robotspace_set")
    assert written == pytest.approx((0.3, -0.1, 0.5, 0.0, 15.0, 180.0))


def test_writes_are_immediate_and_save_flushes(limelight, table, nt_instance):
    limelight.settings.with_pipeline_index(1)
    assert table.getEntry("pipeline").value == 1
    assert nt_instance.flush_count == 0

    limelight.settings.save()
    assert nt_instance.flush_count == 1
