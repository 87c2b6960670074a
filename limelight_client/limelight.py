import threading

import requests
from networktables import NetworkTables

from . import nt_schema
from .base import BaseComponent
from .config import LimelightConfig
from .pipeline.collator import PipelineDataCollator
from .pose import PoseEstimator, PoseEstimators
from .settings import LimelightSettings
from .transform import Rotation3d


def sanitize_name(name):
    """Empty names fall back to the default camera name."""
    if not name:
        return nt_schema.DEFAULT_TABLE
    return name


class Limelight(BaseComponent):
    """An object that represents a physical Limelight.

    Args:
        name: Hostname of the Limelight, also its NetworkTables table name
        instance: NetworkTables instance to use (default: the global instance)
        port: Port of the snapshot HTTP server
        timeout: Snapshot request timeout in seconds (None uses the requests default)
        show_parse_time: Log JSON parse time on every results poll
    """

    def __init__(self, name=nt_schema.DEFAULT_TABLE, instance=None,
                 port=nt_schema.SNAPSHOT_PORT, timeout=None, show_parse_time=False):
        super().__init__()
        self.name = sanitize_name(name)
        self.instance = instance if instance is not None else NetworkTables
        self.port = port
        self.timeout = timeout
        self.show_parse_time = show_parse_time
        self.network_table = self.instance.getTable(self.name)

        self.settings = LimelightSettings(self)
        self.data_collator = PipelineDataCollator(self)

        self._robot_orientation_entry = self.network_table.getEntry(nt_schema.ROBOT_ORIENTATION)

    @classmethod
    def from_config(cls, config: LimelightConfig, instance=None):
        return cls(
            name=config.get("name"),
            instance=instance,
            port=config.get("http.port"),
            timeout=config.get("http.timeout"),
            show_parse_time=config.get("results.show_parse_time"),
        )

    def flush(self):
        self.instance.flush()

    def set_robot_orientation(self, rotation: Rotation3d):
        """Send the robot's orientation, used by MegaTag2.

        Written as [yaw, yawRate, pitch, pitchRate, roll, rollRate] in degrees;
        rates are left at 0.
        """
        self._robot_orientation_entry.setDoubleArray([
            rotation.yaw_degrees, 0.0,
            rotation.pitch_degrees, 0.0,
            rotation.roll_degrees, 0.0,
        ])
        self.flush()

    def make_pose_estimator(self, estimator: PoseEstimators, clock=None) -> PoseEstimator:
        return PoseEstimator(self, estimator, clock=clock)

    def get_url(self, request: str) -> str:
        return f"http://{self.name}.local:{self.port}/{request}"

    def snapshot(self, snapshot_name=None):
        """Take a snapshot in the background. The result is discarded."""
        thread = threading.Thread(
            target=self.snapshot_synchronous,
            args=(snapshot_name,),
            name=f"LimelightSnapshot-{self.name}",
            daemon=True,
        )
        thread.start()

    def snapshot_synchronous(self, snapshot_name=None) -> bool:
        """Take a snapshot and wait for the camera to answer.

        Args:
            snapshot_name: Name for the snapshot on the camera

        Returns:
            True if the camera answered HTTP 200
        """
        url = self.get_url(nt_schema.SNAPSHOT_REQUEST)
        headers = {}
        if snapshot_name:
            headers[nt_schema.SNAPSHOT_NAME_HEADER] = snapshot_name

        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
            if response.status_code == 200:
                self.logger.info(f"📸 Snapshot captured on {self.name}")
                return True
            self.log_error(f"Bad LL Request: HTTP {response.status_code}")
        except requests.RequestException as e:
            self.log_error(f"Snapshot request to {url} failed: {str(e)}")
        return False
