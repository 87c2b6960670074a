import logging
import os

import yaml

from .nt_schema import DEFAULT_TABLE, SNAPSHOT_PORT

logger = logging.getLogger("LimelightConfig")

_MISSING = object()

DEFAULTS = {
    "name": DEFAULT_TABLE,
    "http": {
        "port": SNAPSHOT_PORT,
        "timeout": None,
    },
    "results": {
        "show_parse_time": False,
    },
}


class LimelightConfig:
    """Configuration for a Limelight camera handle.

    Keys:
        name: Camera hostname / NetworkTables table name
        http.port: Snapshot server port
        http.timeout: Snapshot request timeout in seconds (None uses the requests default)
        results.show_parse_time: Log JSON parse time on every results poll
    """

    def __init__(self, config_file=None):
        self.config = {}
        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, file_path):
        """Load configuration from a YAML file."""
        try:
            with open(file_path, 'r') as f:
                self.config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"❌ Error loading config file: {str(e)}")
            self.config = {}

    def get(self, key, default=None):
        """Get a configuration value by key.

        Args:
            key: Key to look up, can use dot notation for nested keys (e.g., 'http.timeout')
            default: Default value if key not found. When omitted, the built-in
                default for that key is used.

        Returns:
            Configuration value or default
        """
        value = self._lookup(self.config, key)
        if value is not _MISSING:
            return value
        if default is not None:
            return default

        value = self._lookup(DEFAULTS, key)
        return None if value is _MISSING else value

    def set(self, key, value):
        """Set a configuration value.

        Args:
            key: Key to set, can use dot notation for nested keys
            value: Value to set
        """
        keys = key.split('.')
        last_key = keys.pop()

        # Navigate to the correct nested dictionary
        current = self.config
        for k in keys:
            if k not in current or not isinstance(current[k], dict):
                current[k] = {}
            current = current[k]

        current[last_key] = value

    @staticmethod
    def _lookup(tree, key):
        value = tree
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return _MISSING
        return value
