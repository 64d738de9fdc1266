"""
HotelDesk Admin - Configuration Manager

Reads the scripts' settings (store location, logging, default cashier
account) from a JSON file and writes it back when a value changes.

Author: HotelDesk Project
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any

from hoteldesk_admin.exceptions import HotelDeskError

logger = logging.getLogger(__name__)

# Overrides the config file location
CONFIG_PATH_ENV = "HOTELDESK_CONFIG"
CONFIG_FILE_NAME = "config.json"

# Values used for any key the file leaves out
DEFAULT_CONFIG = {
    "database_path": "database/hoteldesk.db",
    "log_level": "INFO",
    "log_to_file": True,
    "log_retention_days": 30,
    "cashier_email": "cashier@gmail.com"
}


class ConfigManager:
    """
    Script settings backed by a JSON file.

    The file is located from, in order: the explicit path, the
    HOTELDESK_CONFIG environment variable, ./config.json. Relative paths
    inside it are relative to the file itself.
    """

    def __init__(self, config_file: Optional[Path] = None):
        """
        Args:
            config_file: Explicit config path
        """
        if config_file is None:
            override = os.environ.get(CONFIG_PATH_ENV)
            config_file = override if override else Path.cwd() / CONFIG_FILE_NAME

        self.config_file = Path(config_file)
        self.config: Dict[str, Any] = {}

    def load_config(self) -> Dict[str, Any]:
        """
        Read the settings, writing a default file on first run.

        Keys missing from an existing file take their default value; the
        file itself is left as it is.

        Returns:
            Settings dictionary

        Raises:
            HotelDeskError: The file exists but is not a JSON object
        """
        if not self.config_file.exists():
            logger.info(f"No settings at {self.config_file}, writing defaults")
            self.config = dict(DEFAULT_CONFIG)
            self.save_config()
            return self.config

        logger.debug(f"Reading settings from {self.config_file}")
        try:
            stored = json.loads(self.config_file.read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise HotelDeskError(f"Invalid settings file {self.config_file}: {e}") from e

        if not isinstance(stored, dict):
            raise HotelDeskError(f"Invalid settings file {self.config_file}: expected a JSON object")

        self.config = {**DEFAULT_CONFIG, **stored}
        return self.config

    def save_config(self):
        """Write the current settings, creating the folder if needed"""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(json.dumps(self.config, indent=2), encoding='utf-8')
        logger.debug(f"Settings written to {self.config_file}")

    def get(self, key: str, default=None) -> Any:
        """Setting value, or default when unset"""
        return self.config.get(key, default)

    def set(self, key: str, value: Any):
        """
        Change one setting and persist the file.

        Args:
            key: Setting name
            value: New value
        """
        self.config[key] = value
        self.save_config()

    def get_database_path(self) -> str:
        """Database path, resolved against the config file's directory when relative"""
        db_path = Path(self.get("database_path", DEFAULT_CONFIG["database_path"]))
        if not db_path.is_absolute():
            db_path = self.config_file.parent / db_path
        return str(db_path)
