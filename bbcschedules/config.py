"""
bbcschedules.config - Configuration management

Reads the optional XML settings file holding the default channel, region and
HTTP options. Command line values override file values for the current run
only; the file is never rewritten.
"""

import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .dictionaries import has_regions
from .downloader import DEFAULT_TIMEOUT


class ConfigManager:
    """Manages bbcschedules configuration file"""

    DEFAULT_CONFIG = """<?xml version="1.0" encoding="utf-8"?>
<settings version="1">
  <!-- Default schedule -->
  <setting id="channel"></setting>
  <setting id="region"></setting>

  <!-- HTTP options -->
  <setting id="timeout">10</setting>
  <setting id="useragent"></setting>
</settings>"""

    # Valid settings and their types
    VALID_SETTINGS = {
        "channel": str,
        "region": str,
        "timeout": int,
        "useragent": str,
    }

    DEFAULTS = {
        "channel": "",
        "region": "",
        "timeout": DEFAULT_TIMEOUT,
        "useragent": "",
    }

    # Environment overrides (applied over the file, under the command line)
    ENVIRONMENT = {
        "BBCSCHEDULES_TIMEOUT": "timeout",
        "BBCSCHEDULES_USER_AGENT": "useragent",
    }

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else None
        self.settings: Dict[str, Any] = dict(self.DEFAULTS)
        self.version: str = "1"
        self.config_changes: Dict[str, str] = {}
        self._cli_region = False

    def load_config(
        self,
        channel: Optional[str] = None,
        region: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Load configuration file and apply command line overrides"""
        self.settings = dict(self.DEFAULTS)
        self.config_changes = {}

        if self.config_file and self.config_file.exists():
            self._parse_config_file()
        elif self.config_file:
            logging.debug("Configuration file not found, using defaults: %s", self.config_file)

        self._apply_environment()

        for setting_id, value in (("channel", channel), ("region", region), ("timeout", timeout)):
            if value is None:
                continue
            original = self.settings.get(setting_id)
            if original != value:
                self.config_changes[setting_id] = f"{original or '(empty)'} → {value}"
            self.settings[setting_id] = value

        self._cli_region = region is not None
        return self.settings

    def _parse_config_file(self):
        """Parse XML configuration file"""
        try:
            tree = ET.parse(self.config_file)
            root = tree.getroot()

            logging.info("Reading configuration from: %s", self.config_file)
            self.version = root.attrib.get("version", "1")

            for setting in root.findall("setting"):
                setting_id = setting.get("id")

                # Try 'value' attribute first, then text
                setting_value = setting.get("value")
                if setting_value is None:
                    setting_value = setting.text
                if setting_value is not None:
                    setting_value = setting_value.strip()

                logging.debug("Config setting: %s = %s", setting_id, setting_value)

                if setting_id not in self.VALID_SETTINGS:
                    logging.warning(
                        "Unknown configuration setting: %s = %s (ignored)", setting_id, setting_value
                    )
                    continue

                self._set_setting(setting_id, setting_value)

        except ET.ParseError as e:
            logging.error("Cannot parse configuration file %s: %s", self.config_file, e)
            raise

    def _apply_environment(self):
        for variable, setting_id in self.ENVIRONMENT.items():
            value = os.environ.get(variable)
            if value:
                logging.debug("Environment override: %s = %s", variable, value)
                self._set_setting(setting_id, value)

    def _set_setting(self, setting_id: str, value: Optional[str]):
        """Type-convert and store a setting, keeping the default on bad input"""
        expected_type = self.VALID_SETTINGS[setting_id]

        if not value:
            self.settings[setting_id] = self.DEFAULTS[setting_id]
            return

        if expected_type == int:
            try:
                converted = int(value)
                if converted <= 0:
                    raise ValueError(value)
            except ValueError:
                logging.warning(
                    "Invalid %s setting '%s', using default %s",
                    setting_id,
                    value,
                    self.DEFAULTS[setting_id],
                )
                self.settings[setting_id] = self.DEFAULTS[setting_id]
                return
            self.settings[setting_id] = converted
        else:
            self.settings[setting_id] = value

    def create_default_config(self):
        """Write the default configuration template"""
        logging.info("Creating default configuration: %s", self.config_file)
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            f.write(self.DEFAULT_CONFIG)

    def get_schedule_config(self, date: Optional[Tuple[int, int, int]] = None) -> Dict[str, Any]:
        """
        Build the schedule configuration mapping for validation

        Args:
            date: Optional (year, month, day)

        Returns:
            Mapping containing only the keys that are set
        """
        schedule: Dict[str, Any] = {}

        channel = self.settings.get("channel")
        if channel:
            schedule["channel"] = channel

        region = self.settings.get("region")
        # A region from the file only applies to channels that have regions
        if region and (self._cli_region or has_regions(channel or "")):
            schedule["region"] = region

        if date is not None:
            schedule["year"], schedule["month"], schedule["day"] = date

        return schedule

    def get_timeout(self) -> int:
        return self.settings.get("timeout") or DEFAULT_TIMEOUT

    def get_user_agent(self) -> Optional[str]:
        return self.settings.get("useragent") or None

    def log_config_summary(self):
        """Log configuration summary"""
        logging.info("Configuration values processed:")
        for setting_id in self.VALID_SETTINGS:
            if setting_id in self.config_changes:
                logging.info("  %s: %s", setting_id, self.config_changes[setting_id])
            else:
                logging.info("  %s: %s", setting_id, self.settings.get(setting_id) or "(empty)")
