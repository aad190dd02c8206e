import os
import json
import shutil
from src.config.constants import DEFAULT_PROBE_TIMEOUT
from src.utils.logger import log, set_log_level, LOG_LEVELS


class ConfigManager:
    APP_NAME = "AIReadiness"
    CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".ai_readiness")
    CONFIG_FILENAME = "config.json"

    DEFAULT_CONFIG = {
        "disk_path": os.path.expanduser("~"),
        "catalog_path": None,
        "minimum_rating": "FAIR",
        "probe_timeout_secs": DEFAULT_PROBE_TIMEOUT,
        "log_level": "INFO",
    }

    VALID_RATINGS = ("EXCELLENT", "GOOD", "FAIR", "POOR")

    def __init__(self, config_dir=None):
        self.config_dir = config_dir or self.CONFIG_DIR
        self.config_file = os.path.join(self.config_dir, self.CONFIG_FILENAME)
        self.config = self.load_config()

    def load_config(self):
        try:
            os.makedirs(self.config_dir, exist_ok=True)
        except OSError as e:
            log.warning(f"Cannot create config directory {self.config_dir}: {e}. Using defaults.")
            return self.DEFAULT_CONFIG.copy()

        if not os.path.exists(self.config_file):
            self.save_config(self.DEFAULT_CONFIG)
            return self.DEFAULT_CONFIG.copy()

        try:
            with open(self.config_file, 'r') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            log.error(f"Failed to load config: {e}. Loading defaults.")
            return self.DEFAULT_CONFIG.copy()

    def save_config(self, config=None):
        if config is None:
            config = self.config

        # Rollback mechanism: Backup existing config
        if os.path.exists(self.config_file):
            try:
                shutil.copy2(self.config_file, self.config_file + ".bak")
            except OSError as e:
                log.warning(f"Failed to backup config: {e}")

        try:
            with open(self.config_file, 'w') as f:
                json.dump(config, f, indent=4)
        except OSError as e:
            log.error(f"Failed to save config: {e}")

    def get(self, key, default=None):
        return self.config.get(key, default)

    def set(self, key, value):
        self.config[key] = value
        self.save_config()

    def validate_config(self):
        """Ensure config structure is valid."""
        changes = False

        if not isinstance(self.config, dict):
            self.config = self.DEFAULT_CONFIG.copy()
            changes = True

        for key, default_val in self.DEFAULT_CONFIG.items():
            if key not in self.config:
                self.config[key] = default_val
                changes = True

        if not isinstance(self.config.get("disk_path"), str):
            self.config["disk_path"] = self.DEFAULT_CONFIG["disk_path"]
            changes = True

        catalog_path = self.config.get("catalog_path")
        if catalog_path is not None and not isinstance(catalog_path, str):
            self.config["catalog_path"] = None
            changes = True

        rating = self.config.get("minimum_rating")
        if not isinstance(rating, str) or rating.upper() not in self.VALID_RATINGS:
            self.config["minimum_rating"] = self.DEFAULT_CONFIG["minimum_rating"]
            changes = True

        timeout = self.config.get("probe_timeout_secs")
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            self.config["probe_timeout_secs"] = self.DEFAULT_CONFIG["probe_timeout_secs"]
            changes = True

        level = self.config.get("log_level")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            self.config["log_level"] = self.DEFAULT_CONFIG["log_level"]
            changes = True

        if changes:
            log.info("Config repaired with default values.")
            self.save_config()


config_manager = ConfigManager()
config_manager.validate_config()
set_log_level(config_manager.get("log_level"))
