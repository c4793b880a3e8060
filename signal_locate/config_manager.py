# signal_locate/config_manager.py

import json
import os

DEFAULT_CONFIG = {
    "radius": None,  # None picks a radius from the plan width and point count
    "base_weight": 0.40,
    "heatmap_weight": 0.60,
    "gradient_colors": ["red", "yellow", "green"],
    "interpolation": "catmull-rom",
    "min_rssi": -100.0,
    "max_rssi": -35.0
}


def default_config_path():
    """Return the per-user configuration file path (~/.signal-locate/config.json)."""
    home_dir = os.path.expanduser("~")
    return os.path.join(home_dir, ".signal-locate", "config.json")


class ConfigManager:
    """
    Manages application configuration, including loading from and saving to a JSON file.
    Keys missing from the file fall back to DEFAULT_CONFIG.
    """
    def __init__(self, config_file_path=None):
        """
        Initializes the ConfigManager with the path to the configuration file.

        Args:
            config_file_path (str): Path to the configuration JSON file.
                Defaults to ~/.signal-locate/config.json.
        """
        self.config_file_path = config_file_path or default_config_path()
        self.config = {}
        self._load_config()

    def _load_config(self):
        """
        Loads the configuration from the JSON file. If the file does not exist
        or is malformed, it initializes with an empty dictionary.
        """
        if os.path.exists(self.config_file_path):
            try:
                with open(self.config_file_path, 'r', encoding='utf-8') as f:
                    config = json.load(f)
            except json.JSONDecodeError:
                print(f"Warning: Configuration file '{self.config_file_path}' is malformed. Initializing with empty config.")
                config = {}
            except OSError as e:
                print(f"Error loading config file '{self.config_file_path}': {e}")
                config = {}

            if not isinstance(config, dict):
                print(f"Warning: Configuration file '{self.config_file_path}' is not a JSON object. Initializing with empty config.")
                config = {}
            self.config = config
        else:
            print(f"Info: Configuration file '{self.config_file_path}' not found. Using defaults.")
            self.config = {}

    def _save_config(self):
        """
        Saves the current configuration dictionary to the JSON file.
        Ensures the directory for the config file exists.
        """
        directory = os.path.dirname(self.config_file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        try:
            with open(self.config_file_path, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=4)
        except OSError as e:
            print(f"Error saving config file '{self.config_file_path}': {e}")

    def get(self, key, default=None):
        """
        Retrieves a configuration value by its key.

        Args:
            key (str): The key of the configuration setting.
            default: Returned if the key is neither configured nor in DEFAULT_CONFIG.

        Returns:
            The configured value, the built-in default, or the given default.
        """
        if key in self.config:
            return self.config[key]
        return DEFAULT_CONFIG.get(key, default)

    def set(self, key, value):
        """
        Sets a configuration value and immediately saves the updated configuration.

        Args:
            key (str): The key of the configuration setting.
            value: The value to set for the key.
        """
        self.config[key] = value
        self._save_config()

    def get_all_config(self):
        """
        Returns the effective configuration: defaults overlaid with the file contents.

        Returns:
            dict: A new dictionary, safe to modify.
        """
        merged = dict(DEFAULT_CONFIG)
        merged.update(self.config)
        return merged
