import json
import os
import logging
from typing import Any, Optional, Union, List

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

# Default config lives next to the package (src/core -> src -> ferrisay) under config/
CONFIG_FILE_NAME = 'config.json'
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), '..', '..', 'config', CONFIG_FILE_NAME)
CONFIG_ENV_VAR = 'FERRISAY_CONFIG'


def resolve_config_path() -> str:
    """Returns the config path, honouring the FERRISAY_CONFIG override."""
    return os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH


class ConfigManager:
    """
    Manages loading and accessing configuration settings from a JSON file.
    Provides a centralized way to read configuration values with error handling.
    """
    _instance = None

    def __new__(cls, *args, **kwargs):
        """Implement singleton pattern."""
        if not cls._instance:
            cls._instance = super(ConfigManager, cls).__new__(cls)
        return cls._instance

    def __init__(self, config_path: Optional[str] = None):
        """
        Initializes the ConfigManager, loading the configuration data.
        Ensures initialization only happens once for the singleton instance.
        """
        # Prevent re-initialization
        if hasattr(self, '_initialized') and self._initialized:
            return
        self.config_path = config_path or resolve_config_path()
        self._config_data = self._load_config()
        self._initialized = True
        logging.debug(f"ConfigManager initialized. Loaded config from: {self.config_path}")

    def _load_config(self) -> dict:
        """Loads the configuration from the JSON file."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except FileNotFoundError:
            logging.warning(f"Configuration file not found at {self.config_path}. Using empty config.")
            return {}
        except json.JSONDecodeError as e:
            logging.error(f"Error decoding JSON from config file {self.config_path}: {e}. Using empty config.")
            return {}
        except OSError as e:
            logging.error(f"Could not read config file {self.config_path}: {e}. Using empty config.")
            return {}
        if not isinstance(config, dict):
            logging.error(f"Config file {self.config_path} must contain a JSON object. Using empty config.")
            return {}
        return config

    def reload(self, config_path: Optional[str] = None) -> None:
        """Re-reads the config file, optionally from a different path."""
        if config_path is not None:
            self.config_path = config_path
        self._config_data = self._load_config()

    def get_entry(self, key_path: Union[str, List[str]], default: Optional[Any] = None) -> Any:
        """
        Retrieves a configuration value using a dot-separated string or a list of keys.

        Args:
            key_path: A string with keys separated by dots (e.g., "say.max_width")
                      or a list of keys (e.g., ["say", "max_width"]).
            default: The value to return if the key path is not found or invalid.

        Returns:
            The configuration value found at the key path, or the default value.
        """
        if isinstance(key_path, str):
            keys = key_path.split('.')
        elif isinstance(key_path, list):
            keys = key_path
        else:
            logging.warning(f"Invalid key_path type: {type(key_path)}. Must be string or list.")
            return default

        value = self._config_data
        for key in keys:
            if not isinstance(value, dict):
                # An intermediate key led to a non-dict value
                logging.warning(f"Config path traversal error: Key '{key}' accessed on non-dictionary item in path '{key_path}'.")
                return default
            if key not in value:
                return default
            value = value[key]
        return value

# Create a single, shared instance of the ConfigManager
config_manager = ConfigManager()
