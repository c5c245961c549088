"""Configuration loading and management."""
import os

import yaml

from .config import Config
from .display_config import DisplayConfig
from .paths_config import PathsConfig
from .sampler_config import SamplerConfig

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'default_config.yaml')


class ConfigManager:
    """Configuration loading and management."""

    @staticmethod
    def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
        """Load configuration from YAML file - let it crash if bad."""
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        return ConfigManager.from_dict(config_data)

    @staticmethod
    def from_dict(config_data: dict) -> Config:
        """Build a Config, falling back to defaults for missing sections."""
        paths = PathsConfig(**config_data.get('paths', {}))
        cpu = SamplerConfig(**config_data.get('cpu', {}))
        display = DisplayConfig(**config_data.get('display', {}))

        return Config(
            paths=paths,
            cpu=cpu,
            display=display,
            log_level=config_data.get('log_level', "WARNING")
        )

    @staticmethod
    def default_config() -> Config:
        """Configuration with every value at its default."""
        return Config()
