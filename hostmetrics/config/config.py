"""Main configuration data structure."""
from dataclasses import dataclass, field

from .display_config import DisplayConfig
from .paths_config import PathsConfig
from .sampler_config import SamplerConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Main configuration class."""
    paths: PathsConfig = field(default_factory=PathsConfig)
    cpu: SamplerConfig = field(default_factory=SamplerConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "WARNING"

    def __post_init__(self):
        """Fix invalid values."""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            self.log_level = "WARNING"
