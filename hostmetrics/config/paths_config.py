"""Pseudo-file locations configuration."""
from dataclasses import dataclass


@dataclass
class PathsConfig:
    """Where the kernel exposes the readings."""
    meminfo: str = "/proc/meminfo"
    stat: str = "/proc/stat"
    power_supply: str = "/sys/class/power_supply"

    def __post_init__(self):
        """Fix invalid values."""
        if not self.meminfo:
            self.meminfo = "/proc/meminfo"
        if not self.stat:
            self.stat = "/proc/stat"
        if not self.power_supply:
            self.power_supply = "/sys/class/power_supply"
