"""Data models returned by the resource collectors."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class MemoryUsage:
    """Memory usage in GB, derived from MemTotal and MemAvailable."""
    total_gb: float
    available_gb: float
    used_gb: float
    used_percent: float


@dataclass
class StorageUsage:
    """Disk usage in GB for the filesystem mounted at ``path``.

    ``free_gb`` counts blocks available to non-privileged users, so it is
    smaller than the raw free space on filesystems with reserved blocks.
    """
    path: str
    total_gb: float
    free_gb: float
    used_gb: float
    used_percent: float

    @property
    def free_percent(self) -> float:
        return 100.0 - self.used_percent


@dataclass
class CPUTimes:
    """One snapshot of the aggregate ``cpu`` line in /proc/stat."""
    total: int
    idle: int  # idle + iowait


@dataclass
class HostSnapshot:
    """Point-in-time view of the host, with None for readings that failed."""
    cpu_load: Optional[float]
    memory: Optional[MemoryUsage]
    disks: List[StorageUsage] = field(default_factory=list)
    battery_name: Optional[str] = None
    battery_soc: Optional[int] = None
    battery_soh: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)
