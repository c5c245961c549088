"""Entry point object wiring collectors and the CPU sampler together."""
from typing import List, Optional

import structlog

from ..collectors.battery_collector import BatteryCollector
from ..collectors.cpu_collector import CPUCollector
from ..collectors.disk_collector import DiskCollector
from ..collectors.memory_collector import MemoryCollector
from ..collectors.system_models import HostSnapshot, MemoryUsage, StorageUsage
from ..config.config import Config
from ..config.sampler_config import DIRECT
from ..errors import PreconditionError, ResourceError
from .cpu_sampler import CPUSampler

logger = structlog.get_logger(__name__)


class ResourceMonitor:
    """Reports memory, disk, battery and CPU load for the local host."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize collectors from configuration."""
        self.config = config or Config()
        paths = self.config.paths
        cpu = self.config.cpu

        self.memory = MemoryCollector(paths.meminfo)
        self.disk = DiskCollector()
        self.battery = BatteryCollector(paths.power_supply)
        self.cpu = CPUCollector(paths.stat, cpu.sample_interval)
        self.sampler = CPUSampler(self.cpu, cpu.history_size, cpu.retry_delay)

    @property
    def direct_cpu(self) -> bool:
        return self.config.cpu.mode == DIRECT

    def start_cpu_measuring(self) -> bool:
        """Start background CPU sampling; a no-op in direct mode."""
        if self.direct_cpu:
            return False
        return self.sampler.start()

    def stop(self):
        """Stop background CPU sampling."""
        self.sampler.stop()

    def get_cpu_load(self) -> float:
        """Averaged load in sampled mode, one blocking sample in direct mode."""
        if self.direct_cpu:
            return self.cpu.measure_cpu_load()
        return self.sampler.get_cpu_load()

    def get_mem_usage(self) -> MemoryUsage:
        return self.memory.get_mem_usage()

    def get_disk_usage(self, path: str = "/") -> StorageUsage:
        return self.disk.get_disk_usage(path)

    def get_battery_soc(self, name: Optional[str] = None) -> int:
        return self.battery.get_battery_soc(self._battery_name(name))

    def get_battery_soh(self, name: Optional[str] = None) -> int:
        return self.battery.get_battery_soh(self._battery_name(name))

    def snapshot(self) -> HostSnapshot:
        """Collect every configured reading; failed readings become None."""
        display = self.config.display

        snapshot = HostSnapshot(
            cpu_load=self._try("cpu", self.get_cpu_load),
            memory=self._try("memory", self.get_mem_usage),
            disks=self._collect_disks(),
        )

        if display.battery_name:
            snapshot.battery_name = display.battery_name
            snapshot.battery_soc = self._try("battery_soc", self.get_battery_soc)
            snapshot.battery_soh = self._try("battery_soh", self.get_battery_soh)

        return snapshot

    def _collect_disks(self) -> List[StorageUsage]:
        """Disk usage for the configured paths, or every mount."""
        if self.config.display.all_mounts:
            return self.disk.get_mounted_disk_usage()

        disks = []
        for path in self.config.display.disk_paths:
            usage = self._try("disk", self.get_disk_usage, path)
            if usage is not None:
                disks.append(usage)
        return disks

    def _battery_name(self, name: Optional[str]) -> str:
        name = name or self.config.display.battery_name
        if not name:
            raise PreconditionError("battery name cannot be empty")
        return name

    @staticmethod
    def _try(reading: str, func, *args):
        """Call a reader, logging and returning None on failure."""
        try:
            return func(*args)
        except ResourceError as e:
            logger.warning("snapshot.reading_failed", reading=reading, error=str(e))
            return None
