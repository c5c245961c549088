"""Memory, disk, battery and CPU load readings for Linux hosts."""
from .collectors.battery_collector import BatteryCollector
from .collectors.cpu_collector import CPUCollector, compute_cpu_load, parse_cpu_times
from .collectors.disk_collector import DiskCollector
from .collectors.memory_collector import MemoryCollector, mem_usage_from_meminfo
from .collectors.system_models import CPUTimes, HostSnapshot, MemoryUsage, StorageUsage
from .config.config import Config
from .core.cpu_sampler import CPUSampler
from .core.resource_monitor import ResourceMonitor
from .errors import (NoCPUActivityError, PreconditionError, ResourceError,
                     ResourceParseError, ResourceReadError, SamplerNotStartedError,
                     ValueNotFoundError, ZeroDivisorError)

__version__ = "0.1.0"
