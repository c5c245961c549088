"""CPU load measurement from /proc/stat counters."""
import time
from typing import Callable

import structlog

from ..errors import NoCPUActivityError, ResourceParseError, ValueNotFoundError
from .procfs import parse_int, read_text
from .system_models import CPUTimes

logger = structlog.get_logger(__name__)

STAT_PATH = "/proc/stat"
SAMPLE_INTERVAL = 0.1

# Field positions on the "cpu" line, counted after the label:
#  1 user     2 nice     3 system   4 idle      5 iowait
#  6 irq      7 softirq  8 steal    9 guest    10 guest_nice
# iowait..guest_nice only exist on newer kernels.
IDLE_FIELD = 4
IOWAIT_FIELD = 5
MIN_FIELDS = 4
MAX_FIELDS = 10


def parse_cpu_times(stat_text: str, source: str = STAT_PATH) -> CPUTimes:
    """Parse the aggregate ``cpu`` line into total and idle jiffies.

    Idle time is idle + iowait. Steal is counted as busy time.
    """
    for line in stat_text.splitlines():
        if not line.startswith("cpu "):
            continue

        fields = line.split()[1:]
        if not MIN_FIELDS <= len(fields) <= MAX_FIELDS:
            raise ResourceParseError(f"unexpected number of CPU fields in {source}, cpu line: {line}")

        total = 0
        idle = 0
        for position, raw in enumerate(fields, start=1):
            try:
                value = parse_int(raw)
            except ValueError as e:
                raise ResourceParseError(f"failed to parse CPU field {position}: {raw!r}") from e
            total += value
            if position in (IDLE_FIELD, IOWAIT_FIELD):
                idle += value
        return CPUTimes(total=total, idle=idle)

    raise ValueNotFoundError("cpu", source)


def compute_cpu_load(before: CPUTimes, after: CPUTimes) -> float:
    """Return the busy percentage between two counter snapshots."""
    total_diff = after.total - before.total
    idle_diff = after.idle - before.idle

    if total_diff == 0:
        raise NoCPUActivityError("no CPU activity detected during the interval")

    return 100 * (total_diff - idle_diff) / total_diff


class CPUCollector:
    """Takes blocking two-snapshot CPU load measurements."""

    def __init__(self, stat_path: str = STAT_PATH, sample_interval: float = SAMPLE_INTERVAL,
                 sleep: Callable[[float], None] = time.sleep):
        self.stat_path = stat_path
        self.sample_interval = sample_interval
        self._sleep = sleep

    def read_cpu_times(self) -> CPUTimes:
        """Read one snapshot of the aggregate CPU counters."""
        return parse_cpu_times(read_text(self.stat_path), self.stat_path)

    def measure_cpu_load(self) -> float:
        """Measure CPU load over one sample interval (blocks for that long)."""
        before = self.read_cpu_times()
        self._sleep(self.sample_interval)
        after = self.read_cpu_times()

        load = compute_cpu_load(before, after)
        logger.debug("cpu_load.measured", cpu_load_percent=load)
        return load
