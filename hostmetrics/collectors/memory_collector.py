"""Memory usage collector backed by /proc/meminfo."""
import structlog

from ..errors import ZeroDivisorError
from .procfs import KB_PER_GB, extract_kb_value, read_text
from .system_models import MemoryUsage

logger = structlog.get_logger(__name__)

MEMINFO_PATH = "/proc/meminfo"


def mem_usage_from_meminfo(text: str, source: str = MEMINFO_PATH) -> MemoryUsage:
    """Compute memory usage from the text of a meminfo file."""
    available_gb = extract_kb_value(text, "MemAvailable", source) / KB_PER_GB
    total_gb = extract_kb_value(text, "MemTotal", source) / KB_PER_GB

    if total_gb == 0:
        raise ZeroDivisorError(f"divide by zero: total memory is zero in {source}")

    used_gb = total_gb - available_gb
    return MemoryUsage(
        total_gb=total_gb,
        available_gb=available_gb,
        used_gb=used_gb,
        used_percent=100 * used_gb / total_gb,
    )


class MemoryCollector:
    """Reports total, available and used memory."""

    def __init__(self, meminfo_path: str = MEMINFO_PATH):
        self.meminfo_path = meminfo_path

    def get_mem_usage(self) -> MemoryUsage:
        """Read meminfo once and return the derived usage."""
        text = read_text(self.meminfo_path)
        usage = mem_usage_from_meminfo(text, self.meminfo_path)
        logger.debug(
            "memory.read",
            total_gb=usage.total_gb,
            available_gb=usage.available_gb,
            used_percent=usage.used_percent,
        )
        return usage
