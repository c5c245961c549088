"""Disk usage collector using filesystem statistics."""
import os
from typing import Callable, List

import psutil
import structlog

from ..errors import ResourceError, ResourceReadError, ZeroDivisorError
from .system_models import StorageUsage

logger = structlog.get_logger(__name__)

BYTES_PER_GB = 1024 * 1024 * 1024


class DiskCollector:
    """Reports total, free and used space for mounted filesystems."""

    def __init__(self, statvfs: Callable[[str], os.statvfs_result] = os.statvfs):
        self._statvfs = statvfs

    def get_disk_usage(self, path: str) -> StorageUsage:
        """Return usage for the filesystem holding ``path``."""
        try:
            stat = self._statvfs(path)
        except OSError as e:
            logger.error("disk.statvfs_failed", path=path, error=str(e))
            raise ResourceReadError(path, f"failed to get disk data for {path}: {e}") from e

        total = stat.f_blocks * stat.f_frsize
        free = stat.f_bavail * stat.f_frsize  # available to non-root users
        used = total - free

        if total == 0:
            raise ZeroDivisorError(f"divide by zero: filesystem at {path} reports zero blocks")

        usage = StorageUsage(
            path=path,
            total_gb=total / BYTES_PER_GB,
            free_gb=free / BYTES_PER_GB,
            used_gb=used / BYTES_PER_GB,
            used_percent=100 * used / total,
        )
        logger.debug("disk.read", path=path, used_percent=usage.used_percent)
        return usage

    def get_mounted_disk_usage(self) -> List[StorageUsage]:
        """Report every physical mount, skipping the ones that cannot be queried."""
        usages = []
        for partition in psutil.disk_partitions(all=False):
            try:
                usages.append(self.get_disk_usage(partition.mountpoint))
            except ResourceError as e:
                logger.warning("disk.mount_skipped", mountpoint=partition.mountpoint, error=str(e))
        return usages
