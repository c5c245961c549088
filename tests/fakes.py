"""Test doubles shared by several test modules."""
from __future__ import annotations

import os
import threading
from typing import Iterable, Optional

from hostmetrics.errors import NoCPUActivityError


def make_statvfs(blocks: int, bavail: int, frsize: int = 4096, bfree: Optional[int] = None):
    """Build an os.statvfs_result with the fields the disk collector reads."""
    bfree = bavail if bfree is None else bfree
    # f_bsize, f_frsize, f_blocks, f_bfree, f_bavail, f_files, f_ffree, f_favail, f_flag, f_namemax
    return os.statvfs_result((frsize, frsize, blocks, bfree, bavail, 1000, 500, 500, 0, 255))


class ScriptedCPUCollector:
    """Returns scripted loads, then fails with NoCPUActivityError forever.

    ``exhausted`` is set once every scripted load has been handed out and the
    sampler has come back for another, which means the last one was stored.
    Entries that are exceptions are raised instead of returned.
    """

    def __init__(self, loads: Iterable):
        self._loads = list(loads)
        self._lock = threading.Lock()
        self.calls = 0
        self.exhausted = threading.Event()

    def measure_cpu_load(self) -> float:
        with self._lock:
            self.calls += 1
            if not self._loads:
                self.exhausted.set()
                raise NoCPUActivityError("script exhausted")
            load = self._loads.pop(0)
        if isinstance(load, Exception):
            raise load
        return load
