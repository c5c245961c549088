"""Shared fixtures: fake /proc and /sys trees under tmp_path."""
from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
import structlog

MEMINFO = """MemTotal:        8000000 kB
MemFree:          500000 kB
MemAvailable:    2000000 kB
Buffers:          100000 kB
Cached:          1200000 kB
HugePages_Total:       0
"""

STAT = """cpu  100 0 100 700 100 0 0 0 0 0
cpu0 50 0 50 350 50 0 0 0 0 0
cpu1 50 0 50 350 50 0 0 0 0 0
intr 12345 0 0
ctxt 67890
"""


@pytest.fixture
def meminfo_file(tmp_path: Path) -> Path:
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    return path


@pytest.fixture
def stat_file(tmp_path: Path) -> Path:
    path = tmp_path / "stat"
    path.write_text(STAT)
    return path


@pytest.fixture
def power_supply(tmp_path: Path) -> Path:
    """A power_supply directory with BAT0 at 42% charge and 80% health."""
    root = tmp_path / "power_supply"
    battery = root / "BAT0"
    battery.mkdir(parents=True)
    (battery / "capacity").write_text("42\n")
    (battery / "energy_full").write_text("40000000\n")
    (battery / "energy_full_design").write_text("50000000\n")
    return root


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
