"""Unit tests for MemoryCollector."""
from __future__ import annotations

from pathlib import Path

import pytest

from hostmetrics.collectors.memory_collector import MemoryCollector, mem_usage_from_meminfo
from hostmetrics.errors import ResourceError, ResourceReadError, ValueNotFoundError, ZeroDivisorError

KB_PER_GB = 1024 * 1024


class TestMemUsageFromMeminfo:
    def test_seventy_five_percent_used(self) -> None:
        usage = mem_usage_from_meminfo("MemTotal: 8000000 kB\nMemAvailable: 2000000 kB\n")
        assert usage.used_percent == pytest.approx(75.0)

    @pytest.mark.parametrize("total,available", [(16384000, 1024), (1048576, 1048576), (3, 1)])
    def test_derived_values(self, total: int, available: int) -> None:
        usage = mem_usage_from_meminfo(f"MemTotal: {total} kB\nMemAvailable: {available} kB\n")
        assert usage.total_gb == pytest.approx(total / KB_PER_GB)
        assert usage.available_gb == pytest.approx(available / KB_PER_GB)
        assert usage.used_gb == pytest.approx((total - available) / KB_PER_GB)
        assert usage.used_percent == pytest.approx(100 * (total - available) / total)

    def test_missing_total(self) -> None:
        with pytest.raises(ValueNotFoundError, match="MemTotal"):
            mem_usage_from_meminfo("MemAvailable: 2000000 kB\n")

    def test_missing_available(self) -> None:
        with pytest.raises(ValueNotFoundError, match="MemAvailable"):
            mem_usage_from_meminfo("MemTotal: 8000000 kB\n")

    def test_zero_total(self) -> None:
        with pytest.raises(ZeroDivisorError):
            mem_usage_from_meminfo("MemTotal: 0 kB\nMemAvailable: 0 kB\n")


class TestMemoryCollector:
    def test_reads_file(self, meminfo_file: Path) -> None:
        usage = MemoryCollector(str(meminfo_file)).get_mem_usage()
        assert usage.used_percent == pytest.approx(75.0)
        assert usage.total_gb == pytest.approx(8000000 / KB_PER_GB)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceReadError):
            MemoryCollector(str(tmp_path / "meminfo")).get_mem_usage()

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "meminfo"
        path.write_bytes(b"MemTotal: 8000000 kB\n\xff\xfe\nMemAvailable: 2000000 kB\n")
        with pytest.raises(ResourceError):
            MemoryCollector(str(path)).get_mem_usage()
