"""Rendering tests for DisplayManager."""
from __future__ import annotations

import pytest
from rich.console import Console

from hostmetrics.collectors.system_models import HostSnapshot, MemoryUsage, StorageUsage
from hostmetrics.config.config import Config
from hostmetrics.ui.display import DisplayManager, make_progress_bar, usage_style


def render_text(snapshot: HostSnapshot) -> str:
    console = Console(record=True, width=120, no_color=True)
    manager = DisplayManager(Config(), console=console)
    console.print(manager.render(snapshot))
    return console.export_text()


class TestProgressBar:
    def test_half(self) -> None:
        assert make_progress_bar(50.0, width=10) == "[█████░░░░░]  50.0%"

    def test_clamped(self) -> None:
        assert make_progress_bar(130.0, width=4) == "[████] 100.0%"

    @pytest.mark.parametrize("percent,style", [(None, "dim"), (10.0, "green"), (80.0, "yellow"), (95.0, "red")])
    def test_style(self, percent, style: str) -> None:
        assert usage_style(percent) == style


class TestRender:
    def test_full_snapshot(self) -> None:
        snapshot = HostSnapshot(
            cpu_load=12.5,
            memory=MemoryUsage(total_gb=8.0, available_gb=2.0, used_gb=6.0, used_percent=75.0),
            disks=[StorageUsage("/", 100.0, 40.0, 60.0, 60.0)],
            battery_name="BAT0",
            battery_soc=42,
            battery_soh=80,
        )
        text = render_text(snapshot)

        assert "12.5%" in text
        assert "6.0 / 8.0 GB" in text
        assert "Battery BAT0" in text
        assert "42%" in text
        assert "health 80%" in text
        assert "40.0" in text

    def test_missing_readings(self) -> None:
        text = render_text(HostSnapshot(cpu_load=None, memory=None))
        assert "n/a" in text
        assert "Battery" not in text
