"""Display management using Rich for the terminal UI."""
import time
from typing import List, Optional

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table

from ..collectors.system_models import HostSnapshot, StorageUsage
from ..config.config import Config
from ..core.resource_monitor import ResourceMonitor


def make_progress_bar(value: float, width: int = 15) -> str:
    """Text progress bar for a percentage."""
    value = min(max(value, 0.0), 100.0)
    filled = int(value * width / 100)
    bar = "█" * filled + "░" * (width - filled)
    return f"[{bar}] {value:5.1f}%"


def usage_style(percent: Optional[float]) -> str:
    """Colour for a usage percentage."""
    if percent is None:
        return "dim"
    if percent >= 90:
        return "red"
    if percent >= 75:
        return "yellow"
    return "green"


class DisplayManager:
    """Renders host snapshots, once or with live updates."""

    def __init__(self, config: Config, console: Optional[Console] = None):
        """Initialize the display manager."""
        self.config = config
        self.console = console or Console(no_color=not config.display.show_colors)

    def run_display(self, monitor: ResourceMonitor):
        """Run the display loop with Rich Live until interrupted."""
        refresh_rate = self.config.display.refresh_rate
        with Live(
            self.render(monitor.snapshot()),
            console=self.console,
            refresh_per_second=max(1 / refresh_rate, 1),
        ) as live:
            try:
                while True:
                    time.sleep(refresh_rate)
                    live.update(self.render(monitor.snapshot()))
            except KeyboardInterrupt:
                pass

    def print_once(self, monitor: ResourceMonitor):
        """Print a single snapshot."""
        self.console.print(self.render(monitor.snapshot()))

    def render(self, snapshot: HostSnapshot) -> Panel:
        """Build the panel for one snapshot."""
        return Panel(
            Group(self._create_overview(snapshot), self._create_disk_table(snapshot.disks)),
            title=f"Host Resources - {snapshot.timestamp.strftime('%H:%M:%S')}",
            border_style="blue"
        )

    def _create_overview(self, snapshot: HostSnapshot) -> Table:
        """CPU, memory and battery rows."""
        table = Table.grid(padding=(0, 2))
        table.add_column("name", style="bold")
        table.add_column("value")
        table.add_column("detail", style="dim")

        table.add_row("CPU", *self._percent_cells(snapshot.cpu_load), "")

        memory = snapshot.memory
        if memory:
            table.add_row(
                "Memory",
                *self._percent_cells(memory.used_percent),
                f"{memory.used_gb:.1f} / {memory.total_gb:.1f} GB"
            )
        else:
            table.add_row("Memory", "n/a", "")

        if snapshot.battery_name:
            soc = f"{snapshot.battery_soc}%" if snapshot.battery_soc is not None else "n/a"
            soh = f"health {snapshot.battery_soh}%" if snapshot.battery_soh is not None else "health n/a"
            table.add_row(f"Battery {snapshot.battery_name}", soc, soh)

        return table

    def _create_disk_table(self, disks: List[StorageUsage]) -> Table:
        """One row per mount."""
        table = Table(title="Disks", expand=True)
        table.add_column("Path")
        table.add_column("Used", justify="right")
        table.add_column("Free GB", justify="right")
        table.add_column("Total GB", justify="right")

        if not disks:
            table.add_row("n/a", "", "", "")
        for disk in disks:
            style = usage_style(disk.used_percent)
            table.add_row(
                disk.path,
                f"[{style}]{make_progress_bar(disk.used_percent)}[/{style}]",
                f"{disk.free_gb:.1f}",
                f"{disk.total_gb:.1f}"
            )
        return table

    @staticmethod
    def _percent_cells(percent: Optional[float]) -> tuple:
        if percent is None:
            return ("n/a",)
        style = usage_style(percent)
        return (f"[{style}]{make_progress_bar(percent)}[/{style}]",)
