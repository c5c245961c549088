"""Display configuration data structure."""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class DisplayConfig:
    """What the terminal display shows and how often it refreshes."""
    refresh_rate: float = 1.0
    disk_paths: List[str] = field(default_factory=lambda: ["/"])
    all_mounts: bool = False
    battery_name: Optional[str] = None
    show_colors: bool = True

    def __post_init__(self):
        """Fix invalid values."""
        if self.refresh_rate <= 0:
            self.refresh_rate = 1.0
        if not self.disk_paths:
            self.disk_paths = ["/"]
