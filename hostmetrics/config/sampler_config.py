"""CPU sampler configuration."""
from dataclasses import dataclass

SAMPLED = "sampled"
DIRECT = "direct"


@dataclass
class SamplerConfig:
    """CPU load sampling mode and timing."""
    mode: str = SAMPLED  # "sampled" (background history) or "direct" (one blocking sample)
    sample_interval: float = 0.1
    history_size: int = 10
    retry_delay: float = 0.1

    def __post_init__(self):
        """Fix invalid values."""
        if self.mode not in (SAMPLED, DIRECT):
            self.mode = SAMPLED
        if self.sample_interval <= 0:
            self.sample_interval = 0.1
        if self.history_size <= 0:
            self.history_size = 10
        if self.retry_delay < 0:
            self.retry_delay = 0.1
