"""Background CPU load sampler with a rolling average."""
import threading
from typing import Optional

import structlog

from ..collectors.cpu_collector import CPUCollector
from ..errors import SamplerNotStartedError
from .load_history import DEFAULT_CAPACITY, LoadHistory

logger = structlog.get_logger(__name__)


class CPUSampler:
    """Continuously samples CPU load on a daemon thread.

    Each sample blocks for the collector's sample interval, and samples are
    taken back to back, so a full history covers roughly the last
    ``history_size * sample_interval`` seconds.
    """

    def __init__(self, collector: CPUCollector, history_size: int = DEFAULT_CAPACITY,
                 retry_delay: float = 0.1):
        """Initialize an idle sampler."""
        self.collector = collector
        self.history_size = history_size
        self.history = LoadHistory(history_size)
        self.retry_delay = retry_delay
        self._state_lock = threading.Lock()
        self._measuring = False
        self._thread: Optional[threading.Thread] = None
        self._stopped = threading.Event()

    @property
    def is_measuring(self) -> bool:
        with self._state_lock:
            return self._measuring

    def start(self) -> bool:
        """Start the sampling thread. Returns False if it was already running."""
        with self._state_lock:
            if self._measuring:
                logger.warning("cpu_sampler.already_started")
                return False
            self._measuring = True
            # Every run owns its history and stop flag, so a thread left over
            # from a timed-out stop() cannot write into this run
            self.history = LoadHistory(self.history_size)
            self._stopped = threading.Event()
            self._thread = threading.Thread(
                target=self.collect_loop,
                args=(self.history, self._stopped),
                name="cpu-sampler",
                daemon=True
            )
            self._thread.start()

        logger.info("cpu_sampler.started", history_size=self.history_size)
        return True

    def stop(self, timeout: float = 1.0):
        """Stop the sampling thread and return to the idle state."""
        with self._state_lock:
            if not self._measuring:
                return
            self._stopped.set()
            thread = self._thread
            self._thread = None
            self._measuring = False

        # Wait for the in-flight sample to finish
        if thread is not None and thread.is_alive():
            thread.join(timeout=timeout)
        logger.info("cpu_sampler.stopped")

    def get_cpu_load(self) -> float:
        """Average load over the history window."""
        if not self.is_measuring:
            raise SamplerNotStartedError(
                "CPU measurement loop has not started, start measurement before trying to read load"
            )
        return self.history.average()

    def collect_loop(self, history: LoadHistory, stopped: threading.Event):
        """Sample until stopped; a failed sample is logged and skipped."""
        while not stopped.is_set():
            try:
                load = self.collector.measure_cpu_load()
            except Exception as e:
                logger.error("cpu_load.measure_failed", error=str(e), error_type=type(e).__name__)
                stopped.wait(self.retry_delay)
                continue

            history.push(load)
            logger.debug("cpu_sampler.sample_added", new_measurement=load)
