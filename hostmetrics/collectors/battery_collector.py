"""Battery state collector reading /sys/class/power_supply."""
import os

import structlog

from ..errors import (PreconditionError, ResourceError, ResourceParseError,
                      ResourceReadError, ZeroDivisorError)
from .procfs import read_int

logger = structlog.get_logger(__name__)

POWER_SUPPLY_DIR = "/sys/class/power_supply"


class BatteryCollector:
    """Reads state of charge and state of health for a named battery."""

    def __init__(self, power_supply_dir: str = POWER_SUPPLY_DIR):
        self.power_supply_dir = power_supply_dir

    def get_battery_soc(self, name: str) -> int:
        """Return the state of charge in percent."""
        capacity = self._read_attribute(name, "capacity", f"failed to get battery SOC for {name}")
        logger.debug("battery.soc", battery=name, soc=capacity)
        return capacity

    def get_battery_soh(self, name: str) -> int:
        """Return the state of health in percent.

        SOH is the battery's current full energy as a percentage of its
        design energy, truncated to an integer.
        """
        energy_full = self._read_attribute(
            name, "energy_full", f"failed to retrieve energy_full for battery {name}")
        energy_full_design = self._read_attribute(
            name, "energy_full_design", f"failed to retrieve energy_full_design for battery {name}")

        if energy_full_design == 0:
            raise ZeroDivisorError(f"energy_full_design is zero, cannot calculate SOH for battery {name}")

        soh = 100 * energy_full // energy_full_design
        logger.debug("battery.soh", battery=name, soh=soh)
        return soh

    def _read_attribute(self, name: str, attribute: str, context: str) -> int:
        """Read an integer attribute, re-raising failures with battery context."""
        path = self._attribute_path(name, attribute)
        try:
            return read_int(path)
        except ResourceReadError as e:
            raise ResourceReadError(e.path, f"{context}: {e}") from e
        except ResourceError as e:
            raise ResourceParseError(f"{context}: {e}") from e

    def _attribute_path(self, name: str, attribute: str) -> str:
        """Build the sysfs path of a battery attribute, rejecting bad names."""
        if not name:
            raise PreconditionError("battery name cannot be empty")
        if os.sep in name or name in (".", ".."):
            raise PreconditionError(f"invalid battery name: {name!r}")
        return os.path.join(self.power_supply_dir, name, attribute)
