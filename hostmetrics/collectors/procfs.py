"""Readers for /proc and /sys pseudo-files."""
import re

import structlog

from ..errors import ResourceParseError, ResourceReadError, ValueNotFoundError

logger = structlog.get_logger(__name__)

KB_PER_GB = 1024 * 1024

# ASCII digits with an optional sign
INT_PATTERN = re.compile(r'[+-]?[0-9]+')


def parse_int(raw: str) -> int:
    """Parse a plain decimal integer, raising ValueError for anything else."""
    if not INT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid integer: {raw!r}")
    return int(raw)


def read_text(path: str) -> str:
    """Return the full contents of a pseudo-file."""
    try:
        with open(path, 'r') as f:
            return f.read()
    except OSError as e:
        logger.error("procfs.read_failed", path=path, error=str(e))
        raise ResourceReadError(path, f"failed to read {path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.error("procfs.decode_failed", path=path, error=str(e))
        raise ResourceParseError(f"failed to decode {path}: {e}") from e


def read_int(path: str) -> int:
    """Read a pseudo-file holding a single integer, e.g. a sysfs attribute."""
    data = read_text(path).strip()
    try:
        return parse_int(data)
    except ValueError as e:
        raise ResourceParseError(f"failed to parse int at path {path}: {data!r}") from e


def extract_kb_value(text: str, key: str, source: str = "/proc/meminfo") -> int:
    """Extract the integer from a ``<key>: <n> kB`` line.

    The match is anchored to the start of a line so that ``MemTotal`` does not
    pick up e.g. ``HugeMemTotal``. Raises ValueNotFoundError when the key is
    absent and ResourceParseError when the digits are not a valid integer.
    """
    match = re.search(rf'^{re.escape(key)}:\s*(\d+) kB', text, re.MULTILINE)
    if not match:
        raise ValueNotFoundError(key, source)

    try:
        return parse_int(match.group(1))
    except ValueError as e:
        raise ResourceParseError(f"failed to parse {key} value: {match.group(1)!r}") from e
