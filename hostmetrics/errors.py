"""Exception hierarchy for resource readings."""
from typing import Optional


class ResourceError(Exception):
    """Base class for every failure raised while reading host resources."""


class ResourceReadError(ResourceError):
    """A pseudo-file or filesystem query could not be read."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"failed to read {path}")


class ResourceParseError(ResourceError):
    """Content was read but does not have the expected format."""


class ValueNotFoundError(ResourceParseError):
    """A labelled value is missing from the parsed text."""

    def __init__(self, key: str, source: str):
        self.key = key
        self.source = source
        super().__init__(f"could not find {key} information in {source}")


class ZeroDivisorError(ResourceError):
    """A total or design value used as a divisor is zero."""


class PreconditionError(ResourceError):
    """The operation was called with invalid arguments or in the wrong state."""


class SamplerNotStartedError(PreconditionError):
    """CPU load was requested before the sampler was started."""


class NoCPUActivityError(ResourceError):
    """No CPU time elapsed between two counter snapshots."""
