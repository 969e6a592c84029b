from __future__ import annotations


class ScanError(Exception):
    """Base class for failures that abort a scan before or during the run."""


class InvalidAddressError(ScanError):
    pass


class ResolutionError(InvalidAddressError):
    def __init__(self, hostname: str, reason: str = ""):
        self.hostname = hostname
        msg = f"Could not resolve target '{hostname}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class InvalidPortRangeError(ScanError):
    pass


class ResourceExhaustionError(ScanError):
    """
    Raised by the prober when the OS refuses to hand out another socket.
    This means the concurrency bound is too high, not that a port is closed.
    """
