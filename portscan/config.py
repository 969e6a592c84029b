from __future__ import annotations

from dataclasses import dataclass

from .models import Target

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT_RANGE = "1-65535"
DEFAULT_TIMEOUT_S = 2.0
DEFAULT_THREADS = 100


@dataclass(frozen=True)
class ScanConfig:
    """Everything a scan needs, built once from validated CLI input."""

    target: Target
    timeout_s: float = DEFAULT_TIMEOUT_S
    threads: int = DEFAULT_THREADS
    show_progress: bool = True

    def __post_init__(self):
        if self.threads < 1:
            raise ValueError("threads must be >= 1")
        if self.timeout_s <= 0:
            raise ValueError("timeout must be > 0")
