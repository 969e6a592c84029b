from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Target:
    host: str
    start_port: int
    end_port: int
    name: str = ""

    @property
    def ports(self) -> range:
        return range(self.start_port, self.end_port + 1)

    @property
    def total(self) -> int:
        return self.end_port - self.start_port + 1

    @property
    def display_name(self) -> str:
        if self.name and self.name != self.host:
            return f"{self.name} ({self.host})"
        return self.host


@dataclass(frozen=True)
class ProbeResult:
    port: int
    is_open: bool
    elapsed_s: float = 0.0


@dataclass(frozen=True)
class ScanReport:
    target: Target
    open_ports: Tuple[int, ...]
    scanned: int
    cancelled: bool = False
    elapsed_s: float = 0.0

    @property
    def count(self) -> int:
        return len(self.open_ports)

    @property
    def total(self) -> int:
        return self.target.total
