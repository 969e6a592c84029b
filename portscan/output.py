from __future__ import annotations

import sys
import time
from typing import Optional, TextIO

from colorama import Fore, Style

from .models import ScanReport, Target


class Painter:
    """Wraps text in colorama codes unless color is turned off."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def __call__(self, text, color: str = "GREEN") -> str:
        if not self.enabled:
            return str(text)
        return f"{getattr(Fore, color)}{text}{Style.RESET_ALL}"


class ProgressBar:
    """
    Single-line progress indicator redrawn with "\\r" on every tick.
    Draws at most every min_interval_s, except the final tick.
    """

    def __init__(
        self,
        total: int,
        width: int = 40,
        stream: Optional[TextIO] = None,
        min_interval_s: float = 0.1,
    ):
        self.total = max(total, 1)
        self.width = width
        self.stream = stream or sys.stdout
        self.min_interval_s = min_interval_s
        self.start = time.perf_counter()
        self._last_draw: Optional[float] = None
        self._drawn = False

    def render(self, done: int) -> str:
        frac = min(done / self.total, 1.0)
        filled = int(round(frac * self.width))
        elapsed = time.perf_counter() - self.start
        bar = "#" * filled + "-" * (self.width - filled)
        return f"Progress {frac * 100:3.0f}% | {elapsed:.1f}s [{bar}]"

    def update(self, done: int, total: Optional[int] = None) -> None:
        if total:
            self.total = total
        now = time.perf_counter()
        if done < self.total and self._last_draw is not None and now - self._last_draw < self.min_interval_s:
            return
        self._last_draw = now
        self._drawn = True
        print(f"\r{self.render(done)}", end="", file=self.stream, flush=True)

    def clear_line(self) -> None:
        if self._drawn:
            print("\r\033[K", end="", file=self.stream, flush=True)

    def finish(self) -> None:
        if self._drawn:
            print(file=self.stream)  # newline after progress
            self._drawn = False


def print_target(target: Target, paint: Painter) -> None:
    print(f"IP: {paint(target.display_name)}")
    print(f"Port Range: {paint(target.start_port)} to {paint(target.end_port)}")
    print()


def print_open_port(port: int, paint: Painter, progress: Optional[ProgressBar] = None) -> None:
    if progress:
        progress.clear_line()
    print(f"[+] Port {paint(port)} is open")


def format_open_ports(report: ScanReport) -> str:
    return ",".join(str(p) for p in report.open_ports)


def print_report(report: ScanReport, paint: Painter) -> None:
    if report.cancelled:
        print(paint(f"Scan cancelled after {report.scanned}/{report.total} ports", "YELLOW"))
    ports = format_open_ports(report) or "none"
    print(f"Open ports: {paint(ports)}")
    print(f"Scan time: {report.elapsed_s:.2f}s")
    print(f"Host {report.target.host}: found {report.count} open ports, done.")
