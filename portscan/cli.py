from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from .config import DEFAULT_HOST, DEFAULT_PORT_RANGE, DEFAULT_THREADS, DEFAULT_TIMEOUT_S, ScanConfig
from .errors import ResourceExhaustionError, ScanError
from .log import create_logger
from .output import Painter, ProgressBar, print_open_port, print_report, print_target
from .scanner import scan
from .targets import build_target


class Parser(argparse.ArgumentParser):
    """Usage errors exit 1 like every other failure."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = Parser(prog="portscan", description="TCP connect port scanner")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="command", metavar="command")

    s = sub.add_parser("scan", help="scan the given IP and port range")
    s.add_argument(
        "ip",
        nargs="?",
        default=DEFAULT_HOST,
        help=f"IPv4 address or hostname (default: {DEFAULT_HOST})",
    )
    s.add_argument(
        "portrange",
        nargs="?",
        default=DEFAULT_PORT_RANGE,
        help=f"Port range START-END, e.g. 1-1024 or 2000-2000 (default: {DEFAULT_PORT_RANGE})",
    )
    s.add_argument("--threads", type=int, default=DEFAULT_THREADS, help=f"Concurrent probes (default: {DEFAULT_THREADS})")
    s.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_S,
        help=f"Connect timeout seconds (default: {DEFAULT_TIMEOUT_S})",
    )
    s.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    s.add_argument("--no-color", action="store_true", help="Plain output")
    return p


def run_scan(args: argparse.Namespace) -> int:
    target = build_target(args.ip, args.portrange)
    config = ScanConfig(
        target=target,
        timeout_s=args.timeout,
        threads=args.threads,
        show_progress=not args.no_progress,
    )

    paint = Painter(enabled=not args.no_color)
    print_target(target, paint)

    progress = ProgressBar(target.total) if config.show_progress else None
    try:
        report = scan(
            config,
            on_progress=progress.update if progress else None,
            on_open=lambda port: print_open_port(port, paint, progress),
        )
    finally:
        if progress:
            progress.finish()

    print_report(report, paint)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = create_logger(args.verbose)
    just_fix_windows_console()

    if args.command != "scan":
        parser.print_help()
        return 1

    if args.threads < 1:
        logger.error("--threads must be >= 1")
        return 1
    if args.timeout <= 0:
        logger.error("--timeout must be > 0")
        return 1

    try:
        return run_scan(args)
    except ResourceExhaustionError as e:
        logger.error("Resource exhaustion: %s", e)
        return 1
    except ScanError as e:
        logger.error("%s", e)
        return 1
    except Exception:
        logger.exception("Unexpected error")
        return 1
