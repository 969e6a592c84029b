from __future__ import annotations

import re
from typing import Tuple

from .errors import InvalidPortRangeError

MAX_PORT = 65535

# Octets may carry leading zeros ("01.2.3.4"); they are read as decimal.
_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
_IPV4 = re.compile(rf"{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}")
_PORT_RANGE = re.compile(r"([0-9]+)-([0-9]+)")


def is_valid_ipv4(s: str) -> bool:
    return bool(_IPV4.fullmatch(s))


def is_valid_port_range(s: str) -> bool:
    """Syntax check only: "<digits>-<digits>", order and bounds not checked."""
    return bool(_PORT_RANGE.fullmatch(s))


def normalize_ipv4(s: str) -> str:
    """
    Rewrite a valid dotted quad with plain decimal octets.
    The socket layer would read "010.0.0.1" as octal otherwise.
    """
    return ".".join(str(int(octet)) for octet in s.split("."))


def parse_port_range(spec: str) -> Tuple[int, int]:
    """
    Parses "start-end" into an inclusive (start, end) pair.
    Ports above 65535 and reversed ranges are rejected, never clamped.
    """
    spec = spec.strip()
    m = _PORT_RANGE.fullmatch(spec)
    if not m:
        raise InvalidPortRangeError(f"Invalid port range: {spec!r} (expected START-END, e.g. 1-1024)")

    start = int(m.group(1))
    end = int(m.group(2))
    if start > MAX_PORT or end > MAX_PORT:
        raise InvalidPortRangeError(f"Invalid port range: {spec} (ports must be 0-{MAX_PORT})")
    if start > end:
        raise InvalidPortRangeError(f"Invalid port range: {spec} (start is greater than end)")
    return start, end
