from __future__ import annotations

import logging
import socket

from .errors import InvalidAddressError, ResolutionError
from .models import Target
from .validate import is_valid_ipv4, normalize_ipv4, parse_port_range

log = logging.getLogger(__name__)


def resolve(hostname: str) -> str:
    """Single system lookup of an IPv4 address; no retry."""
    try:
        address = socket.gethostbyname(hostname)
    except (socket.gaierror, socket.herror, UnicodeError) as e:
        raise ResolutionError(hostname, str(e)) from e
    log.debug("resolved %s -> %s", hostname, address)
    return address


def build_target(ip: str, portrange: str) -> Target:
    """
    Validates user input and returns a Target.
    Supports:
      - IPv4 literal: "172.20.0.10"
      - Hostname: "webapp" (resolved once to an IPv4 address)
    Nothing touches the network besides the lookup for a hostname.
    """
    name = ip.strip()
    if not name:
        raise InvalidAddressError("Empty target")

    # Fail on the port range before spending a DNS lookup.
    start, end = parse_port_range(portrange)

    host = name if is_valid_ipv4(name) else resolve(name)
    if not is_valid_ipv4(host):
        raise InvalidAddressError(f"Invalid IPv4 address: {ip}")

    return Target(host=normalize_ipv4(host), start_port=start, end_port=end, name=name)
