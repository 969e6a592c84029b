from __future__ import annotations

import errno
import socket
import time
from typing import Optional

from .config import DEFAULT_TIMEOUT_S
from .errors import ResourceExhaustionError
from .models import ProbeResult

# errnos that mean "out of sockets", not "port closed"
EXHAUSTION_ERRNOS = frozenset({errno.EMFILE, errno.ENFILE, errno.ENOBUFS, errno.ENOMEM})


def _exhausted(e: OSError, host: str, port: int) -> ResourceExhaustionError:
    return ResourceExhaustionError(
        f"Ran out of sockets probing {host}:{port} ({e.strerror or e}); lower --threads"
    )


def probe(host: str, port: int, timeout_s: float = DEFAULT_TIMEOUT_S) -> ProbeResult:
    """
    Plain connect-scan of one port. Open means the handshake completed
    within timeout_s; refused, reset, unreachable and timed out are all
    reported as not open. The socket is closed before returning.
    """
    start = time.perf_counter()
    sock: Optional[socket.socket] = None
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.settimeout(timeout_s)
        sock.connect((host, port))
        is_open = True
    except socket.timeout:
        is_open = False
    except OSError as e:
        if e.errno in EXHAUSTION_ERRNOS:
            raise _exhausted(e, host, port) from e
        is_open = False
    finally:
        if sock:
            sock.close()

    return ProbeResult(port=port, is_open=is_open, elapsed_s=round(time.perf_counter() - start, 4))
