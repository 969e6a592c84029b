import socket
import threading

import pytest

from portscan.config import ScanConfig
from portscan.models import Target


@pytest.fixture
def listener():
    """Loopback TCP listener that accepts and drops connections. Yields its port."""
    srv = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    srv.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    srv.bind(("127.0.0.1", 0))
    srv.listen(16)
    srv.settimeout(0.2)
    stop = threading.Event()
    accepted = []

    def serve():
        while not stop.is_set():
            try:
                conn, _ = srv.accept()
            except socket.timeout:
                continue
            except OSError:
                break
            accepted.append(conn)

    t = threading.Thread(target=serve, daemon=True)
    t.start()
    yield srv.getsockname()[1]
    stop.set()
    t.join(timeout=2)
    for conn in accepted:
        conn.close()
    srv.close()


@pytest.fixture
def closed_port():
    """A loopback port that was just released, so nothing listens on it."""
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(("127.0.0.1", 0))
    port = s.getsockname()[1]
    s.close()
    return port


@pytest.fixture
def make_config():
    def _make(start, end, host="127.0.0.1", threads=8, timeout_s=0.5):
        target = Target(host=host, start_port=start, end_port=end, name=host)
        return ScanConfig(target=target, timeout_s=timeout_s, threads=threads, show_progress=False)

    return _make
