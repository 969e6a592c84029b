from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Callable, Dict, Iterator, Optional

from .config import ScanConfig
from .errors import ResourceExhaustionError
from .models import ScanReport
from .prober import probe

log = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]
OpenCallback = Callable[[int], None]

# How often the consumer loop wakes up to look at the cancel event.
_POLL_S = 0.2


def scan(
    config: ScanConfig,
    on_progress: Optional[ProgressCallback] = None,
    on_open: Optional[OpenCallback] = None,
    cancel: Optional[threading.Event] = None,
) -> ScanReport:
    """
    Bounded-futures scanner over the target's inclusive port range.

    Results land in a buffer indexed by port offset, so the report comes
    out in ascending port order no matter which probe finishes first.
    Only this thread writes the buffer and the counters.
    """
    target = config.target
    total = target.total
    found = bytearray(total)
    cancel = cancel or threading.Event()

    ports: Iterator[int] = iter(target.ports)
    scanned = 0
    start_all = time.perf_counter()

    max_pending = max(config.threads * 4, 100)
    pool = ThreadPoolExecutor(max_workers=config.threads, thread_name_prefix="probe")
    pending: Dict[Future, int] = {}

    def submit_next() -> bool:
        if cancel.is_set():
            return False
        try:
            port = next(ports)
        except StopIteration:
            return False
        pending[pool.submit(probe, target.host, port, config.timeout_s)] = port
        return True

    def record(fut: Future, port: int) -> None:
        nonlocal scanned
        try:
            is_open = fut.result().is_open
        except ResourceExhaustionError:
            raise
        except Exception:
            log.debug("probe of %s:%d failed, counting it as not open", target.host, port, exc_info=True)
            is_open = False

        scanned += 1
        if is_open:
            found[port - target.start_port] = 1
            if on_open:
                on_open(port)
        if on_progress:
            on_progress(scanned, total)

    try:
        try:
            # Prime the queue
            while len(pending) < max_pending and submit_next():
                pass

            while pending:
                done, _ = wait(list(pending), timeout=_POLL_S, return_when=FIRST_COMPLETED)
                for fut in done:
                    record(fut, pending.pop(fut))

                if cancel.is_set():
                    break

                # Refill queue
                while len(pending) < max_pending and submit_next():
                    pass
        except KeyboardInterrupt:
            cancel.set()

        cancelled = cancel.is_set() and scanned < total
        if cancelled:
            log.warning("scan of %s cancelled after %d/%d ports", target.host, scanned, total)
            for fut in list(pending):
                if fut.cancel():
                    del pending[fut]
            # In-flight probes finish within their own timeout; keep what they found.
            try:
                for fut, port in list(pending.items()):
                    if fut.done():
                        record(fut, port)
            except KeyboardInterrupt:
                log.debug("interrupted again, dropping in-flight results")
    finally:
        pool.shutdown(wait=False, cancel_futures=True)

    open_ports = tuple(target.start_port + i for i, hit in enumerate(found) if hit)
    return ScanReport(
        target=target,
        open_ports=open_ports,
        scanned=scanned,
        cancelled=cancelled,
        elapsed_s=round(time.perf_counter() - start_all, 4),
    )
