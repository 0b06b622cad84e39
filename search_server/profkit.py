# search_server/profkit.py — light timing helpers for the search server
# `timeit` / `tick` accumulate into COUNTERS only when SEARCH_SERVER_PROFILE=1;
# otherwise they are no-ops. `log_duration` always measures and prints.

import sys
import time
from collections import defaultdict
from contextlib import contextmanager

from search_server.config import PROFILE_ENABLED

ENABLED = PROFILE_ENABLED
COUNTERS = defaultdict(float)  # str -> float (counts / milliseconds)


def tick(name: str, n: float = 1.0):
    if ENABLED:
        COUNTERS[name] += n


@contextmanager
def timeit(name: str):
    if not ENABLED:
        yield
        return
    t0 = time.perf_counter()
    try:
        yield
    finally:
        COUNTERS[name] += (time.perf_counter() - t0) * 1000.0  # ms


@contextmanager
def log_duration(name: str, stream=None):
    """
    Time the enclosed block and print "<name>: <ms> ms" when it exits,
    even if the block raised.
    """
    stream = stream if stream is not None else sys.stderr
    t0 = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        print(f"{name}: {elapsed_ms:.0f} ms", file=stream)


def report(stream=None):
    """Print accumulated counters, largest first."""
    stream = stream if stream is not None else sys.stderr
    for name, value in sorted(COUNTERS.items(), key=lambda x: x[1], reverse=True):
        print(f"[profkit] {name:<24} {value:.2f}", file=stream)
