# rsaprime/search.py
# Prime generation on top of is_prime().

from __future__ import annotations
import logging
import secrets
from typing import Optional

from .config import PrimalityConfig
from .modexp import check_natural
from .primality import Strategy, is_prime

log = logging.getLogger(__name__)


def _search(start: int, strategy: Strategy, config: Optional[PrimalityConfig]) -> int:
    start = check_natural(start, "start")
    # odd candidates only, never start itself
    n = start + 1 if start % 2 == 0 else start + 2
    tested = 1
    while not is_prime(n, strategy, config):
        n += 2
        tested += 1
    log.debug("next_prime(%s bits, %s): %d candidates tested",
              start.bit_length(), strategy.value, tested)
    return n


def next_prime(start: int, config: Optional[PrimalityConfig] = None) -> int:
    """
    Smallest odd probable prime strictly greater than start.
    No latency bound; wrap the call in your own deadline if you need one.
    """
    return _search(start, Strategy.SEQUENTIAL, config)


def next_prime_threaded(start: int, config: Optional[PrimalityConfig] = None) -> int:
    """Same search as next_prime(), each candidate tested on a thread pool."""
    return _search(start, Strategy.THREADED, config)


def random_prime(bits: int, strategy: Strategy = Strategy.SEQUENTIAL,
                 config: Optional[PrimalityConfig] = None) -> int:
    """Random probable prime of exactly `bits` bits (top bit set)."""
    bits = check_natural(bits, "bits")
    if bits < 2:
        raise ValueError("bits must be >= 2")
    strategy = Strategy.parse(strategy)
    while True:
        n = secrets.randbits(bits)
        n |= (1 << (bits - 1)) | 1
        if is_prime(n, strategy, config):
            return n
