# rsaprime/jobs.py
# rq job entry points. Long next-prime searches on multi-hundred-bit starts
# run here instead of inside a web request.

from __future__ import annotations
import time

from .config import PrimalityConfig
from .modexp import check_natural
from .primality import Strategy, is_prime
from .search import next_prime, next_prime_threaded


def _to_int(x) -> int:
    if isinstance(x, (bytes, bytearray)):
        x = x.decode()
    if isinstance(x, str):
        x = int(x.strip(), 10)
    return check_natural(x)


def next_prime_job(start, strategy="sequential"):
    """
    Returns: dict with start, prime (decimal strings), strategy, ms.
    """
    n = _to_int(start)
    strategy = Strategy.parse(strategy)
    cfg = PrimalityConfig.from_env()
    t0 = time.perf_counter()
    if strategy is Strategy.THREADED:
        p = next_prime_threaded(n, cfg)
    else:
        p = next_prime(n, cfg)
    ms = (time.perf_counter() - t0) * 1000
    return {"start": str(n), "prime": str(p), "strategy": strategy.value, "ms": round(ms, 3)}


def is_prime_job(n, strategy="sequential"):
    n = _to_int(n)
    strategy = Strategy.parse(strategy)
    t0 = time.perf_counter()
    verdict = is_prime(n, strategy, PrimalityConfig.from_env())
    ms = (time.perf_counter() - t0) * 1000
    return {"n": str(n), "bits": n.bit_length(), "is_prime": verdict,
            "strategy": strategy.value, "ms": round(ms, 3)}
