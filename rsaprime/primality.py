# rsaprime/primality.py
# is_prime(): small-value short-circuits in front of Miller–Rabin.

from __future__ import annotations
import enum
from typing import Optional

from .config import DEFAULT_CONFIG, PrimalityConfig
from .witness import miller_rabin
from .modexp import check_natural


class Strategy(enum.Enum):
    SEQUENTIAL = "sequential"
    THREADED = "threaded"

    @classmethod
    def parse(cls, value) -> "Strategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(s.value for s in cls)
            raise ValueError(f"unknown strategy {value!r} (expected one of: {names})") from None


def is_prime(candidate: int, strategy: Strategy = Strategy.SEQUENTIAL,
             config: Optional[PrimalityConfig] = None) -> bool:
    """
    Probabilistic primality test. Never rejects a prime; accepts a composite
    with probability at most 4**-config.rounds. Values below 2 are not prime.
    """
    n = check_natural(candidate, "candidate")
    strategy = Strategy.parse(strategy)
    cfg = config or DEFAULT_CONFIG
    if n == 2 or n == 3:
        return True
    if n < 2 or n % 2 == 0:
        return False
    return miller_rabin(n, cfg.rounds,
                        parallel=strategy is Strategy.THREADED,
                        workers=cfg.workers)


def is_prime_threaded(candidate: int, config: Optional[PrimalityConfig] = None) -> bool:
    return is_prime(candidate, Strategy.THREADED, config)
