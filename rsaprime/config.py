# rsaprime/config.py
# Round/worker settings for the Miller–Rabin engine, plus env-driven knobs
# used by the web app and the rq jobs.

from __future__ import annotations
import os
from dataclasses import dataclass

DEFAULT_ROUNDS = 100   # false-positive bound 4**-100
DEFAULT_WORKERS = 8

REDIS_URL   = os.getenv("REDIS_URL", "redis://localhost:6379/0")
QUEUE_NAME  = os.getenv("RSAPRIME_QUEUE", "primes")
JOB_TIMEOUT = int(os.getenv("RSAPRIME_JOB_TIMEOUT", str(60*60*12)))  # 12h
MAX_BITS    = int(os.getenv("RSAPRIME_MAX_BITS", "4096"))


@dataclass(frozen=True)
class PrimalityConfig:
    """
    How hard is_prime() works on a candidate.

    rounds:  Miller–Rabin rounds per candidate. A composite survives all of
             them with probability at most 4**-rounds.
    workers: threads used by the threaded strategy. Rounds are split across
             them; each thread draws its own witnesses.
    """
    rounds: int = DEFAULT_ROUNDS
    workers: int = DEFAULT_WORKERS

    def __post_init__(self):
        if self.rounds < 1:
            raise ValueError("rounds must be >= 1")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")

    @classmethod
    def from_env(cls) -> "PrimalityConfig":
        return cls(
            rounds=int(os.getenv("RSAPRIME_ROUNDS", str(DEFAULT_ROUNDS))),
            workers=int(os.getenv("RSAPRIME_WORKERS", str(DEFAULT_WORKERS))),
        )


DEFAULT_CONFIG = PrimalityConfig()
