# rsaprime/witness.py
# Miller–Rabin probable-prime test with random witnesses.
# - decompose(): n-1 = d * 2^s, computed once per candidate
# - miller_rabin_rounds(): k rounds on the calling thread
# - miller_rabin(): sequential, or fanned out over a thread pool

from __future__ import annotations
import logging
import random
import secrets
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import List, Optional

import gmpy2

from .config import DEFAULT_ROUNDS, DEFAULT_WORKERS
from .errors import WorkerFailure
from .modexp import check_natural, mod_exp

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WitnessDecomposition:
    """candidate - 1 == d * 2**s, d odd."""
    d: int
    s: int


def decompose(candidate: int) -> WitnessDecomposition:
    candidate = check_natural(candidate, "candidate")
    if candidate < 3 or candidate % 2 == 0:
        raise ValueError("candidate must be odd and > 2")
    s = int(gmpy2.bit_scan1(candidate - 1))  # trailing zero bits of n-1
    return WitnessDecomposition(d=(candidate - 1) >> s, s=s)


def miller_rabin_rounds(n: int, dec: WitnessDecomposition, rounds: int,
                        rng: Optional[random.Random] = None) -> bool:
    """
    Run `rounds` Miller–Rabin rounds against n with witnesses drawn from
    [2, n-2]. False means n is definitely composite; True means it survived.
    """
    if rng is None:
        rng = secrets.SystemRandom()
    for _ in range(rounds):
        a = rng.randint(2, n - 2)
        x = mod_exp(a, dec.d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(dec.s - 1):
            x = mod_exp(x, 2, n)
            if x == 1:
                return False  # nontrivial square root of 1
            if x == n - 1:
                break
        else:
            return False
    return True


def _split_rounds(rounds: int, workers: int) -> List[int]:
    per, extra = divmod(rounds, workers)
    shares = [per + (1 if i < extra else 0) for i in range(workers)]
    return [k for k in shares if k]


def _worker(n: int, dec: WitnessDecomposition, rounds: int) -> bool:
    # each worker owns its generator; nothing mutable crosses threads
    return miller_rabin_rounds(n, dec, rounds, secrets.SystemRandom())


def miller_rabin(candidate: int, rounds: int = DEFAULT_ROUNDS,
                 parallel: bool = False, workers: int = DEFAULT_WORKERS) -> bool:
    """
    Probable-prime test for an odd candidate > 3.

    parallel=True splits the rounds across `workers` threads and ANDs their
    verdicts once every thread has reported. Nothing is cancelled early, so a
    composite costs as much as a prime, and the pool is built per call. Only
    worth it for very high round counts or very expensive rounds; for typical
    RSA-sized candidates the sequential path is faster.

    A worker that raises turns into WorkerFailure, never into a verdict.
    """
    n = check_natural(candidate, "candidate")
    if n <= 3 or n % 2 == 0:
        raise ValueError("miller_rabin needs an odd candidate > 3")
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if workers < 1:
        raise ValueError("workers must be >= 1")

    dec = decompose(n)
    if not parallel:
        return miller_rabin_rounds(n, dec, rounds)

    shares = _split_rounds(rounds, workers)
    log.debug("miller_rabin: %d-bit candidate, rounds=%s", n.bit_length(), shares)
    with ThreadPoolExecutor(max_workers=len(shares),
                            thread_name_prefix="miller-rabin") as ex:
        futures = [ex.submit(_worker, n, dec, k) for k in shares]
        wait(futures, return_when=ALL_COMPLETED)

    prime = True
    for fut in futures:
        exc = fut.exception()
        if exc is not None:
            raise WorkerFailure(f"Miller–Rabin worker failed: {exc!r}") from exc
        if not fut.result():
            prime = False
    return prime
