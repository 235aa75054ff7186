from .config import PrimalityConfig
from .errors import InvalidModulus, WorkerFailure
from .euclid import gcdext, mod_inverse
from .witness import WitnessDecomposition, decompose, miller_rabin
from .modexp import mod_exp
from .primality import Strategy, is_prime, is_prime_threaded
from .search import next_prime, next_prime_threaded, random_prime

__version__ = "0.1.0"

__all__ = [
    "PrimalityConfig",
    "InvalidModulus",
    "WorkerFailure",
    "gcdext",
    "mod_inverse",
    "WitnessDecomposition",
    "decompose",
    "miller_rabin",
    "mod_exp",
    "Strategy",
    "is_prime",
    "is_prime_threaded",
    "next_prime",
    "next_prime_threaded",
    "random_prime",
]
