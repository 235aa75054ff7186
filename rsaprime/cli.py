# rsaprime/cli.py
# Command line front end: rsaprime <command> ...

import argparse
import json
import logging
import sys
import time

from .config import PrimalityConfig
from .euclid import gcdext
from .modexp import mod_exp
from .primality import Strategy, is_prime
from .search import next_prime, next_prime_threaded, random_prime


def _config(args) -> PrimalityConfig:
    env = PrimalityConfig.from_env()
    return PrimalityConfig(
        rounds=env.rounds if args.rounds is None else args.rounds,
        workers=env.workers if args.workers is None else args.workers,
    )


def _strategy(args) -> Strategy:
    return Strategy.THREADED if args.threaded else Strategy.SEQUENTIAL


def cmd_is_prime(args) -> int:
    cfg, strategy = _config(args), _strategy(args)
    rc = 0
    for n in args.N:
        verdict = is_prime(n, strategy, cfg)
        print(f"{n}\t{'prime' if verdict else 'composite'}")
        if not verdict:
            rc = 1
    return rc


def cmd_next_prime(args) -> int:
    search = next_prime_threaded if args.threaded else next_prime
    t0 = time.perf_counter()
    p = search(args.start, _config(args))
    ms = (time.perf_counter() - t0) * 1000
    print(json.dumps({"start": args.start, "prime": p, "ms": round(ms, 3)}))
    return 0


def cmd_mod_exp(args) -> int:
    print(mod_exp(args.base, args.exponent, args.modulus))
    return 0


def cmd_gcdext(args) -> int:
    g, x, y = gcdext(args.a, args.b)
    print(f"{g} {x} {y}")
    return 0


def cmd_random_prime(args) -> int:
    print(random_prime(args.bits, _strategy(args), _config(args)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="rsaprime",
                                 description="Primality testing and prime search")
    ap.add_argument("--rounds", type=int, default=None,
                    help="Miller-Rabin rounds per candidate (default $RSAPRIME_ROUNDS or 100)")
    ap.add_argument("--workers", type=int, default=None,
                    help="threads for --threaded (default $RSAPRIME_WORKERS or 8)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("is-prime", help="test integers for primality")
    p.add_argument("N", type=int, nargs="+")
    p.add_argument("--threaded", action="store_true")
    p.set_defaults(func=cmd_is_prime)

    p = sub.add_parser("next-prime", help="smallest prime greater than START")
    p.add_argument("start", type=int)
    p.add_argument("--threaded", action="store_true")
    p.set_defaults(func=cmd_next_prime)

    p = sub.add_parser("mod-exp", help="(BASE ** EXPONENT) %% MODULUS")
    p.add_argument("base", type=int)
    p.add_argument("exponent", type=int)
    p.add_argument("modulus", type=int)
    p.set_defaults(func=cmd_mod_exp)

    p = sub.add_parser("gcdext", help="g x y with g = gcd(a, b) = a*x + b*y")
    p.add_argument("a", type=int)
    p.add_argument("b", type=int)
    p.set_defaults(func=cmd_gcdext)

    p = sub.add_parser("random-prime", help="random prime of BITS bits")
    p.add_argument("bits", type=int)
    p.add_argument("--threaded", action="store_true")
    p.set_defaults(func=cmd_random_prime)
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except (ValueError, ZeroDivisionError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
