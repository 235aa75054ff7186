import argparse
import json
import time

from rsaprime import PrimalityConfig, next_prime, next_prime_threaded


def main(argv=None):
    ap = argparse.ArgumentParser(description="smallest probable prime greater than START")
    ap.add_argument("start", type=int)
    ap.add_argument("--threaded", action="store_true", help="test each candidate on a thread pool")
    args = ap.parse_args(argv)
    if args.start < 0:
        ap.error("start must be non-negative")
    search = next_prime_threaded if args.threaded else next_prime
    t0 = time.perf_counter()
    p = search(args.start, PrimalityConfig.from_env())
    ms = (time.perf_counter() - t0) * 1000
    print(json.dumps({"start": args.start, "prime": p, "ms": round(ms, 3)}))

if __name__ == "__main__":
    main()
