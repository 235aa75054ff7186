#!/usr/bin/env python3
# Rough timings for the primality core. Threaded Miller-Rabin is expected to
# lose to the sequential path at these sizes: the pool is built per call.
import argparse, secrets, time
from statistics import mean

from rsaprime import PrimalityConfig, mod_exp, miller_rabin, next_prime, next_prime_threaded

START = 4829837983753984028472098472089547098728675098723407520875258
PRIME = 4829837983753984028472098472089547098728675098723407520875297

def bench(label, fn, reps):
    times = []
    for _ in range(reps):
        t0 = time.perf_counter()
        fn()
        times.append((time.perf_counter() - t0) * 1000)
    print(f"{label:28s} mean {mean(times):10.3f} ms  min {min(times):10.3f} ms  (n={reps})")

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--reps", type=int, default=20)
    ap.add_argument("--bits", type=int, default=300, help="operand size for mod_exp")
    args = ap.parse_args()
    cfg = PrimalityConfig.from_env()

    a = secrets.randbits(args.bits)
    b = secrets.randbits(args.bits)
    c = secrets.randbits(args.bits) | 1
    bench(f"mod_exp {args.bits}-bit", lambda: mod_exp(a, b, c), args.reps)
    bench("miller_rabin sequential", lambda: miller_rabin(PRIME, cfg.rounds), args.reps)
    bench("miller_rabin threaded", lambda: miller_rabin(PRIME, cfg.rounds, parallel=True,
                                                        workers=cfg.workers), args.reps)
    bench("next_prime", lambda: next_prime(START, cfg), max(1, args.reps // 4))
    bench("next_prime_threaded", lambda: next_prime_threaded(START, cfg), max(1, args.reps // 4))

if __name__ == "__main__":
    main()
