import csv, random
from concurrent.futures import ThreadPoolExecutor, as_completed
from sympy import randprime, isprime, nextprime

from rsaprime import PrimalityConfig, Strategy, is_prime, next_prime, next_prime_threaded

CFG = PrimalityConfig.from_env()

def rand_k_digit_prime(k):
    lo = 10**(k-1)
    hi = 10**k - 1
    return int(randprime(lo, hi))

def rand_semiprime(k):
    # p and q near half the digits each
    k1 = max(1, k//2)
    k2 = max(1, k - k1)
    return rand_k_digit_prime(k1) * rand_k_digit_prime(k2)

def rand_odd_composite(k):
    n = random.randrange(10**(k-1), 10**k) | 1
    while isprime(n):
        n += 2
    return n

def check_is_prime(n, expect):
    seq = is_prime(n, Strategy.SEQUENTIAL, CFG)
    thr = is_prime(n, Strategy.THREADED, CFG)
    ok = seq == thr == (expect == "prime")
    reason = "" if ok else f"sequential={seq} threaded={thr}"
    return ok, reason

def check_next_prime(n, _expect):
    want = int(nextprime(n))
    if want == 2:          # search only visits odd numbers
        want = 3
    seq = next_prime(n, CFG)
    thr = next_prime_threaded(n, CFG)
    ok = seq == thr == want
    reason = "" if ok else f"want={want} sequential={seq} threaded={thr}"
    return ok, reason

def run_case(n, expect):
    if expect == "next":
        ok, reason = check_next_prime(n, expect)
    else:
        ok, reason = check_is_prime(n, expect)
    return {"n": str(n), "digits": len(str(n)), "expect": expect, "ok": ok, "reason": reason}

def main():
    random.seed(42)
    jobs = []

    # A) Handpicked fixtures
    jobs += [(97, "prime"), (91, "composite"), (561, "composite"), (4, "composite"),
             (4829837983753984028472098472089547098728675098723407520875297, "prime"),
             (359709793871987301975987296195681798740165298740176567105918720469720137416098423, "composite")]

    # B) Random primes
    for k in [2,3,4,6,9,12,16,24,40,80]:
        for _ in range(3):
            jobs.append((rand_k_digit_prime(k), "prime"))

    # C) Semiprimes and other odd composites
    for k in [4,6,9,12,16,24,40]:
        for _ in range(3):
            jobs.append((rand_semiprime(k), "composite"))
            jobs.append((rand_odd_composite(k), "composite"))

    # D) next_prime against sympy.nextprime
    for k in [1,2,3,5,8,12,20,40]:
        for _ in range(2):
            jobs.append((random.randrange(10**(k-1), 10**k), "next"))

    results = []
    with ThreadPoolExecutor(max_workers=8) as ex:
        futs = [ex.submit(run_case, n, tag) for n, tag in jobs]
        for fut in as_completed(futs):
            try:
                results.append(fut.result())
            except Exception as e:
                results.append({"n": "?", "digits": 0, "expect": "?", "ok": False, "reason": f"exception: {e!r}"})

    total = len(results)
    ok = sum(1 for r in results if r["ok"])
    by = {}
    for r in results:
        by.setdefault(r["expect"], [0,0])
        if r["ok"]: by[r["expect"]][0]+=1
        else: by[r["expect"]][1]+=1

    print("\n=== SUMMARY ===")
    print(f"Total: {total} | PASS: {ok} | FAIL: {total-ok}")
    for k,(p,f) in by.items():
        print(f"  {k:10s}  PASS {p:3d}  FAIL {f:3d}")

    fails = [r for r in results if not r["ok"]]
    if fails:
        fn = "accuracy_failures.csv"
        with open(fn, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=list(fails[0].keys()))
            w.writeheader()
            w.writerows(fails)
        print(f"\nWrote details for {len(fails)} failures to {fn}")
        return 1
    print("\nNo failures recorded.")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
