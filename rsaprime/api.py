# rsaprime/api.py
# HTTP surface for the primality core. Integers travel as decimal strings.

import time
from datetime import datetime

from flask import Blueprint, request, jsonify
from redis import Redis
from rq import Queue
from rq.job import Job
from rq.exceptions import NoSuchJobError
from werkzeug.exceptions import BadRequest

from .config import JOB_TIMEOUT, MAX_BITS, QUEUE_NAME, REDIS_URL, PrimalityConfig
from .errors import InvalidModulus
from .euclid import gcdext
from .modexp import mod_exp
from .primality import Strategy, is_prime
from .search import next_prime, next_prime_threaded

primes_bp = Blueprint("primes_bp", __name__)

# Redis / RQ
redis_conn = Redis.from_url(REDIS_URL)
prime_q = Queue(QUEUE_NAME, connection=redis_conn, default_timeout=JOB_TIMEOUT)

# ------------------ helpers ------------------
def _age_secs(dt: datetime | None) -> float | None:
    if not dt:
        return None
    return max(0.0, time.time() - dt.timestamp())

def _job_dict(job: Job) -> dict:
    d = {
        "job_id": job.id,
        "status": job.get_status(),
        "meta": job.meta or {},
        "enqueued_at": job.enqueued_at.isoformat() if job.enqueued_at else None,
        "started_at": job.started_at.isoformat() if job.started_at else None,
        "ended_at": job.ended_at.isoformat() if job.ended_at else None,
        "age_sec": _age_secs(job.enqueued_at),
    }
    if job.is_finished:
        d["result"] = job.return_value()
    if job.is_failed:
        d["exc_info"] = (job.exc_info or "")[-1024:]
    return d

def _int_arg(source, name: str) -> int:
    raw = str(source.get(name, "")).strip()
    if not raw.isdecimal():
        raise BadRequest(f"{name} must be a non-negative integer string")
    n = int(raw)
    if n.bit_length() > MAX_BITS:
        raise BadRequest(f"{name} exceeds {MAX_BITS} bits")
    return n

def _strategy_arg(source) -> Strategy:
    try:
        return Strategy.parse(source.get("strategy", Strategy.SEQUENTIAL.value))
    except ValueError as e:
        raise BadRequest(str(e))

# ------------------ API ------------------
@primes_bp.get("/api/health")
def health():
    ok, msg = True, "ok"
    try:
        redis_conn.ping()
    except Exception as e:
        ok, msg = False, f"redis error: {e.__class__.__name__}"
    return jsonify({"ok": ok, "msg": msg, "queue": prime_q.name, "time": int(time.time())})

@primes_bp.get("/api/is_prime")
def api_is_prime():
    n = _int_arg(request.args, "n")
    strategy = _strategy_arg(request.args)
    verdict = is_prime(n, strategy, PrimalityConfig.from_env())
    return jsonify({"n": str(n), "bits": n.bit_length(), "is_prime": verdict,
                    "strategy": strategy.value})

@primes_bp.get("/api/next_prime")
def api_next_prime():
    start = _int_arg(request.args, "start")
    strategy = _strategy_arg(request.args)
    search = next_prime_threaded if strategy is Strategy.THREADED else next_prime
    t0 = time.perf_counter()
    p = search(start, PrimalityConfig.from_env())
    ms = (time.perf_counter() - t0) * 1000
    return jsonify({"start": str(start), "prime": str(p), "ms": round(ms, 3),
                    "strategy": strategy.value})

@primes_bp.get("/api/mod_exp")
def api_mod_exp():
    base = _int_arg(request.args, "base")
    exponent = _int_arg(request.args, "exponent")
    modulus = _int_arg(request.args, "modulus")
    try:
        r = mod_exp(base, exponent, modulus)
    except InvalidModulus as e:
        raise BadRequest(str(e))
    return jsonify({"result": str(r)})

@primes_bp.get("/api/gcdext")
def api_gcdext():
    a = _int_arg(request.args, "a")
    b = _int_arg(request.args, "b")
    g, x, y = gcdext(a, b)
    return jsonify({"g": str(g), "x": str(x), "y": str(y)})

@primes_bp.post("/api/next_prime/submit")
def next_prime_submit():
    data = request.get_json(silent=True) or {}
    start = _int_arg(data, "start")
    strategy = _strategy_arg(data)
    bits = start.bit_length()
    job = prime_q.enqueue("rsaprime.jobs.next_prime_job", str(start), strategy.value,
                          meta={"bits": bits, "strategy": strategy.value, "submitted": time.time()})
    return jsonify({"job_id": job.id, "status": job.get_status(), "bits": bits}), 202

@primes_bp.get("/api/job/<job_id>")
def job_status(job_id):
    try:
        job = Job.fetch(job_id, connection=redis_conn)
    except NoSuchJobError:
        return jsonify({"error": "unknown job"}), 404
    return jsonify(_job_dict(job))

@primes_bp.errorhandler(BadRequest)
def bad_request(e):
    return jsonify({"error": e.description}), 400
