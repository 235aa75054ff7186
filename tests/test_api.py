from rq.exceptions import NoSuchJobError

from rsaprime import api

from known_values import BIG_COMPOSITE, BIG_PRIME, START


def test_is_prime(client):
    r = client.get("/api/is_prime", query_string={"n": str(BIG_PRIME)})
    assert r.status_code == 200
    body = r.get_json()
    assert body == {"n": str(BIG_PRIME), "bits": BIG_PRIME.bit_length(),
                    "is_prime": True, "strategy": "sequential"}

    r = client.get("/api/is_prime", query_string={"n": str(BIG_COMPOSITE), "strategy": "threaded"})
    assert r.get_json()["is_prime"] is False
    assert r.get_json()["strategy"] == "threaded"


def test_next_prime(client):
    r = client.get("/api/next_prime", query_string={"start": str(START)})
    assert r.status_code == 200
    body = r.get_json()
    assert body["prime"] == str(BIG_PRIME)
    assert body["start"] == str(START)

    r = client.get("/api/next_prime", query_string={"start": "14", "strategy": "threaded"})
    assert r.get_json()["prime"] == "17"


def test_mod_exp(client):
    r = client.get("/api/mod_exp", query_string={"base": "4", "exponent": "13", "modulus": "497"})
    assert r.get_json() == {"result": "445"}

    r = client.get("/api/mod_exp", query_string={"base": "4", "exponent": "13", "modulus": "0"})
    assert r.status_code == 400
    assert "modulus" in r.get_json()["error"]


def test_gcdext(client):
    r = client.get("/api/gcdext", query_string={"a": "240", "b": "46"})
    assert r.get_json() == {"g": "2", "x": "-9", "y": "47"}


def test_bad_input(client):
    assert client.get("/api/is_prime").status_code == 400
    assert client.get("/api/is_prime", query_string={"n": "-7"}).status_code == 400
    assert client.get("/api/is_prime", query_string={"n": "0x11"}).status_code == 400
    r = client.get("/api/is_prime", query_string={"n": "7", "strategy": "gpu"})
    assert r.status_code == 400
    assert "strategy" in r.get_json()["error"]


def test_bit_limit(client, monkeypatch):
    monkeypatch.setattr(api, "MAX_BITS", 64)
    r = client.get("/api/is_prime", query_string={"n": str(2**64 + 1)})
    assert r.status_code == 400


class FakeJob:
    id = "job-1"

    def get_status(self):
        return "queued"


class FakeQueue:
    name = "primes"

    def __init__(self):
        self.enqueued = []

    def enqueue(self, func, *args, **kwargs):
        self.enqueued.append((func, args, kwargs))
        return FakeJob()


def test_submit(client, monkeypatch):
    q = FakeQueue()
    monkeypatch.setattr(api, "prime_q", q)
    r = client.post("/api/next_prime/submit", json={"start": str(START), "strategy": "threaded"})
    assert r.status_code == 202
    assert r.get_json() == {"job_id": "job-1", "status": "queued", "bits": START.bit_length()}
    func, args, kwargs = q.enqueued[0]
    assert func == "rsaprime.jobs.next_prime_job"
    assert args == (str(START), "threaded")
    assert kwargs["meta"]["bits"] == START.bit_length()


def test_submit_rejects_bad_start(client, monkeypatch):
    q = FakeQueue()
    monkeypatch.setattr(api, "prime_q", q)
    assert client.post("/api/next_prime/submit", json={"start": "abc"}).status_code == 400
    assert client.post("/api/next_prime/submit", data="nope").status_code == 400
    assert q.enqueued == []


def test_unknown_job(client, monkeypatch):
    def fetch(job_id, connection=None):
        raise NoSuchJobError(job_id)

    monkeypatch.setattr(api.Job, "fetch", fetch)
    r = client.get("/api/job/missing")
    assert r.status_code == 404
    assert r.get_json() == {"error": "unknown job"}
