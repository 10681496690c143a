# ./tests/test_api_solver.py

from fastapi.testclient import TestClient

from mullerroot.core.config import settings
from mullerroot.main import app

client = TestClient(app)

URL = f"{settings.API_V1_STR}/solver/muller"


def test_run_muller_success():
    res = client.post(URL, json={"x0": 1, "x1": 2, "max_iterations": 20, "tolerance_digits": 15})
    assert res.status_code == 200
    body = res.json()

    assert body["status"] == "converged"
    assert body["converged"] is True
    assert abs(body["root"] - 1.122462048309) < 1e-12
    assert body["function"] == "f(x) = x^6 - 2"
    assert len(body["rows"]) == body["iterations_used"] + 1

    first, last = body["rows"][0], body["rows"][-1]
    assert first["step"] == 1
    assert first["x"] == 1.0
    assert first["y"] == -1.0
    assert last["c"] is None
    assert last["d"] is None


def test_run_muller_defaults_match_settings():
    res = client.post(URL, json={"x0": -1, "x1": -2})
    assert res.status_code == 200
    body = res.json()

    assert body["converged"] is True
    assert abs(body["root"] + 1.122462048309) < 1e-12
    assert body["tolerance"] == 0.5 * 10.0 ** (-settings.DEFAULT_TOLERANCE_DIGITS)


def test_run_muller_not_converged_is_ok():
    res = client.post(URL, json={"x0": 1, "x1": 2, "max_iterations": 3})
    assert res.status_code == 200
    body = res.json()

    assert body["status"] == "not_converged"
    assert body["converged"] is False
    assert body["iterations_used"] == 2
    assert len(body["rows"]) == 3


def test_run_muller_equal_seeds():
    res = client.post(URL, json={"x0": 1.5, "x1": 1.5})
    assert res.status_code == 422
    assert res.headers["content-type"].startswith("application/problem+json")
    body = res.json()
    assert body["code"] == "INVALID_INPUT"
    assert "different" in body["message"]


def test_run_muller_iterations_out_of_range():
    for n in (2, settings.MAX_ITERATIONS + 1):
        res = client.post(URL, json={"x0": 1, "x1": 2, "max_iterations": n})
        assert res.status_code == 422
        assert res.json()["code"] == "INVALID_INPUT"


def test_run_muller_tolerance_out_of_range():
    for n in (0, settings.MAX_TOLERANCE_DIGITS + 1):
        res = client.post(URL, json={"x0": 1, "x1": 2, "tolerance_digits": n})
        assert res.status_code == 422
        assert res.json()["code"] == "INVALID_INPUT"


def test_run_muller_schema_validation_error():
    res = client.post(URL, json={"x0": "abc"})
    assert res.status_code == 422
    body = res.json()
    assert body["code"] == "INVALID_INPUT"
    assert isinstance(body["detail"], list)
    assert len(body["detail"]) >= 2


def test_run_muller_numeric_degeneracy():
    res = client.post(URL, json={"x0": 1.0, "x1": 1.0000000000000002})
    assert res.status_code == 422
    body = res.json()

    assert body["code"] == "NUMERIC_DEGENERACY"
    assert body["detail"] == {"index": 2, "quantity": "x[i]-x[i-2]"}


def test_unknown_route_uses_problem_format():
    res = client.get(f"{settings.API_V1_STR}/does-not-exist")
    assert res.status_code == 404
    assert res.json()["code"] == "HTTP_ERROR"


def test_health_endpoints():
    res = client.get(f"{settings.API_V1_STR}/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "env": settings.APP_ENV}

    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["status"] == "running"
