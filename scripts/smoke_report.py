"""
Smoke test against a running server (python -m report_intake)
Posts a valid report, a malformed one, and an unrelated route
"""
import time

import requests

BASE = "http://localhost:3000"
PASS = "\033[92m✓\033[0m"
FAIL = "\033[91m✗\033[0m"

results = []


def check(name, fn):
    try:
        t = time.time()
        fn()
        elapsed = round(time.time() - t, 2)
        print(f"  {PASS} {name} ({elapsed}s)")
        results.append((name, True))
    except Exception as e:
        print(f"  {FAIL} {name}: {e}")
        results.append((name, False))


def valid_report():
    r = requests.post(f"{BASE}/report", json={"a": 1}, timeout=5)
    assert r.status_code == 200, f"status {r.status_code}"
    assert r.json() == {"message": "Report received"}, r.text


def malformed_report():
    r = requests.post(
        f"{BASE}/report",
        data=b"{not valid json",
        headers={"Content-Type": "application/json"},
        timeout=5,
    )
    assert 400 <= r.status_code < 500, f"status {r.status_code}"


def cors_header():
    r = requests.post(f"{BASE}/report", json={"x": "y"}, headers={"Origin": "http://example.com"}, timeout=5)
    assert r.headers.get("access-control-allow-origin") == "*", dict(r.headers)


def unrelated_route():
    r = requests.get(f"{BASE}/", timeout=5)
    assert r.status_code == 404, f"status {r.status_code}"


if __name__ == "__main__":
    print(f"\nReport intake smoke test against {BASE}")
    print("=" * 50)
    check("Valid JSON accepted", valid_report)
    check("Malformed JSON rejected", malformed_report)
    check("Server still serving after failure", valid_report)
    check("CORS header present", cors_header)
    check("Unrelated route is 404", unrelated_route)

    passed = sum(1 for _, ok in results if ok)
    print(f"\n{passed}/{len(results)} checks passed")
