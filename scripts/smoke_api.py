"""Smoke test against a running AI server.

Only the validation paths and the catalogue are exercised by default; pass
--live to also send one real rewrite through to OpenAI. The dashboard check
builds its link with the same hand-off helpers the survey pages mirror, so the
project must be installed (`pip install -e .`).
"""

from __future__ import annotations

import json
import os
import sys
import urllib.error
import urllib.request
from typing import Any

from constants import FINAL_STORAGE_KEY, KICKOFF_STORAGE_KEY
from metric_mate.services.dashboard import (
    build_dashboard_link,
    build_dashboard_payload,
    merge_stored_surveys,
)


BASE_URL = os.environ.get("METRIC_MATE_URL", "http://127.0.0.1:3001")


def http_json(method: str, url: str, body: Any = None) -> tuple[int, Any]:
    data = json.dumps(body).encode("utf-8") if body is not None else None
    req = urllib.request.Request(url, data=data, method=method, headers={"Content-Type": "application/json"})
    try:
        with urllib.request.urlopen(req, timeout=90) as resp:
            raw = resp.read().decode("utf-8")
            return int(resp.status), json.loads(raw) if raw else {}
    except urllib.error.HTTPError as exc:
        raw = exc.read().decode("utf-8")
        payload = json.loads(raw) if raw else {}
        return int(exc.code), payload


def assert_status(status: int, expected: int, label: str) -> None:
    if status != expected:
        raise AssertionError(f"{label} expected {expected}, got {status}")


def main(argv: list[str]) -> int:
    rewrite_url = f"{BASE_URL}/api/rewrite"
    print("Testing rewrite endpoint:")

    status, payload = http_json("GET", f"{BASE_URL}/api/modes")
    assert_status(status, 200, "GET /api/modes")
    print(f"OK: /api/modes ({sum(len(v) for v in payload['modes'].values())} modes)")

    status, payload = http_json("POST", rewrite_url, {"text": "", "mode": "kickoff_internal"})
    assert_status(status, 400, "blank text")
    print(f"OK: blank text -> {payload['error']}")

    status, payload = http_json("POST", rewrite_url, {"text": "ok", "mode": "not_a_real_mode"})
    assert_status(status, 400, "unknown mode")
    print(f"OK: unknown mode -> {payload['error']}")

    stored = {
        KICKOFF_STORAGE_KEY: {"info": {"projectName": "Smoke project", "clientName": "Acme"}},
        FINAL_STORAGE_KEY: {"wins": "Shipped the smoke check."},
    }
    snapshot = merge_stored_surveys(build_dashboard_payload(stored), stored)
    status, payload = http_json("GET", build_dashboard_link(snapshot, base=f"{BASE_URL}/api/dashboard"))
    assert_status(status, 200, "GET /api/dashboard")
    if payload.get("title") != "Smoke project":
        raise AssertionError(f"dashboard title mismatch: {payload.get('title')!r}")
    print(f"OK: dashboard link -> {payload['view']} view")

    if "--live" in argv:
        status, payload = http_json(
            "POST",
            rewrite_url,
            {"text": "We finished the onboarding flow.", "mode": "dashboard_delivery"},
        )
        assert_status(status, 200, "live rewrite")
        print(f"OK: live rewrite -> {payload['text'][:80]!r}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
