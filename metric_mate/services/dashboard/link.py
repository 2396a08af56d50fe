"""Dashboard hand-off: build the payload and the link that carries it."""

import json
from typing import Any, Mapping
from urllib.parse import unquote, urlencode

from constants import (
    DASHBOARD_QUERY_PARAM,
    FINAL_STORAGE_KEY,
    KICKOFF_STORAGE_KEY,
    MIDTERM_STORAGE_KEY,
)


def build_dashboard_payload(stored: Mapping[str, object]) -> dict[str, Any]:
    """Kickoff, midterm and final payloads as saved by the survey pages."""
    return {
        "kickoff": stored.get(KICKOFF_STORAGE_KEY),
        "midterm": stored.get(MIDTERM_STORAGE_KEY),
        "final": stored.get(FINAL_STORAGE_KEY),
    }


def build_dashboard_link(payload: Mapping[str, Any], base: str = "dashboard.html") -> str:
    """Link that opens the dashboard with ``payload`` in ``?data=``."""
    query = urlencode({DASHBOARD_QUERY_PARAM: json.dumps(payload, separators=(",", ":"))})
    return f"{base}?{query}"


def parse_dashboard_query(value: str | None) -> Any:
    """
    Parse the ``data`` query parameter back into a payload.

    Accepts the value once-decoded (as a web framework hands it over) or
    still percent-encoded. Returns None for a missing value.
    """
    if not value:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        pass
    try:
        return json.loads(unquote(value))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid dashboard data: {exc.msg}") from exc
