"""App constants, overridable via environment variables."""

import os

# Model used for every rewrite call.
# OPENAI_MODEL is accepted as an alias of LLM_MODEL.
LLM_MODEL: str = os.environ.get("LLM_MODEL") or os.environ.get("OPENAI_MODEL") or "gpt-4o-mini"

# Output cap passed as max_output_tokens on each rewrite.
REWRITE_MAX_OUTPUT_TOKENS: int = 700

# Upper bound (seconds) on a single completion call; a slow upstream becomes a 500.
REWRITE_TIMEOUT_SECONDS: float = float(os.environ.get("REWRITE_TIMEOUT_SECONDS", "60"))

# Value of "error" in the 500 envelope.
OPENAI_ERROR_LABEL: str = "OpenAI error"

# ── Survey storage keys ──────────────────────────────────────────────────────
# localStorage keys the survey pages save their payloads under.
KICKOFF_STORAGE_KEY: str = "metricMateKickoff"
MIDTERM_STORAGE_KEY: str = "metricMateMidterm"
FINAL_STORAGE_KEY: str = "metricMateFinal"
DASHBOARD_STORAGE_KEY: str = "metricMateDashboard"

# Query parameter carrying a URL-encoded dashboard payload.
DASHBOARD_QUERY_PARAM: str = "data"
