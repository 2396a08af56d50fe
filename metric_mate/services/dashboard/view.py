"""Build the read-only dashboard view from a normalized payload.

Text is returned raw; the page escapes it when rendering.
"""

import logging
from typing import Any

from metric_mate.models.dashboard import DashboardCards, DashboardView, StatusChip
from metric_mate.services.dashboard.normalizer import normalize_dashboard_data

logger = logging.getLogger(__name__)

CARD_KEYS: tuple[str, ...] = ("outcomes", "results", "wins", "challenges", "learnings", "nextSteps")

NO_PROJECT_MESSAGE = (
    "No project data found. Open this dashboard from a survey page so it can pass in context."
)
NO_CARD_DATA = "No data available yet."
NO_FINAL_SUMMARY = (
    "No final summary captured yet. Complete the Final Review survey to generate one."
)
KICKOFF_ONLY_SUMMARY = (
    "Kickoff-only view: final narrative summary will appear here once the Final Review "
    "survey is completed."
)
META_SEPARATOR = " • "


def build_dashboard_view(raw: object) -> DashboardView:
    """
    Turn a raw dashboard payload into header, status chips and card texts.

    Uses the final survey when it has any card content, otherwise falls back
    to a baseline derived from the kickoff goal selections.
    """
    data = normalize_dashboard_data(raw)
    if data is None or not data["project"].get("name"):
        logger.info("Dashboard view empty: no project name in payload.")
        return {"empty": True, "message": NO_PROJECT_MESSAGE}

    project = data["project"]
    kickoff = data["kickoff"]
    final = data["final"] or {}
    has_midterm = _has_midterm(data["midterm"])
    has_final = any(final.get(key) for key in CARD_KEYS)

    meta_bits: list[str] = []
    if project.get("client"):
        meta_bits.append(str(project["client"]))
    for label, key in (("PM", "pm"), ("Designer", "designer"), ("Dev", "dev")):
        if project.get(key):
            meta_bits.append(f"{label}: {project[key]}")  # type: ignore[literal-required]

    dates: list[str] = []
    if project.get("kickoffDate"):
        dates.append(f"Kickoff: {project['kickoffDate']}")
    if project.get("finalReviewDate") and has_final:
        dates.append(f"Final review: {project['finalReviewDate']}")

    chips: list[StatusChip] = []
    if kickoff is not None:
        chips.append({"label": "Kickoff completed", "tone": "primary"})
    if has_midterm:
        chips.append({"label": "Midterm completed", "tone": "info"})
    else:
        chips.append({"label": "Midterm not started", "tone": "muted"})
    if has_final:
        chips.append({"label": "Final review completed", "tone": "success"})
    else:
        chips.append({"label": "Final review not started", "tone": "muted"})

    if has_final:
        cards: DashboardCards = {key: final.get(key) or NO_CARD_DATA for key in CARD_KEYS}  # type: ignore[assignment]
        summary = data["finalSummary"] or NO_FINAL_SUMMARY
        view = "final"
    else:
        cards = build_kickoff_baseline(kickoff)
        summary = KICKOFF_ONLY_SUMMARY
        view = "kickoff"

    return {
        "empty": False,
        "view": view,
        "title": project.get("name") or "Untitled project",
        "meta": META_SEPARATOR.join(meta_bits),
        "dates": META_SEPARATOR.join(dates),
        "chips": chips,
        "cards": cards,
        "summary": summary,
        "data": data,
    }


def build_kickoff_baseline(kickoff: dict[str, Any] | None) -> DashboardCards:
    business = _selected_labels(kickoff, "businessGoals")
    product = _selected_labels(kickoff, "productGoals")
    user = _selected_labels(kickoff, "userGoals")
    pains = _selected_labels(kickoff, "userPains")

    return {
        "outcomes": (
            f"Baseline business focus at kickoff: {', '.join(business)}."
            if business
            else "No business goals were selected during kickoff."
        ),
        "results": (
            f"Baseline product / experience focus at kickoff: {', '.join(product)}. "
            "Results & impact will be captured at Midterm and Final review."
            if product
            else "No product / experience goals were selected during kickoff."
        ),
        "wins": (
            f"Key user wins we’re aiming for: {', '.join(user)}. "
            "Future surveys will confirm if we achieved them."
            if user
            else "No user goals were selected during kickoff."
        ),
        "challenges": (
            f"User pain points we’re targeting: {', '.join(pains)}."
            if pains
            else "No user pain points were captured during kickoff."
        ),
        "learnings": (
            "Midterm and Final surveys will capture learnings over time. "
            "For now, this is a kickoff-only baseline."
        ),
        "nextSteps": (
            "Use this baseline to plan next steps. Once you complete the Midterm and Final "
            "reviews, this dashboard will show progress and outcomes over the full project "
            "lifecycle."
        ),
    }


def _has_midterm(midterm: dict[str, Any] | None) -> bool:
    if midterm is None:
        return False
    risks = midterm.get("risks")
    return (
        midterm.get("healthScore") is not None
        or midterm.get("progressScore") is not None
        or (isinstance(risks, list) and bool(risks))
    )


def _selected_labels(kickoff: dict[str, Any] | None, prop: str) -> list[str]:
    """Labels of selected items; lists may sit on kickoff or under kickoff.goals."""
    if kickoff is None:
        return []
    items = kickoff.get(prop)
    if not isinstance(items, list):
        nested = kickoff.get("goals")
        items = nested.get(prop) if isinstance(nested, dict) else None
    if not isinstance(items, list):
        return []
    return [
        str(item.get("label", ""))
        for item in items
        if isinstance(item, dict) and item.get("selected")
    ]
