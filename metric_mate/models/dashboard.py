"""Shapes of the normalized dashboard payload and the view built from it."""

from typing import Any, TypedDict


class DashboardProject(TypedDict, total=False):
    name: str
    summary: str
    client: str
    pm: str
    designer: str
    dev: str
    kickoffDate: str
    finalReviewDate: str


class DashboardData(TypedDict):
    forcePhase: str | None
    kickoff: dict[str, Any] | None
    midterm: dict[str, Any] | None
    final: dict[str, Any] | None
    goals: list[Any]
    finalSummary: str
    project: DashboardProject


class StatusChip(TypedDict):
    label: str
    tone: str


class DashboardCards(TypedDict):
    outcomes: str
    results: str
    wins: str
    challenges: str
    learnings: str
    nextSteps: str


class DashboardView(TypedDict, total=False):
    empty: bool
    message: str
    view: str
    title: str
    meta: str
    dates: str
    chips: list[StatusChip]
    cards: DashboardCards
    summary: str
    data: DashboardData
