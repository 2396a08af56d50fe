"""Rewrite modes and the phases that own them."""

from enum import Enum


class Phase(str, Enum):
    KICKOFF = "kickoff"
    MIDTERM = "midterm"
    FINAL = "final"
    DASHBOARD = "dashboard"


class Mode(str, Enum):
    """Every rewrite mode the prompt tables know about.

    UNKNOWN is what ``parse`` returns for anything else, so an unsupported
    mode is an ordinary value rather than an exception.
    """

    KICKOFF_INTERNAL = "kickoff_internal"
    KICKOFF_CLIENT_EMAIL = "kickoff_client_email"
    KICKOFF_GOAL_NARRATIVES = "kickoff_goal_narratives"

    MIDTERM_INTERNAL_UPDATE = "midterm_internal_update"
    MIDTERM_CLIENT_EMAIL = "midterm_client_email"

    FINAL_INTERNAL_UPDATE = "final_internal_update"
    FINAL_CLIENT_EMAIL = "final_client_email"
    # Legacy Asana modes, registered in the final table.
    BRIEF = "brief"
    UPDATE = "update"
    CLIENT_EMAIL = "client_email"
    CASE_STUDY = "case_study"

    DASHBOARD_SUMMARY = "dashboard_summary"
    DASHBOARD_DELIVERY = "dashboard_delivery"
    DASHBOARD_RESULTS = "dashboard_results"
    DASHBOARD_WINS = "dashboard_wins"
    DASHBOARD_CHALLENGES = "dashboard_challenges"
    DASHBOARD_LEARNINGS = "dashboard_learnings"
    DASHBOARD_NEXT_STEPS = "dashboard_next_steps"
    DASHBOARD_RESULTS_CARD = "dashboard_results_card"
    DASHBOARD_CHALLENGES_CARD = "dashboard_challenges_card"
    DASHBOARD_LEARNINGS_CARD = "dashboard_learnings_card"
    DASHBOARD_NEXTSTEPS_CARD = "dashboard_nextsteps_card"

    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> "Mode":
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN
