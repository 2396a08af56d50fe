"""Instruction templates for the rewrite endpoint, one table per phase."""

from typing import Mapping

from metric_mate.models.mode import Phase

from .dashboard import DASHBOARD_INSTRUCTIONS_BY_MODE
from .final import FINAL_INSTRUCTIONS_BY_MODE
from .kickoff import KICKOFF_INSTRUCTIONS_BY_MODE
from .midterm import MIDTERM_INSTRUCTIONS_BY_MODE

PromptTable = Mapping[str, str]

# Precedence order: the first table holding a mode wins.
PROMPT_TABLES: tuple[tuple[Phase, PromptTable], ...] = (
    (Phase.KICKOFF, KICKOFF_INSTRUCTIONS_BY_MODE),
    (Phase.MIDTERM, MIDTERM_INSTRUCTIONS_BY_MODE),
    (Phase.FINAL, FINAL_INSTRUCTIONS_BY_MODE),
    (Phase.DASHBOARD, DASHBOARD_INSTRUCTIONS_BY_MODE),
)


def lookup(table: PromptTable, mode: object) -> str | None:
    """Exact, case-sensitive lookup of one mode in one table."""
    if not isinstance(mode, str):
        return None
    return table.get(mode)


__all__ = [
    "DASHBOARD_INSTRUCTIONS_BY_MODE",
    "FINAL_INSTRUCTIONS_BY_MODE",
    "KICKOFF_INSTRUCTIONS_BY_MODE",
    "MIDTERM_INSTRUCTIONS_BY_MODE",
    "PROMPT_TABLES",
    "PromptTable",
    "lookup",
]
