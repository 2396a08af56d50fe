"""Resolve a rewrite mode to its instruction template."""

import logging
from typing import Iterable

from metric_mate.models.mode import Phase
from metric_mate.prompts import PROMPT_TABLES, PromptTable, lookup

logger = logging.getLogger(__name__)


class InstructionResolver:
    """Looks a mode up across the phase tables in a fixed order.

    Tables are scanned in the order given; the first table holding the mode
    wins. The ``phase`` argument is accepted but not consulted: no table is
    scoped by phase, so the same mode string always resolves the same way.
    """

    def __init__(self, tables: Iterable[tuple[Phase, PromptTable]]) -> None:
        self._tables: tuple[tuple[Phase, PromptTable], ...] = tuple(tables)

    def resolve(self, mode: object, phase: object = None) -> str | None:
        match = self.resolve_with_phase(mode, phase)
        return match[1] if match is not None else None

    def resolve_with_phase(self, mode: object, phase: object = None) -> tuple[Phase, str] | None:
        """Return ``(table_phase, template)`` for the first matching table."""
        del phase  # inert
        for table_phase, table in self._tables:
            template = lookup(table, mode)
            if template is not None:
                return table_phase, template
        return None

    def supported_modes(self) -> dict[str, list[str]]:
        return {table_phase.value: list(table) for table_phase, table in self._tables}


_default_resolver = InstructionResolver(PROMPT_TABLES)


def get_default_resolver() -> InstructionResolver:
    return _default_resolver
