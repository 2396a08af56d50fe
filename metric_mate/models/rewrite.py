"""Rewrite request and completion outcome types."""

from dataclasses import dataclass
from typing import Any, Mapping, TypedDict, Union

from .mode import Mode


class RewriteSuccessBody(TypedDict):
    text: str


class RewriteErrorBody(TypedDict, total=False):
    error: str
    message: str
    status: int
    data: Any


@dataclass(frozen=True)
class RewriteRequest:
    """One POST /api/rewrite body, fields taken as-is from the JSON."""

    text: Any
    mode: Any
    phase: Any = None
    project_context: Any = None

    @classmethod
    def from_body(cls, body: object) -> "RewriteRequest":
        if not isinstance(body, Mapping):
            body = {}
        return cls(
            text=body.get("text"),
            mode=body.get("mode"),
            phase=body.get("phase"),
            project_context=body.get("projectContext"),
        )

    @property
    def known_mode(self) -> Mode:
        return Mode.parse(self.mode)

    def text_length(self) -> int:
        return len(self.text) if isinstance(self.text, str) else 0


@dataclass(frozen=True)
class CompletionSuccess:
    text: str


@dataclass(frozen=True)
class CompletionFailure:
    message: str
    status: int | None = None
    data: Any = None


CompletionResult = Union[CompletionSuccess, CompletionFailure]
