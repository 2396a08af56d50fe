"""Rewrite service: validate, pick instructions, call the model once."""

import logging

from constants import OPENAI_ERROR_LABEL
from metric_mate.models.rewrite import (
    CompletionFailure,
    CompletionResult,
    RewriteErrorBody,
    RewriteRequest,
    RewriteSuccessBody,
)
from metric_mate.services.rewrite.completion import CompletionClient
from metric_mate.services.rewrite.resolver import InstructionResolver, get_default_resolver

logger = logging.getLogger(__name__)

MISSING_TEXT_ERROR = 'Missing "text" in request body.'
ORIGINAL_TEXT_LABEL = "Original text:"
CONTEXT_LABEL = "Additional context (do not repeat verbatim, just use for nuance):"


class RewriteValidationError(ValueError):
    """Request rejected before any completion call is made."""


class RewriteService:
    def __init__(
        self,
        resolver: InstructionResolver | None = None,
        client: CompletionClient | None = None,
    ) -> None:
        self.resolver = resolver or get_default_resolver()
        self.client = client or CompletionClient()

    def rewrite(self, body: object) -> CompletionResult:
        """
        Run one rewrite request end to end.

        Raises RewriteValidationError for blank text or an unknown mode.
        Upstream failures are returned as CompletionFailure, never raised.
        """
        req = RewriteRequest.from_body(body)
        logger.info(
            "Rewrite request mode=%s phase=%s text_length=%d",
            req.mode,
            req.phase,
            req.text_length(),
        )

        if not isinstance(req.text, str) or not req.text.strip():
            logger.info("Rewrite rejected: missing text.")
            raise RewriteValidationError(MISSING_TEXT_ERROR)

        match = self.resolver.resolve_with_phase(req.mode, req.phase)
        if match is None:
            logger.info("Rewrite rejected: unsupported mode=%s", req.mode)
            raise RewriteValidationError(f"Unsupported mode: {req.mode}")
        table_phase, instructions = match
        logger.debug("Mode %s (%s) resolved from %s table", req.mode, req.known_mode.name, table_phase.value)

        input_text = build_input(req.text, req.project_context)
        logger.debug("Rewrite input composed length=%d", len(input_text))
        return self.client.complete(instructions, input_text)


def build_input(text: str, project_context: object = None) -> str:
    parts = [f"{ORIGINAL_TEXT_LABEL}\n{text}"]
    if isinstance(project_context, str) and project_context.strip():
        parts.append(f"{CONTEXT_LABEL}\n{project_context}")
    return "\n\n".join(parts)


def rewrite_response(outcome: CompletionResult) -> tuple[RewriteSuccessBody | RewriteErrorBody, int]:
    """Map a completion outcome to ``(json_body, http_status)``."""
    if isinstance(outcome, CompletionFailure):
        body: RewriteErrorBody = {"error": OPENAI_ERROR_LABEL, "message": outcome.message}
        if outcome.status is not None:
            body["status"] = outcome.status
        if outcome.data is not None:
            body["data"] = outcome.data
        return body, 500
    return {"text": outcome.text}, 200
