"""Single-call wrapper around the OpenAI Responses API."""

import logging
from typing import Any

from openai import APIStatusError, OpenAI

from constants import LLM_MODEL, REWRITE_MAX_OUTPUT_TOKENS, REWRITE_TIMEOUT_SECONDS
from metric_mate.models.rewrite import CompletionFailure, CompletionResult, CompletionSuccess

logger = logging.getLogger(__name__)


class CompletionClient:
    """Makes exactly one completion call per ``complete`` and never retries.

    Upstream errors come back as ``CompletionFailure`` instead of raising, so
    callers can map the outcome without a try/except.
    """

    def __init__(
        self,
        *,
        model: str = LLM_MODEL,
        max_output_tokens: int = REWRITE_MAX_OUTPUT_TOKENS,
        timeout_seconds: float = REWRITE_TIMEOUT_SECONDS,
        client: Any = None,
    ) -> None:
        self.model = model
        self.max_output_tokens = max_output_tokens
        self.timeout_seconds = timeout_seconds
        self._client = client

    def complete(self, instructions: str, input_text: str) -> CompletionResult:
        try:
            response = self._get_client().responses.create(
                model=self.model,
                instructions=instructions,
                input=input_text,
                max_output_tokens=self.max_output_tokens,
            )
        except Exception as exc:
            failure = failure_from_exception(exc)
            logger.exception(
                "Completion call failed model=%s message=%s status=%s data=%s",
                self.model,
                failure.message,
                failure.status,
                failure.data,
            )
            return failure

        output_text = getattr(response, "output_text", None)
        if not isinstance(output_text, str):
            logger.warning("Completion response had no output_text; returning empty text.")
            output_text = ""
        logger.debug("Completion ok model=%s output_len=%d", self.model, len(output_text))
        return CompletionSuccess(text=output_text)

    def count_models(self) -> int:
        """List the models visible to the configured key; raises on any SDK error."""
        return len(list(self._get_client().models.list()))

    def _get_client(self) -> Any:
        # Built on first use so a missing API key surfaces per request, not at import.
        if self._client is None:
            self._client = _get_openai_client(self.timeout_seconds)
        return self._client


def failure_from_exception(exc: BaseException) -> CompletionFailure:
    """Pull message, status and error payload off an upstream exception."""
    message = getattr(exc, "message", None)
    if not isinstance(message, str) or not message:
        message = str(exc) or exc.__class__.__name__

    if isinstance(exc, APIStatusError):
        status: Any = exc.status_code
    else:
        status = getattr(exc, "status", None)
    if not isinstance(status, int) or isinstance(status, bool):
        status = None

    data = getattr(exc, "body", None)
    if data is None:
        data = getattr(getattr(exc, "response", None), "data", None)

    return CompletionFailure(message=message, status=status, data=data)


def _get_openai_client(timeout_seconds: float) -> OpenAI:
    return OpenAI(timeout=timeout_seconds, max_retries=0)
