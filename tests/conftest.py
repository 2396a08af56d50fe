"""Shared pytest fixtures for the rewrite proxy and dashboard tests."""

from unittest.mock import MagicMock

import pytest

from metric_mate.models.mode import Phase
from metric_mate.services.rewrite.completion import CompletionClient
from metric_mate.services.rewrite.resolver import InstructionResolver
from metric_mate.services.rewrite.service import RewriteService


# ---------------------------------------------------------------------------
# OpenAI mock helpers (re-usable across test files)
# ---------------------------------------------------------------------------

def make_openai_response(text: object) -> MagicMock:
    """Return a mock object that looks like an OpenAI Responses API response."""
    mock_resp = MagicMock()
    mock_resp.output_text = text
    return mock_resp


def make_openai_client(text: object = "Polished text.") -> MagicMock:
    mock_client = MagicMock()
    mock_client.responses.create.return_value = make_openai_response(text)
    return mock_client


def make_failing_client(exc: BaseException) -> MagicMock:
    mock_client = MagicMock()
    mock_client.responses.create.side_effect = exc
    return mock_client


class UpstreamError(Exception):
    """Error shaped like the SDK's: message, status and response.data."""

    def __init__(self, message: str, *, status: int | None = None, data: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = MagicMock(data=data)


def make_service(mock_client: MagicMock, resolver: InstructionResolver | None = None) -> RewriteService:
    return RewriteService(resolver=resolver, client=CompletionClient(client=mock_client))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def colliding_tables() -> tuple[tuple[Phase, dict[str, str]], ...]:
    """Four small tables where 'shared' is registered in midterm and dashboard."""
    return (
        (Phase.KICKOFF, {"k_only": "kickoff template"}),
        (Phase.MIDTERM, {"shared": "midterm template"}),
        (Phase.FINAL, {"f_only": "final template"}),
        (Phase.DASHBOARD, {"shared": "dashboard template", "d_only": "dashboard only"}),
    )


@pytest.fixture
def openai_client(monkeypatch) -> MagicMock:
    """Patch the SDK client factory used by the default CompletionClient."""
    mock_client = make_openai_client()
    monkeypatch.setattr(
        "metric_mate.services.rewrite.completion._get_openai_client",
        lambda timeout_seconds: mock_client,
    )
    return mock_client


@pytest.fixture
def client(openai_client, monkeypatch):
    import app as app_module
    from app import app

    # The app keeps one SDK client for its lifetime; drop it so this test's mock is built.
    monkeypatch.setattr(app_module.rewrite_service.client, "_client", None)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
