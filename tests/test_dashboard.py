"""Tests for metric_mate.services.dashboard."""

import json
from urllib.parse import parse_qs, urlparse

import pytest

from metric_mate.services.dashboard import (
    build_dashboard_link,
    build_dashboard_payload,
    build_dashboard_view,
    build_kickoff_baseline,
    derive_project_from_kickoff,
    merge_stored_surveys,
    normalize_dashboard_data,
    parse_dashboard_query,
)
from metric_mate.services.dashboard.view import (
    KICKOFF_ONLY_SUMMARY,
    NO_CARD_DATA,
    NO_FINAL_SUMMARY,
    NO_PROJECT_MESSAGE,
)


def make_kickoff(**info) -> dict:
    base = {"projectName": "Atlas", "kickoffDate": "2026-01-05"}
    base.update(info)
    return {"info": base}


# ── derive_project_from_kickoff ─────────────────────────────────────────────

class TestDeriveProjectFromKickoff:
    def test_returns_empty_without_info(self) -> None:
        assert derive_project_from_kickoff(None) == {}
        assert derive_project_from_kickoff({"directory": {}}) == {}

    def test_direct_string_fields(self) -> None:
        project = derive_project_from_kickoff(
            {"info": {"name": "Atlas", "summary": "Rebuild", "clientName": "Acme", "pm": "Dana", "date": "2026-02-01"}}
        )
        assert project == {
            "name": "Atlas",
            "summary": "Rebuild",
            "client": "Acme",
            "pm": "Dana",
            "designer": "",
            "dev": "",
            "kickoffDate": "2026-02-01",
        }

    def test_directory_ids(self) -> None:
        kickoff = {
            "info": {"projectName": "Atlas", "clientId": 1, "pmId": 0, "devId": 5, "designer": "Lee"},
            "directory": {"clients": ["Acme", "Globex"], "pms": ["Dana"], "devs": ["Sam"]},
        }
        project = derive_project_from_kickoff(kickoff)
        assert project["client"] == "Globex"
        assert project["pm"] == "Dana"
        assert project["dev"] == ""  # id out of range
        assert project["designer"] == "Lee"

    def test_kickoff_date_falls_back_to_top_level(self) -> None:
        project = derive_project_from_kickoff({"info": {"projectName": "A"}, "kickoffDate": "2026-03-03"})
        assert project["kickoffDate"] == "2026-03-03"


# ── normalize_dashboard_data ────────────────────────────────────────────────

class TestNormalizeDashboardData:
    def test_none_for_non_object(self) -> None:
        assert normalize_dashboard_data(None) is None
        assert normalize_dashboard_data([1, 2]) is None

    def test_legacy_flat_shape(self) -> None:
        data = normalize_dashboard_data({"kickoff": make_kickoff(client="Acme"), "midterm": None, "final": None})
        assert data is not None
        assert data["project"]["name"] == "Atlas"
        assert data["project"]["client"] == "Acme"
        assert data["final"] is None
        assert data["finalSummary"] == ""
        assert data["goals"] == []

    def test_new_shape_project_wins_over_kickoff(self) -> None:
        raw = {
            "project": {"name": "Atlas v2", "finalReviewDate": "2026-06-01"},
            "kickoff": make_kickoff(client="Acme"),
            "final": {"wins": "Shipped"},
            "finalSummary": "All done.",
        }
        data = normalize_dashboard_data(raw)
        assert data["project"]["name"] == "Atlas v2"
        assert data["project"]["client"] == "Acme"
        assert data["project"]["finalReviewDate"] == "2026-06-01"
        assert data["finalSummary"] == "All done."

    def test_goals_fall_back_to_midterm_statuses(self) -> None:
        data = normalize_dashboard_data({"midterm": {"goalStatuses": [{"id": 1}]}})
        assert data["goals"] == [{"id": 1}]

    def test_goals_are_copied(self) -> None:
        goals = [{"id": 1}]
        data = normalize_dashboard_data({"goals": goals})
        data["goals"].append({"id": 2})
        assert goals == [{"id": 1}]

    def test_force_phase_from_phase(self) -> None:
        assert normalize_dashboard_data({"phase": "kickoff"})["forcePhase"] == "kickoff"

    def test_does_not_mutate_project(self) -> None:
        project = {"name": "Atlas"}
        normalize_dashboard_data({"project": project, "kickoff": make_kickoff(client="Acme")})
        assert project == {"name": "Atlas"}


# ── merge_stored_surveys ────────────────────────────────────────────────────

class TestMergeStoredSurveys:
    STORED = {
        "metricMateKickoff": {"info": {"projectName": "Atlas"}},
        "metricMateMidterm": {"healthScore": 4},
        "metricMateFinal": {"goals": [{"id": "g1"}], "wins": "Shipped"},
    }

    def test_fills_missing_surveys(self) -> None:
        data = merge_stored_surveys({"kickoff": None, "final": None}, self.STORED)
        assert data["kickoff"] == self.STORED["metricMateKickoff"]
        assert data["midterm"] == self.STORED["metricMateMidterm"]
        assert data["final"] == self.STORED["metricMateFinal"]
        assert data["goals"] == [{"id": "g1"}]

    def test_keeps_snapshot_surveys(self) -> None:
        snapshot = {"final": {"wins": "Snapshot"}, "goals": [{"id": "s1"}]}
        data = merge_stored_surveys(snapshot, self.STORED)
        assert data["final"] == {"wins": "Snapshot"}
        assert data["goals"] == [{"id": "s1"}]

    def test_kickoff_forced_snapshot_only_takes_kickoff(self) -> None:
        data = merge_stored_surveys({"forcePhase": "kickoff"}, self.STORED)
        assert data["kickoff"] == self.STORED["metricMateKickoff"]
        assert "midterm" not in data
        assert "final" not in data
        assert "goals" not in data

    def test_stitches_without_snapshot(self) -> None:
        data = merge_stored_surveys(None, {"metricMateKickoff": {"info": {}}})
        assert data == {"kickoff": {"info": {}}, "midterm": None, "final": None, "goals": []}

    def test_none_when_nothing_stored(self) -> None:
        assert merge_stored_surveys(None, {}) is None


# ── build_dashboard_view ────────────────────────────────────────────────────

class TestBuildDashboardView:
    def test_empty_without_project_name(self) -> None:
        assert build_dashboard_view(None) == {"empty": True, "message": NO_PROJECT_MESSAGE}
        assert build_dashboard_view({"kickoff": {"info": {}}})["empty"] is True

    def test_kickoff_only_view(self) -> None:
        kickoff = make_kickoff(client="Acme", pm="Dana")
        kickoff["productGoals"] = [
            {"label": "Faster checkout", "selected": True},
            {"label": "Dark mode", "selected": False},
        ]
        kickoff["userPains"] = [{"label": "Slow search", "selected": True}]

        view = build_dashboard_view({"kickoff": kickoff})

        assert view["view"] == "kickoff"
        assert view["title"] == "Atlas"
        assert view["meta"] == "Acme • PM: Dana"
        assert view["dates"] == "Kickoff: 2026-01-05"
        assert view["chips"] == [
            {"label": "Kickoff completed", "tone": "primary"},
            {"label": "Midterm not started", "tone": "muted"},
            {"label": "Final review not started", "tone": "muted"},
        ]
        assert view["cards"]["outcomes"] == "No business goals were selected during kickoff."
        assert view["cards"]["results"].startswith("Baseline product / experience focus at kickoff: Faster checkout. ")
        assert view["cards"]["challenges"] == "User pain points we’re targeting: Slow search."
        assert view["summary"] == KICKOFF_ONLY_SUMMARY

    def test_final_view(self) -> None:
        raw = {
            "project": {"name": "Atlas", "finalReviewDate": "2026-06-01"},
            "kickoff": make_kickoff(),
            "midterm": {"risks": ["Scope creep"]},
            "final": {"outcomes": "Launched", "wins": "NPS up"},
            "finalSummary": "",
        }

        view = build_dashboard_view(raw)

        assert view["view"] == "final"
        assert view["dates"] == "Kickoff: 2026-01-05 • Final review: 2026-06-01"
        assert {"label": "Midterm completed", "tone": "info"} in view["chips"]
        assert {"label": "Final review completed", "tone": "success"} in view["chips"]
        assert view["cards"]["outcomes"] == "Launched"
        assert view["cards"]["results"] == NO_CARD_DATA
        assert view["summary"] == NO_FINAL_SUMMARY

    def test_final_review_date_hidden_without_final(self) -> None:
        view = build_dashboard_view({"project": {"name": "Atlas", "finalReviewDate": "2026-06-01"}})
        assert view["dates"] == ""

    def test_text_is_not_escaped(self) -> None:
        view = build_dashboard_view({"project": {"name": "<b>Atlas</b>"}, "final": {"wins": "a & b"}})
        assert view["title"] == "<b>Atlas</b>"
        assert view["cards"]["wins"] == "a & b"

    def test_non_string_client_in_meta(self) -> None:
        view = build_dashboard_view({"project": {"name": "Atlas", "client": 42, "pm": "Ana"}})
        assert view["meta"] == "42 • PM: Ana"


class TestBuildKickoffBaseline:
    def test_goals_nested_under_goals_key(self) -> None:
        kickoff = {"goals": {"userGoals": [{"label": "Self-serve", "selected": True}]}}
        cards = build_kickoff_baseline(kickoff)
        assert cards["wins"].startswith("Key user wins we’re aiming for: Self-serve.")

    def test_no_kickoff(self) -> None:
        cards = build_kickoff_baseline(None)
        assert cards["outcomes"] == "No business goals were selected during kickoff."
        assert set(cards) == {"outcomes", "results", "wins", "challenges", "learnings", "nextSteps"}


# ── link helpers ────────────────────────────────────────────────────────────

class TestDashboardLink:
    def test_payload_from_storage(self) -> None:
        payload = build_dashboard_payload({"metricMateKickoff": {"info": {}}})
        assert payload == {"kickoff": {"info": {}}, "midterm": None, "final": None}

    def test_link_carries_payload(self) -> None:
        payload = {"kickoff": {"info": {"projectName": "A & B"}}}
        link = build_dashboard_link(payload)

        parsed = urlparse(link)
        assert parsed.path == "dashboard.html"
        value = parse_qs(parsed.query)["data"][0]
        assert parse_dashboard_query(value) == payload

    def test_parse_still_encoded_value(self) -> None:
        assert parse_dashboard_query("%7B%22a%22%3A1%7D") == {"a": 1}

    def test_parse_missing_value(self) -> None:
        assert parse_dashboard_query(None) is None
        assert parse_dashboard_query("") is None

    def test_parse_invalid_value(self) -> None:
        with pytest.raises(ValueError, match="Invalid dashboard data"):
            parse_dashboard_query("{broken")

    def test_link_roundtrips_through_json(self) -> None:
        link = build_dashboard_link({"final": None}, base="/dash")
        assert link.startswith("/dash?data=")
        assert json.loads(parse_qs(urlparse(link).query)["data"][0]) == {"final": None}
