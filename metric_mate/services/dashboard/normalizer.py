"""Normalize dashboard payloads coming from the survey pages."""

import logging
from typing import Any, Mapping

from constants import FINAL_STORAGE_KEY, KICKOFF_STORAGE_KEY, MIDTERM_STORAGE_KEY
from metric_mate.models.dashboard import DashboardData, DashboardProject

logger = logging.getLogger(__name__)

# (project field, id field in kickoff.info, list in kickoff.directory, fallback name fields)
_DIRECTORY_FIELDS: tuple[tuple[str, str, str, tuple[str, ...]], ...] = (
    ("client", "clientId", "clients", ("client", "clientName")),
    ("pm", "pmId", "pms", ("pm", "pmName")),
    ("designer", "designerId", "designers", ("designer", "designerName")),
    ("dev", "devId", "devs", ("dev", "devName")),
)


def derive_project_from_kickoff(kickoff: object) -> DashboardProject:
    """
    Build project metadata from a kickoff survey payload.

    People may be stored either as an index into ``kickoff.directory`` lists
    (``clientId`` -> ``directory.clients``) or as plain strings on ``info``.
    """
    if not isinstance(kickoff, dict) or not isinstance(kickoff.get("info"), dict):
        return {}
    info: dict[str, Any] = kickoff["info"]
    directory = kickoff.get("directory")
    if not isinstance(directory, dict):
        directory = {}

    project: DashboardProject = {
        "name": _first_str(info, "projectName", "name"),
        "summary": _first_str(info, "projectSummary", "summary"),
    }
    for field, id_key, list_key, fallbacks in _DIRECTORY_FIELDS:
        project[field] = _directory_name(info, directory, id_key, list_key, fallbacks)  # type: ignore[literal-required]
    project["kickoffDate"] = (
        _first_str(info, "kickoffDate", "date", "startDate") or _first_str(kickoff, "kickoffDate")
    )
    return project


def normalize_dashboard_data(raw: object) -> DashboardData | None:
    """
    Normalize either payload shape into one dict.

    The current shape carries ``project``/``final``/``finalSummary``; the
    legacy shape is a flat ``{kickoff, midterm, final}``. Fields derived from
    kickoff only fill what ``project`` does not already set.
    """
    if not isinstance(raw, dict):
        return None

    midterm = _survey(raw.get("midterm"))
    goals: list[Any]
    if isinstance(raw.get("goals"), list):
        goals = list(raw["goals"])
    elif midterm is not None and isinstance(midterm.get("goalStatuses"), list):
        goals = list(midterm["goalStatuses"])
    else:
        goals = []

    project = raw.get("project")
    data: DashboardData = {
        "forcePhase": raw.get("forcePhase") or raw.get("phase") or None,
        "kickoff": _survey(raw.get("kickoff")),
        "midterm": midterm,
        "final": _survey(raw.get("final")),
        "goals": goals,
        "finalSummary": raw.get("finalSummary") or "",
        "project": dict(project) if isinstance(project, dict) else {},  # type: ignore[typeddict-item]
    }

    if data["kickoff"] is not None:
        from_kickoff = derive_project_from_kickoff(data["kickoff"])
        data["project"] = {**from_kickoff, **data["project"]}  # type: ignore[typeddict-item]

    logger.debug(
        "Normalized dashboard data kickoff=%s midterm=%s final=%s goals=%d",
        data["kickoff"] is not None,
        data["midterm"] is not None,
        data["final"] is not None,
        len(goals),
    )
    return data


def merge_stored_surveys(snapshot: object, stored: Mapping[str, object]) -> dict[str, Any] | None:
    """
    Combine a saved dashboard snapshot with the individually stored surveys.

    Missing survey payloads in the snapshot are filled from ``stored``. A
    snapshot forced to the kickoff phase only takes the kickoff survey. With
    no snapshot the stored surveys are stitched together, or None is returned
    when there are none.
    """
    kickoff = _survey(stored.get(KICKOFF_STORAGE_KEY))
    midterm = _survey(stored.get(MIDTERM_STORAGE_KEY))
    final = _survey(stored.get(FINAL_STORAGE_KEY))

    if isinstance(snapshot, dict):
        data = dict(snapshot)
        force_phase = data.get("forcePhase") or data.get("phase") or None
        allow_other_surveys = force_phase != "kickoff"

        if _survey(data.get("kickoff")) is None and kickoff is not None:
            data["kickoff"] = kickoff
        if allow_other_surveys:
            if _survey(data.get("midterm")) is None and midterm is not None:
                data["midterm"] = midterm
            if _survey(data.get("final")) is None and final is not None:
                data["final"] = final

        # Final goals win so the final view renders with them.
        has_goals = isinstance(data.get("goals"), list) and bool(data["goals"])
        final_goals = final.get("goals") if final is not None else None
        if allow_other_surveys and not has_goals and isinstance(final_goals, list) and final_goals:
            data["goals"] = list(final_goals)
        logger.debug("Merged stored surveys into snapshot force_phase=%s", force_phase)
        return data

    if kickoff is None and midterm is None and final is None:
        logger.debug("No dashboard snapshot and no stored surveys.")
        return None

    goals = final.get("goals") if final is not None else None
    return {
        "kickoff": kickoff,
        "midterm": midterm,
        "final": final,
        "goals": list(goals) if isinstance(goals, list) else [],
    }


def _survey(value: object) -> dict[str, Any] | None:
    return value if isinstance(value, dict) else None


def _first_str(source: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = source.get(key)
        if value:
            return str(value)
    return ""


def _directory_name(
    info: Mapping[str, Any],
    directory: Mapping[str, Any],
    id_key: str,
    list_key: str,
    fallbacks: tuple[str, ...],
) -> str:
    index = info.get(id_key)
    names = directory.get(list_key)
    if isinstance(index, int) and not isinstance(index, bool) and isinstance(names, list):
        if 0 <= index < len(names) and names[index]:
            return str(names[index])
        return ""
    return _first_str(info, *fallbacks)
