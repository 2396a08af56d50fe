from .link import build_dashboard_link, build_dashboard_payload, parse_dashboard_query
from .normalizer import derive_project_from_kickoff, merge_stored_surveys, normalize_dashboard_data
from .view import build_dashboard_view, build_kickoff_baseline

__all__ = [
    "build_dashboard_link",
    "build_dashboard_payload",
    "build_dashboard_view",
    "build_kickoff_baseline",
    "derive_project_from_kickoff",
    "merge_stored_surveys",
    "normalize_dashboard_data",
    "parse_dashboard_query",
]
