"""Plain data types shared by the services."""

from .dashboard import DashboardCards, DashboardData, DashboardProject, DashboardView, StatusChip
from .mode import Mode, Phase
from .rewrite import (
    CompletionFailure,
    CompletionResult,
    CompletionSuccess,
    RewriteErrorBody,
    RewriteRequest,
    RewriteSuccessBody,
)

__all__ = [
    "CompletionFailure",
    "CompletionResult",
    "CompletionSuccess",
    "DashboardCards",
    "DashboardData",
    "DashboardProject",
    "DashboardView",
    "Mode",
    "Phase",
    "RewriteErrorBody",
    "RewriteRequest",
    "RewriteSuccessBody",
    "StatusChip",
]
