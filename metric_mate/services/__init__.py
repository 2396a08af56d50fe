"""Service layer exports."""

from .rewrite.service import RewriteService
from .dashboard.view import build_dashboard_view

__all__ = ["RewriteService", "build_dashboard_view"]
