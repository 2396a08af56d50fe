"""Metric Mate: survey rewrite proxy and dashboard helpers."""

from .services.rewrite.resolver import InstructionResolver, get_default_resolver
from .services.rewrite.service import RewriteService, RewriteValidationError, rewrite_response

__all__ = [
    "InstructionResolver",
    "RewriteService",
    "RewriteValidationError",
    "get_default_resolver",
    "rewrite_response",
]
