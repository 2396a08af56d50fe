from .completion import CompletionClient
from .resolver import InstructionResolver, get_default_resolver
from .service import RewriteService, RewriteValidationError, build_input, rewrite_response

__all__ = [
    "CompletionClient",
    "InstructionResolver",
    "RewriteService",
    "RewriteValidationError",
    "build_input",
    "get_default_resolver",
    "rewrite_response",
]
