"""Trade routing through the reference asset."""

from amm_quote.routing.resolver import RouteResolver, default_resolver, resolve
from amm_quote.routing.types import Hop, HopResult, RouteResult

__all__ = [
    "Hop",
    "HopResult",
    "RouteResult",
    "RouteResolver",
    "default_resolver",
    "resolve",
]
