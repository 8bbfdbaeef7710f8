"""Channel grammar: parsing, expansion and resolution."""

from systems.engine.parser import full, must_parse, parse, parse_verbatim
from systems.engine.resolver import resolve, resolve_pinned

__all__ = [
    "full",
    "must_parse",
    "parse",
    "parse_verbatim",
    "resolve",
    "resolve_pinned",
]
