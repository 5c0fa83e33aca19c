"""Application services."""

from methodcheck.application.services.parser import MethodSpecParser, parse_method_spec

__all__ = [
    "MethodSpecParser",
    "parse_method_spec",
]
