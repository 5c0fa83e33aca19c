"""Application layer for method checks.

Components:
- services: MethodSpecParser (specification strings → MethodSpec)
- constraints: HasMethod predicate
- reporters: Output formatting (rich console)
"""

from methodcheck.application.constraints import HasMethod
from methodcheck.application.reporters import ConsoleConfig, ConsoleReporter
from methodcheck.application.services import MethodSpecParser, parse_method_spec

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "HasMethod",
    "MethodSpecParser",
    "parse_method_spec",
]
