"""Reporters for failed method assertions.

ConsoleReporter renders with rich into a string.
"""

from methodcheck.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
]
