"""Constraints over reflectable subjects."""

from methodcheck.application.constraints.has_method import HasMethod

__all__ = [
    "HasMethod",
]
