"""Assertion API for method checks.

Public exports:
    MethodCheck: Entry point bound to a subject resolver
    has_method: Predicate factory
    assert_has_method / assert_not_has_method: Assertions
    export_subject: Subject formatting for failure messages
"""

from methodcheck.presentation.api.assertions import (
    MethodCheck,
    assert_has_method,
    assert_not_has_method,
    export_subject,
    has_method,
)

__all__ = [
    "MethodCheck",
    "assert_has_method",
    "assert_not_has_method",
    "export_subject",
    "has_method",
]
