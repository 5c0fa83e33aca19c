"""methodcheck - assert that classes and objects have methods with given modifiers."""

__version__ = "0.1.0"

from methodcheck.application.constraints.has_method import HasMethod
from methodcheck.application.services.parser import MethodSpecParser, parse_method_spec
from methodcheck.domain.model.enums import Access
from methodcheck.domain.model.method_spec import MethodSpec
from methodcheck.presentation.api.assertions import (
    MethodCheck,
    assert_has_method,
    assert_not_has_method,
    has_method,
)

__all__ = [
    "Access",
    "HasMethod",
    "MethodCheck",
    "MethodSpec",
    "MethodSpecParser",
    "__version__",
    "assert_has_method",
    "assert_not_has_method",
    "has_method",
    "parse_method_spec",
]
