"""methodcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, re, collections.abc
"""

from methodcheck.domain.exceptions import (
    ConflictingModifiersError,
    HasMethodAssertionError,
    InvalidMethodNameError,
    InvalidMethodSpecError,
    MethodCheckError,
    MethodSpecSyntaxError,
)
from methodcheck.domain.model import (
    ACCESS_MASK,
    Access,
    MethodDescriptor,
    MethodSpec,
    Modifier,
    ModifierClause,
    Visibility,
)
from methodcheck.domain.ports import SubjectResolver

__all__ = [
    "ACCESS_MASK",
    "Access",
    "ConflictingModifiersError",
    "HasMethodAssertionError",
    "InvalidMethodNameError",
    "InvalidMethodSpecError",
    "MethodCheckError",
    "MethodDescriptor",
    "MethodSpec",
    "MethodSpecSyntaxError",
    "Modifier",
    "ModifierClause",
    "SubjectResolver",
    "Visibility",
]
