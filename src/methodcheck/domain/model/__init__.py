"""Domain model: value objects and enumerations."""

from methodcheck.domain.model.enums import ACCESS_MASK, Access, Modifier, ModifierClause, Visibility
from methodcheck.domain.model.method_descriptor import MethodDescriptor
from methodcheck.domain.model.method_spec import MethodSpec

__all__ = [
    "ACCESS_MASK",
    "Access",
    "MethodDescriptor",
    "MethodSpec",
    "Modifier",
    "ModifierClause",
    "Visibility",
]
