"""Reflection adapter: resolve subjects and describe methods via runtime introspection."""

from __future__ import annotations

import builtins
import importlib
from typing import TYPE_CHECKING

from methodcheck.domain.model.enums import Visibility
from methodcheck.domain.model.method_descriptor import MethodDescriptor

if TYPE_CHECKING:
    from types import ModuleType

# Scalar values are not reflected as instances of their type
_SCALAR_TYPES = (type(None), bool, int, float, complex, bytes, bytearray)

_IMPORT_ERRORS = (ImportError, AttributeError, ValueError, TypeError)


def get_visibility(name: str) -> Visibility:
    """Determine visibility from Python naming convention.

    Args:
        name: Identifier name

    Returns:
        Visibility based on underscore prefix

    Rules:
        __name__ (dunder) → PUBLIC (special methods)
        __name (not __name__) → PRIVATE (mangled)
        _name → PROTECTED
        name → PUBLIC
    """
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    if name.startswith("__"):
        return Visibility.PRIVATE
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def mangle(owner: type, name: str) -> str:
    """Apply private name mangling: __x in class _Owner → _Owner__x."""
    return f"_{owner.__name__.lstrip('_')}{name}"


class ReflectionResolver:
    """Resolves subjects by importing and introspecting live classes.

    Stateless - no state between calls.

    Subjects:
        class              → itself (ABCs, Protocols, mixins included)
        "pkg.mod.Class"    → imported class (also "pkg.mod:Class", "int")
        None, bool, int, float, complex, bytes, bytearray → not reflectable
        any other object   → its type
    """

    def resolve(self, subject: object) -> type | None:
        """Resolve subject to the class to be examined.

        Args:
            subject: Object, class, or string naming a class

        Returns:
            Class to examine, None if subject cannot be reflected as a class
        """
        match subject:
            case type():
                return subject
            case str():
                return import_class(subject)
            case _ if isinstance(subject, _SCALAR_TYPES):
                return None
            case _:
                return type(subject)

    def find_method(self, cls: type, name: str) -> MethodDescriptor | None:
        """Look up method by name along the MRO.

        Private names (__x) also match their mangled form (_Owner__x).
        Properties, data attributes and nested classes are not methods.

        Args:
            cls: Class to examine
            name: Method name as written in the specification

        Returns:
            Descriptor of the method, None if cls has no such method
        """
        visibility = get_visibility(name)

        for owner in cls.__mro__:
            namespace = vars(owner)
            if name in namespace:
                attribute = namespace[name]
            elif visibility is Visibility.PRIVATE and mangle(owner, name) in namespace:
                attribute = namespace[mangle(owner, name)]
            else:
                continue
            # First definition along the MRO shadows the rest
            return describe_attribute(name, attribute, visibility)

        return None


def describe_attribute(
    name: str,
    attribute: object,
    visibility: Visibility,
) -> MethodDescriptor | None:
    """Describe class attribute as method.

    Args:
        name: Method name
        attribute: Raw attribute from class __dict__
        visibility: Visibility derived from name

    Returns:
        MethodDescriptor, None if attribute is not a method
    """
    match attribute:
        case staticmethod() | classmethod():
            is_static = True
            function = attribute.__func__
        case type():
            return None
        case _ if callable(attribute):
            is_static = False
            function = attribute
        case _:
            return None

    return MethodDescriptor.create(
        name,
        visibility=visibility,
        is_static=is_static,
        is_abstract=bool(getattr(attribute, "__isabstractmethod__", False)),
        is_final=_is_final(attribute) or _is_final(function),
    )


def _is_final(obj: object) -> bool:
    # typing.final sets __final__ = True where the object accepts attributes
    return getattr(obj, "__final__", False) is True


def import_class(path: str) -> type | None:
    """Import class by dotted path.

    Accepts "pkg.mod.Class", "pkg.mod.Outer.Inner", "pkg.mod:Class"
    and builtin type names ("int").

    Args:
        path: Path naming a class

    Returns:
        Class, None if path cannot be imported or does not name a class
    """
    if ":" in path:
        module_name, _, qualname = path.partition(":")
        target = _import_attribute(module_name, qualname.split("."))
    elif "." not in path:
        target = getattr(builtins, path, None)
    else:
        target = _import_longest_prefix(path.split("."))

    return target if isinstance(target, type) else None


def _import_longest_prefix(parts: list[str]) -> object | None:
    """Import longest importable module prefix, then walk attributes."""
    for split in range(len(parts) - 1, 0, -1):
        target = _import_attribute(".".join(parts[:split]), parts[split:])
        if target is not None:
            return target
    return None


def _import_attribute(module_name: str, attributes: list[str]) -> object | None:
    try:
        target: object = _import_module(module_name)
        for attribute in attributes:
            target = getattr(target, attribute)
    except _IMPORT_ERRORS:
        return None
    return target


def _import_module(module_name: str) -> ModuleType:
    if not module_name:
        raise ValueError("empty module name")
    return importlib.import_module(module_name)
