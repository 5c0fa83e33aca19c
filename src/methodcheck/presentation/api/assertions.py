"""Assertion API for method checks.

Entry point for method assertions in tests.

Example:
    assert_has_method("public static function create", "myapp.domain.User")
    assert_not_has_method("__secret", user)

    check = MethodCheck()
    services = filter(check.has_method("abstract function handle"), candidates)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.pretty import pretty_repr

from methodcheck.application.constraints.has_method import HasMethod, qualified_name
from methodcheck.domain.exceptions import HasMethodAssertionError
from methodcheck.domain.model.method_spec import MethodSpec

if TYPE_CHECKING:
    from methodcheck.domain.ports.subject_resolver import SubjectResolver


def export_subject(subject: object) -> str:
    """Format subject for failure messages.

    Strings and classes are quoted names, other values use pretty repr.

    Args:
        subject: Asserted subject

    Returns:
        e.g. "'myapp.User'", "123", "<myapp.User object at 0x...>"
    """
    match subject:
        case str():
            return f"'{subject}'"
        case type():
            return f"'{qualified_name(subject)}'"
        case _:
            return pretty_repr(subject)


class MethodCheck:
    """Entry point for method assertions.

    Attributes:
        _resolver: Subject resolution shared by created predicates
    """

    def __init__(self, resolver: SubjectResolver | None = None) -> None:
        """Initialize method checker.

        Args:
            resolver: Subject resolution, runtime reflection if None
        """
        self._resolver = resolver

    def has_method(self, spec: str | MethodSpec) -> HasMethod:
        """Create predicate: subject has the specified method.

        Args:
            spec: Specification string or parsed MethodSpec

        Returns:
            HasMethod predicate

        Raises:
            InvalidMethodSpecError: If spec string is not a valid method specification
        """
        if isinstance(spec, MethodSpec):
            return HasMethod(spec, self._resolver)
        return HasMethod.create(spec, self._resolver)

    def assert_has_method(
        self,
        spec: str | MethodSpec,
        subject: object,
        message: str = "",
    ) -> None:
        """Assert that subject has the specified method.

        Args:
            spec: Method name and optionally modifiers
            subject: Object, class, or string naming a class
            message: Optional failure message

        Raises:
            HasMethodAssertionError: If subject has no such method
            InvalidMethodSpecError: If spec string is not a valid method specification
        """
        constraint = self.has_method(spec)
        if not constraint.matches(subject):
            raise HasMethodAssertionError(
                subject=export_subject(subject),
                description=constraint.describe(),
                reason=constraint.explain(subject),
                message=message,
            )

    def assert_not_has_method(
        self,
        spec: str | MethodSpec,
        subject: object,
        message: str = "",
    ) -> None:
        """Assert that subject has no method matching the specification.

        Args:
            spec: Method name and optionally modifiers
            subject: Object, class, or string naming a class
            message: Optional failure message

        Raises:
            HasMethodAssertionError: If subject has such method
            InvalidMethodSpecError: If spec string is not a valid method specification
        """
        constraint = self.has_method(spec)
        if constraint.matches(subject):
            raise HasMethodAssertionError(
                subject=export_subject(subject),
                description=constraint.describe_negated(),
                reason=constraint.explain(subject),
                message=message,
            )


_DEFAULT_CHECK = MethodCheck()


def has_method(spec: str | MethodSpec) -> HasMethod:
    """Create predicate with runtime reflection. See MethodCheck.has_method()."""
    return _DEFAULT_CHECK.has_method(spec)


def assert_has_method(spec: str | MethodSpec, subject: object, message: str = "") -> None:
    """Assert with runtime reflection. See MethodCheck.assert_has_method()."""
    _DEFAULT_CHECK.assert_has_method(spec, subject, message)


def assert_not_has_method(spec: str | MethodSpec, subject: object, message: str = "") -> None:
    """Assert with runtime reflection. See MethodCheck.assert_not_has_method()."""
    _DEFAULT_CHECK.assert_not_has_method(spec, subject, message)
