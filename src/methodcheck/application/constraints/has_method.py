"""HasMethod predicate: subject has a method matching a MethodSpec."""

from __future__ import annotations

from typing import TYPE_CHECKING

from methodcheck.application.services.parser import parse_method_spec
from methodcheck.domain.exceptions import InvalidMethodSpecError, MethodSpecSyntaxError
from methodcheck.infrastructure.reflection import ReflectionResolver

if TYPE_CHECKING:
    from methodcheck.domain.model.method_descriptor import MethodDescriptor
    from methodcheck.domain.model.method_spec import MethodSpec
    from methodcheck.domain.ports.subject_resolver import SubjectResolver


def qualified_name(cls: type) -> str:
    """Format class as module.QualName (builtins without module)."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


class HasMethod:
    """Predicate accepting objects and classes that have the specified method.

    Matching is total: subjects that cannot be reflected as a class and
    classes without the method do not match, nothing is raised.

    Attributes:
        _spec: Method requirements
        _resolver: Subject resolution strategy
    """

    __slots__ = ("_resolver", "_spec")

    def __init__(
        self,
        spec: MethodSpec,
        resolver: SubjectResolver | None = None,
    ) -> None:
        """Initialize predicate.

        Args:
            spec: Method requirements
            resolver: Subject resolution, runtime reflection if None

        Raises:
            TypeError: If spec is None
        """
        if spec is None:
            raise TypeError("spec must not be None")
        self._spec = spec
        self._resolver: SubjectResolver = resolver or ReflectionResolver()

    @classmethod
    def create(cls, spec: str, resolver: SubjectResolver | None = None) -> HasMethod:
        """Create predicate from specification string.

        Args:
            spec: e.g. "foo" or "public static function foo"
            resolver: Subject resolution, runtime reflection if None

        Returns:
            HasMethod for the parsed specification

        Raises:
            InvalidMethodSpecError: If spec is not a valid method specification
        """
        try:
            method_spec = parse_method_spec(spec)
        except MethodSpecSyntaxError as e:
            raise InvalidMethodSpecError(
                context=f"Argument 1 passed to {cls.__qualname__}.create()",
                spec=spec,
                reason=str(e),
            ) from e
        return cls(method_spec, resolver)

    @property
    def spec(self) -> MethodSpec:
        """Method requirements."""
        return self._spec

    def matches(self, subject: object) -> bool:
        """Check subject against the specification.

        Args:
            subject: Object, class, or string naming a class

        Returns:
            True if subject has a method satisfying every constraint
        """
        method = self._find_method(subject)
        return method is not None and self._spec.matches(method)

    def __call__(self, subject: object) -> bool:
        """Alias of matches(), so the predicate composes with filter()."""
        return self.matches(subject)

    def describe(self) -> str:
        """Expectation text, e.g. "has public method foo()"."""
        return f"has {self._spec}()"

    def describe_negated(self) -> str:
        """Negated expectation text, e.g. "does not have public method foo()"."""
        return f"does not have {self._spec}()"

    def explain(self, subject: object) -> str:
        """Explain what was found on the subject.

        Args:
            subject: Object, class, or string naming a class

        Returns:
            Human-readable reason for the match result
        """
        cls = self._resolver.resolve(subject)
        if cls is None:
            return "subject cannot be reflected as a class"

        method = self._resolver.find_method(cls, self._spec.name)
        if method is None:
            return f"{qualified_name(cls)} has no method {self._spec.name}"

        return f"{qualified_name(cls)} has {method}"

    def _find_method(self, subject: object) -> MethodDescriptor | None:
        cls = self._resolver.resolve(subject)
        if cls is None:
            return None
        return self._resolver.find_method(cls, self._spec.name)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"HasMethod({str(self._spec)!r})"
