"""Domain exceptions: all public errors of methodcheck.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Infrastructure use these, not define their own public exceptions.

Matching is total: only parsing, construction and assertions can fail.
"""

from __future__ import annotations


class MethodCheckError(Exception):
    """Base for all methodcheck error exceptions.

    Allows: except MethodCheckError to catch all library errors.
    """


class MethodSpecSyntaxError(MethodCheckError, SyntaxError):
    """Method specification string violates the grammar.

    Inherits SyntaxError for semantic correctness.

    Attributes:
        remaining: Unconsumed input at the point of failure.
    """

    def __init__(self, remaining: str) -> None:
        """Initialize with unconsumed remainder of the input."""
        self.remaining = remaining
        super().__init__(f'syntax error at "{remaining}"')


class InvalidMethodSpecError(MethodCheckError, ValueError):
    """Argument is not a valid method specification.

    Wraps MethodSpecSyntaxError raised while building a predicate from a
    raw string. Original syntax error preserved via __cause__.

    Attributes:
        context: Where the argument was passed.
        spec: Offending specification string.
        reason: Parser diagnostic.
    """

    def __init__(self, *, context: str, spec: str, reason: str) -> None:
        """Initialize with call context, offending string and diagnostic."""
        self.context = context
        self.spec = spec
        self.reason = reason
        super().__init__(f"{context}: must be method specification, '{spec}' ({reason}) given.")


class InvalidMethodNameError(MethodCheckError, ValueError):
    """Method name is not an identifier.

    Attributes:
        name: Rejected name.
    """

    def __init__(self, name: str) -> None:
        """Initialize with rejected name."""
        self.name = name
        super().__init__(f"method name must be identifier, got {name!r}")


class ConflictingModifiersError(MethodCheckError, ValueError):
    """Abstract and final constraints contradict each other.

    Raised when both are set and at least one of them is required.

    Attributes:
        is_abstract: Abstract constraint.
        is_final: Final constraint.
    """

    def __init__(self, *, is_abstract: bool, is_final: bool) -> None:
        """Initialize with conflicting constraint values."""
        self.is_abstract = is_abstract
        self.is_final = is_final
        super().__init__(
            f"abstract and final are mutually exclusive, "
            f"got is_abstract={is_abstract}, is_final={is_final}"
        )


class HasMethodAssertionError(MethodCheckError, AssertionError):
    """Subject has (or lacks) a method contrary to expectation.

    Inherits AssertionError so test runners report it as a failure.

    Attributes:
        subject: Exported subject text.
        description: Expectation, e.g. "has public method foo()".
        reason: Why the subject did not satisfy the expectation.
        message: Custom message given by the caller (may be empty).
    """

    def __init__(
        self,
        *,
        subject: str,
        description: str,
        reason: str,
        message: str = "",
    ) -> None:
        """Initialize with exported subject, expectation and reason."""
        self.subject = subject
        self.description = description
        self.reason = reason
        self.message = message

        failure = f"Failed asserting that {subject} {description}."
        super().__init__(f"{message}\n{failure}" if message else failure)
