"""Subject resolver protocol.

Users extend methodcheck by implementing this Protocol, e.g. to resolve
subjects from a plugin registry instead of imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from methodcheck.domain.model.method_descriptor import MethodDescriptor


class SubjectResolver(Protocol):
    """Contract for subject resolution.

    Resolution is total: unknown subjects and absent methods yield None,
    never an exception.

    Example:
        class RegistryResolver:
            def __init__(self, registry: Mapping[str, type]) -> None:
                self._registry = registry

            def resolve(self, subject: object) -> type | None:
                return self._registry.get(subject) if isinstance(subject, str) else None

            def find_method(self, cls: type, name: str) -> MethodDescriptor | None:
                return ReflectionResolver().find_method(cls, name)
    """

    def resolve(self, subject: object) -> type | None:
        """Resolve subject to the class to be examined.

        Args:
            subject: Object, class, or string naming a class

        Returns:
            Class to examine, None if subject cannot be reflected as a class
        """
        ...

    def find_method(self, cls: type, name: str) -> MethodDescriptor | None:
        """Look up method by name.

        Args:
            cls: Class returned by resolve()
            name: Method name as written in the specification

        Returns:
            Descriptor of the method, None if cls has no such method
        """
        ...
