"""Resolved method properties."""

from __future__ import annotations

from dataclasses import dataclass

from methodcheck.domain.model.enums import ACCESS_MASK, Modifier, Visibility


@dataclass(frozen=True, slots=True)
class MethodDescriptor:
    """Actual modifiers of a method found on a subject.

    Produced by a SubjectResolver, consumed by MethodSpec.matches().

    Attributes:
        name: Method name as requested (unmangled)
        modifiers: Combined modifier bits, exactly one visibility bit set
    """

    name: str
    modifiers: Modifier

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")

        if not isinstance(self.modifiers, Modifier):
            raise TypeError(f"modifiers must be Modifier, got {type(self.modifiers).__name__}")

        visibility_bits = self.modifiers & ACCESS_MASK
        if visibility_bits.bit_count() != 1:
            raise ValueError(f"exactly one visibility bit required, got {visibility_bits!r}")

    @classmethod
    def create(
        cls,
        name: str,
        *,
        visibility: Visibility,
        is_static: bool = False,
        is_abstract: bool = False,
        is_final: bool = False,
    ) -> MethodDescriptor:
        """Build descriptor from separate flags.

        Args:
            name: Method name
            visibility: Visibility level
            is_static: staticmethod or classmethod
            is_abstract: Marked abstract
            is_final: Marked final

        Returns:
            MethodDescriptor with combined modifier bits
        """
        modifiers = visibility.modifier
        if is_static:
            modifiers |= Modifier.STATIC
        if is_abstract:
            modifiers |= Modifier.ABSTRACT
        if is_final:
            modifiers |= Modifier.FINAL
        return cls(name=name, modifiers=modifiers)

    @property
    def visibility(self) -> Visibility:
        """Visibility level of the method."""
        if self.is_private:
            return Visibility.PRIVATE
        if self.is_protected:
            return Visibility.PROTECTED
        return Visibility.PUBLIC

    @property
    def is_static(self) -> bool:
        return Modifier.STATIC in self.modifiers

    @property
    def is_public(self) -> bool:
        return Modifier.PUBLIC in self.modifiers

    @property
    def is_protected(self) -> bool:
        return Modifier.PROTECTED in self.modifiers

    @property
    def is_private(self) -> bool:
        return Modifier.PRIVATE in self.modifiers

    @property
    def is_abstract(self) -> bool:
        return Modifier.ABSTRACT in self.modifiers

    @property
    def is_final(self) -> bool:
        return Modifier.FINAL in self.modifiers

    def __str__(self) -> str:
        """Format actual modifiers, e.g. 'final public static method foo'."""
        parts = []
        if self.is_final:
            parts.append("final")
        if self.is_abstract:
            parts.append("abstract")
        parts.append(self.visibility.name.lower())
        if self.is_static:
            parts.append("static")
        parts.extend(("method", self.name))
        return " ".join(parts)
