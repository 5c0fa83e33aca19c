"""Domain enumerations: the modifier vocabulary."""

from __future__ import annotations

from enum import Enum, IntFlag, auto


class Modifier(IntFlag):
    """Method modifier bits (reflection bit values)."""

    PUBLIC = 1
    PROTECTED = 2
    PRIVATE = 4
    STATIC = 16
    FINAL = 32
    ABSTRACT = 64


ACCESS_MASK = Modifier.PUBLIC | Modifier.PROTECTED | Modifier.PRIVATE


class Visibility(Enum):
    """Code element visibility by naming convention."""

    PUBLIC = auto()  # no underscore
    PROTECTED = auto()  # _name
    PRIVATE = auto()  # __name

    @property
    def modifier(self) -> Modifier:
        """Single visibility bit of this level."""
        return _VISIBILITY_BITS[self]


_VISIBILITY_BITS = {
    Visibility.PUBLIC: Modifier.PUBLIC,
    Visibility.PROTECTED: Modifier.PROTECTED,
    Visibility.PRIVATE: Modifier.PRIVATE,
}


class Access(Enum):
    """Access constraint: one visibility, or any visibility except one.

    Value is the keyword used in method specifications.
    """

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    NOT_PUBLIC = "!public"
    NOT_PROTECTED = "!protected"
    NOT_PRIVATE = "!private"

    @property
    def bits(self) -> Modifier:
        """Visibility bits allowed by this constraint."""
        return _ACCESS_BITS[self]

    @property
    def keyword(self) -> str:
        """Keyword as written in method specifications."""
        return self.value

    @classmethod
    def from_keyword(cls, keyword: str) -> Access:
        """Look up access constraint by keyword.

        Args:
            keyword: One of public, protected, private, optionally negated with "!"

        Returns:
            Matching Access member

        Raises:
            ValueError: If keyword is not an access keyword
        """
        try:
            return cls(keyword)
        except ValueError:
            raise ValueError(f"unknown access keyword {keyword!r}") from None


_ACCESS_BITS = {
    Access.PUBLIC: Modifier.PUBLIC,
    Access.PROTECTED: Modifier.PROTECTED,
    Access.PRIVATE: Modifier.PRIVATE,
    Access.NOT_PUBLIC: ACCESS_MASK & ~Modifier.PUBLIC,
    Access.NOT_PROTECTED: ACCESS_MASK & ~Modifier.PROTECTED,
    Access.NOT_PRIVATE: ACCESS_MASK & ~Modifier.PRIVATE,
}


class ModifierClause(Enum):
    """Grammar category of a modifier token.

    Each category may appear at most once in a method specification.
    """

    ABSTRACT = "abstract"
    FINAL = "final"
    STATIC = "static"
    ACCESS = "access"

    @property
    def keywords(self) -> tuple[str, ...]:
        """All tokens of this category, positive and negated."""
        if self is ModifierClause.ACCESS:
            return tuple(access.keyword for access in Access)
        return (self.value, f"!{self.value}")
