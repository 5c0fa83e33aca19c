"""Parser service: method specification string → MethodSpec.

Grammar:
    spec    := name | clause* "function" name
    clause  := abstract | final | static | access
    abstract := "abstract" | "!abstract"
    final   := "final" | "!final"
    static  := "static" | "!static"
    access  := ["!"] ("public" | "protected" | "private")
    name    := [A-Za-z_][A-Za-z0-9_]*

Clauses come in any order, each category at most once.
Abstract and final are mutually exclusive unless both are negated.

FAIL-FIRST: MethodSpecSyntaxError on any deviation, reporting the
unconsumed input at the point of failure.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from methodcheck.domain.exceptions import MethodSpecSyntaxError
from methodcheck.domain.model.enums import Access, ModifierClause
from methodcheck.domain.model.method_spec import IDENTIFIER_RE, MethodSpec, conflicting

if TYPE_CHECKING:
    from collections.abc import Mapping

# At most one clause per category
MAX_CLAUSES = len(ModifierClause)


def _keyword_pattern(keywords: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    return re.compile(rf"(?:{alternatives})\b", re.ASCII)


# Tried in enum order: abstract, final, static, access
CLAUSE_PATTERNS: Mapping[ModifierClause, re.Pattern[str]] = MappingProxyType(
    {clause: _keyword_pattern(clause.keywords) for clause in ModifierClause}
)
FUNCTION_PATTERN = _keyword_pattern(("function",))
NAME_PATTERN = re.compile(rf"{IDENTIFIER_RE.pattern}\b", re.ASCII)


@dataclass(slots=True)
class _ParseState:
    """Mutable state of a single parse() call.

    Attributes:
        remaining: Unconsumed input
        pending: Clause categories not consumed yet
    """

    remaining: str
    pending: list[ModifierClause]
    is_static: bool | None = None
    access: Access | None = None
    is_abstract: bool | None = None
    is_final: bool | None = None

    def consume(self, pattern: re.Pattern[str]) -> str | None:
        """Consume pattern at start of remaining input.

        Returns:
            Matched token, None if pattern does not match (nothing consumed)
        """
        match = pattern.match(self.remaining)
        if match is None:
            return None
        self.remaining = self.remaining[match.end() :]
        return match.group()

    def skip_whitespace(self) -> None:
        self.remaining = self.remaining.lstrip()


class MethodSpecParser:
    """Parses method specification strings.

    Stateless - safe to share between threads and calls.

    Example:
        parser = MethodSpecParser()
        parser.parse("public static function create")
        parser.parse("create")  # name only, modifiers unconstrained
    """

    def parse(self, text: str) -> MethodSpec:
        """Parse specification string.

        Args:
            text: Bare method name, or modifiers followed by "function <name>"

        Returns:
            Parsed MethodSpec

        Raises:
            TypeError: If text is not a string
            MethodSpecSyntaxError: If text violates the grammar
        """
        if not isinstance(text, str):
            raise TypeError(f"method specification must be str, got {type(text).__name__}")

        # Shorthand: bare name, no "function" keyword
        if IDENTIFIER_RE.fullmatch(text):
            return MethodSpec(name=text)

        state = _ParseState(remaining=text, pending=list(ModifierClause))
        for _ in range(MAX_CLAUSES):
            if not self._consume_clause(state):
                break

        state.skip_whitespace()
        if state.consume(FUNCTION_PATTERN) is None:
            raise MethodSpecSyntaxError(state.remaining)

        state.skip_whitespace()
        name = state.consume(NAME_PATTERN)
        if name is None:
            raise MethodSpecSyntaxError(state.remaining)

        if state.remaining:
            raise MethodSpecSyntaxError(state.remaining)

        return MethodSpec(
            name=name,
            is_static=state.is_static,
            access=state.access,
            is_abstract=state.is_abstract,
            is_final=state.is_final,
        )

    def _consume_clause(self, state: _ParseState) -> bool:
        """Consume one clause of a category not seen yet.

        Returns:
            True if a clause was consumed
        """
        state.skip_whitespace()
        for clause in state.pending:
            token = state.consume(CLAUSE_PATTERNS[clause])
            if token is not None:
                state.pending.remove(clause)
                self._apply_clause(state, clause, token)
                return True
        return False

    def _apply_clause(self, state: _ParseState, clause: ModifierClause, token: str) -> None:
        """Record clause value in state.

        Raises:
            MethodSpecSyntaxError: If abstract and final contradict each other
        """
        match clause:
            case ModifierClause.ABSTRACT:
                state.is_abstract = not token.startswith("!")
                self._check_abstract_final(state, token)
            case ModifierClause.FINAL:
                state.is_final = not token.startswith("!")
                self._check_abstract_final(state, token)
            case ModifierClause.STATIC:
                state.is_static = not token.startswith("!")
            case ModifierClause.ACCESS:
                state.access = Access.from_keyword(token)

    def _check_abstract_final(self, state: _ParseState, token: str) -> None:
        # Error points at the token that completed the contradiction
        if conflicting(state.is_abstract, state.is_final):
            raise MethodSpecSyntaxError(token + state.remaining)


_DEFAULT_PARSER = MethodSpecParser()


def parse_method_spec(text: str) -> MethodSpec:
    """Parse specification string with the shared parser.

    Args:
        text: Bare method name, or modifiers followed by "function <name>"

    Returns:
        Parsed MethodSpec

    Raises:
        MethodSpecSyntaxError: If text violates the grammar
    """
    return _DEFAULT_PARSER.parse(text)
