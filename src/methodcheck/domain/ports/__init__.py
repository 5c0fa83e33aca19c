"""Domain ports (interfaces/protocols)."""

from methodcheck.domain.ports.subject_resolver import SubjectResolver

__all__ = [
    "SubjectResolver",
]
