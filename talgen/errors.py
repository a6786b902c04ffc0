"""Failure types reported by the TAL parser."""

from __future__ import annotations


class TalError(Exception):
    """Base class for parse failures that end a run."""

    kind = "error"

    def __init__(self, message: str, *, position: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        return f"{self.message} (at offset {self.position})"


class MissingRootError(TalError):
    kind = "missing_root"


class UnterminatedContentError(TalError):
    kind = "unterminated_content"


class UnterminatedChildrenError(TalError):
    kind = "unterminated_children"


class NestingTooDeepError(TalError):
    kind = "nesting_too_deep"


__all__ = [
    "MissingRootError",
    "NestingTooDeepError",
    "TalError",
    "UnterminatedChildrenError",
    "UnterminatedContentError",
]
