"""Forward-only scan position over a TAL source string."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Cursor:
    source: str
    position: int = 0

    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def peek(self) -> str:
        """Return the current character, or an empty string at end of input."""

        if self.at_end():
            return ""
        return self.source[self.position]

    def advance(self) -> str:
        """Consume and return the current character.

        At end of input nothing is consumed and an empty string is returned.
        """

        if self.at_end():
            return ""
        char = self.source[self.position]
        self.position += 1
        return char


__all__ = ["Cursor"]
