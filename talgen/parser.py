"""Recursive-descent parser turning TAL source into HTML fragments.

Grammar for one node::

    node      := [tag] modifier* ["{" text "}"] ["[" (ws | node)* "]"]
    modifier  := "." class | "!" action | "#" id

Characters that cannot start a node are skipped one at a time, so malformed
input never stops the scan. Everything before the root marker ``^`` is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import tokens
from .cursor import Cursor
from .dom_model import ParseNode, node_to_html
from .errors import (
    MissingRootError,
    NestingTooDeepError,
    TalError,
    UnterminatedChildrenError,
    UnterminatedContentError,
)

MAX_DEPTH = 256

STRUCTURAL_CHARS = frozenset(".!{}[]#")
NODE_STARTERS = frozenset(".!{[")


@dataclass
class ParseResult:
    html: Optional[str] = None
    error: Optional[TalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class NodeParser:
    """Parses nodes from a shared cursor.

    Each ``parse_node`` call either returns one serialized element or ``None``
    after consuming exactly one unrecognized character.
    """

    def __init__(self, cursor: Cursor, *, max_depth: int = MAX_DEPTH, strict: bool = False) -> None:
        self.cursor = cursor
        self.max_depth = max_depth
        self.strict = strict

    def _read_token(self) -> str:
        cursor = self.cursor
        chars = []
        while not cursor.at_end() and cursor.peek() not in STRUCTURAL_CHARS:
            chars.append(cursor.advance())
        return "".join(chars)

    def _read_modifiers(self, node: ParseNode) -> None:
        cursor = self.cursor
        while not cursor.at_end():
            marker = cursor.peek()
            if marker == ".":
                cursor.advance()
                fragment = tokens.lookup("." + self._read_token())
                if fragment:
                    node.add_style(fragment)
            elif marker == "!":
                cursor.advance()
                node.action = self._read_token()
            elif marker == "#":
                cursor.advance()
                node.element_id = self._read_token()
            else:
                break

    def _read_content(self, node: ParseNode) -> None:
        cursor = self.cursor
        start = cursor.position
        cursor.advance()
        chars = []
        while not cursor.at_end() and cursor.peek() != "}":
            chars.append(cursor.advance())
        if cursor.at_end() and self.strict:
            raise UnterminatedContentError("Content block is never closed with '}'", position=start)
        cursor.advance()
        node.content = "".join(chars)

    def _read_children(self, node: ParseNode, depth: int) -> None:
        cursor = self.cursor
        start = cursor.position
        cursor.advance()
        while not cursor.at_end() and cursor.peek() != "]":
            if cursor.peek().isspace():
                cursor.advance()
                continue
            child = self.parse_node(depth + 1)
            if child is not None:
                node.children.append(child)
        if cursor.at_end() and self.strict:
            raise UnterminatedChildrenError("Children list is never closed with ']'", position=start)
        cursor.advance()

    def parse_node(self, depth: int = 1) -> Optional[str]:
        cursor = self.cursor
        if cursor.at_end():
            return None

        current = cursor.peek()
        if not tokens.is_tag_symbol(current) and current not in NODE_STARTERS:
            cursor.advance()
            return None
        if depth > self.max_depth:
            raise NestingTooDeepError(
                f"Nesting exceeds the limit of {self.max_depth} levels", position=cursor.position
            )

        node = ParseNode()
        if tokens.is_tag_symbol(current):
            node.tag = tokens.lookup(cursor.advance()) or tokens.DEFAULT_TAG

        self._read_modifiers(node)
        if cursor.peek() == "{":
            self._read_content(node)
        if cursor.peek() == "[":
            self._read_children(node, depth)

        return node_to_html(node)


def find_root(cursor: Cursor) -> bool:
    """Advance the cursor to the root marker; return False if there is none."""

    while not cursor.at_end() and cursor.peek() != tokens.ROOT_MARKER:
        cursor.advance()
    return not cursor.at_end()


def parse_tal(source: str, *, max_depth: int = MAX_DEPTH, strict: bool = False) -> ParseResult:
    """Parse a TAL document into the HTML of its root element."""

    cursor = Cursor(source)
    if not find_root(cursor):
        return ParseResult(
            error=MissingRootError(
                f"No root marker '{tokens.ROOT_MARKER}' found", position=cursor.position
            )
        )

    parser = NodeParser(cursor, max_depth=max_depth, strict=strict)
    try:
        html = parser.parse_node()
    except TalError as exc:
        return ParseResult(error=exc)
    except RecursionError:
        return ParseResult(
            error=NestingTooDeepError(
                "Nesting exceeds the interpreter recursion limit", position=cursor.position
            )
        )
    return ParseResult(html=html or "")


def compile_tal(source: str, *, max_depth: int = MAX_DEPTH, strict: bool = False) -> str:
    """Like ``parse_tal`` but raise the failure instead of returning it."""

    result = parse_tal(source, max_depth=max_depth, strict=strict)
    if result.error is not None:
        raise result.error
    return result.html or ""


__all__ = [
    "MAX_DEPTH",
    "NodeParser",
    "ParseResult",
    "compile_tal",
    "find_root",
    "parse_tal",
]
