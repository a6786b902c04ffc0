"""Parse node model and HTML serialization for TAL output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .tokens import DEFAULT_TAG

DISPATCHER_NAME = "app"


@dataclass
class ParseNode:
    tag: str = DEFAULT_TAG
    element_id: str = ""
    style: str = ""
    action: str = ""
    content: str = ""
    children: List[str] = field(default_factory=list)

    def add_style(self, fragment: str) -> None:
        self.style += fragment + " "


def _node_attrs(node: ParseNode) -> Dict[str, str]:
    attrs: Dict[str, str] = {}
    if node.element_id:
        attrs["id"] = node.element_id
    style = node.style.strip()
    if style:
        attrs["style"] = style
    if node.action:
        attrs["data-action"] = node.action
        attrs["onclick"] = f"{DISPATCHER_NAME}.dispatch('{node.action}')"
    return attrs


def _render_attrs(attrs: Dict[str, str]) -> str:
    # Values are emitted verbatim; TAL output is trusted markup.
    return "".join(f' {name}="{value}"' for name, value in attrs.items())


def node_to_html(node: ParseNode) -> str:
    attrs = _render_attrs(_node_attrs(node))
    body = node.content + "".join(node.children)
    return f"<{node.tag}{attrs}>{body}</{node.tag}>"


__all__ = ["DISPATCHER_NAME", "ParseNode", "node_to_html"]
