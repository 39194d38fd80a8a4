"""Reads a component's display name and leading docblock."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from tree_sitter import Node

from ..models import ComponentSource
from .parsing import SourceParser, node_text

_NAMED_DECLARATIONS = {
    "class_declaration",
    "abstract_class_declaration",
    "class",
    "function_declaration",
    "generator_function_declaration",
    "function_expression",
    "function",
}
_VARIABLE_DECLARATIONS = {"lexical_declaration", "variable_declaration"}


class DocblockReader:
    """Extracts ``ComponentSource`` details from a resolved component file."""

    def __init__(self, parser: SourceParser | None = None) -> None:
        self.parser = parser or SourceParser()

    def read(self, path: Path) -> ComponentSource:
        path = Path(path)
        tree, source_bytes = self.parser.parse_file(path)
        root = tree.root_node

        default_export = _find_default_export(root)
        if default_export is None:
            return ComponentSource(path=path, display_name=None)

        name, documented = _default_export_target(root, default_export, source_bytes)
        comment = _preceding_docblock(documented or default_export, source_bytes)
        if comment is None and documented is not None and documented is not default_export:
            comment = _preceding_docblock(default_export, source_bytes)
        description = clean_docblock(comment) if comment else ""
        return ComponentSource(path=path, display_name=name, description=description)


def clean_docblock(comment: str) -> str:
    """Strip ``/** */`` decoration and stop at the first ``@tag`` line."""
    body = comment[3:-2] if comment.endswith("*/") else comment[3:]
    lines: List[str] = []
    for raw in body.splitlines():
        line = raw.strip()
        if line.startswith("*"):
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]
        line = line.rstrip()
        if line.lstrip().startswith("@"):
            break
        lines.append(line)
    return "\n".join(lines).strip()


def _find_default_export(root: Node) -> Optional[Node]:
    for child in root.named_children:
        if child.type == "export_statement" and any(token.type == "default" for token in child.children):
            return child
    return None


def _default_export_target(
    root: Node, export_node: Node, source_bytes: bytes
) -> tuple[Optional[str], Optional[Node]]:
    """Return the exported name and the top-level node that carries its docblock."""
    target = export_node.child_by_field_name("declaration") or export_node.child_by_field_name("value")
    if target is None:
        return None, None
    if target.type in _NAMED_DECLARATIONS:
        name_node = target.child_by_field_name("name")
        return (node_text(name_node, source_bytes) if name_node else None), export_node
    if target.type == "identifier":
        name = node_text(target, source_bytes)
        return name, _find_declaration(root, name, source_bytes)
    return None, None


def _find_declaration(root: Node, name: str, source_bytes: bytes) -> Optional[Node]:
    for child in root.named_children:
        declaration = child
        if child.type == "export_statement":
            declaration = child.child_by_field_name("declaration")
            if declaration is None:
                continue
        if name in _declared_names(declaration, source_bytes):
            return child
    return None


def _declared_names(node: Node, source_bytes: bytes) -> Iterable[str]:
    if node.type in _NAMED_DECLARATIONS:
        name_node = node.child_by_field_name("name")
        if name_node is not None:
            yield node_text(name_node, source_bytes)
    elif node.type in _VARIABLE_DECLARATIONS:
        for declarator in node.named_children:
            if declarator.type != "variable_declarator":
                continue
            name_node = declarator.child_by_field_name("name")
            if name_node is not None and name_node.type == "identifier":
                yield node_text(name_node, source_bytes)


def _preceding_docblock(node: Node, source_bytes: bytes) -> Optional[str]:
    previous = node.prev_named_sibling
    if previous is None or previous.type != "comment":
        return None
    text = node_text(previous, source_bytes)
    if not text.startswith("/**"):
        return None
    return text


__all__ = ["DocblockReader", "clean_docblock"]
