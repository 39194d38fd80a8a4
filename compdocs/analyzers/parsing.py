"""Tree-sitter parsing shared by the source analyzers."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, Optional

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

_LANGUAGE_FACTORIES = {
    "javascript": tree_sitter_javascript.language,
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}


class ParseError(ValueError):
    """Raised when a source file is not valid UTF-8 or not syntactically valid."""

    def __init__(self, path: Path, reason: str, line: Optional[int] = None) -> None:
        location = f"{path}:{line}" if line is not None else str(path)
        super().__init__(f"Failed to parse {location}: {reason}")
        self.path = path
        self.line = line


class SourceParser:
    """Parses JavaScript-family files, caching one parser per grammar."""

    def __init__(self) -> None:
        self._parsers: Dict[str, Parser] = {}

    def parse_file(self, path: Path) -> tuple[Tree, bytes]:
        """Return the syntax tree and raw bytes for ``path``.

        ``OSError`` from reading propagates unchanged.
        """
        source_bytes = path.read_bytes()
        try:
            source_bytes.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(path, f"not valid UTF-8 ({exc.reason})") from exc

        tree = self._get_parser(language_for_file(path)).parse(source_bytes)
        if tree.root_node.has_error:
            error_node = _first_error(tree.root_node)
            line = error_node.start_point[0] + 1 if error_node is not None else None
            raise ParseError(path, "syntax error", line)
        return tree, source_bytes

    def _get_parser(self, language_key: str) -> Parser:
        parser = self._parsers.get(language_key)
        if parser is not None:
            return parser
        parser = Parser(Language(_LANGUAGE_FACTORIES[language_key]()))
        self._parsers[language_key] = parser
        return parser


def language_for_file(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in {".ts", ".mts", ".cts"}:
        return "typescript"
    if suffix == ".tsx":
        return "tsx"
    return "javascript"


def node_text(node: Node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8")


def string_value(node: Node, source_bytes: bytes) -> str:
    """Return the contents of a string literal node without its quotes."""
    return node_text(node, source_bytes)[1:-1]


def walk(node: Node) -> Iterator[Node]:
    """Yield every descendant of ``node`` depth-first, in source order."""
    stack = list(reversed(node.children))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def _first_error(node: Node) -> Optional[Node]:
    for child in walk(node):
        if child.type == "ERROR" or child.is_missing:
            return child
    return None


__all__ = ["ParseError", "SourceParser", "language_for_file", "node_text", "string_value", "walk"]
