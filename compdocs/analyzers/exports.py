"""Collects re-exported module paths from component index files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from tree_sitter import Node

from ..config import DEFAULT_EXCLUDE_MODULES
from ..logging import get_logger
from .parsing import ParseError, SourceParser, string_value, walk


class ExportScanner:
    """Finds ``export { a, b } from "<module>"`` statements in a source file.

    Star and namespace re-exports are skipped, as is any module whose path
    contains one of ``exclude_modules``.
    """

    def __init__(
        self,
        exclude_modules: Sequence[str] = DEFAULT_EXCLUDE_MODULES,
        parser: SourceParser | None = None,
    ) -> None:
        self.exclude_modules = list(exclude_modules)
        self.parser = parser or SourceParser()
        self.logger = get_logger("analyzers.exports")

    def scan(self, path: Path) -> List[str]:
        """Return re-exported module paths in source order, duplicates included."""
        path = Path(path)
        tree, source_bytes = self.parser.parse_file(path)
        modules: List[str] = []
        for module in self._collect_modules(tree.root_node, source_bytes):
            if self._is_excluded(module):
                self.logger.debug("Skipping excluded module %s in %s", module, path)
                continue
            modules.append(module)
        self.logger.debug("Found %d re-exports in %s", len(modules), path)
        return modules

    def scan_all(self, paths: Iterable[Path]) -> List[str]:
        modules: List[str] = []
        for path in paths:
            modules.extend(self.scan(path))
        return modules

    def _collect_modules(self, root: Node, source_bytes: bytes) -> Iterable[str]:
        for node in walk(root):
            if node.type != "export_statement":
                continue
            module = _named_reexport_source(node, source_bytes)
            if module is not None:
                yield module

    def _is_excluded(self, module: str) -> bool:
        return any(marker in module for marker in self.exclude_modules)


def _named_reexport_source(node: Node, source_bytes: bytes) -> Optional[str]:
    source = node.child_by_field_name("source")
    if source is None or source.type != "string":
        return None
    clause = next((child for child in node.named_children if child.type == "export_clause"), None)
    if clause is None:
        return None
    if not any(child.type == "export_specifier" for child in clause.named_children):
        return None
    return string_value(source, source_bytes)


__all__ = ["ExportScanner", "ParseError"]
