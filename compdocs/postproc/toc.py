"""Sidebar table-of-contents generation."""

from __future__ import annotations

import os
from typing import Iterable, List, Sequence

from ..naming import doc_name, title_case


class TableOfContentsBuilder:
    """Builds nested Markdown link lists for documented component routes."""

    SECTION_INDENT = "  "
    ENTRY_INDENT = "    "

    def build_section(
        self, files: Iterable[str | os.PathLike[str]], route: str, title: str
    ) -> List[str]:
        """Return the heading line for ``route`` followed by one link per component doc."""
        names = sorted(set(self._doc_files(files)))
        lines = [f"{self.SECTION_INDENT}* [{title}](components/{route}/)"]
        for doc in names:
            label = title_case(doc.removesuffix(".md"))
            lines.append(f"{self.ENTRY_INDENT}* [{label}](components/{route}/{doc})")
        return lines

    def build_document(self, header: Sequence[str], sections: Iterable[Sequence[str]]) -> str:
        """Join header lines and route sections into the final TOC text."""
        lines: List[str] = list(header)
        for section in sections:
            lines.extend(section)
        return "\n".join(lines).rstrip("\n") + "\n"

    @staticmethod
    def _doc_files(files: Iterable[str | os.PathLike[str]]) -> Iterable[str]:
        for path in files:
            name = doc_name(path)
            if name is not None:
                yield f"{name}.md"


__all__ = ["TableOfContentsBuilder"]
