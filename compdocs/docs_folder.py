"""Preparation of per-route documentation folders."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .logging import get_logger

PROTECTED_FILENAME = "README.md"


class DocsFolderManager:
    """Empties generated docs from ``docs_root/<route>`` before regeneration."""

    def __init__(self, docs_root: Path) -> None:
        self.docs_root = Path(docs_root)
        self.logger = get_logger("docs_folder")

    def folder_for(self, route: str) -> Path:
        return self.docs_root / route

    def clear(self, route: str) -> List[Path]:
        """Ensure the route folder exists and return the files removed from it.

        A hand-written ``README.md`` and any subdirectories are left in place.
        File-system errors propagate unchanged.
        """
        folder = self.folder_for(route)
        if not folder.is_dir():
            folder.mkdir()
            self.logger.debug("Created docs folder %s", folder)
            return []

        removed: List[Path] = []
        for entry in sorted(folder.iterdir()):
            if entry.name == PROTECTED_FILENAME or entry.is_dir():
                continue
            entry.unlink()
            removed.append(entry)
            self.logger.debug("Removed %s", entry)
        self.logger.info("Cleared %d generated files from %s", len(removed), folder)
        return removed


__all__ = ["DocsFolderManager", "PROTECTED_FILENAME"]
