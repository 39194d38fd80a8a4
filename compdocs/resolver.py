"""Resolve symbolic re-export paths to concrete source files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Sequence

from .config import DEFAULT_EXTENSIONS
from .logging import get_logger


class PathResolver:
    """Applies the fallback search order used by component index files.

    For a symbolic path ``p`` joined to ``base`` the first regular file among
    ``base/p``, ``base/p<ext>``, ``base/p/index<ext>`` and
    ``base/p/<basename(p)><ext>`` wins. When nothing matches, the plain join is
    returned unchanged so the failure surfaces wherever it is read.
    """

    def __init__(self, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> None:
        self.extensions = list(extensions)
        self.logger = get_logger("resolver")

    def resolve(self, paths: Iterable[str], base: Path) -> List[Path]:
        """Return one resolved path per input, in sorted input order."""
        base = Path(base)
        return [self.resolve_one(path, base) for path in sorted(paths)]

    def resolve_one(self, path: str, base: Path) -> Path:
        full_path = Path(os.path.abspath(os.path.join(base, path)))
        for candidate in self._candidates(full_path):
            if candidate.is_file():
                return candidate
        self.logger.debug("No source file found for %s; keeping %s", path, full_path)
        return full_path

    def _candidates(self, full_path: Path) -> Iterable[Path]:
        yield full_path
        for ext in self.extensions:
            yield Path(f"{full_path}{ext}")
        for ext in self.extensions:
            yield full_path / f"index{ext}"
        for ext in self.extensions:
            yield full_path / f"{full_path.name}{ext}"


__all__ = ["PathResolver"]
