"""Doc file naming and title formatting helpers."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional

COMPONENTS_MARKER = "/components/"

_WORD_DELIMITERS = re.compile(r"[-_]")


def doc_name(path: str | os.PathLike[str]) -> Optional[str]:
    """Return the component name for a source path, or ``None`` without a components marker.

    The name is the first path segment after the first ``/components/``
    marker, ignoring a leading ``src/`` segment.
    """
    posix = Path(path).as_posix()
    if COMPONENTS_MARKER not in posix:
        return None
    remainder = posix.split(COMPONENTS_MARKER, 1)[1]
    if not remainder:
        return None
    name = remainder.removeprefix("src/").split("/", 1)[0]
    return name or None


def md_file_name(
    path: str | os.PathLike[str],
    route: str,
    docs_root: Path,
    *,
    absolute: bool = True,
) -> Optional[str | Path]:
    """Return the Markdown doc for a component source file.

    Relative mode yields ``<name>.md``; absolute mode yields
    ``docs_root/route/<name>.md``. ``None`` when the path has no components marker.
    """
    name = doc_name(path)
    if name is None:
        return None
    filename = f"{name}.md"
    if not absolute:
        return filename
    return Path(os.path.abspath(docs_root / route / filename))


def title_case(identifier: str) -> str:
    """Turn ``date-range_picker`` into ``DateRangePicker``."""
    words = _WORD_DELIMITERS.split(identifier)
    return "".join(word[:1].upper() + word[1:] for word in words)


__all__ = ["COMPONENTS_MARKER", "doc_name", "md_file_name", "title_case"]
