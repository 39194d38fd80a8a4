"""Core data models shared across compdocs components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class ComponentSource:
    """Details read from a single component source file."""

    path: Path
    display_name: Optional[str]
    description: str = ""


@dataclass
class RouteResult:
    """Outcome of documenting one route."""

    route: str
    exports: List[str]
    resolved: List[Path]
    written: List[Path] = field(default_factory=list)
    toc_lines: List[str] = field(default_factory=list)


@dataclass
class GenerationResult:
    """Outcome of a full generation run."""

    routes: List[RouteResult]
    toc_path: Optional[Path]
    toc: str
