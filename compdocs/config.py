"""Configuration loading for compdocs (.compdocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".compdocs.yml"

DEFAULT_COMPONENTS_ROOT = "packages/components/src"
DEFAULT_ANALYTICS_ROOT = "client/analytics/components"
DEFAULT_DOCS_ROOT = "docs/components"
DEFAULT_TOC_PATH = "docs/_sidebar.md"
DEFAULT_TOC_HEADER = ("* [Home](/)", "* [Components](components/)")
DEFAULT_EXTENSIONS = (".js",)
DEFAULT_EXCLUDE_MODULES = ("use-filters",)

ROUTE_BASES = ("components", "analytics")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DocsPaths:
    """Source and destination roots the pipeline reads from and writes to."""

    components_root: Path
    analytics_root: Path
    docs_root: Path

    def base_for(self, base: str) -> Path:
        """Return the source root a route's ``base`` refers to."""
        if base == "components":
            return self.components_root
        if base == "analytics":
            return self.analytics_root
        raise ConfigError(f"Unknown route base '{base}' (expected one of: {', '.join(ROUTE_BASES)})")


@dataclass
class RouteConfig:
    """One logical component group documented under ``docs_root/<name>``."""

    name: str
    title: str
    base: str = "components"
    indexes: List[str] = field(default_factory=lambda: ["index.js"])


@dataclass
class TocConfig:
    """Where the table of contents is written and what precedes the sections."""

    path: Path
    header: List[str] = field(default_factory=lambda: list(DEFAULT_TOC_HEADER))


@dataclass
class DocsConfig:
    """Represents the settings defined in .compdocs.yml."""

    root: Path
    paths: DocsPaths
    routes: List[RouteConfig]
    toc: TocConfig
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude_modules: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_MODULES))
    templates_dir: Optional[Path] = None


def default_routes() -> List[RouteConfig]:
    return [
        RouteConfig(name="analytics", title="Analytics components", base="analytics"),
        RouteConfig(name="packages", title="Package components", base="components"),
    ]


def default_config(root: Path) -> DocsConfig:
    """Return the configuration used when no .compdocs.yml is present."""
    root = root.resolve()
    return DocsConfig(
        root=root,
        paths=DocsPaths(
            components_root=root / DEFAULT_COMPONENTS_ROOT,
            analytics_root=root / DEFAULT_ANALYTICS_ROOT,
            docs_root=root / DEFAULT_DOCS_ROOT,
        ),
        routes=default_routes(),
        toc=TocConfig(path=root / DEFAULT_TOC_PATH),
    )


def load_config(config_path: Path) -> DocsConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()
    config = default_config(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    paths_data = _as_dict(data.get("paths"))
    if paths_data:
        components = _as_str(paths_data.get("components"))
        analytics = _as_str(paths_data.get("analytics"))
        docs = _as_str(paths_data.get("docs"))
        if components:
            config.paths.components_root = _resolve_path(root, components)
        if analytics:
            config.paths.analytics_root = _resolve_path(root, analytics)
        if docs:
            config.paths.docs_root = _resolve_path(root, docs)

    if "extensions" in data:
        extensions = [_normalise_extension(ext) for ext in _as_str_list(data.get("extensions"))]
        extensions = [ext for ext in extensions if ext]
        if not extensions:
            raise ConfigError("extensions must list at least one file extension")
        config.extensions = extensions

    if "exclude_modules" in data:
        config.exclude_modules = [item for item in _as_str_list(data.get("exclude_modules")) if item]

    toc_data = _as_dict(data.get("toc"))
    if toc_data:
        toc_path = _as_str(toc_data.get("path"))
        if toc_path:
            config.toc.path = _resolve_path(root, toc_path)
        if "header" in toc_data:
            config.toc.header = _as_str_list(toc_data.get("header"))

    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        config.templates_dir = _resolve_path(root, templates_dir)

    if "routes" in data:
        config.routes = _parse_routes(data.get("routes"))

    return config


def _parse_routes(value: Any) -> List[RouteConfig]:
    if not isinstance(value, list) or not value:
        raise ConfigError("routes must be a non-empty list of route mappings")

    routes: List[RouteConfig] = []
    seen: set[str] = set()
    for item in value:
        if not isinstance(item, dict):
            raise ConfigError("Each route must be a mapping with at least a 'name'")
        name = _as_str(item.get("name"))
        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            raise ConfigError(f"Invalid route name: {item.get('name')!r}")
        if name in seen:
            raise ConfigError(f"Duplicate route name: {name}")
        seen.add(name)

        base = _as_str(item.get("base")) or "components"
        if base not in ROUTE_BASES:
            raise ConfigError(
                f"Route '{name}' has unknown base '{base}' (expected one of: {', '.join(ROUTE_BASES)})"
            )
        title = _as_str(item.get("title")) or name.replace("-", " ").capitalize()
        indexes = _as_str_list(item.get("indexes")) if "indexes" in item else ["index.js"]
        if not indexes:
            raise ConfigError(f"Route '{name}' must list at least one index file")
        routes.append(RouteConfig(name=name, title=title, base=base, indexes=indexes))
    return routes


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _resolve_path(root: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = root / path
    return path


def _normalise_extension(value: str) -> str:
    value = value.strip()
    if value and not value.startswith("."):
        value = f".{value}"
    return value


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DocsConfig",
    "DocsPaths",
    "RouteConfig",
    "TocConfig",
    "default_config",
    "load_config",
]
