"""Markdown stub rendering for individual components."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from ..analyzers.docblocks import DocblockReader
from ..logging import get_logger
from ..naming import doc_name, md_file_name, title_case

TEMPLATE_NAME = "component.md.j2"


class ComponentStubWriter:
    """Appends one rendered section per component source to its route doc file."""

    def __init__(
        self,
        docs_root: Path,
        *,
        root: Path,
        templates_dir: Path | None = None,
        reader: DocblockReader | None = None,
    ) -> None:
        self.docs_root = Path(docs_root)
        self.root = Path(root)
        self.reader = reader or DocblockReader()
        self._env = _create_env(templates_dir)
        self.logger = get_logger("postproc.stubs")

    def write(self, source_path: Path, route: str) -> Optional[Path]:
        """Render ``source_path`` into ``docs_root/route/<name>.md``.

        Returns ``None`` when the source path has no components marker. Reading
        an unresolved source path raises ``FileNotFoundError``.
        """
        target = md_file_name(source_path, route, self.docs_root)
        if target is None:
            self.logger.warning("Skipping %s: not inside a components folder", source_path)
            return None
        target = Path(target)

        section = self.render(Path(source_path))
        existing = target.exists() and target.stat().st_size > 0
        with target.open("a", encoding="utf-8") as handle:
            if existing:
                handle.write("\n")
            handle.write(section)
        self.logger.debug("Wrote %s section to %s", source_path, target)
        return target

    def render(self, source_path: Path) -> str:
        component = self.reader.read(source_path)
        fallback = doc_name(source_path) or source_path.stem
        heading = component.display_name or title_case(fallback)
        template = self._env.get_template(TEMPLATE_NAME)
        return (
            template.render(
                heading=heading,
                description=component.description,
                source=self._relative_source(source_path),
            ).rstrip("\n")
            + "\n"
        )

    def _relative_source(self, source_path: Path) -> str:
        try:
            return source_path.resolve().relative_to(self.root.resolve()).as_posix()
        except ValueError:
            return source_path.as_posix()


def _create_env(templates_dir: Path | None) -> Environment:
    directories = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(Path(__file__).parent.parent / "templates"))
    loader = FileSystemLoader(directories)
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["ComponentStubWriter", "TEMPLATE_NAME"]
