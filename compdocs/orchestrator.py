"""Pipeline orchestration for generate/toc flows."""

from __future__ import annotations

from typing import List

from .analyzers import DocblockReader, ExportScanner, SourceParser
from .config import DocsConfig, RouteConfig
from .docs_folder import DocsFolderManager
from .logging import get_logger
from .models import GenerationResult, RouteResult
from .postproc.stubs import ComponentStubWriter
from .postproc.toc import TableOfContentsBuilder
from .resolver import PathResolver


class Orchestrator:
    """Runs the per-route documentation pipeline for a configured project."""

    def __init__(self, config: DocsConfig) -> None:
        self.config = config
        parser = SourceParser()
        self.scanner = ExportScanner(config.exclude_modules, parser=parser)
        self.resolver = PathResolver(config.extensions)
        self.folders = DocsFolderManager(config.paths.docs_root)
        self.stub_writer = ComponentStubWriter(
            config.paths.docs_root,
            root=config.root,
            templates_dir=config.templates_dir,
            reader=DocblockReader(parser=parser),
        )
        self.toc_builder = TableOfContentsBuilder()
        self.logger = get_logger("orchestrator")

    def run(self) -> GenerationResult:
        """Regenerate every route's docs and write the TOC file."""
        self.logger.info("Generating component docs into %s", self.config.paths.docs_root)
        self.config.paths.docs_root.mkdir(parents=True, exist_ok=True)
        results: List[RouteResult] = []
        for route in self.config.routes:
            self.folders.clear(route.name)
            result = self._collect(route)
            for source in result.resolved:
                written = self.stub_writer.write(source, route.name)
                if written is not None and written not in result.written:
                    result.written.append(written)
            self.logger.info(
                "Route %s: %d exports, %d doc files", route.name, len(result.exports), len(result.written)
            )
            results.append(result)

        toc = self.toc_builder.build_document(
            self.config.toc.header, (result.toc_lines for result in results)
        )
        toc_path = self.config.toc.path
        toc_path.parent.mkdir(parents=True, exist_ok=True)
        toc_path.write_text(toc, encoding="utf-8")
        self.logger.info("Wrote table of contents to %s", toc_path)
        return GenerationResult(routes=results, toc_path=toc_path, toc=toc)

    def build_toc(self) -> GenerationResult:
        """Return the TOC text without touching the docs tree."""
        results = [self._collect(route) for route in self.config.routes]
        toc = self.toc_builder.build_document(
            self.config.toc.header, (result.toc_lines for result in results)
        )
        return GenerationResult(routes=results, toc_path=None, toc=toc)

    def _collect(self, route: RouteConfig) -> RouteResult:
        base = self.config.paths.base_for(route.base)
        index_files = [base / index for index in route.indexes]
        exports = self.scanner.scan_all(index_files)
        resolved = self.resolver.resolve(exports, base)
        self.logger.debug("Route %s resolved %d exports from %s", route.name, len(resolved), base)
        toc_lines = self.toc_builder.build_section(resolved, route.name, route.title)
        return RouteResult(route=route.name, exports=exports, resolved=resolved, toc_lines=toc_lines)


__all__ = ["Orchestrator"]
