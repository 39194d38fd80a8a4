"""End-to-end tests for the generation pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from compdocs.analyzers import ParseError
from compdocs.orchestrator import Orchestrator
from tests._fixtures.component_tree import ComponentTreeBuilder

_PACKAGES_INDEX = """
/** @format */
export { default as Button } from './button';
export { default as Table, TablePlaceholder } from './table';
export { default as TableSummary } from './table/summary';
export { default as useFilters } from './use-filters';
export * as icons from './icons';
export { default as Ghost } from './ghost';
"""

_ANALYTICS_INDEX = """
export { default as ReportChart } from './report-chart';
export { default as ReportFilters } from './report-filters';
"""


def _seed(tree: ComponentTreeBuilder) -> None:
    tree.write(
        {
            "packages/components/src/index.js": _PACKAGES_INDEX,
            "packages/components/src/button/index.js": """
                /**
                 * Use buttons for primary actions.
                 */
                export default function Button() {
                	return null;
                }
            """,
            "packages/components/src/table/index.js": "class Table {}\nexport default Table;\n",
            "packages/components/src/table/summary.js": "class TableSummary {}\nexport default TableSummary;\n",
            "packages/components/src/ghost/ghost.js": "const Ghost = () => null;\nexport default Ghost;\n",
            "client/analytics/components/index.js": _ANALYTICS_INDEX,
            "client/analytics/components/report-chart/index.js": "export default null;\n",
            "client/analytics/components/report-filters.js": "export default null;\n",
            "docs/components/packages/README.md": "# Packages\n",
            "docs/components/packages/stale.md": "old output\n",
        }
    )


def test_run_writes_stubs_and_table_of_contents(component_tree: ComponentTreeBuilder) -> None:
    _seed(component_tree)
    result = Orchestrator(component_tree.config()).run()

    packages_dir = component_tree.path("docs/components/packages")
    assert sorted(path.name for path in packages_dir.iterdir()) == [
        "README.md",
        "button.md",
        "ghost.md",
        "table.md",
    ]
    assert (packages_dir / "README.md").read_text(encoding="utf-8") == "# Packages\n"
    assert "Use buttons for primary actions." in (packages_dir / "button.md").read_text(encoding="utf-8")
    table_doc = (packages_dir / "table.md").read_text(encoding="utf-8")
    assert "Table\n=====" in table_doc and "TableSummary\n============" in table_doc

    analytics_dir = component_tree.path("docs/components/analytics")
    assert sorted(path.name for path in analytics_dir.iterdir()) == ["report-chart.md", "report-filters.js.md"]

    toc_path = component_tree.path("docs/_sidebar.md")
    assert result.toc_path == toc_path
    assert toc_path.read_text(encoding="utf-8") == result.toc
    assert result.toc == (
        "* [Home](/)\n"
        "* [Components](components/)\n"
        "  * [Analytics components](components/analytics/)\n"
        "    * [ReportChart](components/analytics/report-chart.md)\n"
        "    * [ReportFilters.js](components/analytics/report-filters.js.md)\n"
        "  * [Package components](components/packages/)\n"
        "    * [Button](components/packages/button.md)\n"
        "    * [Ghost](components/packages/ghost.md)\n"
        "    * [Table](components/packages/table.md)\n"
    )


def test_run_reports_exports_and_resolution(component_tree: ComponentTreeBuilder) -> None:
    _seed(component_tree)
    result = Orchestrator(component_tree.config()).run()
    packages = next(route for route in result.routes if route.route == "packages")
    src = component_tree.path("packages/components/src")

    assert packages.exports == ["./button", "./table", "./table/summary", "./ghost"]
    assert packages.resolved == [
        src / "button" / "index.js",
        src / "ghost" / "ghost.js",
        src / "table" / "index.js",
        src / "table" / "summary.js",
    ]
    assert len(packages.written) == 3


def test_run_twice_is_idempotent(component_tree: ComponentTreeBuilder) -> None:
    _seed(component_tree)
    config = component_tree.config()
    first = Orchestrator(config).run()
    first_docs = _snapshot(component_tree.path("docs"))

    second = Orchestrator(config).run()

    assert second.toc == first.toc
    assert _snapshot(component_tree.path("docs")) == first_docs


def test_build_toc_does_not_touch_docs(component_tree: ComponentTreeBuilder) -> None:
    _seed(component_tree)
    result = Orchestrator(component_tree.config()).build_toc()

    assert result.toc_path is None
    assert "    * [Table](components/packages/table.md)\n" in result.toc
    assert component_tree.path("docs/components/packages/stale.md").exists()
    assert not component_tree.path("docs/_sidebar.md").exists()


def test_run_fails_on_unresolved_export(component_tree: ComponentTreeBuilder) -> None:
    _seed(component_tree)
    component_tree.write({"client/analytics/components/index.js": "export { Nope } from './nope';\n"})
    with pytest.raises(FileNotFoundError):
        Orchestrator(component_tree.config()).run()


def test_run_stops_on_parse_error(component_tree: ComponentTreeBuilder) -> None:
    _seed(component_tree)
    component_tree.write({"packages/components/src/index.js": "export { a from\n"})
    with pytest.raises(ParseError):
        Orchestrator(component_tree.config()).run()


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }
