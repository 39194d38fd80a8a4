from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.component_tree import ComponentTreeBuilder


@pytest.fixture
def component_tree(tmp_path: Path) -> ComponentTreeBuilder:
    """Provide a reusable component tree builder rooted at the pytest tmp_path."""
    return ComponentTreeBuilder(tmp_path)
