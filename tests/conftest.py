from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.catalog_builder import CatalogBuilder


@pytest.fixture
def catalog_builder(tmp_path: Path) -> CatalogBuilder:
    """Provide a throwaway multi-module build rooted at the pytest tmp_path."""
    return CatalogBuilder(tmp_path)
