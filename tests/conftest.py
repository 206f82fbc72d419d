from __future__ import annotations

import pytest

import cssxpath


@pytest.fixture(autouse=True)
def _clean_default_cache():
    """Every test starts and ends with an empty process-wide cache."""
    cssxpath.reset()
    yield
    cssxpath.reset()
