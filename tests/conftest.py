"""Shared test fixtures and configuration for the gosearch test suite."""

from io import StringIO
from typing import Callable

import pytest
from rich.console import Console

from gosearch.search.types import SearchHit


@pytest.fixture
def make_hit() -> Callable[..., SearchHit]:
    """Factory for SearchHit objects with library defaults.

    Returns:
        Callable taking an import path and field overrides.
    """

    def _make(path: str, **overrides) -> SearchHit:
        data = {
            "name": "pkg",
            "path": path,
            "import_count": 0,
            "synopsis": "",
            "is_fork": False,
            "stars": 1,
            "score": 0.0,
        }
        data.update(overrides)
        return SearchHit.model_validate(data)

    return _make


@pytest.fixture
def sample_hits(make_hit) -> list[SearchHit]:
    """Create a small mixed result set for the query "yaml".

    Returns:
        Five hits: three libraries, one fork, and one forked application.
    """
    return [
        make_hit("github.com/a/yaml", name="yaml", import_count=30, stars=10),
        make_hit("github.com/b/yaml", name="yaml", import_count=90, stars=2),
        make_hit("github.com/c/yaml", name="yaml", import_count=50, stars=5, is_fork=True),
        make_hit("github.com/d/yamlcli", name="main", import_count=70, stars=40, is_fork=True),
        make_hit("github.com/e/yaml", name="yaml", import_count=10, stars=1),
    ]


@pytest.fixture
def output_console() -> Console:
    """Create a console that records output in memory.

    Returns:
        Console writing plain text to a StringIO buffer.
    """
    return Console(file=StringIO(), width=200, color_system=None, force_terminal=False)
