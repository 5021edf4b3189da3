"""Top-level pytest hooks."""

from __future__ import annotations

from pathlib import Path
from typing import Any


def pytest_collection_modifyitems(config: Any, items: list[Any]) -> None:  # pragma: no cover
    """Apply directory markers so selection stays consistent even if a file forgets decorators."""
    import pytest

    root = Path(str(config.rootpath)).resolve()

    for item in items:
        try:
            rel = Path(str(item.fspath)).resolve().relative_to(root)
        except ValueError:
            continue

        rel_path = rel.as_posix()

        if rel_path.startswith("tests/unit/"):
            item.add_marker(pytest.mark.unit)
        elif rel_path.startswith("tests/property/"):
            item.add_marker(pytest.mark.property)
