"""Pytest configuration for test suite.

Ensures the project root is on ``sys.path`` so imports like ``import src``
resolve correctly regardless of the working directory pytest chooses.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_syspath() -> None:
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        # Prepend to prefer local sources over site-packages
        sys.path.insert(0, project_root_str)


_ensure_project_root_on_syspath()


@pytest.fixture
def start_timestamp():
    """Interval start shared by the conversion tests."""
    from src.schemas.common import Timestamp

    return Timestamp(seconds=1543160298, nanos=100000090)


@pytest.fixture
def end_timestamp():
    """Observation time of the source points."""
    from src.schemas.common import Timestamp

    return Timestamp(seconds=1543160298, nanos=100000997)
