"""Pytest configuration and fixtures for ddate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so ddate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from ddate.core.fields import CalendarDate  # noqa: E402


@pytest.fixture
def st_tibs_day() -> CalendarDate:
    """February 29, 2000."""
    return CalendarDate(2000, 60)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove ddate settings from the environment."""
    monkeypatch.delenv("DDATE_DATE_ORDER", raising=False)
    monkeypatch.delenv("DDATE_LOG_LEVEL", raising=False)
    return monkeypatch
