"""Tests for ddate package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_ddate() -> None:
    """Import ddate package succeeds."""
    import ddate

    assert hasattr(ddate, "__version__")
    assert ddate.__version__ == "0.4.0"


def test_import_core_module() -> None:
    """Import ddate.core submodule succeeds."""
    from ddate import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import ddate.units submodule succeeds."""
    from ddate import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import ddate.format submodule succeeds."""
    from ddate import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_internal_module() -> None:
    """Import ddate._internal submodule succeeds."""
    from ddate import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Exceptions are importable from the top-level package."""
    from ddate import (
        ConfigurationError,
        DdateError,
        InvalidDayOfYear,
        ParseError,
        ValidationError,
    )

    assert issubclass(ValidationError, DdateError)
    assert issubclass(InvalidDayOfYear, ValidationError)
    assert issubclass(ParseError, DdateError)
    assert issubclass(ConfigurationError, DdateError)


def test_all_exports_resolve() -> None:
    """Every name in ddate.__all__ is an attribute of the package."""
    import ddate

    for name in ddate.__all__:
        assert hasattr(ddate, name), name
