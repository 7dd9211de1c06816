"""pytest fixtures for plugin_error tests."""

import sys
from pathlib import Path

import pytest

# Add the parent directory to the path so we can import plugin_error
sys.path.insert(0, str(Path(__file__).parent.parent))

from plugin_error import StyleMode, set_default_style  # noqa: E402


@pytest.fixture(autouse=True)
def plain_style():
    """Render without ANSI styling unless a test asks for it."""
    set_default_style(StyleMode.NEVER)
    yield
    set_default_style(None)


@pytest.fixture
def real_error() -> Exception:
    """An unraised exception carrying diagnostic attributes."""
    error = Exception("something broke")
    error.file_name = "original.js"
    error.line_number = 35
    error.column_number = 12
    return error


@pytest.fixture
def raised_error() -> ValueError:
    """A ValueError that has been raised and caught, so it has a traceback."""
    try:
        raise ValueError("something broke")
    except ValueError as e:
        return e
