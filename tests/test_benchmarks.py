"""Performance benchmarks for rendering plugin errors.

Run with: pytest tests/test_benchmarks.py -v --benchmark-only
"""

import time

import pytest

from plugin_error import PluginError


@pytest.fixture
def detailed_error() -> PluginError:
    """An error with a handful of details and a captured stack."""
    err = PluginError("build", "compile failed", {"show_stack": True})
    err.file_name = "original.js"
    err.line_number = 35
    err.column_number = 12
    err.code = "ERR_CODE"
    return err


class TestRenderBenchmarks:
    """Benchmarks for to_string."""

    def test_to_string_latency___with_details_and_stack(self, benchmark, detailed_error: PluginError) -> None:
        """Measure rendering latency for a typical error."""
        result = benchmark(detailed_error.to_string)

        assert "Details:" in result
        assert "Stack:" in result

    def test_construction_latency___wrapped_exception(self, benchmark) -> None:
        """Measure construction latency when wrapping a raised exception."""
        try:
            raise ValueError("compile failed")
        except ValueError as e:
            error = e

        result = benchmark(PluginError, "build", error, {"show_stack": True})

        assert result.name == "ValueError"

    def test_to_string___under_ten_milliseconds(self, detailed_error: PluginError) -> None:
        start = time.perf_counter()
        detailed_error.to_string()
        elapsed = time.perf_counter() - start

        assert elapsed < 0.01
