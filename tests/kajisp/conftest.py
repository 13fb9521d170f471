"""Shared fixtures and utilities for Kajisp tests."""

import io
from typing import Any, Callable, Tuple

import pytest

from kajisp import Kajisp


@pytest.fixture
def kajisp():
    """Create a fresh Kajisp instance for each test, writing to a discarded buffer."""
    return Kajisp(output=io.StringIO(), input_stream=io.StringIO())


@pytest.fixture
def kajisp_io() -> Callable[..., Tuple[Kajisp, io.StringIO]]:
    """Factory for Kajisp instances bound to in-memory streams."""
    def _create_kajisp(input_text: str = "", max_depth: int = 200) -> Tuple[Kajisp, io.StringIO]:
        output = io.StringIO()
        interpreter = Kajisp(max_depth=max_depth, output=output, input_stream=io.StringIO(input_text))
        return interpreter, output
    return _create_kajisp


class KajispTestHelpers:
    """Helper utilities for Kajisp testing."""

    @staticmethod
    def assert_evaluates_to(kajisp: Kajisp, source: str, expected: str) -> None:
        """Assert that a program evaluates to the expected display text."""
        result = kajisp.evaluate_and_format(source)
        assert result == expected, f"Expected '{expected}', got '{result}'"

    @staticmethod
    def assert_python_result(kajisp: Kajisp, source: str, expected: Any) -> None:
        """Assert that a program evaluates to the expected Python object."""
        result = kajisp.evaluate(source)
        assert result == expected, f"Expected Python result {expected!r}, got {result!r}"

    @staticmethod
    def build_nested_expression(operator: str, depth: int, base_value: str = "1") -> str:
        """Build deeply nested expression for recursion testing."""
        if depth <= 0:
            return base_value

        inner = KajispTestHelpers.build_nested_expression(operator, depth - 1, base_value)
        return f"({operator} {base_value} {inner})"


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return KajispTestHelpers
