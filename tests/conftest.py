"""Pytest configuration and fixtures for trackademic tests."""

import json
from unittest.mock import AsyncMock

import pytest

from trackademic.editor.control import ControlRef, TextArea
from trackademic.editor.formatter import TextFormatter
from trackademic.logging import set_log_level


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    set_log_level("DEBUG")


@pytest.fixture
def solution_payload() -> dict:
    """Conforming backend answer for "2x + 5 = 15"."""
    return {
        "solution": "x = 5",
        "steps": [
            "Subtract 5 from both sides of the equation: 2x + 5 - 5 = 15 - 5",
            "Simplify the equation: 2x = 10",
            "Divide both sides by 2: 2x / 2 = 10 / 2",
            "The final answer is x = 5",
        ],
    }


@pytest.fixture
def fake_backend(solution_payload):
    """Deterministic backend returning the payload as JSON text."""
    return AsyncMock(return_value=json.dumps(solution_payload))


@pytest.fixture
def text_area() -> TextArea:
    return TextArea("")


@pytest.fixture
def formatter(text_area) -> TextFormatter:
    return TextFormatter(ControlRef(text_area), text_area.set_content)
