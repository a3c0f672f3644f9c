"""Shared fixtures for validator tests."""

from __future__ import annotations

import pytest
import structlog

from formvalidation.config import get_settings
from formvalidation.validators import FieldValidator


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; clear around each test so env overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def zip_field():
    """Field requiring exactly five digits."""
    field = FieldValidator(name="zip")
    field.add_pattern_rule(r"^\d{5}$", "Must be 5 digits")
    return field


@pytest.fixture
def recorder():
    """Post-validation callback that records every call."""

    class Recorder:
        def __init__(self):
            self.calls: list[bool] = []

        def __call__(self, valid: bool) -> None:
            self.calls.append(valid)

    return Recorder()
