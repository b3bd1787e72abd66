"""Pytest fixtures for model_api tests."""

from __future__ import annotations

import pytest

from model_api import InitGroup, Model
from mocks import RecordingExtension


@pytest.fixture
def model() -> Model:
    """A bare, already initialized Model."""
    return Model()


@pytest.fixture
def recorder(model: Model) -> RecordingExtension:
    """A RecordingExtension bound to the model fixture."""
    return RecordingExtension(model)


@pytest.fixture
def api() -> object:
    """Stand-in api object used as InitGroup receiver."""
    return type("Api", (), {})()


@pytest.fixture
def group(api: object) -> InitGroup:
    """An empty InitGroup with an api object."""
    return InitGroup("main", api=api)
