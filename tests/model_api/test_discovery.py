"""Tests for entry point based extension discovery."""

import pytest

import model_api.discovery as discovery
from model_api import Model, discover_extensions, settings
from mocks import PlainExtension, RecordingExtension


class FakeEntryPoint:
    """Mimics importlib.metadata.EntryPoint."""

    def __init__(self, name, target):
        self.name = name
        self._target = target

    def load(self):
        if isinstance(self._target, Exception):
            raise self._target
        return self._target


@pytest.fixture
def fake_entry_points(monkeypatch):
    """Replace entry_points() with a registry keyed by group."""
    registry: dict[str, list[FakeEntryPoint]] = {}

    def entry_points(group):
        return registry.get(group, [])

    monkeypatch.setattr(discovery, "entry_points", entry_points)
    return registry


class TestDiscoverExtensions:
    """Tests for discover_extensions()."""

    def test_no_extensions(self, fake_entry_points):
        """Test that an empty group returns no classes."""
        assert discover_extensions() == []

    def test_default_group_from_settings(self, fake_entry_points):
        """Test that the settings group is used by default."""
        fake_entry_points[settings.extension_entry_point_group] = [
            FakeEntryPoint("plain", PlainExtension),
            FakeEntryPoint("recording", RecordingExtension),
        ]

        assert discover_extensions() == [PlainExtension, RecordingExtension]

    def test_explicit_group(self, fake_entry_points):
        """Test discovering from a custom group."""
        fake_entry_points["custom.group"] = [FakeEntryPoint("plain", PlainExtension)]

        assert discover_extensions("custom.group") == [PlainExtension]
        assert discover_extensions() == []

    def test_non_extension_skipped(self, fake_entry_points, caplog):
        """Test that entry points not extending Extension are skipped."""
        fake_entry_points[settings.extension_entry_point_group] = [
            FakeEntryPoint("dict", dict),
            FakeEntryPoint("func", len),
            FakeEntryPoint("plain", PlainExtension),
        ]

        assert discover_extensions() == [PlainExtension]
        assert "'dict' does not extend Extension" in caplog.text
        assert "'func' does not extend Extension" in caplog.text

    def test_load_failure_raises(self, fake_entry_points):
        """Test that import errors propagate."""
        fake_entry_points[settings.extension_entry_point_group] = [
            FakeEntryPoint("broken", ImportError("no module")),
        ]

        with pytest.raises(ImportError, match="no module"):
            discover_extensions()

    def test_discovered_classes_load_into_model(self, fake_entry_points):
        """Test feeding discovered classes to a Model."""
        fake_entry_points[settings.extension_entry_point_group] = [
            FakeEntryPoint("plain", PlainExtension),
        ]

        model = Model(extensions=discover_extensions())
        assert isinstance(model.get_extension(PlainExtension), PlainExtension)
