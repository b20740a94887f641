from __future__ import annotations

import logging

import pytest

from positionless import ArrayCollection, ConfigLoader, PivotOutOfRangeError, rotate
from positionless.core.config import load_rotation_config


class QuietArray(ArrayCollection):
    default_check_preconditions = False


class TracedArray(ArrayCollection):
    default_log_stages = True


def test_system_defaults() -> None:
    config = ConfigLoader().load_rotation_config()

    assert config.check_preconditions is True
    assert config.log_stages is False


def test_container_class_attributes_override_defaults() -> None:
    loader = ConfigLoader()

    assert loader.load_rotation_config(QuietArray).check_preconditions is False
    assert loader.load_rotation_config(TracedArray).log_stages is True
    assert loader.load_rotation_config(ArrayCollection).check_preconditions is True


def test_global_env_overrides_container_attributes(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("POSITIONLESS_CHECK_PRECONDITIONS", "true")
    monkeypatch.setenv("POSITIONLESS_LOG_STAGES", "0")

    loader = ConfigLoader()

    assert loader.load_rotation_config(QuietArray).check_preconditions is True
    assert loader.load_rotation_config(TracedArray).log_stages is False


def test_container_env_key_beats_global_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POSITIONLESS_LOG_STAGES", "no")
    monkeypatch.setenv("POSITIONLESS_LOG_STAGES_ARRAYCOLLECTION", "yes")

    loader = ConfigLoader()

    assert loader.load_rotation_config(ArrayCollection).log_stages is True
    assert loader.load_rotation_config(TracedArray).log_stages is False


def test_invalid_env_value_warns_and_reads_false(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv("POSITIONLESS_CHECK_PRECONDITIONS", "maybe")

    with caplog.at_level(logging.WARNING, logger="positionless"):
        config = ConfigLoader().load_rotation_config()

    assert config.check_preconditions is False
    assert any("POSITIONLESS_CHECK_PRECONDITIONS" in r.getMessage() for r in caplog.records)


def test_configs_are_cached_until_reloaded(monkeypatch: pytest.MonkeyPatch) -> None:
    loader = ConfigLoader()
    first = loader.load_rotation_config(ArrayCollection)

    monkeypatch.setenv("POSITIONLESS_LOG_STAGES", "1")

    assert loader.load_rotation_config(ArrayCollection) is first
    assert loader.load_rotation_config(ArrayCollection, force_reload=True).log_stages is True

    loader.clear_cache(ArrayCollection)
    assert loader.load_rotation_config(ArrayCollection) is not first


def test_rotate_uses_the_container_configuration() -> None:
    assert load_rotation_config(QuietArray).check_preconditions is False

    storage = [1, 2, 3]
    rotate(QuietArray(storage), 7)
    assert storage == [1, 2, 3]

    with pytest.raises(PivotOutOfRangeError):
        rotate(ArrayCollection(storage), 7)
