"""Tests for validated runtime settings."""

import pytest

from ttyguard.config import Config, RuntimeSettings


def test_settings_copy_valid_values() -> None:
    settings = RuntimeSettings.from_config(Config(truncation_limit=80, copy_chunk_size=16))

    assert settings == RuntimeSettings(truncation_limit=80, copy_chunk_size=16)


@pytest.mark.parametrize("bad_value", [0, -10, True, "1600"])
def test_settings_fall_back_on_invalid_values(bad_value: object) -> None:
    config = Config()
    config.truncation_limit = bad_value  # type: ignore[assignment]
    config.copy_chunk_size = bad_value  # type: ignore[assignment]

    settings = RuntimeSettings.from_config(config)

    assert settings == RuntimeSettings()
    assert settings.truncation_limit == 1600
