import dataclasses

import pytest

from lfx_auth.http_config import Config, default_config


def test_default_config():
    config = default_config()
    assert config.timeout == 30
    assert config.max_retries == 2
    assert config.retry_delay == 1
    assert config.retry_backoff is True


def test_custom_config_keeps_values():
    config = Config(timeout=10, max_retries=2, retry_delay=0.5, retry_backoff=True)
    assert config.timeout == 10
    assert config.max_retries == 2
    assert config.retry_delay == 0.5
    assert config.retry_backoff is True


def test_config_is_immutable():
    config = default_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_retries = 5  # type: ignore[misc]
    assert config.max_retries == 2


def test_replace_changes_only_given_field():
    config = dataclasses.replace(default_config(), retry_backoff=False)
    assert config.retry_backoff is False
    assert config.timeout == default_config().timeout
    assert config.max_retries == default_config().max_retries