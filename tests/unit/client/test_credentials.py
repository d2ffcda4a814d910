"""
Unit tests for API key providers.
"""

import pytest

from fullcontact_client.client.credentials import (
    EnvironmentCredentialsProvider,
    RotatingCredentialsProvider,
    StaticCredentialsProvider,
)
from fullcontact_client.client.exceptions import FullContactConfigurationError


def test_static_provider_returns_trimmed_key():
    assert StaticCredentialsProvider("  abc  ").get_api_key() == "abc"


@pytest.mark.parametrize("api_key", ["", "   "])
def test_static_provider_rejects_blank_key(api_key):
    with pytest.raises(FullContactConfigurationError):
        StaticCredentialsProvider(api_key)


def test_repr_hides_key():
    assert "abc" not in repr(StaticCredentialsProvider("abc"))
    assert "abc" not in repr(RotatingCredentialsProvider("abc"))


def test_environment_provider_reads_on_every_call(monkeypatch):
    monkeypatch.setenv("FC_API_KEY", "one")
    provider = EnvironmentCredentialsProvider()

    assert provider.get_api_key() == "one"

    monkeypatch.setenv("FC_API_KEY", "two")
    assert provider.get_api_key() == "two"


def test_environment_provider_custom_variable(monkeypatch):
    monkeypatch.setenv("MY_FC_KEY", "custom")

    assert EnvironmentCredentialsProvider("MY_FC_KEY").get_api_key() == "custom"


def test_environment_provider_requires_variable(monkeypatch):
    monkeypatch.delenv("FC_API_KEY", raising=False)

    with pytest.raises(FullContactConfigurationError) as exc_info:
        EnvironmentCredentialsProvider()

    assert exc_info.value.details == {"variable": "FC_API_KEY"}


def test_environment_provider_fails_when_variable_removed(monkeypatch):
    monkeypatch.setenv("FC_API_KEY", "one")
    provider = EnvironmentCredentialsProvider()
    monkeypatch.delenv("FC_API_KEY")

    with pytest.raises(FullContactConfigurationError):
        provider.get_api_key()


def test_rotating_provider_swaps_key():
    provider = RotatingCredentialsProvider("old")

    provider.rotate("new")

    assert provider.get_api_key() == "new"


def test_rotating_provider_rejects_blank_rotation():
    provider = RotatingCredentialsProvider("old")

    with pytest.raises(FullContactConfigurationError):
        provider.rotate("")

    assert provider.get_api_key() == "old"
