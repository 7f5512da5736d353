"""Tests for environment configuration."""

import pytest

from cardbridge.config import BASECAMP_API_BASE, DEFAULT_USER_AGENT, get_host, get_port, is_debug, load_settings

_ENV = {
    "BASECAMP_ACCOUNT_ID": "999",
    "BASECAMP_PROJECT_ID": "100",
    "BASECAMP_LIST_ID": "200",
    "BASECAMP_ACCESS_TOKEN": "test_access_token_value",
}

_OPTIONAL = (
    "USER_AGENT",
    "PORT",
    "HOST",
    "BASECAMP_API_BASE",
    "BASECAMP_TIMEOUT_SEC",
    "DIRECTORY_CACHE_TTL_SEC",
    "BOT_NAME",
    "DEBUG",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in (*_ENV, *_OPTIONAL):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    for name, value in _ENV.items():
        clean_env.setenv(name, value)

    settings = load_settings()

    assert settings.account_id == "999"
    assert settings.project_id == "100"
    assert settings.list_id == "200"
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.api_base == BASECAMP_API_BASE
    assert settings.timeout_sec == 10.0
    assert settings.cache_ttl_sec is None


def test_overrides(clean_env):
    for name, value in _ENV.items():
        clean_env.setenv(name, value)
    clean_env.setenv("USER_AGENT", "MyApp (me@example.com)")
    clean_env.setenv("BASECAMP_API_BASE", "https://example.test/")
    clean_env.setenv("DIRECTORY_CACHE_TTL_SEC", "300")

    settings = load_settings()

    assert settings.user_agent == "MyApp (me@example.com)"
    assert settings.api_base == "https://example.test"
    assert settings.cache_ttl_sec == 300.0


def test_server_options(clean_env):
    assert get_host() == "0.0.0.0"
    assert get_port() == 3000
    assert is_debug() is False

    clean_env.setenv("HOST", "127.0.0.1")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("DEBUG", "true")

    assert get_host() == "127.0.0.1"
    assert get_port() == 8080
    assert is_debug() is True


def test_missing_required_variables_listed(clean_env):
    clean_env.setenv("BASECAMP_ACCOUNT_ID", "999")

    with pytest.raises(ValueError) as exc_info:
        load_settings()

    message = str(exc_info.value)
    assert "BASECAMP_PROJECT_ID" in message
    assert "BASECAMP_LIST_ID" in message
    assert "BASECAMP_ACCESS_TOKEN" in message
    assert "BASECAMP_ACCOUNT_ID," not in message


def test_context_built_once_from_environment(clean_env):
    from cardbridge.api.dependencies import get_context, reset_context

    for name, value in _ENV.items():
        clean_env.setenv(name, value)
    reset_context()
    try:
        context = get_context()
        assert context is get_context()
        assert context.settings.project_id == "100"
        assert context.client.account_id == "999"
        assert not context.users.is_populated
    finally:
        reset_context()


def test_context_requires_configuration(clean_env):
    from cardbridge.api.dependencies import get_context, reset_context

    reset_context()
    with pytest.raises(ValueError):
        get_context()
