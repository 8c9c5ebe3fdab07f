"""Tests for configuration parsing."""

from photo_contest.config import Settings, parse_allowed_origins


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("MAX_REQUEST_BYTES", raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.max_request_bytes == 50 * 1024 * 1024


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert parse_allowed_origins(settings.cors_allow_origins) == [
        "http://a.test",
        "http://b.test",
    ]


def test_parse_allowed_origins() -> None:
    assert parse_allowed_origins(None) == []
    assert parse_allowed_origins(" * ") == ["*"]
    assert parse_allowed_origins("") == []
    assert parse_allowed_origins("http://a.test,,") == ["http://a.test"]
