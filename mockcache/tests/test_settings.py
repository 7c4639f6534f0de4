import os

from mockcache.settings import DEFAULT_TTL, Settings, get_settings


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MOCKCACHE_DEFAULT_TTL", raising=False)
    monkeypatch.delenv("MOCKCACHE_METRICS", raising=False)

    assert Settings() == get_settings()
    assert get_settings().default_ttl == DEFAULT_TTL == 86400
    assert get_settings().metrics_enabled is True


def test_settings_invalid_int_falls_back(monkeypatch):
    monkeypatch.setenv("MOCKCACHE_DEFAULT_TTL", "nope")

    assert get_settings().default_ttl == 86400


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("MOCKCACHE_DEFAULT_TTL", "120")
    monkeypatch.setenv("MOCKCACHE_METRICS", "off")
    settings = get_settings()

    assert settings.default_ttl == 120
    assert settings.metrics_enabled is False


def test_get_settings_reads_dotenv_without_touching_environment(monkeypatch, tmp_path):
    monkeypatch.delenv("MOCKCACHE_DEFAULT_TTL", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    (tmp_path / ".env").write_text("MOCKCACHE_DEFAULT_TTL=300\nDATABASE_URL=postgres://prod\n")
    monkeypatch.chdir(tmp_path)

    assert get_settings().default_ttl == 300
    assert "MOCKCACHE_DEFAULT_TTL" not in os.environ
    assert "DATABASE_URL" not in os.environ


def test_environment_wins_over_dotenv(monkeypatch, tmp_path):
    monkeypatch.setenv("MOCKCACHE_DEFAULT_TTL", "42")
    (tmp_path / ".env").write_text("MOCKCACHE_DEFAULT_TTL=300\n")
    monkeypatch.chdir(tmp_path)

    assert get_settings().default_ttl == 42
