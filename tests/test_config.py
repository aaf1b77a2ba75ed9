import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_settings_read_from_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SECRET_TOKEN", "from-env")
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./x.db")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    settings = Settings()
    assert settings.secret_token == "from-env"
    assert settings.database_url == "sqlite+aiosqlite:///./x.db"
    assert settings.log_level == "warning"
    assert settings.jwt_algorithm == "HS256"


def test_settings_require_secret(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SECRET_TOKEN", raising=False)

    with pytest.raises(ValidationError):
        Settings()


def test_settings_read_env_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SECRET_TOKEN", raising=False)
    (tmp_path / ".env").write_text("SECRET_TOKEN=from-file\nCREATE_TABLES=false\n")

    settings = Settings()
    assert settings.secret_token == "from-file"
    assert settings.create_tables is False
