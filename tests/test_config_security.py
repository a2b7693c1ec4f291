import pytest
from pydantic import ValidationError

from app.config import Settings
from app.errors import Unauthorized
from app.security import check_admin_secret


def test_defaults(monkeypatch):
    for name in ("PORT", "ADMIN_SECRET_KEY", "CORS_ORIGINS", "EXPOSE_ERROR_DETAILS", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.PORT == 3000
    assert s.ADMIN_SECRET_KEY is None
    assert s.cors_origins == ["*"]
    assert s.EXPOSE_ERROR_DETAILS is False
    assert s.DATABASE_URL.startswith("sqlite:///")


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ADMIN_SECRET_KEY", "abc")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, https://games.example")
    s = Settings(_env_file=None)
    assert s.PORT == 8080
    assert s.ADMIN_SECRET_KEY == "abc"
    assert s.cors_origins == ["http://localhost:5173", "https://games.example"]


def test_blank_secret_counts_as_unset():
    assert Settings(_env_file=None, ADMIN_SECRET_KEY="").ADMIN_SECRET_KEY is None


def test_settings_are_immutable():
    s = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        s.PORT = 1


def test_matching_secret_passes():
    check_admin_secret("abc", "abc")


@pytest.mark.parametrize("presented", [None, "", "ABC", "abc ", "ab"])
def test_other_secrets_fail(presented):
    with pytest.raises(Unauthorized):
        check_admin_secret(presented, "abc")


def test_unconfigured_secret_fails():
    with pytest.raises(Unauthorized):
        check_admin_secret("", None)
