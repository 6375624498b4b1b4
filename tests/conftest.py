import pytest

from estemplate.config import ENV_PREFIX, get_settings


@pytest.fixture(autouse=True)
def settings(monkeypatch, tmp_path):
    """Use default output settings, ignoring any environment or .env file of the developer"""
    for name in ("env_file", "sort_keys", "indent", "ensure_ascii"):
        monkeypatch.delenv(f"{ENV_PREFIX}{name}".upper(), raising=False)
    monkeypatch.setenv(f"{ENV_PREFIX}env_file".upper(), str(tmp_path / ".env"))
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
