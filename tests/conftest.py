import pytest

from phonecore.core.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("STRICT_CALLING_CODES", raising=False)
    monkeypatch.delenv("REGION_NAME_LANGUAGE", raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
