import pytest
from funtils.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("FUNTILS_DEBOUNCE_DELAY_MS", raising=False)

    loaded = Settings.load()

    assert loaded.LOG_LEVEL == "INFO"
    assert loaded.DEBOUNCE_DELAY_MS == 100.0


def test_load_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("FUNTILS_DEBOUNCE_DELAY_MS", "25")

    loaded = Settings.load()

    assert loaded.LOG_LEVEL == "DEBUG"
    assert loaded.DEBOUNCE_DELAY_MS == 25.0


def test_negative_debounce_delay_rejected(monkeypatch):
    monkeypatch.setenv("FUNTILS_DEBOUNCE_DELAY_MS", "-5")

    with pytest.raises(ValueError):
        Settings.load()
