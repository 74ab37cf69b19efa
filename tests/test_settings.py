"""Tests for pydantic-settings configuration"""

import pytest
from pydantic import ValidationError

from ankitrans.config import AnkiSettings, AppSettings, DictionarySettings, LoggingSettings


class TestDictionarySettings:
    """Bing Dictionary lookup settings"""

    def test_defaults(self, monkeypatch):
        for name in ("BING_DICT_URL", "BING_DICT_MARKET", "BING_DICT_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        config = DictionarySettings()
        assert config.base_url == "https://cn.bing.com/dict/search"
        assert config.market == "zh-CN"
        assert config.request_timeout == 10

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BING_DICT_URL", "https://www.bing.com/dict/search/")
        monkeypatch.setenv("BING_DICT_TIMEOUT", "3")
        config = DictionarySettings()
        assert config.base_url == "https://www.bing.com/dict/search"
        assert config.request_timeout == 3

    def test_rejects_non_http_url(self, monkeypatch):
        monkeypatch.setenv("BING_DICT_URL", "ftp://cn.bing.com/dict")
        with pytest.raises(ValidationError):
            DictionarySettings()

    def test_rejects_non_positive_timeout(self, monkeypatch):
        monkeypatch.setenv("BING_DICT_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            DictionarySettings()


def test_anki_names_are_stripped_and_required(monkeypatch):
    monkeypatch.setenv("ANKI_MODEL_NAME", "  My Cards ")
    assert AnkiSettings().model_name == "My Cards"
    monkeypatch.setenv("ANKI_MODEL_NAME", "   ")
    with pytest.raises(ValidationError):
        AnkiSettings()


def test_log_level_validation(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert LoggingSettings().level == "DEBUG"
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        LoggingSettings()


def test_app_settings_aggregate(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    config = AppSettings()
    assert config.debug is True
    assert isinstance(config.dictionary, DictionarySettings)
    assert isinstance(config.anki, AnkiSettings)
    assert isinstance(config.logging, LoggingSettings)


def test_log_level_defaults_to_warning(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    config = LoggingSettings()
    assert config.level == "WARNING"
    assert config.file is None
