"""Tests for settings loading."""

import pytest

from mdcards.config import Settings, get_settings, load_settings, set_settings
from mdcards.error_codes import ErrorCode
from mdcards.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("MDCARDS_HTML_LANG", "MDCARDS_LOG_LEVEL", "MDCARDS_OVERWRITE"):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    """YAML file and environment layering."""

    def test_defaults(self) -> None:
        settings = load_settings()

        assert settings.log_level == "INFO"
        assert settings.default_format == "html"
        assert settings.overwrite is False
        assert settings.anki_notetype == "Basic"

    def test_yaml_values(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("html_lang: fr\noverwrite: true\nlog_level: debug\n", encoding="utf-8")

        settings = load_settings(path)

        assert settings.html_lang == "fr"
        assert settings.overwrite is True
        assert settings.log_level == "DEBUG"

    def test_environment_wins_over_yaml(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("html_lang: fr\n", encoding="utf-8")
        monkeypatch.setenv("MDCARDS_HTML_LANG", "de")

        assert load_settings(path).html_lang == "de"

    def test_malformed_yaml(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("html_lang: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(path)

        assert exc_info.value.error_code == ErrorCode.CFG_LOAD_FAILED.value

    def test_invalid_value(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("default_format: pdf\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(path)

        assert exc_info.value.error_code == ErrorCode.CFG_INVALID_VALUE.value


class TestCachedSettings:
    """Process-level settings cache."""

    def test_set_and_get(self) -> None:
        settings = Settings(html_lang="it")
        set_settings(settings)

        assert get_settings() is settings

    def test_assignment_is_validated(self) -> None:
        settings = Settings()

        with pytest.raises(ValueError):
            settings.log_level = "LOUD"
