import pytest
from pydantic import ValidationError

from quasijson._core.environment import AppSettings, resolve_option, settings


class TestAppSettings:
    """Tests for settings loaded from the environment."""

    def test_defaults(self, monkeypatch):
        for name in (
            'REPAIR_STRIP_SINGLE_QUOTES',
            'REPAIR_PRESERVE_LITERALS',
            'LOG_LEVEL',
        ):
            monkeypatch.delenv(name, raising=False)

        loaded = AppSettings(_env_file=None)

        assert loaded.repair_strip_single_quotes is True
        assert loaded.repair_preserve_literals is True
        assert loaded.log_level == 'INFO'

    def test_reads_repair_options_from_env(self, monkeypatch):
        monkeypatch.setenv('REPAIR_STRIP_SINGLE_QUOTES', 'false')
        monkeypatch.setenv('repair_preserve_literals', '0')

        loaded = AppSettings(_env_file=None)

        assert loaded.repair_strip_single_quotes is False
        assert loaded.repair_preserve_literals is False

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv('LOG_LEVEL', 'debug')
        assert AppSettings(_env_file=None).log_level == 'DEBUG'

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv('LOG_LEVEL', 'LOUD')
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)

    def test_negative_truncation_limit_rejected(self, monkeypatch):
        monkeypatch.setenv('LOG_MAX_INPUT_CHARS', '-1')
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)

    def test_reads_dotenv_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv('REPAIR_PRESERVE_LITERALS', raising=False)
        env_file = tmp_path / '.env'
        env_file.write_text('REPAIR_PRESERVE_LITERALS=false\n')

        assert AppSettings(_env_file=str(env_file)).repair_preserve_literals is False


def test_resolve_option_prefers_explicit_value(monkeypatch):
    monkeypatch.setattr(settings, 'repair_strip_single_quotes', True)

    assert resolve_option(False, 'repair_strip_single_quotes') is False
    assert resolve_option(None, 'repair_strip_single_quotes') is True
