"""
Basic tests for the multiplication table generator
"""

from tablegen import main as main_module
from tablegen.config import Settings, get_settings
from tablegen.models.schemas import TableFormat


def test_config_loading():
    """Test configuration loading"""
    settings = Settings(_env_file=None)

    assert settings.app_env == "prod"
    assert settings.log_level == "WARNING"
    assert settings.default_format == TableFormat.SIMPLE
    assert not settings.is_dev


def test_config_from_environment(monkeypatch):
    """Test environment overrides"""
    monkeypatch.setenv("TABLEGEN_APP_ENV", "dev")
    monkeypatch.setenv("TABLEGEN_DEFAULT_FORMAT", "boxed")

    settings = Settings(_env_file=None)

    assert settings.is_dev
    assert settings.default_format == TableFormat.BOXED


def test_main_runs_session(monkeypatch, capsys):
    """Test the entry point against scripted stdin"""
    answers = iter(["6", "p", "7", "7", "2", "1", "n"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    get_settings.cache_clear()

    exit_code = main_module.main()

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert "| 6 x 7 =  42 |" in out
    assert out[-1] == "Goodbye!"
    get_settings.cache_clear()


def test_main_rejects_bad_configuration(monkeypatch, capsys):
    """Test invalid settings exit with status 1"""
    monkeypatch.setenv("TABLEGEN_DEFAULT_FORMAT", "sparkly")
    get_settings.cache_clear()

    assert main_module.main() == 1
    assert "Invalid configuration" in capsys.readouterr().err
    get_settings.cache_clear()
