import logging
from pathlib import Path

from transaction_ledger.config import DEFAULT_DATA_PATH, load_settings


def test_defaults_without_environment():
    settings = load_settings()
    assert settings.data_path == DEFAULT_DATA_PATH
    assert settings.log_level == logging.INFO


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TRANSACTION_LEDGER_DATA_PATH", "/srv/data/tx.json")
    monkeypatch.setenv("TRANSACTION_LEDGER_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.data_path == Path("/srv/data/tx.json")
    assert settings.log_level == logging.DEBUG


def test_dotenv_in_cwd_is_loaded(tmp_path):
    (tmp_path / ".env").write_text(
        "TRANSACTION_LEDGER_DATA_PATH=from-dotenv.json\nTRANSACTION_LEDGER_LOG_LEVEL=WARNING\n",
        encoding="utf-8",
    )
    settings = load_settings()
    assert settings.data_path == Path("from-dotenv.json")
    assert settings.log_level == logging.WARNING


def test_dotenv_does_not_override_environment(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("TRANSACTION_LEDGER_DATA_PATH=from-dotenv.json\n", encoding="utf-8")
    monkeypatch.setenv("TRANSACTION_LEDGER_DATA_PATH", "from-env.json")
    assert load_settings().data_path == Path("from-env.json")


def test_dotenv_can_be_skipped(tmp_path):
    (tmp_path / ".env").write_text("TRANSACTION_LEDGER_DATA_PATH=from-dotenv.json\n", encoding="utf-8")
    assert load_settings(load_env_file=False).data_path == DEFAULT_DATA_PATH


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("TRANSACTION_LEDGER_LOG_LEVEL", "chatty")
    assert load_settings().log_level == logging.INFO
