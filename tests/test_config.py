"""Tests for configuration (config.py) and logging setup (logging_config.py)."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from lemmata.config import Settings, find_config
from lemmata.dictionary import MalformedLinePolicy
from lemmata.errors import ConfigError
from lemmata.logging_config import LOG_FORMAT_DETAILED, setup_logging


# ── Settings defaults / validation ───────────────────────────────────────────

def test_defaults():
    s = Settings()
    assert s.asset_dir is None
    assert s.separator == "\t"
    assert s.on_malformed is MalformedLinePolicy.STRICT
    assert s.index_lemmas is True
    assert s.log_level == "INFO"
    assert s.log_file is None


def test_policy_string_is_coerced():
    assert Settings(on_malformed="skip").on_malformed is MalformedLinePolicy.SKIP


def test_unknown_policy():
    with pytest.raises(ConfigError, match="on_malformed"):
        Settings(on_malformed="ignore")


@pytest.mark.parametrize("sep", ["", "\n", "a\r", 3])
def test_bad_separator(sep):
    with pytest.raises(ConfigError):
        Settings(separator=sep)


def test_bad_index_lemmas():
    with pytest.raises(ConfigError):
        Settings(index_lemmas="yes")


def test_log_level_normalized():
    s = Settings(log_level="debug")
    assert s.log_level == "DEBUG"
    assert s.log_level_value == logging.DEBUG


def test_bad_log_level():
    with pytest.raises(ConfigError):
        Settings(log_level="LOUD")



@pytest.mark.parametrize("key", ["max_bytes", "backup_count"])
@pytest.mark.parametrize("value", ["lots", -1, 1.5, True])
def test_bad_log_rotation_numbers(key, value):
    with pytest.raises(ConfigError, match=key):
        Settings.from_dict({"logging": {key: value}})

def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        Settings(log_level="LOUD")


# ── from_dict / from_file ────────────────────────────────────────────────────

def test_from_dict_resolves_relative_paths(tmp_path):
    s = Settings.from_dict(
        {"assets": {"dir": "dicts"}, "logging": {"file": "logs/l.log", "level": "WARNING"}},
        base_dir=tmp_path,
    )
    assert s.asset_dir == tmp_path / "dicts"
    assert s.log_file == tmp_path / "logs" / "l.log"
    assert s.log_level == "WARNING"


def test_from_dict_keeps_absolute_paths(tmp_path):
    s = Settings.from_dict({"assets": {"dir": str(tmp_path)}}, base_dir="/elsewhere")
    assert s.asset_dir == tmp_path


def test_from_dict_empty():
    assert Settings.from_dict({}) == Settings()


def test_from_dict_section_must_be_table():
    with pytest.raises(ConfigError):
        Settings.from_dict({"parser": "strict"})


def test_from_dict_bad_path():
    with pytest.raises(ConfigError):
        Settings.from_dict({"assets": {"dir": 5}})


def test_from_file(tmp_path):
    cfg = tmp_path / "lemmata.toml"
    cfg.write_text(
        '[parser]\nseparator = "|"\non_malformed = "skip"\nindex_lemmas = false\n'
        '\n[logging]\nlevel = "ERROR"\nmax_bytes = 1024\nbackup_count = 2\n',
        encoding="utf-8",
    )
    s = Settings.from_file(cfg)
    assert s.separator == "|"
    assert s.on_malformed is MalformedLinePolicy.SKIP
    assert s.index_lemmas is False
    assert s.log_level == "ERROR"
    assert s.log_file_max_bytes == 1024
    assert s.log_file_backup_count == 2


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Settings.from_file(tmp_path / "nope.toml")


def test_from_file_invalid_toml(tmp_path):
    cfg = tmp_path / "lemmata.toml"
    cfg.write_text("[parser\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Settings.from_file(cfg)


def test_find_config(tmp_path):
    assert find_config(tmp_path) is None
    (tmp_path / "lemmata.toml").write_text("", encoding="utf-8")
    assert find_config(tmp_path) == Path(tmp_path) / "lemmata.toml"


# ── setup_logging ────────────────────────────────────────────────────────────

@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for h in root.handlers[:]:
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_setup_logging_console_only(restore_root_logger):
    setup_logging(Settings(log_level="WARNING"))
    root = restore_root_logger
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_setup_logging_with_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "lemmata.log"
    setup_logging(Settings(log_file=log_file))
    root = restore_root_logger
    assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
    assert log_file.parent.is_dir()

    logging.getLogger("lemmata.test").info("hello")
    for h in root.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_setup_logging_file_rotation_settings(tmp_path, restore_root_logger):
    settings = Settings(
        log_file=tmp_path / "lemmata.log", log_file_max_bytes=2048, log_file_backup_count=2
    )
    setup_logging(settings)
    (handler,) = [h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert handler.maxBytes == 2048
    assert handler.backupCount == 2
    assert handler.formatter._fmt == LOG_FORMAT_DETAILED


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging()
    setup_logging()
    assert len(restore_root_logger.handlers) == 1
