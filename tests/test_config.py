"""Tests for settings loading and logging helpers."""

from __future__ import annotations

import json
import logging

import pytest

pytest.importorskip("numpy")

from binwise import configure_logging  # noqa: E402
from binwise.config import BinningSettings, load_config_files, load_settings, parse_value  # noqa: E402
from binwise.errors import ConfigError  # noqa: E402
from binwise.logutil import get_logger, normalize_level  # noqa: E402


@pytest.mark.parametrize(
	("raw", "expected"),
	[
		("3", 3),
		("2.5", 2.5),
		("True", True),
		("yes", True),
		("off", False),
		("null", None),
		("[1, 2]", [1, 2]),
		("(1, 2)", [1, 2]),
		("freedmanDiaconis", "freedmanDiaconis"),
		("  scott  ", "scott"),
	],
)
def test_parse_value(raw, expected):
	assert parse_value(raw) == expected


def test_defaults_without_path_or_env(monkeypatch):
	monkeypatch.delenv("BINWISE_CONFIG", raising=False)
	settings = load_settings()
	assert settings == BinningSettings()
	assert settings.rule == "default"
	assert settings.population is False


def test_load_ini_settings(tmp_path):
	path = tmp_path / "binning.ini"
	path.write_text(
		"[binning]\nrule = freedmanDiaconis\npopulation = true\nlog_level = DEBUG\n",
		encoding="utf-8",
	)
	settings = load_settings(path)
	assert settings.rule == "freedman_diaconis"
	assert settings.population is True
	assert settings.log_level == "DEBUG"


def test_load_json_settings_via_env(tmp_path, monkeypatch):
	path = tmp_path / "binning.json"
	path.write_text(json.dumps({"Binning": {"Rule": "doane", "population": False}}), encoding="utf-8")
	monkeypatch.setenv("BINWISE_CONFIG", str(path))
	settings = load_settings()
	assert settings.rule == "doane"
	assert settings.population is False


def test_missing_section_yields_defaults(tmp_path):
	path = tmp_path / "other.ini"
	path.write_text("[other]\nkey = 1\n", encoding="utf-8")
	assert load_settings(path) == BinningSettings()


@pytest.mark.parametrize(
	"body",
	[
		"[binning]\nrule = nonsense\n",
		"[binning]\nrule = scott\ncolour = red\n",
		"[binning]\npopulation = 3\n",
		"[binning]\nlog_level = LOUD\n",
		"not an ini file",
	],
)
def test_invalid_ini_settings(tmp_path, body):
	path = tmp_path / "bad.ini"
	path.write_text(body, encoding="utf-8")
	with pytest.raises(ConfigError):
		load_settings(path)


def test_invalid_json_settings(tmp_path):
	broken = tmp_path / "broken.json"
	broken.write_text("{", encoding="utf-8")
	with pytest.raises(ConfigError):
		load_settings(broken)

	wrong_shape = tmp_path / "list.json"
	wrong_shape.write_text("[1, 2]", encoding="utf-8")
	with pytest.raises(ConfigError):
		load_settings(wrong_shape)


def test_missing_file(tmp_path):
	with pytest.raises(ConfigError, match="Missing"):
		load_settings(tmp_path / "absent.ini")


def test_later_files_override_earlier(tmp_path):
	first = tmp_path / "a.ini"
	first.write_text("[binning]\nrule = rice\npopulation = yes\n", encoding="utf-8")
	second = tmp_path / "b.json"
	second.write_text(json.dumps({"binning": {"rule": "scott"}}), encoding="utf-8")
	merged = load_config_files([first, second])
	assert merged["binning"] == {"rule": "scott", "population": True}


def test_normalize_level():
	assert normalize_level("debug") == logging.DEBUG
	assert normalize_level(logging.ERROR) == logging.ERROR
	with pytest.raises(ValueError):
		normalize_level("LOUD")


def test_configure_logging_writes_file(tmp_path):
	name = "binwise.test_configure"
	log_file = tmp_path / "logs" / "binwise.log"
	log = configure_logging(name=name, console_level="WARNING", file_path=log_file, file_level="DEBUG")
	try:
		assert log.level == logging.DEBUG
		assert log.propagate is False
		log.debug("rule evaluated")
		for handler in log.handlers:
			handler.flush()
		assert "rule evaluated" in log_file.read_text(encoding="utf-8")

		# a second call does not stack another file handler
		configure_logging(name=name, console_level="WARNING", file_path=log_file)
		assert sum(isinstance(h, logging.FileHandler) for h in log.handlers) == 1
	finally:
		for handler in list(log.handlers):
			handler.close()
			log.removeHandler(handler)


def test_get_logger_attaches_single_root_handler():
	root = get_logger()
	before = len(root.handlers)
	get_logger("binwise.rules.library")
	get_logger()
	assert len(root.handlers) == before >= 1


@pytest.fixture(autouse=True)
def restore_package_logger():
	root = get_logger()
	saved = (root.level, root.propagate, [(h, h.level, h.formatter) for h in root.handlers])
	try:
		yield root
	finally:
		level, propagate, handlers = saved
		root.setLevel(level)
		root.propagate = propagate
		for handler, h_level, fmt in handlers:
			handler.setLevel(h_level)
			handler.setFormatter(fmt)


def test_loaded_log_level_is_applied(tmp_path, caplog, restore_package_logger):
	from binwise import suggest_bins

	path = tmp_path / "binning.ini"
	path.write_text("[binning]\nrule = sturges\nlog_level = DEBUG\n", encoding="utf-8")
	settings = load_settings(path)
	assert restore_package_logger.level == logging.DEBUG
	assert restore_package_logger.propagate is True

	with caplog.at_level(logging.DEBUG):
		suggest_bins([1, 2, 3, 4], settings.rule)
	assert "suggest_bins(rule=sturges)" in caplog.text


def test_log_level_can_be_left_alone(tmp_path, restore_package_logger):
	path = tmp_path / "binning.ini"
	path.write_text("[binning]\nlog_level = ERROR\n", encoding="utf-8")
	before = restore_package_logger.level
	load_settings(path, apply_logging=False)
	assert restore_package_logger.level == before

	BinningSettings(log_level="ERROR").apply_logging()
	assert restore_package_logger.level == logging.ERROR
