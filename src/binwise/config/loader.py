from __future__ import annotations

import ast
import configparser
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, MutableMapping, Union

from ..errors import ConfigError
from ..logutil import get_logger

LOG = get_logger(__name__)

PathLike = Union[str, Path]

__all__ = [
	"parse_value", "merge_layer",
	"load_ini_file", "load_json_file", "load_config_file", "load_config_files",
]


def parse_value(raw: str) -> Any:
	"""
	Parse a raw INI string into a typed Python value.

	The parser attempts, in order:
	  1) ``ast.literal_eval`` for safe Python literals (numbers, strings, lists, dicts, booleans, None).
	  2) Common textual None markers: ``none``, ``null``, ``na``, ``n/a``.
	  3) Booleans: ``true/yes/on`` → ``True``, ``false/no/off`` → ``False``.
	  4) Numeric fallback (int/float).
	  5) Otherwise the original string.

	:param raw: Source text as read from ConfigParser.
	:return: Best-effort typed value.
	"""
	s = raw.strip()

	try:
		value = ast.literal_eval(s)
		if isinstance(value, tuple):
			return list(value)
		return value
	except (ValueError, TypeError, SyntaxError):
		pass

	lower = s.lower()
	if lower in {"none", "null", "na", "n/a"}:
		return None

	if lower in {"true", "yes", "on"}:
		return True
	if lower in {"false", "no", "off"}:
		return False

	try:
		if "." in s:
			return float(s)
		return int(s)
	except ValueError:
		return s


def merge_layer(base: MutableMapping[str, Dict[str, Any]], layer: Mapping[str, Mapping[str, Any]]) -> None:
	"""
	Deep-merge *layer* into *base* at the section/key level.

	Later (right) values overwrite earlier (left) values for identical keys.

	:param base: Destination mapping (modified in place).
	:param layer: Source mapping to overlay.
	"""
	for sec, mapping in layer.items():
		if not isinstance(mapping, Mapping):
			raise ConfigError(f"Section '{sec}' must be a mapping, got {type(mapping).__name__}.")
		dest = base.setdefault(sec, {})
		for k, v in mapping.items():
			dest[k] = v


def load_ini_file(path: PathLike) -> Dict[str, Dict[str, Any]]:
	"""
	Load an INI file into ``{section: {key: typed value}}`` (names lowercased).

	Interpolation is disabled; values are typed via :func:`parse_value`.

	:raises ConfigError: On a missing file or parse errors.
	"""
	p = Path(path)
	if not p.exists():
		raise ConfigError(f"Missing config file: {p}")

	cp = configparser.ConfigParser(interpolation=None)
	try:
		with p.open("r", encoding="utf-8") as fh:
			cp.read_file(fh)
	except (OSError, configparser.Error) as exc:
		raise ConfigError(f"Failed reading '{p}': {exc}") from exc

	out: Dict[str, Dict[str, Any]] = {}
	for section in cp.sections():
		out[section.lower()] = {key.lower(): parse_value(value) for key, value in cp.items(section)}
	LOG.info("Loaded INI file: %s", p)
	return out


def load_json_file(path: PathLike) -> Dict[str, Dict[str, Any]]:
	"""
	Load a JSON config file of the shape ``{"section": {"key": value, ...}, ...}``.

	:raises ConfigError: On IO/parse errors or invalid shapes.
	"""
	p = Path(path)
	if not p.exists():
		raise ConfigError(f"Missing JSON config file: {p}")
	try:
		with p.open("r", encoding="utf-8") as fh:
			obj = json.load(fh)
	except (OSError, json.JSONDecodeError) as exc:
		raise ConfigError(f"Failed reading JSON '{p}': {exc}") from exc

	if not isinstance(obj, dict):
		raise ConfigError(f"Top-level JSON in '{p}' must be an object.")

	out: Dict[str, Dict[str, Any]] = {}
	for sec, mapping in obj.items():
		if not isinstance(mapping, dict):
			raise ConfigError(f"Section '{sec}' in '{p}' must be an object.")
		merge_layer(out, {sec.lower(): {str(k).lower(): v for k, v in mapping.items()}})
	LOG.info("Loaded JSON file: %s", p)
	return out


def load_config_file(path: PathLike) -> Dict[str, Dict[str, Any]]:
	"""Dispatch on suffix: ``.json`` → JSON, anything else → INI."""
	if Path(path).suffix.lower() == ".json":
		return load_json_file(path)
	return load_ini_file(path)


def load_config_files(files: Iterable[PathLike]) -> Dict[str, Dict[str, Any]]:
	"""Load several files; later files override earlier ones per key."""
	merged: Dict[str, Dict[str, Any]] = {}
	for path in files:
		merge_layer(merged, load_config_file(path))
	return merged
