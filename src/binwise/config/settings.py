from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from ..errors import ConfigError, UnknownRule
from ..logutil import configure_logging, get_logger, normalize_level
from ..rules.dispatch import DEFAULT, resolve_rule
from .loader import load_config_file

LOG = get_logger(__name__)

PathLike = Union[str, Path]

ENV_VAR = "BINWISE_CONFIG"

__all__ = ["ENV_VAR", "BinningSettings", "load_settings"]


@dataclass(frozen=True)
class BinningSettings:
	"""
	Defaults a caller applies when it does not name a rule itself.

	:param rule: Default rule identifier (validated against the supported rules).
	:param population: Use the population skewness formulas in Doane's rule.
	:param log_level: Level name or number for :func:`binwise.configure_logging`.
	"""

	rule: str = DEFAULT
	population: bool = False
	log_level: Union[str, int] = "INFO"

	def __post_init__(self) -> None:
		try:
			object.__setattr__(self, "rule", resolve_rule(self.rule))
		except UnknownRule as exc:
			raise ConfigError(f"Invalid rule in settings: {exc}") from exc
		if not isinstance(self.population, bool):
			raise ConfigError(f"'population' must be a boolean, got {self.population!r}")
		try:
			normalize_level(self.log_level, param_name="log_level")
		except ValueError as exc:
			raise ConfigError(str(exc)) from exc

	@classmethod
	def from_mapping(cls, mapping: Mapping[str, Any]) -> "BinningSettings":
		"""Build settings from a section mapping; unknown keys are rejected."""
		known = {f.name for f in fields(cls)}
		unknown = sorted(set(mapping) - known)
		if unknown:
			raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")
		return cls(**dict(mapping))

	def as_dict(self) -> Dict[str, Any]:
		return asdict(self)

	def apply_logging(self) -> logging.Logger:
		"""Set the package logger's console level to ``log_level``."""
		return configure_logging(console_level=self.log_level, propagate=True)


def load_settings(
		path: Optional[PathLike] = None,
		*,
		section: str = "binning",
		env_var: Optional[str] = ENV_VAR,
		apply_logging: bool = True,
) -> BinningSettings:
	"""
	Load :class:`BinningSettings` from an INI or JSON file.

	Resolution: explicit ``path`` → ``$env_var`` → built-in defaults. A file
	without the requested section also yields the defaults.

	:param path: Settings file (``.json`` for JSON, anything else is read as INI).
	:param section: Section holding the settings.
	:param env_var: Environment variable consulted when ``path`` is ``None``.
	:param apply_logging: Apply ``log_level`` from a loaded section to the package logger.
	:return: Validated settings.
	:raises ConfigError: On missing/malformed files or invalid values.
	"""
	if path is None and env_var:
		override = os.getenv(env_var)
		if override:
			path = Path(override).expanduser()
	if path is None:
		return BinningSettings()

	data = load_config_file(path)
	block = data.get(section.lower())
	if block is None:
		LOG.info("No [%s] section in %s; using defaults.", section, path)
		return BinningSettings()
	try:
		settings = BinningSettings.from_mapping(block)
	except ConfigError as exc:
		LOG.error("Invalid settings in %s: %s", path, exc)
		raise
	if apply_logging:
		settings.apply_logging()
	LOG.info("Loaded binning settings from %s: %s", path, settings)
	return settings
