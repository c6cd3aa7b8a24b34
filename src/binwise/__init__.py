"""
binwise: histogram bin count and bin width suggestions.

Top-level API keeps imports lazy:

    from binwise import suggest_bins, suggest_bin_width
    k = suggest_bins(data)                  # Freedman-Diaconis
    k = suggest_bins(data, "doane", population=True)
    h = suggest_bin_width(data, "scott")

    from binwise import BinSelection, load_settings
    sel = BinSelection.from_settings(data, load_settings("binning.ini"))
"""

from importlib import import_module
from importlib.metadata import version, PackageNotFoundError as _PNF
from typing import TYPE_CHECKING

try:
	__version__ = version("binwise")
except _PNF:
	__version__ = "0.0.0+local"

__all__ = [
	"__version__",
	# dispatch
	"suggest_bins", "suggest_bin_width", "suggest_all", "resolve_rule", "BinSelection",
	# rules
	"square_root", "sturges", "rice", "terrell_scott", "doane", "scott", "freedman_diaconis",
	"ScottResult", "FreedmanDiaconisResult",
	# errors
	"BinningError", "InvalidDataset", "UnknownRule", "ConfigError",
	# config / logging
	"BinningSettings", "load_settings", "configure_logging",
	# namespaces
	"imports", "stats", "rules", "config", "logutil", "errors",
]

_RULE_EXPORTS = {
	"suggest_bins", "suggest_bin_width", "suggest_all", "resolve_rule", "BinSelection",
	"square_root", "sturges", "rice", "terrell_scott", "doane", "scott", "freedman_diaconis",
	"ScottResult", "FreedmanDiaconisResult",
}
_ERROR_EXPORTS = {"BinningError", "InvalidDataset", "UnknownRule", "ConfigError"}
_CONFIG_EXPORTS = {"BinningSettings", "load_settings"}
_NAMESPACES = {"imports", "stats", "rules", "config", "logutil", "errors"}


def __getattr__(name: str):
	if name in _RULE_EXPORTS:
		return getattr(import_module("binwise.rules"), name)
	if name in _ERROR_EXPORTS:
		return getattr(import_module("binwise.errors"), name)
	if name in _CONFIG_EXPORTS:
		return getattr(import_module("binwise.config"), name)
	if name == "configure_logging":
		return import_module("binwise.logutil").configure_logging
	if name in _NAMESPACES:
		return import_module(f"binwise.{name}")

	raise AttributeError(f"module 'binwise' has no attribute {name!r}")


if TYPE_CHECKING:
	from . import imports, stats, rules, config, logutil, errors  # noqa: F401
	from .rules import (  # noqa: F401
		suggest_bins, suggest_bin_width, suggest_all, resolve_rule, BinSelection,
		square_root, sturges, rice, terrell_scott, doane, scott, freedman_diaconis,
		ScottResult, FreedmanDiaconisResult,
	)
	from .errors import BinningError, InvalidDataset, UnknownRule, ConfigError  # noqa: F401
	from .config import BinningSettings, load_settings  # noqa: F401
	from .logutil import configure_logging  # noqa: F401
