# src/binwise/rules/__init__.py
"""
Histogram binning rules and the dispatcher that selects them by name.
"""

from .dispatch import (
	BinSelection, RuleName,
	DEFAULT, DOANE, FREEDMAN_DIACONIS, PEARSON, RICE, SCOTT,
	SQUARE_ROOT, STURGES, TERRELL_SCOTT,
	RULES, WIDTH_RULES,
	resolve_rule, suggest_all, suggest_bin_width, suggest_bins,
)
from .library import (
	doane, freedman_diaconis, rice, scott, square_root, sturges, terrell_scott,
)
from .results import FreedmanDiaconisResult, ScottResult, WidthResult

__all__ = [
	"BinSelection", "RuleName",
	"DEFAULT", "DOANE", "FREEDMAN_DIACONIS", "PEARSON", "RICE", "SCOTT",
	"SQUARE_ROOT", "STURGES", "TERRELL_SCOTT",
	"RULES", "WIDTH_RULES",
	"resolve_rule", "suggest_all", "suggest_bin_width", "suggest_bins",
	"doane", "freedman_diaconis", "rice", "scott", "square_root", "sturges", "terrell_scott",
	"FreedmanDiaconisResult", "ScottResult", "WidthResult",
]
