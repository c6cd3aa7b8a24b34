# src/binwise/errors.py

from __future__ import annotations

from typing import Optional

__all__ = ["BinningError", "InvalidDataset", "UnknownRule", "ConfigError"]


class BinningError(ValueError):
	"""Base class for all errors raised by binwise."""


class InvalidDataset(BinningError):
	"""
	The dataset violates a rule's minimum-size precondition.

	Raised for empty data (most rules) and for fewer than three points (Doane's rule).
	The message names the rule that was being applied.
	"""


class UnknownRule(BinningError):
	"""A rule identifier outside the closed set of supported binning rules."""

	def __init__(self, rule: object, message: Optional[str] = None) -> None:
		self.rule = rule
		super().__init__(message or f"Unknown binning method: {rule}")


class ConfigError(BinningError):
	"""Settings file is missing, unreadable or has an invalid shape."""
