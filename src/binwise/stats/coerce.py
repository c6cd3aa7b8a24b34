# src/binwise/stats/coerce.py
from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from typing import Any, Optional, Union

from ..logutil import get_logger
from ..imports import numpy as np  # type: ignore
from ..imports import pandas as pd  # type: ignore

LOG = get_logger(__name__)

__all__ = ["DataLike", "coerce_vector"]

ArrayLike1D = Union[Sequence[float], "np.ndarray", "pd.Series"]  # type: ignore[name-defined]
DataLike = Union[ArrayLike1D, "pd.DataFrame", Mapping[str, float], Set[float]]  # type: ignore[name-defined]


# --- Core Conversion Helpers ---
def _from_pandas(obj: Any) -> bool:
	# checked by module name so that plain lists never trigger a pandas import
	return type(obj).__module__.split(".", 1)[0] == "pandas"


def _ensure_numeric(a: "np.ndarray") -> "np.ndarray":
	"""Raise a user-friendly error if an array is not numeric."""
	if not np.issubdtype(a.dtype, np.number):
		raise ValueError(f"Expected numeric data, got dtype={a.dtype!r}")
	return a


def _from_dataframe(
		df: "pd.DataFrame",
		column: Optional[Union[int, str]],
		dtype: Any
) -> "np.ndarray":
	if df.shape[1] == 1 and column is None:
		arr = df.iloc[:, 0].to_numpy()
	else:
		if column is None:
			raise ValueError(
				f"DataFrame has {df.shape[1]} columns; please specify `column` (name or 0-based index)."
			)
		try:
			col = df.iloc[:, column] if isinstance(column, int) else df[column]
		except (IndexError, KeyError) as exc:
			LOG.error("Failed to select column %r: %s", column, exc)
			raise ValueError(f"Invalid column selector: {column!r}") from exc
		arr = col.to_numpy()
	return _ensure_numeric(np.asarray(arr, dtype=dtype))


def _from_nd_array(a: "np.ndarray", dtype: Any) -> "np.ndarray":
	if a.ndim == 0:
		raise ValueError("Scalar is not valid; expected 1D array-like")
	if a.ndim > 1:
		raise ValueError(f"Expected 1D array-like; got ndim={a.ndim}")
	return _ensure_numeric(np.array(a, dtype=dtype, copy=True))


def coerce_vector(
		data: DataLike,
		*,
		column: Optional[Union[int, str]] = None,
		dtype: Any = float,
) -> "np.ndarray":
	"""
	Convert a dataset container to a fresh 1D numpy array.

	Accepts sequences, sets, 1D ndarrays, Series, mappings (values in insertion order)
	and DataFrames (single column, or ``column`` selecting one). The result is
	always a copy, so callers may sort it in place without touching the input.
	Empty input yields an empty array; deciding whether that is acceptable is up
	to the rule consuming it.

	:param data: Input data.
	:param column: Column selector when ``data`` is a DataFrame.
	:param dtype: Numpy dtype to cast the result to (default float).
	:return: 1D numeric array.
	:raises ValueError: On unsupported type, scalars, ndim > 1, multiple DataFrame
						columns without ``column`` or non-numeric data.
	"""
	if _from_pandas(data):
		if isinstance(data, pd.DataFrame):
			return _from_dataframe(data, column, dtype)
		if isinstance(data, pd.Series):
			return _ensure_numeric(np.asarray(data.to_numpy(), dtype=dtype).copy())

	if isinstance(data, np.ndarray):
		return _from_nd_array(data, dtype)

	if isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
		return _from_nd_array(np.asarray(list(data), dtype=dtype), dtype)

	if isinstance(data, Mapping):
		return _from_nd_array(np.asarray(list(data.values()), dtype=dtype), dtype)

	# unordered input; no rule depends on element order
	if isinstance(data, Set):
		return _from_nd_array(np.asarray(list(data), dtype=dtype), dtype)

	raise ValueError(f"Unsupported data type: {type(data)}")
