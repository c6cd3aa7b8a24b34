"""Tests for the individual binning rules in :mod:`binwise.rules.library`."""

from __future__ import annotations

import math

import pytest

np = pytest.importorskip("numpy")
pytest.importorskip("scipy")

from binwise.errors import InvalidDataset  # noqa: E402
from binwise.rules import (  # noqa: E402
	FreedmanDiaconisResult,
	ScottResult,
	doane,
	freedman_diaconis,
	rice,
	scott,
	square_root,
	sturges,
	terrell_scott,
)

MIXED = [1, 2.5, 3, 4.7, 5]


def seq(n: int) -> list:
	return list(range(1, n + 1))


@pytest.mark.parametrize(
	("data", "expected"),
	[
		(seq(1), 1),
		(seq(2), 2),
		(seq(4), 3),
		(seq(8), 4),
		(seq(10), 5),
		(seq(16), 5),
		(seq(32), 6),
		(seq(100), 8),
		(seq(1000), 11),
		(MIXED, 4),
	],
)
def test_sturges(data, expected):
	assert sturges(data) == expected


@pytest.mark.parametrize(
	("data", "expected"),
	[
		([42], 2),
		(seq(8), 4),
		(seq(27), 6),
		(seq(64), 8),
		(seq(100), 10),
		(seq(1000), 20),
		(MIXED, 4),
	],
)
def test_rice(data, expected):
	assert rice(data) == expected


@pytest.mark.parametrize(
	("data", "expected"),
	[
		([42], 2),
		(seq(8), 3),
		(seq(27), 4),
		(seq(64), 6),
		(seq(100), 6),
		(seq(1000), 13),
		(MIXED, 3),
	],
)
def test_terrell_scott(data, expected):
	assert terrell_scott(data) == expected


@pytest.mark.parametrize(
	("data", "expected"),
	[
		([42], 1),
		(seq(4), 2),
		(seq(9), 3),
		(seq(16), 4),
		(seq(25), 5),
		(seq(100), 10),
		(seq(10), 4),
		(MIXED, 3),
	],
)
def test_square_root(data, expected):
	assert square_root(data) == expected


@pytest.mark.parametrize(
	("rule", "label"),
	[
		(square_root, "Square Root Rule"),
		(sturges, "Sturges' Rule"),
		(rice, "Rice Rule"),
		(terrell_scott, "Terrell-Scott Rule"),
		(scott, "Scott's Rule"),
		(freedman_diaconis, "Freedman-Diaconis Rule"),
	],
)
def test_empty_dataset_names_the_rule(rule, label):
	with pytest.raises(InvalidDataset, match=label):
		rule([])


# --- Doane ---

DOANE_CASES = {
	"symmetric": ([1, 2, 3, 4, 5], 3),
	"right-skewed": ([1, 1, 1, 2, 2, 3, 5, 8, 13], 4),
	"left-skewed": ([1, 3, 5, 8, 8, 8, 9, 9, 9], 4),
	"uniform": (seq(100), 8),
	"highly skewed": ([1, 1, 1, 1, 1, 2, 3, 4, 100], 4),
}


@pytest.mark.parametrize("population", [False, True])
@pytest.mark.parametrize(("data", "min_bins"), list(DOANE_CASES.values()), ids=list(DOANE_CASES))
def test_doane_never_below_sturges(data, min_bins, population):
	k = doane(data, population=population)
	assert k >= min_bins
	assert k >= sturges(data)


def test_doane_requires_three_points():
	with pytest.raises(InvalidDataset, match="at least 3 numbers to apply the Doane's Rule"):
		doane([1, 2])
	with pytest.raises(InvalidDataset):
		doane([], population=True)


@pytest.mark.parametrize("population", [False, True])
def test_doane_accepts_exactly_three_points(population):
	assert doane([1, 2, 3], population=population) == 3
	assert doane([5, 5, 5], population=population) == 3


@pytest.mark.parametrize("skewed", [[1, 1, 1, 2, 10], [10, 1, 1, 1, 2], [1, 9, 9, 9, 10]])
def test_doane_adds_bins_for_skewed_data(skewed):
	symmetric = [1, 2, 3, 4, 5]
	assert doane(symmetric) == 4
	assert doane(skewed) >= doane(symmetric)


def test_doane_skewed_sample_value():
	# G1 ~ 2.17, ses(5) ~ 0.913: 1 + ceil(log2(5) + log2(3.38)) = 6
	assert doane([1, 1, 1, 2, 10]) == 6


# --- Scott / Freedman-Diaconis ---

@pytest.mark.parametrize("rule", [scott, freedman_diaconis])
@pytest.mark.parametrize("data", [[5, 5, 5, 5, 5], [42]])
def test_width_rules_degenerate_to_single_bin(rule, data):
	result = rule(data)
	assert result.bins == 1
	assert result.width == 0.0
	assert result.range == 0.0


def test_scott_values():
	result = scott(seq(20))
	assert isinstance(result, ScottResult)
	assert result.stddev == pytest.approx(math.sqrt(35))
	assert result.width == pytest.approx(3.49 * math.sqrt(35) / 20 ** (1 / 3))
	assert result.range == 19.0
	assert result.bins == 3
	assert scott(seq(100)).bins == 5
	assert isinstance(result.bins, int)


def test_freedman_diaconis_values():
	result = freedman_diaconis(seq(20))
	assert isinstance(result, FreedmanDiaconisResult)
	assert result.iqr == pytest.approx(10.0)
	assert result.width == pytest.approx(20 / 20 ** (1 / 3))
	assert result.bins == 3
	assert freedman_diaconis(seq(100)).bins == 5
	assert freedman_diaconis([1, 2, 3, 4, 5, 100]).bins >= 2


def test_freedman_diaconis_zero_iqr_with_outlier():
	result = freedman_diaconis([1, 1, 1, 1, 10])
	assert result.iqr == 0.0
	assert result.bins == 1
	assert result.range == 9.0


def test_result_records_support_key_access():
	fd = freedman_diaconis(seq(20))
	assert fd["IQR"] == fd.iqr
	assert fd["bins"] == fd.bins
	assert "IQR" in fd and "stddev" not in fd
	assert fd.as_dict() == {"width": fd.width, "bins": fd.bins, "range": fd.range, "IQR": fd.iqr}
	with pytest.raises(KeyError):
		fd["stddev"]

	sc = scott(seq(20))
	assert list(sc) == ["width", "bins", "range", "stddev"]
	assert sc["stddev"] == sc.stddev


def test_freedman_diaconis_bins_match_range_over_width():
	rng = np.random.default_rng(7)
	for data in (rng.normal(size=50), rng.exponential(size=200), rng.integers(0, 5, size=30)):
		fd = freedman_diaconis(data)
		if fd["width"] > 0:
			assert fd["bins"] == math.ceil(fd["range"] / fd["width"])
		else:
			assert fd["bins"] == 1


def test_rules_do_not_mutate_input():
	data = [9, 3, 7, 1, 5]
	snapshot = list(data)
	for rule in (square_root, sturges, rice, terrell_scott, doane, scott, freedman_diaconis):
		rule(data)
	assert data == snapshot


OVERFLOWING = [-1e308, 0.0, 1e308]


@pytest.mark.parametrize("rule", [scott, freedman_diaconis])
def test_width_rules_with_overflowing_range_fall_back_to_one_bin(rule, caplog):
	with caplog.at_level("WARNING"):
		result = rule(OVERFLOWING)
	assert result.bins == 1
	assert math.isinf(result.range)
	assert "Non-finite raw bin count" in caplog.text


@pytest.mark.parametrize("population", [False, True])
def test_doane_with_overflowing_moments_still_returns_bins(population):
	k = doane(OVERFLOWING, population=population)
	assert isinstance(k, int)
	assert k >= 1
