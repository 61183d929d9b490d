import pytest

import cyclesignals.signals
import cyclesignals.transforms


def test_apply_each_pairs_items_with_functions ():

	"""Each function applies to the item at the same index."""

	result = cyclesignals.transforms.apply_each([1, 2, 3], [lambda x: x * 10, None, lambda x: -x])

	assert result == [10, 2, -3]


def test_apply_each_short_function_list ():

	"""Items without a matching function are passed through."""

	assert cyclesignals.transforms.apply_each(["a", "b", "c"], [str.upper]) == ["A", "b", "c"]
	assert cyclesignals.transforms.apply_each([], [str.upper]) == []


def test_apply_each_with_signals ():

	"""Works on signals as well as plain values."""

	bass, lead = cyclesignals.transforms.apply_each(
		[cyclesignals.signals.steady(0.5), cyclesignals.signals.steady(0.25)],
		[lambda s: s.mul(2)]
	)

	assert bass(0) == 1.0
	assert lead(0) == 0.25


def test_can_stacks_from_zero ():

	"""Each count expands to 0 .. n-1."""

	assert cyclesignals.transforms.can([3, 1, 0]) == [[0, 1, 2], [0], []]


def test_can_rejects_negative_counts ():

	"""Negative stack heights are an error."""

	with pytest.raises(ValueError):
		cyclesignals.transforms.can([2, -1])


def test_shush_rests_for_the_rest_of_the_piece ():

	"""SHUSH pairs the largest 32-bit count with no pattern."""

	assert cyclesignals.transforms.SHUSH == (4294967295, None)
