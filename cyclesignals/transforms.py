import typing

T = typing.TypeVar("T")


# Arrangement entry: rest for (effectively) the rest of the piece.
SHUSH: typing.Tuple[int, None] = (2 ** 32 - 1, None)


def apply_each (items: typing.Sequence[T], fns: typing.Sequence[typing.Optional[typing.Callable[[T], T]]]) -> typing.List[T]:

	"""
	Apply ``fns[i]`` to ``items[i]``.

	Missing or ``None`` functions leave the item unchanged, so ``fns`` may be
	shorter than ``items``.

	Example:
		```python
		apply_each([bass, lead, pad], [lambda s: s.mul(0.5), None, lambda s: s.add(0.1)])
		```
	"""

	result = []

	for i, item in enumerate(items):
		fn = fns[i] if i < len(fns) else None
		result.append(item if fn is None else fn(item))

	return result


def can (values: typing.Iterable[int]) -> typing.List[typing.List[int]]:

	"""
	Expand each count ``n`` into the stack ``0 .. n-1``.

	Feeding the result to a chord voicer gives "stacked" voicings whose
	height follows the counts.

	Example:
		```python
		can([3, 1, 0])   # [[0, 1, 2], [0], []]
		```
	"""

	stacks = []

	for n in values:
		if n < 0:
			raise ValueError(f"Stack height cannot be negative: {n}")
		stacks.append(list(range(n)))

	return stacks
