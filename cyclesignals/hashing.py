"""Fixed-width integer hashing for seeding random signals.

Two small, fast, non-cryptographic functions:

    str_to_seed   Polynomial string hash (h * 31 + byte) over the UTF-8
                  bytes, wrapped at signed 32 bits and returned unsigned.
    scramble      A xorshift-family bit mixer that turns one integer seed
                  into another, with all shifts done at 32-bit width.

Python integers never overflow, so every step that would wrap in a 32-bit
register goes through :func:`to_int32` explicitly.

These are good enough to make modulation sound random. They are not
statistically rigorous and must never be used for anything security related.
"""

import typing


SEED_MODULUS = 536870912	# 2 ** 29

_MASK_32 = 0xFFFFFFFF
_SIGN_32 = 0x80000000


def to_int32 (value: int) -> int:

	"""Wrap an integer to signed 32 bits (two's complement)."""

	value &= _MASK_32
	return value - (1 << 32) if value & _SIGN_32 else value


def to_uint32 (value: int) -> int:

	"""Reinterpret an integer as unsigned 32 bits."""

	return value & _MASK_32


def truncating_mod (value: int, modulus: int) -> int:

	"""
	Remainder whose sign follows the dividend, as in C or JavaScript.

	Python's ``%`` floors instead, so ``-1 % 8 == 7`` while
	``truncating_mod(-1, 8) == -1``.
	"""

	remainder = abs(value) % modulus
	return -remainder if value < 0 else remainder


def str_to_seed (text: str) -> int:

	"""
	Hash a string to an unsigned 32-bit seed.

	Example:
		```python
		str_to_seed("")     # 0
		str_to_seed("ab")   # 97 * 31 + 98 == 3105
		```
	"""

	h = 0

	for byte in text.encode("utf-8"):
		h = to_int32(h * 31 + byte)

	return to_uint32(h)


def scramble (seed: int) -> int:

	"""
	Mix the bits of an integer seed, returning a signed 32-bit integer.

	The seed is first reduced modulo 2**29 with a truncating remainder, so
	negative seeds stay negative. Any integer is accepted, including values
	wider than 32 bits.
	"""

	seed = truncating_mod(seed, SEED_MODULUS)
	a = to_int32(seed << 13) ^ seed
	b = (a >> 17) ^ a
	return to_int32(b << 5) ^ b


def seed_from (seed: typing.Union[str, int]) -> int:

	"""
	Normalize a user-supplied seed: strings are hashed, integers pass through.

	Raises ``TypeError`` for anything else (``bool`` included).
	"""

	if isinstance(seed, str):
		return str_to_seed(seed)

	if isinstance(seed, int) and not isinstance(seed, bool):
		return seed

	raise TypeError(f"Seed must be a str or int, not {type(seed).__name__}")
