"""Deterministic, time-seeded random signals.

A random signal has no hidden generator state: its value at time *t* is a
pure function of *t*, its own seed, and the salt of the
:class:`RandomContext` it reads from. Evaluating the same signal at the same
time twice always gives the same answer, and two performers who share a salt
hear the same "random" modulation.

Time is quantized to ticks of 1/10000 cycle before hashing, so a random
signal holds its value for one tick and may change at the next.

    rng(seed)             0..1, new value every tick
    rng2(seed)            -1..1
    looprng(cycles, seed) 0..1, repeats every ``cycles`` cycles
    looprng2(cycles, seed)
    hurlin(...)           Perlin drift roughened by ``rng``
    hurlin2(...)

Changing the salt with :func:`rngseed` immediately changes every random
signal that reads the default context, including ones already playing.
"""

import logging
import math
import threading
import typing

import cyclesignals.hashing
import cyclesignals.signals


logger = logging.getLogger(__name__)

DEFAULT_SALT_PHRASE = "strudel is cool and so are you :)"
TICKS_PER_CYCLE = 10000
TICK_ROUNDING_DIGITS = 6

Seed = typing.Union[str, int]


class RandomContext:

	"""
	Holds the salt shared by a family of random signals.

	The salt is read at evaluation time, never snapshotted, so reseeding a
	context changes every signal built against it from the next evaluation
	on. Access is lock-guarded so a reseed from another thread is never
	observed half-written.
	"""

	def __init__ (self, salt: Seed = DEFAULT_SALT_PHRASE) -> None:

		self._lock = threading.Lock()
		self._salt = cyclesignals.hashing.seed_from(salt)

	@property
	def salt (self) -> int:

		with self._lock:
			return self._salt

	def reseed (self, seed: Seed) -> int:

		"""
		Replace the salt. Strings are hashed, integers are used as given.

		Returns the new salt.
		"""

		salt = cyclesignals.hashing.seed_from(seed)

		with self._lock:
			self._salt = salt

		logger.debug(f"Random salt set to {salt} (from {seed!r})")
		return salt

	def time2seed (self, t: float) -> int:

		"""
		Quantize a cycle time into an integer seed, offset by the salt.

		``t * 10000`` is truncated toward zero, so ``-0.00005`` and
		``0.00005`` both fall in tick 0.
		"""

		return math.trunc(t * TICKS_PER_CYCLE) + self.salt


default_context = RandomContext()


def get_context (context: typing.Optional[RandomContext] = None) -> RandomContext:
	return default_context if context is None else context


def rngseed (seed: Seed) -> int:

	"""
	Set the salt of the default context.

	Example:
		```python
		rngseed("tuesday jam")   # every rng() now plays a different stream
		rngseed(42)
		```
	"""

	return default_context.reseed(seed)


def time2seed (t: float, context: typing.Optional[RandomContext] = None) -> int:
	return get_context(context).time2seed(t)


class RandomSignal(cyclesignals.signals.Signal):

	"""
	A piecewise-constant pseudo-random signal.

	The seed is scrambled on its own before being added to the time seed,
	so different seeds give unrelated streams rather than streams shifted
	by a constant.
	"""

	def __init__ (self, seed: Seed = 0, cycles: typing.Optional[float] = None, context: typing.Optional[RandomContext] = None) -> None:

		"""
		Initialize a random signal.

		Parameters:
			seed: Stream key. Strings are hashed.
			cycles: Loop length in cycles, or None for a stream that never
				repeats. Must be positive.
			context: Salt holder. Defaults to the shared module context.
		"""

		if cycles is not None and cycles <= 0:
			raise ValueError(f"Loop length must be positive, got {cycles}")

		self.seed = cyclesignals.hashing.seed_from(seed)
		self.cycles = cycles
		self.context = get_context(context)
		self._scrambled_seed = cyclesignals.hashing.scramble(self.seed)
		self._period_ticks: typing.Optional[int] = None

		if cycles is not None:
			self._period_ticks = round(cycles * TICKS_PER_CYCLE)
			if self._period_ticks < 1:
				raise ValueError(f"Loop length must be at least one tick (1/{TICKS_PER_CYCLE} cycle), got {cycles}")

	def _loop_tick (self, t: float) -> int:

		"""
		The tick of ``t`` wrapped into the loop.

		Time is quantized before wrapping so the loop is exact in whole ticks.
		Rounding the scaled time first keeps ``t`` and ``t + cycles`` in the
		same tick despite float error (``4.3 - 4 != 0.3``). Floor, not
		truncation, keeps the period exact for negative times.
		"""

		tick = math.floor(round(t * TICKS_PER_CYCLE, TICK_ROUNDING_DIGITS))
		return tick % typing.cast(int, self._period_ticks)

	def int_at (self, t: float) -> int:

		"""
		The raw signed 32-bit value at time ``t``.
		"""

		if self._period_ticks is None:
			time_seed = self.context.time2seed(t)
		else:
			time_seed = self._loop_tick(t) + self.context.salt

		return cyclesignals.hashing.scramble(time_seed + self._scrambled_seed)

	def value_at (self, t: float) -> float:

		"""
		The value at time ``t``, normalized to 0 <= v < 1.
		"""

		return cyclesignals.hashing.to_uint32(self.int_at(t)) / 4294967296


def rng (seed: Seed = 0, context: typing.Optional[RandomContext] = None) -> RandomSignal:
	return RandomSignal(seed, context=context)


def rng2 (seed: Seed = 0, context: typing.Optional[RandomContext] = None) -> cyclesignals.signals.Signal:
	return rng(seed, context).to_bipolar()


def looprng (cycles: float, seed: Seed = 0, context: typing.Optional[RandomContext] = None) -> RandomSignal:

	"""
	A random signal that repeats exactly every ``cycles`` cycles.

	Example:
		```python
		riff = looprng(4, seed="bass")
		riff(0.5) == riff(4.5)   # True
		```
	"""

	return RandomSignal(seed, cycles=cycles, context=context)


def looprng2 (cycles: float, seed: Seed = 0, context: typing.Optional[RandomContext] = None) -> cyclesignals.signals.Signal:
	return looprng(cycles, seed, context).to_bipolar()


def _biased_noise (degrade: float, seed: Seed, context: typing.Optional[RandomContext]) -> cyclesignals.signals.Signal:
	return cyclesignals.signals.perlin.add(rng(seed, context).mul(degrade))


def hurlin (intensity: float = 0.1, degrade: float = 0.25, seed: Seed = 0, context: typing.Optional[RandomContext] = None) -> cyclesignals.signals.Signal:

	"""
	Perlin noise with a dose of jitter, like a human nudging a knob.

	Parameters:
		intensity: Output scale. Only the magnitude is used.
		degrade: How much uniform randomness is blended into the smooth
			drift (0 = pure Perlin).
		seed: Seed of the jitter stream.
	"""

	return _biased_noise(degrade, seed, context).mul(abs(intensity))


def hurlin2 (intensity: float = 0.1, degrade: float = 0.25, seed: Seed = 0, context: typing.Optional[RandomContext] = None) -> cyclesignals.signals.Signal:

	"""
	Bipolar :func:`hurlin`: converted to -1..1 before scaling.
	"""

	return _biased_noise(degrade, seed, context).to_bipolar().mul(abs(intensity))
