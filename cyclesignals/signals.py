import math
import typing

import cyclesignals.hashing


Operand = typing.Union["Signal", float, int]


class Signal:

	"""
	Abstract base class for a continuous-time signal.

	Time is measured in cycles. A signal is pulled by whoever needs a value
	for a given time - there is no clock inside the signal itself.
	Combinators return new signals and never modify the receiver.
	"""

	def value_at (self, t: float) -> float:
		raise NotImplementedError

	def __call__ (self, t: float) -> float:
		return self.value_at(t)

	def latches (self) -> typing.List["Signal"]:

		"""
		The latches this signal is built from, each listed once.
		"""

		return []

	def range (self, low: float, high: float) -> "Signal":

		"""
		Map a unipolar (0..1) signal onto ``low..high``.
		"""

		return FunctionSignal(lambda t: self.value_at(t) * (high - low) + low, (self,))

	def range2 (self, low: float, high: float) -> "Signal":

		"""
		Map a bipolar (-1..1) signal onto ``low..high``.
		"""

		return self.from_bipolar().range(low, high)

	def to_bipolar (self) -> "Signal":
		return FunctionSignal(lambda t: self.value_at(t) * 2 - 1, (self,))

	def from_bipolar (self) -> "Signal":
		return FunctionSignal(lambda t: (self.value_at(t) + 1) / 2, (self,))

	def add (self, other: Operand) -> "Signal":
		return _combine(self, other, lambda a, b: a + b)

	def sub (self, other: Operand) -> "Signal":
		return _combine(self, other, lambda a, b: a - b)

	def mul (self, other: Operand) -> "Signal":
		return _combine(self, other, lambda a, b: a * b)

	def __add__ (self, other: Operand) -> "Signal":
		return self.add(other)

	def __radd__ (self, other: Operand) -> "Signal":
		return self.add(other)

	def __sub__ (self, other: Operand) -> "Signal":
		return self.sub(other)

	def __rsub__ (self, other: Operand) -> "Signal":
		return _combine(self, other, lambda a, b: b - a)

	def __mul__ (self, other: Operand) -> "Signal":
		return self.mul(other)

	def __rmul__ (self, other: Operand) -> "Signal":
		return self.mul(other)

	def segment (self, n: int, begin: float = 0.0, cycles: float = 1.0) -> typing.List[float]:

		"""
		Sample ``n`` evenly spaced values starting at ``begin``.

		Parameters:
			n: Number of samples.
			begin: Time of the first sample, in cycles.
			cycles: Span covered by the samples (default one cycle).

		Example:
			```python
			rng(3).segment(16)          # 16 sixteenth-note values
			ramp(4).segment(8, 0, 4)    # 8 values across a 4-cycle fade
			```
		"""

		if n <= 0:
			raise ValueError("n must be positive")

		step = cycles / n
		return [self.value_at(begin + i * step) for i in range(n)]


class FunctionSignal(Signal):

	"""
	A signal backed by a plain ``float -> float`` callable.
	"""

	def __init__ (self, fn: typing.Callable[[float], float], sources: typing.Sequence[Signal] = ()) -> None:

		"""
		Parameters:
			fn: Function of cycle time.
			sources: The signals ``fn`` reads from, so latches inside a
				combined signal can still be found and re-armed.
		"""

		self.fn = fn
		self.sources = tuple(sources)

	def value_at (self, t: float) -> float:
		return self.fn(t)

	def latches (self) -> typing.List["Signal"]:

		found: typing.List[Signal] = []

		for source in self.sources:
			for latch in source.latches():
				if not any(latch is seen for seen in found):
					found.append(latch)

		return found


class Steady(Signal):

	"""
	A signal that always returns the same value.
	"""

	def __init__ (self, value: float) -> None:
		self.value = value

	def value_at (self, t: float) -> float:
		return self.value


class Perlin(Signal):

	"""
	One-dimensional Perlin-style value noise over cycle time.

	Each whole cycle gets a pseudo-random value in 0..1 and the signal glides
	between neighbouring values along a quintic smootherstep curve, so it is
	continuous with zero slope at every cycle boundary. The random lattice
	repeats every 300 cycles.
	"""

	def value_at (self, t: float) -> float:

		"""
		Compute the noise value at a given cycle time.
		"""

		left = math.floor(t)
		a = time_to_rand(left)
		b = time_to_rand(left + 1)
		x = t - left
		return a + _smootherstep(x) * (b - a)


def _smootherstep (x: float) -> float:
	return x * x * x * (x * (x * 6.0 - 15.0) + 10.0)


def time_to_rand (x: float) -> float:

	"""
	Map a time point to a pseudo-random float in 0..1.

	The fractional position of ``x`` within a 300-cycle window is scaled to
	29 bits and scrambled.
	"""

	window = x / 300
	frac = window - math.floor(window)
	seed = cyclesignals.hashing.scramble(math.trunc(frac * cyclesignals.hashing.SEED_MODULUS))
	return abs(math.fmod(seed, cyclesignals.hashing.SEED_MODULUS) / cyclesignals.hashing.SEED_MODULUS)


def _combine (left: Signal, right: Operand, op: typing.Callable[[float, float], float]) -> Signal:

	if isinstance(right, Signal):
		return FunctionSignal(lambda t: op(left.value_at(t), right.value_at(t)), (left, right))

	return FunctionSignal(lambda t: op(left.value_at(t), right), (left,))


def signal (fn: typing.Callable[[float], float]) -> Signal:

	"""
	Wrap a function of cycle time as a ``Signal``.

	Example:
		```python
		saw = signal(lambda t: t % 1)
		saw.range(200, 2000)(0.5)   # 1100.0
		```
	"""

	return FunctionSignal(fn)


def steady (value: float) -> Signal:
	return Steady(value)


perlin = Perlin()
