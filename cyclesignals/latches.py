"""Signals whose clock starts when they are first heard.

A :class:`Latch` wraps a function of *elapsed* time. The first time the
latch is evaluated it records that time as its origin; from then on every
evaluation passes ``t - origin`` to the wrapped function. A fade built this
way starts when its pattern starts, not when the transport started.

    ramp(cycles)      0 -> 1 over ``cycles``, then holds at 1
    iramp(cycles)     1 -> 0 over ``cycles``, then holds at 0
    partrun(ratio)    every cycle: 0 -> 1 over the first ``ratio`` of it
    ipartrun(ratio)   every cycle: 1 -> 0 over the first ``ratio`` of it

Each has a ``2`` sibling (``ramp2``, ...) converted to -1..1.

Every call to a factory returns a new latch with its own origin. Reuse one
instance to share an origin, or call :meth:`Latch.reset` to re-arm it.
"""

import enum
import threading
import typing

import cyclesignals.signals


class LatchPhase(enum.Enum):

	UNARMED = "unarmed"
	ARMED = "armed"


class Latch(cyclesignals.signals.Signal):

	"""
	Re-bases time to the moment of first evaluation.
	"""

	def __init__ (self, fn: typing.Callable[[float], float]) -> None:

		self.fn = fn
		self.phase = LatchPhase.UNARMED
		self.start: typing.Optional[float] = None
		self._lock = threading.Lock()

	def arm (self, t: float) -> float:

		"""
		Arm the latch at ``t`` unless it is already armed. Returns the origin.
		"""

		with self._lock:
			if self.phase is LatchPhase.UNARMED:
				self.start = t
				self.phase = LatchPhase.ARMED
			return typing.cast(float, self.start)

	def reset (self) -> None:

		"""
		Return to the unarmed state; the next evaluation sets a new origin.
		"""

		with self._lock:
			self.start = None
			self.phase = LatchPhase.UNARMED

	def value_at (self, t: float) -> float:
		return self.fn(t - self.arm(t))

	def latches (self) -> typing.List[cyclesignals.signals.Signal]:
		return [self]


def latch (fn: typing.Callable[[float], float]) -> Latch:

	"""
	Like :func:`cyclesignals.signals.signal`, but ``t`` begins when the signal
	is first evaluated instead of at cycle zero.
	"""

	return Latch(fn)


def _require_positive (name: str, value: float) -> None:

	if value <= 0:
		raise ValueError(f"{name} must be positive, got {value}")


def ramp (cycles: float) -> Latch:

	"""
	0..1 over ``cycles`` cycles of elapsed time, then 1 forever.

	Example:
		```python
		fade = ramp(8).range(0.0, 0.8)   # gain from silence to 0.8 over 8 cycles
		```
	"""

	_require_positive("cycles", cycles)
	return latch(lambda t: min(t / cycles, 1))


def ramp2 (cycles: float) -> cyclesignals.signals.Signal:
	return ramp(cycles).to_bipolar()


def iramp (cycles: float) -> Latch:

	"""
	1..0 over ``cycles`` cycles of elapsed time, then 0 forever.
	"""

	_require_positive("cycles", cycles)
	return latch(lambda t: max(1 - t / cycles, 0))


def iramp2 (cycles: float) -> cyclesignals.signals.Signal:
	return iramp(cycles).to_bipolar()


def partrun (ratio: float) -> Latch:

	"""
	A per-cycle ramp: rises 0..1 over the first ``ratio`` of every cycle and
	holds at 1 for the rest.

	Example:
		```python
		partrun(0.7).range(0, 12)   # climb an octave in 70% of each cycle
		```
	"""

	_require_positive("ratio", ratio)
	return latch(lambda t: min((t % 1) / ratio, 1))


def partrun2 (ratio: float) -> cyclesignals.signals.Signal:
	return partrun(ratio).to_bipolar()


def ipartrun (ratio: float) -> Latch:

	"""
	A per-cycle fall: 1..0 over the first ``ratio`` of every cycle, then 0.
	"""

	_require_positive("ratio", ratio)
	return latch(lambda t: max(1 - (t % 1) / ratio, 0))


def ipartrun2 (ratio: float) -> cyclesignals.signals.Signal:
	return ipartrun(ratio).to_bipolar()
