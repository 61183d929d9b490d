import logging
import typing

import cyclesignals.latches
import cyclesignals.signals


logger = logging.getLogger(__name__)


class Conductor:

	"""
	A registry of named signals.

	The `Conductor` lets a performance define time-varying signals once
	(fades, random modulation, noise) and read them by name from anywhere,
	at any cycle time.
	"""

	def __init__ (self) -> None:

		self._signals: typing.Dict[str, cyclesignals.signals.Signal] = {}

	def add (self, name: str, sig: cyclesignals.signals.Signal) -> None:

		"""
		Register a signal under ``name``, replacing any previous one.

		Example:
			```python
			conductor.add("wobble", rng2("wobble").mul(0.1))
			```
		"""

		self._signals[name] = sig
		logger.debug(f"Conductor signal registered: {name}")

	def fade_in (self, name: str, cycles: float, gain_start: float = 0.0, gain_stop: float = 1.0) -> None:

		"""
		Register a fade that rises from ``gain_start`` to ``gain_stop`` over
		``cycles`` cycles, starting when it is first read.

		Example:
			```python
			conductor.fade_in("pads", cycles=16, gain_stop=0.8)
			```
		"""

		self._add_fade(name, cyclesignals.latches.ramp(cycles), gain_start, gain_stop)

	def fade_out (self, name: str, cycles: float, gain_start: float = 0.0, gain_stop: float = 1.0) -> None:

		"""
		Register a fade that falls from ``gain_stop`` to ``gain_start`` over
		``cycles`` cycles, starting when it is first read.
		"""

		self._add_fade(name, cyclesignals.latches.iramp(cycles), gain_start, gain_stop)

	def _add_fade (self, name: str, ramp: cyclesignals.latches.Latch, gain_start: float, gain_stop: float) -> None:
		self.add(name, ramp.range(gain_start, gain_stop))

	def restart (self, name: str) -> None:

		"""
		Re-arm every latch inside the named signal so it starts over on the
		next read. This reaches latches wrapped by combinators, e.g.
		``ramp2(4)`` or ``ramp(4).range(0, 100)``.

		Signals without a latch are left alone.
		"""

		sig = self._signals.get(name)

		if sig is None:
			return

		latches = sig.latches()

		if not latches:
			logger.debug(f"Conductor signal has no latch to restart: {name}")
			return

		for latch in latches:
			latch.reset()

		logger.debug(f"Conductor signal restarted: {name} ({len(latches)} latches)")

	def names (self) -> typing.List[str]:
		return sorted(self._signals)

	def get (self, name: str, cycle: float) -> float:

		"""
		Retrieve the value of a signal at a specific cycle time.

		Unknown names read as 0.0.
		"""

		if name not in self._signals:
			return 0.0

		return self._signals[name].value_at(cycle)
