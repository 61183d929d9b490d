"""
cyclesignals - deterministic modulation signals for live-coded music.

Every signal here is a function of *cycle time*: ask it for a value at
``t = 3.25`` and it answers, with no clock of its own. That makes the
signals easy to share between patterns, easy to test, and repeatable from
one performance to the next.

What is in the box:

- **Random signals that repeat on demand.** ``rng(seed)`` gives a fresh
  value every 1/10000 of a cycle, derived purely from time, seed and a
  global salt - the same seed always plays the same stream.
  ``looprng(cycles, seed)`` loops it. ``rngseed("name")`` changes the salt
  for everything at once.
- **Fades that start when you do.** ``ramp(8)``, ``iramp(8)``,
  ``partrun(0.7)`` and ``ipartrun(0.7)`` measure time from their first
  evaluation, so a fade begins when its pattern first plays, not when the
  transport started.
- **Human-ish drift.** ``hurlin()`` mixes smooth Perlin noise with a pinch
  of ``rng`` jitter.
- **Plumbing.** A ``Conductor`` to name and share signals, small
  transforms (``apply_each``, ``can``), MIDI CC streaming via ``mido``, and
  ``python -m cyclesignals`` to hear or print any signal.

Minimal example:

    ```python
    import cyclesignals

    cyclesignals.rngseed("tuesday jam")

    cutoff = cyclesignals.rng(3).range(400, 4000)
    fade = cyclesignals.ramp(8)

    for step in range(16):
        t = step / 16
        print(cutoff(t) * fade(t))
    ```

Every ``*2`` variant (``rng2``, ``ramp2``, ``hurlin2`` ...) is the same
signal converted to the -1..1 range.
"""

import cyclesignals.conductor
import cyclesignals.hashing
import cyclesignals.latches
import cyclesignals.random_signals
import cyclesignals.signals
import cyclesignals.transforms


Signal = cyclesignals.signals.Signal
signal = cyclesignals.signals.signal
steady = cyclesignals.signals.steady
perlin = cyclesignals.signals.perlin

str_to_seed = cyclesignals.hashing.str_to_seed
scramble = cyclesignals.hashing.scramble

RandomContext = cyclesignals.random_signals.RandomContext
rngseed = cyclesignals.random_signals.rngseed
time2seed = cyclesignals.random_signals.time2seed
rng = cyclesignals.random_signals.rng
rng2 = cyclesignals.random_signals.rng2
looprng = cyclesignals.random_signals.looprng
looprng2 = cyclesignals.random_signals.looprng2
hurlin = cyclesignals.random_signals.hurlin
hurlin2 = cyclesignals.random_signals.hurlin2

latch = cyclesignals.latches.latch
ramp = cyclesignals.latches.ramp
ramp2 = cyclesignals.latches.ramp2
iramp = cyclesignals.latches.iramp
iramp2 = cyclesignals.latches.iramp2
partrun = cyclesignals.latches.partrun
partrun2 = cyclesignals.latches.partrun2
ipartrun = cyclesignals.latches.ipartrun
ipartrun2 = cyclesignals.latches.ipartrun2

Conductor = cyclesignals.conductor.Conductor
apply_each = cyclesignals.transforms.apply_each
can = cyclesignals.transforms.can
SHUSH = cyclesignals.transforms.SHUSH
