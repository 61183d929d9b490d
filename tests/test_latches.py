import pytest

import cyclesignals.latches


def test_latch_rebases_time ():

	"""The wrapped function sees time elapsed since the first evaluation."""

	seen = []
	sig = cyclesignals.latches.latch(lambda t: seen.append(t) or t)

	assert sig(10.0) == 0.0
	assert sig(12.5) == 2.5
	assert sig(11.0) == 1.0
	assert seen == [0.0, 2.5, 1.0]


def test_latch_state_machine ():

	"""A latch starts unarmed and arms once on first evaluation."""

	sig = cyclesignals.latches.latch(lambda t: t)

	assert sig.phase is cyclesignals.latches.LatchPhase.UNARMED
	assert sig.start is None

	sig(3.0)

	assert sig.phase is cyclesignals.latches.LatchPhase.ARMED
	assert sig.start == 3.0

	sig(7.0)

	assert sig.start == 3.0


def test_latch_reset_rearms ():

	"""After reset the next evaluation sets a new origin."""

	sig = cyclesignals.latches.latch(lambda t: t)

	sig(2.0)
	sig.reset()

	assert sig.phase is cyclesignals.latches.LatchPhase.UNARMED
	assert sig(20.0) == 0.0
	assert sig(21.0) == 1.0


def test_ramp_boundaries ():

	"""0 at the trigger, 1 after the full duration, then held at 1."""

	fade = cyclesignals.latches.ramp(4)

	assert fade(100.0) == 0.0
	assert fade(102.0) == 0.5
	assert fade(104.0) == 1.0
	assert fade(110.0) == 1.0


def test_ramp_is_monotonic ():

	"""A ramp never decreases as elapsed time grows."""

	fade = cyclesignals.latches.ramp(4)
	values = [fade(i * 0.25) for i in range(32)]

	assert values == sorted(values)


def test_iramp_boundaries ():

	"""1 at the trigger, 0 after the full duration, then held at 0."""

	fade = cyclesignals.latches.iramp(4)

	assert fade(5.0) == 1.0
	assert fade(6.0) == 0.75
	assert fade(9.0) == 0.0
	assert fade(50.0) == 0.0


def test_ramp_instances_are_independent ():

	"""Each ramp keeps its own origin."""

	a = cyclesignals.latches.ramp(4)
	b = cyclesignals.latches.ramp(4)

	assert a(10.0) == 0.0
	assert a(12.0) == 0.5

	assert b(50.0) == 0.0

	assert a(12.0) == 0.5
	assert a(13.0) == 0.75
	assert b(52.0) == 0.5


def test_partrun_duty_cycle ():

	"""Ramps over the first half of each cycle, then holds at 1."""

	sig = cyclesignals.latches.partrun(0.5)

	assert sig(3.0) == 0.0
	assert sig(3.25) == 0.5
	assert sig(3.5) == 1.0
	assert sig(3.75) == 1.0
	assert sig(4.0) == 0.0
	assert sig(4.25) == 0.5
	assert sig(5.5) == 1.0


def test_ipartrun_duty_cycle ():

	"""Falls over the first half of each cycle, then holds at 0."""

	sig = cyclesignals.latches.ipartrun(0.5)

	assert sig(1.0) == 1.0
	assert sig(1.25) == 0.5
	assert sig(1.5) == 0.0
	assert sig(1.875) == 0.0
	assert sig(2.0) == 1.0


def test_partrun_before_origin_wraps_forward ():

	"""Reading before the origin wraps elapsed time into 0..1, so -0.25 acts as 0.75."""

	rise = cyclesignals.latches.partrun(0.5)
	fall = cyclesignals.latches.ipartrun(0.5)

	rise(10.0)
	fall(10.0)

	assert rise(9.75) == 1
	assert rise(9.8) == 1
	assert fall(9.75) == 0


def test_partrun_full_ratio_is_a_saw ():

	"""ratio=1 ramps across the whole cycle."""

	sig = cyclesignals.latches.partrun(1)

	assert sig(0.0) == 0.0
	assert sig(0.75) == 0.75


def test_bipolar_siblings ():

	"""The 2-suffixed versions map 0..1 onto -1..1."""

	assert cyclesignals.latches.ramp2(4)(0.0) == -1.0
	assert cyclesignals.latches.iramp2(4)(0.0) == 1.0
	assert cyclesignals.latches.partrun2(0.5)(0.0) == -1.0
	assert cyclesignals.latches.ipartrun2(0.5)(0.0) == 1.0

	fade = cyclesignals.latches.ramp2(4)
	fade(8.0)

	assert fade(10.0) == 0.0
	assert fade(12.0) == 1.0


@pytest.mark.parametrize("factory", [
	cyclesignals.latches.ramp,
	cyclesignals.latches.iramp,
	cyclesignals.latches.partrun,
	cyclesignals.latches.ipartrun,
	cyclesignals.latches.ramp2,
	cyclesignals.latches.ipartrun2,
])
def test_non_positive_durations_raise (factory):

	"""Zero or negative durations and ratios fail at construction."""

	with pytest.raises(ValueError):
		factory(0)

	with pytest.raises(ValueError):
		factory(-1)
