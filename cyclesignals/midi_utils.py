import logging
import time
import typing

import mido

import cyclesignals.signals

logger = logging.getLogger(__name__)


def select_output_device (device_name: typing.Optional[str] = None) -> typing.Tuple[typing.Optional[str], typing.Optional[typing.Any]]:

	"""
	Open a MIDI output port.

	With a name, that port is opened. Without one, the port is chosen only
	when exactly one exists; otherwise the choices are logged.

	Returns:
		A tuple of (device_name, midi_out) or (None, None) on failure.
	"""

	try:
		outputs = mido.get_output_names()

		if not outputs:
			logger.error("No MIDI output devices found.")
			return None, None

		if device_name is None:
			if len(outputs) > 1:
				logger.error(f"Several MIDI outputs found, pick one with --device: {outputs}")
				return None, None
			device_name = outputs[0]

		if device_name not in outputs:
			logger.error(f"MIDI output device '{device_name}' not found. Available devices: {outputs}")
			return None, None

		midi_out = mido.open_output(device_name)
		logger.info(f"Opened MIDI output: {device_name}")
		return device_name, midi_out

	except Exception as e:
		logger.error(f"Failed to open MIDI output: {e}")
		return None, None


def value_to_cc (value: float) -> int:

	"""
	Map a unipolar value onto a 0-127 CC value, clamping out-of-range input.
	"""

	clamped = min(max(value, 0.0), 1.0)
	return int(round(clamped * 127))


def cc_message (value: float, control: int, channel: int = 0) -> mido.Message:
	return mido.Message('control_change', channel=channel, control=control, value=value_to_cc(value))


def stream_cc (
	sig: cyclesignals.signals.Signal,
	midi_out: typing.Any,
	control: int,
	channel: int = 0,
	bpm: float = 120.0,
	steps_per_cycle: int = 16,
	cycles: float = 4.0,
	sleep: typing.Optional[typing.Callable[[float], None]] = None
) -> int:

	"""
	Send a signal to a MIDI port as a stream of CC messages.

	One cycle lasts one bar of four beats at ``bpm``. The signal is sampled
	``steps_per_cycle`` times per cycle for ``cycles`` cycles.

	Returns:
		The number of messages sent.
	"""

	if bpm <= 0:
		raise ValueError("bpm must be positive")

	if steps_per_cycle <= 0:
		raise ValueError("steps_per_cycle must be positive")

	sleep = sleep or time.sleep
	seconds_per_step = (4 * 60.0 / bpm) / steps_per_cycle
	total_steps = int(cycles * steps_per_cycle)

	for step in range(total_steps):
		t = step / steps_per_cycle
		midi_out.send(cc_message(sig.value_at(t), control, channel))
		sleep(seconds_per_step)

	logger.info(f"Sent {total_steps} CC {control} messages on channel {channel}")
	return total_steps
