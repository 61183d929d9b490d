"""Sample or stream a signal from the command line.

Usage::

    python -m cyclesignals rng --seed 3 --steps 16
    python -m cyclesignals ramp --param 4 --cycles 8 --steps 4
    python -m cyclesignals hurlin2 --midi --device "IAC Driver Bus 1" --control 74

Defaults can be kept in a YAML file (``cyclesignals.yaml`` by default)::

    cyclesignals:
      salt: "tuesday jam"
      steps: 16
      cycles: 1
      bpm: 120
      midi:
        device: "IAC Driver Bus 1"
        control: 74
        channel: 0
"""

import argparse
import logging
import os
import typing

import yaml

import cyclesignals.latches
import cyclesignals.midi_utils
import cyclesignals.random_signals
import cyclesignals.signals


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


SIGNAL_NAMES = ["rng", "rng2", "looprng", "looprng2", "ramp", "ramp2", "iramp", "iramp2", "partrun", "partrun2", "ipartrun", "ipartrun2", "hurlin", "hurlin2"]


def load_config (config_path: str = 'cyclesignals.yaml') -> dict:

	"""
	Load configuration from a YAML file.

	Only the ``cyclesignals`` section is returned. A missing file gives an
	empty dict.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f) or {}

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping")

	return data.get('cyclesignals', {}) or {}


def build_signal (name: str, param: typing.Optional[float], seed: typing.Union[str, int]) -> cyclesignals.signals.Signal:

	"""
	Build a signal by name. ``param`` is the loop length for ``looprng``,
	the duration or ratio for the ramps and the intensity for ``hurlin``.
	"""

	if name in ("rng", "rng2"):
		return getattr(cyclesignals.random_signals, name)(seed)

	if name in ("looprng", "looprng2"):
		return getattr(cyclesignals.random_signals, name)(4.0 if param is None else param, seed)

	if name in ("hurlin", "hurlin2"):
		return getattr(cyclesignals.random_signals, name)(0.1 if param is None else param, seed=seed)

	if name.startswith(("ramp", "iramp")):
		return getattr(cyclesignals.latches, name)(4.0 if param is None else param)

	if name.startswith(("partrun", "ipartrun")):
		return getattr(cyclesignals.latches, name)(0.5 if param is None else param)

	raise ValueError(f"Unknown signal {name!r}")


def _parse_seed (value: str) -> typing.Union[str, int]:

	try:
		return int(value)
	except ValueError:
		return value


def make_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(prog="cyclesignals", description="Sample deterministic modulation signals")
	parser.add_argument("signal", choices=SIGNAL_NAMES, help="Signal to sample")
	parser.add_argument("--param", type=float, default=None, help="Loop length, ramp duration, ratio or intensity")
	parser.add_argument("--seed", type=_parse_seed, default=0, help="Signal seed (int or string)")
	parser.add_argument("--salt", type=_parse_seed, default=None, help="Global salt (int or string)")
	parser.add_argument("--steps", type=int, default=None, help="Samples per cycle")
	parser.add_argument("--cycles", type=float, default=None, help="Number of cycles to sample")
	parser.add_argument("--config", default="cyclesignals.yaml", help="YAML config file")
	parser.add_argument("--midi", action="store_true", help="Stream as MIDI CC instead of printing")
	parser.add_argument("--device", default=None, help="MIDI output device name")
	parser.add_argument("--control", type=int, default=None, help="MIDI CC number")
	parser.add_argument("--channel", type=int, default=None, help="MIDI channel (0-15)")
	parser.add_argument("--bpm", type=float, default=None, help="Tempo for streaming")
	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the cyclesignals command.
	"""

	args = make_parser().parse_args(argv)
	config = load_config(args.config)
	midi_config = config.get('midi', {}) or {}

	salt = args.salt if args.salt is not None else config.get('salt')
	if salt is not None:
		cyclesignals.random_signals.rngseed(salt)

	steps = args.steps if args.steps is not None else config.get('steps', 16)
	cycles = args.cycles if args.cycles is not None else config.get('cycles', 1)

	sig = build_signal(args.signal, args.param, args.seed)

	if not args.midi:
		n = int(steps * cycles)
		values = sig.segment(n, 0.0, cycles)
		# label with the time actually sampled, which is not i / steps when
		# steps * cycles has a fractional part
		step = cycles / n
		for i, value in enumerate(values):
			print(f"{i * step:.4f}\t{value:.6f}")
		return 0

	device_name, midi_out = cyclesignals.midi_utils.select_output_device(args.device or midi_config.get('device'))
	if midi_out is None:
		return 1

	if args.signal.endswith("2"):
		sig = sig.from_bipolar()

	try:
		cyclesignals.midi_utils.stream_cc(
			sig,
			midi_out,
			control = args.control if args.control is not None else midi_config.get('control', 1),
			channel = args.channel if args.channel is not None else midi_config.get('channel', 0),
			bpm = args.bpm if args.bpm is not None else config.get('bpm', 120),
			steps_per_cycle = steps,
			cycles = cycles,
		)
	except KeyboardInterrupt:
		logger.info("Stopping...")
	finally:
		midi_out.close()

	return 0


if __name__ == "__main__":
	raise SystemExit(main())
