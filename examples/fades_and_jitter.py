import cyclesignals

STEPS_PER_CYCLE = 8

cyclesignals.rngseed("tuesday jam")

conductor = cyclesignals.Conductor()

# Pads fade in over 4 cycles from the moment they are first read.
conductor.fade_in("pads", cycles=4, gain_stop=0.8)

# Filter cutoff wanders like a hand on a knob.
conductor.add("cutoff", cyclesignals.hurlin(intensity=1.0, degrade=0.3, seed="cutoff").range(300, 3000))

# A two-cycle random riff that loops exactly.
conductor.add("riff", cyclesignals.looprng(2, seed="riff").range(0, 12))

if __name__ == "__main__":

	for step in range(STEPS_PER_CYCLE * 6):
		t = step / STEPS_PER_CYCLE
		print(
			f"{t:6.3f}  "
			f"pads {conductor.get('pads', t):.2f}  "
			f"cutoff {conductor.get('cutoff', t):7.1f}  "
			f"riff {int(conductor.get('riff', t)):2d}"
		)
