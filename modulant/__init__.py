
"""
Modulant - procedural tonal harmony for continuous playback.

Modulant decides which notes to play next. It walks scale degrees through a
probabilistic progression table, changes key through the chords two keys
have in common, spreads each triad across the keyboard with a weighted
voicing model, and breaks voicings into struck and arpeggiated groups.
It produces plain data (keyboard indices and group sizes); sounding the
notes is left to a playback collaborator.

What it does:

- **Diatonic progressions.** ``HarmonicState.progress()`` moves between the
  seven scale degrees using a row-stochastic progression table (V resolves
  to I, II prepares V, and so on).
- **Common-chord modulation.** ``HarmonicState.modulate()`` picks a nearby
  key and mode, finds triads the two keys share exactly or up to a single
  half step, and plays through them into the new key.
- **Voicings.** ``invert()`` samples two to six keyboard positions of a
  triad's pitch classes, gathered around the key's root.
- **Arpeggiation.** ``arpeggiate()`` splits a voicing into groups that
  sound together.
- **Seven church modes.** Ionian through Locrian, in ``modulant.modes``.
- **Deterministic seeding.** Pass any source of uniform draws (such as
  ``random.Random(42)``) as ``rng`` and every decision repeats.

Minimal example:

    ```python
    import asyncio
    import random
    import modulant

    state = modulant.HarmonicState(root=40, mode=0, degree=0, num_keys=84, rng=random.Random(42))
    player = modulant.Player(state, modulant.LoggingPlayback())

    asyncio.run(player.run(interval=0.5, ticks=32))
    ```

Package-level exports: ``HarmonicState``, ``Player``, ``LoggingPlayback``,
``invert``, ``arpeggiate``, ``mode_index``.
"""

import modulant.arpeggio
import modulant.harmonic_state
import modulant.modes
import modulant.player
import modulant.voicings


HarmonicState = modulant.harmonic_state.HarmonicState
Player = modulant.player.Player
LoggingPlayback = modulant.player.LoggingPlayback
invert = modulant.voicings.invert
arpeggiate = modulant.arpeggio.arpeggiate
mode_index = modulant.modes.mode_index
