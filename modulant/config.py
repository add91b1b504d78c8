import dataclasses
import logging
import os
import typing

import yaml

import modulant.harmonic_state
import modulant.markov_chain
import modulant.modes
import modulant.notes
import modulant.player


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH: str = "config.yaml"

INTEGER_FIELDS = ("root", "mode", "degree", "num_keys", "queue_threshold")
NUMBER_FIELDS = ("interval", "modulation_probability")


@dataclasses.dataclass
class PlayerConfig:

	"""
	Settings for a generation session.

	``root`` and ``mode`` accept names in the YAML file (``"E4"``,
	``"dorian"``) and are stored as indices once loaded.
	"""

	root: int = 40
	mode: int = 0
	degree: int = 0
	num_keys: int = 84
	interval: float = modulant.player.DEFAULT_INTERVAL
	modulation_probability: float = modulant.player.DEFAULT_MODULATION_PROBABILITY
	queue_threshold: int = modulant.player.DEFAULT_QUEUE_THRESHOLD
	symmetric_modulation: bool = False
	seed: typing.Optional[int] = None


	def __post_init__ (self) -> None:

		if isinstance(self.root, str):
			self.root = modulant.notes.note_index(self.root)

		if isinstance(self.mode, str):
			self.mode = modulant.modes.mode_index(self.mode)

		for name in INTEGER_FIELDS:
			value = getattr(self, name)
			if isinstance(value, bool) or not isinstance(value, int):
				raise ValueError(f"{name} must be an integer, got {value!r}")

		for name in NUMBER_FIELDS:
			value = getattr(self, name)
			if isinstance(value, bool) or not isinstance(value, (int, float)):
				raise ValueError(f"{name} must be a number, got {value!r}")

		if not isinstance(self.symmetric_modulation, bool):
			raise ValueError(f"symmetric_modulation must be true or false, got {self.symmetric_modulation!r}")

		if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
			raise ValueError(f"seed must be an integer, got {self.seed!r}")

		if self.interval < 0:
			raise ValueError("Interval must not be negative")


	def build_state (self, rng: typing.Optional[modulant.markov_chain.RandomSource] = None) -> modulant.harmonic_state.HarmonicState:

		"""Create the harmonic state described by these settings."""

		return modulant.harmonic_state.HarmonicState(
			root = self.root,
			mode = self.mode,
			degree = self.degree,
			num_keys = self.num_keys,
			rng = rng,
			symmetric_modulation = self.symmetric_modulation
		)


def parse_config (data: typing.Optional[typing.Dict[str, typing.Any]]) -> PlayerConfig:

	"""
	Build a ``PlayerConfig`` from a mapping, rejecting unknown keys.
	"""

	if not data:
		return PlayerConfig()

	if not isinstance(data, dict):
		raise ValueError("Configuration must be a mapping")

	known = {field.name for field in dataclasses.fields(PlayerConfig)}
	unknown = sorted(set(data) - known)

	if unknown:
		raise ValueError(f"Unknown configuration keys: {unknown}")

	return PlayerConfig(**data)


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> PlayerConfig:

	"""
	Load configuration from a YAML file.

	A missing file is not an error: a warning is logged and defaults are used.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return PlayerConfig()

	with open(config_path, 'r') as f:
		return parse_config(yaml.safe_load(f))
