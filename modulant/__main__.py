import argparse
import asyncio
import logging
import random
import typing

import modulant.config
import modulant.player


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args (argv: typing.Optional[typing.List[str]] = None) -> argparse.Namespace:

	"""
	Parse command-line options.
	"""

	parser = argparse.ArgumentParser(prog="modulant", description="Generate an endless stream of chords and log them.")
	parser.add_argument("--config", default=modulant.config.DEFAULT_CONFIG_PATH, help="YAML configuration file")
	parser.add_argument("--ticks", type=int, default=None, help="Stop after this many ticks (default: run forever)")
	parser.add_argument("--seed", type=int, default=None, help="Seed for repeatable output (overrides the config file)")

	return parser.parse_args(argv)


def main (argv: typing.Optional[typing.List[str]] = None) -> None:

	"""
	Main entry point for the modulant application.
	"""

	args = parse_args(argv)
	config = modulant.config.load_config(args.config)

	seed = args.seed if args.seed is not None else config.seed
	rng = random.Random(seed)

	state = config.build_state(rng)
	player = modulant.player.Player(
		state,
		modulant.player.LoggingPlayback(),
		rng = rng,
		modulation_probability = config.modulation_probability,
		queue_threshold = config.queue_threshold
	)

	logger.info("Modulant starting...")

	try:
		asyncio.run(player.run(interval=config.interval, ticks=args.ticks))
	except KeyboardInterrupt:
		logger.info("Stopping...")


if __name__ == "__main__":
	main()
