"""
Entry point for blockdrop.

Supports two modes:
  - play:     Play the game with keyboard controls in a pygame window.
  - simulate: Fold a seeded stream of random actions headlessly and print
              a summary of the resulting game.

Usage:
    python main.py --mode play
    python main.py --mode simulate --seed 42 --steps 5000
    python main.py --mode play --config config/game.yaml
"""

from __future__ import annotations

import argparse
import pathlib
import sys

import yaml


def load_config(config_path: str | pathlib.Path) -> dict:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dict of configuration key-value pairs (empty for an empty file).

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with mode, config, seed and steps attributes.
    """
    parser = argparse.ArgumentParser(
        description="blockdrop: a falling-block puzzle game.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["play", "simulate"],
        default="play",
        help="Run mode: 'play' (keyboard play), 'simulate' (headless random game).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/game.yaml",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Piece seed (overrides the config file; default: clock).",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Number of actions in 'simulate' mode (overrides the config file).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point: parse args, load config, and dispatch to the selected mode."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if args.seed is not None:
        config["seed"] = args.seed

    if args.mode == "play":
        from blockdrop.play import play_manual
        final = play_manual(config)
        print(f"Final score: {final.score} | High score: {final.highscore}")

    elif args.mode == "simulate":
        from blockdrop.game.rng import clock_seed
        from blockdrop.simulate import simulate, summarize
        seed = config.get("seed")
        if seed is None:
            seed = clock_seed()
        steps = args.steps if args.steps is not None else config.get("steps", 2000)
        print(f"Simulating {steps} actions (seed {seed})...")
        result = simulate(seed, steps, config.get("move_weights"))
        summary = summarize(result)
        print(
            f"Steps: {summary['steps']} | Pieces: {summary['pieces_locked']}"
            f" | Score: {summary['score']} | High score: {summary['highscore']}"
            f" | Ended: {summary['ended']}"
        )

    else:
        print(f"Unknown mode: {args.mode}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
