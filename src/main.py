"""
Main entry point for checking words on a Boggle board.

Usage:
    python -m src.main
    python -m src.main configs/standard.yaml --word cat --word quit --verbose
    python -m src.main --seed 42 --word tea --output results/round.json
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

from .engine import Boggle, BoggleConfig


def load_config(config_path: str) -> BoggleConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return BoggleConfig(**data)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Roll a Boggle board and check words against it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  rows: 4
  cols: 4
  seed: 42
  dictionary: words.txt
  dice:
    - [A, A, E, E, G, N]
    - ...
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (default: standard 4x4 board)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed, overrides the config"
    )
    parser.add_argument(
        "--dictionary", "-d",
        help="Path to a whitespace-delimited word list, overrides the config"
    )
    parser.add_argument(
        "--word", "-w",
        action="append",
        default=[],
        help="Word to check (repeatable)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the final game state as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else BoggleConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.dictionary:
        overrides["dictionary"] = args.dictionary
    if overrides:
        config = config.model_copy(update=overrides)

    try:
        game = Boggle.create(config=config)
    except Exception as e:
        print(f"Error creating game: {e}", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        print(f"Config: {args.config or 'standard'}")
        print(f"Dictionary: {config.dictionary or 'bundled'} ({game.lexicon.size()} words)")
        print(f"Seed: {config.seed}")
        print()

    print(game.board.render())
    print()

    for word in args.word:
        result = game.submit(word)
        if result.valid:
            cells = " ".join(f"({c.row},{c.col})" for c in result.path)
            print(f"{result.word:<12} valid   +{result.points}  {cells}")
        else:
            print(f"{result.word:<12} invalid ({result.reason})")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(game.get_state(), indent=2))
        if args.verbose:
            print()
            print(f"State saved to: {output_path}")

    # Print summary
    print()
    print("=== Round Summary ===")
    print(f"Words found: {', '.join(game.found_words) or '-'}")
    print(f"Score: {game.score}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
