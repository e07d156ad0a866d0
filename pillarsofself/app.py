"""Command-line entry point that starts the game engine."""

from __future__ import annotations

import argparse
from typing import Sequence

from pillarsofself.game_engine import ASSETS_CONFIG, GameEngine


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Emotional Fitness Academy.")
    parser.add_argument(
        "--config", default="../config.txt", help="file with the Window entry"
    )
    parser.add_argument(
        "--assets", default=ASSETS_CONFIG, help="file listing fonts, textures and sprites"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game and run it until the window closes."""
    args = _parser().parse_args(argv)
    game = GameEngine(args.config, assets_path=args.assets)
    game.run()
    return 0