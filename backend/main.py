import argparse
import json
import logging
import random
import sys
import time
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from config import GameSettings, load_settings
from domain import CONTINUE, BoardFullError, ConfigError, GridEngine, RandomSource, SystemRandomSource
from players import AVAILABLE_VARIANTS, Player, get_player_class

logger = logging.getLogger(__name__)

UNFINISHED = "unfinished"


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    settings: GameSettings,
    player: Optional[Player] = None,
    rng: Optional[RandomSource] = None,
    on_frame: Optional[Callable[[str], None]] = None
) -> Dict:
    """
    Runs a single automated game.

    Args:
        settings: board size, food target, seed, turn cap and delay
        player: heading provider (defaults to the settings' player variant)
        rng: random source for food placement (defaults to a source seeded from settings)
        on_frame: called with the rendered board after every CONTINUE turn

    Returns:
        A dictionary summarizing the game (outcome, score, remaining_food,
        turns, length, death_reason).

    Raises:
        ConfigError: if the settings describe an invalid board
    """
    if rng is None:
        rng = SystemRandomSource(settings.seed)
    if player is None:
        player = get_player_class(settings.player)(rng=random.Random(settings.seed))

    engine = GridEngine(
        width=settings.width,
        height=settings.height,
        food_target=settings.food_target,
        initial_score=settings.initial_score,
        rng=rng
    )
    logger.info(f"Starting game: {engine!r} with {player.__class__.__name__}")

    if on_frame is not None:
        on_frame(engine.render())

    outcome = UNFINISHED
    while engine.turn_number < settings.max_turns:
        heading = player.get_move(engine.get_current_state())
        result = engine.move(heading)

        if result != CONTINUE:
            outcome = result
            break

        if on_frame is not None:
            on_frame(engine.render())

        if settings.turn_delay:
            time.sleep(settings.turn_delay)

    if outcome == UNFINISHED:
        logger.info(f"Stopped after {engine.turn_number} turns without an outcome.")

    return {
        "outcome": outcome,
        "score": engine.score,
        "remaining_food": engine.remaining_food,
        "turns": engine.turn_number,
        "length": len(engine.snake),
        "death_reason": engine.death_reason
    }


# -------------------------------
# Main Entry Point
# -------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run an automated grid snake game and print the board every turn."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Board width (at least 9)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height (at least 9)")
    parser.add_argument("--food-target", type=int, default=None,
                        help="Food to eat for a win")
    parser.add_argument("--initial-score", type=int, default=None,
                        help="Starting score")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for a reproducible game")
    parser.add_argument("--player", choices=AVAILABLE_VARIANTS, default=None,
                        help="Player variant driving the snake")
    parser.add_argument("--max-turns", type=int, default=None,
                        help="Stop after this many turns")
    parser.add_argument("--delay", type=float, default=None,
                        help="Seconds to wait between turns")
    parser.add_argument("--quiet", action="store_true",
                        help="Only print the final summary")
    return parser


def apply_overrides(settings: GameSettings, args: argparse.Namespace) -> GameSettings:
    """Command line options win over environment settings."""
    overrides = {
        "width": args.width,
        "height": args.height,
        "food_target": args.food_target,
        "initial_score": args.initial_score,
        "seed": args.seed,
        "player": args.player,
        "max_turns": args.max_turns,
        "turn_delay": args.delay,
    }
    settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    if settings.max_turns <= 0:
        raise ConfigError(f"max_turns must be positive, got {settings.max_turns}")
    if settings.player not in AVAILABLE_VARIANTS:
        raise ConfigError(f"Unknown player variant '{settings.player}'. Available: {AVAILABLE_VARIANTS}")
    if settings.turn_delay < 0:
        raise ConfigError(f"delay must not be negative, got {settings.turn_delay}")
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = apply_overrides(load_settings(), args)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    on_frame = None if args.quiet else (lambda frame: print(frame, flush=True))

    try:
        result = run_simulation(settings, on_frame=on_frame)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except BoardFullError as e:
        print(f"Game aborted: {e}", file=sys.stderr)
        return 1

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
