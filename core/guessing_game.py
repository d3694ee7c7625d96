"""Interactive number-guessing game built on prompt specs."""

from __future__ import annotations

import random
from dataclasses import dataclass

from config import GameConfig
from core.confirm import confirm_spec, is_yes, prompt
from core.console import Console
from core.parsers import parse_int
from logger import get_logger

log = get_logger()


@dataclass
class GameStats:
    """Outcome of a game session."""

    rounds: int = 0
    guesses: int = 0


def pick_number(cfg: GameConfig, rng: random.Random) -> int:
    """Pick a secret number in ``[0, max_number]`` divisible by ``step``."""
    return rng.randrange(0, cfg.max_number + 1, cfg.step)


def play(cfg: GameConfig, console: Console, rng: random.Random | None = None) -> GameStats:
    """Run rounds until the player declines to play again.

    Raises:
        PromptIOError: If the console fails or input is closed.
    """
    rng = rng or random.Random()
    stats = GameStats()
    step = cfg.step

    guess_spec = (
        prompt("Enter your guess: ", parse_int)
        .with_type_error_message("Please enter a valid guess!")
        .matches(lambda x: x % step == 0)
        .with_validator_error_message(f"Please enter a number divisible by {step}")
    )
    again_spec = confirm_spec("Do you want to play again?", "I asked a simple question...")

    console.write_line("Try guess the number I am thinking of ...")
    console.write_line(f"  (hint: it's between 0 and {cfg.max_number} and divisible by {step})")
    console.write_line("")

    number = pick_number(cfg, rng)
    stats.rounds = 1
    while True:
        guess = guess_spec.try_get(console)
        stats.guesses += 1
        if guess < number:
            console.write_line("Too low!")
        elif guess > number:
            console.write_line("Too high!")
        else:
            console.write_line("You got it!")
            console.write_line(f"The number was: {number}")
            console.write_line("")
            if not again_spec.try_map(is_yes, console):
                break
            number = pick_number(cfg, rng)
            stats.rounds += 1
    log.info(f"Game over after {stats.rounds} round(s), {stats.guesses} guess(es)")
    return stats
