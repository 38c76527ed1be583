"""Simple bot arena for Klondike."""

from __future__ import annotations

import argparse
from random import Random
from typing import Dict, Iterable, Optional

from klondike.game import KlondikeGame
from klondike.rules_schema import GameConfig

from .base import ActionType, BotStrategy, apply_action
from .hint_bot import HintBot
from .random_bot import RandomBot

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "hint": HintBot,
    "random": RandomBot,
}


def play_game(
    game: KlondikeGame,
    bot: BotStrategy,
    *,
    max_steps: int = 500,
    check_invariants: bool = False,
) -> dict:
    """Let ``bot`` play the current deal until it wins, stops, or runs out of steps."""
    bot.on_game_start(game)
    steps = 0
    while steps < max_steps and not game.is_won():
        action = bot.choose_action(game)
        if action.action_type is ActionType.STOP:
            break
        if not apply_action(game, action):
            raise RuntimeError(f"{bot.name} chose an action the engine rejected: {action}")
        steps += 1
        if check_invariants:
            game.state.validate()
    return {
        "won": game.is_won(),
        "steps": steps,
        "foundation_cards": sum(len(pile) for pile in game.state.foundations),
    }


def run_games(bot: BotStrategy, *, n_games: int = 10, seed: Optional[int] = None, max_steps: int = 500) -> dict:
    rng = Random(seed)
    history = []
    for _ in range(n_games):
        game = KlondikeGame(config=GameConfig(), rng=Random(rng.randrange(2**32)))
        history.append(play_game(game, bot, max_steps=max_steps))
    wins = sum(1 for entry in history if entry["won"])
    return {"wins": wins, "history": history}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a bot over several Klondike deals.")
    parser.add_argument("--bot", default="hint", choices=BOT_REGISTRY.keys())
    parser.add_argument("--n", type=int, default=10, help="Number of deals to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--max-steps", type=int, default=500)
    args = parser.parse_args(None if argv is None else list(argv))

    bot = BOT_REGISTRY[args.bot]()
    results = run_games(bot, n_games=args.n, seed=args.seed, max_steps=args.max_steps)

    print(f"Won {results['wins']}/{args.n} deals")
    average = sum(entry["foundation_cards"] for entry in results["history"]) / max(args.n, 1)
    print(f"Average cards on foundations: {average:.1f}")


if __name__ == "__main__":
    main()
