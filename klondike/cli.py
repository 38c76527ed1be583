"""Interactive console adapter for playing Klondike."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from .cards import Card, rank_name
from .game import KlondikeGame
from .moves import InvalidSelection, selection_at
from .piles import InvalidPile, parse_pile_id
from .rules_schema import load_config
from .state import GameState

SUIT_SYMBOLS = {"hearts": "♥", "diamonds": "♦", "clubs": "♣", "spades": "♠"}

HELP_TEXT = """Commands:
  draw                       turn a card from the stock (recycles the waste when empty)
  move <src> [index] <dst>   e.g. 'move waste foundation-0', 'move tableau-2 4 tableau-5'
  auto <src> [index]         send a card to the first foundation that accepts it
  flip <column>              turn over the face-down top card of a tableau column
  undo | hint | new | show | help | quit"""


def card_text(card: Optional[Card]) -> str:
    if card is None:
        return "[  ]"
    if not card.face_up:
        return "[##]"
    short = rank_name(card.rank)[0] if card.rank in (1, 11, 12, 13) else str(card.rank)
    return f"[{short}{SUIT_SYMBOLS[card.suit.value]}]"


def render(state: GameState) -> str:
    lines: List[str] = []
    waste_top = state.waste[-1] if state.waste else None
    stock_label = f"stock({len(state.stock)})"
    foundations = " ".join(card_text(pile[-1] if pile else None) for pile in state.foundations)
    lines.append(f"{stock_label} waste {card_text(waste_top)}   foundations {foundations}")
    depth = max((len(column) for column in state.tableau), default=0)
    lines.append("  ".join(f" t{col} " for col in range(len(state.tableau))))
    for row in range(depth):
        cells = []
        for column in state.tableau:
            cells.append(card_text(column[row]) if row < len(column) else "    ")
        lines.append("  ".join(f"{cell:<5}" for cell in cells).rstrip())
    return "\n".join(lines)


def _parse_source(tokens: List[str]):
    source = parse_pile_id(tokens[0])
    index = int(tokens[1]) if len(tokens) > 1 else None
    return source, index


def execute(game: KlondikeGame, line: str) -> Optional[str]:
    """Run one command; returns the text to print, or None to quit."""
    tokens = line.split()
    if not tokens:
        return ""
    command, args = tokens[0].lower(), tokens[1:]

    if command in ("quit", "q", "exit"):
        return None
    if command in ("help", "?"):
        return HELP_TEXT
    if command in ("show", "s"):
        return render(game.state)
    if command in ("new", "n"):
        game.new_game()
        return render(game.state)
    if command in ("hint", "h"):
        return game.hint().message
    if command in ("undo", "u"):
        if not game.undo():
            return "Nothing to undo."
        return render(game.state)
    if command in ("draw", "d"):
        if not game.draw():
            return "The stock and waste are both empty."
        return render(game.state)

    try:
        if command in ("flip", "f") and len(args) == 1:
            accepted = game.flip(int(args[0]))
        elif command in ("move", "m") and len(args) in (2, 3):
            source, index = _parse_source(args[:-1])
            accepted = game.move(selection_at(game.state, source, index), parse_pile_id(args[-1]))
        elif command in ("auto", "a") and len(args) in (1, 2):
            source, index = _parse_source(args)
            accepted = game.auto_move(selection_at(game.state, source, index))
        else:
            return f"Unknown command: {line.strip()!r}. Type 'help' for a list."
    except (InvalidPile, InvalidSelection, ValueError, IndexError) as exc:
        return f"Invalid input: {exc}"

    if not accepted:
        return "That move is not allowed."
    board = render(game.state)
    if game.is_won():
        return board + "\nCongratulations! You won!"
    return board


def run(game: KlondikeGame, lines: Iterable[str], out: TextIO) -> None:
    print(render(game.state), file=out)
    for line in lines:
        response = execute(game, line)
        if response is None:
            break
        if response:
            print(response, file=out)


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Klondike solitaire in the terminal.")
    parser.add_argument("--config", help="Path to a JSON configuration file.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deal.")
    parser.add_argument("--history-limit", type=int, default=None, help="Number of undo steps kept.")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...).")
    return parser.parse_args(None if argv is None else list(argv))


def main(argv: Optional[Iterable[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)
    updates = {
        key: value
        for key, value in (("seed", args.seed), ("history_limit", args.history_limit), ("log_level", args.log_level))
        if value is not None
    }
    if updates:
        config = config.model_validate({**config.model_dump(), **updates})
    logging.basicConfig(level=config.numeric_log_level(), format="%(levelname)s %(name)s: %(message)s")

    game = KlondikeGame(config=config)
    run(game, stdin or sys.stdin, stdout or sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
