"""Common bot strategy interfaces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from klondike.game import KlondikeGame
from klondike.moves import Selection
from klondike.piles import PileId


class ActionType(Enum):
    DRAW = auto()
    MOVE = auto()
    FLIP = auto()
    STOP = auto()


@dataclass(frozen=True)
class BotAction:
    action_type: ActionType
    selection: Optional[Selection] = None
    destination: Optional[PileId] = None
    column: Optional[int] = None


STOP = BotAction(ActionType.STOP)


class BotStrategy:
    """Base class for bot policies."""

    name: str = "BaseBot"

    def on_game_start(self, game: KlondikeGame) -> None:
        """Optional hook invoked after each deal."""
        return None

    def choose_action(self, game: KlondikeGame) -> BotAction:
        """Return the next action to apply, or STOP to give up."""
        return STOP


def apply_action(game: KlondikeGame, action: BotAction) -> bool:
    """Apply a bot action through the controller; returns True if the state changed."""
    if action.action_type is ActionType.DRAW:
        return game.draw()
    if action.action_type is ActionType.FLIP:
        if action.column is None:
            raise ValueError("Flip action requires a column.")
        return game.flip(action.column)
    if action.action_type is ActionType.MOVE:
        if action.selection is None or action.destination is None:
            raise ValueError("Move action requires a selection and a destination.")
        return game.move(action.selection, action.destination)
    return False
