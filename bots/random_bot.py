"""Random baseline bot, mostly useful for exploring reachable positions."""

from __future__ import annotations

import random
from typing import List, Optional

from klondike.game import KlondikeGame
from klondike.moves import legal_moves

from .base import STOP, ActionType, BotAction, BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def choose_action(self, game: KlondikeGame) -> BotAction:
        state = game.state
        options: List[BotAction] = [
            BotAction(ActionType.MOVE, selection=selection, destination=destination)
            for selection, destination in legal_moves(state)
        ]
        for column, cards in enumerate(state.tableau):
            if cards and not cards[-1].face_up:
                options.append(BotAction(ActionType.FLIP, column=column))
        if state.stock or state.waste:
            options.append(BotAction(ActionType.DRAW))
        if not options:
            return STOP
        return self._rng.choice(options)
