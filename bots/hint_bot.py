"""Bot that always follows the hint advisor."""

from __future__ import annotations

from klondike.game import KlondikeGame
from klondike.hints import HintKind
from klondike.moves import selection_at

from .base import STOP, ActionType, BotAction, BotStrategy


class HintBot(BotStrategy):
    name = "Hint"

    def choose_action(self, game: KlondikeGame) -> BotAction:
        hint = game.hint()
        if hint.kind is HintKind.DRAW:
            return BotAction(ActionType.DRAW)
        if hint.kind is HintKind.FLIP:
            assert hint.source is not None
            return BotAction(ActionType.FLIP, column=hint.source.index)
        if hint.kind is HintKind.NONE:
            # Recycle the waste once the stock runs dry; the arena caps the loop.
            if game.state.waste:
                return BotAction(ActionType.DRAW)
            return STOP
        assert hint.source is not None and hint.target is not None
        return BotAction(
            ActionType.MOVE,
            selection=selection_at(game.state, hint.source),
            destination=hint.target,
        )
