"""High-level game orchestration for Klondike."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Optional, Sequence

from .cards import Card
from .deck import create_deck, deal
from .hints import Hint, get_hint
from .history import History
from .moves import (
    Selection,
    attempt_move,
    auto_move_to_foundation,
    draw_from_stock,
    flip_tableau_top,
    selection_at,
)
from .piles import PileId, PileKind
from .rules import is_won
from .rules_schema import GameConfig
from .state import GameState

logger = logging.getLogger(__name__)


@dataclass
class KlondikeGame:
    """Own the live state and its undo history; every change goes through here."""

    config: GameConfig = field(default_factory=GameConfig)
    rng: Optional[Random] = None
    deck: Optional[Sequence[Card]] = None

    state: GameState = field(init=False)
    history: History = field(init=False)
    selection: Optional[Selection] = field(init=False, default=None)
    dragged: Optional[Selection] = field(init=False, default=None)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = Random(self.config.seed)
        self.history = History(self.config.history_limit)
        self.new_game(deck=self.deck)

    # Lifecycle ---------------------------------------------------------

    def new_game(self, deck: Optional[Sequence[Card]] = None) -> GameState:
        cards = list(deck) if deck is not None else create_deck(self.rng)
        self.state = deal(cards)
        self.history.clear()
        self.selection = None
        self.dragged = None
        logger.info("Dealt a new game")
        return self.state

    def restart(self) -> GameState:
        return self.new_game()

    # Actions -----------------------------------------------------------

    def draw(self) -> bool:
        if not self.state.stock and not self.state.waste:
            return False
        self._commit(draw_from_stock(self.state))
        self.selection = None
        return True

    def move(self, selection: Selection, destination: PileId) -> bool:
        next_state = attempt_move(self.state, selection, destination)
        if next_state is None:
            logger.debug("Rejected move of %s from %s to %s", selection.card.id, selection.source, destination)
            return False
        self._commit(next_state)
        return True

    def flip(self, column_index: int) -> bool:
        # Flips are not undoable, so they bypass the history.
        next_state = flip_tableau_top(self.state, column_index)
        if next_state is None:
            return False
        self.state = next_state
        return True

    def auto_move(self, selection: Selection) -> bool:
        next_state = auto_move_to_foundation(self.state, selection)
        if next_state is None:
            return False
        self._commit(next_state)
        return True

    def undo(self) -> bool:
        self.selection = None
        self.dragged = None
        previous = self.history.undo()
        if previous is None:
            return False
        self.state = previous
        return True

    def hint(self) -> Hint:
        return get_hint(self.state)

    def is_won(self) -> bool:
        return is_won(self.state)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    # Click adapter -----------------------------------------------------

    def click(self, source: PileId, index: Optional[int] = None) -> bool:
        """Handle a click on a pile or card; the stock draws, a card is picked or placed.

        Returns True when the game state changed.
        """
        if source.kind is PileKind.STOCK:
            return self.draw()
        clicked = selection_at(self.state, source, index)
        if not clicked.card.face_up:
            if source.is_tableau and clicked.index == len(self.state.pile(source)) - 1:
                assert source.index is not None
                return self.flip(source.index)
            return False

        if self.selection is None:
            self.selection = clicked
            return False

        held, self.selection = self.selection, None
        if source.kind in (PileKind.FOUNDATION, PileKind.TABLEAU):
            return self.move(held, source)
        return False

    def click_pile(self, destination: PileId) -> bool:
        """Handle a click on a pile's empty area while a card is held."""
        if self.selection is None:
            return False
        if self.move(self.selection, destination):
            self.selection = None
            return True
        return False

    def double_click(self, source: PileId, index: Optional[int] = None) -> bool:
        clicked = selection_at(self.state, source, index)
        if not clicked.card.face_up:
            return False
        self.selection = None
        return self.auto_move(clicked)

    # Drag adapter ------------------------------------------------------

    def begin_drag(self, source: PileId, index: Optional[int] = None) -> None:
        self.dragged = selection_at(self.state, source, index)

    def drop(self, destination: PileId) -> bool:
        if self.dragged is None:
            return False
        dragged, self.dragged = self.dragged, None
        return self.move(dragged, destination)

    # Helpers -----------------------------------------------------------

    def _commit(self, next_state: GameState) -> None:
        self.history.save(self.state)
        self.state = next_state
        if is_won(next_state):
            logger.info("Game won")
