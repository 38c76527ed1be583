"""Convenience service layer for UI consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cards import card_label, serialize_card
from .encode import encode_pile
from .game import KlondikeGame
from .moves import Selection, selection_at
from .piles import PileId, parse_pile_id
from .rules_schema import GameConfig


@dataclass
class SelectionView:
    card: dict
    label: str
    source: str
    index: Optional[int]


@dataclass
class HintView:
    kind: str
    message: str
    source: Optional[str]
    target: Optional[str]


@dataclass
class GameView:
    stock: list[dict]
    waste: list[dict]
    foundations: list[list[dict]]
    tableau: list[list[dict]]
    stock_count: int
    won: bool
    can_undo: bool
    history_size: int
    selection: Optional[SelectionView]
    accepted: bool = True
    message: str = ""


class GameService:
    """Facade around KlondikeGame taking string pile ids and returning views."""

    def __init__(self, game: Optional[KlondikeGame] = None, config: Optional[GameConfig] = None) -> None:
        self.game = game or KlondikeGame(config=config or GameConfig())

    # Lifecycle ---------------------------------------------------------

    def new_game(self) -> GameView:
        self.game.new_game()
        return self.get_view()

    # Actions -----------------------------------------------------------

    def draw(self) -> GameView:
        accepted = self.game.draw()
        return self.get_view(accepted=accepted)

    def move(self, source: str, destination: str, index: Optional[int] = None) -> GameView:
        selection = self._selection(source, index)
        accepted = self.game.move(selection, parse_pile_id(destination))
        return self.get_view(accepted=accepted)

    def flip(self, column_index: int) -> GameView:
        accepted = self.game.flip(column_index)
        return self.get_view(accepted=accepted)

    def auto_move(self, source: str, index: Optional[int] = None) -> GameView:
        accepted = self.game.auto_move(self._selection(source, index))
        return self.get_view(accepted=accepted)

    def undo(self) -> GameView:
        accepted = self.game.undo()
        return self.get_view(accepted=accepted)

    def click(self, source: str, index: Optional[int] = None) -> GameView:
        self.game.click(parse_pile_id(source), index)
        return self.get_view()

    def click_pile(self, destination: str) -> GameView:
        accepted = self.game.click_pile(parse_pile_id(destination))
        return self.get_view(accepted=accepted)

    def hint(self) -> HintView:
        hint = self.game.hint()
        return HintView(
            kind=hint.kind.name.lower(),
            message=hint.message,
            source=str(hint.source) if hint.source else None,
            target=str(hint.target) if hint.target else None,
        )

    # Views -------------------------------------------------------------

    def get_view(self, *, accepted: bool = True, message: str = "") -> GameView:
        state = self.game.state
        won = self.game.is_won()
        if won and not message:
            message = "Congratulations! You won!"
        return GameView(
            stock=encode_pile(state.stock),
            waste=encode_pile(state.waste),
            foundations=[encode_pile(pile) for pile in state.foundations],
            tableau=[encode_pile(pile) for pile in state.tableau],
            stock_count=len(state.stock),
            won=won,
            can_undo=self.game.can_undo,
            history_size=len(self.game.history),
            selection=self._selection_view(self.game.selection),
            accepted=accepted,
            message=message,
        )

    # Helpers -----------------------------------------------------------

    def _selection(self, source: str, index: Optional[int]) -> Selection:
        pile: PileId = parse_pile_id(source)
        return selection_at(self.game.state, pile, index)

    def _selection_view(self, selection: Optional[Selection]) -> Optional[SelectionView]:
        if selection is None:
            return None
        return SelectionView(
            card=serialize_card(selection.card),
            label=card_label(selection.card),
            source=str(selection.source),
            index=selection.index,
        )
