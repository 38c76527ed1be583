"""Fixed-priority move suggestions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .cards import Card, card_label
from .piles import FOUNDATIONS, STOCK, TABLEAU, WASTE, PileId
from .rules import can_place_on_foundation, can_place_on_tableau
from .state import GameState

NO_MOVE_MESSAGE = "No obvious move. Try drawing or rearranging the tableau."


class HintKind(Enum):
    WASTE_TO_FOUNDATION = auto()
    TABLEAU_TO_FOUNDATION = auto()
    FLIP = auto()
    TABLEAU_TO_TABLEAU = auto()
    DRAW = auto()
    NONE = auto()


@dataclass(frozen=True)
class Hint:
    kind: HintKind
    message: str
    source: Optional[PileId] = None
    target: Optional[PileId] = None


def _column(pile_id: PileId) -> str:
    assert pile_id.index is not None
    return f"column {pile_id.index + 1}"


def _foundation_for(state: GameState, card: Card) -> Optional[PileId]:
    for pile_id in FOUNDATIONS:
        assert pile_id.index is not None
        if can_place_on_foundation(state, card, pile_id.index):
            return pile_id
    return None


def get_hint(state: GameState) -> Hint:
    """Return the first applicable suggestion; ties go to the lowest column index."""
    top = state.top(WASTE)
    if top is not None and top.face_up:
        target = _foundation_for(state, top)
        if target is not None:
            return Hint(
                HintKind.WASTE_TO_FOUNDATION,
                f"Move the {card_label(top)} from the waste to the foundation.",
                WASTE,
                target,
            )

    for pile_id in TABLEAU:
        top = state.top(pile_id)
        if top is not None and top.face_up:
            target = _foundation_for(state, top)
            if target is not None:
                return Hint(
                    HintKind.TABLEAU_TO_FOUNDATION,
                    f"Move the {card_label(top)} from {_column(pile_id)} to the foundation.",
                    pile_id,
                    target,
                )

    for pile_id in TABLEAU:
        top = state.top(pile_id)
        if top is not None and not top.face_up:
            return Hint(HintKind.FLIP, f"Flip the face-down card in {_column(pile_id)}.", pile_id)

    for source in TABLEAU:
        top = state.top(source)
        if top is None or not top.face_up:
            continue
        for target in TABLEAU:
            if target == source:
                continue
            assert target.index is not None
            if can_place_on_tableau(state, top, target.index):
                return Hint(
                    HintKind.TABLEAU_TO_TABLEAU,
                    f"Move the {card_label(top)} from {_column(source)} to {_column(target)}.",
                    source,
                    target,
                )

    if state.stock:
        return Hint(HintKind.DRAW, "Draw a card from the stock.", STOCK)

    return Hint(HintKind.NONE, NO_MOVE_MESSAGE)


def hint_message(state: GameState) -> str:
    return get_hint(state).message
