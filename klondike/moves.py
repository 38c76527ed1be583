"""Move execution for Klondike.

Every function here is a pure transition: it takes a :class:`GameState` and
returns a new one (or ``None`` when the intent is rejected).  Only
:func:`attempt_move` and :func:`auto_move_to_foundation` validate; the raw
:func:`move_cards` executor trusts its caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .cards import Card
from .piles import FOUNDATIONS, TABLEAU, WASTE, PileId, PileKind, tableau
from .rules import can_place_on_foundation, can_place_on_tableau, moveable_sequence
from .state import GameState


class InvalidSelection(ValueError):
    """Raised when a selection does not point at a card in the current state."""


@dataclass(frozen=True)
class Selection:
    """A picked-up card and where it came from; ``index`` is its position in the source pile."""

    card: Card
    source: PileId
    index: Optional[int] = None


def selection_at(state: GameState, source: PileId, index: Optional[int] = None) -> Selection:
    """Build a selection for the card currently at ``source`` (top card when ``index`` is None)."""
    cards = state.pile(source)
    if not cards:
        raise InvalidSelection(f"{source} is empty.")
    position = len(cards) - 1 if index is None else index
    if not 0 <= position < len(cards):
        raise InvalidSelection(f"{source} has no card at index {index}.")
    return Selection(card=cards[position], source=source, index=position)


def move_cards(
    state: GameState,
    selection: Selection,
    destination: PileId,
    sequence: Optional[Sequence[Card]] = None,
) -> GameState:
    """Move ``sequence`` (default: the selected card) from its source onto ``destination``."""
    cards_to_move = tuple(sequence) if sequence else (selection.card,)
    source = selection.source

    if source.kind is PileKind.WASTE:
        state = state.with_pile(WASTE, state.waste[:-1])
    elif source.kind is PileKind.TABLEAU:
        column = list(state.pile(source)[: -len(cards_to_move)])
        if column and not column[-1].face_up:
            column[-1] = column[-1].flipped(True)
        state = state.with_pile(source, column)
    elif source.kind is PileKind.FOUNDATION:
        state = state.with_pile(source, state.pile(source)[:-1])

    return state.with_pile(destination, state.pile(destination) + cards_to_move)


def _cards_for(state: GameState, selection: Selection) -> Optional[List[Card]]:
    """Return the cards the selection would lift, or None if it is stale or not movable."""
    source = selection.source
    cards = state.pile(source)
    if source.kind is PileKind.STOCK or not cards:
        return None

    if source.kind is PileKind.TABLEAU:
        assert source.index is not None
        position = len(cards) - 1 if selection.index is None else selection.index
        if not 0 <= position < len(cards) or cards[position].id != selection.card.id:
            return None
        sequence = moveable_sequence(state, source.index, position)
        # Only a run that reaches the top of the column can be lifted.
        if not sequence or len(sequence) != len(cards) - position:
            return None
        return sequence

    top = cards[-1]
    if top.id != selection.card.id or not top.face_up:
        return None
    if selection.index is not None and selection.index != len(cards) - 1:
        return None
    return [top]


def attempt_move(state: GameState, selection: Selection, destination: PileId) -> Optional[GameState]:
    """Validate and apply a move; returns None when the move is rejected."""
    if destination == selection.source:
        return None
    cards = _cards_for(state, selection)
    if cards is None:
        return None

    if destination.kind is PileKind.FOUNDATION:
        assert destination.index is not None
        if len(cards) != 1 or not can_place_on_foundation(state, cards[0], destination.index):
            return None
    elif destination.kind is PileKind.TABLEAU:
        assert destination.index is not None
        if not can_place_on_tableau(state, cards[0], destination.index):
            return None
    else:
        return None

    return move_cards(state, selection, destination, cards)


def auto_move_to_foundation(state: GameState, selection: Selection) -> Optional[GameState]:
    for target in FOUNDATIONS:
        moved = attempt_move(state, selection, target)
        if moved is not None:
            return moved
    return None


def draw_from_stock(state: GameState) -> GameState:
    """Turn the top stock card onto the waste, or recycle the waste when the stock is empty."""
    if state.stock:
        drawn = state.stock[-1].flipped(True)
        return GameState(
            stock=state.stock[:-1],
            waste=state.waste + (drawn,),
            foundations=state.foundations,
            tableau=state.tableau,
        )
    recycled = tuple(card.flipped(False) for card in reversed(state.waste))
    return GameState(stock=recycled, waste=(), foundations=state.foundations, tableau=state.tableau)


def flip_tableau_top(state: GameState, column_index: int) -> Optional[GameState]:
    pile_id = tableau(column_index)
    column = state.pile(pile_id)
    if not column or column[-1].face_up:
        return None
    return state.with_pile(pile_id, column[:-1] + (column[-1].flipped(True),))


def legal_moves(state: GameState) -> List[Tuple[Selection, PileId]]:
    """Enumerate every card move the validator accepts, in a stable order."""
    candidates: List[Selection] = []
    if state.waste:
        candidates.append(selection_at(state, WASTE))
    for pile_id in FOUNDATIONS:
        if state.pile(pile_id):
            candidates.append(selection_at(state, pile_id))
    for pile_id in TABLEAU:
        column = state.pile(pile_id)
        for position, card in enumerate(column):
            if card.face_up:
                candidates.append(Selection(card=card, source=pile_id, index=position))

    moves: List[Tuple[Selection, PileId]] = []
    for selection in candidates:
        for destination in FOUNDATIONS + TABLEAU:
            if attempt_move(state, selection, destination) is not None:
                moves.append((selection, destination))
    return moves
