"""Placement rules and terminal-state detection for Klondike."""

from __future__ import annotations

from typing import List

from .cards import ACE, KING, RANKS, Card
from .state import GameState


def alternates(lower: Card, upper: Card) -> bool:
    """Return True if ``upper`` may sit on ``lower`` inside a tableau run."""
    return lower.color is not upper.color and upper.rank == lower.rank - 1


def can_place_on_foundation(state: GameState, card: Card, foundation_index: int) -> bool:
    pile = state.foundations[foundation_index]
    if not pile:
        return card.rank == ACE
    top = pile[-1]
    return card.suit is top.suit and card.rank == top.rank + 1


def can_place_on_tableau(state: GameState, card: Card, column_index: int) -> bool:
    column = state.tableau[column_index]
    if not column:
        return card.rank == KING
    return alternates(column[-1], card)


def moveable_sequence(state: GameState, column_index: int, start_index: int) -> List[Card]:
    """Return the face-up alternating descending run starting at ``start_index``."""
    column = state.tableau[column_index]
    if start_index < 0:
        return []
    sequence: List[Card] = []
    for card in column[start_index:]:
        if not card.face_up:
            break
        if sequence and not alternates(sequence[-1], card):
            break
        sequence.append(card)
    return sequence


def is_won(state: GameState) -> bool:
    return all(len(pile) == len(RANKS) for pile in state.foundations)
