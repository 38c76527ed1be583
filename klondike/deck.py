"""Deck creation and dealing for Klondike."""

from __future__ import annotations

from random import Random
from typing import List, Optional, Sequence

from .cards import RANKS, Card, Suit
from .piles import TABLEAU_COLUMNS
from .state import DECK_SIZE, GameState


def build_deck() -> List[Card]:
    """Return the ordered 52-card deck, every card face-down."""
    return [Card(suit, rank) for suit in Suit for rank in RANKS]


def shuffle_deck(cards: List[Card], rng: Random) -> List[Card]:
    """Fisher-Yates shuffle in place: walk down from the last index, swapping with [0, i]."""
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]
    return cards


def create_deck(rng: Optional[Random] = None) -> List[Card]:
    if rng is None:
        rng = Random()
    return shuffle_deck(build_deck(), rng)


def deal(deck: Sequence[Card]) -> GameState:
    """Deal the tableau triangle and put the remaining 24 cards in the stock."""
    cards = [card.flipped(False) for card in deck]
    if len(cards) != DECK_SIZE or len({card.id for card in cards}) != DECK_SIZE:
        raise ValueError(f"Deck must contain exactly {DECK_SIZE} distinct cards.")

    position = 0
    columns: List[List[Card]] = []
    for col in range(TABLEAU_COLUMNS):
        column = cards[position : position + col + 1]
        position += col + 1
        column[-1] = column[-1].flipped(True)
        columns.append(column)

    return GameState(stock=cards[position:], tableau=columns)


def deal_new_game(*, rng: Optional[Random] = None, seed: Optional[int] = None) -> GameState:
    if rng is None:
        rng = Random(seed)
    return deal(create_deck(rng))
