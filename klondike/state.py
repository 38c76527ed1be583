"""Game state container for Klondike."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Iterator, Optional, Sequence, Tuple

from .cards import RANKS, Card, Suit
from .piles import FOUNDATION_COUNT, TABLEAU_COLUMNS, PileId, PileKind

Pile = Tuple[Card, ...]

DECK_SIZE = len(Suit) * len(RANKS)


class InvariantViolation(RuntimeError):
    """Raised when a state no longer holds each of the 52 cards exactly once."""


def _empty_piles(count: int) -> Tuple[Pile, ...]:
    return tuple(() for _ in range(count))


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of every pile; the top of each pile is its last card."""

    stock: Pile = ()
    waste: Pile = ()
    foundations: Tuple[Pile, ...] = field(default_factory=lambda: _empty_piles(FOUNDATION_COUNT))
    tableau: Tuple[Pile, ...] = field(default_factory=lambda: _empty_piles(TABLEAU_COLUMNS))

    def __post_init__(self) -> None:
        # Accept any sequences from callers but always store tuples.
        object.__setattr__(self, "stock", tuple(self.stock))
        object.__setattr__(self, "waste", tuple(self.waste))
        object.__setattr__(self, "foundations", tuple(tuple(pile) for pile in self.foundations))
        object.__setattr__(self, "tableau", tuple(tuple(pile) for pile in self.tableau))
        if len(self.foundations) != FOUNDATION_COUNT:
            raise ValueError(f"GameState requires exactly {FOUNDATION_COUNT} foundations.")
        if len(self.tableau) != TABLEAU_COLUMNS:
            raise ValueError(f"GameState requires exactly {TABLEAU_COLUMNS} tableau columns.")

    def pile(self, pile_id: PileId) -> Pile:
        if pile_id.kind is PileKind.STOCK:
            return self.stock
        if pile_id.kind is PileKind.WASTE:
            return self.waste
        assert pile_id.index is not None
        if pile_id.kind is PileKind.FOUNDATION:
            return self.foundations[pile_id.index]
        return self.tableau[pile_id.index]

    def top(self, pile_id: PileId) -> Optional[Card]:
        cards = self.pile(pile_id)
        return cards[-1] if cards else None

    def with_pile(self, pile_id: PileId, cards: Sequence[Card]) -> "GameState":
        """Return a copy of the state with one pile replaced."""
        cards = tuple(cards)
        if pile_id.kind is PileKind.STOCK:
            return replace(self, stock=cards)
        if pile_id.kind is PileKind.WASTE:
            return replace(self, waste=cards)
        assert pile_id.index is not None
        if pile_id.kind is PileKind.FOUNDATION:
            piles = list(self.foundations)
            piles[pile_id.index] = cards
            return replace(self, foundations=tuple(piles))
        piles = list(self.tableau)
        piles[pile_id.index] = cards
        return replace(self, tableau=tuple(piles))

    def all_cards(self) -> Iterator[Card]:
        yield from self.stock
        yield from self.waste
        for pile in self.foundations:
            yield from pile
        for pile in self.tableau:
            yield from pile

    def validate(self) -> None:
        """Fail fast when cards were created, lost or duplicated."""
        counts = Counter((card.suit, card.rank) for card in self.all_cards())
        duplicates = sorted(f"{suit.value}-{rank}" for (suit, rank), n in counts.items() if n > 1)
        if duplicates:
            raise InvariantViolation(f"Duplicate cards in state: {', '.join(duplicates)}")
        missing = [f"{suit.value}-{rank}" for suit in Suit for rank in RANKS if (suit, rank) not in counts]
        if missing:
            raise InvariantViolation(f"Missing cards in state: {', '.join(missing)}")
