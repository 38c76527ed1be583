"""Card-related data structures and helpers for Klondike."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping


class Color(Enum):
    RED = "red"
    BLACK = "black"

    def __str__(self) -> str:
        return self.value


class Suit(Enum):
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def __str__(self) -> str:
        return self.value

    @property
    def color(self) -> Color:
        return SUIT_COLORS[self]


SUIT_COLORS: dict[Suit, Color] = {
    Suit.HEARTS: Color.RED,
    Suit.DIAMONDS: Color.RED,
    Suit.CLUBS: Color.BLACK,
    Suit.SPADES: Color.BLACK,
}

ACE = 1
KING = 13
RANKS: tuple[int, ...] = tuple(range(ACE, KING + 1))

RANK_NAMES: dict[int, str] = {1: "Ace", 11: "Jack", 12: "Queen", 13: "King"}


@dataclass(frozen=True)
class Card:
    """A playing card; only its orientation ever changes, and only by copy."""

    suit: Suit
    rank: int
    face_up: bool = False

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Rank must be between {ACE} and {KING}, got {self.rank!r}.")

    @property
    def id(self) -> str:
        return card_id(self.suit, self.rank)

    @property
    def color(self) -> Color:
        return self.suit.color

    def is_red(self) -> bool:
        return self.suit.color is Color.RED

    def flipped(self, face_up: bool) -> "Card":
        if self.face_up == face_up:
            return self
        return replace(self, face_up=face_up)


def card_id(suit: Suit, rank: int) -> str:
    return f"{suit.value}-{rank}"


def rank_name(rank: int) -> str:
    return RANK_NAMES.get(rank, str(rank))


def card_label(card: Card) -> str:
    return f"{rank_name(card.rank)} of {card.suit.name.title()}"


def serialize_card(card: Card) -> dict[str, object]:
    return {
        "id": card.id,
        "suit": card.suit.value,
        "rank": card.rank,
        "face_up": card.face_up,
    }


def deserialize_card(payload: Mapping[str, object]) -> Card:
    try:
        suit = Suit(str(payload["suit"]).lower())
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Unknown suit in card payload: {payload!r}") from exc
    try:
        rank = int(payload["rank"])  # type: ignore[arg-type]
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid rank in card payload: {payload!r}") from exc
    return Card(suit, rank, bool(payload.get("face_up", False)))
