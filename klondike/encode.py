"""Plain-dict encoding of game states for services and fixtures."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from .cards import Card, deserialize_card, serialize_card
from .state import GameState


def encode_pile(cards: Iterable[Card]) -> List[dict]:
    return [serialize_card(card) for card in cards]


def decode_pile(payload: Iterable[Mapping[str, Any]]) -> List[Card]:
    return [deserialize_card(item) for item in payload]


def serialize_state(state: GameState) -> dict[str, Any]:
    return {
        "stock": encode_pile(state.stock),
        "waste": encode_pile(state.waste),
        "foundations": [encode_pile(pile) for pile in state.foundations],
        "tableau": [encode_pile(pile) for pile in state.tableau],
    }


def deserialize_state(payload: Mapping[str, Any], *, validate: bool = True) -> GameState:
    """Rebuild a state; with ``validate`` the 52-card invariant is enforced."""
    state = GameState(
        stock=decode_pile(payload.get("stock", [])),
        waste=decode_pile(payload.get("waste", [])),
        foundations=[decode_pile(pile) for pile in payload["foundations"]],
        tableau=[decode_pile(pile) for pile in payload["tableau"]],
    )
    if validate:
        state.validate()
    return state
