"""Core engine package for Klondike solitaire."""

from .deck import deal_new_game
from .hints import get_hint, hint_message
from .history import History
from .moves import Selection, attempt_move, auto_move_to_foundation, draw_from_stock, flip_tableau_top
from .piles import PileId, PileKind, parse_pile_id
from .rules import is_won
from .state import GameState

__all__ = [
    "cards",
    "piles",
    "state",
    "deck",
    "rules",
    "moves",
    "history",
    "hints",
    "game",
    "encode",
    "rules_schema",
    "service",
    "cli",
    "GameState",
    "History",
    "PileId",
    "PileKind",
    "Selection",
    "attempt_move",
    "auto_move_to_foundation",
    "deal_new_game",
    "draw_from_stock",
    "flip_tableau_top",
    "get_hint",
    "hint_message",
    "is_won",
    "parse_pile_id",
]
