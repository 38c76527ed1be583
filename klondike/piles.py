"""Pile identifiers for the Klondike layout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

FOUNDATION_COUNT = 4
TABLEAU_COLUMNS = 7


class InvalidPile(ValueError):
    """Raised when a pile identifier is malformed or out of range."""


class PileKind(Enum):
    STOCK = "stock"
    WASTE = "waste"
    FOUNDATION = "foundation"
    TABLEAU = "tableau"

    def __str__(self) -> str:
        return self.value


_PILE_COUNTS: dict[PileKind, int] = {
    PileKind.FOUNDATION: FOUNDATION_COUNT,
    PileKind.TABLEAU: TABLEAU_COLUMNS,
}


@dataclass(frozen=True)
class PileId:
    """Tagged pile reference; ``index`` is set only for foundations and tableau columns."""

    kind: PileKind
    index: Optional[int] = None

    def __post_init__(self) -> None:
        count = _PILE_COUNTS.get(self.kind)
        if count is None:
            if self.index is not None:
                raise InvalidPile(f"{self.kind} does not take an index.")
            return
        if self.index is None or not 0 <= self.index < count:
            raise InvalidPile(f"{self.kind} index must be in 0..{count - 1}, got {self.index!r}.")

    def __str__(self) -> str:
        if self.index is None:
            return self.kind.value
        return f"{self.kind.value}-{self.index}"

    @property
    def is_foundation(self) -> bool:
        return self.kind is PileKind.FOUNDATION

    @property
    def is_tableau(self) -> bool:
        return self.kind is PileKind.TABLEAU


STOCK = PileId(PileKind.STOCK)
WASTE = PileId(PileKind.WASTE)


def foundation(index: int) -> PileId:
    return PileId(PileKind.FOUNDATION, index)


def tableau(index: int) -> PileId:
    return PileId(PileKind.TABLEAU, index)


FOUNDATIONS: tuple[PileId, ...] = tuple(foundation(i) for i in range(FOUNDATION_COUNT))
TABLEAU: tuple[PileId, ...] = tuple(tableau(i) for i in range(TABLEAU_COLUMNS))


def parse_pile_id(text: str) -> PileId:
    """Parse ``stock``, ``waste``, ``foundation-N`` or ``tableau-N``."""
    name, sep, raw_index = text.strip().lower().partition("-")
    try:
        kind = PileKind(name)
    except ValueError as exc:
        raise InvalidPile(f"Unknown pile: {text!r}") from exc
    if not sep:
        return PileId(kind)
    try:
        index = int(raw_index)
    except ValueError as exc:
        raise InvalidPile(f"Pile index must be an integer: {text!r}") from exc
    return PileId(kind, index)
