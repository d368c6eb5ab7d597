"""Immutable collection of recorded positions with book-level risk."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from typing import Literal

from options_lab.options.types import Greeks
from options_lab.positions.records import Position

ExpiryUrgency = Literal["urgent", "near", "normal"]

URGENT_DAYS = 7
NEAR_DAYS = 21


def expiry_urgency(days_left: int) -> ExpiryUrgency:
    """Bucket days-to-expiry: <= 7 urgent, <= 21 near, otherwise normal."""
    if days_left <= URGENT_DAYS:
        return "urgent"
    if days_left <= NEAR_DAYS:
        return "near"
    return "normal"


@dataclass(frozen=True)
class PositionBook:
    """Ordered, append-only set of positions; `add` returns a new book."""

    positions: tuple[Position, ...] = ()

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def add(self, position: Position) -> PositionBook:
        return PositionBook(positions=(*self.positions, position))

    def book_greeks(self) -> Greeks:
        """Sum of per-unit net Greeks times contracts across positions."""
        total = Greeks(delta=0.0, gamma=0.0, theta=0.0, vega=0.0)
        for position in self.positions:
            scaled = position.aggregate.greeks.scaled(position.contracts)
            total = Greeks(
                delta=total.delta + scaled.delta,
                gamma=total.gamma + scaled.gamma,
                theta=total.theta + scaled.theta,
                vega=total.vega + scaled.vega,
            )
        return total

    def total_net_cost(self) -> float:
        return sum(position.net_cost for position in self.positions)

    def by_expiry(self) -> dict[date, tuple[Position, ...]]:
        """Positions grouped by expiry date, nearest expiry first."""
        groups: dict[date, list[Position]] = {}
        for position in self.positions:
            groups.setdefault(position.expiry_date, []).append(position)
        return {expiry: tuple(groups[expiry]) for expiry in sorted(groups)}
