"""Frozen position snapshots recorded when a trade is confirmed."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Literal, Sequence

from options_lab.options.engines import GreeksModel
from options_lab.options.errors import InvalidInputError
from options_lab.options.risk.aggregation import aggregate
from options_lab.options.types import Leg, MarketState, PortfolioAggregate

logger = logging.getLogger(__name__)

Clock = Callable[[], date]
OrderType = Literal["market", "limit"]


@dataclass(frozen=True)
class Position:
    """Snapshot of a confirmed strategy; strikes and entry economics are fixed.

    `aggregate` holds per-unit net premium and Greeks; `contracts` scales them.
    """

    strategy: str
    state: MarketState
    legs: tuple[Leg, ...]
    aggregate: PortfolioAggregate
    contracts: int
    entry_date: date
    expiry_date: date
    order_type: OrderType = "market"
    limit_price: float | None = None

    def __post_init__(self) -> None:
        if not self.legs:
            raise InvalidInputError("legs must not be empty")
        if isinstance(self.contracts, bool) or self.contracts <= 0:
            raise InvalidInputError("contracts must be a positive integer")
        if self.expiry_date < self.entry_date:
            raise InvalidInputError("expiry_date must not precede entry_date")
        if self.order_type not in ("market", "limit"):
            raise InvalidInputError("order_type must be 'market' or 'limit'")
        if self.order_type == "limit" and self.limit_price is None:
            raise InvalidInputError("limit orders require limit_price")

    @property
    def net_cost(self) -> float:
        """Signed cash at entry; negative when paid."""
        return self.aggregate.net_cost(self.contracts)

    def days_left(self, today: date) -> int:
        """Calendar days from `today` until expiry (negative once expired)."""
        return (self.expiry_date - today).days


def open_position(
    strategy: str,
    legs: Sequence[Leg],
    state: MarketState,
    *,
    contracts: int = 1,
    order_type: OrderType = "market",
    limit_price: float | None = None,
    clock: Clock = date.today,
    pricer: GreeksModel | None = None,
) -> Position:
    """Freeze `legs` and `state` into a :class:`Position` dated by `clock`."""
    entry = clock()
    position = Position(
        strategy=strategy,
        state=state,
        legs=tuple(legs),
        aggregate=aggregate(legs, state, pricer=pricer),
        contracts=contracts,
        entry_date=entry,
        expiry_date=entry + timedelta(days=int(state.days_to_expiry)),
        order_type=order_type,
        limit_price=limit_price,
    )
    logger.debug(
        "Opened %s x%d on %s (expiry %s, net cost %.2f)",
        strategy,
        contracts,
        position.entry_date.isoformat(),
        position.expiry_date.isoformat(),
        position.net_cost,
    )
    return position
