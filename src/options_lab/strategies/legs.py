"""Resolve catalog templates into concrete legs at the current spot."""

from __future__ import annotations

from options_lab.options.types import Leg, LegTemplate, MarketState, StrategyTemplate

STRIKE_DECIMALS = 2


def resolve_strike(spot: float, offset: float) -> float:
    """Strike at `offset` from `spot`, rounded to cents."""
    return round(spot * (1.0 + offset), STRIKE_DECIMALS)


def resolve_leg(template: LegTemplate, state: MarketState) -> Leg:
    return Leg(
        option_type=template.option_type,
        action=template.action,
        strike=resolve_strike(state.spot, template.offset),
        quantity=template.quantity,
    )


def resolve_legs(template: StrategyTemplate, state: MarketState) -> tuple[Leg, ...]:
    """Expand `template` into legs with strikes relative to `state.spot`.

    Deterministic: the same template and spot always yield identical strikes.
    Strikes follow spot until a position freezes them.
    """
    return tuple(resolve_leg(leg, state) for leg in template.legs)
