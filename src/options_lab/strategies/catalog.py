"""Read-only catalog of named multi-leg option strategies.

Templates are pure data: strikes are stored as offsets from spot and turned
into concrete legs by :func:`options_lab.strategies.legs.resolve_legs`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from options_lab.options.errors import UnknownStrategyError
from options_lab.options.types import (
    Action,
    LegTemplate,
    OptionType,
    StrategyTemplate,
)

CALL, PUT = OptionType.CALL, OptionType.PUT
BUY, SELL = Action.BUY, Action.SELL


def _build_catalog(templates: Iterable[StrategyTemplate]) -> Mapping[str, StrategyTemplate]:
    catalog: dict[str, StrategyTemplate] = {}
    for template in templates:
        if template.name in catalog:
            raise ValueError(f"Duplicate strategy name: {template.name!r}")
        catalog[template.name] = template
    return MappingProxyType(catalog)


STRATEGY_CATALOG: Mapping[str, StrategyTemplate] = _build_catalog(
    (
        StrategyTemplate(
            name="Covered Call",
            legs=(LegTemplate(CALL, SELL, 0.05),),
            requires_stock=True,
            risk="low",
            view="neutral-bullish",
            vol_view="low",
            description="Own 100 shares and sell an OTM call for income; caps upside.",
            max_loss_note="Stock falls to zero minus premium received",
            margin_note="Covered by stock position.",
            warnings=(
                "Assignment risk on short call",
                "Upside capped at strike price",
                "Stock can still fall significantly",
            ),
        ),
        StrategyTemplate(
            name="Protective Put",
            legs=(LegTemplate(PUT, BUY, -0.05),),
            requires_stock=True,
            risk="low",
            view="bullish",
            vol_view="high",
            description="Own 100 shares and buy a put as downside insurance.",
            max_loss_note="Stock price minus put strike plus premium paid",
            margin_note="No margin required. Full premium paid upfront.",
            warnings=(
                "Premium cost reduces overall return",
                "Put expires worthless if stock rises strongly",
            ),
        ),
        StrategyTemplate(
            name="Bull Call Spread",
            legs=(LegTemplate(CALL, BUY, 0.0), LegTemplate(CALL, SELL, 0.05)),
            risk="medium",
            view="bullish",
            vol_view="any",
            description="Buy a lower strike call, sell a higher strike call.",
            max_loss_note="Net premium paid",
            margin_note="Spread margin: difference between strikes less net credit.",
            warnings=(
                "Profit capped at short strike",
                "Early assignment possible on short leg",
            ),
        ),
        StrategyTemplate(
            name="Bear Put Spread",
            legs=(LegTemplate(PUT, BUY, 0.0), LegTemplate(PUT, SELL, -0.05)),
            risk="medium",
            view="bearish",
            vol_view="any",
            description="Buy a higher strike put, sell a lower strike put.",
            max_loss_note="Net premium paid",
            margin_note="Spread margin required.",
            warnings=(
                "Profit limited to spread width",
                "Assignment risk on short put",
            ),
        ),
        StrategyTemplate(
            name="Bull Put Spread",
            legs=(LegTemplate(PUT, SELL, 0.0), LegTemplate(PUT, BUY, -0.05)),
            risk="medium",
            view="neutral-bullish",
            vol_view="low",
            description="Sell a higher strike put, buy a lower strike put for a credit.",
            max_loss_note="Spread width minus premium received",
            margin_note="Margin required equal to max loss of the spread.",
            warnings=(
                "Assigned stock if short put goes ITM",
                "Max loss exceeds premium received",
            ),
        ),
        StrategyTemplate(
            name="Bear Call Spread",
            legs=(LegTemplate(CALL, SELL, 0.0), LegTemplate(CALL, BUY, 0.05)),
            risk="medium",
            view="bearish",
            vol_view="low",
            description="Sell a lower strike call, buy a higher strike call for a credit.",
            max_loss_note="Spread width minus premium received",
            margin_note="Margin required equal to max loss of the spread.",
            warnings=(
                "Assignment on short call",
                "Loss if stock rallies above short strike",
            ),
        ),
        StrategyTemplate(
            name="Straddle",
            legs=(LegTemplate(CALL, BUY, 0.0), LegTemplate(PUT, BUY, 0.0)),
            risk="high",
            view="volatile",
            vol_view="high",
            description="Buy a call and a put at the same strike; profits from large moves.",
            max_loss_note="Total premium paid (if stock does not move)",
            margin_note="Full debit paid upfront. No additional margin.",
            warnings=(
                "Heavy theta decay",
                "Needs large move to profit",
                "IV crush after events can destroy value",
            ),
        ),
        StrategyTemplate(
            name="Strangle",
            legs=(LegTemplate(CALL, BUY, 0.05), LegTemplate(PUT, BUY, -0.05)),
            risk="high",
            view="volatile",
            vol_view="high",
            description="Buy an OTM call and an OTM put; cheaper than a straddle.",
            max_loss_note="Total premium paid",
            margin_note="Full debit paid upfront.",
            warnings=(
                "Needs very large move to be profitable",
                "Theta decay accelerates near expiry",
                "IV crush risk",
            ),
        ),
        StrategyTemplate(
            name="Butterfly",
            legs=(
                LegTemplate(CALL, BUY, -0.05),
                LegTemplate(CALL, SELL, 0.0, quantity=2),
                LegTemplate(CALL, BUY, 0.05),
            ),
            risk="low",
            view="neutral",
            vol_view="low",
            description="Buy two outer strikes, sell two middle; profits if price stays flat.",
            max_loss_note="Net premium paid",
            margin_note="Limited margin due to hedged structure.",
            warnings=(
                "Profit window is narrow",
                "Short legs carry assignment risk",
            ),
        ),
        StrategyTemplate(
            name="Collar",
            legs=(LegTemplate(PUT, BUY, -0.05), LegTemplate(CALL, SELL, 0.05)),
            requires_stock=True,
            risk="low",
            view="neutral",
            vol_view="any",
            description="Own stock, buy a protective put and sell a covered call.",
            max_loss_note="Stock price minus put strike minus net premium",
            margin_note="Covered by stock position.",
            warnings=(
                "Upside capped at call strike",
                "Short call assignment risk",
                "Downside only protected to put strike",
            ),
        ),
    )
)


def strategy_names() -> tuple[str, ...]:
    """Catalog names in definition order."""
    return tuple(STRATEGY_CATALOG)


def get_strategy(
    name: str, catalog: Mapping[str, StrategyTemplate] = STRATEGY_CATALOG
) -> StrategyTemplate:
    """Look up a template by exact name."""
    try:
        return catalog[name]
    except KeyError:
        raise UnknownStrategyError(name, tuple(catalog)) from None


_VIEW_FAMILIES: Mapping[str, frozenset[str]] = MappingProxyType(
    {"neutral-bullish": frozenset({"neutral", "neutral-bullish", "bullish"})}
)


def _view_matches(template_view: str, view: str) -> bool:
    if template_view in (view, "any"):
        return True
    return template_view in _VIEW_FAMILIES.get(view, frozenset())


def recommend_strategies(
    view: str,
    vol_view: str,
    catalog: Mapping[str, StrategyTemplate] = STRATEGY_CATALOG,
) -> tuple[StrategyTemplate, ...]:
    """Templates matching a directional view and a volatility view.

    Templates tagged `"any"` match every view; a `"neutral-bullish"` request
    also matches neutral and bullish templates. Nothing matches until both
    views are given.
    """
    if not view or not vol_view:
        return ()
    return tuple(
        template
        for template in catalog.values()
        if _view_matches(template.view, view)
        and template.vol_view in (vol_view, "any")
    )
