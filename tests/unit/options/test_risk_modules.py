import math

import numpy as np
import pytest

from options_lab.options import (
    EXPIRY_EPSILON_YEARS,
    Action,
    BlackScholesPricer,
    Greeks,
    GreeksModel,
    InvalidInputError,
    Leg,
    MarginModel,
    MarketState,
    OptionType,
    PortfolioAggregate,
    PricingResult,
    ScenarioRow,
    StressGrid,
    StressMarginProxyModel,
    aggregate,
    bs_price,
    estimate_margin,
    find_breakevens,
    payoff_curve,
    stress,
)
from options_lab.options.risk import net_call_slope, sample_price_grid

CALL, PUT = OptionType.CALL, OptionType.PUT
BUY, SELL = Action.BUY, Action.SELL


def _state(**overrides) -> MarketState:
    args = {"spot": 100.0, "volatility": 0.25, "rate": 0.05, "days_to_expiry": 30}
    args.update(overrides)
    return MarketState(**args)


def _bull_call_spread() -> tuple[Leg, ...]:
    return (Leg(CALL, BUY, 100.0), Leg(CALL, SELL, 105.0))


def _straddle(action: Action = BUY) -> tuple[Leg, ...]:
    return (Leg(CALL, action, 100.0), Leg(PUT, action, 100.0))


class _ConstantPricer:
    """Prices every option at 2.0 with unit Greeks."""

    def price(self, leg, state, *, time_to_expiry=None) -> float:
        return 2.0

    def price_and_greeks(self, leg, state, *, time_to_expiry=None):
        return PricingResult(
            premium=2.0, greeks=Greeks(delta=1.0, gamma=1.0, theta=1.0, vega=1.0)
        )


class _IntrinsicPricer:
    """Ignores time and volatility; values each leg at intrinsic."""

    def price(self, leg, state, *, time_to_expiry=None) -> float:
        if leg.option_type is CALL:
            return max(state.spot - leg.strike, 0.0)
        return max(leg.strike - state.spot, 0.0)


# --- aggregation -----------------------------------------------------------


def test_single_long_call_aggregate_books_debit():
    state = _state()
    leg = Leg(CALL, BUY, 100.0)
    premium = bs_price(100.0, 100.0, state.time_to_expiry, 0.05, 0.25, "call")

    net = aggregate([leg], state)

    assert net.net_premium == pytest.approx(-premium)
    assert net.is_debit
    assert 0.0 < net.net_delta < 1.0
    assert net.net_gamma > 0
    assert net.net_vega > 0
    assert net.net_theta < 0


def test_aggregate_is_additive_across_leg_partitions():
    state = _state()
    legs = (
        Leg(CALL, BUY, 95.0),
        Leg(CALL, SELL, 100.0, quantity=2),
        Leg(CALL, BUY, 105.0),
    )
    whole = aggregate(legs, state)
    parts = aggregate(legs[:1], state) + aggregate(legs[1:], state)

    for field in ("net_premium", "net_delta", "net_gamma", "net_theta", "net_vega"):
        assert getattr(whole, field) == pytest.approx(getattr(parts, field), abs=1e-12)


def test_aggregate_of_no_legs_is_zero():
    assert aggregate([], _state()) == PortfolioAggregate.empty()


def test_aggregate_signs_and_scales_by_quantity():
    state = _state()
    long_one = aggregate([Leg(PUT, BUY, 95.0)], state)
    short_two = aggregate([Leg(PUT, SELL, 95.0, quantity=2)], state)

    assert short_two.net_premium == pytest.approx(-2 * long_one.net_premium)
    assert short_two.net_delta == pytest.approx(-2 * long_one.net_delta)
    assert short_two.net_vega == pytest.approx(-2 * long_one.net_vega)
    assert not short_two.is_debit


def test_aggregate_uses_injected_pricer():
    pricer = _ConstantPricer()
    assert isinstance(pricer, GreeksModel)
    legs = (Leg(CALL, BUY, 100.0, quantity=3), Leg(PUT, SELL, 90.0))

    net = aggregate(legs, _state(), pricer=pricer)

    assert net.net_premium == pytest.approx(-4.0)
    assert net.net_delta == pytest.approx(2.0)


# --- payoff ----------------------------------------------------------------


def test_bull_call_spread_payoff_extremes_and_breakeven():
    state = _state()
    legs = _bull_call_spread()
    debit = -aggregate(legs, state).net_premium
    assert debit > 0

    profile = payoff_curve(legs, state, 201)

    assert profile.max_loss == pytest.approx(-debit * 100)
    assert profile.max_profit == pytest.approx((5.0 - debit) * 100)
    assert len(profile.breakevens) == 1
    assert 100.0 < profile.breakevens[0] < 105.0
    assert profile.breakevens[0] == pytest.approx(100.0 + debit, abs=0.45)
    assert not profile.profit_unbounded
    assert not profile.loss_unbounded


def test_payoff_grid_window_and_sample_count():
    profile = payoff_curve(_bull_call_spread(), _state(spot=200.0), 101)

    assert len(profile.points) == 101
    assert profile.prices[0] == pytest.approx(110.0)
    assert profile.prices[-1] == pytest.approx(290.0)
    assert np.all(np.diff(profile.prices) > 0)


def test_long_straddle_payoff_is_symmetric_with_two_breakevens():
    profile = payoff_curve(_straddle(), _state(), 101)
    pnls = profile.pnls

    np.testing.assert_allclose(pnls, pnls[::-1], atol=1e-8)
    assert len(profile.breakevens) == 2
    low, high = profile.breakevens
    assert low < 100.0 < high
    assert (100.0 - low) == pytest.approx(high - 100.0, abs=1e-8)
    assert profile.profit_unbounded
    assert not profile.loss_unbounded


def test_butterfly_has_two_breakevens_and_peaks_at_body():
    legs = (
        Leg(CALL, BUY, 95.0),
        Leg(CALL, SELL, 100.0, quantity=2),
        Leg(CALL, BUY, 105.0),
    )
    profile = payoff_curve(legs, _state(), 201)

    assert len(profile.breakevens) == 2
    assert 95.0 < profile.breakevens[0] < 100.0 < profile.breakevens[1] < 105.0
    peak = profile.prices[int(np.argmax(profile.pnls))]
    assert peak == pytest.approx(100.0)
    assert net_call_slope(legs) == 0


def test_short_call_flags_unbounded_loss():
    profile = payoff_curve([Leg(CALL, SELL, 100.0)], _state())
    assert profile.loss_unbounded
    assert not profile.profit_unbounded
    assert profile.max_loss < 0


def test_stock_lots_cover_short_call_in_unbounded_flags():
    covered = payoff_curve([Leg(CALL, SELL, 105.0)], _state(), stock_lots=1)
    naked = payoff_curve([Leg(CALL, SELL, 105.0)], _state())

    assert naked.loss_unbounded
    assert not covered.loss_unbounded
    assert not covered.profit_unbounded
    assert covered.pnls == naked.pnls
    assert net_call_slope([Leg(PUT, BUY, 95.0)], stock_lots=1) == 1


def test_long_put_has_bounded_profit_flags():
    profile = payoff_curve([Leg(PUT, BUY, 100.0)], _state())
    assert not profile.profit_unbounded
    assert not profile.loss_unbounded


def test_find_breakevens_counts_zero_as_non_negative():
    prices = [1.0, 2.0, 3.0, 4.0, 5.0]
    assert find_breakevens(prices, [-1.0, 0.0, 1.0, -1.0, 0.0]) == (1.5, 3.5, 4.5)
    assert find_breakevens(prices[:2], [0.0, 0.0]) == ()
    assert find_breakevens(prices[:2], [0.0, -1.0]) == (1.5,)


def test_payoff_rejects_empty_legs_and_tiny_grids():
    with pytest.raises(InvalidInputError):
        payoff_curve([], _state())
    with pytest.raises(InvalidInputError):
        sample_price_grid(100.0, 1)


# --- stress ----------------------------------------------------------------


def test_stress_returns_one_row_per_move_in_order():
    rows = stress(_bull_call_spread(), _state())
    assert [row.pct_move for row in rows] == [-20.0, -10.0, -5.0, 0.0, 5.0, 10.0, 20.0]


def test_stress_zero_move_without_time_step_is_flat():
    rows = stress(_straddle(), _state(), pct_moves=(0.0,), time_step_days=0)
    assert rows[0].base_pnl == pytest.approx(0.0, abs=1e-12)


def test_stress_full_revaluation_matches_black_scholes():
    state = _state()
    leg = Leg(CALL, BUY, 100.0)
    entry = bs_price(100.0, 100.0, 30 / 365.0, 0.05, 0.25, "call")
    shocked_t = 23 / 365.0

    (row,) = stress([leg], state, pct_moves=(10.0,))

    base = bs_price(110.0, 100.0, shocked_t, 0.05, 0.25, "call")
    vol_up = bs_price(110.0, 100.0, shocked_t, 0.05, 0.30, "call")
    vol_down = bs_price(110.0, 100.0, shocked_t, 0.05, 0.20, "call")
    assert row.base_pnl == pytest.approx((base - entry) * 100)
    assert row.vol_up_pnl == pytest.approx((vol_up - entry) * 100)
    assert row.vol_down_pnl == pytest.approx((vol_down - entry) * 100)


def test_stress_long_vega_orders_vol_scenarios():
    for row in stress([Leg(CALL, BUY, 100.0)], _state(), pct_moves=(-5.0, 0.0, 5.0)):
        assert row.vol_up_pnl > row.base_pnl > row.vol_down_pnl


def test_stress_scales_linearly_with_contracts():
    legs = _bull_call_spread()
    one = stress(legs, _state())
    three = stress(legs, _state(), contracts=3)
    for a, b in zip(one, three):
        assert b.base_pnl == pytest.approx(3 * a.base_pnl)
        assert b.vol_down_pnl == pytest.approx(3 * a.vol_down_pnl)


def test_stress_time_step_floors_at_expiry_epsilon():
    state = _state(days_to_expiry=3)
    grid = StressGrid(pct_moves=(10.0,), time_step_days=7)
    assert grid.shocked_time(state) == EXPIRY_EPSILON_YEARS

    leg = Leg(CALL, BUY, 100.0)
    entry = BlackScholesPricer().price(leg, state)
    (row,) = grid.run([leg], state)
    assert row.base_pnl == pytest.approx((10.0 - entry) * 100)
    assert row.vol_up_pnl == pytest.approx(row.base_pnl)


def test_stress_with_injected_pricer():
    (down, flat, up) = stress(
        _straddle(SELL), _state(), pct_moves=(-10.0, 0.0, 10.0), pricer=_IntrinsicPricer()
    )
    assert flat.base_pnl == pytest.approx(0.0)
    assert down.base_pnl == pytest.approx(-1000.0)
    assert up.worst_pnl == pytest.approx(-1000.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"pct_moves": ()},
        {"pct_moves": (-100.0,)},
        {"time_step_days": -1},
        {"vol_down_multiplier": 0.0},
    ],
)
def test_stress_grid_validation(kwargs):
    with pytest.raises(InvalidInputError):
        StressGrid(**kwargs)


def test_stress_rejects_empty_legs_and_bad_contracts():
    with pytest.raises(InvalidInputError):
        stress([], _state())
    with pytest.raises(InvalidInputError):
        stress(_straddle(), _state(), contracts=0)


# --- margin ----------------------------------------------------------------


def _rows(*pairs: tuple[float, float]) -> tuple[ScenarioRow, ...]:
    return tuple(
        ScenarioRow(pct_move=float(i), base_pnl=b, vol_up_pnl=10_000.0, vol_down_pnl=d)
        for i, (b, d) in enumerate(pairs)
    )


def test_margin_is_zero_without_short_legs():
    legs = _straddle()
    assert estimate_margin(legs, stress(legs, _state())) == 0.0
    assert estimate_margin(legs, ()) == 0.0


def test_margin_uses_worst_base_or_vol_down_loss():
    legs = _straddle(SELL)
    rows = _rows((-100.0, -50.0), (20.0, -250.0), (5.0, 5.0))
    assert estimate_margin(legs, rows) == pytest.approx(300.0)
    assert estimate_margin(legs, rows, multiplier=2.0) == pytest.approx(500.0)


def test_margin_ignores_vol_up_column():
    rows = (ScenarioRow(0.0, base_pnl=-10.0, vol_up_pnl=-1_000.0, vol_down_pnl=-5.0),)
    assert estimate_margin(_straddle(SELL), rows) == pytest.approx(12.0)


def test_margin_on_real_short_straddle():
    legs = _straddle(SELL)
    rows = stress(legs, _state())
    worst = min(min(r.base_pnl, r.vol_down_pnl) for r in rows)
    assert worst < 0
    assert estimate_margin(legs, rows) == pytest.approx(1.2 * abs(worst))


def test_margin_monotonic_in_worst_loss():
    legs = _straddle(SELL)
    smaller = estimate_margin(legs, _rows((-100.0, -80.0)))
    larger = estimate_margin(legs, _rows((-200.0, -80.0)))
    assert larger > smaller

    one = estimate_margin(legs, stress(legs, _state()))
    two = estimate_margin(legs, stress(legs, _state(), contracts=2))
    assert two == pytest.approx(2 * one)


def test_margin_requires_scenarios_when_short():
    with pytest.raises(InvalidInputError):
        estimate_margin(_straddle(SELL), ())


def test_stress_margin_proxy_model_matches_functional_api():
    model = StressMarginProxyModel()
    assert isinstance(model, MarginModel)

    legs = _bull_call_spread()
    state = _state()
    expected = estimate_margin(legs, stress(legs, state, contracts=2), multiplier=1.2)
    got = model.initial_margin_requirement(legs=legs, state=state, contracts=2)
    assert got == pytest.approx(expected)
    assert got > 0
    assert model.initial_margin_requirement(legs=_straddle(), state=state) == 0.0


def test_stress_margin_proxy_model_rejects_bad_multiplier():
    with pytest.raises(InvalidInputError):
        StressMarginProxyModel(multiplier=0.0)


def test_time_decay_alone_costs_long_options():
    (row,) = stress(_straddle(), _state(), pct_moves=(0.0,))
    assert row.base_pnl < 0
    assert math.isfinite(row.vol_up_pnl)
