from datetime import date

import numpy as np
import pytest

from options_lab.options import InvalidInputError, MarketState, aggregate
from options_lab.positions import PnlJitter, PositionBook, expiry_urgency, open_position
from options_lab.strategies import get_strategy, resolve_legs

ENTRY = date(2026, 1, 5)


def _clock() -> date:
    return ENTRY


def _open(name: str, *, dte: int = 30, contracts: int = 1, **kwargs):
    state = MarketState(spot=100.0, volatility=0.25, rate=0.05, days_to_expiry=dte)
    legs = resolve_legs(get_strategy(name), state)
    return open_position(name, legs, state, contracts=contracts, clock=_clock, **kwargs)


def test_open_position_freezes_entry_economics():
    position = _open("Bull Call Spread", contracts=2)

    assert position.entry_date == ENTRY
    assert position.expiry_date == date(2026, 2, 4)
    assert position.days_left(date(2026, 1, 25)) == 10
    assert position.aggregate == aggregate(position.legs, position.state)
    assert position.net_cost == pytest.approx(position.aggregate.net_premium * 200)
    assert position.net_cost < 0
    assert [leg.strike for leg in position.legs] == [100.0, 105.0]


def test_limit_orders_require_a_price():
    with pytest.raises(InvalidInputError):
        _open("Straddle", order_type="limit")
    position = _open("Straddle", order_type="limit", limit_price=6.5)
    assert position.limit_price == 6.5


def test_open_position_rejects_non_positive_contracts():
    with pytest.raises(InvalidInputError):
        _open("Straddle", contracts=0)


def test_book_add_returns_new_book():
    empty = PositionBook()
    book = empty.add(_open("Straddle"))
    assert len(empty) == 0
    assert len(book) == 1


def test_book_greeks_scale_by_contracts():
    a = _open("Straddle", contracts=2)
    b = _open("Bear Call Spread", contracts=3)
    book = PositionBook().add(a).add(b)

    greeks = book.book_greeks()
    expected_delta = 2 * a.aggregate.net_delta + 3 * b.aggregate.net_delta
    expected_vega = 2 * a.aggregate.net_vega + 3 * b.aggregate.net_vega
    assert greeks.delta == pytest.approx(expected_delta)
    assert greeks.vega == pytest.approx(expected_vega)
    assert book.total_net_cost() == pytest.approx(a.net_cost + b.net_cost)


def test_book_groups_by_expiry_nearest_first():
    far = _open("Straddle", dte=45)
    near = _open("Strangle", dte=7)
    also_far = _open("Butterfly", dte=45)
    grouped = PositionBook((far, near, also_far)).by_expiry()

    assert list(grouped) == [date(2026, 1, 12), date(2026, 2, 19)]
    assert grouped[date(2026, 2, 19)] == (far, also_far)


@pytest.mark.parametrize(
    "days, expected",
    [(0, "urgent"), (7, "urgent"), (8, "near"), (21, "near"), (22, "normal")],
)
def test_expiry_urgency(days, expected):
    assert expiry_urgency(days) == expected


def test_jitter_is_reproducible_with_seeded_rng():
    start = PnlJitter().initial(["a", "b", "c"])
    first = PnlJitter(rng=np.random.default_rng(42)).tick(start)
    second = PnlJitter(rng=np.random.default_rng(42)).tick(start)

    assert first == second
    assert list(first) == ["a", "b", "c"]
    assert start == {"a": 0.0, "b": 0.0, "c": 0.0}


def test_jitter_moves_are_bounded_and_rounded():
    jitter = PnlJitter(rng=np.random.default_rng(7), step=5.0)
    pnls = {"x": 100.0}
    for _ in range(50):
        nxt = jitter.tick(pnls)
        assert abs(nxt["x"] - pnls["x"]) <= 5.0 + 0.01
        assert nxt["x"] == round(nxt["x"], 2)
        pnls = nxt


def test_jitter_rejects_non_positive_step():
    with pytest.raises(ValueError):
        PnlJitter(step=0.0)


def test_open_position_logs_only_at_debug(caplog):
    with caplog.at_level("INFO", logger="options_lab.positions.records"):
        _open("Straddle")
    assert caplog.records == []

    with caplog.at_level("DEBUG", logger="options_lab.positions.records"):
        _open("Straddle")
    assert "Opened Straddle" in caplog.text
