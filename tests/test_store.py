from decimal import Decimal

import pytest

from src.codec.question import encode_question, fallback_label
from src.core.clock import MarketClock
from src.core.types import MarketState, RawMarket
from src.core.utils import to_base_units
from src.state.store import Store
from src.state.views import build_market_view
from src.venue.base import MalformedMarket
from src.venue.mock import MockVenue

ADDR = "0xabcdef0123456789abcdef0123456789abcdef01"


def _raw(question=b"", yes=100, no=300, state=MarketState.ACTIVE):
    return RawMarket(
        question=question or encode_question("Will it snow?"),
        resolve_timestamp=1_900_000_000,
        state=state,
        resolution_outcome=False,
        yes_pool=to_base_units(yes),
        no_pool=to_base_units(no),
        fee_bps=250,
        fee_recipient="0xfee",
        settlement_token="0xtoken",
    )


def test_view_converts_units_and_prices():
    view = build_market_view(ADDR, _raw())
    assert view.question == "Will it snow?"
    assert view.yes_pool == Decimal(100)
    assert view.total_volume == Decimal(400)
    assert view.prices.yes_price == 0.75
    assert view.fee_percent == 2.5
    assert not view.resolved


def test_view_resolved_and_fallback_question():
    view = build_market_view(ADDR, _raw(question=b"\x00" * 32, state=MarketState.RESOLVED))
    assert view.resolved
    assert view.question == fallback_label(ADDR) == "Market Question (0xabcdef...)"


def test_refresh_keeps_previous_view_on_failure():
    venue = MockVenue()
    venue.add_market(ADDR, _raw())
    store = Store(venue)
    first = store.refresh_market(ADDR)
    assert first is not None

    venue.fail_reads = True
    again = store.refresh_market(ADDR)
    assert again is first
    assert store.markets[ADDR] is first
    assert store.refresh_all() == [first]


def test_refresh_unknown_market_returns_none():
    store = Store(MockVenue())
    assert store.refresh_market("0xmissing") is None
    assert store.markets == {}


def test_refresh_all_lists_every_market():
    venue = MockVenue()
    venue.add_market(ADDR, _raw())
    venue.add_market("0x2", _raw(yes=50, no=50))
    views = Store(venue).refresh_all()
    assert [v.address for v in views] == [ADDR, "0x2"]
    assert views[1].prices.yes_price == 0.5


def test_unknown_state_drops_only_that_market():
    venue = MockVenue()
    venue.add_market(ADDR, _raw())
    bad = _raw()
    bad.state = 3
    venue.add_market("0xbad", bad)
    venue.add_market("0x2", _raw(yes=50, no=50))
    views = Store(venue).refresh_all()
    assert [v.address for v in views] == [ADDR, "0x2"]


def test_unknown_state_raises_malformed_market():
    bad = _raw()
    bad.state = 7
    with pytest.raises(MalformedMarket):
        build_market_view(ADDR, bad)


def test_status_and_time_remaining():
    due = 1_900_000_000
    before = MarketClock(fixed=due - 3 * 86400 - 4 * 3600)
    after = MarketClock(fixed=due)

    active = build_market_view(ADDR, _raw())
    assert active.status(before) == "Active"
    assert active.time_remaining(before) == "3d 4h"
    assert active.status(after) == "Pending Resolution"
    assert active.time_remaining(after) == "Expired"

    yes = build_market_view(ADDR, _raw(state=MarketState.RESOLVED))
    yes.outcome = True
    assert yes.status(before) == "YES"
    no = build_market_view(ADDR, _raw(state=MarketState.RESOLVED))
    assert no.status(after) == "NO"

    cancelled = build_market_view(ADDR, _raw(state=MarketState.CANCELLED))
    assert cancelled.status(before) == "Cancelled"
