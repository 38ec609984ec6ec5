"""App bootstrap for the demo environment."""

from __future__ import annotations

from typing import Optional

from .config import AppConfig, load_config
from ..core.clock import MarketClock
from ..core.utils import to_base_units
from ..exec.create import build_create_market_request
from ..state.store import Store
from ..venue.mock import MockVenue

DEMO_ACCOUNT = "0x" + "a1" * 20


def build_mock_environment(
    config: Optional[AppConfig] = None, clock: Optional[MarketClock] = None
) -> tuple[Store, MockVenue, AppConfig]:
    config = config or load_config()
    venue = MockVenue()
    venue.mint(DEMO_ACCOUNT, to_base_units(1000))
    request = build_create_market_request(
        "Will ETH close above $5k?",
        init_yes_pool=100,
        init_no_pool=100,
        creator=DEMO_ACCOUNT,
        fee_bps=config.default_fee_bps,
        resolve_days=config.default_resolve_days,
        clock=clock,
    )
    venue.create_market(request, DEMO_ACCOUNT)
    store = Store(
        venue,
        hint_length=config.hint_length,
        long_question_chars=config.long_question_chars,
    )
    return store, venue, config
