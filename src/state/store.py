"""Last-known-good cache of market views and user holdings.

A failed fetch never replaces what is already cached; readers keep seeing
the previous snapshot until a fetch succeeds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from .views import MarketView, build_market_view
from ..codec.question import HINT_LENGTH, LONG_QUESTION_CHARS
from ..core.types import UserShares
from ..core.utils import from_base_units
from ..venue.base import MarketVenue, VenueError

logger = logging.getLogger(__name__)


@dataclass
class Store:
    venue: MarketVenue
    hint_length: int = HINT_LENGTH
    long_question_chars: int = LONG_QUESTION_CHARS
    markets: Dict[str, MarketView] = field(default_factory=dict)
    shares: Dict[Tuple[str, str], UserShares] = field(default_factory=dict)
    allowances: Dict[Tuple[str, str], Decimal] = field(default_factory=dict)

    def upsert_market(self, view: MarketView):
        self.markets[view.address] = view

    def fetch_market(self, address: str) -> MarketView:
        """Read and decode one market; raises ``VenueError`` on failure."""
        raw = self.venue.get_market(address)
        return build_market_view(
            address,
            raw,
            hint_length=self.hint_length,
            long_question_chars=self.long_question_chars,
        )

    def refresh_market(self, address: str) -> Optional[MarketView]:
        try:
            view = self.fetch_market(address)
        except VenueError as exc:
            logger.warning("Refresh of market %s failed: %s", address, exc)
            return self.markets.get(address)
        self.upsert_market(view)
        return view

    def refresh_all(self) -> List[MarketView]:
        try:
            addresses = self.venue.list_markets()
        except VenueError as exc:
            logger.warning("Listing markets failed: %s", exc)
            return list(self.markets.values())
        for address in addresses:
            self.refresh_market(address)
        return [self.markets[a] for a in addresses if a in self.markets]

    def read_shares(self, account: str, address: str) -> UserShares:
        yes, no = self.venue.positions(account, address)
        return UserShares(from_base_units(yes), from_base_units(no))

    def read_allowance(self, owner: str, spender: str) -> Decimal:
        return from_base_units(self.venue.allowance(owner, spender))

    def fetch_shares(self, account: str, address: str) -> UserShares:
        held = self.read_shares(account, address)
        self.shares[(account, address)] = held
        return held

    def fetch_allowance(self, owner: str, spender: str) -> Decimal:
        allowed = self.read_allowance(owner, spender)
        self.allowances[(owner, spender)] = allowed
        return allowed

    def refresh_position(self, account: str, address: str) -> MarketView:
        """Re-read market, holdings and allowance; cache all three or none.

        Raises ``VenueError`` if any read fails, leaving the cache untouched.
        """
        view = self.fetch_market(address)
        held = self.read_shares(account, address)
        allowed = self.read_allowance(account, address)
        self.upsert_market(view)
        self.shares[(account, address)] = held
        self.allowances[(account, address)] = allowed
        return view

    def fetch_balance(self, account: str) -> Decimal:
        return from_base_units(self.venue.balance_of(account))
