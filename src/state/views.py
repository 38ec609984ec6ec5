"""Display views of on-chain markets (human units, decoded question)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..codec.question import HINT_LENGTH, LONG_QUESTION_CHARS, decode_question
from ..core.clock import MarketClock, format_time_remaining
from ..core.types import MarketState, PoolReserves, PricePair, RawMarket
from ..core.utils import fee_percent, from_base_units
from ..pricing.cpmm import price
from ..venue.base import MalformedMarket


@dataclass
class MarketView:
    address: str
    question: str
    resolve_timestamp: int
    state: MarketState
    outcome: bool
    yes_pool: Decimal
    no_pool: Decimal
    fee_bps: int
    fee_recipient: str
    settlement_token: str
    total_yes_positions: Decimal = Decimal(0)
    total_no_positions: Decimal = Decimal(0)

    @property
    def resolved(self) -> bool:
        return self.state == MarketState.RESOLVED

    @property
    def total_volume(self) -> Decimal:
        return self.yes_pool + self.no_pool

    @property
    def reserves(self) -> PoolReserves:
        return PoolReserves(float(self.yes_pool), float(self.no_pool))

    @property
    def prices(self) -> PricePair:
        return price(self.yes_pool, self.no_pool)

    @property
    def fee_percent(self) -> float:
        return fee_percent(self.fee_bps)

    def status(self, clock: Optional[MarketClock] = None) -> str:
        """Resolved outcome, then Cancelled, Pending Resolution once past due, else Active."""
        if self.resolved:
            return "YES" if self.outcome else "NO"
        if self.state == MarketState.CANCELLED:
            return "Cancelled"
        clock = clock or MarketClock()
        if self.resolve_timestamp <= clock.now():
            return "Pending Resolution"
        return "Active"

    def time_remaining(self, clock: Optional[MarketClock] = None) -> str:
        clock = clock or MarketClock()
        return format_time_remaining(clock.seconds_until(self.resolve_timestamp))


def build_market_view(
    address: str,
    raw: RawMarket,
    hint_length: int = HINT_LENGTH,
    long_question_chars: int = LONG_QUESTION_CHARS,
) -> MarketView:
    question = decode_question(
        raw.question,
        address,
        hint_length=hint_length,
        long_question_chars=long_question_chars,
    )
    try:
        state = MarketState(raw.state)
    except ValueError:
        raise MalformedMarket(f"{address} has unknown state {raw.state!r}") from None
    return MarketView(
        address=address,
        question=question,
        resolve_timestamp=int(raw.resolve_timestamp),
        state=state,
        outcome=bool(raw.resolution_outcome),
        yes_pool=from_base_units(raw.yes_pool),
        no_pool=from_base_units(raw.no_pool),
        fee_bps=int(raw.fee_bps),
        fee_recipient=raw.fee_recipient,
        settlement_token=raw.settlement_token,
        total_yes_positions=from_base_units(raw.total_yes_positions),
        total_no_positions=from_base_units(raw.total_no_positions),
    )
