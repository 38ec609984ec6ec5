"""Market-creation requests."""

from __future__ import annotations

from typing import Optional

from ..codec.question import encode_question
from ..core.clock import MarketClock
from ..core.types import CreateMarketRequest
from ..core.utils import Number, to_base_units, to_decimal

DEFAULT_FEE_BPS = 100
DEFAULT_RESOLVE_DAYS = 7
MAX_FEE_BPS = 10000


def resolve_timestamp_from_offset(
    days: int = 0, hours: int = 0, minutes: int = 0, clock: Optional[MarketClock] = None
) -> int:
    clock = clock or MarketClock()
    return clock.now() + days * 86400 + hours * 3600 + minutes * 60


def build_create_market_request(
    question: str,
    init_yes_pool: Number,
    init_no_pool: Number,
    creator: str,
    resolve_timestamp: Optional[int] = None,
    fee_bps: int = DEFAULT_FEE_BPS,
    fee_recipient: Optional[str] = None,
    resolve_days: int = DEFAULT_RESOLVE_DAYS,
    clock: Optional[MarketClock] = None,
) -> CreateMarketRequest:
    """Validate form input and build the contract call arguments.

    Without an explicit ``resolve_timestamp`` the market resolves
    ``resolve_days`` from now; the fee recipient defaults to the creator.
    """
    if not question.strip():
        raise ValueError("question is required")
    yes_pool = to_decimal(init_yes_pool)
    no_pool = to_decimal(init_no_pool)
    if yes_pool <= 0 or no_pool <= 0:
        raise ValueError("initial liquidity pools must be positive")
    if not 0 <= int(fee_bps) <= MAX_FEE_BPS:
        raise ValueError(f"fee_bps must be within 0..{MAX_FEE_BPS}, got {fee_bps}")
    if resolve_timestamp is None:
        resolve_timestamp = resolve_timestamp_from_offset(days=resolve_days, clock=clock)

    return CreateMarketRequest(
        question=encode_question(question),
        resolve_timestamp=int(resolve_timestamp),
        init_yes_pool=to_base_units(yes_pool),
        init_no_pool=to_base_units(no_pool),
        fee_bps=int(fee_bps),
        fee_recipient=fee_recipient or creator,
    )
