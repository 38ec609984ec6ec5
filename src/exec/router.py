"""Trade and approval submission.

Submission and the follow-up state refresh are separate steps: once the
transaction is mined the result is a success, whatever happens while
re-reading market state afterwards.
"""

from __future__ import annotations

import logging

from ..core.types import MAX_UINT256, Side, TradeResult
from ..core.utils import Number, from_base_units, to_base_units, to_decimal
from ..io.metrics import inc_trades, refresh_failures_total
from ..state.store import Store
from ..venue.base import InsufficientAllowance, MarketVenue, VenueError

logger = logging.getLogger(__name__)


def submit_trade(
    venue: MarketVenue,
    store: Store,
    address: str,
    side: Side,
    amount: Number,
    account: str,
) -> TradeResult:
    """Buy ``amount`` (human units) of ``side`` in market ``address``.

    Raises ``ValueError`` for a non-positive amount, ``InsufficientAllowance``
    when the market can't pull the funds, and whatever the venue raises on
    submission. Refresh failures are reported on the result instead.
    """
    value = to_decimal(amount)
    if value <= 0:
        raise ValueError("trade amount must be positive")
    base_amount = to_base_units(value)

    allowed = venue.allowance(account, address)
    if allowed < base_amount:
        raise InsufficientAllowance(
            f"allowance {from_base_units(allowed)} < required {value}"
        )

    buy = venue.buy_yes if side == Side.YES else venue.buy_no
    tx_hash = buy(address, base_amount, account)
    venue.wait_for_receipt(tx_hash)
    inc_trades(side.value)
    logger.info("%s trade of %s in %s mined: %s", side.value, value, address, tx_hash)

    result = TradeResult(success=True, tx_hash=tx_hash, side=side, amount=value)
    try:
        store.refresh_position(account, address)
        result.refreshed = True
    except VenueError as exc:
        logger.warning("Trade %s succeeded but refresh failed: %s", tx_hash, exc)
        refresh_failures_total.inc()
        result.refresh_error = str(exc)
    return result


def submit_approval(
    venue: MarketVenue,
    store: Store,
    spender: str,
    account: str,
    amount: int = MAX_UINT256,
) -> TradeResult:
    """Approve ``spender`` for ``amount`` base units (unlimited by default)."""
    tx_hash = venue.approve(spender, amount, account)
    venue.wait_for_receipt(tx_hash)
    logger.info("Approval of %s for %s mined: %s", spender, account, tx_hash)

    result = TradeResult(success=True, tx_hash=tx_hash)
    try:
        store.fetch_allowance(account, spender)
        result.refreshed = True
    except VenueError as exc:
        logger.warning("Approval %s succeeded but refresh failed: %s", tx_hash, exc)
        refresh_failures_total.inc()
        result.refresh_error = str(exc)
    return result
