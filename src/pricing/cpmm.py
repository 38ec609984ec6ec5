"""CPMM (constant product) pricing and trade quoting for binary pools.

Not a full AMM; the contract owns the reserves and executes trades. These
helpers mirror the on-chain formulas so a client can preview prices and
share amounts before submitting a transaction.

Price convention: an outcome is priced by the *opposite* pool,

    p_yes = no_pool / (yes_pool + no_pool)
    p_no  = yes_pool / (yes_pool + no_pool)

Quote convention: ``quote_trade`` assumes both pools equal the traded pool at
quote time (k = pool ** 2). Once the pools diverge the estimate drifts from
what the contract will actually pay out; the contract's execution is the
authoritative result.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import List, Sequence, Union

from .base import PricingModel
from ..core.types import PoolReserves, PricePair, Side, TradeQuote
from ..io.metrics import inc_quotes

logger = logging.getLogger(__name__)

Amount = Union[int, float, str, Decimal]

SHARE_DECIMALS = 6


def coerce_amount(value: Amount) -> float:
    """Turn form/contract input into a float; unparseable input becomes 0.0."""
    try:
        out = float(value)
    except (TypeError, ValueError):
        logger.warning("Unparseable amount %r treated as 0", value)
        return 0.0
    if math.isnan(out) or math.isinf(out):
        logger.warning("Non-finite amount %r treated as 0", value)
        return 0.0
    return out


def price(yes_reserve: Amount, no_reserve: Amount) -> PricePair:
    """Implied YES/NO prices from pool reserves; (0.5, 0.5) for an empty pool."""
    yes = coerce_amount(yes_reserve)
    no = coerce_amount(no_reserve)
    total = yes + no
    if total == 0:
        return PricePair(0.5, 0.5)
    return PricePair(yes_price=no / total, no_price=yes / total)


def quote_trade(pool_reserve: Amount, trade_amount: Amount) -> float:
    """Shares a trade of ``trade_amount`` would receive against ``pool_reserve``.

    new_pool = pool + trade
    other_pool = pool * pool / new_pool
    shares = |other_pool - pool|, rounded to 6 decimals.

    Degenerate input (empty pool, non-positive amount) quotes 0.
    """
    pool = coerce_amount(pool_reserve)
    trade = coerce_amount(trade_amount)
    if pool <= 0 or trade <= 0:
        return 0.0
    new_pool = pool + trade
    other_pool = (pool * pool) / new_pool
    shares = abs(other_pool - pool)
    inc_quotes()
    return round(shares, SHARE_DECIMALS)


def format_shares(shares: float) -> str:
    return f"{shares:.{SHARE_DECIMALS}f}"


class CPMM(PricingModel):
    """Binary constant-product model: reserves are ``[yes_pool, no_pool]``."""

    def prices(self, reserves: Sequence[Amount]) -> List[float]:
        if len(reserves) != 2:
            raise ValueError("CPMM prices a binary pool: expected [yes, no] reserves")
        pair = price(reserves[0], reserves[1])
        return [pair.yes_price, pair.no_price]

    def price_binary(self, yes_reserve: Amount, no_reserve: Amount) -> float:
        return price(yes_reserve, no_reserve).yes_price

    def quote(self, side: Side, reserves: PoolReserves, amount: Amount) -> TradeQuote:
        # buying YES quotes against the YES pool, NO against the NO pool
        shares = quote_trade(reserves.for_side(side), amount)
        return TradeQuote(side=side, amount=coerce_amount(amount), shares=shares)
