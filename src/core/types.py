"""Core type definitions for the prediction market client.

Markets are binary (YES/NO) constant-product pools living on-chain; everything
here is a snapshot or a derived value, never the authoritative state.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Optional


QUESTION_SIZE = 32
TOKEN_DECIMALS = 18
MAX_UINT256 = 2**256 - 1


class Side(str, Enum):
    YES = "YES"
    NO = "NO"


class MarketState(IntEnum):
    ACTIVE = 0
    CANCELLED = 1
    RESOLVED = 2


@dataclass(frozen=True)
class PricePair:
    yes_price: float
    no_price: float

    def as_percent(self) -> tuple[float, float]:
        return round(self.yes_price * 100, 1), round(self.no_price * 100, 1)


@dataclass(frozen=True)
class PoolReserves:
    yes_pool: float
    no_pool: float

    @property
    def total(self) -> float:
        return self.yes_pool + self.no_pool

    def for_side(self, side: Side) -> float:
        return self.yes_pool if side == Side.YES else self.no_pool


@dataclass(frozen=True)
class TradeQuote:
    side: Side
    amount: float
    shares: float


@dataclass
class RawMarket:
    """Values as read from the market contract (base units, raw question bytes)."""

    question: bytes
    resolve_timestamp: int
    state: MarketState
    resolution_outcome: bool
    yes_pool: int
    no_pool: int
    fee_bps: int
    fee_recipient: str
    settlement_token: str
    total_yes_positions: int = 0
    total_no_positions: int = 0


@dataclass
class UserShares:
    yes_shares: Decimal = Decimal(0)
    no_shares: Decimal = Decimal(0)


@dataclass
class CreateMarketRequest:
    question: bytes
    resolve_timestamp: int
    init_yes_pool: int
    init_no_pool: int
    fee_bps: int
    fee_recipient: str


@dataclass
class TradeResult:
    success: bool
    tx_hash: str
    side: Optional[Side] = None
    amount: Decimal = Decimal(0)
    refreshed: bool = False
    refresh_error: Optional[str] = None
