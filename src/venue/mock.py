"""Mock venue for tests and the demo app.

Holds markets, token balances, allowances and positions in memory. Buys move
the paid amount into the traded pool and credit the CPMM quote, which is a
stand-in for the contract's own execution, not a reproduction of it.
"""

from __future__ import annotations

import uuid
from typing import Dict, List, Tuple

from .base import (
    InsufficientAllowance,
    InsufficientBalance,
    MarketNotActive,
    MarketNotFound,
    MarketVenue,
    VenueError,
)
from ..core.types import (
    MAX_UINT256,
    CreateMarketRequest,
    MarketState,
    RawMarket,
    Side,
)
from ..core.utils import from_base_units, to_base_units
from ..pricing.cpmm import quote_trade

SETTLEMENT_TOKEN = "0x" + "5e" * 20


def _new_address() -> str:
    return "0x" + uuid.uuid4().hex + uuid.uuid4().hex[:8]


def _new_tx_hash() -> str:
    return "0x" + uuid.uuid4().hex + uuid.uuid4().hex


class MockVenue(MarketVenue):
    def __init__(self, name: str = "mock", settlement_token: str = SETTLEMENT_TOKEN):
        super().__init__(name)
        self.settlement_token = settlement_token
        self._markets: Dict[str, RawMarket] = {}
        self._balances: Dict[str, int] = {}
        self._allowances: Dict[Tuple[str, str], int] = {}
        self._positions: Dict[Tuple[str, str], List[int]] = {}
        self.fail_reads = False
        self.submitted: List[str] = []

    def add_market(self, address: str, market: RawMarket):
        self._markets[address] = market

    def set_state(self, address: str, state: MarketState, outcome: bool = False):
        market = self._market(address)
        market.state = state
        market.resolution_outcome = outcome

    def mint(self, account: str, amount: int):
        self._balances[account] = self._balances.get(account, 0) + amount

    def _check_reads(self):
        if self.fail_reads:
            raise VenueError("mock read failure")

    def _market(self, address: str) -> RawMarket:
        try:
            return self._markets[address]
        except KeyError:
            raise MarketNotFound(address) from None

    def list_markets(self) -> List[str]:
        self._check_reads()
        return list(self._markets)

    def get_market(self, address: str) -> RawMarket:
        self._check_reads()
        return self._market(address)

    def balance_of(self, account: str) -> int:
        self._check_reads()
        return self._balances.get(account, 0)

    def allowance(self, owner: str, spender: str) -> int:
        self._check_reads()
        return self._allowances.get((owner, spender), 0)

    def positions(self, account: str, address: str) -> Tuple[int, int]:
        self._check_reads()
        yes, no = self._positions.get((address, account), [0, 0])
        return yes, no

    def _buy(self, side: Side, address: str, amount: int, account: str) -> str:
        market = self._market(address)
        if market.state != MarketState.ACTIVE:
            raise MarketNotActive(f"{address} is {market.state.name}")
        allowed = self._allowances.get((account, address), 0)
        if allowed < amount:
            raise InsufficientAllowance(f"allowance {allowed} < {amount}")
        balance = self._balances.get(account, 0)
        if balance < amount:
            raise InsufficientBalance(f"balance {balance} < {amount}")

        pool = market.yes_pool if side == Side.YES else market.no_pool
        shares = to_base_units(
            quote_trade(from_base_units(pool), from_base_units(amount))
        )
        self._balances[account] = balance - amount
        if allowed != MAX_UINT256:
            self._allowances[(account, address)] = allowed - amount
        held = self._positions.setdefault((address, account), [0, 0])
        if side == Side.YES:
            market.yes_pool += amount
            market.total_yes_positions += shares
            held[0] += shares
        else:
            market.no_pool += amount
            market.total_no_positions += shares
            held[1] += shares
        return self._record()

    def _record(self) -> str:
        tx_hash = _new_tx_hash()
        self.submitted.append(tx_hash)
        return tx_hash

    def buy_yes(self, address: str, amount: int, account: str) -> str:
        return self._buy(Side.YES, address, amount, account)

    def buy_no(self, address: str, amount: int, account: str) -> str:
        return self._buy(Side.NO, address, amount, account)

    def approve(self, spender: str, amount: int, account: str) -> str:
        self._allowances[(account, spender)] = amount
        return self._record()

    def create_market(self, request: CreateMarketRequest, account: str) -> str:
        address = _new_address()
        self._markets[address] = RawMarket(
            question=request.question,
            resolve_timestamp=request.resolve_timestamp,
            state=MarketState.ACTIVE,
            resolution_outcome=False,
            yes_pool=request.init_yes_pool,
            no_pool=request.init_no_pool,
            fee_bps=request.fee_bps,
            fee_recipient=request.fee_recipient,
            settlement_token=self.settlement_token,
        )
        return self._record()
