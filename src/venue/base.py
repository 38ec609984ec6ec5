"""Venue abstraction: the read/write surface of the market contracts.

Amounts crossing this boundary are integer base units (18 decimals). Signing,
transport and ABI encoding live behind implementations of this class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Tuple

from ..core.types import CreateMarketRequest, RawMarket


class VenueError(Exception):
    pass


class MarketNotFound(VenueError):
    pass


class MarketNotActive(VenueError):
    pass


class MalformedMarket(VenueError):
    pass


class InsufficientAllowance(VenueError):
    pass


class InsufficientBalance(VenueError):
    pass


class MarketVenue(ABC):
    name: str

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def list_markets(self) -> List[str]: ...

    @abstractmethod
    def get_market(self, address: str) -> RawMarket: ...

    @abstractmethod
    def balance_of(self, account: str) -> int: ...

    @abstractmethod
    def allowance(self, owner: str, spender: str) -> int: ...

    @abstractmethod
    def positions(self, account: str, address: str) -> Tuple[int, int]:
        """Return (yes_shares, no_shares) held by ``account`` in base units."""
        ...

    @abstractmethod
    def buy_yes(self, address: str, amount: int, account: str) -> str: ...

    @abstractmethod
    def buy_no(self, address: str, amount: int, account: str) -> str: ...

    @abstractmethod
    def approve(self, spender: str, amount: int, account: str) -> str: ...

    @abstractmethod
    def create_market(self, request: CreateMarketRequest, account: str) -> str: ...

    def wait_for_receipt(self, tx_hash: str) -> None:
        """Block until ``tx_hash`` is mined; instant venues need not override."""
        return None
