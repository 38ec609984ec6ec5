"""Pricing model abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class PricingModel(ABC):
    @abstractmethod
    def prices(self, reserves: Sequence[float]) -> Sequence[float]:
        """Implied price of each outcome from its pool reserve.

        ``reserves`` is ordered like the market's outcomes (``[yes_pool, no_pool]``
        for a binary market), in human units rather than base units. The result
        has the same order and sums to 1 unless every reserve is empty.
        """
        ...
