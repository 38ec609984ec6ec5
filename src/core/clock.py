"""Clock used for resolve timestamps; swap in a fixed clock for tests."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional


@dataclass
class MarketClock:
    fixed: Optional[int] = None  # unix seconds; None = wall clock

    def now(self) -> int:
        if self.fixed is not None:
            return self.fixed
        return int(time.time())

    def seconds_until(self, timestamp: int) -> int:
        return max(0, int(timestamp) - self.now())


def format_time_remaining(seconds: int) -> str:
    """``Expired``, ``Xd Yh``, ``Xh Ym`` or ``Xm``."""
    if seconds <= 0:
        return "Expired"
    days, rest = divmod(int(seconds), 86400)
    hours, rest = divmod(rest, 3600)
    minutes = rest // 60
    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
