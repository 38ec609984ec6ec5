"""Metrics instrumentation."""

from __future__ import annotations

from prometheus_client import Counter

quotes_total = Counter("quotes_total", "Trade quotes computed")
question_truncations_total = Counter(
    "question_truncations_total", "Questions truncated to fit 32 bytes on encode"
)
question_fallbacks_total = Counter(
    "question_fallbacks_total", "Decoded questions replaced with a fallback label"
)
trades_total = Counter("trades_total", "Trades submitted", ["side"])
refresh_failures_total = Counter(
    "refresh_failures_total", "Post-transaction state refreshes that failed"
)


def inc_quotes(n: int = 1) -> None:
    quotes_total.inc(n)


def inc_trades(side: str) -> None:
    trades_total.labels(side=side).inc()
