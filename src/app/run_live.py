"""Entry point: browse markets, preview a quote and trade (mock venue for now)."""

from __future__ import annotations

from .config import configure_logging, load_config
from .main import DEMO_ACCOUNT, build_mock_environment
from ..core.types import Side
from ..exec.router import submit_approval, submit_trade
from ..pricing.cpmm import CPMM, format_shares


def main():  # pragma: no cover - manual run
    config = load_config()
    configure_logging(config.log_level)
    store, venue, config = build_mock_environment(config)
    model = CPMM()
    symbol = config.token_symbol
    for view in store.refresh_all():
        yes_pct, no_pct = view.prices.as_percent()
        print(f"{view.question} [{view.address[:10]}]")
        print(f"  {view.status()} | resolves in {view.time_remaining()}")
        print(
            f"  volume {view.total_volume:.2f} {symbol} | YES {yes_pct}% NO {no_pct}%"
            f" | fee {view.fee_percent:.2f}%"
        )
        quote = model.quote(Side.YES, view.reserves, 10)
        print(f"  10 {symbol} buys ~{format_shares(quote.shares)} YES shares")

        submit_approval(venue, store, view.address, DEMO_ACCOUNT)
        result = submit_trade(venue, store, view.address, Side.YES, 10, DEMO_ACCOUNT)
        after = store.markets[view.address]
        held = store.shares.get((DEMO_ACCOUNT, view.address))
        print(f"  trade {result.tx_hash[:10]} ok={result.success} refreshed={result.refreshed}")
        print(f"  YES now {after.prices.as_percent()[0]}%")
        if held is not None:
            print(f"  holding {held.yes_shares:.4f} YES")


if __name__ == "__main__":  # pragma: no cover
    main()
