from src.app.config import AppConfig, load_config
from src.app.main import DEMO_ACCOUNT, build_mock_environment
from src.core.clock import MarketClock


def test_load_config_reads_env(monkeypatch):
    monkeypatch.setenv("PM_TOKEN_SYMBOL", "USDX")
    monkeypatch.setenv("PM_HINT_LENGTH", "6")
    monkeypatch.setenv("PM_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.token_symbol == "USDX"
    assert cfg.hint_length == 6
    assert cfg.log_level == "DEBUG"


def test_defaults():
    cfg = AppConfig()
    assert cfg.token_symbol == "PMT"
    assert cfg.token_name == "Prediction Market Token"
    assert cfg.default_fee_bps == 100


def test_mock_environment_has_demo_market():
    store, venue, cfg = build_mock_environment(AppConfig(), clock=MarketClock(fixed=1000))
    views = store.refresh_all()
    assert len(views) == 1
    view = views[0]
    assert view.question == "Will ETH close above $5k?"
    assert view.resolve_timestamp == 1000 + 7 * 86400
    assert view.fee_recipient == DEMO_ACCOUNT
    assert view.prices.yes_price == 0.5
    assert store.fetch_balance(DEMO_ACCOUNT) == 1000
