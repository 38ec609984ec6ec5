"""Application configuration from the environment (.env supported)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv  # type: ignore


@dataclass(frozen=True)
class AppConfig:
    token_symbol: str = "PMT"
    token_name: str = "Prediction Market Token"
    chain_id: int = 11155111  # Sepolia
    default_fee_bps: int = 100
    default_resolve_days: int = 7
    hint_length: int = 8
    long_question_chars: int = 50
    log_level: str = "INFO"


def load_config() -> AppConfig:
    load_dotenv()
    return AppConfig(
        token_symbol=os.getenv("PM_TOKEN_SYMBOL", "PMT"),
        token_name=os.getenv("PM_TOKEN_NAME", "Prediction Market Token"),
        chain_id=int(os.getenv("PM_CHAIN_ID", "11155111")),
        default_fee_bps=int(os.getenv("PM_DEFAULT_FEE_BPS", "100")),
        default_resolve_days=int(os.getenv("PM_DEFAULT_RESOLVE_DAYS", "7")),
        hint_length=int(os.getenv("PM_HINT_LENGTH", "8")),
        long_question_chars=int(os.getenv("PM_LONG_QUESTION_CHARS", "50")),
        log_level=os.getenv("PM_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
