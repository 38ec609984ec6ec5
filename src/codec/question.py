"""Fixed-width (bytes32) market question codec.

Questions are stored on-chain as 32 raw bytes: the UTF-8 text right-padded
with zero bytes. Longer text is cut at byte 32, which can split a multi-byte
character; readers then see an undecodable tail and fall back to a label.
"""

from __future__ import annotations

import logging
import re
from typing import Union

from ..core.types import QUESTION_SIZE
from ..io.metrics import question_fallbacks_total, question_truncations_total

logger = logging.getLogger(__name__)

HINT_LENGTH = 8
LONG_QUESTION_CHARS = 50
MIN_QUESTION_CHARS = 3

_HEX_ONLY = re.compile(r"^[0-9a-f]+$", re.IGNORECASE)

QuestionBytes = Union[bytes, bytearray, str]


class QuestionCodecError(ValueError):
    pass


def encode_question(question: str) -> bytes:
    """Encode ``question`` into exactly 32 bytes, truncating if needed."""
    raw = question.encode("utf-8")
    if len(raw) > QUESTION_SIZE:
        logger.warning(
            "Question truncated from %d to %d bytes: %r",
            len(raw),
            QUESTION_SIZE,
            question,
        )
        question_truncations_total.inc()
        return raw[:QUESTION_SIZE]
    return raw.ljust(QUESTION_SIZE, b"\x00")


def question_to_hex(buf: bytes) -> str:
    return "0x" + bytes(buf).hex()


def question_from_hex(value: str) -> bytes:
    """Parse a ``0x`` hex string into a zero-padded 32 byte buffer."""
    text = value[2:] if value[:2].lower() == "0x" else value
    try:
        raw = bytes.fromhex(text)
    except ValueError as exc:
        raise QuestionCodecError(f"invalid hex question: {value!r}") from exc
    if len(raw) > QUESTION_SIZE:
        raise QuestionCodecError(
            f"question is {len(raw)} bytes, expected at most {QUESTION_SIZE}"
        )
    return raw.ljust(QUESTION_SIZE, b"\x00")


def fallback_label(hint: str, length: int = HINT_LENGTH) -> str:
    return f"Market Question ({hint[:length]}...)"


def _looks_corrupted(text: str) -> bool:
    return (
        len(text) < MIN_QUESTION_CHARS
        or "\ufffd" in text
        or _HEX_ONLY.match(text) is not None
    )


def decode_question(
    buf: QuestionBytes,
    fallback_hint: str,
    hint_length: int = HINT_LENGTH,
    long_question_chars: int = LONG_QUESTION_CHARS,
) -> str:
    """Decode a stored question; never raises.

    Returns ``"Market Question (<hint>...)"`` when the bytes don't decode to
    plausible text: invalid UTF-8, fewer than 3 characters, or only hex
    digits (a hash stored instead of text).
    """
    try:
        raw = question_from_hex(buf) if isinstance(buf, str) else bytes(buf)
        text = raw.rstrip(b"\x00").decode("utf-8")
    except (QuestionCodecError, UnicodeDecodeError) as exc:
        logger.info("Question for %s undecodable (%s); using fallback", fallback_hint, exc)
        question_fallbacks_total.inc()
        return fallback_label(fallback_hint, hint_length)

    text = text.replace("\x00", "").strip()
    if _looks_corrupted(text):
        logger.info("Question for %s looks corrupted: %r; using fallback", fallback_hint, text)
        question_fallbacks_total.inc()
        return fallback_label(fallback_hint, hint_length)
    if len(text) > long_question_chars:
        logger.warning("Question for %s may have been truncated: %r", fallback_hint, text)
    return text
