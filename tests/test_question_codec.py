import logging

import pytest

from src.codec.question import (
    QuestionCodecError,
    decode_question,
    encode_question,
    fallback_label,
    question_from_hex,
    question_to_hex,
)

HINT = "0x1234567890abcdef"


def test_encode_pads_to_32_bytes():
    buf = encode_question("Will it rain?")
    assert len(buf) == 32
    assert buf.startswith(b"Will it rain?")
    assert buf[13:] == b"\x00" * 19


def test_round_trip_short_question():
    for q in ["Will it rain?", "BTC > 100k", "Élection 2028 ?", "xyz"]:
        assert decode_question(encode_question(q), HINT) == q


def test_encode_truncates_long_question(caplog):
    q = "Will the total rainfall exceed 40mm?"  # 36 bytes
    q = q + "!!!!"
    raw = q.encode("utf-8")
    assert len(raw) == 40
    with caplog.at_level(logging.WARNING):
        buf = encode_question(q)
    assert buf == raw[:32]
    assert "truncated" in caplog.text


def test_truncation_splitting_a_character_decodes_to_fallback():
    q = "a" + "é" * 16  # 33 bytes, the cut lands inside the last é
    buf = encode_question(q)
    assert len(buf) == 32
    assert buf[-1:] == "é".encode("utf-8")[:1]
    assert decode_question(buf, HINT) == fallback_label(HINT)


def test_hex_looking_text_falls_back():
    label = decode_question(encode_question("deadbeef"), HINT)
    assert label == "Market Question (0x123456...)"
    assert decode_question(encode_question("DEADBEEF01"), HINT) == label


def test_all_zero_buffer_falls_back():
    assert decode_question(b"\x00" * 32, HINT) == fallback_label(HINT)


def test_too_short_falls_back():
    assert decode_question(encode_question("ok"), HINT) == fallback_label(HINT)
    assert decode_question(encode_question("   ok   "), HINT) == fallback_label(HINT)


def test_whitespace_and_nuls_are_stripped():
    buf = b"  Rain\x00 today?  ".ljust(32, b"\x00")
    assert decode_question(buf, HINT) == "Rain today?"


def test_replacement_character_falls_back():
    assert decode_question(encode_question("bad \ufffd text"), HINT) == fallback_label(HINT)


def test_decode_accepts_hex_string():
    buf = encode_question("Will it rain?")
    assert decode_question(question_to_hex(buf), HINT) == "Will it rain?"
    assert decode_question("0xzz", HINT) == fallback_label(HINT)


def test_long_question_is_returned_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        text = decode_question(
            encode_question("Will it rain on Friday?"), HINT, long_question_chars=10
        )
    assert text == "Will it rain on Friday?"
    assert "truncated" in caplog.text


def test_question_from_hex_pads_and_validates():
    assert question_from_hex("0x6869") == b"hi".ljust(32, b"\x00")
    with pytest.raises(QuestionCodecError):
        question_from_hex("0x" + "00" * 33)
    with pytest.raises(ValueError):
        question_from_hex("nothex")
