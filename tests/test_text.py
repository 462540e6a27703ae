import pytest
from hypothesis import given, strategies as st

from ff4data import text
from ff4data.errors import UnknownByte


@given(st.integers(min_value=0x42, max_value=0x5B))
def test_upper_case_range(byte: int) -> None:
    assert text.decode([byte]) == chr(ord("A") + byte - 0x42)


@given(st.integers(min_value=0x5C, max_value=0x75))
def test_lower_case_range(byte: int) -> None:
    assert text.decode([byte]) == chr(ord("a") + byte - 0x5C)


@given(st.integers(min_value=0x80, max_value=0x89))
def test_digit_range(byte: int) -> None:
    assert text.decode([byte]) == str(byte - 0x80)


def test_decode_name() -> None:
    assert text.decode([0x4F, 0x5C, 0x62, 0x5C, 0xFF, 0xFF, 0xFF, 0xFF]) == "Naga    "


def test_decode_dictionary_codes() -> None:
    assert text.decode([0x8B]) == "th"
    assert text.decode([0x25]) == "<mute>"
    assert text.decode([0xC3]) == "…"
    assert text.decode([0xCE]) == "  "
    assert text.decode([0x4E, 0x5C, 0xE4]) == "Ma's"


def test_unknown_byte_aborts_decode() -> None:
    with pytest.raises(UnknownByte) as excinfo:
        text.decode([0x42, 0x00, 0x43], region="monster_names", base=0x71800)
    assert excinfo.value.byte == 0x00
    assert excinfo.value.offset == 0x71801
    assert excinfo.value.region == "monster_names"


def test_codes_without_mapping() -> None:
    for byte in (0x00, 0x41, 0x79, 0x7F, 0x8F):
        assert text.decode_byte(byte) is None
        with pytest.raises(UnknownByte):
            text.decode([byte])


@given(st.lists(st.integers(min_value=0, max_value=0xFF), max_size=16))
def test_decode_is_concatenation_of_bytes(data) -> None:
    parts = [text.decode_byte(b) for b in data]
    if None in parts:
        with pytest.raises(UnknownByte):
            text.decode(data)
    else:
        assert text.decode(data) == "".join(parts)


def test_dictionary_is_read_only() -> None:
    with pytest.raises(TypeError):
        text.SPECIAL_CHARS[0x00] = "x"  # type: ignore[index]
