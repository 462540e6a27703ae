import pytest

from ff4data.decoding.lists import (
    decode_bounded,
    decode_fixed_rows,
    decode_sentinel_lists,
    decode_terminated,
)
from ff4data.decoding.reader import StreamCtx
from ff4data.errors import BufferTooShort, IncompleteRegion


def _ctx(*data: int) -> StreamCtx:
    return StreamCtx(data=bytes(data), region="test")


def test_terminated_consumes_sentinel() -> None:
    ctx = _ctx(0x01, 0x02, 0xFF, 0x03)
    assert decode_terminated(ctx, StreamCtx.read_u8) == (0x01, 0x02)
    assert ctx.bytes_consumed() == 3


def test_terminated_empty_list() -> None:
    assert decode_terminated(_ctx(0xFF), StreamCtx.read_u8) == ()


def test_terminated_missing_sentinel() -> None:
    with pytest.raises(IncompleteRegion):
        decode_terminated(_ctx(0x01, 0x02), StreamCtx.read_u8)


def test_bounded_stops_at_max_count() -> None:
    ctx = _ctx(0xFF, 0x01, 0xFF, 0x02, 0xFF)
    rows = decode_sentinel_lists(ctx, StreamCtx.read_u8, max_count=2, exhaust=False)
    assert rows == ((), (0x01,))
    assert ctx.remaining() == 2


def test_bounded_exhaust_rejects_leftover() -> None:
    ctx = _ctx(0xFF, 0x01, 0xFF, 0x02, 0xFF)
    with pytest.raises(IncompleteRegion) as excinfo:
        decode_sentinel_lists(ctx, StreamCtx.read_u8, max_count=2, exhaust=True)
    assert excinfo.value.offset == 3
    assert "2 bytes left after 2 rows (3 bytes used)" in str(excinfo.value)


def test_bounded_stops_when_input_runs_out() -> None:
    rows = decode_bounded(_ctx(0x01, 0x02), StreamCtx.read_u8, max_count=10, exhaust=True)
    assert rows == (0x01, 0x02)


def test_fixed_rows() -> None:
    rows = decode_fixed_rows(_ctx(1, 2, 3, 4), lambda c: c.read_bytes(2))
    assert rows == (bytes([1, 2]), bytes([3, 4]))


def test_fixed_rows_truncated_tail() -> None:
    with pytest.raises(BufferTooShort):
        decode_fixed_rows(_ctx(1, 2, 3), lambda c: c.read_bytes(2))


def test_fixed_rows_requires_minimum() -> None:
    with pytest.raises(IncompleteRegion):
        decode_fixed_rows(_ctx(), lambda c: c.read_bytes(2))
