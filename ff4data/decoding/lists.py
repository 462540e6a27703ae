"""List combinators shared by the AI tables and the action streams.

Condition sets, attack groups and scripts all share one shape: a bounded
number of rows, each a run of items closed by a sentinel byte.  Conditions are
the degenerate case of fixed-size rows with no sentinel.
"""

from __future__ import annotations

from typing import Callable, List, Tuple, TypeVar

from ..constants import SENTINEL
from ..errors import IncompleteRegion
from .reader import StreamCtx

T = TypeVar("T")


def decode_terminated(
    ctx: StreamCtx, decode_item: Callable[[StreamCtx], T], sentinel: int = SENTINEL
) -> Tuple[T, ...]:
    """Decode items until `sentinel`; the sentinel is consumed, not returned."""

    start = ctx.offset
    items: List[T] = []
    while True:
        if ctx.at_end():
            raise IncompleteRegion(
                f"List starting at {start:#07x} has no {sentinel:#04x} terminator",
                region=ctx.region,
                offset=ctx.offset,
            )
        if ctx.peek_u8() == sentinel:
            ctx.read_u8()
            return tuple(items)
        items.append(decode_item(ctx))


def decode_bounded(
    ctx: StreamCtx,
    decode_row: Callable[[StreamCtx], T],
    max_count: int,
    exhaust: bool,
) -> Tuple[T, ...]:
    """Decode up to `max_count` rows, stopping early when input runs out.

    With `exhaust`, bytes left over after the last row are an error.
    """

    rows: List[T] = []
    while len(rows) < max_count and not ctx.at_end():
        rows.append(decode_row(ctx))
    if exhaust and not ctx.at_end():
        raise IncompleteRegion(
            f"{ctx.remaining()} bytes left after {len(rows)} rows "
            f"({ctx.bytes_consumed()} bytes used)",
            region=ctx.region,
            offset=ctx.offset,
        )
    return tuple(rows)


def decode_sentinel_lists(
    ctx: StreamCtx,
    decode_item: Callable[[StreamCtx], T],
    max_count: int,
    exhaust: bool,
    sentinel: int = SENTINEL,
) -> Tuple[Tuple[T, ...], ...]:
    return decode_bounded(
        ctx,
        lambda c: decode_terminated(c, decode_item, sentinel),
        max_count=max_count,
        exhaust=exhaust,
    )


def decode_fixed_rows(
    ctx: StreamCtx, decode_row: Callable[[StreamCtx], T], min_count: int = 1
) -> Tuple[T, ...]:
    rows: List[T] = []
    while not ctx.at_end():
        rows.append(decode_row(ctx))
    if len(rows) < min_count:
        raise IncompleteRegion(
            f"Expected at least {min_count} rows, decoded {len(rows)}",
            region=ctx.region,
            offset=ctx.offset,
        )
    return tuple(rows)
