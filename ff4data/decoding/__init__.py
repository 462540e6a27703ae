"""
Byte-stream decoding for the AI regions of the image.

`StreamCtx` walks one region, `lists` holds the bounded / sentinel-terminated
combinators, and `decode_map` dispatches the tagged action instructions.
"""

from .bind import Action, ActionKind, Script  # noqa: F401
from .reader import StreamCtx  # noqa: F401
from . import decode_map  # noqa: F401
from . import lists  # noqa: F401

__all__ = [
    "Action",
    "ActionKind",
    "Script",
    "StreamCtx",
    "decode_map",
    "lists",
]
