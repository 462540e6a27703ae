"""Decoder for the game's compressed monster-name text.

Letters and digits occupy three contiguous code ranges; everything else is a
lookup in ``SPECIAL_CHARS``, most of which are digraphs chosen to compress
common letter pairs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from .errors import UnknownByte

SPECIAL_CHARS: Mapping[int, str] = MappingProxyType(
    {
        0x1C: "<1c>",
        0x25: "<mute>",
        0x3A: "<whip>",
        0x76: "<flat m>",
        0x77: "<flat h>",
        0x78: "<flat p>",
        0x8A: " t",
        0x8B: "th",
        0x8C: "he",
        0x8D: "t ",
        0x8E: "ou",
        0x90: " a",
        0x91: "s ",
        0x92: "er",
        0x93: "in",
        0x94: "re",
        0x95: "d ",
        0x96: "an",
        0x97: " o",
        0x98: "on",
        0x99: "st",
        0x9A: " w",
        0x9B: "o ",
        0x9C: " m",
        0x9D: "ha",
        0x9E: "to",
        0x9F: "is",
        0xA0: "yo",
        0xA1: " y",
        0xA2: " i",
        0xA3: "al",
        0xA4: "ar",
        0xA5: " h",
        0xA6: "r ",
        0xA7: " s",
        0xA8: "at",
        0xA9: "n ",
        0xAA: " c",
        0xAB: "ng",
        0xAC: "ce",
        0xAD: "ll",
        0xAE: "y ",
        0xAF: "nd",
        0xB0: "en",
        0xB1: "ed",
        0xB2: "hi",
        0xB3: "or",
        0xB4: ", ",
        0xB5: "I ",
        0xB6: "u ",
        0xB7: "me",
        0xB8: "ta",
        0xB9: " b",
        0xBA: " I",
        0xBB: "te",
        0xBC: "of",
        0xBD: "ea",
        0xBE: "ur",
        0xBF: "l ",
        0xC0: "'",
        0xC1: ".",
        0xC2: "-",
        0xC3: "…",
        0xC4: "!",
        0xC5: "?",
        0xC6: "%",
        0xC7: "/",
        0xC8: ":",
        0xC9: ",",
        0xCA: " f",
        0xCB: " d",
        0xCC: "ow",
        0xCD: "se",
        0xCE: "  ",
        0xCF: "it",
        0xD0: "et",
        0xD1: "le",
        0xD2: "f ",
        0xD3: " g",
        0xD4: "es",
        0xD5: "ro",
        0xD6: "ne",
        0xD7: "ry",
        0xD8: " l",
        0xD9: "us",
        0xDA: "no",
        0xDB: "ut",
        0xDC: "ca",
        0xDD: "as",
        0xDE: "Th",
        0xDF: "ai",
        0xE0: "ot",
        0xE1: "be",
        0xE2: "el",
        0xE3: "om",
        0xE4: "'s",
        0xE5: "il",
        0xE6: "de",
        0xE7: "gh",
        0xE8: "ay",
        0xE9: "nt",
        0xEA: "Wh",
        0xEB: "Yo",
        0xEC: "wa",
        0xED: "oo",
        0xEE: "We",
        0xEF: "g ",
        0xF0: "ge",
        0xF1: " n",
        0xF2: "ee",
        0xF3: "wi",
        0xF4: " M",
        0xF5: "ke",
        0xF6: "we",
        0xF7: " p",
        0xF8: "ig",
        0xF9: "ys",
        0xFA: " B",
        0xFB: "am",
        0xFC: "ld",
        0xFD: " W",
        0xFE: "la",
        0xFF: " ",
    }
)


def decode_byte(byte: int) -> Optional[str]:
    """Return the text for one code, or None when it has no mapping."""
    if 0x42 <= byte <= 0x5B:
        return chr(ord("A") + byte - 0x42)
    if 0x5C <= byte <= 0x75:
        return chr(ord("a") + byte - 0x5C)
    if 0x80 <= byte <= 0x89:
        return chr(ord("0") + byte - 0x80)
    return SPECIAL_CHARS.get(byte)


def decode(data: Iterable[int], *, region: Optional[str] = None, base: int = 0) -> str:
    parts: List[str] = []
    for i, byte in enumerate(data):
        text = decode_byte(byte)
        if text is None:
            raise UnknownByte(byte, region=region, offset=base + i)
        parts.append(text)
    return "".join(parts)
