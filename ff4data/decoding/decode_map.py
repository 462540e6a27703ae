from __future__ import annotations

from typing import Callable, Tuple

from ..constants import MAX_SCRIPTS, SENTINEL
from ..errors import MalformedInstruction
from .bind import Action, ActionKind, Script
from .lists import decode_bounded, decode_terminated
from .reader import StreamCtx

DecoderFunc = Callable[[int, StreamCtx], Action]


def _tag(value: int) -> range:
    return range(value, value + 1)


def _malformed(tag: int, arg: int, ctx: StreamCtx) -> MalformedInstruction:
    # The cursor sits past the argument byte.
    return MalformedInstruction(tag, arg, region=ctx.region, offset=ctx.offset - 2)


def _dec_spell(tag: int, ctx: StreamCtx) -> Action:
    return Action(ActionKind.SPELL, tag)


def _dec_area_spell(tag: int, ctx: StreamCtx) -> Action:
    return Action(ActionKind.AREA_SPELL, tag - 0x30)


def _dec_enemy_ability(tag: int, ctx: StreamCtx) -> Action:
    return Action(ActionKind.ENEMY_ABILITY, tag)


def _dec_player_command(tag: int, ctx: StreamCtx) -> Action:
    return Action(ActionKind.PLAYER_COMMAND, tag - 0xC0)


def _dec_arg(kind: ActionKind, *, suppress_next: bool = False) -> DecoderFunc:
    def decode(tag: int, ctx: StreamCtx) -> Action:
        return Action(kind, ctx.read_u8(), suppress_next=suppress_next)

    return decode


def _dec_simple(kind: ActionKind) -> DecoderFunc:
    def decode(tag: int, ctx: StreamCtx) -> Action:
        return Action(kind)

    return decode


def _dec_condition_flag(tag: int, ctx: StreamCtx) -> Action:
    arg = ctx.read_u8()
    if arg == 0x01:
        return Action(ActionKind.INCREMENT_CONDITION_FLAG)
    if arg & 0x80:
        return Action(ActionKind.SET_CONDITION_FLAG, arg & 0x7F)
    raise _malformed(tag, arg, ctx)


def _dec_set_reaction(tag: int, ctx: StreamCtx) -> Action:
    arg = ctx.read_u8()
    if arg & 0x80:
        return Action(ActionKind.SET_REACTION, arg & 0x7F)
    raise _malformed(tag, arg, ctx)


# Evaluated top to bottom, first match wins.  0xF6 and 0xFA have no entry.
ACTION_DECODERS: Tuple[Tuple[range, DecoderFunc], ...] = (
    (range(0x00, 0x31), _dec_spell),
    (range(0x31, 0x5F), _dec_area_spell),
    (range(0x5F, 0xC0), _dec_enemy_ability),
    (range(0xC0, 0xE8), _dec_player_command),
    (_tag(0xE8), _dec_arg(ActionKind.CHANGE_CREATURE_TYPE)),
    (_tag(0xE9), _dec_arg(ActionKind.CHANGE_PHYSICAL_ATTACK)),
    (_tag(0xEA), _dec_arg(ActionKind.CHANGE_PHYSICAL_DEFENSE)),
    (_tag(0xEB), _dec_arg(ActionKind.CHANGE_MAGICAL_DEFENSE)),
    (_tag(0xEC), _dec_arg(ActionKind.MODIFY_SPEED)),
    (_tag(0xED), _dec_arg(ActionKind.SET_ELEMENTAL_DEFENSES)),
    (_tag(0xEE), _dec_arg(ActionKind.SET_SPELL_POWER)),
    (_tag(0xEF), _dec_arg(ActionKind.SET_WEAKNESS)),
    (_tag(0xF0), _dec_arg(ActionKind.SET_SPRITE)),
    (_tag(0xF1), _dec_arg(ActionKind.SHOW_MESSAGE, suppress_next=False)),
    (_tag(0xF2), _dec_arg(ActionKind.SHOW_MESSAGE, suppress_next=True)),
    (_tag(0xF3), _dec_arg(ActionKind.CHANGE_MUSIC)),
    (_tag(0xF7), _dec_arg(ActionKind.DARKEN_SCREEN)),
    (_tag(0xF8), _dec_arg(ActionKind.DEBUG_DISPLAY)),
    (_tag(0xF9), _dec_arg(ActionKind.TARGET)),
    (_tag(0xF4), _dec_condition_flag),
    (_tag(0xF5), _dec_set_reaction),
    (_tag(0xFB), _dec_simple(ActionKind.CHAIN_INTO)),
    (_tag(0xFC), _dec_simple(ActionKind.END_CHAIN)),
    (_tag(0xFD), _dec_simple(ActionKind.START_CHAIN)),
    (_tag(0xFE), _dec_simple(ActionKind.WAIT)),
)


def decode_action(ctx: StreamCtx) -> Action:
    start = ctx.offset
    tag = ctx.read_u8()
    for match, decoder in ACTION_DECODERS:
        if tag in match:
            return decoder(tag, ctx)
    raise MalformedInstruction(tag, region=ctx.region, offset=start)


def decode_script(ctx: StreamCtx) -> Script:
    return Script(decode_terminated(ctx, decode_action, SENTINEL))


def decode_scripts(ctx: StreamCtx) -> Tuple[Script, ...]:
    """Decode a whole script bank; every byte of the region must be used."""

    return decode_bounded(ctx, decode_script, max_count=MAX_SCRIPTS, exhaust=True)
