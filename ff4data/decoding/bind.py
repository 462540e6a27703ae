from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ActionKind(str, Enum):
    """Every instruction an AI script can hold."""

    SPELL = "spell"
    AREA_SPELL = "area_spell"
    ENEMY_ABILITY = "enemy_ability"
    PLAYER_COMMAND = "player_command"
    CHANGE_CREATURE_TYPE = "change_creature_type"
    CHANGE_PHYSICAL_ATTACK = "change_physical_attack"
    CHANGE_PHYSICAL_DEFENSE = "change_physical_defense"
    CHANGE_MAGICAL_DEFENSE = "change_magical_defense"
    MODIFY_SPEED = "modify_speed"
    SET_ELEMENTAL_DEFENSES = "set_elemental_defenses"
    SET_SPELL_POWER = "set_spell_power"
    SET_WEAKNESS = "set_weakness"
    SET_SPRITE = "set_sprite"
    SHOW_MESSAGE = "show_message"
    CHANGE_MUSIC = "change_music"
    INCREMENT_CONDITION_FLAG = "increment_condition_flag"
    SET_CONDITION_FLAG = "set_condition_flag"
    SET_REACTION = "set_reaction"
    DARKEN_SCREEN = "darken_screen"
    DEBUG_DISPLAY = "debug_display"
    TARGET = "target"
    CHAIN_INTO = "chain_into"
    END_CHAIN = "end_chain"
    START_CHAIN = "start_chain"
    WAIT = "wait"


@dataclass(frozen=True, slots=True)
class Action:
    kind: ActionKind
    value: Optional[int] = None
    suppress_next: bool = False  # SHOW_MESSAGE only

    def __post_init__(self) -> None:
        if self.value is not None and not 0 <= self.value <= 0xFF:
            raise ValueError(f"Action value out of range: {self.value:#x}")


@dataclass(frozen=True, slots=True)
class Script:
    actions: Tuple[Action, ...] = ()
