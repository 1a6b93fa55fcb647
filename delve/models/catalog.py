"""Monster and item catalog plus the depth tables that drive population.

Templates are plain data; ``spawn_service`` and ``loot_service`` turn them into
entities. Each template carries its own ``LevelScaleTable`` weight so the
weighted pick for a depth is built by evaluating every template's table.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..services.scaling import LevelScaleTable
from .entities import Ai, Color, DeathCallback, ItemKind, Slot

# RGB values matching the classic libtcod palette names.
WHITE: Color = (255, 255, 255)
DESATURATED_GREEN: Color = (63, 127, 63)
DARKER_GREEN: Color = (0, 127, 0)
VIOLET: Color = (127, 0, 255)
LIGHT_YELLOW: Color = (255, 255, 115)
SKY: Color = (0, 191, 255)


@dataclass(frozen=True)
class MonsterTemplate:
    slug: str
    name: str
    glyph: str
    color: Color
    max_hp: int
    defense: int
    power: int
    xp: int
    weight: LevelScaleTable
    ai: Ai = Ai.BASIC
    on_death: DeathCallback = DeathCallback.MONSTER


@dataclass(frozen=True)
class EquipmentTemplate:
    slot: Slot
    max_hp_bonus: int = 0
    power_bonus: int = 0
    defense_bonus: int = 0


@dataclass(frozen=True)
class ItemTemplate:
    kind: ItemKind
    name: str
    glyph: str
    color: Color
    weight: LevelScaleTable
    equipment: Optional[EquipmentTemplate] = None


MAX_MONSTERS_PER_ROOM = LevelScaleTable([(1, 2), (4, 3), (6, 5)])
MAX_ITEMS_PER_ROOM = LevelScaleTable([(1, 1), (4, 2)])

MONSTERS: Dict[str, MonsterTemplate] = {
    "orc": MonsterTemplate(
        slug="orc",
        name="orc",
        glyph="o",
        color=DESATURATED_GREEN,
        max_hp=10,
        defense=0,
        power=3,
        xp=35,
        weight=LevelScaleTable.constant(80),
    ),
    "troll": MonsterTemplate(
        slug="troll",
        name="troll",
        glyph="T",
        color=DARKER_GREEN,
        max_hp=16,
        defense=1,
        power=4,
        xp=100,
        weight=LevelScaleTable([(3, 15), (5, 30), (7, 60)]),
    ),
}

# The healing potion keeps a constant weight so every depth has a loot floor.
ITEMS: Dict[ItemKind, ItemTemplate] = {
    ItemKind.HEAL: ItemTemplate(
        ItemKind.HEAL, "healing potion", "!", VIOLET, LevelScaleTable.constant(35)
    ),
    ItemKind.LIGHTNING: ItemTemplate(
        ItemKind.LIGHTNING, "scroll of lightning bolt", "#", LIGHT_YELLOW, LevelScaleTable([(4, 25)])
    ),
    ItemKind.FIREBALL: ItemTemplate(
        ItemKind.FIREBALL, "scroll of fireball", "#", LIGHT_YELLOW, LevelScaleTable([(6, 25)])
    ),
    ItemKind.CONFUSE: ItemTemplate(
        ItemKind.CONFUSE, "scroll of confusion", "#", LIGHT_YELLOW, LevelScaleTable([(4, 25)])
    ),
    ItemKind.SWORD: ItemTemplate(
        ItemKind.SWORD,
        "sword",
        "/",
        SKY,
        LevelScaleTable([(4, 5)]),
        equipment=EquipmentTemplate(Slot.RIGHT_HAND, power_bonus=3),
    ),
    ItemKind.SHIELD: ItemTemplate(
        ItemKind.SHIELD,
        "shield",
        "[",
        SKY,
        LevelScaleTable([(8, 15)]),
        equipment=EquipmentTemplate(Slot.LEFT_HAND, defense_bonus=1),
    ),
}

STAIRS_NAME = "stairs"
STAIRS_GLYPH = "<"
STAIRS_COLOR = WHITE


__all__ = [
    "MonsterTemplate",
    "ItemTemplate",
    "EquipmentTemplate",
    "MAX_MONSTERS_PER_ROOM",
    "MAX_ITEMS_PER_ROOM",
    "MONSTERS",
    "ITEMS",
    "STAIRS_NAME",
    "STAIRS_GLYPH",
    "STAIRS_COLOR",
]
