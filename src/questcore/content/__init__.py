"""Built-in game content and the registry that indexes it."""

from __future__ import annotations

from questcore.content.abilities import ABILITIES
from questcore.content.classes import CLASSES, DEFAULT_CLASS_ID
from questcore.content.items import ITEMS
from questcore.content.monsters import MONSTERS
from questcore.content.registry import ContentRegistry, get_registry
from questcore.content.spells import SPELLS
from questcore.content.talents import TALENTS, TWO_WEAPON_FIGHTING


__all__ = [
    "ABILITIES",
    "CLASSES",
    "DEFAULT_CLASS_ID",
    "ITEMS",
    "MONSTERS",
    "SPELLS",
    "TALENTS",
    "TWO_WEAPON_FIGHTING",
    "ContentRegistry",
    "get_registry",
]
