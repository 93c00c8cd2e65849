"""Read-only content registry.

Definitions are stored once in declaration order and indexed by id in
immutable maps, so lookups are O(1) and nothing downstream can mutate the
catalog.

Example:
    >>> from questcore.content import get_registry
    >>> registry = get_registry()
    >>> registry.spell("fireBolt").damage_die
    10
    >>> registry.spell("nope") is None
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import TypeVar

from questcore.content.abilities import ABILITIES
from questcore.content.classes import CLASSES
from questcore.content.items import ITEMS
from questcore.content.monsters import MONSTERS
from questcore.content.spells import SPELLS
from questcore.content.talents import TALENTS
from questcore.core.exceptions import ContentError
from questcore.core.logging import get_logger
from questcore.models.content import (
    AbilityDef,
    ClassDef,
    ItemDef,
    MonsterDef,
    SpellDef,
    TalentDef,
)


logger = get_logger(__name__)

T = TypeVar("T", SpellDef, AbilityDef, ItemDef, MonsterDef, TalentDef, ClassDef)


def _index(records: Iterable[T], content_type: str) -> tuple[tuple[T, ...], Mapping[str, T]]:
    ordered = tuple(records)
    by_id: dict[str, T] = {}
    for record in ordered:
        if record.id in by_id:
            raise ContentError(
                f"duplicate {content_type} id",
                content_id=record.id,
                content_type=content_type,
            )
        by_id[record.id] = record
    return ordered, MappingProxyType(by_id)


class ContentRegistry:
    """Immutable id-to-definition maps for all game content.

    Args:
        spells: Spell definitions (defaults to the built-in catalog).
        abilities: Ability definitions.
        items: Item definitions.
        monsters: Monster templates.
        talents: Talent definitions.
        classes: Class definitions.

    Raises:
        ContentError: On duplicate ids or when a class references a spell,
            ability or starting weapon that does not exist.
    """

    def __init__(
        self,
        *,
        spells: Iterable[SpellDef] = SPELLS,
        abilities: Iterable[AbilityDef] = ABILITIES,
        items: Iterable[ItemDef] = ITEMS,
        monsters: Iterable[MonsterDef] = MONSTERS,
        talents: Iterable[TalentDef] = TALENTS,
        classes: Iterable[ClassDef] = CLASSES,
    ) -> None:
        self._spells, self._spell_index = _index(spells, "spell")
        self._abilities, self._ability_index = _index(abilities, "ability")
        self._items, self._item_index = _index(items, "item")
        self._monsters, self._monster_index = _index(monsters, "monster")
        self._talents, self._talent_index = _index(talents, "talent")
        self._classes, self._class_index = _index(classes, "class")
        self._check_class_references()
        self._check_monster_drops()

        logger.debug(
            "Content registry built",
            spells=len(self._spells),
            abilities=len(self._abilities),
            items=len(self._items),
            monsters=len(self._monsters),
            talents=len(self._talents),
            classes=len(self._classes),
        )

    def _check_class_references(self) -> None:
        for player_class in self._classes:
            for spell_id in player_class.spells:
                if spell_id not in self._spell_index:
                    raise ContentError(
                        f"class {player_class.id} lists unknown spell",
                        content_id=spell_id,
                        content_type="spell",
                    )
            for ability_id in player_class.abilities:
                if ability_id not in self._ability_index:
                    raise ContentError(
                        f"class {player_class.id} lists unknown ability",
                        content_id=ability_id,
                        content_type="ability",
                    )
            weapon_id = player_class.starting_weapon_id
            if weapon_id is not None and weapon_id not in self._item_index:
                raise ContentError(
                    f"class {player_class.id} starts with unknown weapon",
                    content_id=weapon_id,
                    content_type="item",
                )

    def _check_monster_drops(self) -> None:
        for monster in self._monsters:
            for drop in monster.drops:
                if drop.item_id not in self._item_index:
                    raise ContentError(
                        f"monster {monster.id} drops unknown item",
                        content_id=drop.item_id,
                        content_type="item",
                    )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def spell(self, spell_id: str) -> SpellDef | None:
        return self._spell_index.get(spell_id)

    def ability(self, ability_id: str) -> AbilityDef | None:
        return self._ability_index.get(ability_id)

    def item(self, item_id: str) -> ItemDef | None:
        return self._item_index.get(item_id)

    def monster(self, monster_id: str) -> MonsterDef | None:
        return self._monster_index.get(monster_id)

    def talent(self, talent_id: str) -> TalentDef | None:
        return self._talent_index.get(talent_id)

    def player_class(self, class_id: str) -> ClassDef | None:
        return self._class_index.get(class_id)

    # -------------------------------------------------------------------------
    # Ordered views
    # -------------------------------------------------------------------------

    @property
    def spells(self) -> tuple[SpellDef, ...]:
        return self._spells

    @property
    def abilities(self) -> tuple[AbilityDef, ...]:
        return self._abilities

    @property
    def items(self) -> tuple[ItemDef, ...]:
        return self._items

    @property
    def monsters(self) -> tuple[MonsterDef, ...]:
        return self._monsters

    @property
    def talents(self) -> tuple[TalentDef, ...]:
        return self._talents

    @property
    def classes(self) -> tuple[ClassDef, ...]:
        return self._classes

    def class_spells(self, class_id: str) -> tuple[SpellDef, ...]:
        """Spells on a class whitelist, in catalog order."""
        player_class = self.player_class(class_id)
        if player_class is None:
            return ()
        allowed = set(player_class.spells)
        return tuple(spell for spell in self._spells if spell.id in allowed)

    def class_abilities(self, class_id: str) -> tuple[AbilityDef, ...]:
        """Abilities on a class whitelist, in catalog order."""
        player_class = self.player_class(class_id)
        if player_class is None:
            return ()
        allowed = set(player_class.abilities)
        return tuple(ability for ability in self._abilities if ability.id in allowed)


@lru_cache(maxsize=1)
def get_registry() -> ContentRegistry:
    """Get the registry built from the built-in catalogs."""
    return ContentRegistry()


__all__ = [
    "ContentRegistry",
    "get_registry",
]
