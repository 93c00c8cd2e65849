"""Tests for the content registry and built-in catalogs."""

from __future__ import annotations

import pytest

from questcore.content import ABILITIES, CLASSES, ITEMS, SPELLS, ContentRegistry, get_registry
from questcore.core.exceptions import ContentError
from questcore.models import ClassDef, MonsterDef, MonsterDropDef, SpellDef
from questcore.models.enums import Ability


class TestBuiltInRegistry:
    """Tests for the built-in catalog."""

    def test_lookups(self, registry: ContentRegistry) -> None:
        """Test lookups by id."""
        assert registry.spell("fireBolt").damage_die == 10
        assert registry.ability("shieldBash").mp_cost == 2
        assert registry.item("potion").effect == 20
        assert registry.monster("goblin").hp == 15
        assert registry.talent("toughness").max_hp_bonus == 5
        assert registry.player_class("wizard").primary_stat == Ability.INT

    def test_unknown_ids(self, registry: ContentRegistry) -> None:
        """Unknown ids return None."""
        assert registry.spell("nope") is None
        assert registry.monster("beholder") is None
        assert registry.player_class("necromancer") is None

    def test_ordered_views(self, registry: ContentRegistry) -> None:
        """Catalogs keep declaration order."""
        assert registry.spells == SPELLS
        assert registry.abilities == ABILITIES
        assert registry.items == ITEMS
        assert registry.classes == CLASSES

    def test_class_spells_in_catalog_order(self, registry: ContentRegistry) -> None:
        """Class spell lists follow catalog order."""
        ids = [spell.id for spell in registry.class_spells("wizard")]

        assert ids[:2] == ["fireBolt", "rayOfFrost"]
        assert "teleport" in ids
        assert registry.class_spells("necromancer") == ()

    def test_auto_hit_content(self, registry: ContentRegistry) -> None:
        """Auto-hit is a data flag on specific records."""
        assert registry.spell("magicMissile").auto_hit
        assert registry.ability("deadeye").auto_hit
        assert not registry.spell("fireBolt").auto_hit

    def test_every_class_has_a_weapon(self, registry: ContentRegistry) -> None:
        """Every class starts with a weapon from the catalog."""
        for player_class in registry.classes:
            weapon = registry.item(player_class.starting_weapon_id)
            assert weapon is not None
            assert weapon.is_weapon

    def test_drop_tables(self, registry: ContentRegistry) -> None:
        """Every monster drop points at a catalog item."""
        assert [(d.item_id, d.chance) for d in registry.monster("goblin").drops] == [("potion", 0.2), ("ether", 0.1)]
        for monster in registry.monsters:
            for drop in monster.drops:
                assert registry.item(drop.item_id) is not None

    def test_bonus_action_abilities(self, registry: ContentRegistry) -> None:
        """Bonus actions are a data flag on specific abilities."""
        assert registry.ability("flurryOfBlows").bonus_action
        assert registry.ability("cunningStrike").bonus_action
        assert not registry.ability("shieldBash").bonus_action

    def test_get_registry_cached(self) -> None:
        """The built-in registry is built once."""
        assert get_registry() is get_registry()


class TestRegistryValidation:
    """Tests for registry build errors."""

    def test_duplicate_ids(self) -> None:
        """Duplicate ids are rejected."""
        spark = SpellDef(id="spark", name="Spark")

        with pytest.raises(ContentError) as exc_info:
            ContentRegistry(spells=[spark, spark], classes=[])

        assert exc_info.value.details["content_id"] == "spark"

    def test_dangling_class_spell(self) -> None:
        """Classes may only list existing spells."""
        mage = ClassDef(id="mage", label="Mage", primary_stat=Ability.INT, hit_die=6, spells=("missing",))

        with pytest.raises(ContentError, match="unknown spell"):
            ContentRegistry(classes=[mage])

    def test_dangling_starting_weapon(self) -> None:
        """Starting weapons must exist."""
        brute = ClassDef(id="brute", label="Brute", primary_stat=Ability.STR, hit_die=12, starting_weapon_id="club")

        with pytest.raises(ContentError, match="unknown weapon"):
            ContentRegistry(classes=[brute])

    def test_dangling_monster_drop(self) -> None:
        """Monsters may only drop existing items."""
        imp = MonsterDef(
            id="imp", name="Imp", hp=5, ac=10, attack_bonus=1, damage_count=1, damage_die=4,
            drops=(MonsterDropDef(item_id="soulGem", chance=0.5),),
        )

        with pytest.raises(ContentError, match="drops unknown item") as exc_info:
            ContentRegistry(monsters=[imp])

        assert exc_info.value.details["content_id"] == "soulGem"
