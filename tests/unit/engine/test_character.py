"""Tests for character creation, derived modifiers, equipment and items."""

from __future__ import annotations

from typing import Any

import pytest

from questcore.content import ContentRegistry
from questcore.core.exceptions import CombatError, ValidationError
from questcore.engine.character import (
    add_item,
    can_dual_wield,
    create_player,
    equip_item,
    equip_off_hand,
    get_ability_attack_modifier,
    get_armor_class,
    get_attack_modifier,
    get_player_class,
    get_spell_modifier,
    has_two_weapon_fighting,
    is_light_weapon,
    proficiency_bonus,
    require_player,
    talent_ac_bonus,
    talent_attack_bonus,
    talent_damage_bonus,
    unequip_off_hand,
    use_item,
    weapon_damage_modifier,
)
from questcore.models import PlayerState, PlayerStats
from questcore.models.enums import Ability


class TestCreatePlayer:
    """Tests for create_player."""

    def test_knight_defaults(self, knight: PlayerState) -> None:
        """Test a level-1 knight built from all-10 stats."""
        assert knight.level == 1
        assert knight.xp == 0
        assert knight.stats.strength == 12
        assert knight.stats.constitution == 11
        assert knight.hp == knight.max_hp == 16
        assert knight.mp == knight.max_mp == 4
        assert knight.gold == 50
        assert knight.equipped_weapon is not None
        assert knight.equipped_weapon.id == "startSword"
        assert knight.known_abilities == ["shieldBash", "shortRest"]
        assert knight.known_spells == []
        assert knight.short_rests_remaining == 2
        assert knight.pending_level_ups == 0

    def test_wizard_knows_level_one_spells(self, wizard: PlayerState) -> None:
        """Only level-1 whitelist spells are known at creation."""
        assert wizard.known_spells == ["fireBolt", "rayOfFrost"]
        assert wizard.known_abilities == ["shortRest"]
        assert wizard.max_mp == 5
        assert wizard.max_hp == 14

    def test_input_stats_not_mutated(self, default_stats: dict[str, int], scripted_roller: Any) -> None:
        """Class boosts are applied to a copy."""
        create_player("Ayla", default_stats, "knight", roller=scripted_roller(dice=[5]))

        assert default_stats["strength"] == 10

    def test_accepts_player_stats(self, scripted_roller: Any) -> None:
        """A PlayerStats instance is accepted and left unchanged."""
        stats = PlayerStats(dexterity=14)

        rogue = create_player("Vex", stats, "rogue", roller=scripted_roller(dice=[8]))

        assert rogue.stats.dexterity == 16
        assert stats.dexterity == 14
        assert rogue.equipped_weapon is not None
        assert rogue.equipped_weapon.id == "startDagger"

    def test_boost_capped_at_30(self, scripted_roller: Any) -> None:
        """Stat boosts never push a score past 30."""
        player = create_player("Titan", {"strength": 29}, "knight", roller=scripted_roller(dice=[1]))

        assert player.stats.strength == 30

    def test_hp_floor(self, scripted_roller: Any) -> None:
        """Starting HP is at least 1 + 10 even with a CON penalty."""
        player = create_player(
            "Frail",
            {"constitution": 3, "intelligence": 1},
            "wizard",
            roller=scripted_roller(dice=[1]),
        )

        assert player.max_hp == 11
        assert player.max_mp == 1

    def test_unknown_class(self, default_stats: dict[str, int]) -> None:
        """Unknown classes raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            create_player("Nobody", default_stats, "necromancer")

        assert exc_info.value.details["invalid_value"] == "necromancer"


class TestDerivedModifiers:
    """Tests for attack, spell and armor class calculations."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(1, 2), (4, 2), (5, 3), (8, 3), (9, 4), (13, 5), (17, 6), (20, 6)],
    )
    def test_proficiency_bonus(self, level: int, expected: int) -> None:
        """Test proficiency by level."""
        assert proficiency_bonus(level) == expected

    def test_attack_modifier(self, knight: PlayerState) -> None:
        """STR mod + proficiency for a knight."""
        assert get_attack_modifier(knight) == 3

    def test_spell_modifier_uses_primary_stat(self, wizard: PlayerState) -> None:
        """INT mod + proficiency for a wizard."""
        assert get_spell_modifier(wizard) == 3

    def test_ability_attack_modifier(self, knight: PlayerState) -> None:
        """Ability attacks use the ability's own stat."""
        assert get_ability_attack_modifier(knight, Ability.STR) == 3
        assert get_ability_attack_modifier(knight, Ability.DEX) == 2

    def test_talent_bonuses(self, knight: PlayerState) -> None:
        """Talent bonuses are summed over known talents."""
        knight.known_talents = ["combatTraining", "legendary", "deadlyPrecision"]

        assert talent_attack_bonus(knight) == 3
        assert talent_damage_bonus(knight) == 2
        assert talent_ac_bonus(knight) == 1
        assert get_attack_modifier(knight) == 6

    def test_unknown_talent_ignored(self, knight: PlayerState) -> None:
        """Unknown talent ids contribute nothing."""
        knight.known_talents = ["madeUp"]

        assert talent_attack_bonus(knight) == 0

    def test_armor_class(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """10 + DEX + armor + shield + defend bonus."""
        assert get_armor_class(knight) == 10

        knight.equipped_armor = registry.item("chainMail")
        knight.equipped_shield = registry.item("ironShield")

        assert get_armor_class(knight) == 16
        assert get_armor_class(knight, defend_bonus=2) == 18

    def test_weapon_damage_modifier_finesse(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """Finesse weapons use the better of STR and DEX."""
        knight.stats.dexterity = 16

        assert weapon_damage_modifier(knight, registry.item("longSword")) == 1
        assert weapon_damage_modifier(knight, registry.item("dagger")) == 3
        assert weapon_damage_modifier(knight, None) == 1

    def test_get_player_class(self, knight: PlayerState) -> None:
        """Test class lookup."""
        assert get_player_class(knight).primary_stat == Ability.STR

        knight.class_id = "nope"
        with pytest.raises(ValidationError):
            get_player_class(knight)

    def test_require_player(self) -> None:
        """A missing player raises CombatError naming the operation."""
        with pytest.raises(CombatError, match="award_xp: missing player"):
            require_player(None, "award_xp")


class TestEquipment:
    """Tests for equipping weapons, shields and off-hand weapons."""

    def test_is_light_weapon(self, registry: ContentRegistry) -> None:
        """Test the light weapon check."""
        assert is_light_weapon(registry.item("dagger"))
        assert not is_light_weapon(registry.item("longSword"))
        assert not is_light_weapon(registry.item("woodenShield"))
        assert not is_light_weapon(None)

    def test_two_handed_clears_shield_and_off_hand(
        self, knight: PlayerState, registry: ContentRegistry
    ) -> None:
        """A two-handed weapon frees both other slots."""
        knight.equipped_shield = registry.item("woodenShield")

        result = equip_item(knight, registry.item("greatSword"))

        assert result.used
        assert result.message == "Equipped Great Sword!"
        assert knight.equipped_shield is None
        assert knight.equipped_off_hand is None

    def test_heavy_main_hand_clears_off_hand(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """A non-light main hand drops the off-hand weapon but keeps a shield."""
        equip_item(knight, registry.item("dagger"))
        equip_off_hand(knight, registry.item("shortSword"))

        equip_item(knight, registry.item("longSword"))

        assert knight.equipped_off_hand is None

    def test_shield_rejected_with_two_handed(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """Shields cannot be equipped alongside a two-handed weapon."""
        equip_item(knight, registry.item("greatSword"))

        result = equip_item(knight, registry.item("ironShield"))

        assert not result.used
        assert result.message == "Cannot use a shield with Great Sword!"
        assert knight.equipped_shield is None

    def test_shield_clears_off_hand(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """Equipping a shield drops the off-hand weapon."""
        equip_item(knight, registry.item("dagger"))
        equip_off_hand(knight, registry.item("shortSword"))

        equip_item(knight, registry.item("woodenShield"))

        assert knight.equipped_off_hand is None
        assert knight.equipped_shield is not None

    def test_equip_off_hand(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """Light main hand plus light off-hand weapon."""
        equip_item(knight, registry.item("dagger"))
        knight.equipped_shield = registry.item("woodenShield")

        result = equip_off_hand(knight, registry.item("shortSword"))

        assert result.used
        assert result.message == "Equipped Short Sword in off-hand!"
        assert knight.equipped_shield is None
        assert knight.equipped_off_hand is not None
        assert can_dual_wield(knight)

    def test_off_hand_requires_light_main_hand(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """The starting sword is not light."""
        result = equip_off_hand(knight, registry.item("dagger"))

        assert not result.used
        assert result.message == "Main hand weapon must be light to dual wield!"
        assert knight.equipped_off_hand is None

    def test_off_hand_requires_light_weapon(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """Heavy weapons cannot go in the off-hand."""
        equip_item(knight, registry.item("dagger"))

        result = equip_off_hand(knight, registry.item("longSword"))

        assert not result.used
        assert result.message == "Long Sword is not a light weapon!"

    def test_same_weapon_rejected(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """The main-hand weapon cannot also fill the off-hand."""
        equip_item(knight, registry.item("dagger"))

        result = equip_off_hand(knight, registry.item("dagger"))

        assert not result.used
        assert result.message == "Cannot equip the same weapon in both hands!"

    def test_unequip_off_hand(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """Test clearing the off-hand slot."""
        equip_item(knight, registry.item("dagger"))
        equip_off_hand(knight, registry.item("shortSword"))

        unequip_off_hand(knight)

        assert knight.equipped_off_hand is None

    def test_two_weapon_fighting(self, knight: PlayerState) -> None:
        """Test the Two-Weapon Fighting talent check."""
        assert not has_two_weapon_fighting(knight)

        knight.known_talents.append("twoWeaponFighting")

        assert has_two_weapon_fighting(knight)


class TestUseItem:
    """Tests for using inventory items."""

    def test_potion_heals_and_is_consumed(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """Test a potion restores HP up to max."""
        add_item(knight, registry.item("potion"))
        knight.take_damage(10)

        result = use_item(knight, 0)

        assert result.used
        assert result.message == "Healed 10 HP!"
        assert knight.hp == 16
        assert knight.inventory == []

    def test_potion_at_full_hp(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """A potion is refused and kept at full HP."""
        add_item(knight, registry.item("potion"))

        result = use_item(knight, 0)

        assert not result.used
        assert result.message == "HP is already full!"
        assert len(knight.inventory) == 1

    def test_ether(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """Test an ether restores MP."""
        add_item(knight, registry.item("ether"))
        assert use_item(knight, 0).message == "MP is already full!"

        knight.spend_mp(3)
        result = use_item(knight, 0)

        assert result.used
        assert result.message == "Restored 3 MP!"
        assert knight.mp == 4

    def test_equipment_is_equipped_and_kept(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """Using equipment equips it and keeps it in the inventory."""
        add_item(knight, registry.item("woodenShield"))

        result = use_item(knight, 0)

        assert result.used
        assert result.message == "Equipped Wooden Shield!"
        assert knight.equipped_shield is not None
        assert len(knight.inventory) == 1

    def test_unusable_item(self, knight: PlayerState, registry: ContentRegistry) -> None:
        """Keys cannot be used."""
        add_item(knight, registry.item("dungeonKey"))

        result = use_item(knight, 0)

        assert not result.used
        assert result.message == "Cannot use this item."

    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_invalid_index(self, knight: PlayerState, registry: ContentRegistry, index: int) -> None:
        """Out-of-range indices raise ValidationError."""
        add_item(knight, registry.item("potion"))

        with pytest.raises(ValidationError):
            use_item(knight, index)
