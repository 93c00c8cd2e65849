"""Character rules: creation, derived modifiers, equipment and items.

Derived numbers (attack modifier, armor class, talent bonuses) are always
computed from the current ``PlayerState`` rather than cached on it, so
equipment swaps and stat allocations take effect immediately.
"""

from __future__ import annotations

from collections.abc import Mapping

from questcore.content import TWO_WEAPON_FIGHTING, ContentRegistry, get_registry
from questcore.core.config import get_settings
from questcore.core.constants import (
    BASE_ARMOR_CLASS,
    MAX_ABILITY_SCORE,
    STARTING_GOLD,
    STARTING_HP_BONUS,
    STARTING_MP_BASE,
)
from questcore.core.exceptions import CombatError, ValidationError
from questcore.core.logging import get_logger
from questcore.engine.dice import DiceRoller, resolve_roller
from questcore.models.content import ClassDef, ItemDef
from questcore.models.enums import Ability, ItemType, Restores
from questcore.models.player import PlayerState, PlayerStats
from questcore.models.progression import ItemUseResult


logger = get_logger(__name__)


# =============================================================================
# Lookups
# =============================================================================


def _registry(registry: ContentRegistry | None) -> ContentRegistry:
    return registry if registry is not None else get_registry()


def get_player_class(player: PlayerState, registry: ContentRegistry | None = None) -> ClassDef:
    """Get the class definition for a player.

    Raises:
        ValidationError: If the player's class id is unknown.
    """
    player_class = _registry(registry).player_class(player.class_id)
    if player_class is None:
        raise ValidationError(
            f"get_player_class: unknown class {player.class_id!r}",
            field_name="class_id",
            invalid_value=player.class_id,
        )
    return player_class


def require_player(player: PlayerState | None, operation: str) -> PlayerState:
    """Raise CombatError naming ``operation`` when the player is missing."""
    if player is None:
        raise CombatError(f"{operation}: missing player")
    return player


# =============================================================================
# Derived Modifiers
# =============================================================================


def proficiency_bonus(level: int) -> int:
    """Proficiency bonus for a level: floor((level - 1) / 4) + 2."""
    return (level - 1) // 4 + 2


def _talent_sum(player: PlayerState, attr: str, registry: ContentRegistry | None) -> int:
    reg = _registry(registry)
    total = 0
    for talent_id in player.known_talents:
        talent = reg.talent(talent_id)
        if talent is not None:
            total += getattr(talent, attr)
    return total


def talent_attack_bonus(player: PlayerState, registry: ContentRegistry | None = None) -> int:
    """Sum of attack bonuses from known talents."""
    return _talent_sum(player, "attack_bonus", registry)


def talent_damage_bonus(player: PlayerState, registry: ContentRegistry | None = None) -> int:
    """Sum of damage bonuses from known talents."""
    return _talent_sum(player, "damage_bonus", registry)


def talent_ac_bonus(player: PlayerState, registry: ContentRegistry | None = None) -> int:
    """Sum of AC bonuses from known talents."""
    return _talent_sum(player, "ac_bonus", registry)


def primary_stat_modifier(player: PlayerState, registry: ContentRegistry | None = None) -> int:
    """Ability modifier of the player's class primary stat."""
    primary = get_player_class(player, registry).primary_stat
    return player.stats.modifier(primary)


def get_attack_modifier(player: PlayerState, registry: ContentRegistry | None = None) -> int:
    """Weapon attack modifier: primary stat + proficiency + talent attack bonus."""
    return (
        primary_stat_modifier(player, registry)
        + proficiency_bonus(player.level)
        + talent_attack_bonus(player, registry)
    )


def get_spell_modifier(player: PlayerState, registry: ContentRegistry | None = None) -> int:
    """Spell attack modifier. Spells use the class primary stat like weapons."""
    return get_attack_modifier(player, registry)


def get_ability_attack_modifier(
    player: PlayerState,
    stat: Ability | str,
    registry: ContentRegistry | None = None,
) -> int:
    """Attack modifier for an ability driven by ``stat``."""
    return (
        player.stats.modifier(stat)
        + proficiency_bonus(player.level)
        + talent_attack_bonus(player, registry)
    )


def weapon_damage_modifier(player: PlayerState, weapon: ItemDef | None) -> int:
    """Ability modifier added to main-hand damage: STR, or max(STR, DEX) for finesse."""
    if weapon is not None and weapon.finesse:
        return max(player.stats.str_mod, player.stats.dex_mod)
    return player.stats.str_mod


def get_armor_class(
    player: PlayerState,
    defend_bonus: int = 0,
    registry: ContentRegistry | None = None,
) -> int:
    """Armor class: 10 + DEX mod + armor + shield + talent AC + defend bonus."""
    armor = player.equipped_armor.effect if player.equipped_armor else 0
    shield = player.equipped_shield.effect if player.equipped_shield else 0
    return (
        BASE_ARMOR_CLASS
        + player.stats.dex_mod
        + armor
        + shield
        + talent_ac_bonus(player, registry)
        + defend_bonus
    )


# =============================================================================
# Creation
# =============================================================================


def create_player(
    name: str,
    base_stats: PlayerStats | Mapping[str, int],
    class_id: str,
    *,
    registry: ContentRegistry | None = None,
    roller: DiceRoller | None = None,
) -> PlayerState:
    """Create a level-1 player.

    The input stats are copied, never mutated. Class stat boosts are applied
    on top, the starting weapon is equipped and level-1 spells and abilities
    from the class whitelist are known.

    Args:
        name: Character name.
        base_stats: Ability scores before class boosts.
        class_id: Class identifier.
        registry: Content registry override.
        roller: Dice roller override.

    Returns:
        The new PlayerState.

    Raises:
        ValidationError: If the class id is unknown.
    """
    reg = _registry(registry)
    dice = resolve_roller(roller)
    player_class = reg.player_class(class_id)
    if player_class is None:
        raise ValidationError(
            f"create_player: unknown class {class_id!r}",
            field_name="class_id",
            invalid_value=class_id,
        )

    if isinstance(base_stats, PlayerStats):
        scores = base_stats.as_dict()
    else:
        scores = dict(base_stats)
    for ability, boost in player_class.stat_boosts.items():
        key = Ability(ability).value
        scores[key] = min(MAX_ABILITY_SCORE, scores.get(key, 10) + boost)
    stats = PlayerStats(**scores)

    max_hp = max(1, dice.roll_dice(1, player_class.hit_die) + stats.con_mod) + STARTING_HP_BONUS
    max_mp = max(1, STARTING_MP_BASE + stats.int_mod)

    weapon = reg.item(player_class.starting_weapon_id) if player_class.starting_weapon_id else None

    player = PlayerState(
        name=name,
        class_id=class_id,
        hp=max_hp,
        max_hp=max_hp,
        mp=max_mp,
        max_mp=max_mp,
        stats=stats,
        gold=STARTING_GOLD,
        equipped_weapon=weapon,
        known_spells=[s.id for s in reg.class_spells(class_id) if s.level_required <= 1],
        known_abilities=[a.id for a in reg.class_abilities(class_id) if a.level_required <= 1],
        short_rests_remaining=get_settings().game.short_rests_per_long_rest,
    )
    logger.info("Player created", **player.to_summary())
    return player


# =============================================================================
# Equipment
# =============================================================================


def is_light_weapon(item: ItemDef | None) -> bool:
    """Whether an item is a light, one-handed weapon."""
    return item is not None and item.is_weapon and item.light and not item.two_handed


def can_dual_wield(player: PlayerState) -> bool:
    """Dual wielding needs a light main-hand weapon and no shield."""
    return is_light_weapon(player.equipped_weapon) and player.equipped_shield is None


def has_two_weapon_fighting(player: PlayerState) -> bool:
    return TWO_WEAPON_FIGHTING in player.known_talents


def equip_item(player: PlayerState, item: ItemDef) -> ItemUseResult:
    """Equip a weapon, armor or shield, resolving slot conflicts.

    A two-handed weapon clears the shield and off-hand. A main-hand weapon
    that is not light clears the off-hand. A shield clears the off-hand.
    """
    if item.item_type == ItemType.WEAPON:
        player.equipped_weapon = item
        if item.two_handed:
            player.equipped_shield = None
            player.equipped_off_hand = None
        elif not item.light:
            player.equipped_off_hand = None
        return ItemUseResult(used=True, message=f"Equipped {item.name}!")

    if item.item_type == ItemType.ARMOR:
        player.equipped_armor = item
        return ItemUseResult(used=True, message=f"Equipped {item.name}!")

    if item.item_type == ItemType.SHIELD:
        if player.equipped_weapon is not None and player.equipped_weapon.two_handed:
            return ItemUseResult(
                used=False,
                message=f"Cannot use a shield with {player.equipped_weapon.name}!",
            )
        player.equipped_shield = item
        player.equipped_off_hand = None
        return ItemUseResult(used=True, message=f"Equipped {item.name}!")

    return ItemUseResult(used=False, message=f"{item.name} cannot be equipped.")


def equip_off_hand(player: PlayerState, item: ItemDef) -> ItemUseResult:
    """Equip a light weapon in the off-hand, unequipping any shield."""
    if not is_light_weapon(player.equipped_weapon):
        return ItemUseResult(used=False, message="Main hand weapon must be light to dual wield!")
    if not is_light_weapon(item):
        return ItemUseResult(used=False, message=f"{item.name} is not a light weapon!")
    if player.equipped_weapon is not None and player.equipped_weapon.id == item.id:
        return ItemUseResult(used=False, message="Cannot equip the same weapon in both hands!")
    player.equipped_off_hand = item
    player.equipped_shield = None
    return ItemUseResult(used=True, message=f"Equipped {item.name} in off-hand!")


def unequip_off_hand(player: PlayerState) -> None:
    player.equipped_off_hand = None


# =============================================================================
# Items
# =============================================================================


def use_item(player: PlayerState, index: int) -> ItemUseResult:
    """Use the inventory item at ``index``.

    Consumables restore HP or MP and are removed from the inventory.
    Equipment is equipped and stays in the inventory.

    Raises:
        ValidationError: If the index is not a valid inventory position.
    """
    require_player(player, "use_item")
    if not isinstance(index, int) or isinstance(index, bool) or index < 0:
        raise ValidationError(
            f"use_item: invalid item index {index!r}",
            field_name="index",
            invalid_value=index,
        )
    if index >= len(player.inventory):
        raise ValidationError(
            f"use_item: no item at index {index} (inventory size: {len(player.inventory)})",
            field_name="index",
            invalid_value=index,
        )

    item = player.inventory[index]

    if item.item_type == ItemType.CONSUMABLE:
        if item.restores == Restores.HP:
            if player.missing_hp <= 0:
                return ItemUseResult(used=False, message="HP is already full!")
            healed = player.heal(item.effect)
            player.inventory.pop(index)
            return ItemUseResult(used=True, message=f"Healed {healed} HP!")
        if item.restores == Restores.MP:
            if player.missing_mp <= 0:
                return ItemUseResult(used=False, message="MP is already full!")
            restored = player.restore_mp(item.effect)
            player.inventory.pop(index)
            return ItemUseResult(used=True, message=f"Restored {restored} MP!")

    if item.item_type in (ItemType.WEAPON, ItemType.ARMOR, ItemType.SHIELD):
        return equip_item(player, item)

    return ItemUseResult(used=False, message="Cannot use this item.")


def add_item(player: PlayerState, item: ItemDef) -> None:
    """Append an item to the inventory."""
    player.inventory.append(item)


__all__ = [
    "get_player_class",
    "require_player",
    "proficiency_bonus",
    "talent_attack_bonus",
    "talent_damage_bonus",
    "talent_ac_bonus",
    "primary_stat_modifier",
    "get_attack_modifier",
    "get_spell_modifier",
    "get_ability_attack_modifier",
    "weapon_damage_modifier",
    "get_armor_class",
    "create_player",
    "is_light_weapon",
    "can_dual_wield",
    "has_two_weapon_fighting",
    "equip_item",
    "equip_off_hand",
    "unequip_off_hand",
    "use_item",
    "add_item",
]
