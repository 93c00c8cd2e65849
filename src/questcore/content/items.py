"""Item catalog: weapons, armor, shields, consumables, keys and mounts.

``effect`` is the weapon's flat damage bonus, the armor or shield AC bonus,
or the amount a consumable restores.
"""

from __future__ import annotations

from questcore.models.content import ItemDef
from questcore.models.enums import Element, ItemType, Restores


WEAPON = ItemType.WEAPON
ARMOR = ItemType.ARMOR
SHIELD = ItemType.SHIELD
CONSUMABLE = ItemType.CONSUMABLE


ITEMS: tuple[ItemDef, ...] = (
    # Starting weapons
    ItemDef(id="startSword", name="Worn Sword", item_type=WEAPON, effect=1, cost=0),
    ItemDef(id="startBow", name="Hunting Bow", item_type=WEAPON, effect=1, cost=0, two_handed=True),
    ItemDef(id="startStaff", name="Oak Staff", item_type=WEAPON, effect=0, cost=0),
    ItemDef(id="startDagger", name="Rusty Dagger", item_type=WEAPON, effect=0, cost=0,
            light=True, finesse=True),
    ItemDef(id="startMace", name="Iron Mace", item_type=WEAPON, effect=1, cost=0),
    ItemDef(id="startAxe", name="Hand Axe", item_type=WEAPON, effect=1, cost=0, light=True),
    ItemDef(id="startRapier", name="Dueling Rapier", item_type=WEAPON, effect=1, cost=0, finesse=True),
    # Shop weapons
    ItemDef(id="dagger", name="Dagger", item_type=WEAPON, effect=1, cost=20, light=True, finesse=True),
    ItemDef(id="shortSword", name="Short Sword", item_type=WEAPON, effect=2, cost=40,
            light=True, finesse=True),
    ItemDef(id="scimitar", name="Scimitar", item_type=WEAPON, effect=2, cost=45, light=True, finesse=True),
    ItemDef(id="longSword", name="Long Sword", item_type=WEAPON, effect=3, cost=80),
    ItemDef(id="greatSword", name="Great Sword", item_type=WEAPON, effect=5, cost=200, two_handed=True),
    ItemDef(id="flameTongue", name="Flame Tongue", item_type=WEAPON, effect=3, cost=400,
            element=Element.FIRE),
    ItemDef(id="frostBrand", name="Frost Brand", item_type=WEAPON, effect=3, cost=400,
            element=Element.ICE),
    ItemDef(id="sunBlade", name="Sun Blade", item_type=WEAPON, effect=4, cost=500, finesse=True,
            element=Element.RADIANT),
    # Armor
    ItemDef(id="leatherArmor", name="Leather Armor", item_type=ARMOR, effect=2, cost=30),
    ItemDef(id="chainMail", name="Chain Mail", item_type=ARMOR, effect=4, cost=120),
    ItemDef(id="plateArmor", name="Plate Armor", item_type=ARMOR, effect=6, cost=400),
    # Shields
    ItemDef(id="woodenShield", name="Wooden Shield", item_type=SHIELD, effect=1, cost=20),
    ItemDef(id="ironShield", name="Iron Shield", item_type=SHIELD, effect=2, cost=60),
    # Consumables
    ItemDef(id="potion", name="Potion", description="Restores 20 HP", item_type=CONSUMABLE,
            effect=20, cost=15, restores=Restores.HP),
    ItemDef(id="greaterPotion", name="Greater Potion", description="Restores 50 HP",
            item_type=CONSUMABLE, effect=50, cost=50, restores=Restores.HP),
    ItemDef(id="ether", name="Ether", description="Restores 15 MP", item_type=CONSUMABLE,
            effect=15, cost=25, restores=Restores.MP),
    # Keys and mounts
    ItemDef(id="dungeonKey", name="Dungeon Key", item_type=ItemType.KEY),
    ItemDef(id="horse", name="Horse", item_type=ItemType.MOUNT, cost=150),
)


__all__ = ["ITEMS"]
