"""Battle-time records: monster instances and action results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from questcore.models.content import ElementalProfile, MonsterAbilityDef, MonsterDef, MonsterDropDef
from questcore.models.enums import Element, MonsterAbilityKind, WeatherType
from questcore.models.player import StateModel


class Monster(StateModel):
    """A monster taking part in one battle.

    Cloned from a ``MonsterDef`` at battle start and discarded at battle
    end. Only ``hp`` changes during combat.
    """

    template_id: str
    name: str
    hp: int = Field(ge=0)
    max_hp: int = Field(ge=1)
    ac: int
    attack_bonus: int
    damage_count: int = Field(ge=0)
    damage_die: int
    xp_reward: int = 0
    gold_reward: int = 0
    is_boss: bool = False
    elemental: ElementalProfile | None = None
    abilities: tuple[MonsterAbilityDef, ...] = ()
    drops: tuple[MonsterDropDef, ...] = ()
    weather_affinity: tuple[WeatherType, ...] = ()

    @classmethod
    def from_template(cls, template: MonsterDef) -> "Monster":
        """Create a fresh battle instance at full HP."""
        return cls(
            template_id=template.id,
            name=template.name,
            hp=template.hp,
            max_hp=template.hp,
            ac=template.ac,
            attack_bonus=template.attack_bonus,
            damage_count=template.damage_count,
            damage_die=template.damage_die,
            xp_reward=template.xp_reward,
            gold_reward=template.gold_reward,
            is_boss=template.is_boss,
            elemental=template.elemental,
            abilities=template.abilities,
            drops=template.drops,
            weather_affinity=template.weather_affinity,
        )

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def take_damage(self, amount: int) -> int:
        """Apply damage and return HP actually lost."""
        if amount <= 0:
            return 0
        lost = min(self.hp, amount)
        self.hp -= lost
        return lost

    def heal(self, amount: int) -> int:
        """Restore HP up to max and return HP actually restored."""
        if amount <= 0:
            return 0
        restored = min(amount, self.max_hp - self.hp)
        self.hp += restored
        return restored


# =============================================================================
# Results
# =============================================================================


class ResultModel(BaseModel):
    """Base class for immutable result records."""

    model_config = ConfigDict(frozen=True)


class CombatResult(ResultModel):
    """Outcome of one combat action.

    ``success`` is False only for game-state rejections (insufficient MP,
    unknown spell, missing off-hand weapon, failed escape). A missed attack
    is a successful action with ``hit`` False.
    """

    success: bool = True
    message: str
    hit: bool = False
    critical: bool = False
    fumble: bool = False
    auto_hit: bool = False
    damage: int = 0
    healing: int = 0
    mp_used: int = 0
    roll: int | None = Field(default=None, description="Natural d20 roll")
    total_roll: int | None = Field(default=None, description="d20 roll plus attack modifier")
    attack_mod: int | None = None
    target_ac: int | None = None
    elemental_label: str = ""

    @classmethod
    def failure(cls, message: str) -> "CombatResult":
        """Build a rejected-action result."""
        return cls(success=False, message=message)


class InitiativeResult(ResultModel):
    """Initiative rolls for both sides. Ties go to the player."""

    player_roll: int
    player_total: int
    monster_roll: int
    monster_total: int

    @computed_field(description="Whether the player acts first")
    @property
    def player_first(self) -> bool:
        return self.player_total >= self.monster_total


class MonsterAbilityResult(ResultModel):
    """Outcome of a monster special ability."""

    ability_name: str
    kind: MonsterAbilityKind
    damage: int = 0
    healing: int = 0
    element: Element | None = None
    message: str


__all__ = [
    "Monster",
    "ResultModel",
    "CombatResult",
    "InitiativeResult",
    "MonsterAbilityResult",
]
