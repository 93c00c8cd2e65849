"""Battle orchestration for one player against one monster.

A ``Battle`` owns its player/monster pair for the length of the fight and
is the only code that mutates them in that time. It rolls initiative,
alternates turns, tracks defend stances, bonus actions and weather, and
settles rewards and item drops when the monster falls. Rewarded XP only
queues level-ups; they are applied on the next rest.

Each public method runs with the battle id bound into the structlog
contextvars, so its events are tagged without the id outliving the call.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any, TypeVar
from uuid import uuid4

from questcore.content import ContentRegistry, get_registry
from questcore.core.config import GameSettings, get_settings
from questcore.core.exceptions import ContentError, InvalidGameStateError, TurnManagementError
from questcore.core.logging import bound_context, get_logger
from questcore.engine import combat
from questcore.engine.character import add_item, use_item
from questcore.engine.dice import DiceRoller, resolve_roller
from questcore.engine.progression import award_xp
from questcore.engine.weather import monster_weather_boost, weather_accuracy_penalty
from questcore.models.combat import CombatResult, InitiativeResult, Monster, MonsterAbilityResult
from questcore.models.content import ItemDef, MonsterDef
from questcore.models.enums import BattleOutcome, Side, WeatherType
from questcore.models.player import PlayerState
from questcore.models.progression import ItemUseResult, XPAwardResult


logger = get_logger(__name__)

_T = TypeVar("_T")


def _with_battle_context(method: Callable[..., _T]) -> Callable[..., _T]:
    """Run a battle method with its ``battle_id`` bound for logging."""

    @wraps(method)
    def wrapper(self: Battle, *args: Any, **kwargs: Any) -> _T:
        with bound_context(battle_id=self._battle_id):
            return method(self, *args, **kwargs)

    return wrapper


@dataclass(frozen=True)
class CombatModifiers:
    """Situational modifiers in effect for one action.

    Attributes:
        player_defend_bonus: AC bonus while the player defends.
        monster_defend_bonus: AC bonus while the monster defends.
        weather_penalty: Accuracy penalty applied to both sides.
        monster_attack_boost: Attack bonus from weather affinity.
        monster_initiative_boost: Initiative bonus from weather affinity.
    """

    player_defend_bonus: int = 0
    monster_defend_bonus: int = 0
    weather_penalty: int = 0
    monster_attack_boost: int = 0
    monster_initiative_boost: int = 0


class Battle:
    """A single fight between the player and one monster.

    Args:
        player: The player. Mutated in place.
        monster: Monster template or its id in the registry.
        weather: Weather for the whole battle.
        registry: Content registry override.
        roller: Dice roller override.
        settings: Game settings override.

    Raises:
        ContentError: If the monster id is unknown.
        InvalidGameStateError: If the player is already down.
    """

    def __init__(
        self,
        player: PlayerState,
        monster: MonsterDef | str,
        *,
        weather: WeatherType | str = WeatherType.CLEAR,
        registry: ContentRegistry | None = None,
        roller: DiceRoller | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        self._registry = registry if registry is not None else get_registry()
        self._roller = resolve_roller(roller)
        self._settings = settings if settings is not None else get_settings().game

        if isinstance(monster, str):
            template = self._registry.monster(monster)
            if template is None:
                raise ContentError("unknown monster", content_id=monster, content_type="monster")
        else:
            template = monster
        if not player.is_alive:
            raise InvalidGameStateError(
                "cannot start a battle with a defeated player",
                current_state="defeated",
            )

        self._player = player
        self._monster = Monster.from_template(template)
        self._weather = WeatherType(weather)
        self._battle_id = uuid4().hex[:8]
        self._log: deque[str] = deque(maxlen=self._settings.battle_log_size)
        self._player_defending = False
        self._monster_defending = False
        self._outcome = BattleOutcome.ONGOING
        self._round = 1
        self._reward: XPAwardResult | None = None
        self._drops: list[ItemDef] = []
        self._bonus_action_used = False

        with bound_context(battle_id=self._battle_id):
            self._initiative = combat.roll_initiative(
                player.stats.dex_mod,
                self._monster.attack_bonus + self.modifiers.monster_initiative_boost,
                roller=self._roller,
            )
            self._active = Side.PLAYER if self._initiative.player_first else Side.MONSTER

            self._add_log(f"A wild {self._monster.name} appears!")
            logger.info(
                "Battle started",
                monster=self._monster.template_id,
                weather=self._weather.value,
                player_first=self._initiative.player_first,
            )

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def battle_id(self) -> str:
        return self._battle_id

    @property
    def player(self) -> PlayerState:
        return self._player

    @property
    def monster(self) -> Monster:
        return self._monster

    @property
    def weather(self) -> WeatherType:
        return self._weather

    @property
    def initiative(self) -> InitiativeResult:
        return self._initiative

    @property
    def active_side(self) -> Side:
        return self._active

    @property
    def round(self) -> int:
        return self._round

    @property
    def outcome(self) -> BattleOutcome:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome != BattleOutcome.ONGOING

    @property
    def player_defending(self) -> bool:
        return self._player_defending

    @property
    def monster_defending(self) -> bool:
        return self._monster_defending

    @property
    def bonus_action_used(self) -> bool:
        """Whether the player has spent this turn's bonus action."""
        return self._bonus_action_used

    @property
    def reward(self) -> XPAwardResult | None:
        """XP award from a victory, if any."""
        return self._reward

    @property
    def drops(self) -> tuple[ItemDef, ...]:
        """Items the monster dropped on defeat, already in the inventory."""
        return tuple(self._drops)

    @property
    def log(self) -> tuple[str, ...]:
        """The most recent battle messages, oldest first."""
        return tuple(self._log)

    @property
    def modifiers(self) -> CombatModifiers:
        """Modifiers from defend stances and weather at this moment."""
        boost = monster_weather_boost(self._monster, self._weather)
        defend = self._settings.defend_ac_bonus
        return CombatModifiers(
            player_defend_bonus=defend if self._player_defending else 0,
            monster_defend_bonus=defend if self._monster_defending else 0,
            weather_penalty=weather_accuracy_penalty(self._weather),
            monster_attack_boost=boost.attack_bonus,
            monster_initiative_boost=boost.initiative_bonus,
        )

    # -------------------------------------------------------------------------
    # Player actions
    # -------------------------------------------------------------------------

    @_with_battle_context
    def player_attack(self) -> CombatResult:
        """Attack with the main-hand weapon."""
        self._require_turn(Side.PLAYER, "player_attack")
        mods = self.modifiers
        self._player_defending = False
        result = combat.player_attack(
            self._player,
            self._monster,
            mods.monster_defend_bonus,
            mods.weather_penalty,
            roller=self._roller,
            registry=self._registry,
        )
        self._monster_defending = False
        self._add_log(result.message)
        self._end_player_turn()
        return result

    @_with_battle_context
    def player_dual_attack(self) -> list[CombatResult]:
        """Main-hand attack followed by an off-hand bonus attack.

        The off-hand attack is skipped when the main hand kills the monster.
        It spends the bonus action, so without an off-hand weapon or after a
        bonus-action ability nothing happens and the turn is kept.
        """
        self._require_turn(Side.PLAYER, "player_dual_attack")
        if self._player.equipped_off_hand is None:
            result = CombatResult.failure("No off-hand weapon equipped!")
            self._add_log(result.message)
            return [result]
        if self._bonus_action_used:
            result = CombatResult.failure("Bonus action already used this turn!")
            self._add_log(result.message)
            return [result]

        mods = self.modifiers
        self._player_defending = False
        self._bonus_action_used = True
        results = [
            combat.player_attack(
                self._player,
                self._monster,
                mods.monster_defend_bonus,
                mods.weather_penalty,
                roller=self._roller,
                registry=self._registry,
            )
        ]
        self._monster_defending = False
        self._add_log(results[0].message)

        if self._monster.is_alive:
            off_hand = combat.player_off_hand_attack(
                self._player,
                self._monster,
                0,
                mods.weather_penalty,
                roller=self._roller,
                registry=self._registry,
            )
            self._add_log(off_hand.message)
            results.append(off_hand)

        self._end_player_turn()
        return results

    @_with_battle_context
    def player_defend(self) -> CombatResult:
        """Take a defensive stance until the monster's next action."""
        self._require_turn(Side.PLAYER, "player_defend")
        self._monster_defending = False
        self._player_defending = True
        bonus = self._settings.defend_ac_bonus
        result = CombatResult(message=f"{self._player.name} takes a defensive stance! (+{bonus} AC)")
        self._add_log(result.message)
        self._end_player_turn()
        return result

    @_with_battle_context
    def player_cast_spell(self, spell_id: str) -> CombatResult:
        """Cast a spell. A rejected cast does not use up the turn."""
        self._require_turn(Side.PLAYER, "player_cast_spell")
        result = combat.player_cast_spell(
            self._player,
            spell_id,
            self._monster,
            self.modifiers.weather_penalty,
            roller=self._roller,
            registry=self._registry,
        )
        self._add_log(result.message)
        if result.success:
            self._player_defending = False
            self._monster_defending = False
            self._end_player_turn()
        return result

    @_with_battle_context
    def player_use_ability(self, ability_id: str) -> CombatResult:
        """Use an ability. A rejected use does not use up the turn.

        A bonus-action ability leaves the turn open for one more action
        unless it kills the monster. Only one bonus action is allowed per
        turn.
        """
        self._require_turn(Side.PLAYER, "player_use_ability")
        ability = self._registry.ability(ability_id)
        is_bonus = ability is not None and ability.bonus_action
        if is_bonus and self._bonus_action_used:
            result = CombatResult.failure("Bonus action already used this turn!")
            self._add_log(result.message)
            return result

        result = combat.player_use_ability(
            self._player,
            ability_id,
            self._monster,
            self.modifiers.weather_penalty,
            roller=self._roller,
            registry=self._registry,
        )
        self._add_log(result.message)
        if not result.success:
            return result

        self._player_defending = False
        self._monster_defending = False
        if is_bonus:
            self._bonus_action_used = True
            if self._monster.is_alive:
                self._add_log("(Bonus action, you can still act this turn)")
                return result
        self._end_player_turn()
        return result

    @_with_battle_context
    def player_use_item(self, index: int) -> ItemUseResult:
        """Use an inventory item. Unusable items do not use up the turn."""
        self._require_turn(Side.PLAYER, "player_use_item")
        result = use_item(self._player, index)
        self._add_log(result.message)
        if result.used:
            self._player_defending = False
            self._end_player_turn()
        return result

    @_with_battle_context
    def player_flee(self) -> CombatResult:
        """Try to escape. A failed attempt hands the turn to the monster."""
        self._require_turn(Side.PLAYER, "player_flee")
        self._player_defending = False
        result = combat.attempt_flee(
            self._player.stats.dex_mod,
            dc=self._settings.flee_dc,
            roller=self._roller,
        )
        self._add_log(result.message)
        if result.success:
            self._finish(BattleOutcome.FLED)
        else:
            self._active = Side.MONSTER
        return result

    # -------------------------------------------------------------------------
    # Monster actions
    # -------------------------------------------------------------------------

    @_with_battle_context
    def monster_turn(self) -> CombatResult | MonsterAbilityResult:
        """Resolve the monster's turn.

        The monster may defend, then tries each special ability in order
        by its chance, and otherwise makes a basic attack.
        """
        self._require_turn(Side.MONSTER, "monster_turn")
        result: CombatResult | MonsterAbilityResult

        if self._roller.chance(self._settings.monster_defend_chance):
            self._monster_defending = True
            self._player_defending = False
            result = CombatResult(message=f"{self._monster.name} takes a defensive stance!")
            self._add_log(result.message)
            self._end_monster_turn()
            return result

        self._monster_defending = False
        for ability in self._monster.abilities:
            if self._roller.chance(ability.chance):
                result = combat.monster_use_ability(
                    ability,
                    self._monster,
                    self._player,
                    roller=self._roller,
                )
                break
        else:
            mods = self.modifiers
            result = combat.monster_attack(
                self._monster,
                self._player,
                mods.player_defend_bonus,
                mods.weather_penalty,
                mods.monster_attack_boost,
                roller=self._roller,
                registry=self._registry,
            )

        self._player_defending = False
        self._add_log(result.message)
        self._end_monster_turn()
        return result

    # -------------------------------------------------------------------------
    # Turn flow
    # -------------------------------------------------------------------------

    def _require_turn(self, side: Side, action: str) -> None:
        if self.is_over:
            raise TurnManagementError(
                f"{action}: battle is already over ({self._outcome.value})",
                details={"battle_id": self._battle_id},
            )
        if self._active != side:
            raise TurnManagementError(
                f"{action}: it is the {self._active.value}'s turn",
                details={"battle_id": self._battle_id, "round": self._round},
            )

    def _end_player_turn(self) -> None:
        if not self._monster.is_alive:
            self._settle_victory()
            return
        self._active = Side.MONSTER

    def _end_monster_turn(self) -> None:
        if not self._player.is_alive:
            self._add_log("You have been defeated...")
            self._finish(BattleOutcome.DEFEAT)
            return
        self._active = Side.PLAYER
        self._round += 1
        self._bonus_action_used = False

    def _roll_drops(self) -> list[ItemDef]:
        dropped: list[ItemDef] = []
        for drop in self._monster.drops:
            if not self._roller.chance(drop.chance):
                continue
            item = self._registry.item(drop.item_id)
            if item is None:
                raise ContentError("unknown drop item", content_id=drop.item_id, content_type="item")
            dropped.append(item)
        return dropped

    def _settle_victory(self) -> None:
        monster = self._monster
        self._add_log(f"{monster.name} is defeated!")
        self._drops = self._roll_drops()
        self._player.gold += monster.gold_reward
        self._reward = award_xp(self._player, monster.xp_reward)
        self._add_log(f"Gained {monster.xp_reward} XP and {monster.gold_reward} gold!")
        for item in self._drops:
            add_item(self._player, item)
            self._add_log(f"Found: {item.name}!")
        if self._reward.gained_levels:
            pending = self._reward.pending_levels
            plural = "s" if pending > 1 else ""
            self._add_log(f"{pending} level-up{plural} pending! Rest to level up.")
        self._finish(BattleOutcome.VICTORY)

    def _finish(self, outcome: BattleOutcome) -> None:
        self._outcome = outcome
        logger.info(
            "Battle ended",
            outcome=outcome.value,
            rounds=self._round,
            player_hp=self._player.hp,
            monster_hp=self._monster.hp,
            drops=[item.id for item in self._drops],
        )

    def _add_log(self, message: str) -> None:
        self._log.append(message)


__all__ = [
    "CombatModifiers",
    "Battle",
]
