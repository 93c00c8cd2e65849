"""Weather effects on combat.

Bad weather makes every attack harder to land by raising the target's
effective AC. Monsters fighting in weather they are adapted to get an
initiative and attack boost.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from questcore.models.combat import Monster
from questcore.models.enums import WeatherType


WEATHER_ACCURACY_PENALTY = MappingProxyType(
    {
        WeatherType.CLEAR: 0,
        WeatherType.RAIN: 1,
        WeatherType.SNOW: 1,
        WeatherType.SANDSTORM: 2,
        WeatherType.STORM: 2,
        WeatherType.FOG: 3,
    }
)

WEATHER_ENCOUNTER_MULTIPLIER = MappingProxyType(
    {
        WeatherType.CLEAR: 1.0,
        WeatherType.RAIN: 1.1,
        WeatherType.SNOW: 0.9,
        WeatherType.SANDSTORM: 1.2,
        WeatherType.STORM: 1.3,
        WeatherType.FOG: 1.2,
    }
)

WEATHER_LABEL = MappingProxyType(
    {
        WeatherType.CLEAR: "Clear",
        WeatherType.RAIN: "Rain",
        WeatherType.SNOW: "Snow",
        WeatherType.SANDSTORM: "Sandstorm",
        WeatherType.STORM: "Storm",
        WeatherType.FOG: "Fog",
    }
)


@dataclass(frozen=True)
class MonsterWeatherBoost:
    """Stat deltas for a monster fighting in its preferred weather."""

    initiative_bonus: int = 0
    attack_bonus: int = 0

    @property
    def active(self) -> bool:
        return bool(self.initiative_bonus or self.attack_bonus)


NO_BOOST = MonsterWeatherBoost()
ACTIVE_BOOST = MonsterWeatherBoost(initiative_bonus=2, attack_bonus=1)


def weather_accuracy_penalty(weather: WeatherType | str) -> int:
    """Accuracy penalty for the weather (higher is harder to hit)."""
    return WEATHER_ACCURACY_PENALTY[WeatherType(weather)]


def weather_encounter_multiplier(weather: WeatherType | str) -> float:
    return WEATHER_ENCOUNTER_MULTIPLIER[WeatherType(weather)]


def weather_label(weather: WeatherType | str) -> str:
    return WEATHER_LABEL[WeatherType(weather)]


def monster_weather_boost(monster: Monster, weather: WeatherType | str) -> MonsterWeatherBoost:
    """Boost for ``monster`` if the weather is one of its affinities."""
    if WeatherType(weather) in monster.weather_affinity:
        return ACTIVE_BOOST
    return NO_BOOST


__all__ = [
    "WEATHER_ACCURACY_PENALTY",
    "WEATHER_ENCOUNTER_MULTIPLIER",
    "WEATHER_LABEL",
    "MonsterWeatherBoost",
    "NO_BOOST",
    "ACTIVE_BOOST",
    "weather_accuracy_penalty",
    "weather_encounter_multiplier",
    "weather_label",
    "monster_weather_boost",
]
