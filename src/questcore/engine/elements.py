"""Elemental damage modifiers.

Exactly one rule applies to a hit, chosen by priority:
immune (0) > weak (x2) > resistant (floor /2) > neutral.
"""

from __future__ import annotations

from dataclasses import dataclass

from questcore.models.content import ElementalProfile
from questcore.models.enums import Element


IMMUNE = "immune"
WEAK = "weak"
RESISTANT = "resistant"


@dataclass(frozen=True)
class ElementalResult:
    """Damage after the elemental transform and the rule that fired ('' for none)."""

    damage: int
    label: str = ""


def apply_elemental_modifier(
    base_damage: int,
    element: Element | str | None,
    profile: ElementalProfile | None,
) -> ElementalResult:
    """Transform damage by the target's elemental profile.

    Args:
        base_damage: Damage before elements.
        element: Element of the attack, if any.
        profile: Target's elemental profile, if any.

    Returns:
        ElementalResult with the transformed damage and label.

    Example:
        >>> profile = ElementalProfile(weaknesses=(Element.FIRE,))
        >>> apply_elemental_modifier(12, Element.FIRE, profile)
        ElementalResult(damage=24, label='weak')
    """
    if not element or profile is None:
        return ElementalResult(base_damage)

    element = Element(element)
    if element in profile.immunities:
        return ElementalResult(0, IMMUNE)
    if element in profile.weaknesses:
        return ElementalResult(base_damage * 2, WEAK)
    if element in profile.resistances:
        return ElementalResult(base_damage // 2, RESISTANT)
    return ElementalResult(base_damage)


def element_display_name(element: Element | str) -> str:
    """Human-readable element name, e.g. 'Fire'."""
    return Element(element).value.capitalize()


def describe_interaction(label: str) -> str:
    """Battle log suffix for an elemental interaction."""
    if label == IMMUNE:
        return " It's immune!"
    if label == WEAK:
        return " It's super effective!"
    if label == RESISTANT:
        return " It resists!"
    return ""


__all__ = [
    "IMMUNE",
    "WEAK",
    "RESISTANT",
    "ElementalResult",
    "apply_elemental_modifier",
    "element_display_name",
    "describe_interaction",
]
