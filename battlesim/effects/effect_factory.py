"""
Factory for status effects.

Maps every StatusEffectType to a fresh effect instance. The set of kinds is
closed: asking for anything else is a validation failure.
"""

from battlesim.core.constants import StatusEffectType
from battlesim.core.error_handling import ValidationError
from battlesim.core.logging import log_error

from .base_effect import StatusEffect
from .damage_over_time_effect import PoisonedEffect
from .incapacitating_effect import StunnedEffect
from .modifier_effect import DefenseUpEffect, EvadingEffect, ImmunityEffect, MarkedEffect
from .shield_effect import ShieldedEffect

_EFFECT_CLASSES: dict[StatusEffectType, type[StatusEffect]] = {
    StatusEffectType.STUNNED: StunnedEffect,
    StatusEffectType.POISONED: PoisonedEffect,
    StatusEffectType.DEFENSE_UP: DefenseUpEffect,
    StatusEffectType.EVADING: EvadingEffect,
    StatusEffectType.IMMUNITY: ImmunityEffect,
    StatusEffectType.SHIELDED: ShieldedEffect,
    StatusEffectType.MARKED: MarkedEffect,
}


def create_status_effect(kind: StatusEffectType | str) -> StatusEffect:
    """
    Creates a new status effect of the given kind with its default duration.

    Args:
        kind (StatusEffectType | str): The kind, as enum member or name.

    Returns:
        StatusEffect: A fresh effect instance.

    Raises:
        ValidationError: If the kind is not a supported status effect.

    """
    if kind is None:
        log_error("Cannot create a status effect without a kind")
        raise ValidationError("Status effect kind must not be None")
    if not isinstance(kind, StatusEffectType):
        try:
            kind = StatusEffectType(kind)
        except ValueError:
            log_error("Unsupported status effect kind", {"kind": kind})
            raise ValidationError(f"Unsupported status effect kind: {kind}") from None
    effect_class = _EFFECT_CLASSES.get(kind)
    if effect_class is None:
        log_error("No effect registered for kind", {"kind": kind})
        raise ValidationError(f"Unsupported status effect kind: {kind}")
    return effect_class()
