"""
Status effect system for the battle simulator.

Contains the status effect lifecycle, the seven effect variants, the factory
mapping kinds to instances, and their serialization.
"""

from .base_effect import StatusEffect
from .damage_over_time_effect import PoisonedEffect
from .effect_factory import create_status_effect
from .effect_serialization import deserialize_effect, serialize_effect
from .incapacitating_effect import StunnedEffect
from .modifier_effect import DefenseUpEffect, EvadingEffect, ImmunityEffect, MarkedEffect
from .shield_effect import ShieldedEffect

__all__ = [
    "StatusEffect",
    "StunnedEffect",
    "PoisonedEffect",
    "DefenseUpEffect",
    "EvadingEffect",
    "ImmunityEffect",
    "ShieldedEffect",
    "MarkedEffect",
    "create_status_effect",
    "serialize_effect",
    "deserialize_effect",
]
