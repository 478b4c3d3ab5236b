"""
Serialization of status effects.

Effects are stored as plain dictionaries keyed by their `kind`, which pydantic
uses as the discriminator to rebuild the right class, remaining duration and
shield state included.
"""

from typing import Annotated, Any, Union

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from battlesim.core.error_handling import ValidationError
from battlesim.core.logging import log_error

from .base_effect import StatusEffect
from .damage_over_time_effect import PoisonedEffect
from .incapacitating_effect import StunnedEffect
from .modifier_effect import DefenseUpEffect, EvadingEffect, ImmunityEffect, MarkedEffect
from .shield_effect import ShieldedEffect

AnyStatusEffect = Annotated[
    Union[
        StunnedEffect,
        PoisonedEffect,
        DefenseUpEffect,
        EvadingEffect,
        ImmunityEffect,
        ShieldedEffect,
        MarkedEffect,
    ],
    Field(discriminator="kind"),
]

_adapter: TypeAdapter = TypeAdapter(AnyStatusEffect)


def serialize_effect(effect: StatusEffect) -> dict[str, Any]:
    """
    Serialize a status effect to a JSON-friendly dictionary.

    Args:
        effect (StatusEffect): The effect to serialize.

    Returns:
        dict[str, Any]: The dictionary representation.

    """
    return effect.model_dump(mode="json")


def deserialize_effect(data: dict[str, Any]) -> StatusEffect:
    """
    Rebuild a status effect from its dictionary representation.

    Args:
        data (dict[str, Any]): The dictionary produced by serialize_effect.

    Returns:
        StatusEffect: The restored effect.

    Raises:
        ValidationError: If the data does not describe a known effect.

    """
    try:
        return _adapter.validate_python(data)
    except PydanticValidationError as e:
        log_error("Failed to deserialize status effect", {"data": data})
        raise ValidationError(f"Invalid status effect data: {data}") from e
