"""
Ability module for the simulator.

An Ability is the immutable descriptor of a class-specific combat action. It
carries no behaviour of its own: AbilityMove interprets it in battle.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from battlesim.core.constants import (
    MAX_EFFECT_VALUE,
    MAX_EP_COST,
    AbilityEffectType,
    StatusEffectType,
)
from battlesim.core.error_handling import require_non_blank, require_not_none


class Ability(BaseModel):
    """
    Immutable description of a combat ability.

    Two abilities are equal when they share the same name.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The unique name of the ability.",
    )
    description: str = Field(
        description="A brief description of what the ability does.",
    )
    ep_cost: int = Field(
        ge=0,
        le=MAX_EP_COST,
        description="EP spent when the ability is used.",
    )
    effect_type: AbilityEffectType = Field(
        description="What the ability does when used.",
    )
    effect_value: int = Field(
        default=0,
        ge=0,
        le=MAX_EFFECT_VALUE,
        description="Magnitude of the effect (damage, HP or EP).",
    )
    status_effect: StatusEffectType | None = Field(
        default=None,
        description=(
            "Status effect attached by the ability. Required for APPLY_STATUS, "
            "optional for the other kinds."
        ),
    )

    def model_post_init(self, _: Any) -> None:
        require_non_blank(self.name, "ability name")
        require_non_blank(self.description, "ability description")
        if self.effect_type == AbilityEffectType.APPLY_STATUS:
            require_not_none(
                self.status_effect,
                "status effect (APPLY_STATUS)",
                {"ability": self.name},
            )

    @property
    def colored_name(self) -> str:
        return f"[bold yellow]{self.name}[/]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ability):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name
