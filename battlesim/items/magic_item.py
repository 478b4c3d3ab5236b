"""
Magic item module for the simulator.

Defines the items a character can carry: single-use consumables that trigger
an effect when used in battle, and passive items that grant a continuous
benefit while equipped.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from battlesim.core.constants import (
    MAX_EFFECT_VALUE,
    PassiveEffectType,
    RarityType,
    SingleUseEffectType,
    StatusEffectType,
)
from battlesim.core.error_handling import require_non_blank
from battlesim.core.logging import log_debug
from battlesim.effects.effect_factory import create_status_effect


class MagicItem(BaseModel):
    """Common data for every magic item."""

    item_type: str = Field(
        description="Discriminator for the concrete item class.",
    )
    name: str = Field(
        description="The name of the item.",
    )
    description: str = Field(
        description="A brief description of the item.",
    )
    rarity: RarityType = Field(
        default=RarityType.COMMON,
        description="The rarity tier the item drops from.",
    )

    def model_post_init(self, _: Any) -> None:
        require_non_blank(self.name, "item name")
        require_non_blank(self.description, "item description")

    @property
    def colored_name(self) -> str:
        return self.rarity.colorize(self.name)

    def copy_item(self) -> "MagicItem":
        """Returns an independent copy of this item."""
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.rarity.display_name})"


class SingleUseItem(MagicItem):
    """A consumable whose effect is applied once, after which it is removed."""

    item_type: Literal["SINGLE_USE"] = "SINGLE_USE"
    effect_type: SingleUseEffectType = Field(
        description="What the item does when used.",
    )
    effect_value: int = Field(
        ge=1,
        le=MAX_EFFECT_VALUE,
        description="Magnitude of the effect (HP, EP, percent of max HP, or damage).",
    )

    def apply_effect(self, user: Any, target: Any, log: Any) -> None:
        """
        Apply the item's effect and narrate it.

        Args:
            user (Character): The character using the item.
            target (Character): The opponent, relevant for damaging items.
            log (CombatLog): The log receiving the narration.

        """
        log_debug(
            f"Applying {self.name}",
            {"user": user.name, "effect": self.effect_type, "value": self.effect_value},
        )

        if self.effect_type == SingleUseEffectType.HEAL_HP:
            healed = user.heal(self.effect_value)
            log.add_entry(f"{user.name} uses {self.name} and restores {healed} HP!")
        elif self.effect_type == SingleUseEffectType.RESTORE_EP:
            gained = user.gain_ep(self.effect_value)
            log.add_entry(f"{user.name} uses {self.name} and gains {gained} EP!")
        elif self.effect_type == SingleUseEffectType.REVIVE:
            if user.is_alive():
                log.add_entry(f"{user.name} uses {self.name} but is already conscious.")
            else:
                restore = user.max_hp * self.effect_value // 100
                user.heal(restore)
                log.add_entry(f"{user.name} is revived by {self.name} with {restore} HP!")
        elif self.effect_type == SingleUseEffectType.GRANT_IMMUNITY:
            if user.add_status_effect(create_status_effect(StatusEffectType.IMMUNITY)):
                log.add_entry(f"{user.name} uses {self.name} and becomes immune to damage!")
            else:
                log.add_entry(f"{user.name} uses {self.name}, but nothing happens.")
        elif self.effect_type == SingleUseEffectType.DAMAGE:
            dealt = target.take_damage(self.effect_value)
            log.add_entry(
                f"{user.name} uses {self.name} and deals {dealt} damage to {target.name}!"
            )


class PassiveItem(MagicItem):
    """An equippable item granting a continuous benefit."""

    item_type: Literal["PASSIVE"] = "PASSIVE"
    passive_effect: PassiveEffectType = Field(
        default=PassiveEffectType.NONE,
        description="The benefit granted while equipped.",
    )


AnyMagicItem = Annotated[
    Union[SingleUseItem, PassiveItem],
    Field(discriminator="item_type"),
]
