"""
Tunable combat rules.

CombatRules groups every number that shapes the battle economy and the
progression curve. Instances are passed explicitly to the resolver, the
leveling service and the reward hook; nothing reads them from a global.
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from battlesim.core.constants import (
    DEFEND_EP_COST,
    MAX_STATUS_EFFECTS,
    RECHARGE_EP_GAIN,
    WINS_PER_REWARD,
)
from battlesim.core.error_handling import ValidationError
from battlesim.core.logging import log_debug, log_error


class CombatRules(BaseModel):
    """Numeric rules for a battle and for the progression that follows it."""

    defend_ep_cost: int = Field(
        default=DEFEND_EP_COST,
        ge=0,
        description="EP spent by the universal Defend move.",
    )
    recharge_ep_gain: int = Field(
        default=RECHARGE_EP_GAIN,
        ge=0,
        description="EP restored by the universal Recharge move.",
    )
    max_status_effects: int = Field(
        default=MAX_STATUS_EFFECTS,
        ge=1,
        description="Maximum number of simultaneous status effects on a character.",
    )
    level_thresholds: dict[int, int] = Field(
        default_factory=lambda: {1: 0, 2: 100, 3: 250, 4: 450, 5: 700},
        description="Minimum cumulative XP required for each level.",
    )
    xp_base: int = Field(
        default=25,
        ge=0,
        description="Flat XP granted for any victory.",
    )
    xp_per_loser_level: int = Field(
        default=10,
        ge=0,
        description="Additional XP granted per level of the defeated opponent.",
    )
    hp_gain_per_level: int = Field(
        default=10,
        ge=0,
        description="Max HP gained for each level reached.",
    )
    ep_gain_per_level: int = Field(
        default=5,
        ge=0,
        description="Max EP gained for each level reached.",
    )
    wins_per_reward: int = Field(
        default=WINS_PER_REWARD,
        ge=1,
        description="A reward item is granted every time the win counter reaches a multiple of this.",
    )

    @field_validator("level_thresholds")
    @classmethod
    def _check_thresholds(cls, value: dict[int, int]) -> dict[int, int]:
        if not value:
            raise ValueError("level_thresholds must not be empty")
        levels = sorted(value)
        if levels[0] != 1 or value[1] != 0:
            raise ValueError("level_thresholds must start with level 1 at 0 XP")
        previous = -1
        for level in levels:
            if value[level] <= previous:
                raise ValueError("level_thresholds must be strictly ascending")
            previous = value[level]
        return dict(sorted(value.items()))

    @property
    def max_level(self) -> int:
        return max(self.level_thresholds)


def load_rules(path: Path) -> CombatRules:
    """
    Loads combat rules from a JSON file, falling back to defaults for every
    key the file does not mention.

    Args:
        path (Path): The JSON file containing rule overrides.

    Returns:
        CombatRules: The loaded rules.

    Raises:
        ValidationError: If the file is missing or holds invalid data.

    """
    if not path.is_file():
        log_error("Rules file not found", {"path": path})
        raise ValidationError(f"Rules file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        rules = CombatRules(**data)
    except (json.JSONDecodeError, TypeError, ValueError) as e:
        log_error("Invalid rules file", {"path": path, "error": e})
        raise ValidationError(f"File {path} raised an error: {e}") from e
    log_debug("Loaded combat rules", {"path": path})
    return rules
