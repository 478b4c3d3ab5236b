"""
Tests for status effect serialization.
"""

import pytest

from battlesim.core.error_handling import ValidationError
from battlesim.effects.damage_over_time_effect import PoisonedEffect
from battlesim.effects.effect_serialization import deserialize_effect, serialize_effect
from battlesim.effects.shield_effect import ShieldedEffect


def test_serialized_effect_keeps_kind_and_remaining_duration():
    effect = PoisonedEffect(duration=2)
    data = serialize_effect(effect)
    assert data["kind"] == "POISONED"
    assert data["duration"] == 2

    restored = deserialize_effect(data)
    assert isinstance(restored, PoisonedEffect)
    assert restored.duration == 2
    assert restored.damage_per_turn == 5


def test_used_shield_stays_used():
    shield = ShieldedEffect()
    shield.absorb(5)
    restored = deserialize_effect(serialize_effect(shield))
    assert isinstance(restored, ShieldedEffect)
    assert restored.used


def test_deserialize_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        deserialize_effect({"kind": "BURNING", "duration": 1})


def test_deserialize_rejects_negative_duration():
    with pytest.raises(ValidationError):
        deserialize_effect({"kind": "STUNNED", "duration": -1})
