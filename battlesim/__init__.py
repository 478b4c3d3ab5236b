"""
Battle simulator package.

This package contains all the modules of the turn-based duel simulator,
including character management, status effects, items, battle actions, turn
resolution, progression and computer-controlled opponents.
"""
