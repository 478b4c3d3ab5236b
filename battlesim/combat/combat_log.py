"""
Combat log for the simulator.

An append-only, ordered record of the narration of one battle. Writers are
serialized by a lock and readers only ever get immutable snapshots, so a
display polling the log never sees a half-written round.
"""

import threading

from battlesim.core.error_handling import require_non_blank


class CombatLog:
    """
    Ordered narration of a battle.

    Attributes:
        _entries (list[str]):
            The narration lines, in insertion order.

    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._lock = threading.Lock()

    def add_entry(self, text: str) -> None:
        """
        Append a narration line.

        Args:
            text (str):
                The line to append.

        Raises:
            ValidationError:
                If the text is None or blank.

        """
        require_non_blank(text, "log entry")
        with self._lock:
            self._entries.append(text)

    def snapshot(self) -> tuple[str, ...]:
        """
        Return an immutable copy of the log.

        Returns:
            tuple[str, ...]:
                Every line, in insertion order.

        """
        with self._lock:
            return tuple(self._entries)

    def clear(self) -> None:
        """Remove every entry. Only done when a battle is created."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
