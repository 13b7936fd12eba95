"""Nestable lock flag used by buttons and pop-up clouds."""

from __future__ import annotations


class Lockable:
    """An item that can be locked one or more times.

    The lock depth is kept as the power of two in ``param``; other factors
    of ``param`` are free for subclasses to use as flags.
    """

    def __init__(self, param: int = 1) -> None:
        self.param = param

    def is_free(self) -> bool:
        """Return True when no lock is held."""
        return self.param % 2 == 1

    def unsafe_lock(self) -> None:
        """Add a lock level even if already locked."""
        self.param *= 2

    def safe_lock(self) -> None:
        """Lock only if currently free."""
        if self.is_free():
            self.param *= 2

    def unlock(self) -> None:
        """Remove one lock level, if any."""
        if not self.is_free():
            self.param //= 2