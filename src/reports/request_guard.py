"""Last-request-wins guard for async loads.

Each load takes a token; only the most recently issued token is current,
so responses that arrive after a newer request are discarded.
"""

from __future__ import annotations


class RequestGuard:
    """Generation counter for superseding in-flight requests."""

    def __init__(self) -> None:
        self._generation = 0

    def issue(self) -> int:
        """Start a new request and return its token."""
        self._generation += 1
        return self._generation

    def is_current(self, token: int) -> bool:
        """Return whether no newer request was issued after ``token``."""
        return token == self._generation
