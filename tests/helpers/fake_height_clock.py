"""FakeHeightClock - controllable call context for deterministic tests.

Verification records the caller identity and logical height of the call.
This helper produces CallContext values and lets tests advance the height
or switch caller.

Usage:
    >>> clock = FakeHeightClock(caller="ST1TEST", height=100)
    >>> clock.context().height
    100
    >>> clock.advance(5)
    >>> clock.context().height
    105
    >>> clock.as_caller("ST2FAKE").caller
    'ST2FAKE'
"""

from __future__ import annotations

from provenance_verifier.domain.models.verification import CallContext


class FakeHeightClock:
    """Controllable caller identity and logical height."""

    def __init__(self, caller: str = "ST1TEST", height: int = 100) -> None:
        self._caller = caller
        self._height = height

    @property
    def height(self) -> int:
        return self._height

    def context(self) -> CallContext:
        """Context of a call made now by the current caller."""
        return CallContext(caller=self._caller, height=self._height)

    def as_caller(self, caller: str) -> CallContext:
        """Context of a call made now by another identity."""
        return CallContext(caller=caller, height=self._height)

    def advance(self, blocks: int = 1) -> None:
        """Move the logical height forward."""
        if blocks < 0:
            raise ValueError("Cannot move height backwards")
        self._height += blocks

    def switch_caller(self, caller: str) -> None:
        """Make subsequent contexts use another identity."""
        self._caller = caller
