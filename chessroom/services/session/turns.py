from typing import Optional

from .types import Seat


class TurnAuthority:
    """Holds the move right. Two states, FIRST and SECOND, no terminal state."""

    def __init__(self, initial: Seat = Seat.FIRST):
        self._current = initial

    @property
    def current(self) -> Seat:
        return self._current

    def may_act(self, seat: Optional[Seat]) -> bool:
        return seat is not None and seat is self._current

    def advance(self) -> Seat:
        # Only called after an accepted action
        self._current = self._current.other
        return self._current
