from typing import Dict, Optional

from .types import Role, Seat


class SeatRegistry:
    """First-come assignment of the two seats to connection ids.

    Anyone arriving while both seats are taken is a spectator. Spectators are
    not tracked here; they are just connections without a seat.
    """

    def __init__(self):
        self._seats: Dict[Seat, Optional[str]] = {Seat.FIRST: None, Seat.SECOND: None}

    def join(self, sid: str) -> Role:
        held = self.seat_of(sid)
        if held is not None:
            return Role.for_seat(held)
        for seat in (Seat.FIRST, Seat.SECOND):
            if self._seats[seat] is None:
                self._seats[seat] = sid
                return Role.for_seat(seat)
        return Role.SPECTATOR

    def leave(self, sid: str) -> Optional[Seat]:
        seat = self.seat_of(sid)
        if seat is not None:
            self._seats[seat] = None
        return seat

    def seat_of(self, sid: str) -> Optional[Seat]:
        for seat, occupant in self._seats.items():
            if occupant is not None and occupant == sid:
                return seat
        return None

    def occupant(self, seat: Seat) -> Optional[str]:
        return self._seats[seat]

    def is_vacant(self, seat: Seat) -> bool:
        return self.occupant(seat) is None

    def snapshot(self) -> Dict[str, bool]:
        """Occupancy by wire code, without exposing connection ids."""
        return {seat.value: not self.is_vacant(seat) for seat in self._seats}
