import threading
from typing import Any, Callable, Dict, Optional

from .oracle import ChessOracle
from .processor import ActionProcessor
from .seats import SeatRegistry
from .turns import TurnAuthority
from .types import Action, Outcome, Role, Seat


class GameSession:
    """One live game: seats, move right and position behind a single lock.

    Every public method holds the lock for its whole run, which serialises
    connects, disconnects and moves in arrival order. ``submit`` also runs the
    caller's ``on_outcome`` callback under the lock so broadcasts leave in the
    same order the moves were accepted, and ``connect`` runs ``on_join`` under
    the lock so a joiner never receives a position older than a broadcast.
    """

    def __init__(self, oracle: Optional[ChessOracle] = None, starting_fen: Optional[str] = None):
        self.oracle = oracle or ChessOracle()
        position = self.oracle.initial_position(starting_fen)
        self.seats = SeatRegistry()
        # Keep the move right in step with the side to move of the start position
        self.turns = TurnAuthority(Seat.for_color(position.turn))
        self.processor = ActionProcessor(self.seats, self.turns, self.oracle, position)
        self.spectators = set()
        self._lock = threading.Lock()

    @property
    def position(self):
        return self.processor.position

    @property
    def move_right(self) -> Seat:
        return self.turns.current

    def connect(self, sid: str,
                on_join: Optional[Callable[[Role, str], None]] = None) -> Role:
        with self._lock:
            role = self.seats.join(sid)
            if role is Role.SPECTATOR:
                self.spectators.add(sid)
            if on_join is not None:
                # No move can land between this snapshot and the callback
                on_join(role, self.oracle.serialize(self.position))
            return role

    def disconnect(self, sid: str) -> Optional[Seat]:
        with self._lock:
            self.spectators.discard(sid)
            return self.seats.leave(sid)

    def seat_of(self, sid: str) -> Optional[Seat]:
        with self._lock:
            return self.seats.seat_of(sid)

    def submit(self, sid: str, action: Action,
               on_outcome: Optional[Callable[[Outcome], None]] = None) -> Outcome:
        with self._lock:
            outcome = self.processor.process(sid, action)
            if on_outcome is not None:
                on_outcome(outcome)
            return outcome

    def snapshot(self) -> str:
        with self._lock:
            return self.oracle.serialize(self.position)

    def state(self) -> Dict[str, Any]:
        with self._lock:
            return {
                'fen': self.oracle.serialize(self.position),
                'move_right': self.turns.current.value,
                'seats': self.seats.snapshot(),
                'spectators': len(self.spectators),
                'legal_moves': self.oracle.legal_moves(self.position),
            }
