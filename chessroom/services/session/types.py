from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

import chess

# Client-submitted move payload, e.g. {'from': 'e2', 'to': 'e4', 'promotion': 'q'}
Action = Any


class Seat(str, Enum):
    """The two privileged seats. Values are the wire codes the client expects."""

    FIRST = 'w'
    SECOND = 'b'

    @property
    def other(self) -> 'Seat':
        return Seat.SECOND if self is Seat.FIRST else Seat.FIRST

    @classmethod
    def for_color(cls, color: chess.Color) -> 'Seat':
        return cls.FIRST if color == chess.WHITE else cls.SECOND


class Role(str, Enum):
    FIRST = 'w'
    SECOND = 'b'
    SPECTATOR = 'spectator'

    @classmethod
    def for_seat(cls, seat: Optional[Seat]) -> 'Role':
        if seat is None:
            return cls.SPECTATOR
        return cls(seat.value)


class RejectReason(str, Enum):
    # Sender does not hold the move right (spectator, or seated but out of turn)
    OUT_OF_TURN = 'out_of_turn'
    ILLEGAL = 'illegal'


@dataclass(frozen=True)
class Accepted:
    action: Action
    snapshot: str
    uci: str
    san: str
    seat: Seat


@dataclass(frozen=True)
class Rejected:
    action: Action
    reason: RejectReason

    @property
    def notify(self) -> bool:
        """Only illegal moves are reported back; out-of-turn submissions are dropped silently."""
        return self.reason is RejectReason.ILLEGAL


@dataclass(frozen=True)
class Errored:
    action: Action
    cause: Exception

    notify = True


Outcome = Union[Accepted, Rejected, Errored]
