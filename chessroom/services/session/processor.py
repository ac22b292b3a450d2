import chess

from .errors import IllegalAction, OracleFault
from .oracle import ChessOracle
from .seats import SeatRegistry
from .turns import TurnAuthority
from .types import Accepted, Action, Errored, Outcome, RejectReason, Rejected


class ActionProcessor:
    """Gate, validate and apply submitted actions.

    The processor is the only writer of ``position``. The new position and
    the move right are swapped together after the oracle has already
    succeeded, so a rejected or faulty action leaves both as they were.
    """

    def __init__(self, seats: SeatRegistry, turns: TurnAuthority, oracle: ChessOracle,
                 position: chess.Board):
        self.seats = seats
        self.turns = turns
        self.oracle = oracle
        self.position = position

    def process(self, sid: str, action: Action) -> Outcome:
        seat = self.seats.seat_of(sid)
        if not self.turns.may_act(seat):
            return Rejected(action, RejectReason.OUT_OF_TURN)

        try:
            result = self.oracle.legal_move(self.position, action)
        except OracleFault as exc:
            return Errored(action, exc)
        except IllegalAction:
            return Rejected(action, RejectReason.ILLEGAL)

        move = result.peek()
        san = self.position.san(move)
        snapshot = self.oracle.serialize(result)

        self.position = result
        self.turns.advance()
        return Accepted(action=action, snapshot=snapshot, uci=move.uci(), san=san, seat=seat)
