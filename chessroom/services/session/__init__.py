"""Session domain services: seats, turn authority and move processing.

Nothing in this package knows about Socket.IO or Flask. Socket handlers
resolve the connection id and hand plain Python values in, then fan out
whatever outcome comes back.
"""

from .errors import IllegalAction, OracleFault, SessionError
from .oracle import ChessOracle
from .processor import ActionProcessor
from .seats import SeatRegistry
from .session import GameSession
from .turns import TurnAuthority
from .types import Accepted, Errored, RejectReason, Rejected, Role, Seat

__all__ = [
    'Accepted',
    'ActionProcessor',
    'ChessOracle',
    'Errored',
    'GameSession',
    'IllegalAction',
    'OracleFault',
    'RejectReason',
    'Rejected',
    'Role',
    'Seat',
    'SeatRegistry',
    'SessionError',
    'TurnAuthority',
]
