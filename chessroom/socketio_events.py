from flask import current_app, request
from flask_socketio import emit

from chessroom import get_session, socketio
from chessroom.services.session import Accepted, Errored, Role
from chessroom.services.session.types import Outcome

NAMESPACE = '/'


def handle_connect(auth=None):
    sid = _get_sid()
    get_session().connect(sid, on_join=lambda role, fen: _announce(sid, role, fen))


def _announce(sid: str, role: Role, fen: str) -> None:
    """Tell a joiner its role and the current position. Runs under the session lock."""
    current_app.logger.info(f"[connect] sid={sid} role={role.value}")
    if role is Role.SPECTATOR:
        emit('spectatorRole')
    else:
        emit('playerRole', role.value)
    # Late joiners and reconnects start from the authoritative position
    emit('boardState', fen)


def handle_disconnect(reason=None):
    sid = _get_sid()
    seat = get_session().disconnect(sid)
    if seat is not None:
        current_app.logger.info(f"[disconnect] sid={sid} vacated seat={seat.value}")
    else:
        current_app.logger.info(f"[disconnect] sid={sid} spectator")


def handle_move(move):
    sid = _get_sid()
    get_session().submit(sid, move, on_outcome=lambda outcome: _fan_out(sid, outcome))


def _fan_out(sid: str, outcome: Outcome) -> None:
    """Publish an outcome. Runs under the session lock, so order matches acceptance order."""
    if isinstance(outcome, Accepted):
        current_app.logger.info(
            f"[move-accepted] sid={sid} seat={outcome.seat.value} uci={outcome.uci} san={outcome.san}"
        )
        socketio.emit('move', outcome.action, namespace=NAMESPACE)
        socketio.emit('boardState', outcome.snapshot, namespace=NAMESPACE)
        return

    if not outcome.notify:
        # Out of turn or no seat: dropped without telling the sender
        current_app.logger.debug(f"[move-dropped] sid={sid} move={outcome.action!r}")
        return

    if isinstance(outcome, Errored):
        current_app.logger.warning(f"[move-errored] sid={sid} move={outcome.action!r} cause={outcome.cause}")
    else:
        current_app.logger.info(f"[move-rejected] sid={sid} move={outcome.action!r} reason={outcome.reason.value}")

    # A sender that has already gone away simply never receives this
    socketio.emit('invalidMove', outcome.action, to=sid, namespace=NAMESPACE)


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the default namespace."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('move', handle_move, namespace=NAMESPACE)
