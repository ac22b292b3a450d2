"""Rules oracle backed by python-chess.

The session never touches a board directly. It asks the oracle for the
position that results from an action and swaps its reference only when that
succeeds, so a failed call can never leave a half-applied move behind.
"""
from collections.abc import Mapping
from typing import Optional

import chess

from .errors import IllegalAction, OracleFault
from .types import Action

PROMOTION_PIECES = {
    'q': chess.QUEEN,
    'r': chess.ROOK,
    'b': chess.BISHOP,
    'n': chess.KNIGHT,
}


class ChessOracle:
    def __init__(self, default_promotion: str = 'q'):
        if default_promotion not in PROMOTION_PIECES:
            raise ValueError(f"Unknown promotion piece {default_promotion!r}")
        self.default_promotion = default_promotion

    def initial_position(self, fen: Optional[str] = None) -> chess.Board:
        if not fen:
            return chess.Board()
        return self.deserialize(fen)

    def serialize(self, position: chess.Board) -> str:
        return position.fen()

    def deserialize(self, fen: str) -> chess.Board:
        try:
            return chess.Board(fen)
        except ValueError as exc:
            raise OracleFault(f"Invalid FEN {fen!r}: {exc}") from exc

    def parse(self, position: chess.Board, action: Action) -> chess.Move:
        """Turn a client payload into a concrete move for ``position``.

        Raises OracleFault when the payload is not a move description at all.
        """
        if not isinstance(action, Mapping):
            raise OracleFault(f"Move must be an object, got {type(action).__name__}")

        from_name = action.get('from')
        to_name = action.get('to')
        if not isinstance(from_name, str) or not isinstance(to_name, str):
            raise OracleFault("Move requires 'from' and 'to' square names")

        try:
            from_square = chess.parse_square(from_name.strip().lower())
            to_square = chess.parse_square(to_name.strip().lower())
        except ValueError as exc:
            raise OracleFault(f"Unknown square in move {from_name!r}->{to_name!r}") from exc

        promotion = None
        if self._is_promotion(position, from_square, to_square):
            letter = action.get('promotion') or self.default_promotion
            if not isinstance(letter, str) or letter.lower() not in PROMOTION_PIECES:
                raise OracleFault(f"Unknown promotion piece {letter!r}")
            promotion = PROMOTION_PIECES[letter.lower()]

        return chess.Move(from_square, to_square, promotion=promotion)

    def legal_move(self, position: chess.Board, action: Action) -> chess.Board:
        """Return a new position with ``action`` applied.

        ``position`` itself is left untouched. Raises IllegalAction when the
        move is not legal for the side to move.
        """
        move = self.parse(position, action)
        if not position.is_legal(move):
            raise IllegalAction(f"{move.uci()} is not legal in {position.fen()}")
        result = position.copy()
        result.push(move)
        return result

    def legal_moves(self, position: chess.Board) -> list[str]:
        return sorted(move.uci() for move in position.legal_moves)

    @staticmethod
    def _is_promotion(position: chess.Board, from_square: int, to_square: int) -> bool:
        piece = position.piece_at(from_square)
        if piece is None or piece.piece_type != chess.PAWN:
            return False
        last_rank = 7 if piece.color == chess.WHITE else 0
        return chess.square_rank(to_square) == last_rank
