class SessionError(Exception):
    """Base class for errors raised inside the session services."""


class OracleFault(SessionError):
    """The submitted action could not be interpreted at all (bad shape, bad square)."""


class IllegalAction(SessionError):
    """The action is well formed but not a legal move in the current position."""
