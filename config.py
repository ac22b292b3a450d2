import os

DEFAULT_ORIGINS = 'http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173'


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated list shared by Flask-Cors and Flask-SocketIO
    CORS_ALLOWED_ORIGINS = [o.strip() for o in os.environ.get('CORS_ALLOWED_ORIGINS', DEFAULT_ORIGINS).split(',') if o.strip()]
    # Empty means the standard chess start position
    STARTING_FEN = os.environ.get('STARTING_FEN') or None
    # Piece a pawn promotes to when the client does not say
    DEFAULT_PROMOTION = os.environ.get('DEFAULT_PROMOTION', 'q')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
