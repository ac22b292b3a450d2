from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)

SESSION_EXTENSION = 'chessroom'


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ALLOWED_ORIGINS') or []
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One live game per process, owned by the app rather than module globals
    from chessroom.services.session import ChessOracle, GameSession
    oracle = ChessOracle(default_promotion=flask_app.config.get('DEFAULT_PROMOTION', 'q'))
    flask_app.extensions[SESSION_EXTENSION] = GameSession(
        oracle=oracle,
        starting_fen=flask_app.config.get('STARTING_FEN'),
    )
    flask_app.logger.info(f"[session-created] fen={flask_app.extensions[SESSION_EXTENSION].snapshot()}")

    from chessroom.main import main
    flask_app.register_blueprint(main)

    # Register Socket.IO event handlers on the initialized socketio instance
    from chessroom.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app


def get_session(app=None):
    """The GameSession owned by ``app`` (or the current app)."""
    from flask import current_app
    app = app or current_app
    return app.extensions[SESSION_EXTENSION]
