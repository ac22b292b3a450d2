from flask import Blueprint, jsonify

from chessroom import get_session

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the chessroom server!'})


@main.route('/api/session', methods=['GET'])
def session_state():
    """
    Returns the authoritative position, whose move it is and which seats are taken.
    """
    return jsonify(get_session().state())
