"""
Player Identity Decorators

Player authentication belongs to the chat platform; these decorators only
require that every event names the player it comes from.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit

from .helpers import get_player_identity


def require_player(f):
    """
    Decorator to require a player id in the JSON body of an HTTP request.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        data = request.get_json(silent=True)
        player_id = get_player_identity(data)
        if not player_id:
            return jsonify({
                'success': False,
                'error': 'player_id is required'
            }), 400

        request.player_id = player_id
        return f(*args, **kwargs)

    return decorated_function


def websocket_player_required(f):
    """Decorator requiring a player id in the first WebSocket event argument."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        player_id = get_player_identity(args[0] if args else None)
        if not player_id:
            emit('error', {'error': 'player_id is required'})
            return

        kwargs['player_id'] = player_id
        return f(*args, **kwargs)

    return decorated_function
