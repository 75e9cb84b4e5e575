"""
WebSocket Event Handlers

Live board updates and as-you-type guess validation.
"""

from flask_socketio import emit, join_room

from ..commands import Interaction
from ..utils.decorators import websocket_player_required
from ..utils.game_logger import game_logger
from ..utils.helpers import get_dispatch_table, get_services


def board_room(player_id: str) -> str:
    return f"board_{player_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('watch_board')
    @websocket_player_required
    def handle_watch_board(data, player_id=None):
        """
        Join the player's board room and make it the render target.

        Resumes (or starts) today's game so the room becomes the target of
        every later board update.
        """
        try:
            room = board_room(player_id)
            join_room(room)
            game_logger.log_player_action(player_id, 'watch_board', source='socket')

            interaction = Interaction(
                player_id=player_id,
                name='wordle',
                options={'hard': bool(data.get('hard', False))},
                render_target=room
            )
            reply = get_dispatch_table().dispatch_command(interaction)
            emit('board_update', reply.to_dict())

        except Exception as e:
            game_logger.log_error(player_id, e, 'watch_board')
            emit('error', {'error': 'Unknown Error!'})

    @socketio.on('guess_typing')
    @websocket_player_required
    def handle_guess_typing(data, player_id=None):
        """Validate a partially typed guess and reply with a single hint."""
        try:
            interaction = Interaction(
                player_id=player_id,
                name='guess',
                options={'word': data.get('value')}
            )
            reply = get_dispatch_table().dispatch_autocomplete(interaction, 'word')
            emit('guess_hint', {'choices': reply.choices})

        except Exception as e:
            game_logger.log_error(player_id, e, 'guess_typing')
            emit('error', {'error': 'Unknown Error!'})

    @socketio.on('session_status')
    @websocket_player_required
    def handle_session_status(data, player_id=None):
        """Report whether the player has a live session."""
        sessions = get_services().sessions
        session = sessions.get(player_id)
        emit('session_status', {
            'playing': session is not None,
            'puzzle_index': session.puzzle_index if session else None,
            'guesses_used': len(session.guesses) if session else 0
        })
