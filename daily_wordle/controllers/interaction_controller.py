"""
Interaction Controller

HTTP surface for the chat platform: every slash command, autocomplete
request and button press arrives at one endpoint and is routed through the
dispatch table.
"""

from flask import Blueprint, request, jsonify, current_app

from ..commands import COMMANDS, Interaction
from ..utils.decorators import require_player
from ..utils.game_logger import game_logger
from ..utils.helpers import get_dispatch_table, get_services

interaction_bp = Blueprint('interactions', __name__)

INTERACTION_TYPES = ('command', 'autocomplete', 'component')


def _interaction_from(data, player_id):
    options = data.get('options') or {}
    if not isinstance(options, dict):
        options = {}
    return Interaction(
        player_id=player_id,
        name=data.get('name', ''),
        options=options,
        player_label=data.get('player_label'),
        render_target=data.get('render_target'),
        custom_id=data.get('custom_id')
    )


def room_has_watchers(socketio, room, namespace='/') -> bool:
    """True when at least one connected client has joined ``room``."""
    rooms = socketio.server.manager.rooms.get(namespace, {})
    return bool(rooms.get(room))


def push_board_update(reply) -> bool:
    """
    Send the updated board to the player's render target.

    Returns False when there is no target or nobody is watching it, in which
    case the caller has to deliver the board in its own reply.
    """
    if reply.render_target is None or reply.board_update is None:
        return False

    socketio = getattr(current_app, 'socketio', None)
    if socketio is None or not room_has_watchers(socketio, reply.render_target):
        return False

    socketio.emit('board_update', reply.board_update, to=reply.render_target)
    return True


@interaction_bp.route('/interactions', methods=['POST'])
@require_player
def handle_interaction():
    """Route a platform interaction to its handler."""
    player_id = request.player_id
    data = request.get_json(silent=True) or {}
    interaction_type = data.get('type', 'command')
    action = f"{interaction_type}:{data.get('name') or data.get('custom_id', '')}"

    try:
        if interaction_type not in INTERACTION_TYPES:
            error_response = {
                'success': False,
                'error': f'Invalid interaction type. Must be one of {", ".join(INTERACTION_TYPES)}'
            }
            game_logger.log_server_response(player_id, action, False, error_response)
            return jsonify(error_response), 400

        game_logger.log_player_action(player_id, action, options=data.get('options'))

        dispatch = get_dispatch_table()
        interaction = _interaction_from(data, player_id)

        if interaction_type == 'autocomplete':
            reply = dispatch.dispatch_autocomplete(interaction, data.get('focused', 'word'))
            response_data = {'success': True, 'choices': reply.choices}
            game_logger.log_server_response(player_id, action, True, response_data)
            return jsonify(response_data)

        if interaction_type == 'component':
            reply = dispatch.dispatch_component(interaction)
            if reply is None:
                response_data = {'success': True, 'ignored': True}
                game_logger.log_server_response(player_id, action, True, response_data)
                return jsonify(response_data)
        else:
            reply = dispatch.dispatch_command(interaction)

        board_pushed = push_board_update(reply)
        response_data = {
            'success': True,
            'reply': reply.to_dict(),
            'board_pushed': board_pushed
        }
        if reply.board_update is not None and not board_pushed:
            # No live target to edit; fall back to replying with the board
            response_data['reply'] = {**reply.board_update}

        game_logger.log_server_response(player_id, action, True, response_data['reply'])
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(player_id, e, action)
        error_response = {
            'success': False,
            'error': 'Unknown Error!'
        }
        game_logger.log_server_response(player_id, action, False, error_response)
        return jsonify(error_response), 500


@interaction_bp.route('/commands', methods=['GET'])
def list_commands():
    """Command schema for registration with the chat platform."""
    return jsonify({'success': True, 'commands': COMMANDS})


@interaction_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        services = get_services()
        clock = services.clock

        response_data = {
            'status': 'healthy',
            'puzzle_index': clock.current_index(),
            'next_puzzle_at': clock.next_index_epoch_seconds(),
            'words_remaining': max(0, services.catalog.size - clock.current_index()),
            'active_games': services.sessions.active_count(),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(None, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(None, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(None, 'health_check', False, error_response)
        return jsonify(error_response), 500
