"""
Daily Wordle Application Package

A daily word puzzle played through chat interactions: one secret word per
day, one session per player per day, and lifetime stats per player.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, services=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        services: Prebuilt GameServices (tests); built from config_class when omitted

    Returns:
        Flask application instance with all extensions initialized
    """
    from .commands import build_dispatch_table
    from .services.container import build_services
    from .utils.game_logger import game_logger
    from .utils.helpers import EXTENSION_KEY

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_logger.configure(app.config['LOG_DIR'], app.config['LOG_LEVEL'])

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Game core and dispatch table
    if services is None:
        services = build_services(config_class)
    app.extensions[EXTENSION_KEY] = {
        'services': services,
        'dispatch': build_dispatch_table(services)
    }

    # Register blueprints
    from .controllers.interaction_controller import interaction_bp
    app.register_blueprint(interaction_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
