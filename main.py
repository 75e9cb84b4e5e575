"""
Daily Wordle Server - Main Entry Point

This is the main entry point for the daily puzzle server.
It initializes all services and starts the Flask-SocketIO application.
"""

import argparse
import json

from daily_wordle import create_app
from daily_wordle.commands import COMMANDS
from daily_wordle.config import config
from daily_wordle.errors import PersistenceError
from daily_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    parser = argparse.ArgumentParser(description="Daily Wordle server")
    parser.add_argument('--env', default='default', choices=sorted(config.keys()),
                        help="Configuration profile")
    parser.add_argument('--print-commands', action='store_true',
                        help="Print the command schema for platform registration and exit")
    args = parser.parse_args()

    if args.print_commands:
        print(json.dumps(COMMANDS, indent=2))
        return

    config_class = config[args.env]

    try:
        print("Initializing services...")
        app, socketio = create_app(config_class)
        services = app.extensions['daily_wordle']['services']
        print("✓ Flask application created successfully")
        print(f"✓ Puzzle {services.clock.current_index()} active, {services.catalog.size} daily words loaded")

        game_logger.logger.info("Daily Wordle Server Starting")

        print(f"\nStarting Daily Wordle Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Persistent stats: {bool(config_class.MONGO_URI)}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Daily Wordle Server shutting down (KeyboardInterrupt)")
    except PersistenceError as e:
        print(f"✗ Stats store unavailable: {e}")
        game_logger.logger.error(f"Stats store unavailable: {e}")
        raise
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
