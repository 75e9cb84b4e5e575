"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional
from flask import current_app

EXTENSION_KEY = 'daily_wordle'


def get_services():
    """GameServices attached to the current app by create_app."""
    return current_app.extensions[EXTENSION_KEY]['services']


def get_dispatch_table():
    """DispatchTable attached to the current app by create_app."""
    return current_app.extensions[EXTENSION_KEY]['dispatch']


def get_player_identity(data: Optional[Dict[str, Any]]) -> Optional[str]:
    """Extract the opaque player id from an event payload."""
    if not isinstance(data, dict):
        return None

    player_id = data.get('player_id')
    if player_id is None:
        return None

    player_id = str(player_id).strip()
    return player_id or None
