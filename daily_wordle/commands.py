"""
Command Dispatch Table

Maps command names, autocomplete targets and component ids onto handler
functions. The table is built once at startup around a GameServices instance
and handed to whichever interaction surface delivers player events.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .config.game_settings import MAX_GUESSES
from .errors import (
    MESSAGES,
    AlreadyPlayedTodayError,
    CatalogExhaustedError,
    DailyWordleError,
    MalformedShareTokenError,
)
from .models.game import GameOutcome, Session
from .services import share
from .services.container import GameServices
from .services.feedback import render_board
from .utils.game_logger import game_logger

COMMANDS = [
    {
        "name": "wordle",
        "description": "Start playing today's Wordle!",
        "options": [
            {
                "name": "hard",
                "description": "Hard mode toggle (default: off)",
                "required": False,
                "type": "BOOLEAN",
            },
        ],
    },
    {
        "name": "stats",
        "description": "View your Wordle stats!",
    },
    {
        "name": "guess",
        "description": "Start guessing the word!",
        "options": [
            {
                "name": "word",
                "description": "Your guess. Watch out for autocompletions!",
                "required": True,
                "type": "STRING",
                "autocomplete": True,
            },
        ],
    },
]


@dataclass
class Interaction:
    """One player event as delivered by the interaction layer."""
    player_id: str
    name: str = ""
    options: Dict[str, Any] = field(default_factory=dict)
    player_label: Optional[str] = None
    render_target: Optional[Any] = None
    custom_id: Optional[str] = None


@dataclass
class Reply:
    content: str
    ephemeral: bool = True
    components: List[Dict[str, Any]] = field(default_factory=list)
    choices: List[Dict[str, str]] = field(default_factory=list)
    # Board edit for the player's render target, when the reply itself is short
    render_target: Optional[Any] = None
    board_update: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'content': self.content,
            'ephemeral': self.ephemeral,
            'components': self.components
        }
        if self.choices:
            data['choices'] = self.choices
        return data


def game_to_string(session: Session, secret: str, outcome: GameOutcome = GameOutcome.ACTIVE) -> str:
    """Board message: header with the score so far, then the lettered board."""
    if outcome is GameOutcome.ACTIVE:
        progress = f"{len(session.guesses)}?/{MAX_GUESSES}\nPlay using `/guess`!"
    else:
        progress = share.score_label(outcome, len(session.guesses))

    header = f"Wordle {session.puzzle_index}{'*' if session.hard_mode else ''} {progress}"
    return f"{header}\n\n{render_board(secret, session.guesses)}".strip()


def share_button(token: str) -> Dict[str, Any]:
    return {
        "type": "ACTION_ROW",
        "components": [
            {
                "type": "BUTTON",
                "label": "Share",
                "style": "BLURPLE",
                "custom_id": f"{share.SHARE_PREFIX}{token}",
            }
        ],
    }


def _choice(message_key: str) -> Dict[str, str]:
    return {"name": MESSAGES[message_key], "value": message_key}


class DispatchTable:
    """
    Explicit routing for the three kinds of player events:

    - ``commands``: slash command name -> handler
    - ``autocomplete``: (command, option) -> live validation handler
    - ``components``: custom id prefix -> handler
    """

    def __init__(self, services: GameServices):
        self.services = services
        self.commands: Dict[str, Callable[[Interaction], Reply]] = {
            "wordle": self.start_game,
            "guess": self.submit_guess,
            "stats": self.view_stats,
        }
        self.autocomplete: Dict[tuple, Callable[[Interaction], Reply]] = {
            ("guess", "word"): self.validate_typing,
        }
        self.components: Dict[str, Callable[[Interaction], Optional[Reply]]] = {
            share.SHARE_PREFIX: self.post_share,
        }

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def dispatch_command(self, interaction: Interaction) -> Reply:
        handler = self.commands.get(interaction.name)
        if handler is None:
            return Reply(MESSAGES['unknown_error'])
        return handler(interaction)

    def dispatch_autocomplete(self, interaction: Interaction, option: str) -> Reply:
        handler = self.autocomplete.get((interaction.name, option))
        if handler is None:
            return Reply("", choices=[_choice('unknown_error')])
        return handler(interaction)

    def dispatch_component(self, interaction: Interaction) -> Optional[Reply]:
        custom_id = interaction.custom_id or ""
        for prefix, handler in self.components.items():
            if custom_id.startswith(prefix):
                return handler(interaction)
        return None

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def start_game(self, interaction: Interaction) -> Reply:
        """start-game(hardMode?)"""
        hard = bool(interaction.options.get("hard") or False)
        try:
            session = self.services.sessions.start(
                interaction.player_id, hard_mode=hard, render_target=interaction.render_target
            )
        except AlreadyPlayedTodayError:
            return Reply(
                f"{MESSAGES['already_played']} Next Wordle: "
                f"{self.services.clock.format_countdown()}"
            )
        except CatalogExhaustedError as e:
            return Reply(e.user_message)

        return Reply(game_to_string(session, self.services.sessions.secret_for(session)))

    def submit_guess(self, interaction: Interaction) -> Reply:
        """submit-guess(word)"""
        word = str(interaction.options.get("word") or "")

        # Autocomplete hands back message keys as values; echo the message
        if word in MESSAGES:
            return Reply(MESSAGES[word])

        try:
            result = self.services.sessions.guess(interaction.player_id, word)
        except DailyWordleError as e:
            return Reply(e.user_message)

        secret = self.services.catalog.word_for(result.session.puzzle_index)
        board = game_to_string(result.session, secret, result.outcome)
        components = [share_button(result.share_token)] if result.share_token else []

        target = result.session.render_target
        if target is None:
            return Reply(board, components=components)

        board_update = {'content': board, 'ephemeral': True, 'components': components}
        if result.finished:
            # The outcome and share button always come back with the reply
            return Reply(board, components=components, render_target=target, board_update=board_update)

        return Reply(
            f"Guessed `{result.session.guesses[-1]}`!",
            render_target=target,
            board_update=board_update
        )

    def view_stats(self, interaction: Interaction) -> Reply:
        """view-stats()"""
        try:
            stats = self.services.stats.get(interaction.player_id)
        except DailyWordleError as e:
            return Reply(e.user_message)

        if stats is None:
            return Reply(MESSAGES['no_stats'])
        return Reply(self.services.stats.summary_report(stats, self.services.clock))

    def validate_typing(self, interaction: Interaction) -> Reply:
        """Live feedback while the player types a guess."""
        value = interaction.options.get("word")
        if value is None:
            return Reply("", choices=[_choice('unknown_error')])

        if not self.services.sessions.is_playing(interaction.player_id):
            return Reply("", choices=[_choice('not_playing')])

        is_valid, reason = self.services.catalog.validate_guess(value)
        if not is_valid:
            return Reply("", choices=[_choice(reason)])

        word = value.lower()
        return Reply("", choices=[{"name": f'Submit "{word}"?', "value": word}])

    def post_share(self, interaction: Interaction) -> Optional[Reply]:
        """Public, spoiler-free repost of a finished game."""
        token = (interaction.custom_id or "")[len(share.SHARE_PREFIX):]
        try:
            record = share.decode(token)
        except MalformedShareTokenError as e:
            game_logger.log_game_event(interaction.player_id, 'share_ignored', reason=str(e))
            return None

        label = interaction.player_label or interaction.player_id
        return Reply(share.render_share(record, label), ephemeral=False)


def build_dispatch_table(services: GameServices) -> DispatchTable:
    return DispatchTable(services)
