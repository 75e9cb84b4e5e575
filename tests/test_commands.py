from __future__ import annotations

import unittest

from tests.support import make_live_services

from daily_wordle.commands import COMMANDS, Interaction, build_dispatch_table
from daily_wordle.errors import MESSAGES


class DispatchTableTests(unittest.TestCase):
    def setUp(self) -> None:
        self.services = make_live_services()
        self.table = build_dispatch_table(self.services)

    def command(self, name, player_id="p1", **options):
        return self.table.dispatch_command(Interaction(player_id=player_id, name=name, options=options))

    def typing(self, value, player_id="p1"):
        interaction = Interaction(player_id=player_id, name="guess", options={"word": value})
        return self.table.dispatch_autocomplete(interaction, "word")

    def test_routes_are_explicit(self):
        self.assertEqual(set(self.table.commands), {"wordle", "guess", "stats"})
        self.assertEqual({command["name"] for command in COMMANDS}, set(self.table.commands))

    def test_unknown_command(self):
        self.assertEqual(self.command("dance").content, MESSAGES["unknown_error"])

    def test_start_game_shows_empty_board(self):
        reply = self.command("wordle")
        self.assertTrue(reply.ephemeral)
        self.assertEqual(reply.content, "Wordle 0 0?/6\nPlay using `/guess`!")

    def test_hard_mode_marker(self):
        self.assertTrue(self.command("wordle", hard=True).content.startswith("Wordle 0* 0?/6"))

    def test_guess_before_start(self):
        self.assertEqual(self.command("guess", word="crate").content, MESSAGES["not_playing"])

    def test_message_key_submitted_as_guess(self):
        self.command("wordle")
        self.assertEqual(self.command("guess", word="continue").content, MESSAGES["continue"])
        self.assertEqual(self.services.sessions.get("p1").guesses, [])

    def test_invalid_guess_message(self):
        self.command("wordle")
        self.assertEqual(self.command("guess", word="ab").content, MESSAGES["continue"])
        self.assertEqual(self.command("guess", word="zzzzz").content, MESSAGES["unknown_word"])

    def test_guess_shows_board(self):
        self.command("wordle")
        reply = self.command("guess", word="crate")
        self.assertEqual(reply.content, "Wordle 0 1?/6\nPlay using `/guess`!\n\n[C][R][A] T [E]")
        self.assertEqual(reply.components, [])

    def test_winning_guess_offers_share_button(self):
        self.command("wordle")
        reply = self.command("guess", word="crane")

        self.assertTrue(reply.content.startswith("Wordle 0 1/6\n\n"))
        button = reply.components[0]["components"][0]
        self.assertEqual(button["custom_id"], "share:1,0,false,crane,crane")

    def test_render_target_gets_board_update(self):
        self.table.dispatch_command(Interaction(player_id="p1", name="wordle", render_target="board_p1"))
        reply = self.command("guess", word="crate")

        self.assertEqual(reply.content, "Guessed `crate`!")
        self.assertEqual(reply.render_target, "board_p1")
        self.assertTrue(reply.board_update["content"].startswith("Wordle 0 1?/6"))

    def test_finished_game_with_render_target_replies_with_board(self):
        self.table.dispatch_command(Interaction(player_id="p1", name="wordle", render_target="board_p1"))
        reply = self.command("guess", word="crane")

        self.assertTrue(reply.content.startswith("Wordle 0 1/6\n\n"))
        self.assertEqual(reply.components[0]["components"][0]["custom_id"], "share:1,0,false,crane,crane")
        self.assertEqual(reply.board_update["content"], reply.content)

    def test_already_played(self):
        self.command("wordle")
        self.command("guess", word="crane")
        reply = self.command("wordle")
        self.assertTrue(reply.content.startswith(MESSAGES["already_played"] + " Next Wordle: in "))

    def test_catalog_exhausted(self):
        self.services.clock.anchor_index = 100
        self.assertEqual(self.command("wordle").content, MESSAGES["out_of_words"])

    def test_stats(self):
        self.assertEqual(self.command("stats").content, MESSAGES["no_stats"])

        self.command("wordle")
        self.command("guess", word="crate")
        self.command("guess", word="crane")
        report = self.command("stats").content

        self.assertIn("**Played**: 1", report)
        self.assertIn("**Win %**: 100.0", report)
        self.assertIn("**Next Wordle**: in ", report)

    def test_live_typing_feedback(self):
        self.assertEqual(self.typing("cra").choices[0]["value"], "not_playing")

        self.command("wordle")
        self.assertEqual(self.typing("").choices[0]["value"], "type_something")
        self.assertEqual(self.typing("cr@").choices[0]["value"], "invalid_char")
        self.assertEqual(self.typing("cra").choices, [{"name": MESSAGES["continue"], "value": "continue"}])
        self.assertEqual(self.typing("cranes").choices[0]["value"], "too_long")
        self.assertEqual(self.typing("zzzzz").choices[0]["value"], "unknown_word")
        self.assertEqual(self.typing("CRATE").choices, [{"name": 'Submit "crate"?', "value": "crate"}])
        self.assertEqual(self.typing(None).choices[0]["value"], "unknown_error")

    def test_share_component(self):
        interaction = Interaction(player_id="p2", player_label="<@p2>",
                                  custom_id="share:1,0,false,crane,crate,crane")
        reply = self.table.dispatch_component(interaction)
        self.assertFalse(reply.ephemeral)
        self.assertTrue(reply.content.startswith("<@p2>'s Wordle 0 2/6\n\n"))

    def test_malformed_share_is_ignored(self):
        interaction = Interaction(player_id="p2", custom_id="share:1,0")
        self.assertIsNone(self.table.dispatch_component(interaction))

    def test_unknown_component_is_ignored(self):
        self.assertIsNone(self.table.dispatch_component(Interaction(player_id="p2", custom_id="vote:1")))


if __name__ == "__main__":
    unittest.main()
