from __future__ import annotations

import unittest

from tests.support import PROJECT_ROOT  # noqa: F401

from daily_wordle.errors import MalformedShareTokenError
from daily_wordle.models.game import GameOutcome, ShareRecord
from daily_wordle.services.share import decode, encode, render_share


class EncodeTests(unittest.TestCase):
    def test_token_layout(self):
        token = encode(GameOutcome.WON, 236, True, "crane", ["crate", "crane"])
        self.assertEqual(token, "1,236,true,crane,crate,crane")

    def test_lost_code(self):
        token = encode(GameOutcome.LOST, 5, False, "slate", ["ghost"] * 6)
        self.assertTrue(token.startswith("2,5,false,slate,"))
        self.assertEqual(len(token.split(",")), 10)


class DecodeTests(unittest.TestCase):
    def test_round_trip(self):
        cases = [
            (GameOutcome.WON, 236, True, "crane", ["crate", "crane"]),
            (GameOutcome.LOST, 1, False, "slate", ["ghost", "plumb", "dwarf", "adieu", "trace", "crate"]),
            (GameOutcome.WON, 0, False, "crane", []),
        ]
        for case in cases:
            with self.subTest(case=case):
                self.assertEqual(decode(encode(*case)), ShareRecord(*case))

    def test_too_few_fields(self):
        for token in ["", "1", "1,236", "1,236,true"]:
            with self.subTest(token=token):
                with self.assertRaises(MalformedShareTokenError):
                    decode(token)

    def test_unparseable_fields(self):
        for token in ["x,236,true,crane,crane", "1,abc,true,crane,crane",
                      "0,236,true,crane", "3,236,true,crane,crane"]:
            with self.subTest(token=token):
                with self.assertRaises(MalformedShareTokenError):
                    decode(token)


class RenderShareTests(unittest.TestCase):
    def test_public_render_hides_secret(self):
        record = decode("1,236,true,crane,crate,crane")
        text = render_share(record, "<@42>")

        header, _, board = text.partition("\n\n")
        self.assertEqual(header, "<@42>'s Wordle 236 2/6*")
        self.assertEqual(board.splitlines(), [
            "\U0001F7E9\U0001F7E9\U0001F7E9\u2B1B\U0001F7E9",
            "\U0001F7E9" * 5,
        ])
        self.assertNotIn("crane", text.lower())

    def test_lost_render(self):
        record = decode("2,7,false,crane," + ",".join(["ghost"] * 6))
        header = render_share(record, "sam").splitlines()[0]
        self.assertEqual(header, "sam's Wordle 7 X/6")


if __name__ == "__main__":
    unittest.main()
