from __future__ import annotations

import unittest

from tests.support import PROJECT_ROOT  # noqa: F401

from daily_wordle.models.game import LetterStatus
from daily_wordle.services.feedback import classify, classify_rows, render, render_board

C = LetterStatus.CORRECT
P = LetterStatus.PRESENT
A = LetterStatus.ABSENT


class ClassifyTests(unittest.TestCase):
    def test_near_miss(self):
        self.assertEqual(classify("crane", "crate"), [C, C, C, A, C])

    def test_exact_match(self):
        self.assertEqual(classify("crane", "crane"), [C] * 5)

    def test_no_common_letters(self):
        self.assertEqual(classify("crane", "ghost"), [A] * 5)

    def test_anagram_is_all_present(self):
        self.assertEqual(classify("slate", "tales"), [P, P, P, P, P])

    def test_repeated_letters_are_not_count_limited(self):
        # "crane" holds one "e", already matched at the end, yet the
        # earlier copies still read as present.
        self.assertEqual(classify("crane", "eerie"), [P, P, P, A, C])

    def test_correct_implies_same_letter(self):
        for secret, guess in [("abbey", "kebab"), ("pious", "opius"), ("slate", "tales")]:
            labels = classify(secret, guess)
            self.assertEqual(len(labels), 5)
            for i, label in enumerate(labels):
                if label is C:
                    self.assertEqual(guess[i], secret[i])

    def test_classify_rows(self):
        rows = classify_rows("crane", ["crate", "crane"])
        self.assertEqual(rows, [[C, C, C, A, C], [C] * 5])


class RenderTests(unittest.TestCase):
    def test_spoiler_free_hides_letters(self):
        row = render([C, P, A, A, C], "cream", spoiler_free=True)
        self.assertEqual(row, "\U0001F7E9\U0001F7E8\u2B1B\u2B1B\U0001F7E9")
        self.assertNotIn("C", row)

    def test_letter_render(self):
        self.assertEqual(render([C, P, A, A, C], "cxade"), "[C](X) A  D [E]")

    def test_board_has_one_line_per_guess(self):
        board = render_board("crane", ["crate", "ghost", "crane"], spoiler_free=True)
        self.assertEqual(len(board.splitlines()), 3)
        self.assertEqual(board.splitlines()[-1], "\U0001F7E9" * 5)

    def test_empty_board(self):
        self.assertEqual(render_board("crane", []), "")


if __name__ == "__main__":
    unittest.main()
