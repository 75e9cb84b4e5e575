from __future__ import annotations

import threading
import unittest

from tests.support import day, make_services

from daily_wordle.utils.locks import KeyedLock


class KeyedLockTests(unittest.TestCase):
    def test_registry_is_empty_after_release(self):
        locks = KeyedLock()
        with locks.hold("p1"):
            self.assertEqual(len(locks), 1)
        self.assertEqual(len(locks), 0)

    def test_entry_released_when_body_raises(self):
        locks = KeyedLock()
        with self.assertRaises(RuntimeError):
            with locks.hold("p1"):
                raise RuntimeError("boom")
        self.assertEqual(len(locks), 0)

    def test_same_key_is_exclusive(self):
        locks = KeyedLock()
        inside = []
        overlaps = []
        barrier = threading.Barrier(8)

        def work():
            barrier.wait()
            with locks.hold("p1"):
                inside.append(1)
                if len(inside) > 1:
                    overlaps.append(True)
                inside.pop()

        threads = [threading.Thread(target=work) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(overlaps, [])
        self.assertEqual(len(locks), 0)

    def test_unknown_players_leave_no_entries(self):
        services = make_services()
        for i in range(1000):
            self.assertIsNone(services.sessions.get(f"stranger-{i}"))
        self.assertEqual(len(services.sessions._locks), 0)

        services.sessions.start("p1", now=day(0))
        services.sessions.guess("p1", "crane")
        self.assertEqual(len(services.sessions._locks), 0)
        self.assertEqual(len(services.stats._locks), 0)


if __name__ == "__main__":
    unittest.main()
