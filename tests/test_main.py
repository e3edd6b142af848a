import os
import tempfile
import unittest
from unittest.mock import patch

from src.main import main


class TestMain(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        env = {
            "RECORD_KEEPER_INVENTORY_FILE": os.path.join(self._tmp.name, "inventory.json"),
            "RECORD_KEEPER_RESULTS_FILE": os.path.join(self._tmp.name, "results.txt"),
        }
        self._env = patch.dict(os.environ, env)
        self._env.start()

    def tearDown(self) -> None:
        self._env.stop()
        self._tmp.cleanup()

    def test_single_demo_without_settings_runs(self) -> None:
        with patch("builtins.print"):
            self.assertEqual(main(["warehouse"]), 0)

    def test_unknown_demo_exits_with_error(self) -> None:
        with patch("builtins.print"):
            self.assertEqual(main(["payroll"]), 2)

    def test_all_demos_run(self) -> None:
        with patch("builtins.print"):
            self.assertEqual(main([]), 0)

        self.assertTrue(os.path.exists(os.environ["RECORD_KEEPER_INVENTORY_FILE"]))

    def test_students_demo_writes_results(self) -> None:
        answers = iter(["1", "Esi", "20", "91"])
        with patch("builtins.input", side_effect=lambda prompt="": next(answers)), patch("builtins.print"):
            self.assertEqual(main(["students"]), 0)

        with open(os.environ["RECORD_KEEPER_RESULTS_FILE"], encoding="utf-8") as f:
            self.assertIn("Grade: A", f.read())
