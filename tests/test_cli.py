import json
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from phrasenet.cli import app


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_build_writes_json(self):
        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "net.json"
            res = self.runner.invoke(
                app,
                ["build", "--text", "The cat sat. The cat ran.", "--relation", "window", "--window-size", "2", "--out", str(out)],
            )
            self.assertEqual(res.exit_code, 0, res.output)
            self.assertIn("cat", res.output)
            data = json.loads(out.read_text(encoding="utf-8"))
            self.assertEqual({n["id"] for n in data["nodes"]}, {"cat", "sat", "ran"})

            res = self.runner.invoke(app, ["node", "--graph", str(out), "cat"])
            self.assertEqual(res.exit_code, 0, res.output)
            self.assertIn("sat", res.output)

            res = self.runner.invoke(app, ["node", "--graph", str(out), "moon"])
            self.assertEqual(res.exit_code, 2)

            res = self.runner.invoke(app, ["top", "--graph", str(out), "-n", "1"])
            self.assertEqual(res.exit_code, 0, res.output)
            self.assertIn("cat", res.output)

            res = self.runner.invoke(app, ["stats", "--graph", str(out)])
            self.assertEqual(res.exit_code, 0, res.output)
            self.assertIn("Edges", res.output)

    def test_build_from_file_with_relation_phrase(self):
        with tempfile.TemporaryDirectory() as d:
            src = Path(d) / "in.txt"
            src.write_text("Dogs are loyal. Cats are independent.", encoding="utf-8")
            out = Path(d) / "net.json"
            res = self.runner.invoke(
                app,
                ["build", "--input", str(src), "--relation", "relation-phrase", "--phrase", "are", "--out", str(out)],
            )
            self.assertEqual(res.exit_code, 0, res.output)
            edges = json.loads(out.read_text(encoding="utf-8"))["edges"]
            self.assertIn({"source": "dogs", "target": "loyal", "weight": 1}, edges)

    def test_no_input(self):
        res = self.runner.invoke(app, ["build"])
        self.assertNotEqual(res.exit_code, 0)
        res = self.runner.invoke(app, ["build", "--text", "   "])
        self.assertNotEqual(res.exit_code, 0)

    def test_missing_input_file(self):
        res = self.runner.invoke(app, ["build", "--input", "/nonexistent/file.txt"])
        self.assertEqual(res.exit_code, 2)


if __name__ == "__main__":
    unittest.main()
