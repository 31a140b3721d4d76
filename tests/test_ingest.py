import tempfile
import unittest
from pathlib import Path

from phrasenet.graph.build import build_graph
from phrasenet.graph.model import GraphOptions, RelationType
from phrasenet.ingest.markdown import markdown_to_text, split_sections
from phrasenet.ingest.pdf import unwrap_lines
from phrasenet.ingest.runner import load_text, read_file


MD = """# Cats and Dogs

Cats are **independent** and [dogs](https://example.org) are loyal.

```python
print("not prose")
```

## Notes
- one `item`
> a quote
---
"""


class TestMarkdown(unittest.TestCase):
    def test_sections(self):
        secs = split_sections(MD)
        self.assertEqual([s.heading for s in secs], ["Cats and Dogs", "Notes"])
        self.assertEqual(secs[1].start_line, 9)

    def test_markdown_to_text(self):
        text = markdown_to_text(MD)
        self.assertIn("Cats and Dogs\n", text)
        self.assertIn("Cats are independent and dogs are loyal.", text)
        self.assertIn("one item", text)
        self.assertIn("a quote", text)
        self.assertNotIn("print", text)
        self.assertNotIn("**", text)
        self.assertNotIn("---", text)

    def test_wrapped_paragraph_is_one_line(self):
        text = markdown_to_text("# Pets\n\nDogs are\nloyal and cats are\nindependent.\n\n- first\n  item\n- second\n")
        self.assertEqual(text, "Pets\nDogs are loyal and cats are independent.\nfirst item\nsecond")

    def test_wrapped_paragraph_keeps_relation_phrases(self):
        opts = GraphOptions(relation_type=RelationType.RELATION_PHRASE, relation_phrase="are", use_stopwords=False)
        g = build_graph(markdown_to_text("# Pets\n\nDogs are\nloyal and cats are\nindependent.\n"), opts)
        self.assertEqual({(e.source, e.target) for e in g.edges}, {("dogs", "loyal"), ("cats", "independent")})

    def test_underscores_inside_words_are_kept(self):
        self.assertEqual(markdown_to_text("Use snake_case_name here."), "Use snake_case_name here.")
        self.assertEqual(markdown_to_text("An _emphasised_ word."), "An emphasised word.")


class TestPdfText(unittest.TestCase):
    def test_unwrap_lines_joins_wrapped_lines(self):
        raw = "Dogs are\r\nloyal and cats  \nare independent.\n\n  \nNext paragraph\nhere.\n"
        self.assertEqual(unwrap_lines(raw), "Dogs are loyal and cats are independent.\nNext paragraph here.")


class TestRunner(unittest.TestCase):
    def test_load_directory_skips_hidden_and_unsupported(self):
        with tempfile.TemporaryDirectory() as d:
            root = Path(d)
            (root / "a.txt").write_text("alpha beta", encoding="utf-8")
            (root / "b.md").write_text("# Gamma\ndelta", encoding="utf-8")
            (root / "c.csv").write_text("x,y", encoding="utf-8")
            (root / ".hidden").mkdir()
            (root / ".hidden" / "d.txt").write_text("secret", encoding="utf-8")

            self.assertEqual(load_text(root), "alpha beta\nGamma\ndelta")

    def test_missing_and_unsupported(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(FileNotFoundError):
                load_text(Path(d) / "nope.txt")
            p = Path(d) / "data.csv"
            p.write_text("x", encoding="utf-8")
            with self.assertRaises(ValueError):
                read_file(p)


if __name__ == "__main__":
    unittest.main()
