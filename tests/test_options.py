import unittest

from phrasenet.config import Settings
from phrasenet.graph.model import GraphOptions, RelationType


class TestGraphOptions(unittest.TestCase):
    def test_from_mapping_accepts_camel_case(self):
        opts = GraphOptions.from_mapping(
            {
                "relationType": "relation-phrase",
                "windowSize": "3",
                "relationPhrase": "is a",
                "useStopwords": False,
                "minEdgeWeight": 2,
                "topN": "10",
            }
        )
        self.assertEqual(opts.relation_type, RelationType.RELATION_PHRASE)
        self.assertEqual(opts.window_size, 3)
        self.assertEqual(opts.phrase_words(), ["is", "a"])
        self.assertFalse(opts.use_stopwords)
        self.assertEqual(opts.min_edge_weight, 2)
        self.assertEqual(opts.top_n, 10)

    def test_missing_keys_use_defaults(self):
        base = GraphOptions(relation_type=RelationType.SENTENCE, top_n=5)
        opts = GraphOptions.from_mapping({"window_size": None, "min_edge_weight": 3}, defaults=base)
        self.assertEqual(opts.relation_type, RelationType.SENTENCE)
        self.assertEqual(opts.top_n, 5)
        self.assertEqual(opts.min_edge_weight, 3)

    def test_out_of_range_values_are_clamped(self):
        opts = GraphOptions.from_mapping({"window_size": 0, "min_edge_weight": -4, "top_n": -1})
        self.assertEqual((opts.window_size, opts.min_edge_weight, opts.top_n), (1, 0, 0))

    def test_string_flags(self):
        self.assertFalse(GraphOptions.from_mapping({"use_stopwords": "off"}).use_stopwords)
        self.assertTrue(GraphOptions.from_mapping({"use_stopwords": "true"}).use_stopwords)

    def test_invalid_values_raise(self):
        with self.assertRaises(ValueError):
            GraphOptions.from_mapping({"relation_type": "bigram"})
        with self.assertRaises(ValueError):
            GraphOptions.from_mapping({"window_size": "wide"})
        with self.assertRaises(ValueError):
            GraphOptions.from_mapping({"top_n": True})

    def test_options_are_immutable(self):
        opts = GraphOptions()
        with self.assertRaises(AttributeError):
            opts.window_size = 5  # type: ignore[misc]


class TestSettings(unittest.TestCase):
    def test_graph_options_from_settings(self):
        s = Settings(relation_type="sentence", window_size=0, use_stopwords=False, min_edge_weight=2, top_n=20)
        opts = s.graph_options()
        self.assertEqual(opts.relation_type, RelationType.SENTENCE)
        self.assertEqual(opts.window_size, 1)
        self.assertFalse(opts.use_stopwords)
        self.assertEqual(opts.top_n, 20)


if __name__ == "__main__":
    unittest.main()
