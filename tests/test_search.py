import unittest
from typing import Sequence

from application.use_cases.search import search
from domain.entities import ContentFragment
from domain.errors import InvalidArgument, RetrievalUnavailable
from domain.interfaces import RelevanceScorer
from infrastructure.scoring.bm25_scorer import Bm25Scorer
from infrastructure.scoring.lexical_scorer import LexicalOverlapScorer
from infrastructure.storage.in_memory_corpus_index import InMemoryCorpusIndex
from infrastructure.text.whitespace_tokenizer import WhitespaceTokenizer

TOILET = ContentFragment(id="1", title="Toilet Installation Steps", body="Turn off water supply then remove bolts")
FITTING = ContentFragment(id="2", title="Pipe Fitting", body="Use PEX fittings")


class _FixedScorer(RelevanceScorer):
    def __init__(self, values: dict[str, float]) -> None:
        self._values = values

    def score(self, query_tokens: Sequence[str], fragment: ContentFragment) -> float:
        return self._values[fragment.id]


class SearchTestCase(unittest.TestCase):
    def _search(self, query, fragments, limit=5, scorer=None):
        return search(
            query,
            corpus_index=InMemoryCorpusIndex(fragments),
            tokenizer=WhitespaceTokenizer(),
            scorer=scorer or LexicalOverlapScorer(),
            limit=limit,
        )


class TestSearch(SearchTestCase):
    def test_toilet_installation_scenario(self):
        results = self._search("toilet installation steps", [TOILET, FITTING], limit=2)
        self.assertEqual([r.fragment.id for r in results], ["1", "2"])
        self.assertEqual(results[0].relevance, 1.0)
        self.assertEqual(results[1].relevance, 0.0)
        self.assertEqual([r.rank for r in results], [1, 2])

    def test_toilet_installation_scenario_with_bm25(self):
        results = self._search("toilet installation steps", [TOILET, FITTING], limit=2, scorer=Bm25Scorer())
        self.assertEqual([r.fragment.id for r in results], ["1", "2"])
        self.assertEqual([r.relevance for r in results], [1.0, 0.0])

    def test_lower_scores_rank_below(self):
        results = self._search("pex fittings", [TOILET, FITTING])
        self.assertEqual(results[0].fragment, FITTING)
        self.assertAlmostEqual(results[0].relevance, 1.0)
        self.assertEqual(results[1].fragment, TOILET)

    def test_empty_query_returns_nothing(self):
        self.assertEqual(self._search("", [TOILET, FITTING]), [])
        self.assertEqual(self._search("  \t ", [TOILET, FITTING], limit=1), [])

    def test_limit_is_respected(self):
        fragments = [ContentFragment(id=str(i), title=f"drain {i}", body="") for i in range(5)]
        self.assertEqual(len(self._search("drain", fragments, limit=2)), 2)
        self.assertEqual(len(self._search("drain", fragments, limit=10)), 5)
        self.assertEqual(self._search("drain", [], limit=3), [])

    def test_invalid_limits(self):
        for limit in (0, -1, True, 2.5):
            with self.subTest(limit=limit):
                with self.assertRaises(InvalidArgument):
                    self._search("toilet", [TOILET], limit=limit)

    def test_repeated_calls_are_identical(self):
        fragments = [TOILET, FITTING, ContentFragment(id="3", title="Toilet flange", body="pipe")]
        first = self._search("toilet pipe", fragments)
        second = self._search("toilet pipe", fragments)
        self.assertEqual(first, second)

    def test_ties_keep_corpus_order(self):
        fragments = [ContentFragment(id=fragment_id, title="Drain", body="") for fragment_id in ("c", "a", "b")]
        results = self._search("drain", fragments)
        self.assertEqual([r.fragment.id for r in results], ["c", "a", "b"])

        scorer = _FixedScorer({"c": 0.2, "a": 0.5, "b": 0.2})
        results = self._search("anything", fragments, scorer=scorer)
        self.assertEqual([r.fragment.id for r in results], ["a", "c", "b"])

    def test_relevance_is_clamped(self):
        fragments = [ContentFragment(id="x", title="", body=""), ContentFragment(id="y", title="", body="")]
        results = self._search("q", fragments, scorer=_FixedScorer({"x": 1.7, "y": -0.3}))
        self.assertEqual([r.relevance for r in results], [1.0, 0.0])

    def test_unavailable_corpus(self):
        with self.assertRaises(RetrievalUnavailable):
            search(
                "toilet",
                corpus_index=InMemoryCorpusIndex(ready=False),
                tokenizer=WhitespaceTokenizer(),
                scorer=LexicalOverlapScorer(),
            )


if __name__ == "__main__":
    unittest.main()
