#!/usr/bin/env python3
"""
Unit tests for SearchEngine class.

Tests weighted multi-field ranking of catalog items, ordering of ties
and the empty-query listing.
"""

import pytest
from unittest.mock import Mock
from test_helpers import create_sample_catalog, make_item

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from lazykeys.search_engine import SearchEngine, RankedMatch, rank
from lazykeys.catalog import Category


@pytest.fixture
def catalog():
    return create_sample_catalog()


@pytest.fixture
def engine():
    return SearchEngine()


class TestRanking:
    """Test SearchEngine.rank on a small catalog."""

    def test_empty_query_lists_catalog_in_order(self, engine, catalog):
        """An empty query returns every item, score 0, catalog order."""
        results = engine.rank(catalog, "")

        assert [r.index for r in results] == list(range(len(catalog)))
        assert all(r.score == 0 for r in results)
        assert [r.item for r in results] == catalog

    def test_find_ranks_find_files_first(self, engine, catalog):
        results = engine.rank(catalog, "find")

        assert results[0].item.notation == "<leader>ff"
        assert results[0].score == 92 * 3

    def test_description_wins_over_notation(self, engine, catalog):
        """'ff' matches both the notation and the description of <leader>ff;
        the better weighted field decides."""
        results = engine.rank(catalog, "ff")

        assert len(results) == 1
        assert results[0].item.notation == "<leader>ff"
        assert results[0].score == max(50 * 3, 46 * 2)

    def test_query_is_case_insensitive(self, engine, catalog):
        lower = engine.rank(catalog, "find")
        upper = engine.rank(catalog, "FIND")
        assert lower == upper

    def test_git_matches_description_and_category(self, engine, catalog):
        results = engine.rank(catalog, "git")
        notations = [r.item.notation for r in results]

        assert "<leader>gg" in notations
        assert "<C-s>" not in notations

    def test_no_match_returns_empty(self, engine, catalog):
        assert engine.rank(catalog, "zzzz") == []

    def test_results_sorted_by_score(self, engine, catalog):
        results = engine.rank(catalog, "go")
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_limit(self, engine, catalog):
        assert len(engine.rank(catalog, "", limit=3)) == 3
        assert len(engine.rank(catalog, "o", limit=2)) == 2

    def test_result_index_points_into_catalog(self, engine, catalog):
        for match in engine.rank(catalog, "window"):
            assert catalog[match.index] is match.item


class TestWeighting:
    """Test field weights and tie handling."""

    def test_description_outweighs_notation(self, engine):
        catalog = [
            make_item("q", description="nothing"),
            make_item("xyz", description="q"),
            make_item("q", description="xyz"),
        ]
        results = engine.rank(catalog, "xyz")

        assert [r.index for r in results] == [2, 1]
        assert results[0].score == 72 * 3
        assert results[1].score == 72 * 2

    def test_category_label_is_searchable(self, engine):
        catalog = [make_item("q", description="nothing", category=Category.LSP)]
        results = engine.rank(catalog, "lsp")

        assert len(results) == 1
        assert results[0].score == 72

    def test_ties_keep_catalog_order(self, engine):
        catalog = [make_item(n, description="Same text") for n in ("a", "b", "c")]
        results = engine.rank(catalog, "same")

        assert [r.index for r in results] == [0, 1, 2]
        assert len({r.score for r in results}) == 1

    def test_best_field_not_sum(self, engine):
        """Matching in several fields does not add up."""
        catalog = [make_item("abc", description="abc", category=Category.GENERAL)]
        results = engine.rank(catalog, "abc")
        assert results[0].score == 72 * 3

    def test_custom_matcher_is_used(self):
        matcher = Mock()
        matcher.fuzzy_match.return_value = 5
        engine = SearchEngine(matcher=matcher)

        results = engine.rank([make_item("x")], "q")

        assert results[0].score == 5 * 3
        assert matcher.fuzzy_match.call_count == 3


def test_module_level_rank(catalog):
    results = rank(catalog, "find")
    assert isinstance(results[0], RankedMatch)
    assert results[0].item.description == "Find files"
