"""
Search Engine for LazyKeys.

Ranks catalog entries against a free-text query by fuzzy matching the
description, the notation and the category label, each with its own
weight.
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .catalog import ShortcutItem
from .fuzzy_matcher import FuzzyMatcher

logger = logging.getLogger('LazyKeys.Search')

# Field weights
DESCRIPTION_WEIGHT = 3
NOTATION_WEIGHT = 2
CATEGORY_WEIGHT = 1


@dataclass(frozen=True)
class RankedMatch:
    """A catalog entry with its position in the catalog and its score."""

    index: int
    item: ShortcutItem
    score: int


class SearchEngine:
    """
    Weighted multi-field fuzzy ranking.

    An item's score is the best of its weighted field scores rather than
    their sum, so one strong field match beats several weak ones.
    """

    def __init__(self, matcher: Optional[FuzzyMatcher] = None):
        self.matcher = matcher or FuzzyMatcher()

    def rank(self, catalog: Sequence[ShortcutItem], query: str,
             limit: Optional[int] = None) -> List[RankedMatch]:
        """
        Rank catalog items against a query, best first.

        Args:
            catalog: Items in catalog order
            query: Free-text query; empty returns every item with score 0
            limit: Optional maximum number of matches to return

        Returns:
            List of RankedMatch; ties keep catalog order
        """
        if not query:
            results = [RankedMatch(i, item, 0) for i, item in enumerate(catalog)]
            return results[:limit] if limit is not None else results

        start_time = time.time()
        query_lower = query.lower()

        indices = []
        scores = []
        for i, item in enumerate(catalog):
            score = self.score_item(item, query_lower)
            if score is not None:
                indices.append(i)
                scores.append(score)

        order = np.argsort(-np.asarray(scores, dtype=np.int64), kind='stable')
        if limit is not None:
            order = order[:limit]
        results = [RankedMatch(indices[k], catalog[indices[k]], scores[k]) for k in order.tolist()]

        logger.debug("Query '%s' matched %d of %d items in %.4fs",
                     query, len(indices), len(catalog), time.time() - start_time)
        return results

    def score_item(self, item: ShortcutItem, query_lower: str) -> Optional[int]:
        """Best weighted field score for one item, or None if no field matches."""
        fields = (
            (item.description, DESCRIPTION_WEIGHT),
            (item.notation, NOTATION_WEIGHT),
            (item.category.label, CATEGORY_WEIGHT),
        )

        best_score = None
        for text, weight in fields:
            score = self.matcher.fuzzy_match(text.lower(), query_lower)
            if score is None:
                continue
            weighted = score * weight
            if best_score is None or weighted > best_score:
                best_score = weighted
        return best_score


_default_engine = SearchEngine()


def rank(catalog: Sequence[ShortcutItem], query: str) -> List[RankedMatch]:
    """Rank with a shared default SearchEngine."""
    return _default_engine.rank(catalog, query)
