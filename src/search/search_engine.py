# src/search/search_engine.py

"""Fuzzy multi-term scoring of catalog listings against a text query."""

import logging
from collections.abc import Iterable

from src.config.settings import Settings
from src.models.product import ProductListing, ScoredListing
from src.search.edit_distance import distance

logger = logging.getLogger("pricecompare.search")


def tokenize_query(query: str) -> list[str]:
    """Lower-case, trim and split a query on single spaces.

    Empty tokens produced by repeated spaces are dropped.
    """
    return [t for t in query.lower().strip().split(" ") if t]


class SearchEngine:
    """Score every catalog listing and keep the clean matches.

    Scoring per term:

    - substring of the name or category: ``SUBSTRING_SCORE``
    - per name word, word/term prefix either way: ``PREFIX_SCORE``
    - per name word, edit distance within ``TYPO_MAX_DISTANCE`` for
      terms of at least ``TYPO_MIN_TERM_LENGTH`` chars: ``TYPO_SCORE``

    A listing is returned only when some term is a literal substring
    of its name or category.  Prefix and typo bonuses only reorder
    listings that already matched.
    """

    def __init__(self, catalog: Iterable[ProductListing]) -> None:
        self.catalog = catalog
        self.settings = Settings()

    def _score_term(
        self, term: str, name: str, category: str, words: list[str],
    ) -> tuple[int, bool]:
        """Return (score, literal_hit) for a single term."""
        s = self.settings
        score = 0
        literal = term in name or term in category
        if literal:
            score += s.SUBSTRING_SCORE

        typo_eligible = len(term) >= s.TYPO_MIN_TERM_LENGTH
        for word in words:
            if word.startswith(term) or term.startswith(word):
                score += s.PREFIX_SCORE
            if (
                typo_eligible
                and distance(term, word) <= s.TYPO_MAX_DISTANCE
            ):
                score += s.TYPO_SCORE
        return score, literal

    def score(
        self, listing: ProductListing, terms: list[str],
    ) -> tuple[int, bool]:
        """Total score of *listing* and whether any term hit literally."""
        name = listing.name.lower()
        category = listing.category.lower()
        words = name.split()

        total = 0
        clean_match = False
        for term in terms:
            term_score, literal = self._score_term(
                term, name, category, words
            )
            total += term_score
            clean_match = clean_match or literal
        return total, clean_match

    def search(self, query: str) -> list[ScoredListing]:
        """Return matching listings ordered by descending score."""
        if not query or not query.strip():
            return []

        terms = tokenize_query(query)
        results: list[ScoredListing] = []
        fuzzy_only = 0

        for listing in self.catalog:
            total, clean_match = self.score(listing, terms)
            if total > 0 and clean_match:
                results.append(ScoredListing(listing, total))
            elif total > 0:
                fuzzy_only += 1

        # sorted() is stable, so ties keep catalog order
        results = sorted(results, key=lambda r: r.score, reverse=True)

        logger.debug(
            "Query '%s' (%d terms): %d matches, %d fuzzy-only rejected",
            query,
            len(terms),
            len(results),
            fuzzy_only,
        )
        return results
