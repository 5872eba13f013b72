"""Catalog entity.

The Catalog is the root of the domain: it owns an ordered list of novels,
fills it from a loader at construction and answers read-only queries over it.
Presenting the results is left to the caller.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..exceptions import InvariantViolation, ValidationError
from .novel import CURRENT_YEAR, DECADE_SPAN, FIRST_YEAR, Novel, validate_text, validate_year
from .seed import load_seed_novels

logger = logging.getLogger(__name__)

PERCENTAGE = 100.0

NovelLoader = Callable[[], Iterable[Optional[Novel]]]


class Catalog:
    """
    Represents a bookstore catalog of novels.

    Novels are kept in load order. Nothing outside the catalog can add,
    remove or replace them: ``all_novels`` hands out a tuple snapshot.
    """

    def __init__(self, name: str, loader: NovelLoader = load_seed_novels):
        validate_text(name, "bookstore name")

        self._name = name
        self._novels: List[Novel] = []

        self._populate(loader)
        self._validate_novels()

        logger.info(f"Catalog '{name}' loaded with {len(self._novels)} novels")

    def _populate(self, loader: NovelLoader) -> None:
        """Fill the catalog from the loader, keeping its order."""
        self._novels.extend(loader())

    def _validate_novels(self) -> None:
        """Self-check run once after population."""
        if not self._novels:
            raise InvariantViolation("catalog must contain novels")

        if any(novel is None for novel in self._novels):
            raise InvariantViolation("novel list contains a missing entry")

    @property
    def name(self) -> str:
        """Get the catalog name."""
        return self._name

    @property
    def novel_count(self) -> int:
        """Get number of novels."""
        return len(self._novels)

    def __len__(self) -> int:
        return len(self._novels)

    def __iter__(self) -> Iterator[Novel]:
        return iter(tuple(self._novels))

    def __repr__(self) -> str:
        return f"Catalog(name={self._name!r}, novels={len(self._novels)})"

    def titles_uppercased(self) -> Iterator[str]:
        """Yield every title in upper case, in catalog order."""
        return (novel.title.upper() for novel in tuple(self._novels))

    def titles_containing(self, substring: str) -> List[str]:
        """Get titles containing a substring, ignoring case."""
        needle = substring.lower()
        return [novel.title for novel in self._novels if needle in novel.title.lower()]

    def titles_alphabetical(self) -> List[str]:
        """Get all titles sorted A-Z, ignoring case.

        Titles that compare equal keep their catalog order.
        """
        return sorted((novel.title for novel in self._novels), key=str.lower)

    def titles_in_decade(self, decade: int) -> List[str]:
        """Get titles published from ``decade`` through ``decade + 9`` inclusive."""
        upper_bound = decade + DECADE_SPAN - 1
        return [
            novel.title for novel in self._novels
            if decade <= novel.year_published <= upper_bound
        ]

    def longest_title(self) -> str:
        """Get the longest title; the first one wins a tie."""
        return max((novel.title for novel in self._novels), key=len, default="")

    def has_book_published_in(self, year: int) -> bool:
        """Check whether any novel was published in exactly ``year``.

        The name reads like a range check, but the comparison is exact
        equality on a single year.
        """
        try:
            validate_year(year)
        except ValidationError as e:
            logger.debug(f"Rejected year lookup for {year!r}: {e}")
            raise

        return any(novel.year_published == year for novel in self._novels)

    def count_titles_containing(self, word: str) -> int:
        """Count titles containing a word, ignoring case."""
        needle = word.lower()
        return sum(1 for novel in self._novels if needle in novel.title.lower())

    def percent_published_between(self, first: int, last: int) -> float:
        """Get the percentage of novels published in [first, last]."""
        if first > last:
            raise ValidationError("first year must be less than or equal to last year")

        if first < FIRST_YEAR or last > CURRENT_YEAR:
            raise ValidationError(f"year must be between {FIRST_YEAR} and {CURRENT_YEAR}")

        if not self._novels:
            raise InvariantViolation("cannot compute a percentage of an empty catalog")

        in_range = sum(1 for novel in self._novels if first <= novel.year_published <= last)
        return in_range * PERCENTAGE / len(self._novels)

    def oldest_novel(self) -> Optional[Novel]:
        """Get the earliest published novel; the first one wins a tie."""
        return min(self._novels, key=lambda novel: novel.year_published, default=None)

    def novels_with_title_length(self, title_length: int) -> List[Novel]:
        """Get novels whose title has exactly ``title_length`` characters."""
        return [novel for novel in self._novels if len(novel.title) == title_length]

    def all_novels(self) -> Tuple[Novel, ...]:
        """Get a read-only snapshot of every novel, in catalog order."""
        return tuple(self._novels)

    def decade_distribution(self) -> Dict[int, int]:
        """Count novels per decade, ordered by decade."""
        counts: Dict[int, int] = {}
        for novel in self._novels:
            counts[novel.decade] = counts.get(novel.decade, 0) + 1
        return dict(sorted(counts.items()))

    def get_statistics(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        years = [novel.year_published for novel in self._novels]
        return {
            "name": self._name,
            "total_novels": len(self._novels),
            "earliest_year": min(years) if years else None,
            "latest_year": max(years) if years else None,
            "longest_title": self.longest_title(),
            "decade_distribution": self.decade_distribution(),
        }
