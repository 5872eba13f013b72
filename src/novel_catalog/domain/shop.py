"""Shop view over a catalog.

A ShopView indexes a snapshot of novels by title. When two novels share a
title the later one replaces the earlier one, so at most one novel per title
survives. Replaced titles are kept in ``collisions``.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from .novel import Novel

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE = "the"


class ShopView:
    """Title-keyed, deduplicated presentation of a set of novels."""

    def __init__(self, novels: Iterable[Novel], exclude: str = DEFAULT_EXCLUDE):
        by_title: Dict[str, Novel] = {}
        collisions: List[str] = []

        for novel in novels:
            if novel.title in by_title:
                logger.debug(f"Duplicate title replaced in shop view: {novel.title!r}")
                if novel.title not in collisions:
                    collisions.append(novel.title)
            by_title[novel.title] = novel

        self._by_title = by_title
        self._exclude = exclude
        self._collisions = tuple(collisions)

        self._all_titles = tuple(by_title)

        needle = exclude.lower()
        self._filtered_sorted_titles = tuple(sorted(
            title for title in by_title if needle not in title.lower()
        ))

    @property
    def by_title(self) -> Mapping[str, Novel]:
        """Get the read-only title to novel mapping."""
        return MappingProxyType(self._by_title)

    @property
    def exclude(self) -> str:
        return self._exclude

    @property
    def all_titles(self) -> Tuple[str, ...]:
        """Get every distinct title."""
        return self._all_titles

    @property
    def filtered_sorted_titles(self) -> Tuple[str, ...]:
        """Get titles not containing the excluded text, sorted ascending."""
        return self._filtered_sorted_titles

    @property
    def collisions(self) -> Tuple[str, ...]:
        """Get titles that appeared more than once in the input."""
        return self._collisions

    def filtered_sorted_novels(self) -> List[Novel]:
        """Get the novels behind ``filtered_sorted_titles``, in the same order."""
        return [self._by_title[title] for title in self._filtered_sorted_titles]

    def __len__(self) -> int:
        return len(self._by_title)
