"""Novel value object.

A Novel is the single catalog entry: a title, an author and a year of
publication. It validates itself on construction and cannot be changed
afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..exceptions import ValidationError

MAX_TITLE_LENGTH = 50
MAX_AUTHOR_LENGTH = 50

FIRST_YEAR = 1
CURRENT_YEAR = 2026

DECADE_SPAN = 10


def validate_text(value: Any, field_name: str, max_length: Optional[int] = None) -> str:
    """Check that a text field is present, non-blank and short enough."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must be provided")

    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{field_name} cannot be over {max_length} characters long")

    return value


def validate_year(year: Any, field_name: str = "year") -> int:
    """Check that a year is an integer within [FIRST_YEAR, CURRENT_YEAR]."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValidationError(f"{field_name} must be an integer, got {type(year).__name__}")

    if year < FIRST_YEAR or year > CURRENT_YEAR:
        raise ValidationError(
            f"{field_name} must be between {FIRST_YEAR} and {CURRENT_YEAR}"
        )

    return year


@dataclass(frozen=True, slots=True)
class Novel:
    """
    Value object representing one book in the catalog.

    All three fields are checked before anything is assigned, so a Novel
    either exists in a valid state or not at all.
    """

    title: str
    author: str
    year_published: int

    def __init__(self, title: str, author: str, year_published: int) -> None:
        """Create a Novel with validation."""
        validate_text(title, "title", MAX_TITLE_LENGTH)
        validate_text(author, "author", MAX_AUTHOR_LENGTH)
        validate_year(year_published, "year published")

        object.__setattr__(self, 'title', title)
        object.__setattr__(self, 'author', author)
        object.__setattr__(self, 'year_published', year_published)

    @property
    def decade(self) -> int:
        """Get the first year of the decade this novel was published in."""
        return (self.year_published // DECADE_SPAN) * DECADE_SPAN

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return f"{self.title} by {self.author}, {self.year_published}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert novel to dictionary."""
        return {
            "title": self.title,
            "author": self.author,
            "year_published": self.year_published,
        }

    def __str__(self) -> str:
        return (
            f"Novel{{title='{self.title}', name='{self.author}', "
            f"yearPublished={self.year_published}}}"
        )

    def __repr__(self) -> str:
        return (
            f"Novel(title={self.title!r}, author={self.author!r}, "
            f"year_published={self.year_published!r})"
        )
