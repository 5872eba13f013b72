"""
Domain Layer - Novel Catalog

- Novel: a single validated, immutable catalog entry
- Catalog: the ordered collection of novels and its queries
- ShopView: a title-keyed, deduplicated presentation of a catalog
"""

from .novel import Novel, FIRST_YEAR, CURRENT_YEAR, MAX_TITLE_LENGTH, MAX_AUTHOR_LENGTH
from .seed import SEED_NOVELS, load_seed_novels
from .catalog import Catalog
from .shop import ShopView

__all__ = [
    "Novel",
    "Catalog",
    "ShopView",
    "SEED_NOVELS",
    "load_seed_novels",
    "FIRST_YEAR",
    "CURRENT_YEAR",
    "MAX_TITLE_LENGTH",
    "MAX_AUTHOR_LENGTH",
]
