"""Novel Catalog

An in-memory catalog of classic novels with query and reporting tools.
"""

__version__ = "0.1.0"

from .domain import Catalog, Novel, ShopView, load_seed_novels
from .exceptions import (
    NovelCatalogError,
    ValidationError,
    InvariantViolation,
    ConfigurationError,
)

__all__ = [
    # Domain
    "Catalog",
    "Novel",
    "ShopView",
    "load_seed_novels",

    # Errors
    "NovelCatalogError",
    "ValidationError",
    "InvariantViolation",
    "ConfigurationError",
]
