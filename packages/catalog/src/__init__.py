"""Expert Catalog Package.

Loads the static expert persona catalog and answers simple lookups.
Panel logic lives in packages.algorithms.
"""

from .loader import (
    BUNDLED_CATALOG_PATH,
    REVIEW_SCORE_THRESHOLD,
    CatalogFile,
    ExpertCatalog,
    clear_catalog_cache,
    get_default_catalog,
    load_catalog,
)

__all__ = [
    "ExpertCatalog",
    "CatalogFile",
    "load_catalog",
    "get_default_catalog",
    "clear_catalog_cache",
    "BUNDLED_CATALOG_PATH",
    "REVIEW_SCORE_THRESHOLD",
]
