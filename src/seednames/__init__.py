"""Deterministic adjective-noun names ('silent-moon') from a seed."""

from seednames.core.catalog import DEFAULT_CATALOG, CatalogError, WordCatalog
from seednames.core.config import Settings, bootstrap
from seednames.core.generator import (
    LockedNameGenerator,
    NameGenerator,
    SeededNameGenerator,
    SystemNameGenerator,
    new_generator,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CATALOG",
    "CatalogError",
    "WordCatalog",
    "Settings",
    "bootstrap",
    "NameGenerator",
    "SeededNameGenerator",
    "SystemNameGenerator",
    "LockedNameGenerator",
    "new_generator",
]
