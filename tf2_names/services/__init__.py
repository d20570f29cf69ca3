from .cache import CatalogHolder
from .catalog import CatalogIndex
from .formatter import NameFormatter
from .parser import NameParser, Rule, DEFAULT_RULES

__all__ = [
    "CatalogHolder",
    "CatalogIndex",
    "NameFormatter",
    "NameParser",
    "Rule",
    "DEFAULT_RULES",
]
