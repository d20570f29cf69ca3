"""
tf2-names
Converts between TF2 item display names and structured item attributes
"""

from typing import Any, Mapping, Optional

from .errors import CatalogError, InvalidClassArgument, MalformedCatalog
from .models import Attributes, CatalogItem, CharacterClass, Killstreak, Quality, Wear
from .services import CatalogHolder, CatalogIndex, NameFormatter, NameParser

__version__ = "1.0.0"


def load_catalog(raw: Mapping[str, Any], version: Optional[str] = None) -> CatalogIndex:
    """Build a catalog snapshot from raw catalog data"""
    return CatalogIndex(raw, version=version)


def name_to_attributes(name: str, catalog: CatalogIndex) -> Attributes:
    return NameParser(catalog).parse(name)


def attributes_to_name(attributes: Attributes, catalog: CatalogIndex, proper: Optional[bool] = None) -> Optional[str]:
    return NameFormatter(catalog).format(attributes, proper=proper)


__all__ = [
    "Attributes",
    "CatalogError",
    "CatalogHolder",
    "CatalogIndex",
    "CatalogItem",
    "CharacterClass",
    "InvalidClassArgument",
    "Killstreak",
    "MalformedCatalog",
    "NameFormatter",
    "NameParser",
    "Quality",
    "Wear",
    "attributes_to_name",
    "load_catalog",
    "name_to_attributes",
]
