"""
Exceptions raised by tf2-names
"""

from typing import Iterable


class CatalogError(Exception):
    """Base class for catalog errors"""


class MalformedCatalog(CatalogError):
    """Required catalog data is missing or has the wrong shape"""


class InvalidClassArgument(CatalogError, ValueError):
    """Requested character class is not one of the nine classes"""

    def __init__(self, char_class: str, valid_classes: Iterable[str]):
        self.char_class = char_class
        self.valid_classes = list(valid_classes)
        valid = ", ".join(f'"{c}"' for c in self.valid_classes)
        super().__init__(
            f'Entered class "{char_class}" is not a valid character class. '
            f"Valid character classes (case sensitive): {valid}."
        )
