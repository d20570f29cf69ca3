"""
Name formatter
Builds the canonical display name for an Attributes record
"""

from typing import Optional

from ..config import CATALOG_PROPER_NAMES
from ..models import Attributes
from ..static_data import (
    KILLSTREAK_LABELS,
    QUALITY_DECORATED,
    QUALITY_UNIQUE,
    QUALITY_UNUSUAL,
    WEAR_LABELS,
)
from .catalog import CatalogIndex


class NameFormatter:
    """Formats Attributes against one catalog snapshot"""

    def __init__(self, catalog: CatalogIndex, proper: bool = CATALOG_PROPER_NAMES):
        self.catalog = catalog
        self.proper = proper

    def _item_name(self, defindex: int) -> str:
        item = self.catalog.get_item_by_defindex(defindex)
        return item.item_name if item else str(defindex)

    def _quality_name(self, quality: int) -> str:
        return self.catalog.get_quality_by_id(quality) or str(quality)

    def format(self, attributes: Attributes, proper: Optional[bool] = None) -> Optional[str]:
        """
        Canonical display name, or None when the defindex is not in the catalog

        Args:
            attributes: Item to name
            proper: Add "The " for proper-name items when nothing precedes
                the base name; defaults to the formatter setting
        """
        if attributes.defindex is None:
            return None
        schema_item = self.catalog.get_item_by_defindex(attributes.defindex)
        if schema_item is None:
            return None
        if proper is None:
            proper = self.proper

        name = ""

        if attributes.tradable is False:
            name = "Non-Tradable "

        if attributes.craftable is False:
            name += "Non-Craftable "

        if attributes.quality2:
            # Elevated quality
            name += self._quality_name(attributes.quality2) + " "

        quality = attributes.quality
        if quality is not None and (
            quality not in (QUALITY_UNIQUE, QUALITY_DECORATED, QUALITY_UNUSUAL)
            or (quality == QUALITY_UNUSUAL and not attributes.effect)
            or schema_item.item_quality == QUALITY_UNUSUAL
        ):
            name += self._quality_name(quality) + " "

        if attributes.effect:
            name += (self.catalog.get_effect_by_id(attributes.effect) or str(attributes.effect)) + " "

        if attributes.festive:
            name += "Festivized "

        if attributes.killstreak:
            name += KILLSTREAK_LABELS[attributes.killstreak] + " "

        if attributes.target:
            name += self._item_name(attributes.target) + " "

        if attributes.output_quality and attributes.output_quality != QUALITY_UNIQUE:
            name = self._quality_name(attributes.output_quality) + " " + name

        if attributes.output:
            name += self._item_name(attributes.output) + " "

        if attributes.australium:
            name += "Australium "

        if attributes.paintkit:
            name += (self.catalog.get_skin_by_id(attributes.paintkit) or str(attributes.paintkit)) + " | "

        if proper and name == "" and schema_item.proper_name:
            name = "The "

        name += schema_item.item_name

        if attributes.wear:
            name += " (" + WEAR_LABELS[attributes.wear] + ")"

        if attributes.crateseries:
            name += " #" + str(attributes.crateseries)

        if attributes.craftnumber:
            name = "#" + str(attributes.craftnumber) + " " + name

        if attributes.paint:
            paint_name = self.catalog.get_paint_name_by_decimal(attributes.paint)
            name += f" (Paint: {paint_name or attributes.paint})"

        return name


def format_name(attributes: Attributes, catalog: CatalogIndex, proper: Optional[bool] = None) -> Optional[str]:
    return NameFormatter(catalog).format(attributes, proper=proper)
