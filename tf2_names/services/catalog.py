"""
Catalog index
Immutable snapshot of the item catalog with indexed and derived lookups
"""

import logging
import math
import re
import time
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Pattern, Sequence, Tuple, TypeVar

from pydantic import ValidationError

from ..errors import InvalidClassArgument, MalformedCatalog
from ..models import CatalogItem
from ..schemas import RawAttribute, RawCatalog, RawParticle
from ..static_data import (
    CHARACTER_CLASSES,
    EXCLUDED_SCORE_TYPE_IDS,
    EXCLUDED_SCORE_TYPES,
    EXCLUDED_WEAPONS,
    EXTRA_TRADING_WEAPONS,
    NAME_TAG_DUPLICATE,
    NO_UNCRAFTABLE_VARIANT,
    QUALITY_UNIQUE,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def word_pattern(phrase: str, suffix: str = "") -> Pattern:
    """Pattern matching a phrase that is not part of a longer word"""
    return re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)" + suffix)


def bounded_search(entries: Sequence[T], key: int, get_key: Callable[[T], int]) -> Optional[T]:
    """
    Find the entry whose key equals ``key``

    Binary search limited to ceil(log2(n)) + 2 steps, then a linear scan.
    The catalog is usually sorted by key but nothing guarantees it.
    """
    count = len(entries)
    if count == 0:
        return None

    start = 0
    end = count - 1
    steps_left = math.ceil(math.log2(count)) + 2

    while start <= end and steps_left > 0:
        steps_left -= 1
        mid = (start + end) // 2
        mid_key = get_key(entries[mid])
        if mid_key < key:
            start = mid + 1
        elif mid_key > key:
            end = mid - 1
        else:
            return entries[mid]

    # Fallback for unsorted data
    for entry in entries:
        if get_key(entry) == key:
            return entry

    return None


def _to_number(value: Any) -> Optional[int]:
    if isinstance(value, Mapping):
        value = value.get("value")
    if value is None:
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


class CatalogIndex:
    """Read-only, versioned snapshot of the catalog"""

    def __init__(self, raw: Mapping[str, Any], version: Optional[str] = None, time_ms: Optional[int] = None):
        try:
            parsed = RawCatalog.model_validate(raw)
        except ValidationError as exc:
            raise MalformedCatalog(f"Catalog is missing required data: {exc}") from exc

        schema = parsed.schema_

        self.raw = raw
        self.version = version
        self.time = time_ms if time_ms is not None else int(time.time() * 1000)

        self.items: Tuple[CatalogItem, ...] = tuple(schema.items)
        self.particles: Tuple[RawParticle, ...] = tuple(schema.particles)
        self.attributes: Tuple[RawAttribute, ...] = tuple(schema.attributes)

        # Quality tables
        quality_names = {}
        quality_ids = {}
        for quality_type, quality_id in schema.qualities.items():
            display = schema.quality_names[quality_type]
            quality_names.setdefault(quality_id, display)
            quality_ids.setdefault(display.lower(), quality_id)
        self._quality_names = MappingProxyType(quality_names)
        self._quality_ids = MappingProxyType(quality_ids)

        # Effect and skin tables
        self._effect_ids = MappingProxyType(
            {p.name.lower(): p.id for p in reversed(self.particles)}
        )
        self._skins = MappingProxyType(dict(schema.paintkits))
        self._skin_ids = MappingProxyType(
            {name.lower(): skin_id for skin_id, name in sorted(schema.paintkits.items(), reverse=True)}
        )

        # Name tables
        by_name = {}
        by_internal_name = {}
        stock_names = {}
        for item in self.items:
            by_internal_name.setdefault(item.name, item)
            if (item.item_name, item.defindex) == NAME_TAG_DUPLICATE:
                continue
            if item.item_quality == 0:
                # Stock items lose to an upgradeable item of the same name
                stock_names.setdefault(item.item_name.lower(), item)
                continue
            by_name.setdefault(item.item_name.lower(), item)
        for name, item in stock_names.items():
            by_name.setdefault(name, item)
        self._by_name = MappingProxyType(by_name)
        self._by_internal_name = MappingProxyType(by_internal_name)

        self.the_names = frozenset(
            item.item_name.lower() for item in self.items if item.item_name.lower().startswith("the ")
        )

        # Vocabularies for name parsing, longest first
        self.quality_vocabulary: Tuple[Tuple[str, int], ...] = tuple(
            sorted(self._quality_ids.items(), key=lambda entry: -len(entry[0]))
        )
        self.effect_vocabulary: Tuple[Tuple[str, int], ...] = tuple(
            sorted(self._effect_ids.items(), key=lambda entry: -len(entry[0]))
        )
        self.skin_vocabulary: Tuple[Tuple[str, int], ...] = tuple(
            sorted(self._skin_ids.items(), key=lambda entry: -len(entry[0]))
        )
        self.effect_patterns: Mapping[str, Pattern] = MappingProxyType(
            {name: word_pattern(name) for name in self._effect_ids}
        )
        # The formatter writes "<skin> | <item>"
        self.skin_patterns: Mapping[str, Pattern] = MappingProxyType(
            {name: word_pattern(name, r"(\s*\|)?") for name in self._skin_ids}
        )

        self._paint_cans = tuple(
            item for item in self.items
            if "Paint Can" in item.name and item.name != "Paint Can" and item.attributes
        )
        self._score_types = tuple(schema.kill_eater_score_types)
        self._static_items = MappingProxyType(dict(parsed.items_game.items))

        logger.info(f"Catalog snapshot built: {len(self.items)} items, version={self.version}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CatalogIndex":
        """Rebuild an index from the output of to_dict()"""
        if "raw" not in data or data["raw"] is None:
            raise MalformedCatalog("Snapshot has no raw catalog")
        return cls(data["raw"], version=data.get("version"), time_ms=data.get("time"))

    def to_dict(self) -> Dict[str, Any]:
        """Data needed to rebuild this snapshot"""
        return {
            "version": self.version,
            "time": self.time,
            "raw": self.raw
        }

    # Items

    def get_item_by_defindex(self, defindex: int) -> Optional[CatalogItem]:
        return bounded_search(self.items, defindex, lambda item: item.defindex)

    def get_item_by_name(self, name: str) -> Optional[CatalogItem]:
        """Case-insensitive exact match on the display name"""
        return self._by_name.get(name.lower())

    def get_item_by_name_tolerant(self, name: str) -> Optional[CatalogItem]:
        """Exact match that ignores a missing or extra leading "The " """
        name = name.lower().strip()
        item = self.get_item_by_name(name)
        if item is not None:
            return item
        if name.startswith("the "):
            return self.get_item_by_name(name[4:])
        return self.get_item_by_name("the " + name)

    def get_item_by_internal_name(self, name: str) -> Optional[CatalogItem]:
        return self._by_internal_name.get(name)

    def find_item_by_affixes(self, prefix: str, suffix: str) -> Optional[CatalogItem]:
        """First item whose internal name starts with prefix and ends with suffix"""
        prefix = prefix.lower()
        suffix = suffix.lower()
        for item in self.items:
            internal = item.name.lower()
            if internal.startswith(prefix) and internal.endswith(suffix):
                return item
        return None

    def get_attribute_by_defindex(self, defindex: int) -> Optional[RawAttribute]:
        return bounded_search(self.attributes, defindex, lambda attribute: attribute.defindex)

    def get_static_attribute(self, defindex: int, name: str) -> Optional[int]:
        """Numeric static attribute from the supplementary table"""
        entry = self._static_items.get(defindex) or {}
        static_attrs = entry.get("static_attrs") or {}
        return _to_number(static_attrs.get(name))

    # Qualities, effects and skins

    def get_quality_by_id(self, quality_id: int) -> Optional[str]:
        return self._quality_names.get(quality_id)

    def get_quality_id_by_name(self, name: str) -> Optional[int]:
        return self._quality_ids.get(name.lower())

    def get_effect_by_id(self, effect_id: int) -> Optional[str]:
        particle = bounded_search(self.particles, effect_id, lambda p: p.id)
        return particle.name if particle else None

    def get_effect_id_by_name(self, name: str) -> Optional[int]:
        return self._effect_ids.get(name.lower())

    def get_unusual_effects(self) -> List[Dict[str, Any]]:
        return [{"name": p.name, "id": p.id} for p in self.particles]

    def get_skin_by_id(self, skin_id: int) -> Optional[str]:
        return self._skins.get(skin_id)

    def get_skin_id_by_name(self, name: str) -> Optional[int]:
        return self._skin_ids.get(name.lower())

    # Paints

    def get_paint_name_by_decimal(self, decimal: int) -> Optional[str]:
        for paint in self._paint_cans:
            if any(_to_number(attribute.get("value")) == decimal for attribute in paint.attributes):
                return paint.item_name
        return None

    def get_paint_decimal_by_name(self, name: str) -> Optional[int]:
        name = name.lower()
        for paint in self._paint_cans:
            if paint.item_name.lower() == name:
                return _to_number(paint.attributes[0].get("value"))
        return None

    def get_paints(self) -> Dict[str, str]:
        """Paint name -> partial identifier ("p<decimal>")"""
        return {
            paint.item_name: f"p{_to_number(paint.attributes[0].get('value'))}"
            for paint in self._paint_cans
        }

    def get_paintable_item_defindexes(self) -> List[int]:
        return [item.defindex for item in self.items if item.capabilities.get("paintable") is True]

    # Strange parts

    def get_strange_parts(self) -> Dict[str, str]:
        """Strange part name -> partial identifier ("sp<type>")"""
        parts = {}
        for score_type in self._score_types:
            if score_type.type_name in EXCLUDED_SCORE_TYPES:
                continue
            if score_type.type in EXCLUDED_SCORE_TYPE_IDS:
                continue
            parts[score_type.type_name] = f"sp{score_type.type}"
        return parts

    # Weapons

    def get_craftable_weapons_schema(self) -> List[CatalogItem]:
        return [
            item for item in self.items
            if item.defindex not in EXCLUDED_WEAPONS
            and item.item_quality == QUALITY_UNIQUE
            and item.craft_class == "weapon"
        ]

    def get_weapons_for_crafting_by_class(self, char_class: str) -> List[str]:
        """
        Identifiers of craftable weapons used by a class

        Args:
            char_class: One of Scout, Soldier, Pyro, Demoman, Heavy,
                Engineer, Medic, Sniper, Spy (case sensitive)

        Raises:
            InvalidClassArgument: for any other value
        """
        if char_class not in CHARACTER_CLASSES:
            raise InvalidClassArgument(char_class, CHARACTER_CLASSES)

        return [
            f"{item.defindex};6" for item in self.get_craftable_weapons_schema()
            if char_class in item.used_by_classes
        ]

    def get_craftable_weapons_for_trading(self) -> List[str]:
        weapons = [f"{item.defindex};6" for item in self.get_craftable_weapons_schema()]
        return weapons + [f"{defindex};6" for defindex in EXTRA_TRADING_WEAPONS]

    def get_uncraftable_weapons_for_trading(self) -> List[str]:
        return [
            f"{item.defindex};6;uncraftable" for item in self.get_craftable_weapons_schema()
            if item.defindex not in NO_UNCRAFTABLE_VARIANT
        ]
