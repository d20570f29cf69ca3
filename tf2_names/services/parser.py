"""
Name parser
Turns a display name into Attributes by running an ordered list of rules

Each rule looks at the remaining (lower-cased) text, and on its first match
strips what it recognised and records one or more fields. Rules never
backtrack; later rules rely on earlier modifiers being gone already.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from ..models import Attributes
from ..static_data import (
    ATOMIC_CATEGORIES,
    CRAFTABILITY_SYNONYMS,
    CRATE_SERIES_ATTRIBUTE,
    EFFECT_VETOES,
    GENERIC_STRANGIFIER,
    KILLSTREAK_KITS,
    KILLSTREAK_MARKERS,
    KIT_FABRICATORS,
    MUNITION_PREFIX,
    NON_PROMOTING_EFFECT_ID,
    PAINT_DECIMALS,
    QUALITY_DECORATED,
    QUALITY_STRANGE,
    QUALITY_UNIQUE,
    QUALITY_UNUSUAL,
    QUALITY_WORD_EXCEPTIONS,
    SALVAGED_CRATE_DEFINDEX,
    SALVAGED_CRATE_PREFIX,
    SKIN_VETOES,
    SUPPLY_CRATE_PREFIX,
    TRADABILITY_SYNONYMS,
    WAR_PAINT_KEY,
    WEAPON_EFFECT_IDS,
    WEAR_LABELS,
    WORN_EFFECT_VETOES,
    get_crate_defindex,
    get_munition_defindex,
)
from .catalog import CatalogIndex, word_pattern

logger = logging.getLogger(__name__)

PAINT_PATTERN = re.compile(r"\(paint: ([^)]+)\)")
LEADING_CRAFT_NUMBER = re.compile(r"^#(\d+)\s+")
TRAILING_CRAFT_NUMBER = re.compile(r"\s+#(\d+)$")


def normalize(text: str) -> str:
    """Lower-case and collapse whitespace"""
    return " ".join(text.lower().split())


def strip_match(text: str, match: re.Match) -> str:
    return normalize(text[:match.start()] + " " + text[match.end():])


def strip_phrase(text: str, phrase: str) -> str:
    return normalize(text.replace(phrase, " ", 1))


@dataclass
class ParseState:
    """Fields collected so far"""
    defindex: Optional[int] = None
    quality: Optional[int] = None
    quality2: Optional[int] = None
    craftable: bool = True
    tradable: bool = True
    killstreak: int = 0
    australium: bool = False
    festive: bool = False
    effect: Optional[int] = None
    paintkit: Optional[int] = None
    wear: Optional[int] = None
    paint: Optional[int] = None
    crateseries: Optional[int] = None
    craftnumber: Optional[int] = None
    target: Optional[int] = None
    output: Optional[int] = None
    output_quality: Optional[int] = None
    # Collector number seen in the name, kept only for non-crate items
    pending_craftnumber: Optional[int] = field(default=None, repr=False)

    def set_quality(self, quality: int) -> None:
        """Make quality primary, moving an existing one to quality2"""
        if self.quality is not None and self.quality != quality:
            self.quality2 = self.quality
        self.quality = quality

    def to_attributes(self) -> Attributes:
        return Attributes(
            defindex=self.defindex,
            quality=self.quality,
            quality2=self.quality2,
            craftable=self.craftable,
            tradable=self.tradable,
            killstreak=self.killstreak,
            australium=self.australium,
            festive=self.festive,
            effect=self.effect,
            paintkit=self.paintkit,
            wear=self.wear,
            paint=self.paint,
            crateseries=self.crateseries,
            craftnumber=self.craftnumber,
            target=self.target,
            output=self.output,
            output_quality=self.output_quality,
        )


RuleFunc = Callable[[CatalogIndex, str, ParseState], Optional[str]]


@dataclass(frozen=True)
class Rule:
    """
    One pass over the remaining text

    ``apply`` returns the text left after a match, or None when the rule
    did not match. A ``final`` rule ends parsing as soon as it matches.
    """
    name: str
    apply: RuleFunc
    final: bool = False


# Rules, in pipeline order

def match_atomic_category(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    if not any(category in text for category in ATOMIC_CATEGORIES):
        return None

    item = catalog.get_item_by_name(text)
    if item is not None:
        state.defindex = item.defindex
        state.quality = item.item_quality
    return ""


def match_wear(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    for wear, label in WEAR_LABELS.items():
        suffix = f"({label.lower()})"
        if suffix in text:
            state.wear = wear
            return strip_phrase(text, suffix)
    return None


STRANGE_PATTERN = word_pattern("strange")


def match_strange(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    match = STRANGE_PATTERN.search(text)
    if not match:
        return None

    if state.wear is None:
        state.quality = QUALITY_STRANGE
    else:
        # Skin items resolve their primary quality later
        state.quality2 = QUALITY_STRANGE
    return strip_match(text, match)


NON_CRAFTABLE_PATTERN = word_pattern("non-craftable")
NON_TRADABLE_PATTERN = word_pattern("non-tradable")


def match_trade_flags(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    folded = text
    for synonym, canonical in CRAFTABILITY_SYNONYMS.items():
        folded = folded.replace(synonym, canonical)
    for synonym, canonical in TRADABILITY_SYNONYMS.items():
        folded = folded.replace(synonym, canonical)

    matched = False
    match = NON_CRAFTABLE_PATTERN.search(folded)
    if match:
        state.craftable = False
        folded = strip_match(folded, match)
        matched = True

    match = NON_TRADABLE_PATTERN.search(folded)
    if match:
        state.tradable = False
        folded = strip_match(folded, match)
        matched = True

    return folded if matched else None


KILLSTREAK_PATTERNS = [(word_pattern(marker), tier) for marker, tier in KILLSTREAK_MARKERS]


def match_killstreak(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    for pattern, tier in KILLSTREAK_PATTERNS:
        match = pattern.search(text)
        if match:
            state.killstreak = tier
            return strip_match(text, match)
    return None


AUSTRALIUM_PATTERN = word_pattern("australium")


def match_australium(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    if "australium gold" in text:
        return None

    match = AUSTRALIUM_PATTERN.search(text)
    if not match:
        return None
    state.australium = True
    return strip_match(text, match)


FESTIVIZED_PATTERN = word_pattern("festivized")


def match_festivized(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    if "festivized formation" in text:
        return None

    match = FESTIVIZED_PATTERN.search(text)
    if not match:
        return None
    state.festive = True
    return strip_match(text, match)


def match_quality(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    # A collector number written by the formatter may precede the quality
    number = LEADING_CRAFT_NUMBER.match(text)
    prefix = number.group(0) if number else ""
    rest = text[len(prefix):]

    if any(rest.startswith(exception) for exception in QUALITY_WORD_EXCEPTIONS):
        return None

    for quality_name, quality_id in catalog.quality_vocabulary:
        # Only at the start, base names contain quality words too
        if rest.startswith(quality_name + " "):
            state.set_quality(quality_id)
            return normalize(prefix + rest[len(quality_name):])
    return None


def _effect_vetoed(effect_name: str, effect_id: int, text: str, state: ParseState) -> bool:
    if effect_id in WEAPON_EFFECT_IDS and state.wear is None:
        return True
    if effect_name in WORN_EFFECT_VETOES and state.wear is not None:
        return True
    return any(veto in text for veto in EFFECT_VETOES.get(effect_name, ()))


def match_effect(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    for effect_name, effect_id in catalog.effect_vocabulary:
        if effect_name not in text:
            continue
        if _effect_vetoed(effect_name, effect_id, text, state):
            continue

        match = catalog.effect_patterns[effect_name].search(text)
        if not match:
            continue
        remaining = strip_match(text, match)
        if not remaining:
            # The whole name is an item that shares the effect's name
            continue

        state.effect = effect_id
        if effect_id != NON_PROMOTING_EFFECT_ID:
            state.set_quality(QUALITY_UNUSUAL)
        return remaining
    return None


def match_skin(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    if state.wear is None:
        return None

    for skin_name, skin_id in catalog.skin_vocabulary:
        if skin_name not in text:
            continue
        if any(veto in text for veto in SKIN_VETOES.get(skin_name, ())):
            continue

        match = catalog.skin_patterns[skin_name].search(text)
        if not match:
            continue
        remaining = strip_match(text, match)
        if not remaining:
            continue

        state.paintkit = skin_id
        if state.quality2 == QUALITY_STRANGE:
            state.quality = QUALITY_STRANGE
            state.quality2 = None
        elif state.effect is None:
            state.quality = QUALITY_DECORATED
        return remaining
    return None


def match_kit_fabricator(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    if state.killstreak < 2 or "kit fabricator" not in text:
        return None

    target = catalog.get_item_by_name_tolerant(strip_phrase(text, "kit fabricator"))
    if target is None:
        return None

    fabricator, output = KIT_FABRICATORS[state.killstreak]
    state.defindex = fabricator
    state.output = output
    state.output_quality = QUALITY_UNIQUE
    state.target = target.defindex
    state.quality = state.quality or QUALITY_UNIQUE
    return ""


def match_paint(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    match = PAINT_PATTERN.search(text)
    if not match:
        return None

    decimal = PAINT_DECIMALS.get(match.group(1).strip())
    if decimal is None:
        return None
    state.paint = decimal
    return strip_match(text, match)


STRANGIFIER_PATTERN = word_pattern("strangifier")


def match_strangifier(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    match = STRANGIFIER_PATTERN.search(text)
    if not match:
        return None

    target = catalog.get_item_by_name_tolerant(strip_match(text, match))
    if target is None:
        return None

    specific = catalog.find_item_by_affixes(target.item_name, " strangifier")
    state.defindex = specific.defindex if specific else GENERIC_STRANGIFIER
    state.target = target.defindex
    state.quality = state.quality or QUALITY_UNIQUE
    return ""


def match_killstreak_kit(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    if state.killstreak < 1 or not text.endswith(" kit"):
        return None

    target = catalog.get_item_by_name_tolerant(text[:-len(" kit")])
    if target is None:
        return None

    defindex = KILLSTREAK_KITS[state.killstreak]
    if state.killstreak == 1:
        specific = catalog.find_item_by_affixes(f"killstreak {target.item_name}", " kit")
        if specific is not None:
            defindex = specific.defindex

    state.defindex = defindex
    state.target = target.defindex
    state.quality = state.quality or QUALITY_UNIQUE
    return ""


def match_war_paint(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    if state.paintkit is None or "war paint" not in text:
        return None

    item = catalog.get_item_by_internal_name(WAR_PAINT_KEY.format(paintkit=state.paintkit))
    if item is None:
        return None

    state.defindex = item.defindex
    state.quality = state.quality or QUALITY_DECORATED
    return ""


CRATE_FAMILIES = [
    (re.compile(re.escape(SALVAGED_CRATE_PREFIX) + r"\s*(\d+)"), lambda series: SALVAGED_CRATE_DEFINDEX),
    (re.compile(re.escape(MUNITION_PREFIX) + r"\s*(\d+)"), get_munition_defindex),
    (re.compile(re.escape(SUPPLY_CRATE_PREFIX) + r"\s*(\d+)"), get_crate_defindex),
]


def match_crate(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    for pattern, to_defindex in CRATE_FAMILIES:
        match = pattern.search(text)
        if match:
            series = int(match.group(1))
            state.defindex = to_defindex(series)
            state.crateseries = series
            state.quality = QUALITY_UNIQUE
            return ""
    return None


def match_craft_number(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    match = LEADING_CRAFT_NUMBER.search(text) or TRAILING_CRAFT_NUMBER.search(text)
    if not match:
        return None
    state.pending_craftnumber = int(match.group(1))
    return strip_match(text, match)


def match_article(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    # The catalog is inconsistent about which names carry "The"
    if text.startswith("the ") and text not in catalog.the_names:
        return text[4:]
    if not text.startswith("the ") and "the " + text in catalog.the_names:
        return "the " + text
    return None


def resolve_item(catalog: CatalogIndex, text: str, state: ParseState) -> Optional[str]:
    item = catalog.get_item_by_name(text)
    if item is None:
        logger.debug(f"No catalog item named '{text}'")
        return None

    state.defindex = item.defindex
    if state.quality is None:
        state.quality = item.item_quality

    if item.item_class == "supply_crate":
        series = item.get_attribute_value(CRATE_SERIES_ATTRIBUTE)
        if series is None:
            series = catalog.get_static_attribute(item.defindex, CRATE_SERIES_ATTRIBUTE)
        if series is not None:
            state.crateseries = int(float(series))
    elif state.pending_craftnumber is not None:
        state.craftnumber = state.pending_craftnumber
    return ""


DEFAULT_RULES = (
    Rule("atomic_category", match_atomic_category, final=True),
    Rule("wear", match_wear),
    Rule("strange", match_strange),
    Rule("trade_flags", match_trade_flags),
    Rule("killstreak", match_killstreak),
    Rule("australium", match_australium),
    Rule("festivized", match_festivized),
    Rule("quality", match_quality),
    Rule("effect", match_effect),
    Rule("skin", match_skin),
    Rule("kit_fabricator", match_kit_fabricator, final=True),
    Rule("paint", match_paint),
    Rule("strangifier", match_strangifier, final=True),
    Rule("killstreak_kit", match_killstreak_kit, final=True),
    Rule("war_paint", match_war_paint, final=True),
    Rule("crate", match_crate, final=True),
    Rule("craft_number", match_craft_number),
    Rule("article", match_article),
    Rule("resolve", resolve_item, final=True),
)


class NameParser:
    """Parses display names against one catalog snapshot"""

    def __init__(self, catalog: CatalogIndex, rules: Iterable[Rule] = DEFAULT_RULES):
        self.catalog = catalog
        self.rules = tuple(rules)

    def parse(self, name: str) -> Attributes:
        """
        Parse a display name

        Never raises for unknown names; check ``Attributes.defindex``
        (None when the name did not resolve).
        """
        text = normalize(name)
        state = ParseState()

        for rule in self.rules:
            remaining = rule.apply(self.catalog, text, state)
            if remaining is None:
                continue
            text = remaining
            if rule.final:
                break

        return state.to_attributes()

    def parse_all(self, names: Iterable[str]) -> List[Attributes]:
        return [self.parse(name) for name in names]


def parse_name(name: str, catalog: CatalogIndex) -> Attributes:
    return NameParser(catalog).parse(name)
