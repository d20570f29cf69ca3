"""
TF2 Static Data
Fixed tables the catalog does not carry, organized by concern
"""

from .models import CharacterClass, Quality

# Wear suffixes, tested in this order
WEAR_LABELS = {
    1: "Factory New",
    2: "Minimal Wear",
    3: "Field-Tested",
    4: "Well-Worn",
    5: "Battle Scarred",
}

KILLSTREAK_LABELS = {
    1: "Killstreak",
    2: "Specialized Killstreak",
    3: "Professional Killstreak",
}

# Tested professional -> specialized -> basic
KILLSTREAK_MARKERS = [
    ("professional killstreak", 3),
    ("specialized killstreak", 2),
    ("killstreak", 1),
]

CRAFTABILITY_SYNONYMS = {
    "uncraftable": "non-craftable",
}

TRADABILITY_SYNONYMS = {
    "untradeable": "non-tradable",
    "untradable": "non-tradable",
    "non-tradeable": "non-tradable",
}

CHARACTER_CLASSES = [c.value for c in CharacterClass]

# Quality ids referenced by name rules
QUALITY_UNUSUAL = Quality.UNUSUAL.value
QUALITY_UNIQUE = Quality.UNIQUE.value
QUALITY_STRANGE = Quality.STRANGE.value
QUALITY_DECORATED = Quality.DECORATED.value

# Items named as a whole, looked up without any modifier handling
ATOMIC_CATEGORIES = [
    "strange part",
    "strange cosmetic part",
    "strange filter",
    "strange count transfer tool",
    "strange bacon grease",
]

# Item names that begin with a quality word
QUALITY_WORD_EXCEPTIONS = [
    "haunted ghosts",
    "haunted phantasm jr",
    "haunted phantasm",
    "haunted metal scrap",
    "haunted hat",
    "haunted kraken",
    "haunted forever!",
    "haunted cremation",
    "haunted wick",
    "unusual cap",
    "vintage tyrolean",
    "vintage merryweather",
]

# Community Sparkle sits on Community/Self-Made items and keeps their quality
NON_PROMOTING_EFFECT_ID = 4

# Effects only found on decorated weapons: Hot, Isotope, Cool, Energy Orb
WEAPON_EFFECT_IDS = frozenset([701, 702, 703, 704])

# effect name -> text that means the match belongs to the item name instead
EFFECT_VETOES = {
    "cool": ("cooling",),
    "hot": ("hot hand", "hot dogger", "hottie"),
    "smoking": ("smoking jacket", "smoking skid lid"),
}

# Hat effects whose names double as skin names on decorated weapons
WORN_EFFECT_VETOES = frozenset(["haunted ghosts"])

# skin name -> item names containing it
SKIN_VETOES = {
    "balloonicorn": ("pet balloonicorn", "balloonicorn plush"),
    "smissmas sweater": ("sweet smissmas sweater",),
}

# Paint can name -> decimal colour
PAINT_DECIMALS = {
    "indubitably green": 7511618,
    "zepheniah's greed": 4345659,
    "noble hatter's violet": 5322826,
    "color no. 216-190-216": 14204632,
    "a deep commitment to purple": 8208497,
    "mann co. orange": 13595446,
    "muskelmannbraun": 10843461,
    "peculiarly drab tincture": 12955537,
    "radigan conagher brown": 6901050,
    "ye olde rustic colour": 8154199,
    "australium gold": 15185211,
    "aged moustache grey": 8289918,
    "an extraordinary abundance of tinge": 15132390,
    "a distinctive lack of hue": 1315860,
    "team spirit": 12073019,
    "pink as hell": 16738740,
    "a color similar to slate": 3100495,
    "drably olive": 8421376,
    "the bitter taste of defeat and lime": 3329330,
    "the color of a gentlemann's business pants": 15787660,
    "dark salmon injustice": 15308410,
    "operator's overalls": 4732984,
    "waterlogged lab coat": 11049612,
    "balaclavas are forever": 3874595,
    "an air of debonair": 6637376,
    "the value of teamwork": 8400928,
    "cream spirit": 12807213,
    "a mann's mint": 12377523,
    "after eight": 2960676,
}

# Crafting recipes
KIT_FABRICATORS = {
    # killstreak tier: (fabricator defindex, output kit defindex)
    2: (20002, 6523),
    3: (20003, 6526),
}

KILLSTREAK_KITS = {
    1: 6527,
    2: 6523,
    3: 6526,
}

GENERIC_STRANGIFIER = 6522

WAR_PAINT_KEY = "Paintkit {paintkit}"

# Crate families
SALVAGED_CRATE_PREFIX = "salvaged mann co. supply crate #"
SALVAGED_CRATE_DEFINDEX = 5068

MUNITION_PREFIX = "mann co. supply munition #"
MUNITION_SERIES = {
    82: 5734,
    83: 5735,
    84: 5742,
    85: 5752,
    90: 5781,
    91: 5802,
    92: 5803,
    103: 5859,
}

SUPPLY_CRATE_PREFIX = "mann co. supply crate #"
SUPPLY_CRATE_SERIES = {
    5022: [1, 3, 7, 12, 13, 18, 19, 23, 26, 31, 34, 39, 43, 47, 54, 57, 75],
    5041: [2, 4, 8, 11, 14, 17, 20, 24, 27, 32, 37, 42, 44, 49, 56, 71, 76],
    5045: [5, 9, 10, 15, 16, 21, 25, 28, 29, 33, 38, 41, 45, 55, 59, 77],
}

CRATE_SERIES_ATTRIBUTE = "set supply crate series"

# Catalog quirks
NAME_TAG_DUPLICATE = ("Name Tag", 2093)

EXCLUDED_WEAPONS = [
    266,    # Horseless Headless Horsemann's Headtaker
    452,    # Three-Rune Blade
    466,    # Maul
    474,    # Conscientious Objector
    572,    # Unarmed Combat
    574,    # Wanga Prick
    587,    # Apoco-Fists
    638,    # Sharp Dresser
    735,    # Sapper
    736,    # Sapper
    737,    # Construction PDA
    851,    # AWPer Hand
    880,    # Freedom Staff
    933,    # Ap-Sap
    939,    # Bat Outta Hell
    947,    # Quackenbirdt
    1013,   # Ham Shank
    1152,   # Grappling Hook
    30474,  # Nostromo Napalmer
]

# Jungle Inferno weapons missing from the craftable set
EXTRA_TRADING_WEAPONS = [1178, 1179, 1180, 1181, 1190]

# Non-Craftable Sharpened Volcano Fragment and Sun-on-a-Stick
NO_UNCRAFTABLE_VARIANT = [348, 349]

EXCLUDED_SCORE_TYPE_IDS = [0, 97]

EXCLUDED_SCORE_TYPES = [
    "Ubers",
    "Kill Assists",
    "Sentry Kills",
    "Sodden Victims",
    "Spies Shocked",
    "Heads Taken",
    "Humiliations",
    "Gifts Given",
    "Deaths Feigned",
    "Buildings Sapped",
    "Tickle Fights Won",
    "Opponents Flattened",
    "Food Items Eaten",
    "Banners Deployed",
    "Seconds Cloaked",
    "Health Dispensed to Teammates",
    "Teammates Teleported",
    "KillEaterEvent_UniquePlayerKills",
    "Points Scored",
    "Double Donks",
    "Teammates Whipped",
    "Wrangled Sentry Kills",
    "Carnival Kills",
    "Carnival Underworld Kills",
    "Carnival Games Won",
    "Contracts Completed",
    "Contract Points",
    "Contract Bonus Points",
    "Times Performed",
    "Kills and Assists during Invasion Event",
    "Kills and Assists on 2Fort Invasion",
    "Kills and Assists on Probed",
    "Kills and Assists on Byre",
    "Kills and Assists on Watergate",
    "Souls Collected",
    "Merasmissions Completed",
    "Halloween Transmutes Performed",
    "Power Up Canteens Used",
    "Contract Points Earned",
    "Contract Points Contributed To Friends",
]


def get_crate_defindex(series):
    """Returns the supply crate defindex for a series number"""
    for defindex, series_numbers in SUPPLY_CRATE_SERIES.items():
        if series in series_numbers:
            return defindex
    return None


def get_munition_defindex(series):
    """Returns the munition crate defindex for a series number"""
    return MUNITION_SERIES.get(series)
