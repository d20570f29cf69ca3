"""
Shared fixtures: a small catalog shaped like the real one
"""

import copy

import pytest

from tf2_names.services.catalog import CatalogIndex


def _item(defindex, name, item_name, quality=6, **extra):
    item = {
        "defindex": defindex,
        "name": name,
        "item_name": item_name,
        "item_quality": quality,
        "proper_name": False,
    }
    item.update(extra)
    return item


def _paint_can(defindex, number, item_name, *values):
    return _item(
        defindex, f"Paint Can {number}", item_name,
        item_class="tool",
        attributes=[{"name": "set item tint RGB", "class": "set_item_tint_rgb", "value": v} for v in values],
    )


def _crate(defindex, name, item_name, series=None):
    attributes = []
    if series is not None:
        attributes.append({"name": "set supply crate series", "class": "supply_crate_series", "value": series})
    return _item(defindex, name, item_name, item_class="supply_crate", attributes=attributes)


RAW_CATALOG = {
    "schema": {
        "qualities": {
            "Normal": 0,
            "rarity1": 1,
            "Vintage": 3,
            "rarity4": 5,
            "Unique": 6,
            "community": 7,
            "strange": 11,
            "haunted": 13,
            "collectors": 14,
            "paintkitweapon": 15,
        },
        "qualityNames": {
            "Normal": "Normal",
            "rarity1": "Genuine",
            "Vintage": "Vintage",
            "rarity4": "Unusual",
            "Unique": "Unique",
            "community": "Community",
            "strange": "Strange",
            "haunted": "Haunted",
            "collectors": "Collector's",
            "paintkitweapon": "Decorated Weapon",
        },
        "attribute_controlled_attached_particles": [
            {"id": 4, "name": "Community Sparkle"},
            {"id": 8, "name": "Haunted Ghosts"},
            {"id": 13, "name": "Burning Flames"},
            {"id": 14, "name": "Scorching Flames"},
            {"id": 33, "name": "Orbiting Fire"},
            {"id": 35, "name": "Smoking"},
            {"id": 701, "name": "Hot"},
            {"id": 702, "name": "Isotope"},
            {"id": 703, "name": "Cool"},
            {"id": 704, "name": "Energy Orb"},
            {"id": 3004, "name": "Eerie Orbiting Fire"},
        ],
        "paintkits": {
            "102": "Night Owl",
            "200": "Blue Mew",
            "300": "Sand Cannon",
            "301": "Sand Cannon Mk.II",
            "400": "Balloonicorn",
            "500": "Haunted Ghosts",
            "600": "Smissmas Sweater",
        },
        "kill_eater_score_types": [
            {"type": 0, "type_name": "Kills"},
            {"type": 1, "type_name": "Ubers"},
            {"type": 10, "type_name": "Critical Kills"},
            {"type": 15, "type_name": "Sentry Kills"},
            {"type": 17, "type_name": "Headshot Kills"},
            {"type": 97, "type_name": "Kills"},
        ],
        "attributes": [
            {"defindex": 134, "name": "attach particle effect"},
            {"defindex": 142, "name": "set item tint RGB"},
            {"defindex": 187, "name": "set supply crate series"},
        ],
        "items": [
            _item(18, "TF_WEAPON_ROCKETLAUNCHER", "Rocket Launcher", quality=0,
                  used_by_classes=["Soldier"]),
            _item(101, "Vintage Tyrolean", "Vintage Tyrolean", craft_class="hat", used_by_classes=["Medic"]),
            _item(199, "Upgradeable TF_WEAPON_SHOTGUN_PRIMARY", "Shotgun", craft_class="weapon",
                  used_by_classes=["Soldier", "Pyro", "Heavy", "Engineer"]),
            _item(205, "Upgradeable TF_WEAPON_ROCKETLAUNCHER", "Rocket Launcher", craft_class="weapon",
                  used_by_classes=["Soldier"]),
            _item(266, "Horseless Headless Horsemann's Headtaker", "Horseless Headless Horsemann's Headtaker",
                  quality=5, craft_class="weapon", used_by_classes=["Demoman"]),
            _item(267, "Haunted Metal Scrap", "Haunted Metal Scrap", craft_class="haunted_scrap"),
            _item(348, "Sharpened Volcano Fragment", "Sharpened Volcano Fragment", craft_class="weapon",
                  used_by_classes=["Pyro"]),
            _item(349, "Sun-on-a-Stick", "Sun-on-a-Stick", craft_class="weapon",
                  used_by_classes=["Scout"]),
            _item(378, "The Team Captain", "Team Captain", craft_class="hat", proper_name=True,
                  used_by_classes=["Soldier", "Heavy"], capabilities={"paintable": True, "nameable": True}),
            _item(593, "The Third Degree", "Third Degree", craft_class="weapon", proper_name=True,
                  used_by_classes=["Pyro"]),
            _item(1152, "TF_WEAPON_GRAPPLINGHOOK", "Grappling Hook", quality=0,
                  used_by_classes=["Scout", "Soldier", "Pyro"]),
            _item(1181, "The Hot Hand", "Hot Hand", used_by_classes=["Pyro"]),
            _item(2093, "Name Tag Duplicate", "Name Tag"),
            _item(5020, "Name Tag", "Name Tag", item_class="tool"),
            _item(5021, "Decoder Ring", "Mann Co. Supply Crate Key", item_class="tool"),
            _crate(5022, "Supply Crate 1", "Mann Co. Supply Crate", series=1),
            _paint_can(5027, 1, "Indubitably Green", 7511618),
            _paint_can(5037, 11, "Australium Gold", 15185211),
            _crate(5041, "Supply Crate 2", "Mann Co. Supply Crate", series=2),
            _crate(5045, "Supply Crate 3", "Mann Co. Supply Crate", series=5),
            _paint_can(5046, 9, "Team Spirit", 12073019, 5801378),
            _paint_can(5063, 25, "The Value of Teamwork", 8400928, 2452877),
            _crate(5068, "Salvaged Crate", "Salvaged Mann Co. Supply Crate"),
            _item(5300, "Paint Can", "Paint Can", attributes=[{"name": "set item tint RGB", "value": 1}]),
            _crate(5734, "Munition Crate 82", "Mann Co. Supply Munition", series=82),
            _crate(5850, "Gargoyle Case", "Gargoyle Case", series=120),
            _crate(5851, "Directors Cut Crate", "Mann Co. Director's Cut Reserve Crate"),
            _item(6060, "Strange Part: Kills", "Strange Part: Kills", quality=11, item_class="tool"),
            _item(6522, "Strangifier", "Strangifier", item_class="tool"),
            _item(6523, "Specialized Killstreak Item", "Kit", item_class="tool"),
            _item(6526, "Professional Killstreak Item", "Kit", item_class="tool"),
            _item(6527, "Killstreak Item", "Kit", item_class="tool"),
            _item(6530, "Killstreak Rocket Launcher Kit", "Kit", item_class="tool"),
            _item(6540, "Rocket Launcher Strangifier", "Strangifier", item_class="tool"),
            _item(15006, "concealedkiller_rocketlauncher_nightbomb", "Rocket Launcher", quality=15,
                  craft_class="weapon", used_by_classes=["Soldier"]),
            _item(16102, "Paintkit 102", "War Paint", quality=15, item_class="tool"),
            _item(20002, "Specialized Killstreak Fabricator", "Fabricator", item_class="tool"),
            _item(20003, "Professional Killstreak Fabricator", "Fabricator", item_class="tool"),
            _item(30246, "Unusual Cap", "Unusual Cap", craft_class="hat"),
            _item(30311, "Pet Balloonicorn", "Pet Balloonicorn", craft_class="hat"),
            _item(30900, "Cooling Breeze", "Cooling Breeze", craft_class="hat", used_by_classes=["Pyro"]),
            _item(31090, "Smoking Jacket", "Smoking Jacket", craft_class="hat", used_by_classes=["Spy"]),
            _item(31100, "Sweet Smissmas Sweater", "Sweet Smissmas Sweater", craft_class="hat"),
            _item(31107, "Festivized Formation", "Festivized Formation", craft_class="hat"),
        ],
    },
    "items_game": {
        "items": {
            "5851": {"static_attrs": {"set supply crate series": {"value": "118"}}},
            "5068": {"static_attrs": {"set supply crate series": "30"}},
        }
    },
}


@pytest.fixture
def raw_catalog():
    return copy.deepcopy(RAW_CATALOG)


@pytest.fixture
def catalog(raw_catalog):
    return CatalogIndex(raw_catalog, version="test", time_ms=1700000000000)
