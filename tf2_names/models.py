"""
Data models for tf2-names
"""

from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class Quality(int, Enum):
    NORMAL = 0
    GENUINE = 1
    RARITY2 = 2
    VINTAGE = 3
    RARITY3 = 4
    UNUSUAL = 5
    UNIQUE = 6
    COMMUNITY = 7
    VALVE = 8
    SELF_MADE = 9
    CUSTOMIZED = 10
    STRANGE = 11
    COMPLETED = 12
    HAUNTED = 13
    COLLECTORS = 14
    DECORATED = 15


class Wear(int, Enum):
    FACTORY_NEW = 1
    MINIMAL_WEAR = 2
    FIELD_TESTED = 3
    WELL_WORN = 4
    BATTLE_SCARRED = 5


class Killstreak(int, Enum):
    NONE = 0
    BASIC = 1
    SPECIALIZED = 2
    PROFESSIONAL = 3


class CharacterClass(str, Enum):
    SCOUT = "Scout"
    SOLDIER = "Soldier"
    PYRO = "Pyro"
    DEMOMAN = "Demoman"
    HEAVY = "Heavy"
    ENGINEER = "Engineer"
    MEDIC = "Medic"
    SNIPER = "Sniper"
    SPY = "Spy"


class CatalogItem(BaseModel):
    """Item definition from the catalog"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    defindex: int
    name: str = ""  # internal name, e.g. "Paintkit 200"
    item_name: str
    item_quality: int = 0
    item_class: Optional[str] = None
    craft_class: Optional[str] = None
    used_by_classes: List[str] = Field(default_factory=list)
    attributes: List[Dict[str, Any]] = Field(default_factory=list)
    capabilities: Dict[str, Any] = Field(default_factory=dict)
    proper_name: bool = False

    def get_attribute_value(self, name: str) -> Optional[Any]:
        """Value of the first attribute with this name"""
        for attribute in self.attributes:
            if attribute.get("name") == name:
                return attribute.get("value")
        return None


class Attributes(BaseModel):
    """
    Structured description of a tradable item

    A missing defindex means the name could not be resolved.
    """
    defindex: Optional[int] = None
    quality: Optional[int] = None
    quality2: Optional[int] = None  # elevated quality shown before the primary one
    craftable: bool = True
    tradable: bool = True
    killstreak: int = Field(default=0, ge=0, le=3)
    australium: bool = False
    festive: bool = False
    effect: Optional[int] = None
    paintkit: Optional[int] = None
    wear: Optional[int] = Field(default=None, ge=1, le=5)
    paint: Optional[int] = None
    crateseries: Optional[int] = None
    craftnumber: Optional[int] = None
    target: Optional[int] = None
    output: Optional[int] = None
    output_quality: Optional[int] = None

    @property
    def resolved(self) -> bool:
        return self.defindex is not None
