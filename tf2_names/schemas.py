"""
Pydantic schemas for the raw catalog handed over by a catalog source
"""

from typing import List, Dict, Optional, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import CatalogItem


class RawParticle(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str


class RawScoreType(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: int
    type_name: str


class RawAttribute(BaseModel):
    model_config = ConfigDict(extra="ignore")

    defindex: int
    name: str
    attribute_class: Optional[str] = None
    description_string: Optional[str] = None


class RawSchema(BaseModel):
    """The "schema" part: items and enumerations"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    items: List[CatalogItem] = Field(..., min_length=1)
    qualities: Dict[str, int] = Field(..., description="Quality type -> id")
    quality_names: Dict[str, str] = Field(..., alias="qualityNames", description="Quality type -> display name")
    particles: List[RawParticle] = Field(..., alias="attribute_controlled_attached_particles")
    paintkits: Dict[int, str] = Field(..., description="Paintkit id -> skin name")
    kill_eater_score_types: List[RawScoreType] = Field(default_factory=list)
    attributes: List[RawAttribute] = Field(default_factory=list)

    @field_validator('quality_names')
    def validate_quality_names(cls, v, info):
        qualities = info.data.get('qualities') or {}
        missing = [q for q in qualities if q not in v]
        if missing:
            raise ValueError(f"Quality names missing for: {', '.join(missing)}")
        return v


class RawItemsGame(BaseModel):
    """Supplementary static attributes, keyed by defindex"""
    model_config = ConfigDict(extra="ignore")

    items: Dict[int, Dict[str, Any]] = Field(default_factory=dict)


class RawCatalog(BaseModel):
    """Complete raw catalog"""
    model_config = ConfigDict(extra="ignore")

    schema_: RawSchema = Field(..., alias="schema")
    items_game: RawItemsGame = Field(default_factory=RawItemsGame)
