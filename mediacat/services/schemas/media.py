# mediacat/services/schemas/media.py
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class RestrictionRead(BaseModel):
    catalogues: List[str] = Field(default_factory=list)
    # None = list not defined for this restriction
    allowed: Optional[List[str]] = None
    forbidden: Optional[List[str]] = None


class MediaRead(BaseModel):
    id: Optional[str] = None
    popularity: Optional[float] = None  # None when unknown (NaN on the entity)
    restrictions: List[RestrictionRead] = Field(default_factory=list)
    external_ids: Dict[str, str] = Field(default_factory=dict)


class MediaPatch(BaseModel):
    id: Optional[str] = None
    popularity: Optional[float] = None
    external_ids: Optional[Dict[str, str]] = None
