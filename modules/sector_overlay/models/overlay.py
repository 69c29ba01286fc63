"""Overlay Data Models

Render-only projections of stored sectors onto the map surface. Overlays have
no identity of their own beyond the record they were projected from.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from .geometry import Point


class OverlayKind(str, Enum):
    """Kind of map object an overlay is drawn as."""
    CIRCLE = "circle"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    MARKER = "marker"


class MarkerIcon(BaseModel):
    """Custom marker icon with size and anchor in pixels."""
    icon_url: str = "maps-flags_447031.png"
    icon_size: Tuple[int, int] = (32, 32)
    icon_anchor: Tuple[int, int] = (16, 32)
    
    @classmethod
    def from_config(cls, settings: Dict[str, Any]) -> "MarkerIcon":
        return cls(**settings) if settings else cls()


class OverlayObject(BaseModel):
    """One shape or marker with its popup."""
    kind: OverlayKind
    source_id: str = Field(..., description="Key of the sector record this was projected from")
    coordinates: Optional[List[List[float]]] = Field(None, description="Ring or line in [lng, lat] pairs")
    center: Optional[Point] = None
    radius_meters: Optional[float] = None
    position: Optional[Point] = None
    popup: Optional[str] = Field(None, description="Popup text bound to the overlay")
    icon: Optional[MarkerIcon] = None
    
    def is_shape(self) -> bool:
        return self.kind != OverlayKind.MARKER
