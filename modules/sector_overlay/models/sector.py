"""Sector Data Models

Models for the client-local draft being edited, the layers drawn in the
current session and the immutable sector records held by the remote store.
"""

import uuid
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, Field

from .geometry import Geometry, LayerType
from .personnel import PersonnelPosition


class LayerStatus(str, Enum):
    """Lifecycle of an operator-drawn layer."""
    PENDING = "pending"
    COMMITTED = "committed"
    ABANDONED = "abandoned"


class DrawnLayer(BaseModel):
    """Shape drawn by the operator in this session.
    
    Pending layers are the uncommitted geometry a submission collects.
    Committed and abandoned layers stay on the map but are not submitted again.
    """
    layer_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    layer_type: LayerType
    geometry: Geometry
    status: LayerStatus = LayerStatus.PENDING
    
    def is_pending(self) -> bool:
        return self.status == LayerStatus.PENDING
    
    def coordinates(self) -> Any:
        """Raw coordinates of the layer as written into a sector record."""
        geometry = self.geometry
        if geometry.kind == "polygon":
            return geometry.to_lng_lat_rings()
        if geometry.kind == "polyline":
            return geometry.to_lng_lat()
        if geometry.kind == "circle":
            return geometry.center.to_lng_lat()
        return geometry.position.to_lng_lat()


class DraftSector(BaseModel):
    """Sector being edited in the open form."""
    title: str = ""
    personnel_ids: Set[str] = Field(default_factory=set)
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    geometry: Optional[Geometry] = None
    coordinates: List[Any] = Field(default_factory=list, description="Coordinates collected at submit")
    
    def reset(self) -> None:
        """Return the editable fields to their empty defaults.
        
        ``coordinates`` is left as is; it is overwritten by the next submit.
        """
        self.title = ""
        self.personnel_ids = set()
        self.date = None
        self.start_time = None
        self.end_time = None
        self.geometry = None


class PersistedSector(BaseModel):
    """Sector record decoded from ``sectorDetails/<id>``."""
    id: str
    title: str = ""
    geometry: Geometry
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    personnel: Dict[str, PersonnelPosition] = Field(
        default_factory=dict,
        description="Device identifier to position captured at submission"
    )
