"""Personnel Data Models

Models for the externally owned personnel roster and the per-sector position
snapshot taken when a sector is submitted.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .geometry import Point
from ..geometry_validation import is_numeric


class PersonnelRecord(BaseModel):
    """Roster entry as stored under ``personnel/<id>``.
    
    Wire form is ``{"name", "deviceId", "latitude", "longitude"}``; the roster
    service owns it and this engine only reads it.
    """
    id: str = Field(..., description="Roster key of the person")
    name: str = Field("", description="Display name")
    device_id: Optional[str] = Field(None, description="Identifier of the tracked device")
    position: Optional[Point] = Field(None, description="Last reported position")
    
    @classmethod
    def from_record(cls, personnel_id: str, record: Dict[str, Any]) -> "PersonnelRecord":
        """Decode a roster wire record. Missing or malformed coordinates give no position."""
        lat, lng = record.get("latitude"), record.get("longitude")
        position = Point(latitude=lat, longitude=lng) if is_numeric(lat) and is_numeric(lng) else None
        device_id = record.get("deviceId")
        return cls(
            id=personnel_id,
            name=str(record.get("name") or ""),
            device_id=str(device_id) if device_id is not None else None,
            position=position,
        )


class PersonnelPosition(BaseModel):
    """Position of one person embedded in a stored sector.
    
    Captured once at submission; it does not follow later roster updates.
    Coordinates are optional because records written by other clients may
    lack them.
    """
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    name: Optional[str] = None
    
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None
    
    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"latitude": self.latitude, "longitude": self.longitude}
        if self.name:
            record["name"] = self.name
        return record
    
    @classmethod
    def from_record(cls, record: Any) -> "PersonnelPosition":
        if not isinstance(record, dict):
            return cls()
        lat, lng = record.get("latitude"), record.get("longitude")
        name = record.get("name")
        return cls(
            latitude=float(lat) if is_numeric(lat) else None,
            longitude=float(lng) if is_numeric(lng) else None,
            name=str(name) if name is not None else None,
        )


class PersonnelOption(BaseModel):
    """Entry of the personnel multi-select."""
    value: str = Field(..., description="Roster key submitted when selected")
    label: str = Field(..., description="Text shown to the operator")
