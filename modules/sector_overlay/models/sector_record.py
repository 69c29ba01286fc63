"""Sector Record Codec

Converts between the wire form stored under ``sectorDetails`` and the typed
sector models. The geometry variant of a stored record is decided here, once,
from the fields it carries:

- ``circle`` with a center: circle
- ``geometryType`` tag: polygon, polyline or marker
- untagged ``coordinates``: polygon rings (records from older clients)
"""

from typing import Any, Dict, List, Optional

from .geometry import (
    CircleGeometry, Geometry, MarkerGeometry, Point,
    PolygonGeometry, PolylineGeometry,
)
from .personnel import PersonnelPosition
from .sector import DraftSector, PersistedSector
from ..geometry_validation import (
    center_pair, validate_circle, validate_coordinates, validate_marker, validate_rings,
)
from sector_core.exceptions import SectorValidationError


def geometry_from_record(record: Dict[str, Any]) -> Geometry:
    """Decide and decode the geometry of a stored sector record.
    
    Raises:
        SectorValidationError: If the record carries no well-formed geometry
    """
    circle = record.get("circle")
    if isinstance(circle, dict) and circle.get("center") is not None:
        if not validate_circle(circle.get("center"), circle.get("radius")):
            raise SectorValidationError("Malformed circle in sector record", {"circle": circle})
        lat, lng = center_pair(circle["center"])
        return CircleGeometry(center=Point(latitude=lat, longitude=lng),
                              radius_meters=circle["radius"])
    
    geometry_type = record.get("geometryType")
    coordinates = record.get("coordinates")
    
    if geometry_type == "marker":
        marker = record.get("marker") or {}
        if not validate_marker(marker.get("lat"), marker.get("lng")):
            raise SectorValidationError("Malformed marker in sector record", {"marker": marker})
        return MarkerGeometry(position=Point(latitude=marker["lat"], longitude=marker["lng"]))
    
    if geometry_type == "polyline":
        if not coordinates or not validate_coordinates(coordinates):
            raise SectorValidationError("Malformed polyline in sector record")
        return PolylineGeometry.from_lng_lat(coordinates)
    
    if coordinates is not None and validate_rings(coordinates):
        return PolygonGeometry.from_lng_lat_rings(coordinates)
    
    raise SectorValidationError("Sector record has no renderable geometry",
                                {"geometryType": geometry_type})


def geometry_to_record(geometry: Geometry, coordinates: Optional[List[Any]] = None) -> Dict[str, Any]:
    """Encode geometry fields of a sector record."""
    if isinstance(geometry, CircleGeometry):
        return {
            "geometryType": "circle",
            "circle": {"center": geometry.center.to_lat_lng(), "radius": geometry.radius_meters},
            "coordinates": coordinates or [],
        }
    if isinstance(geometry, MarkerGeometry):
        return {
            "geometryType": "marker",
            "marker": geometry.position.to_lat_lng(),
            "coordinates": coordinates or [],
        }
    if isinstance(geometry, PolylineGeometry):
        return {"geometryType": "polyline", "coordinates": geometry.to_lng_lat()}
    return {"geometryType": "polygon", "coordinates": geometry.to_lng_lat_rings()}


def sector_to_record(draft: DraftSector, geometry: Geometry,
                     personnel: Dict[str, PersonnelPosition]) -> Dict[str, Any]:
    """Assemble the wire record of a new sector from a draft."""
    record: Dict[str, Any] = {
        "title": draft.title,
        "date": draft.date or "",
        "startTime": draft.start_time or "",
        "endTime": draft.end_time or "",
    }
    record.update(geometry_to_record(geometry, draft.coordinates))
    record["personnel"] = {device_id: position.to_record()
                           for device_id, position in personnel.items()}
    return record


def sector_from_record(sector_id: str, record: Any) -> PersistedSector:
    """Decode a stored sector record.
    
    Raises:
        SectorValidationError: If the record is not a mapping or has no valid geometry
    """
    if not isinstance(record, dict):
        raise SectorValidationError("Sector record is not an object", {"sector_id": sector_id})
    
    personnel_data = record.get("personnel")
    personnel = {}
    if isinstance(personnel_data, dict):
        personnel = {str(key): PersonnelPosition.from_record(value)
                     for key, value in personnel_data.items()}
    
    return PersistedSector(
        id=sector_id,
        title=str(record.get("title") or ""),
        geometry=geometry_from_record(record),
        date=record.get("date") or None,
        start_time=record.get("startTime") or None,
        end_time=record.get("endTime") or None,
        personnel=personnel,
    )
