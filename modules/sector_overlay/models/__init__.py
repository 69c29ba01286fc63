"""Sector Overlay Data Models

Pydantic models for geometry, drafts, stored sectors, personnel and overlays,
plus the codec for stored sector records.
"""

from .geometry import (
    LayerType, Point, PolygonGeometry, PolylineGeometry,
    CircleGeometry, MarkerGeometry, Geometry,
)
from .personnel import PersonnelRecord, PersonnelPosition, PersonnelOption
from .sector import LayerStatus, DrawnLayer, DraftSector, PersistedSector
from .overlay import OverlayKind, MarkerIcon, OverlayObject
from .sector_record import (
    geometry_from_record, geometry_to_record, sector_to_record, sector_from_record,
)

__all__ = [
    'LayerType', 'Point', 'PolygonGeometry', 'PolylineGeometry',
    'CircleGeometry', 'MarkerGeometry', 'Geometry',
    'PersonnelRecord', 'PersonnelPosition', 'PersonnelOption',
    'LayerStatus', 'DrawnLayer', 'DraftSector', 'PersistedSector',
    'OverlayKind', 'MarkerIcon', 'OverlayObject',
    'geometry_from_record', 'geometry_to_record', 'sector_to_record', 'sector_from_record',
]
