"""Geometry Data Models

Pydantic models for the tagged geometry union carried by drafts and stored
sectors. Drawn coordinate pairs use GeoJSON ``[longitude, latitude]`` order;
``Point`` always names its axes explicitly.
"""

from enum import Enum
from typing import Annotated, Any, List, Literal, Sequence, Union

from pydantic import BaseModel, Field, field_validator


class LayerType(str, Enum):
    """Draw tool that produced a layer."""
    RECTANGLE = "rectangle"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    CIRCLE = "circle"
    MARKER = "marker"


class Point(BaseModel):
    """Atomic coordinate unit."""
    latitude: float = Field(..., allow_inf_nan=False, description="Latitude in decimal degrees")
    longitude: float = Field(..., allow_inf_nan=False, description="Longitude in decimal degrees")
    
    @classmethod
    def from_lng_lat(cls, pair: Sequence[Any]) -> "Point":
        """Build a point from a GeoJSON ``[lng, lat, ...]`` pair."""
        return cls(latitude=pair[1], longitude=pair[0])
    
    def to_lng_lat(self) -> List[float]:
        return [self.longitude, self.latitude]
    
    def to_lat_lng(self) -> dict:
        return {"lat": self.latitude, "lng": self.longitude}


class PolygonGeometry(BaseModel):
    """Polygon made of one or more rings (rectangles normalize to this)."""
    kind: Literal["polygon"] = "polygon"
    rings: List[List[Point]] = Field(..., min_length=1, description="Coordinate rings")
    
    @field_validator("rings")
    @classmethod
    def validate_rings(cls, v: List[List[Point]]) -> List[List[Point]]:
        """Ensure every ring has at least one point."""
        if any(not ring for ring in v):
            raise ValueError("Polygon rings must not be empty")
        return v
    
    @classmethod
    def from_lng_lat_rings(cls, rings: Sequence[Sequence[Sequence[Any]]]) -> "PolygonGeometry":
        return cls(rings=[[Point.from_lng_lat(pair) for pair in ring] for ring in rings])
    
    def to_lng_lat_rings(self) -> List[List[List[float]]]:
        return [[point.to_lng_lat() for point in ring] for ring in self.rings]


class PolylineGeometry(BaseModel):
    """Open line through a sequence of points."""
    kind: Literal["polyline"] = "polyline"
    points: List[Point] = Field(..., min_length=1, description="Line vertices")
    
    @classmethod
    def from_lng_lat(cls, points: Sequence[Sequence[Any]]) -> "PolylineGeometry":
        return cls(points=[Point.from_lng_lat(pair) for pair in points])
    
    def to_lng_lat(self) -> List[List[float]]:
        return [point.to_lng_lat() for point in self.points]


class CircleGeometry(BaseModel):
    """Circle given by its center and a radius in meters."""
    kind: Literal["circle"] = "circle"
    center: Point
    radius_meters: float = Field(..., gt=0, allow_inf_nan=False, description="Radius in meters")


class MarkerGeometry(BaseModel):
    """Single point marker."""
    kind: Literal["marker"] = "marker"
    position: Point


Geometry = Annotated[
    Union[PolygonGeometry, PolylineGeometry, CircleGeometry, MarkerGeometry],
    Field(discriminator="kind")
]
