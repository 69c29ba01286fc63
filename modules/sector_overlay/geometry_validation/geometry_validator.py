"""Geometry Validator

Pure functions checking that coordinate structures are well formed. They are
deliberately permissive: ring closure, self-intersection and coordinate range
are not checked, only the shape of the data.
"""

import math
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any, List, Optional, Tuple


def is_numeric(value: Any) -> bool:
    """True for finite int/float values. Booleans are not coordinates."""
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_point(value: Any) -> bool:
    return (_is_sequence(value) and len(value) >= 2
            and is_numeric(value[0]) and is_numeric(value[1]))


def validate_coordinates(coordinates: Any) -> bool:
    """Check a flat coordinate sequence.
    
    True iff ``coordinates`` is a sequence whose every element is itself a
    sequence of length >= 2 with numeric first two entries. An empty sequence
    is valid.
    
    Args:
        coordinates: Arbitrary, possibly nested, input
        
    Returns:
        True if every element is a well-formed coordinate pair
    """
    return _is_sequence(coordinates) and all(_is_point(point) for point in coordinates)


def validate_rings(rings: Any) -> bool:
    """Check polygon rings: at least one ring, every ring non-empty and valid."""
    return (_is_sequence(rings) and len(rings) > 0
            and all(_is_sequence(ring) and len(ring) > 0 and validate_coordinates(ring)
                    for ring in rings))


def center_pair(center: Any) -> Optional[Tuple[float, float]]:
    """Extract ``(lat, lng)`` from a ``{"lat", "lng"}`` mapping or a ``[lat, lng]`` pair.
    
    Returns:
        The pair, or None when the center is missing or malformed
    """
    if isinstance(center, Mapping):
        lat, lng = center.get("lat"), center.get("lng")
    elif _is_point(center):
        lat, lng = center[0], center[1]
    else:
        return None
    
    if is_numeric(lat) and is_numeric(lng):
        return float(lat), float(lng)
    return None


def validate_circle(center: Any, radius: Any) -> bool:
    """Check a circle: center present and well formed, radius numeric and > 0."""
    if center is None or radius is None:
        return False
    return center_pair(center) is not None and is_numeric(radius) and radius > 0


def validate_marker(lat: Any, lng: Any) -> bool:
    """Check a marker position. Zero is a valid coordinate; None is not."""
    if lat is None or lng is None:
        return False
    return is_numeric(lat) and is_numeric(lng)


def normalize_drawn_rings(coordinates: Any) -> Optional[List[Any]]:
    """Normalize rectangle/polygon draw output to a list of rings.
    
    Draw tools report either a single ring (``[[x, y], ...]``) or GeoJSON
    polygon rings (``[[[x, y], ...], ...]``).
    
    Returns:
        The list of rings, or None if the input is not a valid polygon
    """
    if _is_sequence(coordinates) and len(coordinates) > 0 and validate_coordinates(coordinates):
        return [list(coordinates)]
    if validate_rings(coordinates):
        return [list(ring) for ring in coordinates]
    return None
