"""Geometry Validation for Sector Overlay

Shape well-formedness gates applied to drawn layers before they are accepted
and to stored sector records before they are rendered.
"""

from .geometry_validator import (
    is_numeric,
    validate_coordinates,
    validate_rings,
    validate_circle,
    validate_marker,
    center_pair,
    normalize_drawn_rings,
)

__all__ = [
    'is_numeric',
    'validate_coordinates',
    'validate_rings',
    'validate_circle',
    'validate_marker',
    'center_pair',
    'normalize_drawn_rings',
]
