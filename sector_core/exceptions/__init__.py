"""
Custom exceptions for the Sector Overlay system.

This module provides domain-specific exception classes for error handling
and debugging throughout the system.
"""

from .custom_exceptions import (
    SectorBaseException,
    SectorConfigurationError,
    SectorValidationError,
    SectorStoreError,
    SectorProcessingError,
)

__all__ = [
    "SectorBaseException",
    "SectorConfigurationError",
    "SectorValidationError",
    "SectorStoreError",
    "SectorProcessingError",
]
