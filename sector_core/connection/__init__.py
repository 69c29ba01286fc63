"""
Connection module for the Sector Overlay system.

This module provides the remote store connection bootstrap and the reference
in-memory store and headless collaborator adapters.
"""

from .store_connector import StoreConnector
from .in_memory_store import InMemoryRemoteStore
from .headless_adapters import RecordingMapSurface, LoggingNotifier

__all__ = [
    'StoreConnector',
    'InMemoryRemoteStore',
    'RecordingMapSurface',
    'LoggingNotifier'
]
