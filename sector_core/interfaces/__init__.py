"""Sector Overlay Framework Interfaces

This package contains the abstract contracts for the external collaborators
the overlay engine talks to: the remote key-value store, the map surface and
the user-facing notifier.
"""

from .remote_store import RemoteStore, Subscription, SnapshotCallback
from .map_surface import MapSurface
from .notifier import Notifier

__all__ = ['RemoteStore', 'Subscription', 'SnapshotCallback', 'MapSurface', 'Notifier']
