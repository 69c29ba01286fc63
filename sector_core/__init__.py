"""
Sector Overlay Framework Core Package

This package contains the shared infrastructure for the sector overlay
utilities: configuration, logging, exceptions, collaborator interfaces and
the remote store connection layer used by the feature modules.
"""

from .interfaces import RemoteStore, Subscription, MapSurface, Notifier

__version__ = "1.0.0"
__all__ = ['RemoteStore', 'Subscription', 'MapSurface', 'Notifier']
