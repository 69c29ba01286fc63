"""Map Session for Sector Overlay"""

from .map_session import MapSession

__all__ = ['MapSession']
