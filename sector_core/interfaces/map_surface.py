"""Map Surface Interface

Abstract contract for the map the overlays are drawn on. The surface keeps
two separate collections: the layers drawn by the operator in the current
session and the overlays projected from remote data.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable


class MapSurface(ABC):
    """Abstract base class for map surface adapters."""
    
    @abstractmethod
    def add_drawn_layer(self, layer: Any) -> None:
        """Add an operator-drawn layer to the drawn-items group."""
        pass
    
    @abstractmethod
    def remove_drawn_layer(self, layer: Any) -> None:
        """Remove an operator-drawn layer from the drawn-items group."""
        pass
    
    @abstractmethod
    def add_overlay(self, overlay: Any) -> Hashable:
        """Render an overlay object (shape or marker with its popup).
        
        Returns:
            Handle used to remove the overlay later
        """
        pass
    
    @abstractmethod
    def remove_overlay(self, handle: Hashable) -> None:
        """Remove a previously rendered overlay."""
        pass
