"""
Headless collaborator adapters.

A map surface that records what would be drawn and a notifier that writes to
the log. Used when the engine runs without a browser map, e.g. in replays
and tests.
"""

import itertools
from typing import Any, Dict, Hashable, List, Tuple

from ..interfaces import MapSurface, Notifier
from ..utils import get_logger

logger = get_logger(__name__)


class RecordingMapSurface(MapSurface):
    """Map surface keeping drawn layers and rendered overlays in memory."""
    
    def __init__(self):
        self.drawn_layers: List[Any] = []
        self.overlays: Dict[int, Any] = {}
        self._handles = itertools.count(1)
    
    def add_drawn_layer(self, layer: Any) -> None:
        self.drawn_layers.append(layer)
    
    def remove_drawn_layer(self, layer: Any) -> None:
        if layer in self.drawn_layers:
            self.drawn_layers.remove(layer)
    
    def add_overlay(self, overlay: Any) -> Hashable:
        handle = next(self._handles)
        self.overlays[handle] = overlay
        return handle
    
    def remove_overlay(self, handle: Hashable) -> None:
        self.overlays.pop(handle, None)
    
    def rendered(self) -> List[Any]:
        """Overlays currently on the surface, in render order."""
        return [self.overlays[handle] for handle in sorted(self.overlays)]


class LoggingNotifier(Notifier):
    """Notifier writing operator messages to the log and keeping a history."""
    
    def __init__(self):
        self.history: List[Tuple[str, str]] = []
    
    def notify_success(self, message: str) -> None:
        logger.info(message)
        self.history.append(("success", message))
    
    def notify_error(self, message: str) -> None:
        logger.error(message)
        self.history.append(("error", message))
