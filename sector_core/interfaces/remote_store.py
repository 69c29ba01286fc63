"""Remote Store Interface

This module defines the abstract base class for the shared remote key-value
store that holds sector records and the personnel roster. The store is opaque
to the overlay engine: it is only reached through subscribe, read and append
primitives.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


SnapshotCallback = Callable[[Optional[Any]], None]


class Subscription(ABC):
    """Handle for a live subscription returned by ``RemoteStore.subscribe``."""
    
    @abstractmethod
    def unsubscribe(self) -> None:
        """Detach the listener. Calling it more than once has no effect."""
        pass
    
    @property
    @abstractmethod
    def active(self) -> bool:
        """Whether the listener still receives snapshots."""
        pass


class RemoteStore(ABC):
    """Abstract base class for remote store adapters.
    
    Paths are slash separated (``sectorDetails``, ``personnel/p1``). Values are
    plain JSON-like structures: dictionaries, lists, strings, numbers, booleans
    or ``None`` for a missing path.
    """
    
    @abstractmethod
    def subscribe(self, path: str, on_snapshot: SnapshotCallback) -> Subscription:
        """Register a live listener on a path.
        
        The callback receives the full value at ``path`` (a snapshot, never a
        delta) once on registration and again whenever anything under the path
        changes.
        
        Args:
            path: Store path to observe
            on_snapshot: Callback receiving the full value (or None)
            
        Returns:
            Subscription: Handle used to detach the listener
        """
        pass
    
    @abstractmethod
    async def read_once(self, path: str) -> Optional[Any]:
        """Read the current value at a path.
        
        Returns:
            The stored value, or None when nothing is stored at ``path``
        """
        pass
    
    @abstractmethod
    async def append_new(self, path: str, value: Any) -> str:
        """Append a value under a collection path with a store-generated key.
        
        Returns:
            str: The generated key of the new entry
        """
        pass
    
    @abstractmethod
    def ping(self) -> bool:
        """Check that the store is reachable."""
        pass
