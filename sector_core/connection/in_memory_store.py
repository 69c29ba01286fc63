"""
In-memory remote store for the Sector Overlay system.

Reference ``RemoteStore`` adapter holding a JSON-like tree in memory. Every
write fans a fresh full snapshot out to the listeners of every affected path,
which is the delivery model the overlay engine is written against.
"""

import asyncio
import copy
import itertools
from typing import Any, Dict, List, Optional

from ..interfaces import RemoteStore, Subscription, SnapshotCallback
from ..exceptions import SectorStoreError
from ..utils import get_logger

logger = get_logger(__name__)


def _split_path(path: str) -> List[str]:
    return [part for part in path.strip("/").split("/") if part]


class InMemorySubscription(Subscription):
    """Listener registration on an ``InMemoryRemoteStore`` path."""
    
    def __init__(self, store: "InMemoryRemoteStore", path: str, callback: SnapshotCallback):
        self._store = store
        self.path = path
        self.callback = callback
        self._active = True
    
    @property
    def active(self) -> bool:
        return self._active
    
    def unsubscribe(self) -> None:
        if self._active:
            self._active = False
            self._store._detach(self)
            logger.debug(f"Unsubscribed listener from '{self.path}'")


class InMemoryRemoteStore(RemoteStore):
    """
    Remote store backed by a nested dictionary.
    
    Keys generated by ``append_new`` are strictly increasing so collections
    iterate in insertion order, the same ordering guarantee push keys give.
    """
    
    def __init__(self, initial_data: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial_data) if initial_data else {}
        self._subscriptions: List[InMemorySubscription] = []
        self._key_counter = itertools.count(1)
        self._closed = False
        logger.debug("InMemoryRemoteStore initialized")
    
    def subscribe(self, path: str, on_snapshot: SnapshotCallback) -> Subscription:
        self._ensure_open()
        subscription = InMemorySubscription(self, path, on_snapshot)
        self._subscriptions.append(subscription)
        logger.debug(f"Subscribed listener to '{path}'")
        on_snapshot(self.get(path))
        return subscription
    
    async def read_once(self, path: str) -> Optional[Any]:
        self._ensure_open()
        # Yield so concurrent reads interleave like network reads would
        await asyncio.sleep(0)
        return self.get(path)
    
    async def append_new(self, path: str, value: Any) -> str:
        self._ensure_open()
        await asyncio.sleep(0)
        key = f"-K{next(self._key_counter):010d}"
        self.set(f"{path.strip('/')}/{key}", value)
        logger.debug(f"Appended new entry '{key}' under '{path}'")
        return key
    
    def ping(self) -> bool:
        return not self._closed
    
    def get(self, path: str) -> Optional[Any]:
        """Return a deep copy of the value stored at ``path`` (None if absent)."""
        node: Any = self._data
        for part in _split_path(path):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return copy.deepcopy(node)
    
    def set(self, path: str, value: Any) -> None:
        """
        Store ``value`` at ``path`` and notify affected listeners.
        
        Setting ``None`` deletes the entry. This is also how tests and the
        external roster service push personnel updates into the store.
        """
        self._ensure_open()
        parts = _split_path(path)
        if not parts:
            raise SectorStoreError("Cannot write to the store root", {"path": path})
        
        node = self._data
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        
        if value is None:
            node.pop(parts[-1], None)
        else:
            node[parts[-1]] = copy.deepcopy(value)
        
        self._notify(parts)
    
    def close(self) -> None:
        """Detach every listener and refuse further operations."""
        for subscription in list(self._subscriptions):
            subscription.unsubscribe()
        self._closed = True
    
    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)
    
    def _notify(self, written_parts: List[str]) -> None:
        for subscription in list(self._subscriptions):
            listened = _split_path(subscription.path)
            # Ancestors and descendants of the written path both see a change
            shared = min(len(listened), len(written_parts))
            if listened[:shared] == written_parts[:shared] and subscription.active:
                subscription.callback(self.get(subscription.path))
    
    def _detach(self, subscription: InMemorySubscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
    
    def _ensure_open(self) -> None:
        if self._closed:
            raise SectorStoreError("Store has been closed")
