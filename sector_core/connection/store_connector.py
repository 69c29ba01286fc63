"""
Remote store connector for the Sector Overlay system.

This module establishes the remote store session a map session runs against,
with retry logic and timeout handling. It only covers bootstrapping the
connection; reads and writes made while submitting sectors are never retried.
"""

from typing import Callable, Optional
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
from func_timeout import func_timeout, FunctionTimedOut

from ..config import ConfigLoader
from ..exceptions import SectorStoreError
from ..interfaces import RemoteStore
from ..utils import get_logger

logger = get_logger(__name__)


class StoreConnector:
    """
    Remote store connection manager with retry logic and timeout handling.
    
    The store client itself is produced by ``store_factory`` so any adapter
    implementing ``RemoteStore`` can be plugged in.
    """
    
    def __init__(self, config_loader: ConfigLoader,
                 store_factory: Callable[[], RemoteStore],
                 environment: str = "development"):
        """
        Initialize the store connector.
        
        Args:
            config_loader: ConfigLoader instance for accessing configuration
            store_factory: Callable building a connected store client
            environment: Environment whose connection settings are used
        """
        self.config_loader = config_loader
        self.store_factory = store_factory
        self.environment = environment
        self._store: Optional[RemoteStore] = None
        logger.debug("StoreConnector initialized")
    
    def connect(self) -> RemoteStore:
        """
        Establish the remote store session.
        
        Returns:
            RemoteStore: Connected store client
            
        Raises:
            SectorStoreError: If the connection fails after retries
        """
        try:
            store = self._connect_with_retry()
        except ConnectionError as e:
            error_msg = f"Failed to connect to remote store: {str(e)}"
            logger.error(error_msg)
            raise SectorStoreError(error_msg, {"environment": self.environment})
        
        self._store = store
        logger.info(f"Connected to remote store ({self.environment})")
        return store
    
    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=4, max=10),
        retry=retry_if_exception_type(ConnectionError),
        reraise=True
    )
    def _connect_with_retry(self) -> RemoteStore:
        timeout = self.config_loader.get_connection_settings(self.environment)["connect_timeout_seconds"]
        logger.info(f"Attempting remote store connection (timeout {timeout}s)")
        
        try:
            store = func_timeout(timeout, self.store_factory)
        except FunctionTimedOut:
            raise SectorStoreError("Connection timeout - remote store may be unavailable")
        except (ConnectionError, SectorStoreError):
            raise
        except Exception as e:
            raise SectorStoreError(f"Failed to create remote store client: {str(e)}")
        
        self._validate_connection(store)
        return store
    
    def _validate_connection(self, store: RemoteStore) -> None:
        """
        Validate the store connection is working.
        
        Raises:
            ConnectionError: If the store does not answer a ping
        """
        if not store.ping():
            raise ConnectionError("Remote store did not answer ping")
        logger.debug("Connection validation passed")
    
    def get_store(self) -> Optional[RemoteStore]:
        """Get the connected store client, or None if not connected."""
        return self._store
    
    def is_connected(self) -> bool:
        return self._store is not None
    
    def disconnect(self) -> None:
        """Drop the store client reference."""
        if self._store:
            self._store = None
            logger.info("Disconnected from remote store")
