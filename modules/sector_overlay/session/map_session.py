"""Map Session

One session object per map instance. It wires the form, the draw controller,
the submission pipeline and the remote sync to the same store, surface and
notifier, and releases the live subscriptions on close.
"""

from typing import Optional

from ..draw_session import DrawSessionController, FormState
from ..remote_sync import RemoteSectorSync
from ..submission import SectorSubmissionPipeline
from sector_core.config import ConfigLoader
from sector_core.connection import LoggingNotifier, StoreConnector
from sector_core.interfaces import MapSurface, Notifier, RemoteStore
from sector_core.utils import get_logger

logger = get_logger(__name__)


class MapSession:
    """Sector annotation session bound to one map surface.
    
    Usage::
    
        with MapSession(store, surface, config_loader) as session:
            session.controller.handle_draw_created("circle", {...})
            session.form.set_title("Zone A")
            await session.controller.submit()
    """
    
    def __init__(self, store: RemoteStore, surface: MapSurface, config_loader: ConfigLoader,
                 notifier: Optional[Notifier] = None, environment: str = "development"):
        """Initialize the session and its components.
        
        Args:
            store: Connected remote store
            surface: Map surface of this session
            config_loader: ConfigLoader for store paths and map settings
            notifier: Notifier for operator messages (logs them when omitted)
            environment: Environment whose configuration is used
        """
        self.store = store
        self.surface = surface
        self.environment = environment
        self.notifier = notifier or LoggingNotifier()
        
        self.form = FormState()
        self.pipeline = SectorSubmissionPipeline(store, config_loader, environment)
        self.controller = DrawSessionController(surface, self.form, self.pipeline, self.notifier)
        self.sync = RemoteSectorSync(store, surface, self.form, config_loader, environment)
        self._closed = False
    
    @classmethod
    def connect(cls, connector: StoreConnector, surface: MapSurface, config_loader: ConfigLoader,
                notifier: Optional[Notifier] = None) -> "MapSession":
        """Connect to the store through ``connector`` and build a session on it."""
        store = connector.connect()
        return cls(store, surface, config_loader, notifier, connector.environment)
    
    def open(self) -> "MapSession":
        """Start the live subscriptions."""
        self.sync.start()
        self._closed = False
        logger.info(f"Map session opened ({self.environment})")
        return self
    
    def close(self) -> None:
        """Release both subscriptions and the rendered overlays."""
        if self._closed:
            return
        self.sync.stop()
        self._closed = True
        logger.info("Map session closed")
    
    @property
    def is_open(self) -> bool:
        return self.sync.is_running and not self._closed
    
    def __enter__(self) -> "MapSession":
        return self.open()
    
    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
