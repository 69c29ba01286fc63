"""Remote Sector Sync

Keeps two independent live subscriptions on the remote store:

- the sector collection, projected into shape, marker and popup overlays
- the personnel roster, projected into the multi-select options

Every snapshot is a full copy of its collection. A sector snapshot rebuilds
the complete overlay set first and then swaps it onto the surface in one
step; overlays are never diffed or patched in place.
"""

from typing import Any, Callable, Hashable, List, Optional

from ..exceptions import MissingCoordinatesError
from ..models import (
    MarkerIcon, OverlayKind, OverlayObject, PersistedSector, PersonnelOption,
    PersonnelPosition, Point, sector_from_record,
)
from ..draw_session import FormState
from sector_core.config import ConfigLoader
from sector_core.exceptions import SectorValidationError
from sector_core.interfaces import MapSurface, RemoteStore, Subscription
from sector_core.utils import get_logger

logger = get_logger(__name__)

OptionsListener = Callable[[List[PersonnelOption]], None]


def _personnel_marker(sector_id: str, device_id: str, person: PersonnelPosition,
                      icon: MarkerIcon) -> OverlayObject:
    if not person.has_coordinates():
        raise MissingCoordinatesError("Personnel coordinates are undefined",
                                      {"sector_id": sector_id, "device_id": device_id})
    return OverlayObject(
        kind=OverlayKind.MARKER,
        source_id=sector_id,
        position=Point(latitude=person.latitude, longitude=person.longitude),
        popup=person.name or device_id,
        icon=icon,
    )


def project_sector(sector: PersistedSector, icon: MarkerIcon) -> List[OverlayObject]:
    """Project one stored sector into its overlays.
    
    A circle gives one circle overlay, a polygon one overlay per ring; each
    shape carries a popup with the sector title. Every embedded person with
    coordinates adds a marker labelled with their name.
    
    Args:
        sector: Decoded sector record
        icon: Icon used for markers
        
    Returns:
        Overlays of the sector, shapes first
    """
    geometry = sector.geometry
    overlays: List[OverlayObject] = []
    
    if geometry.kind == "circle":
        overlays.append(OverlayObject(kind=OverlayKind.CIRCLE, source_id=sector.id,
                                      center=geometry.center,
                                      radius_meters=geometry.radius_meters,
                                      popup=sector.title))
    elif geometry.kind == "polygon":
        for ring in geometry.rings:
            overlays.append(OverlayObject(kind=OverlayKind.POLYGON, source_id=sector.id,
                                          coordinates=[point.to_lng_lat() for point in ring],
                                          popup=sector.title))
    elif geometry.kind == "polyline":
        overlays.append(OverlayObject(kind=OverlayKind.POLYLINE, source_id=sector.id,
                                      coordinates=geometry.to_lng_lat(),
                                      popup=sector.title))
    else:
        overlays.append(OverlayObject(kind=OverlayKind.MARKER, source_id=sector.id,
                                      position=geometry.position, popup=sector.title,
                                      icon=icon))
    
    for device_id, person in sector.personnel.items():
        try:
            overlays.append(_personnel_marker(sector.id, device_id, person, icon))
        except MissingCoordinatesError as e:
            logger.warning(str(e))
    
    return overlays


def build_personnel_options(snapshot: Any) -> List[PersonnelOption]:
    """Build ``{value, label}`` options from a roster snapshot, in key order."""
    if not isinstance(snapshot, dict):
        return []
    options = []
    for key, record in snapshot.items():
        label = record.get("name") if isinstance(record, dict) else None
        options.append(PersonnelOption(value=str(key), label=str(label or key)))
    return options


class RemoteSectorSync:
    """Projects remote sectors and roster onto the map and the form."""
    
    def __init__(self, store: RemoteStore, surface: MapSurface, form: FormState,
                 config_loader: ConfigLoader, environment: str = "development"):
        """Initialize the remote sync.
        
        Args:
            store: Remote store to subscribe to
            surface: Map surface the overlays are rendered on
            form: Form state receiving the personnel options
            config_loader: ConfigLoader providing store paths and marker icon
            environment: Environment whose settings are used
        """
        self.store = store
        self.surface = surface
        self.form = form
        self.sectors_path = config_loader.get_store_path("sectors", environment)
        self.personnel_path = config_loader.get_store_path("personnel", environment)
        self.icon = MarkerIcon.from_config(config_loader.get_marker_icon(environment))
        
        self.current_overlays: List[OverlayObject] = []
        self.personnel_options: List[PersonnelOption] = []
        self._handles: List[Hashable] = []
        self._subscriptions: List[Subscription] = []
        self._options_listeners: List[OptionsListener] = []
    
    @property
    def is_running(self) -> bool:
        return bool(self._subscriptions)
    
    def start(self) -> None:
        """Open the sector and personnel subscriptions."""
        if self.is_running:
            logger.debug("RemoteSectorSync already running")
            return
        self._subscriptions = [
            self.store.subscribe(self.sectors_path, self.on_sector_snapshot),
            self.store.subscribe(self.personnel_path, self.on_personnel_snapshot),
        ]
        logger.info(f"Subscribed to '{self.sectors_path}' and '{self.personnel_path}'")
    
    def stop(self) -> None:
        """Release both subscriptions and clear rendered overlays."""
        for subscription in self._subscriptions:
            subscription.unsubscribe()
        self._subscriptions = []
        self._swap_overlays([])
        logger.info("RemoteSectorSync stopped")
    
    def add_options_listener(self, listener: OptionsListener) -> None:
        self._options_listeners.append(listener)
    
    def on_sector_snapshot(self, snapshot: Optional[Any]) -> None:
        """Rebuild every sector overlay from a full collection snapshot."""
        overlays: List[OverlayObject] = []
        
        if isinstance(snapshot, dict):
            for sector_id, record in snapshot.items():
                try:
                    sector = sector_from_record(str(sector_id), record)
                except (SectorValidationError, ValueError) as e:
                    # pydantic's ValidationError is a ValueError
                    logger.warning(f"Skipping sector {sector_id}: {e}")
                    continue
                overlays.extend(project_sector(sector, self.icon))
        elif snapshot is not None:
            logger.warning(f"Ignoring malformed sector snapshot of type {type(snapshot).__name__}")
        
        self._swap_overlays(overlays)
        logger.debug(f"Rendered {len(overlays)} sector overlays")
    
    def on_personnel_snapshot(self, snapshot: Optional[Any]) -> None:
        """Rebuild the personnel options from a full roster snapshot."""
        self.personnel_options = build_personnel_options(snapshot)
        self.form.set_personnel_options(self.personnel_options)
        for listener in self._options_listeners:
            listener(self.personnel_options)
        logger.debug(f"Personnel options updated: {len(self.personnel_options)} entries")
    
    def _swap_overlays(self, overlays: List[OverlayObject]) -> None:
        old_handles = self._handles
        self._handles = []
        for handle in old_handles:
            self.surface.remove_overlay(handle)
        self._handles = [self.surface.add_overlay(overlay) for overlay in overlays]
        self.current_overlays = overlays
