"""Draw Session Controller

State machine driving one map's drawing workflow:

    IDLE -> SHAPE_ACCEPTED -> FORM_OPEN -> SUBMITTING -> SUBMITTED -> IDLE
                              FORM_OPEN -> CANCELLED -> IDLE
                              SUBMITTING -> FORM_OPEN (failed submission)

A draw-completion event is validated, and an accepted shape is added to the
drawn layers and opens the sector form. Only one form can be open; shapes
drawn while it is open are refused until it is closed. While a submission
is in flight the form can be neither cancelled nor submitted again.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from ..exceptions import DrawSessionStateError, GeometryValidationFailure
from ..geometry_validation import (
    center_pair, normalize_drawn_rings, validate_circle, validate_coordinates, validate_marker,
)
from ..models import (
    CircleGeometry, DraftSector, DrawnLayer, Geometry, LayerStatus, LayerType,
    MarkerGeometry, Point, PolygonGeometry, PolylineGeometry,
)
from ..submission import SectorSubmissionPipeline, SubmissionResult
from .form_state import FormState
from sector_core.interfaces import MapSurface, Notifier
from sector_core.utils import get_logger

logger = get_logger(__name__)


class SessionState(str, Enum):
    """States of the draw session."""
    IDLE = "idle"
    SHAPE_ACCEPTED = "shape_accepted"
    FORM_OPEN = "form_open"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


class DrawSessionController:
    """Owns the drawn-layer collection and the draft of the open form.
    
    This is the only component that mutates the drawn layers; overlays
    projected from remote data are tracked separately by the remote sync.
    """
    
    def __init__(self, surface: MapSurface, form: FormState,
                 pipeline: SectorSubmissionPipeline, notifier: Notifier):
        """Initialize the controller.
        
        Args:
            surface: Map surface receiving accepted drawn layers
            form: Form state bound to the draft
            pipeline: Submission pipeline persisting drafts
            notifier: Notifier surfacing submission outcomes
        """
        self.surface = surface
        self.form = form
        self.pipeline = pipeline
        self.notifier = notifier
        self.state = SessionState.IDLE
        self.drawn_layers: List[DrawnLayer] = []
        self._active_layer: Optional[DrawnLayer] = None
    
    @property
    def draft(self) -> DraftSector:
        return self.form.draft
    
    def handle_draw_created(self, layer_type: str, payload: Dict[str, Any]) -> bool:
        """Handle a draw-completion event from the map.
        
        Args:
            layer_type: One of rectangle, polygon, polyline, circle, marker
            payload: Event geometry. ``coordinates`` for rectangle/polygon/polyline,
                ``center`` and ``radius`` for circle, ``lat`` and ``lng`` for marker
                
        Returns:
            True if the shape was accepted and the form opened
        """
        if self.state != SessionState.IDLE:
            logger.info(f"Ignoring {layer_type} drawn while the session is {self.state.value}")
            return False
        
        try:
            kind = LayerType(layer_type)
        except ValueError:
            logger.debug(f"Ignoring unsupported layer type: {layer_type}")
            return False
        
        try:
            geometry = self.build_geometry(kind, payload)
        except GeometryValidationFailure as e:
            if kind == LayerType.MARKER:
                logger.warning("Marker coordinates are undefined")
            else:
                logger.debug(f"Dropped {layer_type}: {e}")
            return False
        
        layer = DrawnLayer(layer_type=kind, geometry=geometry)
        self.drawn_layers.append(layer)
        self.surface.add_drawn_layer(layer)
        self._active_layer = layer
        self.state = SessionState.SHAPE_ACCEPTED
        
        self.form.open(DraftSector(geometry=geometry, coordinates=self.draft.coordinates))
        self.state = SessionState.FORM_OPEN
        logger.info(f"Accepted {layer_type} layer {layer.layer_id}; sector form opened")
        return True
    
    @staticmethod
    def build_geometry(kind: LayerType, payload: Dict[str, Any]) -> Geometry:
        """Validate event geometry and convert it to the geometry model.
        
        Raises:
            GeometryValidationFailure: If the geometry is malformed
        """
        if kind in (LayerType.RECTANGLE, LayerType.POLYGON):
            rings = normalize_drawn_rings(payload.get("coordinates"))
            if rings is None:
                raise GeometryValidationFailure("Malformed polygon coordinates")
            return PolygonGeometry.from_lng_lat_rings(rings)
        
        if kind == LayerType.POLYLINE:
            coordinates = payload.get("coordinates")
            if not coordinates or not validate_coordinates(coordinates):
                raise GeometryValidationFailure("Malformed polyline coordinates")
            return PolylineGeometry.from_lng_lat(coordinates)
        
        if kind == LayerType.CIRCLE:
            center, radius = payload.get("center"), payload.get("radius")
            if not validate_circle(center, radius):
                raise GeometryValidationFailure("Circle needs a center and a positive radius")
            lat, lng = center_pair(center)
            return CircleGeometry(center=Point(latitude=lat, longitude=lng), radius_meters=radius)
        
        lat, lng = payload.get("lat"), payload.get("lng")
        if not validate_marker(lat, lng):
            raise GeometryValidationFailure("Marker coordinates are undefined")
        return MarkerGeometry(position=Point(latitude=lat, longitude=lng))
    
    async def submit(self) -> SubmissionResult:
        """Submit the open form.
        
        The pipeline works on a copy of the draft and on the layers pending at
        this point. On success exactly those layers are committed, the form
        closes and the draft is reset. On failure everything is left in place
        for a retry.
        
        Raises:
            DrawSessionStateError: If no form is open or a submission is in flight
        """
        self._require_form_open("submit")
        
        if not self.form.is_complete():
            message = "Title is required"
            self.notifier.notify_error(message)
            return SubmissionResult(success=False, errors=[message])
        
        draft = self.draft.model_copy(deep=True)
        sent_layers = self.pending_layers()
        self.state = SessionState.SUBMITTING
        try:
            result = await self.pipeline.submit(draft, sent_layers)
        except Exception:
            self.state = SessionState.FORM_OPEN
            raise
        
        if not result.success:
            self.state = SessionState.FORM_OPEN
            self.notifier.notify_error(f"Error saving data: {result.error_message}")
            return result
        
        for layer in sent_layers:
            if layer.is_pending():
                layer.status = LayerStatus.COMMITTED
        
        self.draft.coordinates = draft.coordinates
        self.form.close()
        self.state = SessionState.SUBMITTED
        self.notifier.notify_success("Data saved successfully!")
        self._finish()
        return result
    
    def cancel(self) -> None:
        """Close the form without saving.
        
        The shape stays on the map but is excluded from later submissions.
        
        Raises:
            DrawSessionStateError: If no form is open
        """
        self._require_form_open("cancel")
        
        if self._active_layer is not None and self._active_layer.is_pending():
            self._active_layer.status = LayerStatus.ABANDONED
        
        self.form.close()
        self.state = SessionState.CANCELLED
        logger.info("Sector form closed without saving")
        self._finish()
    
    def remove_layer(self, layer_id: str) -> bool:
        """Remove a drawn layer, as the map's delete control does.
        
        Removing the shape of the open form also clears the draft geometry,
        so the form cannot be submitted until a new shape is drawn.
        
        Returns:
            True if a layer with that id was removed
        """
        for layer in self.drawn_layers:
            if layer.layer_id == layer_id:
                self.drawn_layers.remove(layer)
                self.surface.remove_drawn_layer(layer)
                if layer is self._active_layer:
                    self._active_layer = None
                    if self.state == SessionState.FORM_OPEN:
                        self.draft.geometry = None
                return True
        return False
    
    def pending_layers(self) -> List[DrawnLayer]:
        return [layer for layer in self.drawn_layers if layer.is_pending()]
    
    def _finish(self) -> None:
        self.form.reset()
        self._active_layer = None
        self.state = SessionState.IDLE
    
    def _require_form_open(self, action: str) -> None:
        if self.state == SessionState.SUBMITTING:
            raise DrawSessionStateError(f"Cannot {action} while a submission is in flight",
                                        self.state.value)
        if self.state != SessionState.FORM_OPEN:
            raise DrawSessionStateError(f"Cannot {action} without an open sector form",
                                        self.state.value)
