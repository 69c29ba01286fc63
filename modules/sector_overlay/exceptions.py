"""Sector Overlay Specific Exceptions

Extends the framework exception hierarchy with the error kinds of the map
annotation workflow.
"""

from sector_core.exceptions import SectorValidationError, SectorStoreError, SectorProcessingError


class GeometryValidationFailure(SectorValidationError):
    """Drawn or stored geometry is malformed. Recovered by dropping the shape."""
    pass


class MissingCoordinatesError(SectorValidationError):
    """A marker or personnel entry lacks latitude/longitude. Recovered by skipping it."""
    pass


class RemoteReadFailure(SectorStoreError):
    """A personnel read failed or returned no data during submission."""
    pass


class RemoteWriteFailure(SectorStoreError):
    """Appending the new sector record failed."""
    pass


class DrawSessionStateError(SectorProcessingError):
    """An action was requested in a draw session state that does not allow it."""
    
    def __init__(self, message: str, state: str = ""):
        super().__init__(message, {"state": state} if state else None)
        self.state = state
