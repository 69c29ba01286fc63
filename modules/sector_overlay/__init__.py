"""Sector Overlay Module

Geospatial annotation and live overlay synchronization: validates drawn
sector shapes, keeps the map in step with the shared sector collection and
personnel roster, and persists new sectors with a snapshot of the assigned
personnel positions.
"""

from .draw_session import DrawSessionController, FormState, SessionState
from .remote_sync import RemoteSectorSync
from .submission import SectorSubmissionPipeline, SubmissionResult
from .session import MapSession

__all__ = [
    'DrawSessionController',
    'FormState',
    'SessionState',
    'RemoteSectorSync',
    'SectorSubmissionPipeline',
    'SubmissionResult',
    'MapSession',
]
