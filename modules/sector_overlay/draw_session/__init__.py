"""Draw Session for Sector Overlay

Tracks the shapes drawn in the current session, the draft sector they open
and the form fields editing it.
"""

from .form_state import FormState
from .draw_session_controller import DrawSessionController, SessionState

__all__ = ['FormState', 'DrawSessionController', 'SessionState']
