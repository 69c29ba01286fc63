"""Form State

Field container bound to the draft sector, plus the personnel options the
multi-select is populated from.
"""

from typing import Iterable, List, Optional

from ..models import DraftSector, PersonnelOption


class FormState:
    """Editable draft fields of the sector form."""
    
    def __init__(self):
        self.draft = DraftSector()
        self.personnel_options: List[PersonnelOption] = []
        self.is_open = False
    
    def open(self, draft: DraftSector) -> None:
        self.draft = draft
        self.is_open = True
    
    def close(self) -> None:
        self.is_open = False
    
    def set_title(self, title: str) -> None:
        self.draft.title = title
    
    def set_personnel(self, selected: Iterable[str]) -> None:
        """Replace the selection with the ids chosen in the multi-select."""
        self.draft.personnel_ids = set(selected)
    
    def set_date(self, date: Optional[str]) -> None:
        self.draft.date = date or None
    
    def set_start_time(self, start_time: Optional[str]) -> None:
        self.draft.start_time = start_time or None
    
    def set_end_time(self, end_time: Optional[str]) -> None:
        self.draft.end_time = end_time or None
    
    def set_personnel_options(self, options: List[PersonnelOption]) -> None:
        self.personnel_options = list(options)
    
    def is_complete(self) -> bool:
        # Title is the only required field
        return bool(self.draft.title.strip())
    
    def reset(self) -> None:
        self.draft.reset()
