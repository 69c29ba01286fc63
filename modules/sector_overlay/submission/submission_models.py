"""Data Models for Sector Submission"""

from typing import List, Optional

from pydantic import BaseModel, Field


class SubmissionResult(BaseModel):
    """Outcome of one sector submission.
    
    A successful result carries the store-generated key of the new record; an
    unsuccessful one carries the failure messages and guarantees nothing was
    written.
    """
    success: bool = Field(..., description="Whether the sector record was written")
    sector_id: Optional[str] = Field(None, description="Key assigned by the store")
    errors: List[str] = Field(default_factory=list, description="Failure messages")
    personnel_resolved: int = Field(0, ge=0, description="Personnel positions embedded in the record")
    execution_time: float = Field(0.0, ge=0.0, description="Submission time in seconds")
    
    @property
    def error_message(self) -> str:
        return "; ".join(self.errors)
