"""Sector Submission for Sector Overlay

Resolves selected personnel to their current positions, assembles the sector
record and appends it to the shared sector collection.
"""

from .submission_models import SubmissionResult
from .sector_submission_pipeline import SectorSubmissionPipeline

__all__ = ['SubmissionResult', 'SectorSubmissionPipeline']
