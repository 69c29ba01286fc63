"""Sector Submission Pipeline

Implements the read-modify-write sequence behind the sector form:

1. Collect coordinates of every pending drawn layer
2. Read every selected personnel record concurrently and wait for all
3. Key the resolved positions by each record's device identifier
4. Assemble the sector record
5. Append it under the sector collection

The append is the only write. Any failure before it leaves the store
untouched; nothing is retried automatically and no timeout is applied.
"""

import asyncio
import time
from typing import Any, Dict, Iterable, List

from ..exceptions import RemoteReadFailure, RemoteWriteFailure
from ..models import (
    DraftSector, DrawnLayer, Geometry, PersonnelPosition, PersonnelRecord,
    PolygonGeometry, sector_to_record,
)
from .submission_models import SubmissionResult
from sector_core.config import ConfigLoader
from sector_core.exceptions import SectorValidationError, SectorStoreError
from sector_core.interfaces import RemoteStore
from sector_core.utils import get_logger, log_performance

logger = get_logger(__name__)


class SectorSubmissionPipeline:
    """Assembles and persists new sector records."""
    
    def __init__(self, store: RemoteStore, config_loader: ConfigLoader,
                 environment: str = "development"):
        """Initialize the submission pipeline.
        
        Args:
            store: Remote store receiving the new records
            config_loader: ConfigLoader providing the collection paths
            environment: Environment whose store paths are used
        """
        self.store = store
        self.sectors_path = config_loader.get_store_path("sectors", environment)
        self.personnel_path = config_loader.get_store_path("personnel", environment)
        logger.debug(f"SectorSubmissionPipeline writing to '{self.sectors_path}'")
    
    @log_performance
    async def submit(self, draft: DraftSector, drawn_layers: Iterable[DrawnLayer]) -> SubmissionResult:
        """Persist the draft as a new sector record.
        
        Args:
            draft: Draft holding the form fields and selected personnel
            drawn_layers: Layers drawn in the session; only pending ones are collected
            
        Returns:
            SubmissionResult with the new key, or the failure messages
        """
        start_time = time.time()
        pending = [layer for layer in drawn_layers if layer.is_pending()]
        coordinates = self.collect_coordinates(pending)
        
        try:
            geometry = self.resolve_geometry(draft, pending)
            personnel = await self.resolve_personnel(draft.personnel_ids)
            record = sector_to_record(draft.model_copy(update={"coordinates": coordinates}),
                                      geometry, personnel)
            sector_id = await self.append_sector(record)
        except (SectorStoreError, SectorValidationError) as e:
            logger.error(f"Sector submission failed: {e}")
            return SubmissionResult(
                success=False,
                errors=[e.message],
                execution_time=time.time() - start_time
            )
        
        draft.coordinates = coordinates
        logger.info(f"Sector '{draft.title}' saved as {sector_id} with {len(personnel)} personnel")
        return SubmissionResult(
            success=True,
            sector_id=sector_id,
            personnel_resolved=len(personnel),
            execution_time=time.time() - start_time
        )
    
    @staticmethod
    def collect_coordinates(layers: List[DrawnLayer]) -> List[Any]:
        """Coordinates of each layer, in drawing order."""
        return [layer.coordinates() for layer in layers]
    
    @staticmethod
    def resolve_geometry(draft: DraftSector, pending: List[DrawnLayer]) -> Geometry:
        """Pick the geometry stored with the sector.
        
        Circles, markers and polylines are stored as drawn. Polygon rings of
        every pending polygon layer are combined into one polygon.
        
        Raises:
            SectorValidationError: If nothing has been drawn
        """
        geometry = draft.geometry
        if geometry is None:
            raise SectorValidationError("No geometry drawn for this sector")
        if geometry.kind != "polygon":
            return geometry
        
        rings = [ring for layer in pending if layer.geometry.kind == "polygon"
                 for ring in layer.geometry.rings]
        return PolygonGeometry(rings=rings) if rings else geometry
    
    async def resolve_personnel(self, personnel_ids: Iterable[str]) -> Dict[str, PersonnelPosition]:
        """Read the selected personnel and key their positions by device identifier.
        
        Raises:
            RemoteReadFailure: If any read fails, returns nothing or lacks a device identifier
        """
        records = await asyncio.gather(*(self._read_personnel(personnel_id)
                                         for personnel_id in sorted(personnel_ids)))
        
        positions: Dict[str, PersonnelPosition] = {}
        for record in records:
            if record.device_id is None:
                raise RemoteReadFailure(f"Personnel '{record.id}' has no device identifier",
                                        {"personnel_id": record.id})
            if record.position is None:
                logger.warning(f"Personnel coordinates are undefined: {record.id}")
                continue
            positions[record.device_id] = PersonnelPosition(
                latitude=record.position.latitude,
                longitude=record.position.longitude,
                name=record.name or None,
            )
        return positions
    
    async def _read_personnel(self, personnel_id: str) -> PersonnelRecord:
        path = f"{self.personnel_path}/{personnel_id}"
        try:
            value = await self.store.read_once(path)
        except Exception as e:
            raise RemoteReadFailure(f"Failed to read personnel '{personnel_id}': {e}", {"path": path})
        
        if not value or not isinstance(value, dict):
            raise RemoteReadFailure(f"Personnel '{personnel_id}' not found", {"path": path})
        return PersonnelRecord.from_record(personnel_id, value)
    
    async def append_sector(self, record: Dict[str, Any]) -> str:
        """Append the record under the sector collection.
        
        Raises:
            RemoteWriteFailure: If the store rejects the write
        """
        try:
            return await self.store.append_new(self.sectors_path, record)
        except Exception as e:
            raise RemoteWriteFailure(f"Failed to save sector: {e}", {"path": self.sectors_path})
