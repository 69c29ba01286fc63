"""Integration tests for Map Session

Runs the full draw, fill, submit and render cycle against the in-memory store.
"""

import asyncio

import pytest
from unittest.mock import Mock

from ..models import OverlayKind
from ..session import MapSession
from ..draw_session import SessionState
from ..exceptions import DrawSessionStateError
from sector_core.connection import InMemoryRemoteStore, StoreConnector
from .conftest import RECTANGLE


class TestMapSession:
    """Test cases for MapSession."""
    
    @pytest.fixture
    def session(self, store, surface, config_loader, notifier):
        with MapSession(store, surface, config_loader, notifier) as session:
            yield session
    
    def test_open_loads_personnel_options(self, session):
        assert session.is_open
        assert [option.label for option in session.form.personnel_options] == ["Asha Rao", "Vikram Singh"]
    
    @pytest.mark.asyncio
    async def test_submitted_sector_is_rendered(self, session, store, surface, notifier):
        """Test that a saved sector comes back through the live subscription."""
        assert session.controller.handle_draw_created("rectangle", {"coordinates": RECTANGLE})
        session.form.set_title("Market Road")
        session.form.set_personnel(["p1", "p2"])
        session.form.set_date("2024-05-01")
        
        result = await session.controller.submit()
        
        assert result.success
        assert session.controller.state == SessionState.IDLE
        assert notifier.history == [("success", "Data saved successfully!")]
        
        stored = store.get(f"sectorDetails/{result.sector_id}")
        assert stored["title"] == "Market Road"
        assert stored["date"] == "2024-05-01"
        assert stored["coordinates"] == [RECTANGLE]
        assert set(stored["personnel"]) == {"d1", "d2"}
        
        rendered = surface.rendered()
        assert [overlay.kind for overlay in rendered] == [
            OverlayKind.POLYGON, OverlayKind.MARKER, OverlayKind.MARKER]
        assert rendered[0].popup == "Market Road"
        assert sorted(overlay.popup for overlay in rendered[1:]) == ["Asha Rao", "Vikram Singh"]
    
    @pytest.mark.asyncio
    async def test_failed_submission_writes_nothing(self, session, store, notifier):
        """Test that an unknown person fails the submission before any write."""
        session.controller.handle_draw_created("circle", {"center": {"lat": 1, "lng": 2}, "radius": 50})
        session.form.set_title("Zone A")
        session.form.set_personnel(["p1", "ghost"])
        
        result = await session.controller.submit()
        
        assert not result.success
        assert store.get("sectorDetails") is None
        assert notifier.history[-1][0] == "error"
        assert session.controller.state == SessionState.FORM_OPEN
    
    @pytest.mark.asyncio
    async def test_second_client_sees_new_sector(self, store, config_loader):
        """Test that two sessions on one store share the rendered sectors."""
        from sector_core.connection import RecordingMapSurface
        
        first_surface, second_surface = RecordingMapSurface(), RecordingMapSurface()
        with MapSession(store, first_surface, config_loader) as first, \
                MapSession(store, second_surface, config_loader):
            first.controller.handle_draw_created("marker", {"lat": 12.9, "lng": 77.6})
            first.form.set_title("Checkpoint")
            await first.controller.submit()
            
            assert [overlay.popup for overlay in second_surface.rendered()] == ["Checkpoint"]
            assert second_surface.rendered()[0].kind == OverlayKind.MARKER
    
    def test_close_releases_listeners(self, store, surface, config_loader):
        session = MapSession(store, surface, config_loader).open()
        assert store.listener_count == 2
        
        session.close()
        session.close()
        
        assert not session.is_open
        assert store.listener_count == 0
        assert surface.rendered() == []
    
    @pytest.mark.asyncio
    async def test_cancel_during_submission_keeps_record_intact(self, session, store):
        """Test that a cancel while personnel reads are pending neither blanks the record nor opens a new form."""
        session.controller.handle_draw_created("rectangle", {"coordinates": RECTANGLE})
        session.form.set_title("Zone A")
        session.form.set_personnel(["p1"])
        
        task = asyncio.create_task(session.controller.submit())
        await asyncio.sleep(0)
        with pytest.raises(DrawSessionStateError):
            session.controller.cancel()
        assert not session.controller.handle_draw_created("circle", {"center": [1, 2], "radius": 10})
        result = await task
        
        stored = store.get("sectorDetails")
        assert [record["title"] for record in stored.values()] == ["Zone A"]
        assert stored[result.sector_id]["geometryType"] == "polygon"
        assert [layer.status.value for layer in session.controller.drawn_layers] == ["committed"]
    
    @pytest.mark.asyncio
    async def test_removed_shape_is_not_persisted(self, session, store, notifier):
        session.controller.handle_draw_created("rectangle", {"coordinates": RECTANGLE})
        session.form.set_title("Zone A")
        session.controller.remove_layer(session.controller.drawn_layers[0].layer_id)
        
        result = await session.controller.submit()
        
        assert not result.success
        assert store.get("sectorDetails") is None
        assert notifier.history[-1] == ("error", "Error saving data: No geometry drawn for this sector")
    
    def test_reopen_after_close(self, store, surface, config_loader):
        session = MapSession(store, surface, config_loader).open()
        session.close()
        
        session.open()
        
        assert session.is_open
        assert store.listener_count == 2
        session.close()
        assert store.listener_count == 0
    
    def test_connect_uses_connector_store(self, surface, config_loader):
        store = InMemoryRemoteStore()
        connector = Mock(spec=StoreConnector)
        connector.connect.return_value = store
        connector.environment = "production"
        
        session = MapSession.connect(connector, surface, config_loader)
        
        assert session.store is store
        assert session.environment == "production"
        connector.connect.assert_called_once()
