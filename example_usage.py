#!/usr/bin/env python3
"""
Example usage of the Sector Overlay system.

This script runs one annotation session against the in-memory store: it
loads configuration, opens a map session, draws and submits a sector and
prints the overlays the live subscription renders back.
"""

import asyncio

from sector_core.config import ConfigLoader
from sector_core.connection import InMemoryRemoteStore, RecordingMapSurface, StoreConnector
from sector_core.exceptions import SectorConfigurationError, SectorStoreError
from sector_core.utils import setup_logging, get_logger
from modules.sector_overlay import MapSession

ROSTER = {
    "p1": {"name": "Asha Rao", "deviceId": "d1", "latitude": 28.61, "longitude": 77.21},
    "p2": {"name": "Vikram Singh", "deviceId": "d2", "latitude": 28.63, "longitude": 77.22},
}


async def run_session(session: MapSession) -> None:
    """Draw a rectangle, fill the form and submit it."""
    logger = get_logger(__name__)
    
    rectangle = [[77.20, 28.60], [77.20, 28.64], [77.24, 28.64], [77.24, 28.60], [77.20, 28.60]]
    session.controller.handle_draw_created("rectangle", {"coordinates": rectangle})
    
    session.form.set_title("Connaught Place patrol")
    session.form.set_personnel([option.value for option in session.form.personnel_options])
    session.form.set_date("2024-05-01")
    session.form.set_start_time("09:00")
    session.form.set_end_time("17:00")
    
    result = await session.controller.submit()
    if result.success:
        logger.info(f"Sector saved as {result.sector_id} in {result.execution_time:.3f}s")
    else:
        logger.error(f"Sector not saved: {result.error_message}")


def main():
    """Main function demonstrating a map session."""
    print("Sector Overlay - Session Demo")
    print("=" * 60)
    
    # 1. Setup logging
    setup_logging(environment="development", log_level="INFO")
    logger = get_logger(__name__)
    
    # 2. Load configuration and connect
    config_loader = ConfigLoader()
    try:
        connector = StoreConnector(config_loader, lambda: InMemoryRemoteStore({"personnel": ROSTER}))
        surface = RecordingMapSurface()
        session = MapSession.connect(connector, surface, config_loader)
    except (SectorConfigurationError, SectorStoreError) as e:
        logger.error(f"Could not start session: {e}")
        print(f"Could not start session: {e}")
        return
    
    # 3. Run the session and show what the map renders
    with session:
        asyncio.run(run_session(session))
        
        print("\nRendered overlays:")
        for overlay in surface.rendered():
            print(f"   {overlay.kind.value:<8} {overlay.popup}")
    
    connector.disconnect()
    print("\n" + "=" * 60)
    print("Session demo completed.")


if __name__ == "__main__":
    main()
