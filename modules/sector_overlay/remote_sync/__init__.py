"""Remote Sector Sync for Sector Overlay

Live projection of the shared sector collection and personnel roster onto
the map surface and the sector form.
"""

from .remote_sector_sync import RemoteSectorSync, project_sector, build_personnel_options

__all__ = ['RemoteSectorSync', 'project_sector', 'build_personnel_options']
