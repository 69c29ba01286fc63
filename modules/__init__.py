"""Sector Overlay Feature Modules

This package contains the feature modules built on the ``sector_core``
framework. Each module owns one slice of the map annotation workflow.
"""
