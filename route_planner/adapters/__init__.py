"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the routing core to external systems like:
- City registries (tab-separated files)
- Tabular exports (CSV files)
- Rendering engines (Folium)
"""
