"""Input/output helpers for the route planner.

This subpackage reads the tab-separated city and link files consumed
by the registry and the routing engine.
"""
