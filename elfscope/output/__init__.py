"""
ELFScope Output
================

Plain-text report rendering, Rich console display, and JSON export.
"""
