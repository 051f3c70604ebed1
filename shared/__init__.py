"""
ELFScope Shared Module
======================

Configuration, structured logging, and console helpers shared by the
ELFScope packages.
"""

from shared.config import ScopeConfig

__all__ = ["ScopeConfig"]
