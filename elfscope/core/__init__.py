"""
ELFScope Core
==============

Data models, exceptions, and the decode orchestration engine.
"""
