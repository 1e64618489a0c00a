"""
Top-level package for the Contact Manager.

All functionality lives in submodules under ``app``.
"""

__all__ = []
