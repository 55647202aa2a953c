"""
Infrastructure layer for gffonts_index.

Contains abstractions for external systems:
- FileSystem: Directory walking and file reads

These provide clean interfaces that can be mocked for testing.
"""

from .file_system import FileSystem

__all__ = [
    'FileSystem',
]
