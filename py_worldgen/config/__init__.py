"""
Configuration for heightmap transforms.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
