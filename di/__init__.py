"""
Factories wiring the clustering components together.
"""

from .factories import ComponentFactory

__all__ = ['ComponentFactory']
