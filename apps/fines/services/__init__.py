"""
Fines app services layer.
"""

from .fine_store import FineStore


__all__ = [
    'FineStore',
]
