"""
Utility modules for jtrivia.

This package contains helpers that sit around the game core:
- Session metrics
"""

from .monitoring import SessionMetrics

__all__ = [
    'SessionMetrics'
]
