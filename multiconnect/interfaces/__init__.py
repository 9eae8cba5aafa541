"""
multiconnect.interfaces - User interfaces for multiconnect

This package contains the terminal interface that plays games against the engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
