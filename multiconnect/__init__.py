"""
multiconnect - Connect Four for any number of players

This package provides the board and drop rule, win and tie detection,
turn rotation for an N-player roster, a gymnasium environment wrapper
and a terminal interface.
"""

# Version number
__version__ = '0.1.0'
