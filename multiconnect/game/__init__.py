"""
multiconnect.game - Core game mechanics

This package contains the board, win detection and the game engine.
"""

from multiconnect.game.board import Board
from multiconnect.game.rules import (Game, MultiConnectEnv, Placed, Rejected,
                                     create_game)

__all__ = ['Board', 'Game', 'MultiConnectEnv', 'Placed', 'Rejected', 'create_game']
