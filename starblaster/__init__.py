"""
Star Blaster - a vertical shoot-'em-up built around a fixed-order frame simulation.

How to run:
  pip install .
  starblaster        (or: python -m starblaster)

`starblaster.game.Game` is the headless simulation core; `starblaster.app`
is the pygame front end.
"""
from .controls import Controls
from .game import Game
from .state import GameState

__all__ = ["Controls", "Game", "GameState"]
__version__ = "1.0.0"
