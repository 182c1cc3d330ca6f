"""
Ludo - Pass-and-Play Race Game Engine

A deterministic rules engine for classic four-colour Ludo.
The engine takes an immutable game state and returns a new one for:
- Game setup
- Dice rolls (with a seedable die)
- Legal move generation
- Move application (capture, home stretch, finishing)
"""

__version__ = "0.1.0"
