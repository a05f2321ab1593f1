# magic_cube/__init__.py
"""Simulador y solver BFS de cubos mágicos n×n×n."""
from __future__ import annotations

from magic_cube.core import CubeState, Move

__all__ = ["CubeState", "Move"]
