# magic_cube/core/__init__.py
from __future__ import annotations

from magic_cube.core.cube_state import CubeState, create
from magic_cube.core.geometry import FACES, adjacent_faces, opposite_face
from magic_cube.core.move import Move

__all__ = ["CubeState", "create", "FACES", "adjacent_faces", "opposite_face", "Move"]
