# magic_cube/core/cube_state.py
from __future__ import annotations

import functools
from collections import Counter
from typing import Dict, List, Tuple

from magic_cube.core.geometry import FACES, Color, Face, check_face, check_size
from magic_cube.logic import moves as _moves
from magic_cube.render.text_view import render_net

Grid = List[List[Color]]
CubeHash = Tuple[Tuple[Color, ...], ...]


@functools.total_ordering
class CubeState:
    """Estado de un cubo mágico n×n×n.

    Representación:
        - `state[face]` es una grilla n×n (lista de filas) con el color de cada sticker.
        - Las caras van de 1 a 6 (1=Front, 2=Left, 3=Right, 4=Up, 5=Down, 6=Back).
        - Los colores también son enteros 1..6: en el cubo resuelto recién creado,
          cada sticker de la cara f tiene color f.

    La API pública (`get`/`set`) usa índices 1-based para fila, columna y cara.
    Internamente las filas y columnas se guardan 0-based.

    Igualdad, hash y orden se calculan sobre el contenido completo, así que dos
    cubos con los mismos stickers son intercambiables como claves de `set`/`dict`.
    No mutar un cubo mientras esté dentro de un `set`.
    """

    def __init__(self, n: int) -> None:
        """Crea un cubo resuelto de tamaño `n`.

        Args:
            n: Cantidad de stickers por lado (n >= 1).

        Raises:
            ValueError: Si `n` no es un entero >= 1.
        """
        check_size(n)
        self.n: int = n
        self.state: Dict[Face, Grid] = {}
        self.reset()

    # --------------------------
    # Public API
    # --------------------------
    def reset(self) -> None:
        """Reinicia el cubo a estado resuelto."""
        n = self.n
        self.state = {f: [[f] * n for _ in range(n)] for f in FACES}

    def copy(self) -> "CubeState":
        """Devuelve una copia profunda e independiente del cubo."""
        clone = CubeState.__new__(CubeState)
        clone.n = self.n
        clone.state = {f: [row[:] for row in grid] for f, grid in self.state.items()}
        return clone

    def get(self, row: int, col: int, face: Face) -> Color:
        """Lee el color del sticker `(row, col)` de `face` (todo 1-based).

        Raises:
            ValueError: Si algún índice está fuera de rango.
        """
        self._check_cell(row, col, face)
        return self.state[face][row - 1][col - 1]

    def set(self, row: int, col: int, face: Face, color: Color) -> None:
        """Escribe el color del sticker `(row, col)` de `face` (todo 1-based).

        Raises:
            ValueError: Si algún índice o el color está fuera de rango.
        """
        self._check_cell(row, col, face)
        if isinstance(color, bool) or color not in FACES:
            raise ValueError(f"Color inválido: {color!r}")
        self.state[face][row - 1][col - 1] = color

    def face_grid(self, face: Face) -> Grid:
        """Devuelve una copia de la grilla de una cara (lista de filas)."""
        check_face(face)
        return [row[:] for row in self.state[face]]

    def is_solved(self) -> bool:
        """Indica si cada cara muestra un único color.

        El color de una cara no tiene que coincidir con su etiqueta: un cubo
        reorientado con giros de cubo completo sigue resuelto.
        """
        for f in FACES:
            grid = self.state[f]
            first = grid[0][0]
            if any(x != first for row in grid for x in row):
                return False
        return True

    def color_counts(self) -> Counter:
        """Cuenta cuántos stickers hay de cada color en todo el cubo."""
        return Counter(x for f in FACES for row in self.state[f] for x in row)

    def to_hashable(self) -> CubeHash:
        """Convierte el estado a una tupla inmutable y hasheable.

        Returns:
            Tupla con los n² stickers de cada cara (fila por fila), en el orden de `FACES`.
        """
        return tuple(tuple(x for row in self.state[f] for x in row) for f in FACES)

    def apply_move(self, move: str) -> None:
        """Aplica un movimiento en notación (ej: "R", "U'", "2M", "X") sobre este cubo.

        Raises:
            ValueError: Si el token no es válido o su capa no existe en este cubo.
        """
        _moves.apply_move(self, move, inplace=True)

    def apply_sequence(self, seq: str) -> None:
        """Aplica una secuencia de movimientos separada por espacios.

        Args:
            seq: String con movimientos, por ejemplo: "R U R' U'".
        """
        _moves.apply_sequence(self, seq, inplace=True)

    # --------------------------
    # Igualdad / hash
    # --------------------------
    def _key(self) -> Tuple[int, CubeHash]:
        return (self.n, self.to_hashable())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubeState):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "CubeState") -> bool:
        if not isinstance(other, CubeState):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"CubeState(n={self.n}, solved={self.is_solved()})"

    def __str__(self) -> str:
        return render_net(self)

    # --------------------------
    # Helpers
    # --------------------------
    def _check_cell(self, row: int, col: int, face: Face) -> None:
        check_face(face)
        for name, value in (("Fila", row), ("Columna", col)):
            if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= self.n:
                raise ValueError(f"{name} fuera de rango: {value!r} (cubo {self.n}x{self.n}x{self.n})")


def create(n: int) -> CubeState:
    """Crea un cubo resuelto de tamaño `n` (atajo de `CubeState(n)`)."""
    return CubeState(n)
