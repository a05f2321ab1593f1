# magic_cube/solve/neighbors.py
from __future__ import annotations

from typing import Iterator, Tuple

from magic_cube.core import rotations
from magic_cube.core.cube_state import CubeState
from magic_cube.core.move import Move

# Un representante de cada par de caras opuestas: girar la capa L de una cara
# equivale a girar la capa n+1-L de la opuesta en sentido contrario.
CANONICAL_FACES: Tuple[int, ...] = (1, 2, 4)


def one_turn_successors(cube: CubeState) -> Iterator[Tuple[Move, CubeState]]:
    """Genera todos los estados a un cuarto de vuelta de `cube`.

    Orden: cara en (1, 2, 4), capa 1..n, y para cada capa primero horario y
    luego antihorario. Produce exactamente 6n pares. Los giros de cubo completo
    no se incluyen (no cambian si el cubo está resuelto).

    Es un generador sin estado: cada llamada empieza de nuevo y produce la
    misma secuencia. `cube` nunca se modifica; cada estado es una copia nueva.

    Yields:
        Tuplas `(move, estado)`.
    """
    for face in CANONICAL_FACES:
        for layer in range(1, cube.n + 1):
            for clockwise in (True, False):
                move = Move(face, layer, clockwise)
                yield move, rotations.apply_move(cube, move)


def one_turn_neighbors(cube: CubeState) -> Iterator[CubeState]:
    """Igual que `one_turn_successors`, pero solo los estados."""
    for _, state in one_turn_successors(cube):
        yield state
