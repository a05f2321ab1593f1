# magic_cube/core/rotations.py
"""Motor de rotaciones: giros de cara, de capa interna y de cubo completo.

Cada familia tiene un único núcleo que muta el cubo (`_turn_face`,
`_turn_slice`, `_turn_cube`). Las funciones públicas reciben `inplace`:

    - `inplace=False` (por defecto): clona el cubo, gira la copia y la retorna.
      El cubo original no se modifica.
    - `inplace=True`: gira el mismo cubo y lo retorna (útil para encadenar).

Todas las rotaciones son permutaciones de stickers: nunca se crean ni se
pierden colores.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from magic_cube.core.geometry import (
    ADJACENT_FACES,
    OPPOSITE_FACE,
    Cell,
    Color,
    Face,
    check_face,
    check_layer,
    strip_cells,
)
from magic_cube.core.move import Move

if TYPE_CHECKING:
    from magic_cube.core.cube_state import CubeState, Grid


# --------------------------
# Núcleo (mutante)
# --------------------------
def _read_strip(cube: "CubeState", cells: List[Cell]) -> List[Color]:
    return [cube.state[f][r - 1][c - 1] for r, c, f in cells]


def _write_strip(cube: "CubeState", cells: List[Cell], values: List[Color]) -> None:
    for (r, c, f), v in zip(cells, values):
        cube.state[f][r - 1][c - 1] = v


def _cycle_strips(cube: "CubeState", face: Face, layer: int, clockwise: bool) -> None:
    """Rota las 4 tiras de la capa `layer` una posición entre vecinas.

    Horario: la vecina k recibe la tira de la vecina k-1 (mod 4).
    Antihorario: la vecina k recibe la tira de la vecina k+1 (mod 4).
    """
    strips = strip_cells(face, cube.n, layer)
    values = [_read_strip(cube, cells) for cells in strips]

    shift = 3 if clockwise else 1
    for k, cells in enumerate(strips):
        _write_strip(cube, cells, values[(k + shift) % 4])


def _spin_grid(grid: "Grid", clockwise: bool) -> "Grid":
    """Rota una grilla n×n 90 grados."""
    if clockwise:
        return [list(row) for row in zip(*grid[::-1])]
    return [list(row) for row in zip(*grid)][::-1]


def _turn_face(cube: "CubeState", face: Face, clockwise: bool) -> None:
    check_face(face)
    _cycle_strips(cube, face, 1, clockwise)
    cube.state[face] = _spin_grid(cube.state[face], clockwise)


def _turn_slice(cube: "CubeState", face: Face, layer: int, clockwise: bool) -> None:
    check_face(face)
    check_layer(layer, cube.n)

    if layer == 1:
        _turn_face(cube, face, clockwise)
    elif layer == cube.n:
        # La capa más profunda es la cara opuesta girada en sentido contrario.
        _turn_face(cube, OPPOSITE_FACE[face], not clockwise)
    else:
        # Capa interna: no hay grilla propia que rotar.
        _cycle_strips(cube, face, layer, clockwise)


def _turn_cube(cube: "CubeState", face: Face, clockwise: bool) -> None:
    """Permuta como grillas completas las 4 caras vecinas de `face`.

    La cara eje y su opuesta no se tocan, y las grillas movidas no se
    reorientan (ver DESIGN.md).
    """
    check_face(face)
    ring = ADJACENT_FACES[face]
    grids = [cube.state[f] for f in ring]

    if clockwise:
        grids = grids[-1:] + grids[:-1]
    else:
        grids = grids[1:] + grids[:1]

    for f, grid in zip(ring, grids):
        cube.state[f] = grid


def _target(cube: "CubeState", inplace: bool) -> "CubeState":
    return cube if inplace else cube.copy()


# --------------------------
# Public API
# --------------------------
def face_clockwise(cube: "CubeState", face: Face, inplace: bool = False) -> "CubeState":
    """Gira la cara `face` 90° en sentido horario (mirándola de frente).

    Args:
        cube: Cubo de origen.
        face: Cara a girar (1..6).
        inplace: Si True, muta `cube`; si False, trabaja sobre una copia.

    Returns:
        El cubo girado (`cube` si `inplace`, una copia nueva si no).

    Raises:
        ValueError: Si `face` no está en 1..6.
    """
    check_face(face)
    out = _target(cube, inplace)
    _turn_face(out, face, True)
    return out


def face_counterclockwise(cube: "CubeState", face: Face, inplace: bool = False) -> "CubeState":
    """Gira la cara `face` 90° en sentido antihorario. Ver `face_clockwise`."""
    check_face(face)
    out = _target(cube, inplace)
    _turn_face(out, face, False)
    return out


def slice_clockwise(cube: "CubeState", face: Face, layer: int, inplace: bool = False) -> "CubeState":
    """Gira en sentido horario la capa `layer` contada desde `face`.

    La capa 1 equivale a `face_clockwise(cube, face)` y la capa n equivale a
    `face_counterclockwise(cube, opposite_face(face))`.

    Raises:
        ValueError: Si `face` o `layer` están fuera de rango.
    """
    check_face(face)
    check_layer(layer, cube.n)
    out = _target(cube, inplace)
    _turn_slice(out, face, layer, True)
    return out


def slice_counterclockwise(cube: "CubeState", face: Face, layer: int, inplace: bool = False) -> "CubeState":
    """Gira en sentido antihorario la capa `layer` contada desde `face`."""
    check_face(face)
    check_layer(layer, cube.n)
    out = _target(cube, inplace)
    _turn_slice(out, face, layer, False)
    return out


def cube_clockwise(cube: "CubeState", face: Face, inplace: bool = False) -> "CubeState":
    """Gira el cubo completo en sentido horario alrededor del eje de `face`."""
    check_face(face)
    out = _target(cube, inplace)
    _turn_cube(out, face, True)
    return out


def cube_counterclockwise(cube: "CubeState", face: Face, inplace: bool = False) -> "CubeState":
    """Gira el cubo completo en sentido antihorario alrededor del eje de `face`."""
    check_face(face)
    out = _target(cube, inplace)
    _turn_cube(out, face, False)
    return out


def apply_move(cube: "CubeState", move: Move, inplace: bool = False) -> "CubeState":
    """Aplica un `Move` (capa o cubo completo).

    Raises:
        ValueError: Si la cara o la capa del movimiento no son válidas para `cube`.
    """
    if move.is_cube_rotation:
        fn = cube_clockwise if move.clockwise else cube_counterclockwise
        return fn(cube, move.face, inplace=inplace)

    fn = slice_clockwise if move.clockwise else slice_counterclockwise
    return fn(cube, move.face, move.layer, inplace=inplace)
