# magic_cube/core/geometry.py
"""Tablas geométricas fijas del cubo.

Convención de caras (vista desplegada centrada en Front):

      4
    2 1 3 6
      5

    1=Front, 2=Left, 3=Right, 4=Up, 5=Down, 6=Back

Cada cara tiene 4 vecinas en orden horario (mirando la cara de frente). Para
cada vecina, las tablas `slice_rows` / `slice_cols` indican qué fila(s) y
columna(s) de esa vecina tocan la capa `layer` contada desde la cara. Una de
las dos es un entero fijo y la otra un `range` de largo n; el orden del
`range` define el orden de lectura/escritura de la tira.

Índices 1-based, igual que la API pública de `CubeState`.
"""
from __future__ import annotations

from typing import Dict, List, Tuple, Union

Face = int
Color = int
Index = Union[int, range]
Cell = Tuple[int, int, Face]  # (fila, columna, cara)

FACES: Tuple[Face, ...] = (1, 2, 3, 4, 5, 6)
FACE_NAMES: Dict[Face, str] = {
    1: "Front",
    2: "Left",
    3: "Right",
    4: "Up",
    5: "Down",
    6: "Back",
}

ADJACENT_FACES: Dict[Face, Tuple[Face, Face, Face, Face]] = {
    1: (2, 4, 3, 5),
    2: (6, 4, 1, 5),
    3: (1, 4, 6, 5),
    4: (2, 6, 3, 1),
    5: (2, 1, 3, 6),
    6: (3, 4, 2, 5),
}

OPPOSITE_FACE: Dict[Face, Face] = {1: 6, 2: 3, 3: 2, 4: 5, 5: 4, 6: 1}


# --------------------------
# Validaciones (errores de programación: fallan rápido)
# --------------------------
def check_size(n: int) -> None:
    """Valida el tamaño del cubo.

    Raises:
        ValueError: Si `n` no es un entero >= 1.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ValueError(f"Tamaño de cubo inválido: {n!r}")


def check_face(face: Face) -> None:
    """Valida una etiqueta de cara.

    Raises:
        ValueError: Si `face` no está en 1..6.
    """
    if isinstance(face, bool) or not isinstance(face, int) or face not in ADJACENT_FACES:
        raise ValueError(f"Cara inválida: {face!r}")


def check_layer(layer: int, n: int) -> None:
    """Valida una capa para un cubo de tamaño `n`.

    Raises:
        ValueError: Si `layer` no está en 1..n.
    """
    if isinstance(layer, bool) or not isinstance(layer, int) or not 1 <= layer <= n:
        raise ValueError(f"Capa inválida: {layer!r} (cubo {n}x{n}x{n})")


# --------------------------
# Tablas
# --------------------------
def adjacent_faces(face: Face) -> Tuple[Face, Face, Face, Face]:
    """Devuelve las 4 caras vecinas de `face` en orden horario."""
    check_face(face)
    return ADJACENT_FACES[face]


def opposite_face(face: Face) -> Face:
    """Devuelve la cara opuesta (1<->6, 2<->3, 4<->5)."""
    check_face(face)
    return OPPOSITE_FACE[face]


def slice_rows(face: Face, layer: int, n: int) -> List[Index]:
    """Filas de cada vecina que bordean la capa `layer` vista desde `face`.

    Args:
        face: Cara de referencia (1..6).
        layer: Profundidad de la capa (1..n). La capa 1 es el anillo exterior.
        n: Tamaño del cubo.

    Returns:
        Lista de 4 entradas (entero o `range`), en el orden de `adjacent_faces`.
    """
    check_face(face)
    check_size(n)
    check_layer(layer, n)

    fwd = range(1, n + 1)
    rev = range(n, 0, -1)
    near = layer
    far = n + 1 - layer

    table: Dict[Face, List[Index]] = {
        1: [rev, far, fwd, near],
        2: [rev, fwd, fwd, fwd],
        3: [rev, rev, fwd, rev],
        4: [near, near, near, near],
        5: [far, far, far, far],
        6: [rev, near, fwd, far],
    }
    return table[face]


def slice_cols(face: Face, layer: int, n: int) -> List[Index]:
    """Columnas de cada vecina que bordean la capa `layer` vista desde `face`.

    Ver `slice_rows`.
    """
    check_face(face)
    check_size(n)
    check_layer(layer, n)

    fwd = range(1, n + 1)
    rev = range(n, 0, -1)
    near = layer
    far = n + 1 - layer

    table: Dict[Face, List[Index]] = {
        1: [far, fwd, near, rev],
        2: [far, near, near, near],
        3: [far, far, near, far],
        4: [rev, rev, rev, rev],
        5: [fwd, fwd, fwd, fwd],
        6: [far, rev, near, fwd],
    }
    return table[face]


def adjacent_rows(face: Face, n: int) -> List[Index]:
    """Filas de cada vecina que bordean el anillo exterior de `face`."""
    return slice_rows(face, 1, n)


def adjacent_cols(face: Face, n: int) -> List[Index]:
    """Columnas de cada vecina que bordean el anillo exterior de `face`."""
    return slice_cols(face, 1, n)


def strip_cells(face: Face, n: int, layer: int = 1) -> List[List[Cell]]:
    """Expande las tablas a las 4 tiras de celdas que gira una capa.

    Args:
        face: Cara de referencia.
        n: Tamaño del cubo.
        layer: Capa (1 = anillo exterior).

    Returns:
        4 listas de n celdas `(fila, col, cara)`, una por vecina, en el orden
        de `adjacent_faces(face)`.
    """
    strips: List[List[Cell]] = []
    for f, rows, cols in zip(adjacent_faces(face), slice_rows(face, layer, n), slice_cols(face, layer, n)):
        if isinstance(rows, int):
            strips.append([(rows, c, f) for c in cols])
        else:
            strips.append([(r, cols, f) for r in rows])
    return strips
