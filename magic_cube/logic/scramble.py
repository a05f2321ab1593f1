# magic_cube/logic/scramble.py
from __future__ import annotations

import random
from typing import TYPE_CHECKING, List, Optional

from magic_cube.config import DEFAULT_SCRAMBLE_LENGTH
from magic_cube.logic.moves import FACE_LETTERS, SLICE_LETTERS, apply_sequence

if TYPE_CHECKING:
    from magic_cube.core.cube_state import CubeState

FACES: List[str] = list(FACE_LETTERS)
SLICES: List[str] = list(SLICE_LETTERS)
SUFFIX: List[str] = ["", "'", "2"]


def generate_scramble(count: int, seed: Optional[int] = None, size: Optional[int] = None) -> str:
    """Genera una secuencia de mezcla (scramble) aleatoria.

    El vocabulario excluye los giros de cubo completo (X, Y, Z): reorientar el
    cubo no lo desarma. La secuencia evita repetir la misma letra en movimientos
    consecutivos (por ejemplo, evita "U U'" o "R R2" seguidos).

    Args:
        count: Cantidad de movimientos a generar.
        seed: Semilla opcional para obtener resultados reproducibles.
        size: Tamaño del cubo destino. Si es menor que 2, no se usan capas
            internas (M, E, S), porque la capa 2 no existe.

    Returns:
        Un string con movimientos separados por espacios, por ejemplo:
        "R U' F2 M D2 ..."

    Raises:
        ValueError: Si `count` es menor o igual a 0.
    """
    if count <= 0:
        raise ValueError(f"count debe ser mayor que 0 (recibido {count})")

    rng = random.Random(seed)

    letters = FACES if size is not None and size < 2 else FACES + SLICES
    seq: List[str] = []
    last: Optional[str] = None

    for _ in range(count):
        candidates = [m for m in letters if m != last]
        letter = rng.choice(candidates)
        last = letter

        seq.append(letter + rng.choice(SUFFIX))

    return " ".join(seq)


def shuffle(
    cube: "CubeState",
    count: int = DEFAULT_SCRAMBLE_LENGTH,
    seed: Optional[int] = None,
    inplace: bool = False,
) -> "CubeState":
    """Mezcla el cubo aplicando `count` movimientos aleatorios.

    Args:
        cube: Cubo a mezclar.
        count: Cantidad de movimientos.
        seed: Semilla opcional.
        inplace: Si True, muta `cube`; si False, retorna una copia mezclada.

    Returns:
        El cubo mezclado.
    """
    return apply_sequence(cube, generate_scramble(count, seed=seed, size=cube.n), inplace=inplace)
