# magic_cube/logic/moves.py
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Dict, List, Set

from magic_cube.core import rotations
from magic_cube.core.move import Move

if TYPE_CHECKING:
    from magic_cube.core.cube_state import CubeState

# Letra -> cara (giro de la capa exterior)
FACE_LETTERS: Dict[str, int] = {"F": 1, "L": 2, "R": 3, "U": 4, "D": 5, "B": 6}
# Letra -> cara de referencia (capa interna, por defecto la 2 como en un 3x3)
SLICE_LETTERS: Dict[str, int] = {"M": 2, "E": 5, "S": 1}
# Letra -> cara eje (giro del cubo completo)
CUBE_LETTERS: Dict[str, int] = {"X": 3, "Y": 4, "Z": 1}

DEFAULT_SLICE_LAYER: int = 2
VALID_SUFFIX: Set[str] = {"", "'", "2"}

_LETTER_OF_FACE: Dict[int, str] = {f: k for k, f in FACE_LETTERS.items()}
_LETTER_OF_AXIS: Dict[int, str] = {f: k for k, f in CUBE_LETTERS.items()}

# [capa opcional][letra][sufijo]
_TOKEN_RE = re.compile(r"(\d*)([A-Za-z])(.*)")


def normalize_token(tok: str) -> str:
    """Normaliza un token de movimiento a un formato estándar.

    Reglas principales:
    - Elimina espacios y convierte comilla tipográfica (’ o ‘) a comilla simple (').
    - Acepta un prefijo numérico opcional con la capa (ej: "2F", "3M").
    - Sufijos: "" (horario), "'" (antihorario), "2" (media vuelta).
    - Corrige el caso típico "D2'" -> "D2" (el inverso de un 180° es el mismo).

    Args:
        tok: Token de movimiento (por ejemplo: "R", "U'", "F2", "2M'").

    Returns:
        Token normalizado. Un token vacío retorna "".

    Raises:
        ValueError: Si la letra, la capa o el sufijo no son válidos.
    """
    tok = tok.strip().replace("’", "'").replace("‘", "'")
    if not tok:
        return ""

    m = _TOKEN_RE.fullmatch(tok)
    if m is None:
        raise ValueError(f"Movimiento inválido: {tok}")

    layer, base, suf = m.groups()
    if base not in FACE_LETTERS and base not in SLICE_LETTERS and base not in CUBE_LETTERS:
        raise ValueError(f"Movimiento inválido: {tok}")

    if layer:
        if base in CUBE_LETTERS:
            raise ValueError(f"Los giros de cubo no llevan capa: {tok}")
        if int(layer) < 1:
            raise ValueError(f"Capa inválida en: {tok}")
        layer = str(int(layer))

    if suf == "2'":
        suf = "2"

    if suf not in VALID_SUFFIX:
        raise ValueError(f"Sufijo inválido en: {tok}")

    return layer + base + suf


def expand_token(tok: str) -> List[Move]:
    """Traduce un token a la lista de cuartos de vuelta que representa.

    Ejemplos:
        - "F"   -> [Move(1, 1, True)]
        - "U'"  -> [Move(4, 1, False)]
        - "R2"  -> [Move(3, 1, True), Move(3, 1, True)]
        - "3M"  -> [Move(2, 3, True)]
        - "Y"   -> [Move(4, None, True)]

    Raises:
        ValueError: Si el token no es válido.
    """
    tok = normalize_token(tok)
    if not tok:
        return []

    layer, base, suf = _TOKEN_RE.fullmatch(tok).groups()

    if base in CUBE_LETTERS:
        move = Move(CUBE_LETTERS[base], None)
    elif base in SLICE_LETTERS:
        move = Move(SLICE_LETTERS[base], int(layer) if layer else DEFAULT_SLICE_LAYER)
    else:
        move = Move(FACE_LETTERS[base], int(layer) if layer else 1)

    if suf == "'":
        return [move.inverse()]
    if suf == "2":
        return [move, move]
    return [move]


def move_to_token(move: Move) -> str:
    """Convierte un `Move` a notación.

    Capa 1 -> letra de la cara ("F", "U'"); otras capas -> "<capa><letra>"
    ("2F", "3L'"); giros de cubo -> "X", "Y", "Z".

    Raises:
        ValueError: Si el giro de cubo no tiene letra (solo hay ejes 1, 3 y 4).
    """
    suffix = "" if move.clockwise else "'"

    if move.is_cube_rotation:
        if move.face not in _LETTER_OF_AXIS:
            raise ValueError(f"Giro de cubo sin notación: cara {move.face}")
        return _LETTER_OF_AXIS[move.face] + suffix

    if move.face not in _LETTER_OF_FACE:
        raise ValueError(f"Cara inválida: {move.face!r}")

    letter = _LETTER_OF_FACE[move.face]
    if move.layer == 1:
        return letter + suffix
    return f"{move.layer}{letter}{suffix}"


def inverse_move(m: str) -> str:
    """Devuelve el movimiento inverso de un token.

    Ejemplos:
        - "R"   -> "R'"
        - "R'"  -> "R"
        - "R2"  -> "R2"
        - "2M"  -> "2M'"

    Args:
        m: Movimiento en notación estándar (o normalizable).

    Returns:
        El movimiento inverso. Si `m` es un string vacío, retorna "".

    Raises:
        ValueError: Si `m` no es un token válido.
    """
    m = normalize_token(m)
    if not m:
        return m

    if m.endswith("'"):
        return m[:-1]
    if m.endswith("2"):
        return m
    return m + "'"


def parse_sequence(text: str) -> List[str]:
    """Convierte una secuencia escrita como texto en una lista de movimientos normalizados.

    La entrada debe separar movimientos por espacios. Por ejemplo:
        "R U R' U'" -> ["R", "U", "R'", "U'"]

    Raises:
        ValueError: Si algún token es inválido.
    """
    tokens = [t for t in text.strip().split() if t.strip()]
    return [normalize_token(t) for t in tokens]


def sequence_to_moves(text: str) -> List[Move]:
    """Convierte una secuencia de texto en la lista plana de cuartos de vuelta."""
    out: List[Move] = []
    for tok in parse_sequence(text):
        out.extend(expand_token(tok))
    return out


def apply_move(cube: "CubeState", token: str, inplace: bool = False) -> "CubeState":
    """Aplica un token de movimiento.

    Args:
        cube: Cubo de origen.
        token: Movimiento en notación (ej: "R", "U'", "2M", "X2").
        inplace: Si True, muta `cube`; si False, trabaja sobre una copia.

    Returns:
        El cubo resultante.

    Raises:
        ValueError: Si el token no es válido o la capa no existe en `cube`.
    """
    moves = expand_token(token)
    out = cube if inplace else cube.copy()
    for mv in moves:
        rotations.apply_move(out, mv, inplace=True)
    return out


def apply_sequence(cube: "CubeState", seq: str, inplace: bool = False) -> "CubeState":
    """Aplica una secuencia de movimientos separada por espacios.

    La secuencia se valida completa antes de girar nada: si un token es
    inválido, el cubo no se modifica.
    """
    moves = sequence_to_moves(seq)
    for mv in moves:
        if not mv.is_cube_rotation and mv.layer > cube.n:
            raise ValueError(f"Capa {mv.layer} inexistente en un cubo {cube.n}x{cube.n}x{cube.n}")

    out = cube if inplace else cube.copy()
    for mv in moves:
        rotations.apply_move(out, mv, inplace=True)
    return out
