# magic_cube/render/text_view.py
from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from magic_cube.core.cube_state import CubeState

# Fila central de la cruz: Left, Front, Right, Back
MIDDLE_ROW: List[int] = [2, 1, 3, 6]


def render_net(cube: "CubeState") -> str:
    """Despliega el cubo en texto, centrado en la cara Front.

    Formato (un carácter por sticker):

          4
        2 1 3 6
          5

    Args:
        cube: Cubo a mostrar.

    Returns:
        3n líneas separadas por saltos de línea.
    """
    n = cube.n
    offset = " " * n
    lines: List[str] = []

    for row in cube.state[4]:
        lines.append(offset + "".join(str(c) for c in row))

    for i in range(n):
        lines.append("".join(str(c) for f in MIDDLE_ROW for c in cube.state[f][i]))

    for row in cube.state[5]:
        lines.append(offset + "".join(str(c) for c in row))

    return "\n".join(lines)
