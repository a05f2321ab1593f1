# magic_cube/core/move.py
from __future__ import annotations

from typing import NamedTuple, Optional


class Move(NamedTuple):
    """Un cuarto de vuelta del cubo.

    Attributes:
        face: Cara desde la que se mide la capa (o eje, en giros de cubo completo).
        layer: Capa 1..n. `None` indica giro del cubo completo alrededor de `face`.
        clockwise: True para horario (mirando `face` de frente).
    """

    face: int
    layer: Optional[int]
    clockwise: bool = True

    @property
    def is_cube_rotation(self) -> bool:
        return self.layer is None

    def inverse(self) -> "Move":
        """Devuelve el movimiento que deshace este."""
        return self._replace(clockwise=not self.clockwise)

    @property
    def token(self) -> str:
        """Notación del movimiento ("F", "2L'", "X")."""
        from magic_cube.logic.moves import move_to_token

        return move_to_token(self)
