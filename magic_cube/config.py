# magic_cube/config.py
"""Valores por defecto del proyecto.

Todas las constantes se leen al importar; no hay carga desde archivos ni
variables de entorno. Si necesitas otro valor, pásalo explícitamente a la
función correspondiente (por ejemplo `graph_search(cube, max_iter=5000)`).
"""
from __future__ import annotations

from typing import Dict, Tuple

# ---------------- Cubo ----------------

DEFAULT_SIZE: int = 3
# La UI limita el tamaño; el modelo acepta cualquier n >= 1.
MAX_GUI_SIZE: int = 7

# ---------------- Solver ----------------

# Presupuesto de iteraciones (desencolados) de la búsqueda en anchura.
DEFAULT_MAX_ITER: int = 1000
MAX_GUI_ITER: int = 200_000
# Cada cuántas iteraciones se notifica progreso (callback `on_progress`).
PROGRESS_EVERY: int = 250

# ---------------- Scramble ----------------

DEFAULT_SCRAMBLE_LENGTH: int = 3

# ---------------- Render ----------------

# Color de sticker -> RGB (0..1). 1=Front, 2=Left, 3=Right, 4=Up, 5=Down, 6=Back.
PALETTE: Dict[int, Tuple[float, float, float]] = {
    1: (0.0, 0.85, 0.0),   # verde
    2: (1.0, 0.5, 0.0),    # naranja
    3: (1.0, 0.0, 0.0),    # rojo
    4: (1.0, 1.0, 1.0),    # blanco
    5: (1.0, 1.0, 0.0),    # amarillo
    6: (0.0, 0.35, 1.0),   # azul
}
UNKNOWN_RGB: Tuple[float, float, float] = (0.8, 0.8, 0.8)

ANIM_STEP_DEG: float = 6.0
ANIM_INTERVAL_MS: int = 16  # ~60fps
