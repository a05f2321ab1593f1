# magic_cube/app/solve_worker.py
from __future__ import annotations

import traceback
from typing import Optional

from PySide6.QtCore import QThread, Signal

from magic_cube.core.cube_state import CubeState
from magic_cube.solve.bfs_solver import SearchResult, solve


class SolveWorker(QThread):
    """Hilo de trabajo para buscar una solución del cubo sin bloquear la UI.

    Ejecuta la búsqueda en anchura (árbol o grafo) sobre una copia del estado
    del cubo, emitiendo señales para informar progreso y resultado.

    Signals:
        progress(int): Iteraciones recorridas hasta el momento.
        finished_solution(object): `SearchResult` o None si no hubo solución.
        error(str): Traceback si ocurre una excepción durante la búsqueda.
    """

    progress = Signal(int)
    finished_solution = Signal(object)
    error = Signal(str)

    def __init__(self, model: CubeState, max_iter: int, method: str = "graph") -> None:
        """Crea el worker y clona el cubo para trabajar en segundo plano.

        Se clona el estado porque la UI puede seguir modificando el cubo original.

        Args:
            model: Cubo que se quiere resolver.
            max_iter: Presupuesto de iteraciones de la búsqueda.
            method: "graph" o "tree".
        """
        super().__init__()
        self.model: CubeState = model.copy()
        self.max_iter: int = max_iter
        self.method: str = method

    def run(self) -> None:
        try:
            result: Optional[SearchResult] = solve(
                self.model,
                self.method,
                max_iter=self.max_iter,
                on_progress=self.progress.emit,
                should_cancel=self.isInterruptionRequested,
            )
            self.finished_solution.emit(result)
        except Exception:
            self.error.emit(traceback.format_exc())
