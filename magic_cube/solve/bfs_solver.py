# magic_cube/solve/bfs_solver.py
from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, Dict, List, NamedTuple, Optional, Set, Tuple

from magic_cube.config import DEFAULT_MAX_ITER, PROGRESS_EVERY
from magic_cube.core.cube_state import CubeState
from magic_cube.core.move import Move
from magic_cube.solve.neighbors import one_turn_successors

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

OnProgressCallback = Callable[[int], None]
ShouldCancelCallback = Callable[[], bool]

# (estado, movimientos desde el estado inicial)
Node = Tuple[CubeState, Tuple[Move, ...]]


class SearchResult(NamedTuple):
    """Resultado de una búsqueda exitosa.

    Attributes:
        state: Estado resuelto que se desencoló.
        iterations: Iteración en la que se desencoló (0 = el cubo ya estaba resuelto).
        moves: Movimientos que llevan del estado inicial a `state`.
    """

    state: CubeState
    iterations: int
    moves: List[Move]


def tree_search(
    cube: CubeState,
    max_iter: int = DEFAULT_MAX_ITER,
    on_progress: Optional[OnProgressCallback] = None,
    should_cancel: Optional[ShouldCancelCallback] = None,
) -> Optional[SearchResult]:
    """Búsqueda en anchura sin deduplicación (versión árbol).

    La frontera es una cola FIFO; un mismo estado puede encolarse varias veces
    por caminos distintos.

    Args:
        cube: Cubo a resolver. No se modifica.
        max_iter: Máxima cantidad de estados a desencolar.
        on_progress: Callback opcional, se llama con la iteración actual cada
            `PROGRESS_EVERY` iteraciones.
        should_cancel: Callback opcional para cancelar la búsqueda (retorna True si se cancela).

    Returns:
        `SearchResult` si se desencola un estado resuelto; None si se agota la
        frontera, el presupuesto, o se cancela.

    Raises:
        ValueError: Si `max_iter` es negativo.
    """
    return _breadth_first(cube, max_iter, False, on_progress, should_cancel)


def graph_search(
    cube: CubeState,
    max_iter: int = DEFAULT_MAX_ITER,
    on_progress: Optional[OnProgressCallback] = None,
    should_cancel: Optional[ShouldCancelCallback] = None,
) -> Optional[SearchResult]:
    """Búsqueda en anchura con deduplicación (versión grafo).

    Igual que `tree_search`, pero lleva un conjunto de estados en la frontera y
    otro de estados ya explorados. Un sucesor se encola solo si no está en
    ninguno de los dos.
    """
    return _breadth_first(cube, max_iter, True, on_progress, should_cancel)


SEARCHES: Dict[str, Callable[..., Optional[SearchResult]]] = {
    "graph": graph_search,
    "tree": tree_search,
}


def solve(cube: CubeState, method: str = "graph", **kwargs) -> Optional[SearchResult]:
    """Resuelve con la búsqueda indicada por nombre ("graph" o "tree").

    Raises:
        ValueError: Si `method` no existe.
    """
    try:
        search = SEARCHES[method]
    except KeyError:
        raise ValueError(f"Búsqueda no soportada: {method!r}") from None
    return search(cube, **kwargs)


def _breadth_first(
    cube: CubeState,
    max_iter: int,
    dedupe: bool,
    on_progress: Optional[OnProgressCallback],
    should_cancel: Optional[ShouldCancelCallback],
) -> Optional[SearchResult]:
    """Núcleo común de ambas búsquedas en anchura."""
    if max_iter < 0:
        raise ValueError(f"max_iter debe ser >= 0 (recibido {max_iter})")

    kind = "graph" if dedupe else "tree"
    logger.debug("BFS %s: n=%d, max_iter=%d", kind, cube.n, max_iter)

    start = cube.copy()
    frontier: Deque[Node] = deque([(start, ())])
    in_frontier: Set[CubeState] = {start}
    explored: Set[CubeState] = set()

    iterations = 0
    while frontier and iterations < max_iter:
        if should_cancel is not None and should_cancel():
            logger.info("BFS %s cancelada en la iteración %d", kind, iterations)
            return None

        state, path = frontier.popleft()
        if dedupe:
            in_frontier.discard(state)
            explored.add(state)

        if state.is_solved():
            logger.info("BFS %s: resuelto en la iteración %d (%d movimientos)", kind, iterations, len(path))
            return SearchResult(state, iterations, list(path))

        for move, child in one_turn_successors(state):
            if dedupe:
                if child in explored or child in in_frontier:
                    continue
                in_frontier.add(child)
            frontier.append((child, path + (move,)))

        iterations += 1
        if on_progress is not None and iterations % PROGRESS_EVERY == 0:
            on_progress(iterations)

    if frontier:
        logger.info("BFS %s: sin solución dentro de %d iteraciones", kind, max_iter)
    else:
        logger.info("BFS %s: frontera agotada tras %d iteraciones", kind, iterations)
    return None
