# magic_cube/app/main_window.py
from __future__ import annotations

import logging
from typing import List, Literal, Optional

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from magic_cube.app.solve_worker import SolveWorker
from magic_cube.config import (
    DEFAULT_MAX_ITER,
    DEFAULT_SCRAMBLE_LENGTH,
    DEFAULT_SIZE,
    MAX_GUI_ITER,
    MAX_GUI_SIZE,
)
from magic_cube.core.cube_state import CubeState
from magic_cube.core.move import Move
from magic_cube.logic.moves import move_to_token
from magic_cube.logic.scramble import generate_scramble
from magic_cube.render.cube_gl_widget import CubeGLWidget
from magic_cube.solve.bfs_solver import SearchResult

logger = logging.getLogger(__name__)

Mode = Literal["normal", "undo", "redo", "apply", "scramble"]


class MainWindow(QMainWindow):
    """Ventana principal del simulador de cubos n×n×n.

    Esta clase coordina:
    - El cubo (`CubeState`)
    - La visualización y animación 3D (`CubeGLWidget`)
    - El historial (undo/redo)
    - La búsqueda en anchura en segundo plano (`SolveWorker`)
    """

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Magic Cube - PySide6")

        # --- Modelo + render ---
        self.model: CubeState = CubeState(DEFAULT_SIZE)
        self.gl_widget: CubeGLWidget = CubeGLWidget(self.model, self)

        # --- Historial ---
        self.history: List[Move] = []
        self.redo_stack: List[Move] = []
        self._mode: Mode = "normal"
        self._auto_apply_when_found: bool = False

        # --- Estado solver ---
        self._pending_solution: Optional[List[Move]] = None
        self._solve_worker: Optional[SolveWorker] = None

        # --- UI ---
        root = QWidget()
        root_layout = QHBoxLayout(root)
        root_layout.addWidget(self.gl_widget, 1)

        panel = QWidget()
        panel_layout = QVBoxLayout(panel)
        panel.setFixedWidth(320)

        self.lbl_state = QLabel("")
        panel_layout.addWidget(self.lbl_state)

        # Tamaño
        row_size = QHBoxLayout()
        self.spin_size = QSpinBox()
        self.spin_size.setRange(1, MAX_GUI_SIZE)
        self.spin_size.setValue(DEFAULT_SIZE)
        self.btn_new_cube = QPushButton("Nuevo cubo")
        row_size.addWidget(QLabel("n"), 0)
        row_size.addWidget(self.spin_size, 1)
        row_size.addWidget(self.btn_new_cube, 1)
        panel_layout.addLayout(row_size)

        # Botones principales
        row_main = QHBoxLayout()
        self.btn_reset = QPushButton("Reset")
        self.btn_undo = QPushButton("Undo")
        self.btn_redo = QPushButton("Redo")
        row_main.addWidget(self.btn_reset)
        row_main.addWidget(self.btn_undo)
        row_main.addWidget(self.btn_redo)
        panel_layout.addLayout(row_main)

        # Scramble
        panel_layout.addWidget(QLabel("Scramble (mezclar)"))
        row_scr = QHBoxLayout()
        self.spin_scramble = QSpinBox()
        self.spin_scramble.setRange(1, 200)
        self.spin_scramble.setValue(DEFAULT_SCRAMBLE_LENGTH)
        self.btn_scramble = QPushButton("Scramble")
        row_scr.addWidget(self.spin_scramble, 1)
        row_scr.addWidget(self.btn_scramble, 1)
        panel_layout.addLayout(row_scr)

        # Aplicar secuencia
        panel_layout.addWidget(QLabel("Aplicar secuencia (ej: R U 2M' Y)"))
        self.txt_seq = QLineEdit()
        self.txt_seq.setPlaceholderText("Ej: R U R' U'")
        panel_layout.addWidget(self.txt_seq)
        self.btn_apply = QPushButton("Aplicar")
        panel_layout.addWidget(self.btn_apply)

        # Solver
        panel_layout.addWidget(QLabel("Resolver (BFS: buscar pasos / resolver)"))

        row_solve = QHBoxLayout()
        self.combo_method = QComboBox()
        self.combo_method.addItem("Grafo", "graph")
        self.combo_method.addItem("Árbol", "tree")
        self.spin_max_iter = QSpinBox()
        self.spin_max_iter.setRange(1, MAX_GUI_ITER)
        self.spin_max_iter.setSingleStep(1000)
        self.spin_max_iter.setValue(DEFAULT_MAX_ITER)
        row_solve.addWidget(self.combo_method, 1)
        row_solve.addWidget(QLabel("Iter"), 0)
        row_solve.addWidget(self.spin_max_iter, 1)
        panel_layout.addLayout(row_solve)

        row_solve_btns = QHBoxLayout()
        self.btn_find_solve = QPushButton("Buscar solución")
        self.btn_solve = QPushButton("Solve (auto)")
        row_solve_btns.addWidget(self.btn_find_solve)
        row_solve_btns.addWidget(self.btn_solve)
        panel_layout.addLayout(row_solve_btns)

        self.btn_cancel_solve = QPushButton("Cancelar búsqueda")
        self.btn_cancel_solve.setEnabled(False)
        panel_layout.addWidget(self.btn_cancel_solve)

        self.solve_status = QLabel("Listo.")
        panel_layout.addWidget(self.solve_status)

        self.solve_bar = QProgressBar()
        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(0)
        panel_layout.addWidget(self.solve_bar)

        panel_layout.addWidget(QLabel("Pasos encontrados"))
        self.list_solution = QListWidget()
        panel_layout.addWidget(self.list_solution, 1)

        self.btn_apply_solution = QPushButton("Aplicar solución")
        self.btn_apply_solution.setEnabled(False)
        panel_layout.addWidget(self.btn_apply_solution)

        panel_layout.addWidget(QLabel("Historial de movimientos"))
        self.list_history = QListWidget()
        panel_layout.addWidget(self.list_history, 1)

        root_layout.addWidget(panel)
        self.setCentralWidget(root)

        # --- Conexiones ---
        self.btn_new_cube.clicked.connect(self.on_new_cube)
        self.btn_reset.clicked.connect(self.on_reset)
        self.btn_scramble.clicked.connect(self.on_scramble)
        self.btn_apply.clicked.connect(self.on_apply_sequence)
        self.btn_undo.clicked.connect(self.on_undo)
        self.btn_redo.clicked.connect(self.on_redo)

        self.btn_find_solve.clicked.connect(self.on_find_solution)
        self.btn_solve.clicked.connect(self.on_solve)
        self.btn_apply_solution.clicked.connect(self.on_apply_solution)
        self.btn_cancel_solve.clicked.connect(self.cancel_solve_search)

        # Señal desde OpenGL: movimiento aplicado al final de animación
        self.gl_widget.move_applied.connect(self.on_move_applied)

        self.btn_undo.setShortcut("Ctrl+Z")
        self.btn_redo.setShortcut("Ctrl+Y")
        self.btn_reset.setShortcut("Ctrl+R")

        self._refresh_state_label()

    # -------------------
    # Helpers UI
    # -------------------
    def _refresh_state_label(self) -> None:
        n = self.model.n
        state = "resuelto ✅" if self.model.is_solved() else "mezclado 🔄"
        self.lbl_state.setText(f"Cubo {n}x{n}x{n} - Estado: {state}")
        self._update_solution_buttons()

    def _push_history(self, move: Move) -> None:
        self.history.append(move)
        self.list_history.addItem(move_to_token(move))
        self.list_history.scrollToBottom()

    def _clear_history(self) -> None:
        self.history.clear()
        self.redo_stack.clear()
        self.list_history.clear()

    def _is_gl_idle(self) -> bool:
        return (not self.gl_widget.animating) and (not self.gl_widget._move_queue)

    def _set_controls_enabled(self, enabled: bool) -> None:
        """Habilita o deshabilita los controles principales (por ejemplo durante animación)."""
        for w in (
            self.spin_size,
            self.btn_new_cube,
            self.btn_reset,
            self.btn_undo,
            self.btn_redo,
            self.btn_scramble,
            self.btn_apply,
            self.txt_seq,
            self.spin_scramble,
            self.combo_method,
            self.spin_max_iter,
            self.btn_find_solve,
            self.btn_solve,
        ):
            w.setEnabled(enabled)

        can_apply_solution = (
            enabled
            and (self._pending_solution is not None)
            and (not self.model.is_solved())
        )
        self.btn_apply_solution.setEnabled(can_apply_solution)

    def _update_solution_buttons(self) -> None:
        if self.model.is_solved():
            self.btn_apply_solution.setEnabled(False)
            return
        self.btn_apply_solution.setEnabled(self._pending_solution is not None)

    def _clear_solution(self) -> None:
        self._pending_solution = None
        self.list_solution.clear()
        self.btn_apply_solution.setEnabled(False)

    # -------------------
    # Movimiento aplicado (desde GL)
    # -------------------
    def on_move_applied(self, move: Move) -> None:
        """Callback cuando el GL widget confirma que un movimiento terminó de aplicarse.

        Dependiendo del modo (undo/redo/apply/scramble/normal), se registra o no en historial,
        y se re-habilitan controles al finalizar la cola.
        """
        if self._mode == "undo":
            self._mode = "normal"
            self._refresh_state_label()
            if self._is_gl_idle():
                self._set_controls_enabled(True)
            return

        self._push_history(move)

        # Un movimiento manual invalida redo
        if self._mode == "normal":
            self.redo_stack.clear()

        self._refresh_state_label()

        if self.model.is_solved():
            self._pending_solution = None
            self.btn_apply_solution.setEnabled(False)

        if self._is_gl_idle():
            self._mode = "normal"
            self.solve_status.setText("Listo.")
            self.solve_bar.setRange(0, 1)
            self.solve_bar.setValue(1)
            self._set_controls_enabled(True)

    # -------------------
    # Botones básicos
    # -------------------
    def on_new_cube(self) -> None:
        """Crea un cubo resuelto del tamaño elegido."""
        self.cancel_solve_search()
        self.model = CubeState(int(self.spin_size.value()))
        self.gl_widget.set_model(self.model)
        self._clear_history()
        self._clear_solution()
        self._refresh_state_label()
        self.solve_status.setText("Listo.")

    def on_reset(self) -> None:
        """Resetea el cubo, historial, estado de solver y UI."""
        self.gl_widget.cancel_animation(clear_queue=True)
        self.cancel_solve_search()

        self.model.reset()
        self._clear_history()
        self._clear_solution()

        self.gl_widget.selected = None
        self.gl_widget.update()
        self._refresh_state_label()

        self.solve_status.setText("Listo.")
        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(0)

    def on_undo(self) -> None:
        """Revierte el último movimiento (si existe historial y no hay animación)."""
        if self.gl_widget.animating or not self.history:
            return

        last = self.history.pop()
        self.list_history.takeItem(self.list_history.count() - 1)
        self.redo_stack.append(last)

        self._mode = "undo"
        self._set_controls_enabled(False)
        self.gl_widget.start_move_animation(last.inverse())

    def on_redo(self) -> None:
        """Re-aplica el último movimiento deshecho."""
        if self.gl_widget.animating or not self.redo_stack:
            return

        mv = self.redo_stack.pop()
        self._mode = "redo"
        self._set_controls_enabled(False)
        self.gl_widget.start_move_animation(mv)

    def on_apply_sequence(self) -> None:
        """Aplica una secuencia ingresada por el usuario (ej: 'R U R' U'')."""
        seq = self.txt_seq.text().strip()
        if not seq:
            return

        self.cancel_solve_search()
        self.gl_widget.cancel_animation(clear_queue=True)

        try:
            self.gl_widget.play_sequence(seq)
        except ValueError as exc:
            QMessageBox.warning(self, "Secuencia inválida", str(exc))
            return

        self.redo_stack.clear()
        self._mode = "apply"
        self._set_controls_enabled(False)

    def on_scramble(self) -> None:
        """Mezcla el cubo aplicando una secuencia aleatoria de N movimientos."""
        if self.gl_widget.animating:
            return

        self.cancel_solve_search()
        self.gl_widget.cancel_animation(clear_queue=True)

        count = int(self.spin_scramble.value())
        scramble_seq = generate_scramble(count=count, size=self.model.n)
        logger.debug("Scramble: %s", scramble_seq)

        self.redo_stack.clear()
        self._mode = "scramble"

        self._set_controls_enabled(False)
        self.gl_widget.play_sequence(scramble_seq)

    # -------------------
    # Solver (thread)
    # -------------------
    def on_find_solution(self) -> None:
        self._start_solve_search(auto_apply=False)

    def on_solve(self) -> None:
        self._start_solve_search(auto_apply=True)

    def _start_solve_search(self, auto_apply: bool) -> None:
        """Lanza un hilo de búsqueda en anchura.

        Args:
            auto_apply: Si True, al encontrar solución se aplica inmediatamente.
        """
        if self.gl_widget.animating:
            return
        if self._solve_worker is not None and self._solve_worker.isRunning():
            return

        max_iter = int(self.spin_max_iter.value())
        method = str(self.combo_method.currentData())
        self._auto_apply_when_found = auto_apply

        self._clear_solution()

        self.solve_status.setText("Buscando solución...")
        self.solve_bar.setRange(0, max_iter)
        self.solve_bar.setValue(0)

        self._set_controls_enabled(False)
        self.btn_cancel_solve.setEnabled(True)

        self._solve_worker = SolveWorker(self.model, max_iter, method)
        self._solve_worker.progress.connect(self._on_solve_progress)
        self._solve_worker.finished_solution.connect(self._on_solve_finished)
        self._solve_worker.error.connect(self._on_solve_error)
        self._solve_worker.finished.connect(self._on_solve_thread_finished)
        self._solve_worker.start()

    def _on_solve_progress(self, iterations: int) -> None:
        self.solve_status.setText(f"Buscando... {iterations} estados explorados")
        self.solve_bar.setValue(iterations)

    def _on_solve_finished(self, result: Optional[SearchResult]) -> None:
        """Recibe el resultado final del solver (`SearchResult` o None)."""
        worker = self._solve_worker
        if worker is None or worker.isInterruptionRequested():
            return

        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(1)
        self.btn_cancel_solve.setEnabled(False)

        if result is None:
            self.solve_status.setText(
                "No se encontró solución (sube las iteraciones o usa un scramble corto)."
            )
            self._pending_solution = None
            self.btn_apply_solution.setEnabled(False)
            self._set_controls_enabled(True)
            return

        self._pending_solution = result.moves
        self.solve_status.setText(
            f"Solución encontrada: {len(result.moves)} pasos (iteración {result.iterations})."
        )

        self.list_solution.clear()
        for i, mv in enumerate(result.moves, start=1):
            self.list_solution.addItem(f"{i}. {move_to_token(mv)}")

        if self._auto_apply_when_found and result.moves:
            self.on_apply_solution()
        else:
            self._set_controls_enabled(True)

    def on_apply_solution(self) -> None:
        """Aplica la solución encontrada por el solver, si existe."""
        if not self._pending_solution:
            return
        if self.gl_widget.animating:
            return

        moves = self._pending_solution

        self.redo_stack.clear()
        self._mode = "apply"
        self._set_controls_enabled(False)

        self.btn_apply_solution.setEnabled(False)
        self.solve_status.setText("Aplicando solución...")
        self.solve_bar.setRange(0, 0)

        self.gl_widget.play_moves(moves)

    def _on_solve_error(self, msg: str) -> None:
        """Maneja errores emitidos por el hilo del solver."""
        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(0)
        self.solve_status.setText("Error en la búsqueda (revisa el log).")
        self.btn_cancel_solve.setEnabled(False)
        self._set_controls_enabled(True)

        logger.error("Error en el hilo del solver:\n%s", msg)

    def _on_solve_thread_finished(self) -> None:
        if self._solve_worker is not None:
            self._solve_worker.deleteLater()
            self._solve_worker = None

    def cancel_solve_search(self) -> None:
        """Cancela la búsqueda del solver si está corriendo y limpia el estado asociado."""
        if self._solve_worker is not None and self._solve_worker.isRunning():
            self._solve_worker.requestInterruption()
            self._solve_worker.wait(300)
            self.solve_status.setText("Búsqueda cancelada.")

        self._clear_solution()

        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(0)
        self.btn_cancel_solve.setEnabled(False)

        self._set_controls_enabled(True)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Detiene el hilo del solver si está activo antes de cerrar."""
        if self._solve_worker is not None and self._solve_worker.isRunning():
            self._solve_worker.requestInterruption()
            self._solve_worker.wait(1500)
        event.accept()
