# magic_cube/render/cube_gl_widget.py
from __future__ import annotations

import math
from typing import Dict, List, Literal, Optional, Tuple

from PySide6.QtCore import QPoint, QTimer, Qt, Signal
from PySide6.QtGui import QMouseEvent, QWheelEvent
from PySide6.QtOpenGLWidgets import QOpenGLWidget

from OpenGL.GL import (
    glBegin,
    glClear,
    glClearColor,
    glColor3f,
    glDisable,
    glEnable,
    glEnd,
    glFlush,
    glLoadIdentity,
    glMatrixMode,
    glReadPixels,
    glRotatef,
    glTranslatef,
    glVertex3f,
    glViewport,
    GL_BLEND,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_DITHER,
    GL_MODELVIEW,
    GL_PROJECTION,
    GL_QUADS,
    GL_RGB,
    GL_UNSIGNED_BYTE,
)
from OpenGL.GLU import gluPerspective

from magic_cube.config import ANIM_INTERVAL_MS, ANIM_STEP_DEG, PALETTE, UNKNOWN_RGB
from magic_cube.core import rotations
from magic_cube.core.cube_state import CubeState
from magic_cube.core.geometry import FACES
from magic_cube.core.move import Move
from magic_cube.logic.moves import sequence_to_moves

Axis = Literal["x", "y", "z"]
StickerCoord = Tuple[int, int, int]  # (cara, fila, columna), fila/columna 0-based
Vec3f = Tuple[float, float, float]

# Marco de cada cara en el cubo [-1, 1]^3:
# (esquina de la fila 1/columna 1, dirección de columnas, dirección de filas, normal).
# Coincide con la vista desplegada de `magic_cube.core.geometry`.
FACE_FRAMES: Dict[int, Tuple[Vec3f, Vec3f, Vec3f, Vec3f]] = {
    1: ((-1.0, 1.0, 1.0), (1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (0.0, 0.0, 1.0)),
    2: ((-1.0, 1.0, -1.0), (0.0, 0.0, 1.0), (0.0, -1.0, 0.0), (-1.0, 0.0, 0.0)),
    3: ((1.0, 1.0, 1.0), (0.0, 0.0, -1.0), (0.0, -1.0, 0.0), (1.0, 0.0, 0.0)),
    4: ((-1.0, 1.0, -1.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, 1.0, 0.0)),
    5: ((-1.0, -1.0, 1.0), (1.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, -1.0, 0.0)),
    6: ((1.0, 1.0, -1.0), (-1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (0.0, 0.0, -1.0)),
}

# Eje -> cara canónica cuya normal es paralela a ese eje (drag => Move).
AXIS_FACE: Dict[int, int] = {0: 2, 1: 4, 2: 1}


def _add(a: Vec3f, b: Vec3f) -> Vec3f:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vec3f, b: Vec3f) -> Vec3f:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(v: Vec3f, s: float) -> Vec3f:
    return (v[0] * s, v[1] * s, v[2] * s)


def _dot(a: Vec3f, b: Vec3f) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3f, b: Vec3f) -> Vec3f:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _axis_index(v: Vec3f) -> int:
    ax = [abs(v[0]), abs(v[1]), abs(v[2])]
    return ax.index(max(ax))


class CubeGLWidget(QOpenGLWidget):
    """Widget OpenGL para renderizar e interactuar con un cubo n×n×n.

    Características:
    - Render OpenGL clásico (sin shaders).
    - Stickers n×n por cara (y “plástico” detrás).
    - Picking por color (funciona con HiDPI).
    - Highlight del sticker seleccionado.
    - Drag “camera-aware” que decide qué capa girar (cualquier profundidad).
    - Animación suave usando QTimer y cola de movimientos.
    """

    move_applied = Signal(object)  # Move

    def __init__(self, model: CubeState, parent=None) -> None:
        """Crea el widget OpenGL y configura estado inicial (cámara, drag, animación).

        Args:
            model: Cubo a mostrar. El widget lo muta al terminar cada animación.
            parent: Widget padre (Qt), opcional.
        """
        super().__init__(parent)
        self.model: CubeState = model

        # Cámara / orbit
        self.yaw: float = 35.0
        self.pitch: float = -20.0
        self.distance: float = 6.0

        self._last_mouse_pos: QPoint = QPoint()
        self._orbiting: bool = False

        # Stickers (en fracción del paso de sticker)
        self.sticker_margin: float = 0.06
        self.sticker_offset: float = 0.01

        self.selected: Optional[StickerCoord] = None

        # Drag
        self._dragging_left: bool = False
        self._drag_start: QPoint = QPoint()
        self._drag_hit: Optional[StickerCoord] = None
        self._drag_threshold: int = 14

        # Animación
        self.animating: bool = False
        self.anim_move: Optional[Move] = None
        self.anim_axis: Optional[Axis] = None
        self.anim_sign: int = 1
        self.anim_angle: float = 0.0
        self.anim_target: float = 90.0
        self.anim_step: float = ANIM_STEP_DEG

        self._move_queue: List[Move] = []
        self._anim_timer: QTimer = QTimer(self)
        self._anim_timer.setInterval(ANIM_INTERVAL_MS)
        self._anim_timer.timeout.connect(self._on_anim_tick)

        self.setFocusPolicy(Qt.ClickFocus)

    def set_model(self, model: CubeState) -> None:
        """Reemplaza el cubo mostrado (por ejemplo al cambiar de tamaño)."""
        self.cancel_animation(clear_queue=True)
        self.model = model
        self.selected = None
        self.update()

    # --------------------------
    # OpenGL lifecycle
    # --------------------------
    def initializeGL(self) -> None:
        glClearColor(0.10, 0.10, 0.12, 1.0)
        glEnable(GL_DEPTH_TEST)

    def resizeGL(self, w: int, h: int) -> None:
        """Ajusta viewport y proyección cuando cambia el tamaño del widget."""
        if h == 0:
            h = 1

        dpr = self.devicePixelRatioF()
        fb_w = int(w * dpr)
        fb_h = int(h * dpr)

        glViewport(0, 0, fb_w, fb_h)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(45.0, fb_w / float(fb_h), 0.1, 100.0)

        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def paintGL(self) -> None:
        """Dibuja el frame actual del cubo (stickers + animación)."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        self._apply_camera()

        self._draw_stickers_pass(animated_only=False)
        if self.animating:
            self._draw_stickers_pass(animated_only=True)

    def _apply_camera(self) -> None:
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glTranslatef(0.0, 0.0, -self.distance)
        glRotatef(self.pitch, 1.0, 0.0, 0.0)
        glRotatef(self.yaw, 0.0, 1.0, 0.0)

    # --------------------------
    # Interacción
    # --------------------------
    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Botón derecho para orbitar; botón izquierdo para seleccionar/drag."""
        if event.button() == Qt.RightButton:
            self._orbiting = True
            self._last_mouse_pos = event.pos()
            event.accept()
            return

        if event.button() == Qt.LeftButton:
            hit = self.pick_sticker(event.pos().x(), event.pos().y())
            self.selected = hit
            self._dragging_left = True
            self._drag_start = event.pos()
            self._drag_hit = hit

            if hit:
                face, r, c = hit
                msg = f"Seleccionado: cara {face} (fila={r + 1}, col={c + 1})"
            else:
                msg = "Sin selección."
            self._show_status(msg, 2000)

            self.update()
            event.accept()
            return

        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Orbit (derecho) o drag (izquierdo) para girar capas."""
        if self._orbiting:
            dx = event.position().x() - self._last_mouse_pos.x()
            dy = event.position().y() - self._last_mouse_pos.y()
            self._last_mouse_pos = event.pos()

            sens = 0.4
            self.yaw += dx * sens
            self.pitch += dy * sens
            self.pitch = max(-89.0, min(89.0, self.pitch))

            self.update()
            event.accept()
            return

        if self._dragging_left and (event.buttons() & Qt.LeftButton):
            if not self._drag_hit or self.animating:
                return

            dx = event.position().x() - self._drag_start.x()
            dy = event.position().y() - self._drag_start.y()

            if abs(dx) < self._drag_threshold and abs(dy) < self._drag_threshold:
                return

            face, r, c = self._drag_hit
            move = self._decide_move_from_drag(face, r, c, dx, dy)

            if move is not None:
                self.start_move_animation(move)

            self._dragging_left = False
            self._drag_hit = None
            return

        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.RightButton and self._orbiting:
            self._orbiting = False
            event.accept()
            return

        if event.button() == Qt.LeftButton and self._dragging_left:
            self._dragging_left = False
            self._drag_hit = None
            event.accept()
            return

        super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Zoom in/out con la rueda del mouse."""
        delta = event.angleDelta().y() / 120.0
        self.distance -= delta * 0.3
        self.distance = max(2.5, min(20.0, self.distance))
        self.update()
        event.accept()

    def _show_status(self, msg: str, timeout: int) -> None:
        w = self.window()
        if hasattr(w, "statusBar") and w.statusBar():
            w.statusBar().showMessage(msg, timeout)

    # --------------------------
    # Picking (color picking)
    # --------------------------
    def pick_sticker(self, x: int, y: int) -> Optional[StickerCoord]:
        """Detecta qué sticker se encuentra bajo el cursor usando color picking.

        Args:
            x: Coordenada X en píxeles (coordenadas del widget).
            y: Coordenada Y en píxeles (coordenadas del widget).

        Returns:
            Tupla (cara, fila, columna) si se seleccionó un sticker; None si no.
        """
        if self.animating:
            return None

        dpr = self.devicePixelRatioF()
        gl_x = int(x * dpr)
        gl_y = int((self.height() - y - 1) * dpr)

        self.makeCurrent()

        glDisable(GL_DITHER)
        glDisable(GL_BLEND)

        glClearColor(0.0, 0.0, 0.0, 1.0)
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        self._apply_camera()
        mapping = self._draw_all_stickers_pick()

        glFlush()

        pixel = glReadPixels(gl_x, gl_y, 1, 1, GL_RGB, GL_UNSIGNED_BYTE)

        glClearColor(0.10, 0.10, 0.12, 1.0)
        self.doneCurrent()

        if pixel is None:
            return None

        if isinstance(pixel, (bytes, bytearray)):
            r, g, b = pixel[0], pixel[1], pixel[2]
        else:
            flat = [int(v) for v in getattr(pixel, "flat", pixel)]
            if len(flat) < 3:
                return None
            r, g, b = flat[0], flat[1], flat[2]

        pick_id = r + (g << 8) + (b << 16)
        return mapping.get(pick_id)

    @staticmethod
    def _encode_id_color(pick_id: int) -> Vec3f:
        r = (pick_id & 0xFF) / 255.0
        g = ((pick_id >> 8) & 0xFF) / 255.0
        b = ((pick_id >> 16) & 0xFF) / 255.0
        return (r, g, b)

    # --------------------------
    # Animación
    # --------------------------
    def start_move_animation(self, move: Move) -> None:
        """Inicia la animación de un movimiento o lo encola si ya hay una animación activa."""
        if self.animating:
            self._move_queue.append(move)
            return

        # Horario (mirando la cara) = ángulo negativo alrededor de la normal exterior.
        normal = FACE_FRAMES[move.face][3]
        i = _axis_index(normal)
        self.anim_axis = "xyz"[i]  # type: ignore[assignment]
        self.anim_sign = (-1 if move.clockwise else 1) * (1 if normal[i] > 0 else -1)
        self.anim_move = move
        self.anim_angle = 0.0
        self.anim_target = 90.0
        self.animating = True
        self._anim_timer.start()

    def _on_anim_tick(self) -> None:
        if not self.animating:
            self._anim_timer.stop()
            return

        self.anim_angle += self.anim_step
        if self.anim_angle >= self.anim_target:
            self.anim_angle = self.anim_target
            self._finish_move_animation()
            return

        self.update()

    def _finish_move_animation(self) -> None:
        """Finaliza la animación: aplica el movimiento al modelo y emite la señal."""
        move = self.anim_move
        self._reset_anim_state()

        if move is None:
            return

        rotations.apply_move(self.model, move, inplace=True)
        self.move_applied.emit(move)

        self.update()

        if self._move_queue:
            nxt = self._move_queue.pop(0)
            self.start_move_animation(nxt)

    def _reset_anim_state(self) -> None:
        self.animating = False
        self._anim_timer.stop()
        self.anim_axis = None
        self.anim_sign = 1
        self.anim_angle = 0.0
        self.anim_target = 90.0
        self.anim_move = None

    def cancel_animation(self, clear_queue: bool = True) -> None:
        """Cancela la animación actual y opcionalmente limpia la cola.

        Args:
            clear_queue: Si True, también borra la cola de movimientos pendientes.
        """
        if self.animating:
            self._reset_anim_state()

        if clear_queue:
            self._move_queue.clear()

        self.update()

    def play_moves(self, moves: List[Move]) -> None:
        """Encola (y ejecuta con animación) una lista de movimientos."""
        for mv in moves:
            self.start_move_animation(mv)

    def play_sequence(self, seq: str) -> None:
        """Encola una secuencia en notación, separada por espacios.

        Raises:
            ValueError: Si algún token es inválido o usa una capa inexistente.
        """
        moves = sequence_to_moves(seq)
        n = self.model.n
        for mv in moves:
            if not mv.is_cube_rotation and mv.layer > n:
                raise ValueError(f"Capa {mv.layer} inexistente en un cubo {n}x{n}x{n}")
        self.play_moves(moves)

    # --------------------------
    # Geometría
    # --------------------------
    @property
    def _step(self) -> float:
        return 2.0 / self.model.n

    def _face_point(self, face: int, u: float, v: float, offset: float = 0.0) -> Vec3f:
        """Punto de la cara a `u` pasos por columnas y `v` pasos por filas de la esquina."""
        corner, col_dir, row_dir, normal = FACE_FRAMES[face]
        s = self._step
        p = _add(corner, _scale(col_dir, u * s))
        p = _add(p, _scale(row_dir, v * s))
        return _add(p, _scale(normal, offset))

    def _sticker_center(self, face: int, r: int, c: int) -> Vec3f:
        return self._face_point(face, c + 0.5, r + 0.5)

    def _sticker_quad(self, face: int, r: int, c: int, margin: float, offset: Optional[float] = None) -> List[Vec3f]:
        """Retorna los 4 vértices del quad (sticker) para una cara y celda (r, c) 0-based."""
        off = self.sticker_offset if offset is None else offset
        m = margin
        return [
            self._face_point(face, c + m, r + 1 - m, off),
            self._face_point(face, c + 1 - m, r + 1 - m, off),
            self._face_point(face, c + 1 - m, r + m, off),
            self._face_point(face, c + m, r + m, off),
        ]

    def _layer_of(self, face: int, r: int, c: int, ref_face: int) -> int:
        """Capa (1..n, vista desde `ref_face`) del cubito que lleva el sticker."""
        s = self._step
        center = self._sticker_center(face, r, c)
        cubie = _sub(center, _scale(FACE_FRAMES[face][3], s / 2.0))
        depth = _dot(cubie, FACE_FRAMES[ref_face][3])
        return int(round((1.0 - s / 2.0 - depth) / s)) + 1

    def _is_in_anim_layer(self, face: int, r: int, c: int) -> bool:
        move = self.anim_move
        if not self.animating or move is None:
            return False
        if move.is_cube_rotation:
            return True
        return self._layer_of(face, r, c, move.face) == move.layer

    @staticmethod
    def _rot_point(p: Vec3f, axis: Axis, angle_deg: float) -> Vec3f:
        """Rota un punto alrededor de un eje por un ángulo en grados (mano derecha)."""
        x, y, z = p
        a = math.radians(angle_deg)
        c = math.cos(a)
        s = math.sin(a)

        if axis == "x":
            return (x, y * c - z * s, y * s + z * c)
        if axis == "y":
            return (x * c + z * s, y, -x * s + z * c)
        return (x * c - y * s, x * s + y * c, z)

    # --------------------------
    # Render helpers
    # --------------------------
    def _draw_stickers_pass(self, animated_only: bool) -> None:
        """Dibuja stickers (y fondo plástico) en un pase.

        Args:
            animated_only: Si True, dibuja solo los stickers de la capa animada.
                Si False, dibuja los que NO están en la capa animada.
        """
        n = self.model.n
        angle = self.anim_sign * self.anim_angle

        def place(quad: List[Vec3f], in_layer: bool) -> List[Vec3f]:
            if self.animating and in_layer and self.anim_axis is not None:
                return [self._rot_point(v, self.anim_axis, angle) for v in quad]
            return quad

        glBegin(GL_QUADS)

        for face in FACES:
            grid = self.model.state[face]
            for r in range(n):
                for c in range(n):
                    in_layer = self._is_in_anim_layer(face, r, c)
                    if animated_only != in_layer:
                        continue

                    if self.selected == (face, r, c):
                        quad_h = self._sticker_quad(face, r, c, self.sticker_margin * 0.35)
                        glColor3f(0.10, 0.95, 0.85)
                        for v in place(quad_h, in_layer):
                            glVertex3f(*v)

                    quad_bg = self._sticker_quad(face, r, c, margin=0.02, offset=self.sticker_offset * 0.55)
                    glColor3f(0.05, 0.05, 0.06)
                    for v in place(quad_bg, in_layer):
                        glVertex3f(*v)

                    quad = self._sticker_quad(face, r, c, self.sticker_margin)
                    glColor3f(*PALETTE.get(grid[r][c], UNKNOWN_RGB))
                    for v in place(quad, in_layer):
                        glVertex3f(*v)

        glEnd()

    def _draw_all_stickers_pick(self) -> Dict[int, StickerCoord]:
        """Dibuja todos los stickers con colores codificados y retorna el mapa ID->sticker."""
        mapping: Dict[int, StickerCoord] = {}
        pick_id = 1
        n = self.model.n

        glBegin(GL_QUADS)

        for face in FACES:
            for r in range(n):
                for c in range(n):
                    mapping[pick_id] = (face, r, c)
                    glColor3f(*self._encode_id_color(pick_id))
                    for v in self._sticker_quad(face, r, c, self.sticker_margin * 0.5):
                        glVertex3f(*v)
                    pick_id += 1

        glEnd()
        return mapping

    # --------------------------
    # Drag => movimiento (camera-aware)
    # --------------------------
    def _decide_move_from_drag(self, face: int, r: int, c: int, dx: float, dy: float) -> Optional[Move]:
        """Decide qué capa girar a partir de un drag sobre un sticker.

        El eje de giro es perpendicular a la cara tocada y al drag. La capa se
        expresa desde la cara canónica (1, 2 o 4) cuya normal es paralela a ese eje.

        Returns:
            El `Move` a animar, o None si el drag no define un eje.
        """
        n_vec = FACE_FRAMES[face][3]
        p = self._sticker_center(face, r, c)

        # drag en pantalla => mundo
        d_world: Vec3f = (dx, -dy, 0.0)

        # mundo -> cubo (inversa de la cámara)
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)

        cx = math.cos(-pitch)
        sx = math.sin(-pitch)
        x0, y0, z0 = d_world
        d1: Vec3f = (x0, cx * y0 - sx * z0, sx * y0 + cx * z0)

        cy = math.cos(-yaw)
        sy = math.sin(-yaw)
        x1, y1, z1 = d1
        d_cube: Vec3f = (cy * x1 + sy * z1, y1, -sy * x1 + cy * z1)

        # proyectar al plano de la cara
        d_plane = _sub(d_cube, _scale(n_vec, _dot(d_cube, n_vec)))
        if math.sqrt(_dot(d_plane, d_plane)) < 1e-6:
            return None

        axis = _cross(n_vec, d_plane)
        i = _axis_index(axis)
        axis_sign = 1 if axis[i] > 0 else -1

        axis_unit: Vec3f = tuple(float(axis_sign) if k == i else 0.0 for k in range(3))  # type: ignore[assignment]
        v = _cross(axis_unit, p)
        rot_about_axis_unit = 1 if _dot(v, d_plane) > 0 else -1
        rot_about_pos = rot_about_axis_unit * axis_sign

        ref = AXIS_FACE[i]
        ref_sign = 1 if FACE_FRAMES[ref][3][i] > 0 else -1
        clockwise = rot_about_pos * ref_sign < 0

        return Move(ref, self._layer_of(face, r, c, ref), clockwise)
