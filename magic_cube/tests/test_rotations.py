import unittest

from magic_cube.core import FACES, CubeState, opposite_face
from magic_cube.core.move import Move
from magic_cube.core.rotations import (
    apply_move,
    cube_clockwise,
    cube_counterclockwise,
    face_clockwise,
    face_counterclockwise,
    slice_clockwise,
    slice_counterclockwise,
)
from magic_cube.logic.scramble import shuffle


def scrambled(n, seed=7):
    return shuffle(CubeState(n), 12, seed=seed)


class TestFaceRotation(unittest.TestCase):
    def test_clockwise_then_counterclockwise_is_identity(self):
        for n in (2, 3, 4):
            start = scrambled(n)
            for f in FACES:
                self.assertEqual(face_counterclockwise(face_clockwise(start, f), f), start)
                self.assertEqual(face_clockwise(face_counterclockwise(start, f), f), start)

    def test_four_quarter_turns_are_identity(self):
        for n in (1, 2, 3, 4):
            start = scrambled(n)
            for f in FACES:
                c = start.copy()
                for _ in range(4):
                    face_clockwise(c, f, inplace=True)
                self.assertEqual(c, start)

    def test_front_clockwise_moves_ring(self):
        c = face_clockwise(CubeState(3), 1)
        for i in range(1, 4):
            self.assertEqual(c.get(3, i, 4), 2)  # Up (fila inferior) <- Left
            self.assertEqual(c.get(i, 1, 3), 4)  # Right (col 1) <- Up
            self.assertEqual(c.get(1, i, 5), 3)  # Down (fila superior) <- Right
            self.assertEqual(c.get(i, 3, 2), 5)  # Left (col 3) <- Down
        self.assertEqual(c.face_grid(6), [[6] * 3] * 3)
        self.assertEqual(c.face_grid(1), [[1] * 3] * 3)

    def test_up_clockwise_moves_front_row_to_left(self):
        c = face_clockwise(CubeState(3), 4)
        self.assertEqual(c.face_grid(2)[0], [1, 1, 1])
        self.assertEqual(c.face_grid(6)[0], [2, 2, 2])
        self.assertEqual(c.face_grid(3)[0], [6, 6, 6])
        self.assertEqual(c.face_grid(1)[0], [3, 3, 3])
        self.assertEqual(c.face_grid(2)[1], [2, 2, 2])

    def test_face_grid_spins(self):
        c = CubeState(2)
        c.set(1, 1, 1, 6)
        face_clockwise(c, 1, inplace=True)
        self.assertEqual(c.get(1, 2, 1), 6)
        face_counterclockwise(c, 1, inplace=True)
        face_counterclockwise(c, 1, inplace=True)
        self.assertEqual(c.get(2, 1, 1), 6)

    def test_inner_layers_untouched(self):
        c = face_clockwise(CubeState(4), 4)
        for f in (1, 2, 3, 6):
            grid = c.face_grid(f)
            for row in grid[1:]:
                self.assertEqual(row, [f] * 4)
        self.assertEqual(c.face_grid(5), [[5] * 4] * 4)

    def test_commutator_has_order_six(self):
        start = CubeState(3)
        c = start.copy()
        for i in range(6):
            c.apply_sequence("R U R' U'")
            if i < 5:
                self.assertNotEqual(c, start)
        self.assertEqual(c, start)

    def test_pure_form_does_not_mutate(self):
        start = CubeState(3)
        out = face_clockwise(start, 2)
        self.assertIsNot(out, start)
        self.assertTrue(start.is_solved())
        self.assertFalse(out.is_solved())

    def test_inplace_returns_receiver(self):
        c = CubeState(3)
        self.assertIs(face_clockwise(c, 2, inplace=True), c)
        self.assertFalse(c.is_solved())


class TestSliceRotation(unittest.TestCase):
    def test_slice_inverse(self):
        for n in (1, 2, 3, 4, 5):
            start = scrambled(n)
            for f in FACES:
                for layer in range(1, n + 1):
                    turned = slice_clockwise(start, f, layer)
                    self.assertEqual(slice_counterclockwise(turned, f, layer), start)

    def test_outer_layers_delegate_to_faces(self):
        for n in (2, 3, 4):
            start = scrambled(n)
            for f in FACES:
                self.assertEqual(slice_clockwise(start, f, 1), face_clockwise(start, f))
                self.assertEqual(slice_counterclockwise(start, f, 1), face_counterclockwise(start, f))
                self.assertEqual(slice_clockwise(start, f, n), face_counterclockwise(start, opposite_face(f)))
                self.assertEqual(slice_counterclockwise(start, f, n), face_clockwise(start, opposite_face(f)))

    def test_layer_seen_from_opposite_face(self):
        for n in (3, 4, 5):
            start = scrambled(n)
            for f in FACES:
                for layer in range(1, n + 1):
                    self.assertEqual(
                        slice_clockwise(start, f, layer),
                        slice_counterclockwise(start, opposite_face(f), n + 1 - layer),
                    )

    def test_inner_slice_does_not_spin_faces(self):
        c = slice_clockwise(CubeState(3), 1, 2)
        self.assertEqual(c.face_grid(1), [[1] * 3] * 3)
        self.assertEqual(c.face_grid(6), [[6] * 3] * 3)
        self.assertEqual(c.face_grid(4)[1], [2, 2, 2])
        self.assertEqual(c.face_grid(4)[0], [4, 4, 4])

    def test_invalid_layer(self):
        c = CubeState(3)
        for layer in (0, 4, -1):
            with self.assertRaises(ValueError):
                slice_clockwise(c, 1, layer)
        with self.assertRaises(ValueError):
            slice_counterclockwise(c, 9, 1)


class TestCubeRotation(unittest.TestCase):
    def test_cycles_side_faces(self):
        start = scrambled(3)
        c = cube_clockwise(start, 1)
        # anillo de la cara 1: (2, 4, 3, 5); horario: cara[i] <- cara[i-1]
        self.assertEqual(c.face_grid(2), start.face_grid(5))
        self.assertEqual(c.face_grid(4), start.face_grid(2))
        self.assertEqual(c.face_grid(3), start.face_grid(4))
        self.assertEqual(c.face_grid(5), start.face_grid(3))
        self.assertEqual(c.face_grid(1), start.face_grid(1))
        self.assertEqual(c.face_grid(6), start.face_grid(6))

        d = cube_counterclockwise(start, 1)
        self.assertEqual(d.face_grid(2), start.face_grid(4))
        self.assertEqual(d.face_grid(5), start.face_grid(2))

    def test_inverse_and_period(self):
        start = scrambled(4)
        for f in FACES:
            self.assertEqual(cube_counterclockwise(cube_clockwise(start, f), f), start)
            c = start.copy()
            for _ in range(4):
                cube_clockwise(c, f, inplace=True)
            self.assertEqual(c, start)

    def test_keeps_solved(self):
        for f in FACES:
            self.assertTrue(cube_clockwise(CubeState(3), f).is_solved())

    def test_invalid_axis(self):
        with self.assertRaises(ValueError):
            cube_clockwise(CubeState(3), 0)


class TestInvariants(unittest.TestCase):
    def test_every_rotation_is_a_permutation(self):
        for n in (1, 2, 3, 4):
            start = scrambled(n)
            expected = start.color_counts()
            for f in FACES:
                for layer in range(1, n + 1):
                    for clockwise in (True, False):
                        out = apply_move(start, Move(f, layer, clockwise))
                        self.assertEqual(out.color_counts(), expected)
                        for g in FACES:
                            self.assertEqual(sum(len(r) for r in out.face_grid(g)), n * n)
                for clockwise in (True, False):
                    out = apply_move(start, Move(f, None, clockwise))
                    self.assertEqual(out.color_counts(), expected)

    def test_apply_move_dispatch(self):
        start = scrambled(3)
        self.assertEqual(apply_move(start, Move(2, 2, False)), slice_counterclockwise(start, 2, 2))
        self.assertEqual(apply_move(start, Move(4, None)), cube_clockwise(start, 4))
        self.assertEqual(Move(4, 2).inverse(), Move(4, 2, False))


if __name__ == "__main__":
    unittest.main()
