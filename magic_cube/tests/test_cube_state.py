import unittest

from magic_cube.core import FACES, CubeState, create
from magic_cube.core.rotations import cube_clockwise, face_clockwise


class TestCubeState(unittest.TestCase):
    def test_starts_solved(self):
        for n in range(1, 6):
            c = create(n)
            self.assertTrue(c.is_solved())
            for f in FACES:
                self.assertEqual(c.get(1, 1, f), f)
                self.assertEqual(c.get(n, n, f), f)

    def test_invalid_size(self):
        for bad in (0, -2, True, "3", 2.0):
            with self.assertRaises(ValueError):
                CubeState(bad)

    def test_get_set_bounds(self):
        c = CubeState(3)
        c.set(2, 3, 4, 1)
        self.assertEqual(c.get(2, 3, 4), 1)
        for row, col, face in ((0, 1, 1), (1, 4, 1), (1, 1, 0), (1, 1, 7), (4, 1, 2)):
            with self.assertRaises(ValueError):
                c.get(row, col, face)
            with self.assertRaises(ValueError):
                c.set(row, col, face, 1)
        with self.assertRaises(ValueError):
            c.set(1, 1, 1, 9)

    def test_copy_is_independent(self):
        c = CubeState(3)
        d = c.copy()
        d.set(1, 1, 1, 6)
        self.assertEqual(c.get(1, 1, 1), 1)
        self.assertTrue(c.is_solved())
        self.assertFalse(d.is_solved())

    def test_value_equality_and_hash(self):
        a = face_clockwise(CubeState(3), 1)
        b = face_clockwise(CubeState(3), 1)
        self.assertIsNot(a, b)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b, CubeState(3)}), 2)
        self.assertNotEqual(CubeState(2), CubeState(3))
        self.assertNotEqual(CubeState(2), "cube")

    def test_ordering_is_stable(self):
        a = face_clockwise(CubeState(2), 4)
        b = CubeState(2)
        self.assertEqual(sorted([a, b]), sorted([b, a]))
        self.assertTrue((a < b) != (b < a))

    def test_solved_only_needs_uniform_faces(self):
        c = cube_clockwise(CubeState(3), 1)
        self.assertTrue(c.is_solved())
        self.assertEqual(c.get(1, 1, 2), 5)
        self.assertNotEqual(c, CubeState(3))

    def test_face_grid_is_a_copy(self):
        c = CubeState(2)
        grid = c.face_grid(3)
        self.assertEqual(grid, [[3, 3], [3, 3]])
        grid[0][0] = 1
        self.assertEqual(c.get(1, 1, 3), 3)

    def test_reset(self):
        c = CubeState(3)
        c.apply_sequence("R U R' F")
        self.assertFalse(c.is_solved())
        c.reset()
        self.assertEqual(c, CubeState(3))

    def test_color_counts_remain_constant(self):
        c = CubeState(3)
        c.apply_sequence("R U R' U' L D L' D' U2 R2 M E' S")

        counts = c.color_counts()
        for color in range(1, 7):
            self.assertEqual(counts[color], 9)


if __name__ == "__main__":
    unittest.main()
