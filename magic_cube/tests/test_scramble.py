import unittest

from magic_cube.core import CubeState
from magic_cube.logic.moves import apply_sequence, parse_sequence
from magic_cube.logic.scramble import generate_scramble, shuffle


class TestScramble(unittest.TestCase):
    def test_seed_is_reproducible(self):
        self.assertEqual(generate_scramble(20, seed=3), generate_scramble(20, seed=3))

    def test_length_and_vocabulary(self):
        tokens = parse_sequence(generate_scramble(50, seed=1))
        self.assertEqual(len(tokens), 50)
        for tok in tokens:
            self.assertNotIn(tok[0], "XYZ")

    def test_no_consecutive_repeated_letter(self):
        tokens = generate_scramble(100, seed=11).split()
        for a, b in zip(tokens, tokens[1:]):
            self.assertNotEqual(a[0], b[0])

    def test_small_cube_skips_inner_slices(self):
        tokens = generate_scramble(100, seed=5, size=1).split()
        for tok in tokens:
            self.assertIn(tok[0], "FLRUDB")

    def test_invalid_count(self):
        with self.assertRaises(ValueError):
            generate_scramble(0)

    def test_shuffle_returns_copy(self):
        c = CubeState(3)
        out = shuffle(c, 10, seed=2)
        self.assertTrue(c.is_solved())
        self.assertEqual(out.color_counts(), c.color_counts())
        self.assertEqual(out, shuffle(CubeState(3), 10, seed=2))

    def test_count_keyword(self):
        self.assertEqual(len(generate_scramble(count=5, seed=1).split()), 5)
        out = shuffle(CubeState(3), count=5, seed=1)
        self.assertEqual(out, apply_sequence(CubeState(3), generate_scramble(5, seed=1, size=3)))

    def test_shuffle_inplace(self):
        c = CubeState(1)
        self.assertIs(shuffle(c, 5, seed=4, inplace=True), c)


if __name__ == "__main__":
    unittest.main()
