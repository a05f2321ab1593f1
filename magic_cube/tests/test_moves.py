import unittest

from magic_cube.core import CubeState
from magic_cube.core.move import Move
from magic_cube.core.rotations import cube_clockwise, face_clockwise, slice_clockwise, slice_counterclockwise
from magic_cube.logic.moves import (
    apply_move,
    apply_sequence,
    expand_token,
    inverse_move,
    move_to_token,
    normalize_token,
    parse_sequence,
    sequence_to_moves,
)


class TestNotation(unittest.TestCase):
    def test_normalize_token(self):
        self.assertEqual(normalize_token(" R "), "R")
        self.assertEqual(normalize_token("U’"), "U'")
        self.assertEqual(normalize_token("D2'"), "D2")
        self.assertEqual(normalize_token("02M"), "2M")
        self.assertEqual(normalize_token(""), "")

    def test_invalid_tokens(self):
        for tok in ("Q", "R3", "r", "2X", "0F", "R''", "'"):
            with self.assertRaises(ValueError):
                normalize_token(tok)

    def test_inverse_move(self):
        self.assertEqual(inverse_move("R"), "R'")
        self.assertEqual(inverse_move("R'"), "R")
        self.assertEqual(inverse_move("R2"), "R2")
        self.assertEqual(inverse_move("3M"), "3M'")
        self.assertEqual(inverse_move(""), "")

    def test_parse_sequence(self):
        self.assertEqual(parse_sequence("R U R' U'"), ["R", "U", "R'", "U'"])
        self.assertEqual(parse_sequence("  "), [])
        with self.assertRaises(ValueError):
            parse_sequence("R K")

    def test_expand_token(self):
        self.assertEqual(expand_token("F"), [Move(1, 1, True)])
        self.assertEqual(expand_token("U'"), [Move(4, 1, False)])
        self.assertEqual(expand_token("R2"), [Move(3, 1, True), Move(3, 1, True)])
        self.assertEqual(expand_token("M"), [Move(2, 2, True)])
        self.assertEqual(expand_token("3E'"), [Move(5, 3, False)])
        self.assertEqual(expand_token("2B"), [Move(6, 2, True)])
        self.assertEqual(expand_token("Y"), [Move(4, None, True)])
        self.assertEqual(expand_token("Z'"), [Move(1, None, False)])

    def test_move_to_token(self):
        self.assertEqual(move_to_token(Move(1, 1, True)), "F")
        self.assertEqual(move_to_token(Move(2, 1, False)), "L'")
        self.assertEqual(move_to_token(Move(4, 3, True)), "3U")
        self.assertEqual(move_to_token(Move(3, None, False)), "X'")
        with self.assertRaises(ValueError):
            move_to_token(Move(6, None, True))

    def test_move_token_property(self):
        self.assertEqual(Move(1, 2, False).token, "2F'")
        self.assertEqual(Move(4, 1, True).token, "U")
        self.assertEqual(Move(1, None, True).token, "Z")
        self.assertEqual(Move(3, 1, True).inverse().token, "R'")

    def test_tokens_round_trip_through_moves(self):
        for tok in ("F", "L'", "2U", "3D'", "X", "Z'"):
            self.assertEqual([move_to_token(m) for m in expand_token(tok)], [tok])

    def test_sequence_to_moves(self):
        self.assertEqual(
            sequence_to_moves("R2 S'"),
            [Move(3, 1, True), Move(3, 1, True), Move(1, 2, False)],
        )


class TestApplyNamedMoves(unittest.TestCase):
    def test_named_moves_match_rotation_engine(self):
        c = CubeState(3)
        self.assertEqual(apply_move(c, "F"), face_clockwise(c, 1))
        self.assertEqual(apply_move(c, "M"), slice_clockwise(c, 2, 2))
        self.assertEqual(apply_move(c, "E'"), slice_counterclockwise(c, 5, 2))
        self.assertEqual(apply_move(c, "S"), slice_clockwise(c, 1, 2))
        self.assertEqual(apply_move(c, "X"), cube_clockwise(c, 3))
        self.assertTrue(c.is_solved())

    def test_U_then_Uprime_returns(self):
        c = CubeState(3)
        before = c.to_hashable()
        c.apply_move("U")
        c.apply_move("U'")
        self.assertEqual(before, c.to_hashable())

    def test_U2_equals_two_U(self):
        c1 = CubeState(3)
        c2 = CubeState(3)
        c1.apply_move("U2")
        c2.apply_move("U")
        c2.apply_move("U")
        self.assertEqual(c1, c2)

    def test_sequence_then_inverse_returns(self):
        seq = "R U 2F' M E2 D' Y"
        tokens = parse_sequence(seq)
        inverse = " ".join(inverse_move(t) for t in reversed(tokens))
        start = CubeState(4)
        out = apply_sequence(apply_sequence(start, seq), inverse)
        self.assertEqual(out, start)

    def test_layer_outside_cube_leaves_cube_untouched(self):
        c = CubeState(3)
        with self.assertRaises(ValueError):
            apply_sequence(c, "R 4M", inplace=True)
        self.assertTrue(c.is_solved())
        with self.assertRaises(ValueError):
            c.apply_move("5F")

    def test_middle_slice_on_two_by_two_is_opposite_face(self):
        c = CubeState(2)
        self.assertEqual(apply_move(c, "M"), apply_move(c, "R'"))


if __name__ == "__main__":
    unittest.main()
