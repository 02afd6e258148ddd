import unittest

import numpy as np

from skewb_sim.actions import MIRROR_ROTATIONS, ORIENTATION_PERMUTATIONS, WCA_PERMUTATIONS, compose
from skewb_sim.engine import Skewb
from skewb_sim.equivalence import exact_equal
from skewb_sim.mirror import full_mirror, layer_pattern, one_layer_mirror, relative_signature
from skewb_sim.state_codec import ColorNotFoundError

COLORS = ("W", "G", "R", "B", "O", "Y")
SWAPPED = ("G", "W", "R", "B", "O", "Y")
SCRAMBLE = "R U' L B R' U"


def scrambled(colors=COLORS, moves: str = SCRAMBLE) -> Skewb:
    s = Skewb(*colors)
    s.apply_wca_moves(moves)
    return s


def rotation_perm(rotation: str) -> np.ndarray:
    return compose(*[WCA_PERMUTATIONS[t] for t in rotation.split()])


class TestFullMirror(unittest.TestCase):
    def test_mirror_rotations_cover_all_orientations(self):
        keys = {tuple(int(v) for v in rotation_perm(r)) for r in MIRROR_ROTATIONS}
        group = {tuple(int(v) for v in perm) for perm in ORIENTATION_PERMUTATIONS}
        self.assertEqual(len(keys), 24)
        self.assertEqual(keys, group)

    def test_solved_matches_every_rotation(self):
        a = Skewb(*COLORS)
        for rotation in MIRROR_ROTATIONS:
            b = Skewb(*COLORS)
            b.apply_wca_moves(rotation)
            self.assertTrue(full_mirror(a, b), msg=rotation)

    def test_scrambled_matches_every_rotation(self):
        a = scrambled()
        for rotation in MIRROR_ROTATIONS:
            b = a.copy()
            b.apply_wca_moves(rotation)
            self.assertTrue(a.full_mirror(b), msg=rotation)

    def test_consistent_relabeling_matches(self):
        a = scrambled(COLORS)
        b = scrambled(("1", "2", "3", "4", "5", "6"))
        self.assertTrue(full_mirror(a, b))
        self.assertTrue(full_mirror(scrambled(COLORS), scrambled(SWAPPED)))

    def test_different_states_do_not_match(self):
        a = Skewb(*COLORS)
        b = Skewb(*COLORS)
        b.apply_wca_moves("R")
        self.assertFalse(full_mirror(a, b))

    def test_second_state_is_not_mutated(self):
        a = scrambled()
        b = a.copy()
        b.apply_wca_moves("x' z")
        snapshot = b.copy()
        self.assertTrue(full_mirror(a, b))
        self.assertTrue(exact_equal(snapshot, b))
        self.assertEqual(snapshot.history, b.history)
        self.assertEqual(snapshot.step_count, b.step_count)

    def test_relative_signature_of_solved(self):
        signature = relative_signature(Skewb(*COLORS))
        self.assertEqual(signature.shape, (6, 5))
        for face in range(6):
            self.assertTrue(np.all(signature[face] == face))

    def test_relative_signature_marks_foreign_colors(self):
        s = Skewb.from_stickers(["W"] * 23 + ["purple"] + list(COLORS))
        signature = relative_signature(s)
        self.assertEqual(int((signature == -1).sum()), 1)


class TestOneLayerMirror(unittest.TestCase):
    def test_solved_layers_match_independent_of_colors(self):
        a = Skewb(*COLORS)
        b = Skewb(*SWAPPED)
        self.assertTrue(one_layer_mirror(a, b, "Y"))

    def test_spun_copy_matches(self):
        a = scrambled()
        b = a.copy()
        b.apply_wca_moves("y")
        for color in COLORS:
            self.assertTrue(one_layer_mirror(a, b, color), msg=color)

    def test_relabeled_scramble_matches(self):
        self.assertTrue(one_layer_mirror(scrambled(COLORS), scrambled(SWAPPED), "Y"))

    def test_broken_layer_does_not_match(self):
        a = Skewb(*COLORS)
        a.apply_wca_moves("U")
        b = Skewb(*COLORS)
        self.assertFalse(one_layer_mirror(a, b, "Y"))
        self.assertFalse(a.one_layer_mirror(b, "Y"))

    def test_arguments_are_not_mutated(self):
        a = scrambled()
        b = a.copy()
        b.apply_wca_moves("y2")
        a_before, b_before = a.copy(), b.copy()
        one_layer_mirror(a, b, "G")
        self.assertTrue(exact_equal(a_before, a))
        self.assertTrue(exact_equal(b_before, b))
        self.assertEqual(a_before.history, a.history)
        self.assertEqual(b_before.step_count, b.step_count)

    def test_unknown_layer_color_raises(self):
        with self.assertRaises(ColorNotFoundError):
            one_layer_mirror(Skewb(*COLORS), Skewb(*COLORS), "purple")

    def test_layer_pattern_codes(self):
        corners = [("Y", "R", "G"), ("Y", "B", "R"), ("Y", "G", "O"), ("Y", "O", "B")]
        self.assertEqual(
            layer_pattern(corners, "Y"),
            ((0, 1, 2), (0, -1, 1), (0, 2, -1), (0, -1, -1)),
        )
        self.assertEqual(layer_pattern([("R", "Y", "G")], "Y"), ((1, 0, 2),))
        self.assertEqual(layer_pattern([("R", "G", "Y")], "Y"), ((1, 2, 0),))
        self.assertIsNone(layer_pattern([("W", "R", "G"), ("Y", "B", "R")], "Y"))


if __name__ == "__main__":
    unittest.main()
