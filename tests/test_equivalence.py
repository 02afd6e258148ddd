import unittest

from skewb_sim.actions import MIRROR_ROTATIONS
from skewb_sim.engine import Skewb
from skewb_sim.equivalence import canonical_key, equal, exact_equal, is_solved
from skewb_sim.state_codec import ColorNotFoundError

COLORS = ("W", "G", "R", "B", "O", "Y")


def scrambled() -> Skewb:
    s = Skewb(*COLORS)
    s.apply_wca_moves("R U' L B R' U")
    return s


class TestEquivalence(unittest.TestCase):
    def test_equal_and_exact_equal_separate_on_spin(self):
        a = Skewb(*COLORS)
        b = a.copy()
        b.apply_wca_moves("y")
        self.assertTrue(equal(a, b))
        self.assertFalse(exact_equal(a, b))
        self.assertTrue(a.equal(b))
        self.assertFalse(a.exact_equal(b))

    def test_equal_does_not_mutate_second_state(self):
        a = scrambled()
        b = a.copy()
        b.apply_wca_moves("x y'")
        snapshot = b.copy()
        self.assertTrue(equal(a, b))
        self.assertTrue(exact_equal(snapshot, b))
        self.assertEqual(snapshot.history, b.history)
        self.assertEqual(snapshot.step_count, b.step_count)

    def test_equal_after_any_rotation(self):
        a = scrambled()
        for rotation in MIRROR_ROTATIONS:
            b = a.copy()
            b.apply_wca_moves(rotation)
            self.assertTrue(equal(a, b), msg=rotation)

    def test_different_states_are_not_equal(self):
        a = scrambled()
        b = a.copy()
        b.apply_wca_moves("R")
        self.assertFalse(equal(a, b))
        self.assertFalse(exact_equal(a, b))

    def test_equal_raises_when_down_color_missing(self):
        a = Skewb(*COLORS)
        b = Skewb("A", "B", "C", "D", "E", "F")
        with self.assertRaises(ColorNotFoundError):
            equal(a, b)

    def test_exact_equal_is_reflexive(self):
        a = scrambled()
        self.assertTrue(exact_equal(a, a.copy()))

    def test_is_solved(self):
        s = Skewb(*COLORS)
        self.assertTrue(is_solved(s))
        s.apply_wca_moves("x2 z y'")
        self.assertTrue(s.is_solved())
        s.apply_wca_moves("R")
        self.assertFalse(is_solved(s))

    def test_canonical_key_ignores_orientation(self):
        a = scrambled()
        key = canonical_key(a)
        for rotation in MIRROR_ROTATIONS:
            b = a.copy()
            b.apply_wca_moves(rotation)
            self.assertEqual(canonical_key(b), key, msg=rotation)

        c = a.copy()
        c.apply_wca_moves("L")
        self.assertNotEqual(canonical_key(c), key)


if __name__ == "__main__":
    unittest.main()
