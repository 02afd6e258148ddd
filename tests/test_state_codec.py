import unittest

from skewb_sim.actions import STATE_SIZE
from skewb_sim.engine import Skewb
from skewb_sim.equivalence import exact_equal
from skewb_sim.state_codec import (
    ColorNotFoundError,
    SkewbError,
    StateValidationError,
    UnsupportedMoveError,
    payload_to_stickers,
    validate_stickers,
)

COLORS = ("W", "G", "R", "B", "O", "Y")


class TestStateCodec(unittest.TestCase):
    def test_payload_restores_state(self):
        s = Skewb(*COLORS)
        s.apply_wca_moves("R U' x")
        payload = s.state_payload()
        self.assertEqual(payload["step_count"], 3)
        self.assertFalse(payload["solved"])
        self.assertEqual(len(payload["corners"]), 8)

        restored = Skewb.from_stickers(payload_to_stickers(payload))
        self.assertTrue(exact_equal(s, restored))
        self.assertEqual(restored.colors, tuple(s.center_color(f) for f in ("U", "F", "R", "B", "L", "D")))

    def test_malformed_payloads_rejected(self):
        payload = Skewb(*COLORS).state_payload()
        del payload["corners"]["UFR"]
        with self.assertRaises(StateValidationError):
            payload_to_stickers(payload)

        payload = Skewb(*COLORS).state_payload()
        payload["corners"]["URB"] = ["W", "R"]
        with self.assertRaises(StateValidationError):
            payload_to_stickers(payload)

        payload = Skewb(*COLORS).state_payload()
        del payload["centers"]["D"]
        with self.assertRaises(StateValidationError):
            payload_to_stickers(payload)

        with self.assertRaises(StateValidationError):
            payload_to_stickers(["not", "an", "object"])

    def test_validate_stickers(self):
        with self.assertRaises(StateValidationError):
            validate_stickers(["W"] * (STATE_SIZE - 1))
        with self.assertRaises(StateValidationError):
            validate_stickers(["W"] * (STATE_SIZE - 1) + [None])
        self.assertEqual(len(validate_stickers(["W"] * STATE_SIZE)), STATE_SIZE)

    def test_error_hierarchy(self):
        for exc in (
            UnsupportedMoveError("Q", "wca", ("R",)),
            ColorNotFoundError("purple"),
            StateValidationError("bad"),
        ):
            self.assertIsInstance(exc, SkewbError)
            self.assertIsInstance(exc, ValueError)
        self.assertIn('"R"', str(UnsupportedMoveError("Q", "wca", ("R",))))


if __name__ == "__main__":
    unittest.main()
