import unittest

import numpy as np

from handmorph.core.errors import MalformedHandError
from handmorph.hand_utils import coerce_hands, to_hand_array
from hand_fixtures import MockHand, MockLandmark, make_hand


class TestToHandArray(unittest.TestCase):
    def test_mediapipe_like_container(self):
        coords = make_hand()
        hand = to_hand_array(MockHand(coords))
        self.assertEqual(hand.shape, (21, 3))
        np.testing.assert_allclose(hand, coords)

    def test_sequence_of_landmarks(self):
        lms = [MockLandmark(i / 21, 0.5, -0.01 * i) for i in range(21)]
        hand = to_hand_array(lms)
        self.assertAlmostEqual(hand[20, 0], 20 / 21)
        self.assertAlmostEqual(hand[20, 2], -0.2)

    def test_flat_vector(self):
        flat = make_hand().flatten().tolist()
        self.assertEqual(len(flat), 63)
        self.assertEqual(to_hand_array(flat).shape, (21, 3))

    def test_returns_a_copy(self):
        coords = make_hand()
        hand = to_hand_array(coords)
        hand[0, 0] = 99.0
        self.assertNotEqual(coords[0, 0], 99.0)

    def test_rejects_wrong_count(self):
        with self.assertRaises(MalformedHandError):
            to_hand_array(np.zeros((20, 3)))
        with self.assertRaises(MalformedHandError):
            to_hand_array(np.zeros((21, 2)))
        with self.assertRaises(MalformedHandError):
            to_hand_array([])

    def test_rejects_non_finite(self):
        coords = make_hand()
        coords[7, 1] = np.nan
        with self.assertRaises(MalformedHandError):
            to_hand_array(coords)

    def test_rejects_garbage(self):
        for bad in (None, 42, "hand", [[0.1, 0.2], [0.3]]):
            with self.assertRaises(MalformedHandError):
                to_hand_array(bad)

    def test_is_a_value_error(self):
        # Callers outside the pipeline can catch it generically
        with self.assertRaises(ValueError):
            to_hand_array(np.zeros(5))


class TestCoerceHands(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(coerce_hands(None), [])
        self.assertEqual(coerce_hands([]), [])

    def test_drops_malformed_hands(self):
        good = make_hand()
        with self.assertLogs(level="WARNING"):
            hands = coerce_hands([np.zeros((5, 3)), good])
        self.assertEqual(len(hands), 1)
        np.testing.assert_allclose(hands[0], good)

    def test_stacked_array_frame(self):
        a, b = make_hand(wrist=(0.3, 0.5)), make_hand(wrist=(0.7, 0.5))
        hands = coerce_hands(np.stack([a, b]))
        self.assertEqual(len(hands), 2)
        np.testing.assert_allclose(hands[1], b)

    def test_empty_array_frame(self):
        self.assertEqual(coerce_hands(np.zeros((0, 21, 3))), [])

    def test_unsized_frame_is_no_hands(self):
        with self.assertLogs(level="WARNING"):
            self.assertEqual(coerce_hands(42), [])

    def test_caps_hand_count(self):
        hands = coerce_hands([make_hand(wrist=(x, 0.5)) for x in (0.2, 0.5, 0.8)], max_hands=2)
        self.assertEqual(len(hands), 2)
        self.assertAlmostEqual(hands[1][0, 0], 0.5)


if __name__ == '__main__':
    unittest.main()
