import math
import unittest

import numpy as np

from handmorph.core import gestures
from handmorph.core.types import LM
from hand_fixtures import make_fist, make_hand, make_pinch


class TestOrientation(unittest.TestCase):
    def _hand_with_palm(self, vx, vy, vz):
        hand = np.zeros((LM.COUNT, 3))
        hand[LM.MIDDLE_MCP] = (vx, vy, vz)
        return hand

    def test_upright_palm(self):
        o = gestures.orientation(self._hand_with_palm(0.0, -0.2, 0.0))
        self.assertAlmostEqual(o.tilt_x, -math.pi / 2)
        self.assertAlmostEqual(o.tilt_y, 0.0)

    def test_sideways_palm_facing_camera(self):
        # z == 0: epsilon keeps tilt_y finite and just short of pi/2
        o = gestures.orientation(self._hand_with_palm(0.1, 0.0, 0.0))
        self.assertAlmostEqual(o.tilt_x, 0.0)
        self.assertAlmostEqual(o.tilt_y, math.atan2(0.1, 0.001))
        self.assertLess(o.tilt_y, math.pi / 2)

    def test_depth_uses_absolute_z(self):
        near = gestures.orientation(self._hand_with_palm(0.1, 0.0, -0.1))
        far = gestures.orientation(self._hand_with_palm(0.1, 0.0, 0.1))
        self.assertAlmostEqual(near.tilt_y, far.tilt_y)
        self.assertAlmostEqual(near.tilt_y, math.atan2(0.1, 0.101))

    def test_tilt_x_formula(self):
        o = gestures.orientation(self._hand_with_palm(0.03, 0.04, 0.0))
        self.assertAlmostEqual(o.tilt_x, math.atan2(0.04, 0.03))


class TestFist(unittest.TestCase):
    def test_open_hand(self):
        hand = make_hand()
        self.assertEqual(gestures.closed_finger_count(hand), 0)
        self.assertFalse(gestures.is_fist(hand))

    def test_full_fist(self):
        self.assertEqual(gestures.closed_finger_count(make_fist()), 4)
        self.assertTrue(gestures.is_fist(make_fist()))

    def test_one_misdetected_finger_is_tolerated(self):
        hand = make_hand(curled=(LM.MIDDLE_TIP, LM.RING_TIP, LM.PINKY_TIP))
        self.assertTrue(gestures.is_fist(hand))

    def test_two_open_fingers_is_not_a_fist(self):
        hand = make_hand(curled=(LM.RING_TIP, LM.PINKY_TIP))
        self.assertFalse(gestures.is_fist(hand))

    def test_slack_tolerance(self):
        # Tip 10% beyond its MCP still counts as closed (slack 1.15)
        hand = make_hand()
        hand[LM.WRIST] = (0.5, 0.8, 0.0)
        for mcp, tip in zip(LM.FINGER_MCPS, LM.FINGER_TIPS):
            hand[mcp] = (0.5, 0.6, 0.0)
            hand[tip] = (0.5, 0.58, 0.0)
        self.assertTrue(gestures.is_fist(hand))
        self.assertFalse(gestures.is_fist(hand, slack=1.0))

    def test_depth_is_ignored(self):
        hand = make_fist()
        hand[list(LM.FINGER_TIPS), 2] = -0.5
        self.assertTrue(gestures.is_fist(hand))


class TestDistances(unittest.TestCase):
    def test_pinch_distance(self):
        hand = make_hand()
        hand[LM.THUMB_TIP] = (0.0, 0.0, 0.9)
        hand[LM.INDEX_TIP] = (0.03, 0.04, -0.9)
        self.assertAlmostEqual(gestures.pinch_distance(hand), 0.05)

    def test_pinch_fixture(self):
        self.assertAlmostEqual(gestures.pinch_distance(make_pinch(gap=0.02)), 0.02)

    def test_two_hand_distance(self):
        a = make_hand(wrist=(0.3, 0.5))
        b = make_hand(wrist=(0.7, 0.5))
        self.assertAlmostEqual(gestures.two_hand_distance(a, b), 0.4)


class TestTwoHandRotation(unittest.TestCase):
    def test_level_and_centered(self):
        rot = gestures.two_hand_rotation(make_hand(wrist=(0.3, 0.5)), make_hand(wrist=(0.7, 0.5)))
        self.assertAlmostEqual(rot.y_rotation, 0.0)
        self.assertAlmostEqual(rot.x_rotation, 0.0)

    def test_steering_angle_and_height(self):
        rot = gestures.two_hand_rotation(make_hand(wrist=(0.3, 0.4)), make_hand(wrist=(0.7, 0.8)))
        self.assertAlmostEqual(rot.y_rotation, math.pi / 4)
        self.assertAlmostEqual(rot.x_rotation, 0.2)

    def test_vertical_range(self):
        top = gestures.two_hand_rotation(make_hand(wrist=(0.3, 0.0)), make_hand(wrist=(0.7, 0.0)))
        bottom = gestures.two_hand_rotation(make_hand(wrist=(0.3, 1.0)), make_hand(wrist=(0.7, 1.0)))
        self.assertAlmostEqual(top.x_rotation, -1.0)
        self.assertAlmostEqual(bottom.x_rotation, 1.0)


class TestPurity(unittest.TestCase):
    def test_inputs_are_not_mutated(self):
        a, b = make_hand(wrist=(0.3, 0.5)), make_fist(wrist=(0.7, 0.6))
        a_copy, b_copy = a.copy(), b.copy()

        gestures.orientation(a)
        gestures.is_fist(b)
        gestures.pinch_distance(a)
        gestures.two_hand_distance(a, b)
        gestures.two_hand_rotation(a, b)

        np.testing.assert_array_equal(a, a_copy)
        np.testing.assert_array_equal(b, b_copy)


if __name__ == '__main__':
    unittest.main()
