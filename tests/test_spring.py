import unittest

from handmorph.config import CONFIG
from handmorph.core.spring import SpringSmoother


class TestSpringSmoother(unittest.TestCase):
    def setUp(self):
        self.spring = SpringSmoother(0.0, responsiveness=0.12, dead_zone=0.02,
                                     damping=0.7, slow_responsiveness=0.02, slow_damping=0.85)

    def test_dead_zone_rejects_small_changes(self):
        d = self.spring.dead_zone
        self.assertTrue(self.spring.set_target(1.0))

        self.assertFalse(self.spring.set_target(1.0 + d / 2))
        self.assertEqual(self.spring.target, 1.0)

        self.assertTrue(self.spring.set_target(1.0 + 2 * d))
        self.assertEqual(self.spring.target, 1.0 + 2 * d)
        self.assertEqual(self.spring.last_accepted_target, 1.0 + 2 * d)

    def test_slow_drift_still_gets_through(self):
        # Each acceptance moves the reference point
        accepted = [v for v in (0.015, 0.025, 0.04, 0.05, 0.065, 0.08) if self.spring.set_target(v)]
        self.assertEqual(accepted, [0.025, 0.05, 0.08])
        self.assertEqual(self.spring.target, 0.08)

    def test_update_law(self):
        self.spring.set_target(1.0)
        # v = (0 + 1.0 * 0.12) * 0.7 = 0.084
        self.assertAlmostEqual(self.spring.update(), 0.084)
        self.assertAlmostEqual(self.spring.velocity, 0.084)
        # v = (0.084 + 0.916 * 0.12) * 0.7
        expected_v = (0.084 + (1.0 - 0.084) * 0.12) * 0.7
        self.assertAlmostEqual(self.spring.update(), 0.084 + expected_v)

    def test_update_converges_to_target(self):
        self.spring.set_target(1.7)
        for _ in range(300):
            value = self.spring.update()
        self.assertAlmostEqual(value, 1.7, places=6)
        self.assertAlmostEqual(self.spring.velocity, 0.0, places=6)

    def test_update_slow_overwrites_target(self):
        self.spring.set_target(0.5)
        value = self.spring.update_slow(1.0)
        self.assertEqual(self.spring.target, 1.0)
        # v = (0 + 1.0 * 0.02) * 0.85
        self.assertAlmostEqual(value, 0.017)
        # Dead zone reference is untouched by the slow law
        self.assertEqual(self.spring.last_accepted_target, 0.5)

    def test_slow_return_is_slower_than_tracking(self):
        fast = SpringSmoother(0.0, 0.12, 0.0)
        slow = SpringSmoother(0.0, 0.12, 0.0)
        fast.set_target(1.0)
        for _ in range(10):
            f = fast.update()
            s = slow.update_slow(1.0)
        self.assertLess(s, f)

    def test_from_config(self):
        spring = SpringSmoother.from_config(1.0, "SCALE_RESPONSIVENESS", "SCALE_DEADZONE")
        self.assertEqual(spring.current, 1.0)
        self.assertEqual(spring.responsiveness, CONFIG["SCALE_RESPONSIVENESS"])
        self.assertEqual(spring.dead_zone, CONFIG["SCALE_DEADZONE"])
        self.assertEqual(spring.damping, CONFIG["SPRING_DAMPING"])

    def test_invalid_parameters(self):
        with self.assertRaises(ValueError):
            SpringSmoother(0.0, 0.0, 0.01)
        with self.assertRaises(ValueError):
            SpringSmoother(0.0, 0.1, -0.01)


if __name__ == '__main__':
    unittest.main()
