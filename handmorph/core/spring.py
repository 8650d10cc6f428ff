"""
HandMorph Spring Smoother (Layer 4).
====================================

Converts a jumpy target into continuous motion.

Key Logic: "Gate & Integrate"
1. set_target() only moves the target when the new value clears the dead zone
   measured from the LAST ACCEPTED value (hysteresis, not a low-pass: a slow
   drift still gets through because each acceptance moves the reference).
2. update() integrates a damped second-order system toward the target.
   It must run once per render tick, tracked or not.
3. update_slow() is the same law with a soft spring, used to drift back to rest.
"""

from handmorph.config import CONFIG


class SpringSmoother:
    def __init__(self, initial_value: float, responsiveness: float, dead_zone: float,
                 damping=None, slow_responsiveness=None, slow_damping=None):
        if responsiveness <= 0:
            raise ValueError(f"responsiveness must be positive, got {responsiveness}")
        if dead_zone < 0:
            raise ValueError(f"dead_zone must be >= 0, got {dead_zone}")

        self.current = initial_value
        self.target = initial_value
        self.velocity = 0.0
        self.last_accepted_target = initial_value

        self.responsiveness = responsiveness
        self.dead_zone = dead_zone
        self.damping = damping if damping is not None else CONFIG["SPRING_DAMPING"]
        self.slow_responsiveness = (slow_responsiveness if slow_responsiveness is not None
                                    else CONFIG["SLOW_RESPONSIVENESS"])
        self.slow_damping = slow_damping if slow_damping is not None else CONFIG["SLOW_DAMPING"]

    @classmethod
    def from_config(cls, initial_value: float, responsiveness_key: str, deadzone_key: str,
                    config=None) -> "SpringSmoother":
        cfg = config or CONFIG
        return cls(initial_value, cfg[responsiveness_key], cfg[deadzone_key],
                   damping=cfg["SPRING_DAMPING"],
                   slow_responsiveness=cfg["SLOW_RESPONSIVENESS"],
                   slow_damping=cfg["SLOW_DAMPING"])

    def set_target(self, value: float) -> bool:
        """Returns True if the value cleared the dead zone."""
        if abs(value - self.last_accepted_target) > self.dead_zone:
            self.target = value
            self.last_accepted_target = value
            return True
        return False

    def _step(self, stiffness: float, damping: float) -> float:
        diff = self.target - self.current
        self.velocity += diff * stiffness
        self.velocity *= damping
        self.current += self.velocity
        return self.current

    def update(self) -> float:
        return self._step(self.responsiveness, self.damping)

    def update_slow(self, fallback: float) -> float:
        # Overwrites target unconditionally; last_accepted_target is left alone
        self.target = fallback
        return self._step(self.slow_responsiveness, self.slow_damping)
