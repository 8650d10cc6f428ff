"""
Session Context Definition.
Defines the single owned state object shared by the frame and tick cadences.
"""

from handmorph.config import CONFIG
from handmorph.core.filters import ExponentialFilter
from handmorph.core.spring import SpringSmoother
from handmorph.core.tracking import HandTrackingState
from handmorph.core.types import GestureMode


class SessionContext:
    """
    Everything a Handler needs to make decisions, in one place:
    Mode, Tracking Lifecycle, EMA Filters, Springs, Auto-Rotate state and Config.
    No module-level globals; the controller passes this by reference.
    """
    def __init__(self, config=None):
        cfg = config or CONFIG
        self.config = cfg

        # 1. Mode (last-write-wins, read every frame)
        self.mode = GestureMode.from_label(cfg["DEFAULT_MODE"])

        # 2. Tracking Lifecycle
        self.tracking = HandTrackingState(cfg["GRACE_PERIOD_MS"])

        # 3. Input Filters (one per signal)
        self.scale_filter = ExponentialFilter(cfg["EMA_ALPHA_SCALE"])
        self.pinch_filter = ExponentialFilter(cfg["EMA_ALPHA_PINCH"])
        self.rot_x_filter = ExponentialFilter(cfg["EMA_ALPHA_ROTATION"])
        self.rot_y_filter = ExponentialFilter(cfg["EMA_ALPHA_ROTATION"])

        # 4. Output Springs
        self.scale = SpringSmoother.from_config(
            cfg["NEUTRAL_SCALE"], "SCALE_RESPONSIVENESS", "SCALE_DEADZONE", cfg)
        self.rotation_x = SpringSmoother.from_config(
            0.0, "ROTATION_RESPONSIVENESS", "ROTATION_DEADZONE", cfg)
        self.rotation_y = SpringSmoother.from_config(
            0.0, "ROTATION_RESPONSIVENESS", "ROTATION_DEADZONE", cfg)

        # 5. Idle Behaviour
        self.auto_rotate = True
        self.base_rotation_y = 0.0

    @property
    def filters(self):
        return (self.scale_filter, self.pinch_filter, self.rot_x_filter, self.rot_y_filter)

    def reset_filters(self) -> None:
        for f in self.filters:
            f.reset()
