"""HandMorph Rotation Handler (Tilt / Steering)."""
import numpy as np

from handmorph.control.handlers import SessionContext
from handmorph.core import gestures


class RotationHandler:
    def handle_one_hand(self, ctx: SessionContext, hand: np.ndarray) -> None:
        if not ctx.mode.allows_rotation:
            return
        cfg = ctx.config
        tilt = gestures.orientation(hand, cfg["ORIENTATION_EPSILON"])

        # Gain before filtering; the EMA is linear so the order is immaterial
        ctx.rotation_x.set_target(ctx.rot_x_filter.filter(tilt.tilt_x * cfg["TILT_GAIN_X"]))
        ctx.rotation_y.set_target(ctx.rot_y_filter.filter(tilt.tilt_y * cfg["TILT_GAIN_Y"]))
        ctx.auto_rotate = False

    def handle_two_hands(self, ctx: SessionContext, hand_a: np.ndarray, hand_b: np.ndarray) -> None:
        if not ctx.mode.allows_rotation:
            return
        cfg = ctx.config
        rot = gestures.two_hand_rotation(hand_a, hand_b)

        ctx.rotation_y.set_target(ctx.rot_y_filter.filter(rot.y_rotation * cfg["STEER_GAIN_Y"]))
        ctx.rotation_x.set_target(ctx.rot_x_filter.filter(rot.x_rotation * cfg["STEER_GAIN_X"]))
        ctx.auto_rotate = False
