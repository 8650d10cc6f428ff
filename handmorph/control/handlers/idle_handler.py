"""
HandMorph Idle Logic (No Hands).
================================

Two entry points, one per cadence:

on_lost (detection frame):
    After loss has lasted GRACE + FILTER_RESET_DELAY, wipe every EMA filter
    so the next acquisition re-seeds from fresh samples instead of blending
    with where the hand was seconds ago. Re-enables auto-rotate.

advance (render tick, status LOST):
    Scale drifts back to neutral on the soft spring. Rotation either
    auto-spins (free-running Y + sinusoidal X wobble) or, when auto-rotate
    was switched off by a gesture, drifts back to rest.
"""
import logging
import math

from handmorph.control.handlers import SessionContext


class IdleHandler:
    def on_lost(self, ctx: SessionContext, time_since_lost: float) -> None:
        cfg = ctx.config
        if time_since_lost > cfg["GRACE_PERIOD_MS"] + cfg["FILTER_RESET_DELAY_MS"]:
            if any(f.is_seeded for f in ctx.filters):
                logging.info("Hands gone, resetting input filters")
            ctx.reset_filters()
        ctx.auto_rotate = True

    def advance(self, ctx: SessionContext, now: float):
        """Returns (scale, rotation_x, rotation_y) for this tick."""
        cfg = ctx.config
        scale = ctx.scale.update_slow(cfg["NEUTRAL_SCALE"])

        if ctx.auto_rotate:
            ctx.base_rotation_y += cfg["AUTO_ROTATE_SPEED"]
            t = now * 0.001
            # Direct writes: auto-rotate bypasses the dead zone
            ctx.rotation_y.target = ctx.base_rotation_y
            ctx.rotation_x.target = (math.sin(t * cfg["AUTO_ROTATE_FREQUENCY"])
                                     * cfg["AUTO_ROTATE_AMPLITUDE"])
            rot_x = ctx.rotation_x.update()
            rot_y = ctx.rotation_y.update()
        else:
            rot_x = ctx.rotation_x.update_slow(0.0)
            rot_y = ctx.rotation_y.update_slow(ctx.base_rotation_y)

        return scale, rot_x, rot_y
