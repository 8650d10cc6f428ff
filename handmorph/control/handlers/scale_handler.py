"""
HandMorph Scale Logic.
======================

Maps a continuous distance to a continuous scale target.

Key Logic: "Filter, Map, Clamp"
1. Raw distance goes through its own EMA filter (pinch and spread never share one).
2. Linear map: scale = offset + filtered * gain.
3. Clamp to the gesture's range, then offer it to the spring (dead zone applies).
"""
import numpy as np

from handmorph.control.handlers import SessionContext
from handmorph.core import gestures


def _map_scale(value: float, offset: float, gain: float, lo: float, hi: float) -> float:
    return float(np.clip(offset + value * gain, lo, hi))


class ScaleHandler:
    def handle_one_hand(self, ctx: SessionContext, hand: np.ndarray) -> None:
        # --- PINCH (Thumb <-> Index) ---
        if not ctx.mode.allows_scale:
            return
        cfg = ctx.config
        filtered = ctx.pinch_filter.filter(gestures.pinch_distance(hand))
        ctx.scale.set_target(_map_scale(
            filtered, cfg["PINCH_SCALE_OFFSET"], cfg["PINCH_SCALE_GAIN"],
            cfg["PINCH_SCALE_MIN"], cfg["PINCH_SCALE_MAX"]))

    def handle_two_hands(self, ctx: SessionContext, hand_a: np.ndarray, hand_b: np.ndarray) -> None:
        # --- SPREAD (Wrist <-> Wrist) ---
        if not ctx.mode.allows_scale:
            return
        cfg = ctx.config
        filtered = ctx.scale_filter.filter(gestures.two_hand_distance(hand_a, hand_b))
        ctx.scale.set_target(_map_scale(
            filtered, cfg["SPREAD_SCALE_OFFSET"], cfg["SPREAD_SCALE_GAIN"],
            cfg["SPREAD_SCALE_MIN"], cfg["SPREAD_SCALE_MAX"]))
