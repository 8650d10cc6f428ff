"""
HandMorph Controller.
=====================

Acts as the central nervous system. Two cadences drive it:

process_frame(hands)  -- once per detector result (camera rate, irregular)
tick()                -- once per render frame (display rate, always)

Both run against the same SessionContext under one lock, so a frame's
target writes are visible to the very next tick's spring integration
and a tick never integrates a spring while a frame is re-targeting it.
"""

import logging
import threading

import numpy as np

from handmorph.config import CONFIG, validate_config
from handmorph.control.handlers import SessionContext
from handmorph.control.handlers.idle_handler import IdleHandler
from handmorph.control.handlers.rotation_handler import RotationHandler
from handmorph.control.handlers.scale_handler import ScaleHandler
from handmorph.core import gestures
from handmorph.core.interfaces import IRenderSink, IStatusSink, NullSink
from handmorph.core.tracking import now_ms
from handmorph.core.types import (
    GestureKind, GestureMode, GestureStatus, TrackingStatus, TrackingUpdate, TransformOutput,
)
from handmorph.hand_utils import coerce_hands


class GestureController:
    def __init__(self, render_sink: IRenderSink = None, status_sink: IStatusSink = None,
                 config=None, clock=now_ms):
        self.config = validate_config(config or CONFIG)
        self.ctx = SessionContext(self.config)
        self.clock = clock

        self.render_sink = render_sink or NullSink()
        self.status_sink = status_sink or NullSink()

        # Handlers
        self.scale_handler = ScaleHandler()
        self.rotation_handler = RotationHandler()
        self.idle_handler = IdleHandler()

        self._lock = threading.Lock()

        # Emitted scale never leaves the union of both gesture ranges
        self._scale_lo = min(self.config["PINCH_SCALE_MIN"], self.config["SPREAD_SCALE_MIN"])
        self._scale_hi = max(self.config["PINCH_SCALE_MAX"], self.config["SPREAD_SCALE_MAX"])

        # Exposed for the HUD
        self.last_status = GestureStatus(TrackingStatus.LOST, GestureKind.NO_HANDS)
        self.last_output = TransformOutput(self.ctx.scale.current, 0.0, 0.0)

    # --- MODE ---
    @property
    def mode(self) -> GestureMode:
        return self.ctx.mode

    def set_mode(self, mode) -> GestureMode:
        """Accepts a GestureMode or one of "scale" / "rotate" / "both"."""
        try:
            new_mode = GestureMode.from_label(mode)
        except ValueError:
            logging.warning(f"Ignoring unknown gesture mode {mode!r}")
            return self.ctx.mode
        with self._lock:
            if new_mode is not self.ctx.mode:
                logging.info(f"Gesture mode: {self.ctx.mode.value} -> {new_mode.value}")
            self.ctx.mode = new_mode
        return new_mode

    # --- DETECTION CADENCE ---
    def process_frame(self, raw_hands, now=None) -> TrackingUpdate:
        if now is None:
            now = self.clock()
        hands = coerce_hands(raw_hands, self.config["MAX_HANDS"])

        with self._lock:
            update = self.ctx.tracking.update_tracking(len(hands) > 0, now)

            if update.status is TrackingStatus.TRACKING:
                if len(hands) >= 2:
                    kind = self._process_two_hands(hands[0], hands[1])
                else:
                    kind = self._process_one_hand(hands[0])
            elif update.status is TrackingStatus.LOST:
                self.idle_handler.on_lost(self.ctx, update.time_since_lost)
                kind = GestureKind.NO_HANDS
            else:
                # Grace: no resets, no targets. The springs carry the motion.
                kind = GestureKind.HOLDING

            status = GestureStatus(update.status, kind)
            self.last_status = status

        self.status_sink.update_status(status)
        return update

    def _process_two_hands(self, hand_a: np.ndarray, hand_b: np.ndarray) -> GestureKind:
        self.scale_handler.handle_two_hands(self.ctx, hand_a, hand_b)
        self.rotation_handler.handle_two_hands(self.ctx, hand_a, hand_b)
        return GestureKind.TWO_HAND_STEER

    def _process_one_hand(self, hand: np.ndarray) -> GestureKind:
        # Fist overrides everything, in every mode
        if gestures.is_fist(hand, self.config["FIST_CURL_SLACK"], self.config["FIST_MIN_CLOSED"]):
            self.ctx.auto_rotate = False
            return GestureKind.FIST_LOCK

        self.scale_handler.handle_one_hand(self.ctx, hand)
        self.rotation_handler.handle_one_hand(self.ctx, hand)

        if gestures.pinch_distance(hand) < self.config["PINCH_STATUS_THRESHOLD"]:
            return GestureKind.PINCHING
        if self.ctx.mode is GestureMode.ROTATE:
            return GestureKind.TILT
        if self.ctx.mode is GestureMode.BOTH:
            return GestureKind.TILT_PINCH
        return GestureKind.OPEN_HAND

    # --- RENDER CADENCE ---
    def tick(self, now=None) -> TransformOutput:
        if now is None:
            now = self.clock()

        with self._lock:
            # A tick carries no detection data
            update = self.ctx.tracking.update_tracking(False, now)

            if update.is_active:
                scale = self.ctx.scale.update()
                rot_x = self.ctx.rotation_x.update()
                rot_y = self.ctx.rotation_y.update()
            else:
                scale, rot_x, rot_y = self.idle_handler.advance(self.ctx, now)

            output = TransformOutput(
                float(np.clip(scale, self._scale_lo, self._scale_hi)), rot_x, rot_y)
            self.last_output = output

        self.render_sink.set_transform(output)
        return output
