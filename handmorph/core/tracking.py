"""
HandMorph Tracking Lifecycle (Layer 1).

tracking --(no hands)--> grace --(grace period expires)--> lost
    ^________________(hands)________________________________|

Single-frame detector dropouts land in `grace`, so gesture targets and
filter estimates survive them. Only `lost` counts as the hand leaving.
"""
import logging
import time

from handmorph.core.types import TrackingStatus, TrackingUpdate


def now_ms() -> float:
    """Monotonic clock in milliseconds. All lifecycle timestamps use this unit."""
    return time.monotonic() * 1000.0


class HandTrackingState:
    def __init__(self, grace_period: float):
        if grace_period < 0:
            raise ValueError(f"grace_period must be >= 0, got {grace_period}")
        self.grace_period = grace_period
        self.is_tracking = False
        # Never seen: behaves as `lost` from the first update
        self.last_seen_at = float("-inf")
        self.last_status = TrackingStatus.LOST

    def update_tracking(self, hands_present: bool, now=None) -> TrackingUpdate:
        if now is None:
            now = now_ms()

        if hands_present:
            self.is_tracking = True
            self.last_seen_at = now
            return self._report(TrackingUpdate(TrackingStatus.TRACKING, 0.0))

        elapsed = now - self.last_seen_at

        if elapsed < self.grace_period:
            # is_tracking stays True: output still treats the hand as present
            return self._report(TrackingUpdate(TrackingStatus.GRACE, elapsed))

        self.is_tracking = False
        return self._report(TrackingUpdate(TrackingStatus.LOST, elapsed))

    def _report(self, update: TrackingUpdate) -> TrackingUpdate:
        if update.status is not self.last_status:
            # tracking <-> grace flips on every tick between frames; only loss is news
            lost_edge = TrackingStatus.LOST in (update.status, self.last_status)
            logging.log(logging.INFO if lost_edge else logging.DEBUG,
                        f"Tracking: {self.last_status.value} -> {update.status.value}")
            self.last_status = update.status
        return update
