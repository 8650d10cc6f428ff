"""
HandMorph Camera Input.
=======================

Capture runs on its own daemon thread and publishes frames with a
sequence number. Consumers wait for the sequence to advance, so each
camera frame reaches the detector at most once no matter how fast the
detector is. A slow detector skips to the newest frame instead of
working through a stale backlog.
"""
import logging
import threading
from typing import Optional, Tuple

import cv2
import numpy as np

from handmorph.config import CONFIG


class ThreadedCamera:
    def __init__(self, src: int = 0, config=None):
        cfg = config or CONFIG
        self.cap = cv2.VideoCapture(src)
        # Ask for the detector's rate; drivers treat it as a hint
        self.cap.set(cv2.CAP_PROP_FPS, cfg["TARGET_FPS"])

        self.running = True
        self.seq = 0
        self._frame: Optional[np.ndarray] = None
        self._cond = threading.Condition()

        self._thread = threading.Thread(target=self._reader, daemon=True, name="handmorph-camera")
        self._thread.start()

    def _reader(self):
        while self.running:
            ok, frame = self.cap.read()
            with self._cond:
                if not ok:
                    logging.warning("Camera returned no frame, capture stopped")
                    self.running = False
                    self._cond.notify_all()
                    break
                self._frame = frame
                self.seq += 1
                self._cond.notify_all()

    def wait_for_frame(self, last_seq: int, timeout: float = 0.1) -> Tuple[int, Optional[np.ndarray]]:
        """
        Blocks until a frame newer than `last_seq` exists (or timeout / stop).
        Returns (seq, frame copy), or (last_seq, None) when nothing new arrived.
        """
        with self._cond:
            self._cond.wait_for(lambda: self.seq != last_seq or not self.running, timeout)
            if self.seq == last_seq or self._frame is None:
                return last_seq, None
            return self.seq, self._frame.copy()

    def release(self):
        self.running = False
        with self._cond:
            self._cond.notify_all()
        self._thread.join(timeout=1.0)
        self.cap.release()
