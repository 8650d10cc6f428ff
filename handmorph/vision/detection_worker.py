"""
HandMorph Detection Cadence.
============================

Runs camera -> detector -> controller.process_frame() on its own daemon
thread, so detection latency never stalls the render tick. The controller
serializes the two cadences internally; this worker only has to keep the
latest frame around for the preview.
"""
import logging
import threading
from typing import List, Optional, Tuple

import cv2
import numpy as np

from handmorph.config import CONFIG


class DetectionWorker(threading.Thread):
    def __init__(self, camera, detector, controller, mirror=None):
        super().__init__(daemon=True, name="handmorph-detection")
        self.camera = camera
        self.detector = detector
        self.controller = controller
        self.mirror = CONFIG["MIRROR_INPUT"] if mirror is None else mirror

        self.running = True
        self._lock = threading.Lock()
        self._latest: Tuple[Optional[np.ndarray], List[np.ndarray]] = (None, [])

    def run(self):
        seq = 0
        while self.running:
            # One detection per camera frame: repeats would re-feed the filters
            new_seq, frame = self.camera.wait_for_frame(seq)
            if frame is None:
                if not self.camera.running:
                    logging.error("Camera stream ended, stopping detection")
                    self.running = False
                    break
                continue
            seq = new_seq

            if self.mirror:
                # Flip horizontal for mirror effect (intuitive interaction)
                frame = cv2.flip(frame, 1)

            hands = self.detector.detect(frame)
            self.controller.process_frame(hands)

            with self._lock:
                self._latest = (frame, hands)

    def latest(self) -> Tuple[Optional[np.ndarray], List[np.ndarray]]:
        """Most recent (frame, hands) pair for the preview."""
        with self._lock:
            frame, hands = self._latest
            return (frame.copy() if frame is not None else None), hands

    def stop(self):
        self.running = False
