"""MediaPipe hand detection wrapper."""

from typing import List

import cv2
import mediapipe as mp
import numpy as np
from numpy.typing import NDArray

from handmorph.config import CONFIG
from handmorph.hand_utils import coerce_hands


class HandDetector:
    """
    External black box: pixels in, landmark arrays out.
    Everything downstream only ever sees (21, 3) numpy arrays.
    """

    def __init__(self, config=None):
        cfg = config or CONFIG
        self._max_hands = cfg["MAX_HANDS"]
        self._mp_hands = mp.solutions.hands
        self._hands = self._mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=cfg["MAX_HANDS"],
            model_complexity=cfg["MODEL_COMPLEXITY"],
            min_detection_confidence=cfg["DETECTION_CONFIDENCE"],
            min_tracking_confidence=cfg["TRACKING_CONFIDENCE"],
        )

    @property
    def connections(self):
        return self._mp_hands.HAND_CONNECTIONS

    def detect(self, frame: NDArray[np.uint8]) -> List[np.ndarray]:
        """Process a BGR frame and return zero, one or two hands."""
        # MediaPipe requires RGB; OpenCV uses BGR
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        results = self._hands.process(rgb)

        if not results.multi_hand_landmarks:
            return []
        return coerce_hands(results.multi_hand_landmarks, self._max_hands)

    def close(self) -> None:
        """Release resources."""
        self._hands.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
