"""
HandMorph Landmark Processing Utilities.
========================================

Handles the conversion of detector output into the pipeline's Hand type.
The classifier assumes exactly 21 well-formed points; this module is the
guard that makes that assumption true.

Accepted inputs:
1. MediaPipe NormalizedLandmarkList (has `.landmark`).
2. Any sequence of 21 objects with `.x`, `.y`, `.z`.
3. Raw numbers: 21x3 nested or 63 flat (e.g. CSV rows, tests).
"""

import logging
from typing import Any, List

import numpy as np

from handmorph.core.errors import MalformedHandError
from handmorph.core.types import LM


def to_hand_array(landmark_list: Any) -> np.ndarray:
    """
    Transforms one detected hand into a (21, 3) float64 matrix.
    Raises MalformedHandError on wrong count, shape or non-finite values.
    """
    if landmark_list is None:
        raise MalformedHandError("Hand is None")

    # 1. Unwrap MediaPipe container
    if hasattr(landmark_list, "landmark"):
        landmark_list = landmark_list.landmark

    # 2. Data Structuring
    try:
        if len(landmark_list) > 0 and hasattr(landmark_list[0], "x"):
            coords = np.array([[lm.x, lm.y, lm.z] for lm in landmark_list], dtype=np.float64)
        else:
            coords = np.array(landmark_list, dtype=np.float64)
    except (TypeError, ValueError, AttributeError) as e:
        raise MalformedHandError(f"Unreadable landmarks: {e}") from e

    # 3. Shape check (flat 63 is allowed)
    if coords.ndim == 1 and coords.size == LM.COUNT * 3:
        coords = coords.reshape(LM.COUNT, 3)
    if coords.shape != (LM.COUNT, 3):
        raise MalformedHandError(f"Expected ({LM.COUNT}, 3) landmarks, got {coords.shape}")

    # 4. Value check
    if not np.all(np.isfinite(coords)):
        raise MalformedHandError("Landmarks contain NaN/inf")

    return coords


def coerce_hands(raw_hands: Any, max_hands: int = 2) -> List[np.ndarray]:
    """
    Converts a detector frame into a list of valid hands.
    Malformed hands are dropped (treated as absent), never raised.
    """
    # Explicit checks: a stacked (n, 21, 3) ndarray has no truth value
    if raw_hands is None:
        return []
    try:
        count = len(raw_hands)
    except TypeError:
        logging.warning(f"Rejected detector frame of type {type(raw_hands).__name__}")
        return []
    if count == 0:
        return []

    hands = []
    for i, raw in enumerate(raw_hands):
        try:
            hands.append(to_hand_array(raw))
        except MalformedHandError as e:
            logging.warning(f"Rejected hand #{i}: {e}")
        if len(hands) == max_hands:
            break
    return hands
