"""
HandMorph Gesture Classifier.
=============================

Pure geometry over (21, 3) landmark arrays. Nothing here holds state or
mutates its input; callers must only pass hands that went through
`hand_utils.to_hand_array` (exactly 21 finite points).

Most measures are PLANAR (x, y only). MediaPipe's z is a relative depth
estimate that is far noisier than x/y, so it is only used where the
gesture is inherently 3D (palm orientation).
"""
import math

import numpy as np

from handmorph.config import CONFIG
from handmorph.core.types import LM, Orientation, TwoHandRotation


def _planar_dist(a: np.ndarray, b: np.ndarray) -> float:
    return float(math.hypot(a[0] - b[0], a[1] - b[1]))


def orientation(hand: np.ndarray, epsilon=None) -> Orientation:
    """
    Palm direction from the wrist(0) -> middle MCP(9) vector.

    tilt_x: pitch, angle of the vector above the x/z plane.
    tilt_y: yaw, guarded by epsilon when the palm faces the camera (z ~ 0).
    """
    eps = CONFIG["ORIENTATION_EPSILON"] if epsilon is None else epsilon
    vx, vy, vz = (hand[LM.MIDDLE_MCP] - hand[LM.WRIST]).tolist()

    tilt_x = math.atan2(vy, math.hypot(vx, vz))
    tilt_y = math.atan2(vx, abs(vz) + eps)
    return Orientation(tilt_x, tilt_y)


def closed_finger_count(hand: np.ndarray, slack=None) -> int:
    """
    A finger is closed when its tip is not meaningfully farther from the
    wrist than its own MCP knuckle.
    """
    slack = CONFIG["FIST_CURL_SLACK"] if slack is None else slack
    wrist_xy = hand[LM.WRIST, :2]

    # Vectorized: 4 tips vs 4 MCPs in one pass
    tip_dist = np.linalg.norm(hand[list(LM.FINGER_TIPS), :2] - wrist_xy, axis=1)
    mcp_dist = np.linalg.norm(hand[list(LM.FINGER_MCPS), :2] - wrist_xy, axis=1)
    return int(np.count_nonzero(tip_dist < mcp_dist * slack))


def is_fist(hand: np.ndarray, slack=None, min_closed=None) -> bool:
    min_closed = CONFIG["FIST_MIN_CLOSED"] if min_closed is None else min_closed
    return closed_finger_count(hand, slack) >= min_closed


def pinch_distance(hand: np.ndarray) -> float:
    """Planar distance between thumb tip (4) and index tip (8)."""
    return _planar_dist(hand[LM.THUMB_TIP], hand[LM.INDEX_TIP])


def two_hand_distance(hand_a: np.ndarray, hand_b: np.ndarray) -> float:
    """Planar distance between the two wrists."""
    return _planar_dist(hand_a[LM.WRIST], hand_b[LM.WRIST])


def two_hand_rotation(hand_a: np.ndarray, hand_b: np.ndarray) -> TwoHandRotation:
    """
    Steering wheel: the wrist-to-wrist angle drives Y, the pair's average
    height (0..1 in image space) is mapped to -1..1 for X.
    """
    wa, wb = hand_a[LM.WRIST], hand_b[LM.WRIST]
    y_rotation = math.atan2(wb[1] - wa[1], wb[0] - wa[0])
    avg_y = (wa[1] + wb[1]) / 2.0
    return TwoHandRotation(float(y_rotation), float((avg_y - 0.5) * 2.0))
