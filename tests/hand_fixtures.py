"""Synthetic 21-point hands for tests (normalized image space, y grows downward)."""
import numpy as np

from handmorph.core.types import LM


class MockLandmark:
    """Mimics mediapipe NormalizedLandmark."""
    def __init__(self, x, y, z=0.0):
        self.x, self.y, self.z = x, y, z


class MockHand:
    """Mimics mediapipe NormalizedLandmarkList."""
    def __init__(self, coords):
        self.landmark = [MockLandmark(*row) for row in coords]


def make_hand(wrist=(0.5, 0.8), spread=0.2, curled=(), thumb_tip=None, middle_mcp_z=0.0):
    """
    Upright hand: MCPs `spread` above the wrist, open tips 2*spread above.
    `curled` lists finger tip indices folded back toward the palm.
    """
    wx, wy = wrist
    hand = np.zeros((LM.COUNT, 3))
    hand[:, 0], hand[:, 1] = wx, wy - 0.05

    for i, (mcp, tip) in enumerate(zip(LM.FINGER_MCPS, LM.FINGER_TIPS)):
        dx = (i - 1.5) * 0.04
        hand[mcp] = (wx + dx, wy - spread, 0.0)
        if tip in curled:
            hand[tip] = (wx + dx, wy - 0.5 * spread, 0.0)
        else:
            hand[tip] = (wx + dx, wy - 2.0 * spread, 0.0)

    hand[LM.WRIST] = (wx, wy, 0.0)
    hand[LM.MIDDLE_MCP, 2] = middle_mcp_z
    hand[LM.THUMB_TIP] = thumb_tip if thumb_tip is not None else (wx - 0.12, wy - 0.15, 0.0)
    return hand


def make_fist(wrist=(0.5, 0.8)):
    return make_hand(wrist=wrist, curled=LM.FINGER_TIPS)


def make_pinch(wrist=(0.5, 0.8), gap=0.02):
    hand = make_hand(wrist=wrist)
    ix, iy, _ = hand[LM.INDEX_TIP]
    hand[LM.THUMB_TIP] = (ix + gap, iy, 0.0)
    return hand
