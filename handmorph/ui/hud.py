"""
HandMorph HUD.
Visualizes the pipeline output: tracking status, mode and the live transform.
Implements both sinks, so the controller can drive it directly.
"""

import math
import threading

import cv2
import numpy as np

from handmorph.core.interfaces import IRenderSink, IStatusSink
from handmorph.core.types import (
    GestureKind, GestureMode, GestureStatus, TrackingStatus, TransformOutput,
)


class HUD(IRenderSink, IStatusSink):
    # --- THEME COLORS (BGR) ---
    C_CYAN   = (255, 255, 0)    # Standard UI
    C_RED    = (0, 0, 255)      # Locked
    C_ORANGE = (0, 165, 255)    # Pinching
    C_GREEN  = (0, 255, 0)      # Active
    C_PURPLE = (255, 0, 255)    # Steering
    C_GRAY   = (120, 120, 120)  # Idle
    C_DARK   = (20, 20, 20)     # Backgrounds

    STATUS_COLORS = {
        GestureKind.TWO_HAND_STEER: C_PURPLE,
        GestureKind.FIST_LOCK: C_RED,
        GestureKind.PINCHING: C_ORANGE,
        GestureKind.TILT: C_GREEN,
        GestureKind.TILT_PINCH: C_GREEN,
        GestureKind.OPEN_HAND: C_GREEN,
        GestureKind.HOLDING: C_CYAN,
        GestureKind.NO_HANDS: C_GRAY,
    }

    def __init__(self, connections=None):
        self.connections = connections or []
        self._lock = threading.Lock()
        self.status = GestureStatus(TrackingStatus.LOST, GestureKind.NO_HANDS)
        self.output = TransformOutput(1.0, 0.0, 0.0)

    # --- SINKS (called from the controller's cadences) ---
    def set_transform(self, output: TransformOutput) -> None:
        with self._lock:
            self.output = output

    def update_status(self, status: GestureStatus) -> None:
        with self._lock:
            self.status = status

    # --- DRAWING ---
    def _draw_glass_panel(self, img, x, y, w, h, color, alpha=0.6):
        """Draws a semi-transparent 'Glass' background."""
        # Safety check for image bounds
        if y+h > img.shape[0] or x+w > img.shape[1] or x < 0 or y < 0: return

        sub_img = img[y:y+h, x:x+w]
        rect = np.full(sub_img.shape, color, dtype=np.uint8)
        img[y:y+h, x:x+w] = cv2.addWeighted(sub_img, 1 - alpha, rect, alpha, 1.0)
        cv2.rectangle(img, (x, y), (x+w, y+h), color, 1)

    def _draw_skeleton(self, frame, hands, color):
        h, w = frame.shape[:2]
        for hand in hands:
            pts = [(int(p[0] * w), int(p[1] * h)) for p in hand]
            for a, b in self.connections:
                cv2.line(frame, pts[a], pts[b], self.C_DARK, 4)
                cv2.line(frame, pts[a], pts[b], color, 2)
            for p in pts:
                cv2.circle(frame, p, 3, color, -1)

    def _draw_indicators(self, frame, output: TransformOutput, color):
        h, w = frame.shape[:2]
        x, y = 20, h - 110
        self._draw_glass_panel(frame, x, y, 260, 90, self.C_DARK, 0.5)

        # Scale bar (0.2 .. 2.8)
        fill = int(np.clip((output.scale - 0.2) / 2.6, 0.0, 1.0) * 150)
        cv2.putText(frame, f"SCALE {output.scale:4.2f}", (x + 10, y + 25),
                    cv2.FONT_HERSHEY_PLAIN, 1.1, color, 1)
        cv2.rectangle(frame, (x + 100, y + 15), (x + 250, y + 27), self.C_GRAY, 1)
        cv2.rectangle(frame, (x + 100, y + 15), (x + 100 + fill, y + 27), color, -1)

        cv2.putText(frame, f"ROT X {math.degrees(output.rotation_x):+6.1f}", (x + 10, y + 52),
                    cv2.FONT_HERSHEY_PLAIN, 1.1, color, 1)
        cv2.putText(frame, f"ROT Y {math.degrees(output.rotation_y) % 360:6.1f}", (x + 10, y + 77),
                    cv2.FONT_HERSHEY_PLAIN, 1.1, color, 1)

        # Dial for Y rotation
        cx, cy, r = x + 215, y + 62, 20
        cv2.circle(frame, (cx, cy), r, self.C_GRAY, 1)
        end = (int(cx + r * math.cos(output.rotation_y)), int(cy + r * math.sin(output.rotation_y)))
        cv2.line(frame, (cx, cy), end, color, 2)

    def render(self, frame, hands=(), mode: GestureMode = GestureMode.BOTH):
        with self._lock:
            status, output = self.status, self.output
        ui_color = self.STATUS_COLORS[status.kind]

        # 1. SKELETON PREVIEW
        self._draw_skeleton(frame, hands, ui_color)

        # 2. STATUS BAR
        self._draw_glass_panel(frame, 20, 20, 520, 50, self.C_DARK, 0.4)
        cv2.circle(frame, (40, 45), 8, ui_color, -1)
        cv2.putText(frame, status.label, (58, 52),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.7, ui_color, 2)

        w = frame.shape[1]
        cv2.putText(frame, f"MODE // {mode.value.upper()}  [1] SCALE [2] ROTATE [3] BOTH",
                    (w // 2 - 60, 95), cv2.FONT_HERSHEY_PLAIN, 1.0, self.C_CYAN, 1)

        # 3. TRANSFORM INDICATORS
        self._draw_indicators(frame, output, ui_color)

    def draw_fps(self, frame, fps):
        cv2.putText(frame, f"{int(fps)} FPS", (frame.shape[1]-100, 40),
                    cv2.FONT_HERSHEY_PLAIN, 1.2, self.C_GREEN, 1)
