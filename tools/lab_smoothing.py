import collections
import os
import sys

import cv2
import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from handmorph.config import CONFIG
from handmorph.core import gestures
from handmorph.core.filters import ExponentialFilter
from handmorph.core.spring import SpringSmoother
from handmorph.vision.hand_detector import HandDetector

HISTORY = 300
PLOT_H = 200


def _trace(canvas, values, color, lo, hi):
    h, w = canvas.shape[:2]
    pts = []
    for i, v in enumerate(values):
        if v is None:
            continue
        x = int(i * (w - 1) / (HISTORY - 1))
        y = int((1.0 - np.clip((v - lo) / (hi - lo), 0.0, 1.0)) * (h - 1))
        pts.append((x, y))
    if len(pts) > 1:
        cv2.polylines(canvas, [np.array(pts, dtype=np.int32)], False, color, 1)


def run_lab():
    print("🌊 SMOOTHING LAB (Layers 2 + 4)")
    print("   -> Tune the EMA filter and the spring on the pinch -> scale channel.")
    print("   -> Grey = Raw scale | Yellow = EMA | Green = Spring output")
    print("   -> Press 'S' to print config values, 'ESC' to exit.")

    cv2.namedWindow("Smoothing Lab", cv2.WINDOW_NORMAL)
    cv2.resizeWindow("Smoothing Lab", 1000, 800)

    def nothing(x): pass

    # Sliders
    cv2.createTrackbar("EMA ALPHA (%)", "Smoothing Lab", int(CONFIG["EMA_ALPHA_PINCH"]*100), 100, nothing)
    cv2.createTrackbar("RESPONSE (x1000)", "Smoothing Lab", int(CONFIG["SCALE_RESPONSIVENESS"]*1000), 500, nothing)
    cv2.createTrackbar("DEADZONE (x1000)", "Smoothing Lab", int(CONFIG["SCALE_DEADZONE"]*1000), 200, nothing)

    cam = cv2.VideoCapture(CONFIG["CAMERA_INDEX"])
    detector = HandDetector()

    ema = ExponentialFilter(CONFIG["EMA_ALPHA_PINCH"])
    spring = SpringSmoother.from_config(CONFIG["NEUTRAL_SCALE"], "SCALE_RESPONSIVENESS", "SCALE_DEADZONE")

    raw_hist = collections.deque([None] * HISTORY, maxlen=HISTORY)
    ema_hist = collections.deque([None] * HISTORY, maxlen=HISTORY)
    out_hist = collections.deque([None] * HISTORY, maxlen=HISTORY)

    lo, hi = CONFIG["PINCH_SCALE_MIN"], CONFIG["PINCH_SCALE_MAX"]

    while True:
        # Live Updates
        alpha_val = max(cv2.getTrackbarPos("EMA ALPHA (%)", "Smoothing Lab"), 1) / 100.0
        resp_val = max(cv2.getTrackbarPos("RESPONSE (x1000)", "Smoothing Lab"), 1) / 1000.0
        dz_val = cv2.getTrackbarPos("DEADZONE (x1000)", "Smoothing Lab") / 1000.0

        ema.alpha = alpha_val
        spring.responsiveness = resp_val
        spring.dead_zone = dz_val

        ret, frame = cam.read()
        if not ret: break
        frame = cv2.flip(frame, 1)
        h, w, _ = frame.shape

        hands = detector.detect(frame)
        raw_scale = filtered_scale = None
        if hands:
            pinch = gestures.pinch_distance(hands[0])
            raw_scale = float(np.clip(CONFIG["PINCH_SCALE_OFFSET"] + pinch * CONFIG["PINCH_SCALE_GAIN"], lo, hi))
            filtered = ema.filter(pinch)
            filtered_scale = float(np.clip(CONFIG["PINCH_SCALE_OFFSET"] + filtered * CONFIG["PINCH_SCALE_GAIN"], lo, hi))
            spring.set_target(filtered_scale)
        else:
            ema.reset()

        raw_hist.append(raw_scale)
        ema_hist.append(filtered_scale)
        out_hist.append(spring.update())

        # Plot under the camera image
        plot = np.zeros((PLOT_H, w, 3), dtype=np.uint8)
        _trace(plot, raw_hist, (80, 80, 80), lo, hi)
        _trace(plot, ema_hist, (0, 220, 255), lo, hi)
        _trace(plot, out_hist, (0, 255, 0), lo, hi)

        cv2.putText(frame, f"ALPHA: {alpha_val:.2f}  RESPONSE: {resp_val:.3f}  DEADZONE: {dz_val:.3f}",
                    (20, 30), 1, 1.2, (255, 255, 255), 1)

        cv2.imshow("Smoothing Lab", np.vstack([frame, plot]))
        k = cv2.waitKey(1)
        if k == 27: break
        if k == ord('s'):
            print("\n" + "="*40)
            print("💾 CONFIG VALUES (SMOOTHING):")
            print(f'    "EMA_ALPHA_PINCH": {alpha_val:.2f},')
            print(f'    "SCALE_RESPONSIVENESS": {resp_val:.3f},')
            print(f'    "SCALE_DEADZONE": {dz_val:.3f},')
            print("="*40 + "\n")

    cam.release()
    detector.close()
    cv2.destroyAllWindows()


if __name__ == "__main__":
    run_lab()
