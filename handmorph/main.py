"""
HandMorph - Main Entry Point.
=============================

This module serves as the central bootloader. It wires the two cadences:
1. Detection Cadence (camera thread -> MediaPipe -> controller.process_frame).
2. Render Cadence (this thread -> controller.tick -> HUD).

Usage:
    $ python -m handmorph.main
"""
import logging
import time

import cv2

from handmorph.config import CONFIG
from handmorph.control.controller import GestureController
from handmorph.core.types import GestureMode
from handmorph.ui.hud import HUD
from handmorph.vision.camera import ThreadedCamera
from handmorph.vision.detection_worker import DetectionWorker
from handmorph.vision.hand_detector import HandDetector

MODE_KEYS = {
    ord('1'): GestureMode.SCALE,
    ord('2'): GestureMode.ROTATE,
    ord('3'): GestureMode.BOTH,
}


def handle_keys(pilot: GestureController, wait_ms: int) -> bool:
    """Pumps the OpenCV event loop once. Returns False when ESC was pressed."""
    k = cv2.waitKey(wait_ms) & 0xFF
    if k == 27: return False # ESC
    if k in MODE_KEYS: pilot.set_mode(MODE_KEYS[k])
    return True


def main():
    """
    Main Render Loop.
    """
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(threadName)s: %(message)s")

    # 1. Boot Sequence
    print("🚀 HANDMORPH: ONLINE")
    print("   -> Press '1' / '2' / '3' for Scale / Rotate / Both")
    print("   -> Press 'ESC' to Exit")

    window_name = "HandMorph"
    cv2.namedWindow(window_name)

    # 2. Initialize Subsystems
    detector = HandDetector()
    hud = HUD(detector.connections)
    pilot = GestureController(render_sink=hud, status_sink=hud)

    cam = ThreadedCamera(CONFIG["CAMERA_INDEX"])
    worker = DetectionWorker(cam, detector, pilot)
    worker.start()

    wait_ms = max(1, int(1000 / CONFIG["RENDER_FPS"]))
    prev_time = time.time()

    try:
        while worker.is_alive():
            # --- RENDER TICK (runs with or without a new detection) ---
            pilot.tick()

            frame, hands = worker.latest()
            if frame is not None:
                hud.render(frame, hands, pilot.mode)

                # Performance Monitoring
                curr = time.time()
                fps = 1/(curr-prev_time) if (curr-prev_time) > 0 else 0
                prev_time = curr
                hud.draw_fps(frame, fps)

                cv2.imshow(window_name, frame)

            # Input Handling (pumps window events even before the first frame)
            if not handle_keys(pilot, wait_ms):
                break

    finally:
        # Graceful Shutdown
        worker.stop()
        worker.join(timeout=1.0)
        cam.release()
        detector.close()
        cv2.destroyAllWindows()
        print("🔴 SYSTEM OFFLINE")


if __name__ == "__main__":
    main()
