"""
HandMorph Configuration Management.
===================================

This module defines the tuning space for the HandMorph pipeline.
The parameters are organized into the same "Layer Cake" as the pipeline:

    Detector -> Tracking Lifecycle -> EMA Filters -> Gesture Mapping -> Springs

! WARNING !
Changing the Spring Layer affects the "feel" of the effect immediately.
Changing the Mapping Layer changes the reachable scale range.
"""

from handmorph.core.errors import ConfigError

# --- MASTER CONFIGURATION ---
CONFIG = {
    # =========================================================
    # LAYER 0: DETECTOR & RUNTIME (MediaPipe + OpenCV)
    # =========================================================
    "MAX_HANDS": 2,                 # Only the first two hands are ever routed
    "DETECTION_CONFIDENCE": 0.7,
    "TRACKING_CONFIDENCE": 0.6,
    "MODEL_COMPLEXITY": 1,          # 0=Fast, 1=Balanced
    "CAMERA_INDEX": 0,              # OpenCV device ID
    "TARGET_FPS": 30,               # Hardware limit for Camera
    "RENDER_FPS": 60,               # Render tick cadence (independent of camera)
    "MIRROR_INPUT": True,           # Selfie view

    # =========================================================
    # LAYER 1: TRACKING LIFECYCLE (Grace Window)
    # =========================================================
    "GRACE_PERIOD_MS": 500,         # Dropouts shorter than this are not "loss"
    "FILTER_RESET_DELAY_MS": 500,   # Extra loss time before EMA filters are wiped

    # =========================================================
    # LAYER 2: INPUT SIGNAL (EMA Filters)
    # =========================================================
    "EMA_ALPHA_SCALE": 0.4,         # Two-hand spread (Higher = More Responsive)
    "EMA_ALPHA_ROTATION": 0.3,      # Tilt / steering angles
    "EMA_ALPHA_PINCH": 0.5,         # Thumb-index distance

    # =========================================================
    # LAYER 3: GESTURE MAPPING (Gains & Clamps)
    # =========================================================
    "PINCH_SCALE_OFFSET": 0.3,
    "PINCH_SCALE_GAIN": 8.0,
    "PINCH_SCALE_MIN": 0.2,
    "PINCH_SCALE_MAX": 2.5,

    "SPREAD_SCALE_OFFSET": 0.3,
    "SPREAD_SCALE_GAIN": 3.5,
    "SPREAD_SCALE_MIN": 0.2,
    "SPREAD_SCALE_MAX": 2.8,

    "TILT_GAIN_X": 1.2,             # One hand: pitch
    "TILT_GAIN_Y": 0.8,             # One hand: yaw
    "STEER_GAIN_Y": 2.0,            # Two hands: steering wheel angle
    "STEER_GAIN_X": 0.8,            # Two hands: vertical position

    # --- CLASSIFIER THRESHOLDS ---
    "FIST_CURL_SLACK": 1.15,        # Tip may reach 15% past the MCP and still count as closed
    "FIST_MIN_CLOSED": 3,           # Out of 4 (tolerates one misdetected finger)
    "ORIENTATION_EPSILON": 0.001,   # Palm facing the camera
    "PINCH_STATUS_THRESHOLD": 0.05, # Status label only

    # =========================================================
    # LAYER 4: OUTPUT FEEL (Spring Physics)
    # =========================================================
    "SCALE_RESPONSIVENESS": 0.12,
    "SCALE_DEADZONE": 0.02,
    "ROTATION_RESPONSIVENESS": 0.08,
    "ROTATION_DEADZONE": 0.01,
    "SPRING_DAMPING": 0.7,          # Tracking law
    "SLOW_RESPONSIVENESS": 0.02,    # Return-to-rest law
    "SLOW_DAMPING": 0.85,
    "NEUTRAL_SCALE": 1.0,

    # =========================================================
    # LAYER 5: IDLE BEHAVIOUR (Auto-Rotate)
    # =========================================================
    "AUTO_ROTATE_SPEED": 0.003,     # Radians per tick
    "AUTO_ROTATE_AMPLITUDE": 0.08,  # X wobble (radians)
    "AUTO_ROTATE_FREQUENCY": 0.3,   # X wobble (rad/s of wall clock)

    "DEFAULT_MODE": "both",         # scale | rotate | both
}

_CLAMP_PAIRS = [
    ("PINCH_SCALE_MIN", "PINCH_SCALE_MAX"),
    ("SPREAD_SCALE_MIN", "SPREAD_SCALE_MAX"),
]


def validate_config(cfg: dict) -> dict:
    """
    Sanity-checks a config dict before the pipeline is built from it.
    Returns the same dict so it can be used inline.
    """
    for key in ("EMA_ALPHA_SCALE", "EMA_ALPHA_ROTATION", "EMA_ALPHA_PINCH"):
        if not 0.0 < cfg[key] <= 1.0:
            raise ConfigError(f"{key} must be in (0, 1], got {cfg[key]}")

    for key in ("SCALE_RESPONSIVENESS", "ROTATION_RESPONSIVENESS", "SLOW_RESPONSIVENESS"):
        if cfg[key] <= 0:
            raise ConfigError(f"{key} must be positive, got {cfg[key]}")

    for key in ("SPRING_DAMPING", "SLOW_DAMPING"):
        if not 0.0 < cfg[key] < 1.0:
            raise ConfigError(f"{key} must be in (0, 1), got {cfg[key]}")

    for key in ("SCALE_DEADZONE", "ROTATION_DEADZONE", "GRACE_PERIOD_MS", "FILTER_RESET_DELAY_MS"):
        if cfg[key] < 0:
            raise ConfigError(f"{key} must be >= 0, got {cfg[key]}")

    for lo, hi in _CLAMP_PAIRS:
        if cfg[lo] >= cfg[hi]:
            raise ConfigError(f"{lo} must be below {hi}")

    if str(cfg["DEFAULT_MODE"]).strip().lower() not in ("scale", "rotate", "both"):
        raise ConfigError(f"Unknown DEFAULT_MODE: {cfg['DEFAULT_MODE']!r}")

    return cfg
