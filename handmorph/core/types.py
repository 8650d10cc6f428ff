"""
HandMorph Types.
Central definition of Data Contracts to prevent circular imports.
"""
from dataclasses import dataclass
from enum import Enum, auto


# --- LANDMARK INDICES (MediaPipe convention) ---
class LM:
    WRIST = 0
    THUMB_TIP = 4
    INDEX_MCP, INDEX_TIP = 5, 8
    MIDDLE_MCP, MIDDLE_TIP = 9, 12
    RING_MCP, RING_TIP = 13, 16
    PINKY_MCP, PINKY_TIP = 17, 20

    COUNT = 21

    FINGER_TIPS = (INDEX_TIP, MIDDLE_TIP, RING_TIP, PINKY_TIP)
    FINGER_MCPS = (INDEX_MCP, MIDDLE_MCP, RING_MCP, PINKY_MCP)


# --- MODE TYPES ---
class GestureMode(Enum):
    SCALE = "scale"
    ROTATE = "rotate"
    BOTH = "both"

    @classmethod
    def from_label(cls, raw_label: str) -> "GestureMode":
        if isinstance(raw_label, cls):
            return raw_label
        clean = str(raw_label).strip().lower()
        for member in cls:
            if member.value == clean:
                return member
        raise ValueError(f"Unknown gesture mode: {raw_label!r}")

    @property
    def allows_scale(self) -> bool:
        return self in (GestureMode.SCALE, GestureMode.BOTH)

    @property
    def allows_rotation(self) -> bool:
        return self in (GestureMode.ROTATE, GestureMode.BOTH)


# --- TRACKING TYPES ---
class TrackingStatus(Enum):
    TRACKING = "tracking"
    GRACE = "grace"
    LOST = "lost"


@dataclass(frozen=True)
class TrackingUpdate:
    status: TrackingStatus
    time_since_lost: float = 0.0

    @property
    def is_active(self) -> bool:
        """Tracking or still inside the grace window."""
        return self.status is not TrackingStatus.LOST


# --- GEOMETRY TYPES ---
@dataclass(frozen=True)
class Orientation:
    tilt_x: float
    tilt_y: float


@dataclass(frozen=True)
class TwoHandRotation:
    y_rotation: float
    x_rotation: float


# --- OUTPUT TYPES ---
@dataclass(frozen=True)
class TransformOutput:
    scale: float
    rotation_x: float
    rotation_y: float


class GestureKind(Enum):
    TWO_HAND_STEER = auto()
    FIST_LOCK = auto()
    PINCHING = auto()
    TILT = auto()
    TILT_PINCH = auto()
    OPEN_HAND = auto()
    HOLDING = auto()
    NO_HANDS = auto()


STATUS_TEXT = {
    GestureKind.TWO_HAND_STEER: "Two hands: Steering control",
    GestureKind.FIST_LOCK: "Fist: Rotation locked",
    GestureKind.PINCHING: "Pinching (Compress)",
    GestureKind.TILT: "Tilt to rotate",
    GestureKind.TILT_PINCH: "Tilt + Pinch active",
    GestureKind.OPEN_HAND: "Open hand (Expand)",
    GestureKind.HOLDING: "Hand lost (holding)",
    GestureKind.NO_HANDS: "No hands detected",
}


@dataclass(frozen=True)
class GestureStatus:
    tracking: TrackingStatus
    kind: GestureKind

    @property
    def text(self) -> str:
        return STATUS_TEXT[self.kind]

    @property
    def label(self) -> str:
        return f"{self.tracking.value}: {self.text}"
