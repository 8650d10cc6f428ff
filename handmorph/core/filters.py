"""
HandMorph Input Filter (Layer 2).
Exponential moving average over a single scalar channel.
"""
from dataclasses import dataclass
from typing import Union


class _Empty:
    """Marker for a filter that has not seen a sample since construction/reset."""
    __slots__ = ()

    def __repr__(self):
        return "EMPTY"


EMPTY = _Empty()


@dataclass(frozen=True)
class Seeded:
    value: float


FilterState = Union[_Empty, Seeded]


class ExponentialFilter:
    """
    Low-pass filter: estimate = alpha * sample + (1 - alpha) * estimate.

    The first sample after construction or reset() is taken verbatim,
    so the estimate is always a convex blend of samples seen since the
    last reset and never leaves their range.
    """
    def __init__(self, alpha: float):
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha
        self.state: FilterState = EMPTY

    @property
    def is_seeded(self) -> bool:
        return isinstance(self.state, Seeded)

    @property
    def value(self):
        """Current estimate, or None while empty."""
        return self.state.value if self.is_seeded else None

    def filter(self, sample: float) -> float:
        if isinstance(self.state, Seeded):
            # Same blend, written so a constant input reproduces itself exactly
            prev = self.state.value
            estimate = prev + self.alpha * (sample - prev)
        else:
            estimate = float(sample)
        self.state = Seeded(estimate)
        return estimate

    def reset(self) -> None:
        self.state = EMPTY
