"""
HandMorph Core Interfaces.
Defines the abstract contracts for the pipeline's consumers.
"""

from abc import ABC, abstractmethod

from handmorph.core.types import GestureStatus, TransformOutput


class IRenderSink(ABC):
    """
    Abstract Protocol for the visual effect.
    Receives one transform per render tick, unconditionally.
    """
    @abstractmethod
    def set_transform(self, output: TransformOutput) -> None: pass


class IStatusSink(ABC):
    """
    Abstract Protocol for the status display.
    Receives one label per detection frame.
    """
    @abstractmethod
    def update_status(self, status: GestureStatus) -> None: pass


class NullSink(IRenderSink, IStatusSink):
    """Discards everything. Used when no display is attached."""
    def set_transform(self, output: TransformOutput) -> None:
        pass

    def update_status(self, status: GestureStatus) -> None:
        pass
