"""
Type definitions for the SpectroEdit core module.
Provides type aliases and protocols for type safety and better IDE support.
"""
from typing import Callable, NamedTuple, Protocol
import numpy as np
from numpy.typing import NDArray

# Spectral data types
SpectralArray = NDArray[np.float64]  # Shape: (frames, bins)
FrameArray = NDArray[np.float64]     # Shape: (bins,)

# Callback types
UndoFunc = Callable[[], None]
RedoFunc = Callable[[], None]
RegionOp = Callable[..., SpectralArray]  # (data, **kwargs) -> data


class Region(NamedTuple):
    """A rectangle in (frame, bin) space: origin plus extent."""
    first_frame: int
    first_bin: int
    frame_count: int
    bin_count: int

    @property
    def frame_end(self) -> int:
        """One past the last frame covered."""
        return self.first_frame + self.frame_count

    @property
    def bin_end(self) -> int:
        """One past the last bin covered."""
        return self.first_bin + self.bin_count

    @property
    def size(self) -> int:
        return self.frame_count * self.bin_count


class UndoableEdit(Protocol):
    """Capability contract for anything the undo history can hold."""
    description: str

    @property
    def can_undo(self) -> bool: ...

    @property
    def can_redo(self) -> bool: ...

    def undo(self) -> None: ...

    def redo(self) -> None: ...

    def die(self) -> None: ...

