"""
Spectral grid storage for SpectroEdit.
Holds frames x frequency bins of real-valued samples and notifies
observers when a region's values change.
"""
from __future__ import annotations

import numpy as np
from PyQt6.QtCore import QObject, pyqtSignal

from .config import GRID_CONFIG
from .errors import FrameIndexError
from .frame import Frame
from .types import Region, SpectralArray
from ..utils.logger import logger


class SpectralGrid(QObject):
    """
    Addressable 2D store of spectral samples, indexed by frame then bin.

    All frames share the same bin count. The grid is owned by the editing
    session; edits only keep a reference to it.
    """
    regionChanged = pyqtSignal(object)  # Region
    framesChanged = pyqtSignal()

    def __init__(
        self,
        frame_count: int = GRID_CONFIG.default_frame_count,
        bin_count: int = GRID_CONFIG.default_bin_count,
    ):
        super().__init__()
        if bin_count < 1:
            raise ValueError(f"Grid needs at least one bin, got {bin_count}")
        if frame_count < 0:
            raise ValueError(f"Frame count cannot be negative, got {frame_count}")
        self._data = np.zeros((frame_count, bin_count), dtype=GRID_CONFIG.dtype)

    @classmethod
    def from_array(cls, data) -> "SpectralGrid":
        """Builds a grid holding a copy of a (frames, bins) array."""
        data = np.asarray(data, dtype=GRID_CONFIG.dtype)
        if data.ndim != 2:
            raise ValueError(f"Expected a 2-D (frames, bins) array, got shape {data.shape}")
        grid = cls(0, data.shape[1])
        grid._data = np.array(data, copy=True, order='C')
        return grid

    # --- Shape ---

    @property
    def frame_count(self) -> int:
        return self._data.shape[0]

    @property
    def bin_count(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    def __len__(self) -> int:
        return self.frame_count

    # --- Sample access ---

    def frame_at(self, index: int) -> Frame:
        """Returns a handle to the frame at ``index``."""
        if not 0 <= index < self.frame_count:
            raise FrameIndexError(
                f"Frame {index} out of range (grid has {self.frame_count} frames)"
            )
        return Frame(index, self._data[index])

    def to_array(self) -> SpectralArray:
        """Returns a copy of the whole grid."""
        return self._data.copy()

    def notify_region_changed(self, region: Region) -> None:
        """Tells observers that the values inside ``region`` changed."""
        self.regionChanged.emit(region)

    # --- Structural changes ---

    def append_frames(self, frames) -> None:
        """Appends frames to the end of the grid."""
        frames = np.asarray(frames, dtype=self._data.dtype)
        if frames.ndim == 1:
            frames = frames[np.newaxis, :]
        if frames.ndim != 2 or frames.shape[1] != self.bin_count:
            raise ValueError(
                f"Frames must have {self.bin_count} bins, got shape {frames.shape}"
            )
        self._data = np.concatenate((self._data, frames), axis=0)
        logger.debug(f"Appended {frames.shape[0]} frames (now {self.frame_count})")
        self.framesChanged.emit()

    def truncate(self, frame_count: int) -> None:
        """Drops every frame from ``frame_count`` onwards."""
        if not 0 <= frame_count <= self.frame_count:
            raise FrameIndexError(
                f"Cannot truncate {self.frame_count} frames to {frame_count}"
            )
        self._data = self._data[:frame_count].copy()
        logger.debug(f"Truncated grid to {frame_count} frames")
        self.framesChanged.emit()

    def __repr__(self) -> str:
        return f"SpectralGrid(frames={self.frame_count}, bins={self.bin_count})"
