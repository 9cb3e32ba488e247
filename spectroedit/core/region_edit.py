"""
Region edit command for SpectroEdit.

Captures the state of a rectangular region of a SpectralGrid before and
after an external operation mutates it, and replays either snapshot back
into the grid on undo/redo.
"""
from __future__ import annotations
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

import numpy as np

from .config import GRID_CONFIG
from .edit_state import EditState
from .errors import CannotRedoError, CannotUndoError, InvalidRegionError, SnapshotStateError
from .types import Region, SpectralArray
from ..utils.logger import logger

if TYPE_CHECKING:
    from .frame import Frame
    from .grid import SpectralGrid


class RegionEditState(Enum):
    """Lifecycle of a single region edit."""
    CONSTRUCTED = auto()
    AFTER_CAPTURED = auto()
    UNDONE = auto()
    REDONE = auto()
    DEAD = auto()


class RegionEdit:
    """
    Reversible change to a rectangular region of spectral data.

    Typical use::

        edit = RegionEdit(grid, first_frame, first_bin, n_frames, n_bins)
        ...  # mutate the grid in place
        edit.capture_after()
        undo_manager.push(edit)

    Every capture and apply touches the whole rectangle, so the region is
    never left holding a mix of old and new values.
    """

    def __init__(
        self,
        grid: "SpectralGrid",
        first_frame: int,
        first_bin: int,
        frame_count: int,
        bin_count: int,
        description: str = "Edit region",
    ):
        if frame_count <= 0:
            raise InvalidRegionError(f"Region to capture is empty (frame_count == {frame_count})")
        if bin_count <= 0:
            raise InvalidRegionError(f"Region to capture is empty (bin_count == {bin_count})")

        self.grid = grid
        self.first_frame = first_frame
        self.first_bin = first_bin
        self.frame_count = frame_count
        self.bin_count = bin_count
        self.description = description

        self._state = EditState()
        self._redone = False
        self._before: Optional[SpectralArray] = self._capture()
        self._after: Optional[SpectralArray] = None
        logger.debug(f"Captured {frame_count}x{bin_count} region for '{description}'")

    # --- Snapshots ---

    @property
    def before(self) -> Optional[SpectralArray]:
        """Read-only view of the pre-edit snapshot."""
        return _readonly(self._before)

    @property
    def after(self) -> Optional[SpectralArray]:
        """Read-only view of the post-edit snapshot, None until captured."""
        return _readonly(self._after)

    def capture_after(self) -> "RegionEdit":
        """
        Copies the region's current contents as the redo state.

        Must be called exactly once, after the external operation has
        finished mutating the grid.
        """
        if self._after is not None:
            raise SnapshotStateError(f"Already captured new data for '{self.description}'")
        if not self._state.alive:
            raise SnapshotStateError(f"Cannot capture into discarded edit '{self.description}'")
        self._after = self._capture()
        return self

    # --- State ---

    @property
    def state(self) -> RegionEditState:
        if not self._state.alive:
            return RegionEditState.DEAD
        if self._after is None:
            return RegionEditState.CONSTRUCTED
        if not self._state.has_been_done:
            return RegionEditState.UNDONE
        return RegionEditState.REDONE if self._redone else RegionEditState.AFTER_CAPTURED

    @property
    def can_undo(self) -> bool:
        return self._after is not None and self._state.can_undo

    @property
    def can_redo(self) -> bool:
        return self._after is not None and self._state.can_redo

    @property
    def undo_description(self) -> str:
        return f"Undo {self.description}"

    @property
    def redo_description(self) -> str:
        return f"Redo {self.description}"

    # --- Undo / Redo ---

    def undo(self) -> None:
        if not self.can_undo:
            raise CannotUndoError(f"Cannot undo '{self.description}' in state {self.state.name}")
        self._apply(self._before)
        self._state.mark_undone(self.description)
        self.grid.notify_region_changed(self.get_region())

    def redo(self) -> None:
        if not self.can_redo:
            raise CannotRedoError(f"Cannot redo '{self.description}' in state {self.state.name}")
        self._apply(self._after)
        self._state.mark_redone(self.description)
        self._redone = True
        self.grid.notify_region_changed(self.get_region())

    def rollback(self) -> None:
        """
        Restores the pre-edit values of an edit whose operation was
        abandoned, then discards the edit. Only valid before capture_after().
        """
        if self.state is not RegionEditState.CONSTRUCTED:
            raise CannotUndoError(f"Cannot roll back '{self.description}' in state {self.state.name}")
        self._apply(self._before)
        self.grid.notify_region_changed(self.get_region())
        self.die()

    def die(self) -> None:
        """Marks the edit as discarded by its history and releases its snapshots."""
        self._state.kill()
        self._before = None
        self._after = None

    # --- Region ---

    def get_region(self) -> Region:
        return Region(self.first_frame, self.first_bin, self.frame_count, self.bin_count)

    region = property(get_region)

    # --- Grid access ---

    def _frames(self) -> list["Frame"]:
        """Resolves every target frame and checks the bin span up front."""
        frames = [self.grid.frame_at(self.first_frame + i) for i in range(self.frame_count)]
        for frame in frames:
            frame.check_span(self.first_bin, self.bin_count)
        return frames

    def _capture(self) -> SpectralArray:
        data = np.empty((self.frame_count, self.bin_count), dtype=GRID_CONFIG.dtype)
        for i, frame in enumerate(self._frames()):
            data[i] = frame.get_samples(self.first_bin, self.bin_count)
        return data

    def _apply(self, data: SpectralArray) -> None:
        for frame, row in zip(self._frames(), data):
            frame.set_samples(self.first_bin, row)

    def __repr__(self) -> str:
        r = self.get_region()
        return (f"RegionEdit('{self.description}', frames={r.first_frame}+{r.frame_count}, "
                f"bins={r.first_bin}+{r.bin_count}, state={self.state.name})")


def _readonly(data: Optional[SpectralArray]) -> Optional[SpectralArray]:
    if data is None:
        return None
    view = data.view()
    view.flags.writeable = False
    return view
