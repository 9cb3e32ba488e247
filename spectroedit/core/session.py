"""
Editing session for SpectroEdit.
Owns the spectral grid and its undo history, and records region
operations as undoable edits.
"""
from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, Optional

import numpy as np
from PyQt6.QtCore import QObject, pyqtSignal

from .config import UNDO_CONFIG
from .grid import SpectralGrid
from .region_edit import RegionEdit, RegionEditState
from .types import RegionOp
from .undo_manager import UndoManager
from ..utils.logger import logger


class EditSession(QObject):
    """
    A single editing session over one SpectralGrid.

    The session is the grid's owner: every edit it records references its
    grid, and the history is cleared whenever the grid is replaced.
    Observers of the old grid are told through gridReplaced and must
    reconnect to the new one.
    """
    gridReplaced = pyqtSignal(object)  # new SpectralGrid

    def __init__(self, grid: Optional[SpectralGrid] = None, max_depth: int = UNDO_CONFIG.max_depth):
        super().__init__()
        self.grid = grid if grid is not None else SpectralGrid()
        self.undo_manager = UndoManager(max_depth=max_depth)
        logger.info(f"EditSession initialized with {self.grid!r}")

    # --- Editing Operations ---

    @contextmanager
    def edit_region(
        self,
        first_frame: int,
        first_bin: int,
        frame_count: int,
        bin_count: int,
        description: str = "Edit region",
    ) -> Iterator[RegionEdit]:
        """
        Records whatever the with-block does to the region as one undoable edit.

        The block may call ``edit.capture_after()`` itself; otherwise it is
        captured on exit. If the block or the commit raises, the region is
        restored, nothing is pushed and the exception propagates.
        """
        edit = RegionEdit(self.grid, first_frame, first_bin, frame_count, bin_count, description)
        try:
            yield edit
            if edit.state is RegionEditState.CONSTRUCTED:
                edit.capture_after()
            self.undo_manager.push(edit)
        except Exception:
            logger.error(f"Operation '{description}' failed, rolling back region")
            _abandon(edit)
            raise
        self.grid.notify_region_changed(edit.get_region())

    def apply_to_region(
        self,
        func: RegionOp,
        first_frame: int,
        first_bin: int,
        frame_count: int,
        bin_count: int,
        description: Optional[str] = None,
        **kwargs,
    ) -> RegionEdit:
        """Runs a pure (frames, bins) -> (frames, bins) transform over a region."""
        description = description or getattr(func, "__name__", "Edit region")
        with self.edit_region(first_frame, first_bin, frame_count, bin_count, description) as edit:
            result = np.asarray(func(edit.before.copy(), **kwargs))
            if result.shape != (frame_count, bin_count):
                raise ValueError(
                    f"{description} returned shape {result.shape}, "
                    f"expected {(frame_count, bin_count)}"
                )
            for i, row in enumerate(result):
                self.grid.frame_at(first_frame + i).set_samples(first_bin, row)
        logger.debug(f"Applied {description} to {edit.get_region()}")
        return edit

    def undo(self) -> bool: return self.undo_manager.undo()
    def redo(self) -> bool: return self.undo_manager.redo()

    # --- Grid lifecycle ---

    def replace_grid(self, grid: SpectralGrid) -> None:
        """Swaps in a new grid; edits against the old one are discarded."""
        self.undo_manager.clear()
        self.grid = grid
        logger.info(f"Grid replaced with {grid!r}")
        self.gridReplaced.emit(grid)

    def clear(self) -> None:
        """Resets the session to an empty grid of the same resolution."""
        self.replace_grid(SpectralGrid(0, self.grid.bin_count))


def _abandon(edit: RegionEdit) -> None:
    """Puts the region back to its pre-edit values and discards the edit."""
    if edit.state is RegionEditState.CONSTRUCTED:
        edit.rollback()
        return
    if edit.can_undo:
        edit.undo()
    edit.die()
