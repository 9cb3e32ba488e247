"""
SpectroEdit Core Module

This module contains the core region-editing logic:
- SpectralGrid / Frame: Spectral data storage
- RegionEdit: Reversible edit of a rectangular region
- UndoManager: Undo/redo history
- EditSession: Grid ownership and undoable region operations
- region_ops: Pure region transforms
"""
from .grid import SpectralGrid
from .frame import Frame
from .region_edit import RegionEdit, RegionEditState
from .edit_state import CallbackEdit, EditState
from .undo_manager import UndoManager
from .session import EditSession
from .types import Region, UndoableEdit
from .errors import (
    SpectroEditError,
    InvalidRegionError,
    IllegalStateError,
    CannotUndoError,
    CannotRedoError,
    SnapshotStateError,
    GridIndexError,
    FrameIndexError,
    BinIndexError,
)
from .config import (
    GRID_CONFIG,
    SPECTROGRAM_CONFIG,
    UNDO_CONFIG,
)
from . import region_ops

__all__ = [
    # Main classes
    'SpectralGrid',
    'Frame',
    'RegionEdit',
    'RegionEditState',
    'CallbackEdit',
    'EditState',
    'UndoManager',
    'EditSession',
    'Region',
    'UndoableEdit',
    # Errors
    'SpectroEditError',
    'InvalidRegionError',
    'IllegalStateError',
    'CannotUndoError',
    'CannotRedoError',
    'SnapshotStateError',
    'GridIndexError',
    'FrameIndexError',
    'BinIndexError',
    # Config
    'GRID_CONFIG',
    'SPECTROGRAM_CONFIG',
    'UNDO_CONFIG',
    # Submodules
    'region_ops',
]
