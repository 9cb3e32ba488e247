"""
Exception taxonomy for SpectroEdit.

Every error here is a contract violation by the caller, not a transient
runtime condition; nothing is retried.
"""


class SpectroEditError(Exception):
    """Base class for all SpectroEdit errors."""


class InvalidRegionError(SpectroEditError, ValueError):
    """A region edit was requested over an empty rectangle."""


class IllegalStateError(SpectroEditError, RuntimeError):
    """An edit was driven outside its permitted state transitions."""


class CannotUndoError(IllegalStateError):
    pass


class CannotRedoError(IllegalStateError):
    pass


class SnapshotStateError(IllegalStateError):
    """The post-edit snapshot was captured twice, or used before capture."""


class GridIndexError(SpectroEditError, IndexError):
    """A frame or bin index fell outside the grid."""


class FrameIndexError(GridIndexError):
    pass


class BinIndexError(GridIndexError):
    pass
