from __future__ import annotations

from .errors import CannotRedoError, CannotUndoError
from .types import RedoFunc, UndoFunc


class EditState:
    """
    Done/undone bookkeeping shared by undoable edit types.

    An edit starts out done (the change already happened before it was
    recorded) and alive. Undo is valid only while done, redo only while
    undone, and neither once the edit has been killed.
    """
    __slots__ = ('alive', 'has_been_done')

    def __init__(self):
        self.alive = True
        self.has_been_done = True

    @property
    def can_undo(self) -> bool:
        return self.alive and self.has_been_done

    @property
    def can_redo(self) -> bool:
        return self.alive and not self.has_been_done

    def mark_undone(self, description: str = "edit") -> None:
        if not self.can_undo:
            raise CannotUndoError(f"Cannot undo {description}")
        self.has_been_done = False

    def mark_redone(self, description: str = "edit") -> None:
        if not self.can_redo:
            raise CannotRedoError(f"Cannot redo {description}")
        self.has_been_done = True

    def kill(self) -> None:
        self.alive = False

    def __repr__(self) -> str:
        return f"EditState(alive={self.alive}, done={self.has_been_done})"


class CallbackEdit:
    """An undoable edit built from a pair of undo/redo callables."""

    def __init__(self, description: str, undo_func: UndoFunc, redo_func: RedoFunc):
        self.description = description
        self.undo_func = undo_func
        self.redo_func = redo_func
        self._state = EditState()

    @property
    def can_undo(self) -> bool:
        return self._state.can_undo

    @property
    def can_redo(self) -> bool:
        return self._state.can_redo

    def undo(self) -> None:
        if not self.can_undo:
            raise CannotUndoError(f"Cannot undo {self.description}")
        self.undo_func()
        self._state.mark_undone(self.description)

    def redo(self) -> None:
        if not self.can_redo:
            raise CannotRedoError(f"Cannot redo {self.description}")
        self.redo_func()
        self._state.mark_redone(self.description)

    def die(self) -> None:
        self._state.kill()
