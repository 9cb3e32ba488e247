from __future__ import annotations
from typing import Optional

from .config import UNDO_CONFIG
from .edit_state import CallbackEdit
from .errors import CannotUndoError
from .types import RedoFunc, UndoableEdit, UndoFunc
from ..utils.logger import logger


class UndoManager:
    """
    Undo/redo history as an explicit pair of stacks.

    Entries are any UndoableEdit. The manager consults an entry's
    can_undo/can_redo before invoking it, and kills entries it discards.
    """
    def __init__(self, max_depth: int = UNDO_CONFIG.max_depth):
        self.undo_stack: list[UndoableEdit] = []
        self.redo_stack: list[UndoableEdit] = []
        self.max_depth = max_depth

    def push(self, edit: UndoableEdit) -> None:
        """Records a completed edit; it must be undoable as pushed."""
        if not edit.can_undo:
            raise CannotUndoError(f"Refusing to record '{edit.description}': it cannot be undone")
        self.undo_stack.append(edit)
        if len(self.undo_stack) > self.max_depth:
            evicted = self.undo_stack.pop(0)
            evicted.die()
            logger.debug(f"Evicted oldest undo entry: {evicted.description}")
        for discarded in self.redo_stack:
            discarded.die()
        self.redo_stack.clear()
        logger.debug(f"Undo action pushed: {edit.description}")

    def push_action(self, description: str, undo_func: UndoFunc, redo_func: RedoFunc) -> None:
        self.push(CallbackEdit(description, undo_func, redo_func))

    def undo(self) -> bool:
        if not self.undo_stack:
            logger.debug("Nothing to undo")
            return False

        edit = self.undo_stack[-1]
        if not edit.can_undo:
            logger.warning(f"Undo not available for: {edit.description}")
            return False
        try:
            edit.undo()
        except Exception as e:
            logger.error(f"Error during undo of {edit.description}: {e}")
            return False
        self.redo_stack.append(self.undo_stack.pop())
        logger.info(f"Undo: {edit.description}")
        return True

    def redo(self) -> bool:
        if not self.redo_stack:
            logger.debug("Nothing to redo")
            return False

        edit = self.redo_stack[-1]
        if not edit.can_redo:
            logger.warning(f"Redo not available for: {edit.description}")
            return False
        try:
            edit.redo()
        except Exception as e:
            logger.error(f"Error during redo of {edit.description}: {e}")
            return False
        self.undo_stack.append(self.redo_stack.pop())
        logger.info(f"Redo: {edit.description}")
        return True

    def clear(self) -> None:
        for edit in self.undo_stack + self.redo_stack:
            edit.die()
        self.undo_stack.clear()
        self.redo_stack.clear()
        logger.debug("Undo/Redo stacks cleared")

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack) and self.undo_stack[-1].can_undo

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack) and self.redo_stack[-1].can_redo

    @property
    def undo_description(self) -> Optional[str]:
        return self.undo_stack[-1].description if self.undo_stack else None

    @property
    def redo_description(self) -> Optional[str]:
        return self.redo_stack[-1].description if self.redo_stack else None

    def __len__(self) -> int:
        return len(self.undo_stack)
