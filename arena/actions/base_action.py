"""
Base action module for the arena.

Defines the base class for reversible actions. An action captures what it
needs to reverse itself from the state change it actually observed, and can
be undone exactly once after being executed.
"""

from typing import Any

from pydantic import BaseModel, PrivateAttr

from arena.core.error_handling import ActionStateError
from arena.core.logging import log_debug


class BaseAction(BaseModel):
    """Base class for all reversible combat actions.

    Subclasses implement `_apply` and `_revert`. The public `execute` and
    `undo` methods enforce the lifecycle: execute once, then undo at most once.
    """

    _executed: bool = PrivateAttr(default=False)
    _undone: bool = PrivateAttr(default=False)

    @property
    def description(self) -> str:
        """Human-readable summary of the action."""
        raise NotImplementedError("Subclasses must implement description")

    @property
    def executed(self) -> bool:
        return self._executed

    @property
    def undone(self) -> bool:
        return self._undone

    def execute(self) -> Any:
        """Executes the action.

        Returns:
            Any: Whatever the concrete action reports (e.g. damage dealt).

        Raises:
            ActionStateError: If the action was already executed.

        """
        if self._executed:
            raise ActionStateError(f"Action already executed: {self.description}")
        result = self._apply()
        self._executed = True
        log_debug(f"Executed: {self.description}", {"result": result})
        return result

    def undo(self) -> None:
        """Reverses the action.

        Raises:
            ActionStateError: If the action was never executed or was already
            undone.

        """
        if not self._executed:
            raise ActionStateError(f"Cannot undo an action that never ran: {self.description}")
        if self._undone:
            raise ActionStateError(f"Action already undone: {self.description}")
        self._revert()
        self._undone = True
        log_debug(f"Undone: {self.description}")

    def _apply(self) -> Any:
        raise NotImplementedError("Subclasses must implement _apply")

    def _revert(self) -> None:
        raise NotImplementedError("Subclasses must implement _revert")

    def __str__(self) -> str:
        return self.description
