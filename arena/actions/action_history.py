"""
Action history module for the arena.

Executes actions and keeps them on a last-in-first-out stack so they can be
undone in reverse order.
"""

from arena.core.logging import log_debug

from .base_action import BaseAction


class ActionHistory:
    """
    Invoker for executing and undoing actions.

    The stack always holds exactly the executed actions that have not been
    undone yet, most recent last.
    """

    def __init__(self) -> None:
        self._stack: list[BaseAction] = []

    def execute(self, action: BaseAction) -> BaseAction:
        """
        Executes the action and pushes it onto the history.

        If the action raises, nothing is pushed.

        Returns:
            BaseAction: The executed action.

        """
        action.execute()
        self._stack.append(action)
        return action

    def undo_last(self) -> BaseAction | None:
        """
        Pops the most recent action and undoes it.

        Returns:
            BaseAction | None: The undone action, or None if the history was
            empty.

        """
        if not self._stack:
            log_debug("Nothing to undo")
            return None
        action = self._stack.pop()
        action.undo()
        return action

    def history(self) -> tuple[BaseAction, ...]:
        """Returns a read-only snapshot of the history in execution order."""
        return tuple(self._stack)

    def clear(self) -> None:
        """Forgets every action without undoing any of them."""
        self._stack.clear()

    def has_actions_to_undo(self) -> bool:
        return bool(self._stack)

    def __len__(self) -> int:
        return len(self._stack)
