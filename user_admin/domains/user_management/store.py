"""
Session-scoped container for the admin user screen's view state.

One store per UI session. The reducer is the only thing that computes new
state; dispatch() is the only way to get an event to it.
"""

from __future__ import annotations

from typing import Callable

from user_admin.domains.user_management.events import LifecycleEvent
from user_admin.domains.user_management.models import ViewState, initial_state
from user_admin.domains.user_management.reducer import reduce
from user_admin.utils.logger import get_logger

logger = get_logger()

Listener = Callable[[LifecycleEvent, ViewState], None]


class UserManagementStore:
    def __init__(self, initial: ViewState | None = None) -> None:
        self._state = initial if initial is not None else initial_state()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def dispatch(self, event: LifecycleEvent) -> LifecycleEvent:
        """
        Apply one event, then notify listeners with the resulting state.

        A failing listener is logged and skipped; the new state is kept and the
        remaining listeners still run.
        """
        self._state = reduce(self._state, event)
        logger.debug("Applied %s", getattr(event, "type", event))
        for listener in list(self._listeners):
            try:
                listener(event, self._state)
            except Exception as e:
                logger.exception("Listener %r failed on %s: %s", listener, getattr(event, "type", event), e)
        return event

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        self._listeners.clear()


__all__ = ["Listener", "UserManagementStore"]
