"""
Pure reducer for the admin user screen: (ViewState, LifecycleEvent) -> ViewState.

No IO and no mutation; each branch returns a new ViewState built with
dataclasses.replace. Events it does not recognise leave the state unchanged.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping

from user_admin.domains.user_management.events import (
    MUTATION_OPERATIONS,
    READ_OPERATIONS,
    LifecycleEvent,
    OperationKind,
    Phase,
)
from user_admin.domains.user_management.models import (
    TOTAL_COUNT_HEADER,
    ViewState,
    empty_user,
    initial_state,
)


def _payload_data(payload: Any) -> Any:
    if isinstance(payload, Mapping):
        return payload.get("data")
    return getattr(payload, "data", None)


def _payload_headers(payload: Any) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        headers = payload.get("headers")
    else:
        headers = getattr(payload, "headers", None)
    return headers if isinstance(headers, Mapping) else {}


def _total_count(headers: Mapping[str, Any]) -> int:
    raw = headers.get(TOTAL_COUNT_HEADER)
    if raw is None:
        # Plain dicts are case-sensitive; requests' header dict is not.
        for k, v in headers.items():
            if str(k).lower() == TOTAL_COUNT_HEADER:
                raw = v
                break
    try:
        return int(raw)
    except (TypeError, ValueError):
        return 0


def _on_pending(state: ViewState, kind: OperationKind) -> ViewState:
    if kind in READ_OPERATIONS:
        return replace(state, loading=True, error_message=None, update_success=False)
    if kind in MUTATION_OPERATIONS:
        return replace(state, updating=True, error_message=None, update_success=False)
    return state


def _on_rejected(state: ViewState, message: Any) -> ViewState:
    return replace(
        state,
        loading=False,
        updating=False,
        update_success=False,
        error_message=message,
    )


def _on_fulfilled(state: ViewState, kind: OperationKind, payload: Any) -> ViewState:
    if kind is OperationKind.FETCH_USERS:
        return replace(
            state,
            loading=False,
            users=_payload_data(payload),
            total_items=_total_count(_payload_headers(payload)),
        )
    if kind is OperationKind.FETCH_USER:
        return replace(state, loading=False, user=_payload_data(payload))
    if kind is OperationKind.FETCH_ROLES:
        return replace(state, loading=False, authorities=_payload_data(payload))
    if kind in (OperationKind.CREATE_USER, OperationKind.UPDATE_USER):
        return replace(
            state,
            updating=False,
            update_success=True,
            user=_payload_data(payload),
        )
    if kind is OperationKind.DELETE_USER:
        return replace(state, updating=False, update_success=True, user=empty_user())
    return state


def reduce(state: ViewState | None, event: Any) -> ViewState:
    """
    Fold one lifecycle event into the view state.

    Args:
        state: Current state. None means the initial state.
        event: A LifecycleEvent. Anything else is ignored.

    Returns:
        The next state; the same object when the event does not apply.
    """
    if state is None:
        state = initial_state()
    if not isinstance(event, LifecycleEvent):
        return state

    if event.kind is OperationKind.RESET:
        return initial_state()
    if event.phase is Phase.PENDING:
        return _on_pending(state, event.kind)
    if event.phase is Phase.REJECTED:
        return _on_rejected(state, event.payload)
    if event.phase is Phase.FULFILLED:
        return _on_fulfilled(state, event.kind, event.payload)
    return state


__all__ = ["reduce"]
