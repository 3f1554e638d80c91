"""User management domain: view state, lifecycle events, reducer and store."""

from user_admin.domains.user_management.events import (
    LifecycleEvent,
    OperationKind,
    Phase,
    fulfilled,
    pending,
    rejected,
    reset_event,
)
from user_admin.domains.user_management.models import (
    ApiResponse,
    ViewState,
    empty_user,
    initial_state,
    new_user,
)
from user_admin.domains.user_management.reducer import reduce
from user_admin.domains.user_management.store import UserManagementStore

__all__ = [
    "ApiResponse",
    "LifecycleEvent",
    "OperationKind",
    "Phase",
    "UserManagementStore",
    "ViewState",
    "empty_user",
    "fulfilled",
    "initial_state",
    "new_user",
    "pending",
    "reduce",
    "rejected",
    "reset_event",
]
