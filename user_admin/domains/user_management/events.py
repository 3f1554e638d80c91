"""
Lifecycle events emitted around each remote operation.

Every operation produces PENDING followed by exactly one of FULFILLED or
REJECTED. RESET is a standalone signal with no phase.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class OperationKind(str, Enum):
    FETCH_USERS = "FETCH_USERS"
    FETCH_USER = "FETCH_USER"
    FETCH_ROLES = "FETCH_ROLES"
    CREATE_USER = "CREATE_USER"
    UPDATE_USER = "UPDATE_USER"
    DELETE_USER = "DELETE_USER"
    RESET = "RESET"


class Phase(str, Enum):
    PENDING = "PENDING"
    FULFILLED = "FULFILLED"
    REJECTED = "REJECTED"


READ_OPERATIONS = frozenset(
    {OperationKind.FETCH_USERS, OperationKind.FETCH_USER, OperationKind.FETCH_ROLES}
)
MUTATION_OPERATIONS = frozenset(
    {OperationKind.CREATE_USER, OperationKind.UPDATE_USER, OperationKind.DELETE_USER}
)


@dataclass(frozen=True)
class LifecycleEvent:
    kind: OperationKind
    phase: Phase | None = None
    payload: Any = None

    @property
    def type(self) -> str:
        """Action-style tag, e.g. "FETCH_USERS_PENDING" or "RESET"."""
        if self.phase is None:
            return self.kind.value
        return f"{self.kind.value}_{self.phase.value}"


def pending(kind: OperationKind) -> LifecycleEvent:
    return LifecycleEvent(kind, Phase.PENDING)


def fulfilled(kind: OperationKind, payload: Any = None) -> LifecycleEvent:
    return LifecycleEvent(kind, Phase.FULFILLED, payload)


def rejected(kind: OperationKind, message: str) -> LifecycleEvent:
    return LifecycleEvent(kind, Phase.REJECTED, message)


def reset_event() -> LifecycleEvent:
    return LifecycleEvent(OperationKind.RESET)


__all__ = [
    "LifecycleEvent",
    "MUTATION_OPERATIONS",
    "OperationKind",
    "Phase",
    "READ_OPERATIONS",
    "fulfilled",
    "pending",
    "rejected",
    "reset_event",
]
