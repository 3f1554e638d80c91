"""
Async action dispatcher for the admin user screen.

Each operation dispatches PENDING into the store, runs the blocking HTTP call in
a worker thread, then dispatches exactly one FULFILLED or REJECTED event.
Failures never escape: callers only see events and the store's state.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

from user_admin.domains.user_management.events import (
    MUTATION_OPERATIONS,
    LifecycleEvent,
    OperationKind,
    fulfilled,
    pending,
    rejected,
    reset_event,
)
from user_admin.domains.user_management.models import User
from user_admin.domains.user_management.store import UserManagementStore
from user_admin.infrastructure.api_client import ApiError, UserAdminApiClient, alert_from_headers
from user_admin.utils.logger import get_logger

logger = get_logger()

# Operation to start once the keyed operation has been fulfilled.
CHAINED_ON_SUCCESS: dict[OperationKind, OperationKind] = {
    OperationKind.CREATE_USER: OperationKind.FETCH_USERS,
    OperationKind.UPDATE_USER: OperationKind.FETCH_USERS,
    OperationKind.DELETE_USER: OperationKind.FETCH_USERS,
}


def build_list_params(
    page: int | None = None,
    size: int | None = None,
    sort: str | None = None,
) -> dict[str, Any]:
    """Query parameters for the user list; options left as None are omitted."""
    params: dict[str, Any] = {}
    if page is not None:
        params["page"] = page
    if size is not None:
        params["size"] = size
    if sort is not None:
        params["sort"] = sort
    return params


class UserManagementDispatcher:
    def __init__(self, store: UserManagementStore, client: UserAdminApiClient) -> None:
        self._store = store
        self._client = client
        self._follow_ups: dict[OperationKind, Callable[[], Awaitable[LifecycleEvent]]] = {
            OperationKind.FETCH_USERS: self.fetch_users,
        }
        self._alerts: dict[OperationKind, str] = {}

    @property
    def store(self) -> UserManagementStore:
        return self._store

    def alert_for(self, kind: OperationKind) -> str | None:
        """Server alert from the latest successful mutation of this kind, if it sent one."""
        return self._alerts.get(kind)

    async def _run(self, kind: OperationKind, call: Callable[..., Any], *args: Any) -> LifecycleEvent:
        self._store.dispatch(pending(kind))
        try:
            response = await asyncio.to_thread(call, *args)
        except ApiError as e:
            logger.warning("%s rejected: %s", kind.value, e)
            return self._store.dispatch(rejected(kind, str(e)))
        except Exception as e:
            logger.exception("%s failed unexpectedly: %s", kind.value, e)
            return self._store.dispatch(rejected(kind, f"Unexpected error: {e}"))

        event = self._store.dispatch(fulfilled(kind, response))
        if kind in MUTATION_OPERATIONS:
            alert = alert_from_headers(getattr(response, "headers", None))
            if alert:
                self._alerts[kind] = alert
                logger.info("%s: %s", kind.value, alert)
            else:
                self._alerts.pop(kind, None)

        follow_up = CHAINED_ON_SUCCESS.get(kind)
        if follow_up is not None:
            logger.debug("%s fulfilled, starting %s", kind.value, follow_up.value)
            await self._follow_ups[follow_up]()
        return event

    async def fetch_users(
        self,
        page: int | None = None,
        size: int | None = None,
        sort: str | None = None,
    ) -> LifecycleEvent:
        params = build_list_params(page, size, sort)
        return await self._run(OperationKind.FETCH_USERS, self._client.list_users, params)

    async def fetch_roles(self) -> LifecycleEvent:
        return await self._run(OperationKind.FETCH_ROLES, self._client.list_authorities)

    async def fetch_user(self, login: str) -> LifecycleEvent:
        return await self._run(OperationKind.FETCH_USER, self._client.get_user, login)

    async def create_user(self, user: User | None = None) -> LifecycleEvent:
        return await self._run(OperationKind.CREATE_USER, self._client.create_user, user)

    async def update_user(self, user: User) -> LifecycleEvent:
        return await self._run(OperationKind.UPDATE_USER, self._client.update_user, user)

    async def delete_user(self, login: str) -> LifecycleEvent:
        return await self._run(OperationKind.DELETE_USER, self._client.delete_user, login)

    def reset(self) -> LifecycleEvent:
        self._alerts.clear()
        return self._store.dispatch(reset_event())


def create_dispatcher(
    store: UserManagementStore | None = None,
    client: UserAdminApiClient | None = None,
) -> UserManagementDispatcher:
    """Wire a dispatcher from configuration, creating the store and client if not given."""
    return UserManagementDispatcher(store or UserManagementStore(), client or UserAdminApiClient())


__all__ = [
    "CHAINED_ON_SUCCESS",
    "UserManagementDispatcher",
    "build_list_params",
    "create_dispatcher",
]
