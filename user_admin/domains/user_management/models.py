"""
View-state and user models for the admin user screen.

Users are kept as the JSON objects the API returns. The reducer never looks
inside them, so only the helpers here know field names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

User = dict[str, Any]

TOTAL_COUNT_HEADER = "x-total-count"

ROLE_ADMIN = "ROLE_ADMIN"
ROLE_USER = "ROLE_USER"


def empty_user() -> User:
    return {}


def new_user(
    login: str,
    *,
    first_name: str = "",
    last_name: str = "",
    email: str = "",
    activated: bool = True,
    lang_key: str = "en",
    authorities: list[str] | None = None,
) -> User:
    """Build a user payload in the shape the API expects for create/update."""
    return {
        "login": login,
        "firstName": first_name,
        "lastName": last_name,
        "email": email,
        "activated": activated,
        "langKey": lang_key,
        "authorities": list(authorities) if authorities is not None else [ROLE_USER],
    }


def user_login(user: Mapping[str, Any] | None) -> str:
    if not user:
        return ""
    return str(user.get("login") or "")


@dataclass(frozen=True)
class ApiResponse:
    """Body and headers of one API response; the payload of FULFILLED events."""

    data: Any = None
    headers: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ViewState:
    """Everything the admin user screen renders. Replaced, never mutated in place."""

    loading: bool = False
    error_message: str | None = None
    users: list[User] = field(default_factory=list)
    authorities: list[str] = field(default_factory=list)
    user: User = field(default_factory=empty_user)
    updating: bool = False
    update_success: bool = False
    total_items: int = 0


def initial_state() -> ViewState:
    return ViewState()


__all__ = [
    "ApiResponse",
    "ROLE_ADMIN",
    "ROLE_USER",
    "TOTAL_COUNT_HEADER",
    "User",
    "ViewState",
    "empty_user",
    "initial_state",
    "new_user",
    "user_login",
]
