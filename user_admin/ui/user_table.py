"""Streamlit UI helpers for the user table, user detail and status banners."""

from __future__ import annotations

from typing import Any, Iterable

import streamlit as st

from user_admin.domains.user_management.models import ViewState, user_login

COLUMNS = ("ID", "Login", "Email", "Name", "Activated", "Profiles", "Modified")


def _full_name(user: dict[str, Any]) -> str:
    parts = [user.get("firstName") or "", user.get("lastName") or ""]
    return " ".join(p for p in parts if p).strip()


def users_to_rows(users: Iterable[Any] | None) -> list[dict[str, Any]]:
    """Flatten API user objects into table rows. Non-dict entries are skipped."""
    rows: list[dict[str, Any]] = []
    for user in users or []:
        if not isinstance(user, dict):
            continue
        rows.append(
            {
                "ID": user.get("id", ""),
                "Login": user_login(user),
                "Email": user.get("email") or "",
                "Name": _full_name(user),
                "Activated": bool(user.get("activated", False)),
                "Profiles": ", ".join(user.get("authorities") or []),
                "Modified": user.get("lastModifiedDate") or "",
            }
        )
    return rows


def render_status(state: ViewState, notice: str | None = None, st=st) -> None:
    """Error box, success notice and progress caption for the current state.

    notice is a one-off success message kept by the page. A mutation's
    chained refetch clears update_success before the page renders.
    """
    if state.error_message:
        st.error(state.error_message)
    if notice or state.update_success:
        st.success(notice or "Saved.")
    if state.loading:
        st.caption("Loading…")
    if state.updating:
        st.caption("Saving…")


def render_user_table(state: ViewState, st=st) -> None:
    rows = users_to_rows(state.users)
    if not rows:
        st.info("No users found.")
        return
    st.dataframe(rows, column_order=COLUMNS, use_container_width=True, hide_index=True)
    st.caption(f"{state.total_items} user(s) in total")


def render_user_detail(user: dict[str, Any] | None, st=st) -> None:
    """Show one user's fields; nothing for the empty user."""
    if not user or not isinstance(user, dict):
        return
    st.markdown(f"### User [{user_login(user)}]")
    st.markdown(f"**Name:** {_full_name(user) or '-'}")
    st.markdown(f"**Email:** {user.get('email') or '-'}")
    st.markdown(f"**Language:** {user.get('langKey') or '-'}")
    st.markdown(f"**Activated:** {'yes' if user.get('activated') else 'no'}")
    st.markdown(f"**Profiles:** {', '.join(user.get('authorities') or []) or '-'}")
    if user.get("createdBy"):
        st.caption(f"Created by {user['createdBy']} on {user.get('createdDate') or '?'}")
    if user.get("lastModifiedBy"):
        st.caption(f"Modified by {user['lastModifiedBy']} on {user.get('lastModifiedDate') or '?'}")


__all__ = ["COLUMNS", "render_status", "render_user_detail", "render_user_table", "users_to_rows"]
