"""
User administration console — Streamlit UI entry point.
"""

import asyncio

import streamlit as st

# Load .env first so API settings are picked up before clients are built
from user_admin.utils.config import load_config, api_base_url, api_token, users_page_size
load_config()

from user_admin.domains.user_management.events import OperationKind, Phase
from user_admin.domains.user_management.models import ROLE_ADMIN, ROLE_USER, new_user, user_login
from user_admin.domains.user_management.pagination import page_count, parse_sort, sort_param
from user_admin.orchestration.dispatcher import create_dispatcher
from user_admin.ui.user_table import render_status, render_user_detail, render_user_table
from user_admin.utils.logger import configure_logging, get_logger

configure_logging()
log = get_logger()

st.set_page_config(page_title="User administration", layout="wide")
st.title("Users")


def run(coro):
    """Drive one dispatcher coroutine to completion from a Streamlit rerun."""
    return asyncio.run(coro)


# One store + dispatcher per browser session
if "dispatcher" not in st.session_state:
    st.session_state.dispatcher = create_dispatcher()
    st.session_state.page = 0
    st.session_state.sort = sort_param("id", ascending=True)
    st.session_state.editing = None
    st.session_state.notice = None
    run(st.session_state.dispatcher.fetch_roles())
    run(st.session_state.dispatcher.fetch_users(0, users_page_size(), st.session_state.sort))

dispatcher = st.session_state.dispatcher
page_size = users_page_size()


def refresh_page() -> None:
    run(dispatcher.fetch_users(st.session_state.page, page_size, st.session_state.sort))


with st.sidebar:
    st.header("Settings")
    token = api_token()
    st.caption(f"API: `{api_base_url()}`")
    st.caption("Auth: bearer token" if token else "Auth: none")
    if st.button("Reset view", use_container_width=True):
        dispatcher.reset()
        st.session_state.editing = None
        st.session_state.page = 0
        st.rerun()
    if st.button("Reload", use_container_width=True):
        run(dispatcher.fetch_roles())
        refresh_page()
        st.rerun()

    st.subheader("Sort")
    field, ascending = parse_sort(st.session_state.sort)
    fields = ["id", "login", "email", "lastModifiedDate"]
    new_field = st.selectbox("Field", fields, index=fields.index(field) if field in fields else 0)
    new_asc = st.toggle("Ascending", value=ascending)
    new_sort = sort_param(new_field, new_asc)
    if new_sort != st.session_state.sort:
        st.session_state.sort = new_sort
        refresh_page()
        st.rerun()

state = dispatcher.store.state
render_status(state, notice=st.session_state.pop("notice", None))

# --- User table and paging ---
render_user_table(state)
pages = page_count(state.total_items, page_size)
col_prev, col_page, col_next = st.columns([1, 2, 1])
with col_prev:
    if st.button("‹ Previous", disabled=st.session_state.page <= 0):
        st.session_state.page -= 1
        refresh_page()
        st.rerun()
with col_page:
    st.caption(f"Page {st.session_state.page + 1} of {pages}")
with col_next:
    if st.button("Next ›", disabled=st.session_state.page + 1 >= pages):
        st.session_state.page += 1
        refresh_page()
        st.rerun()

st.divider()

# --- Single user: view, edit, delete ---
logins = [user_login(u) for u in (state.users or []) if isinstance(u, dict)]
col_pick, col_actions = st.columns([2, 3])
with col_pick:
    selected = st.selectbox("User", [""] + logins, format_func=lambda x: x or "(select a user)")
with col_actions:
    c_view, c_edit, c_delete, c_new = st.columns(4)
    if c_view.button("View", disabled=not selected):
        run(dispatcher.fetch_user(selected))
        st.session_state.editing = None
        st.rerun()
    if c_edit.button("Edit", disabled=not selected):
        run(dispatcher.fetch_user(selected))
        st.session_state.editing = "update"
        st.rerun()
    if c_delete.button("Delete", disabled=not selected or selected == "admin"):
        result = run(dispatcher.delete_user(selected))
        if result.phase is Phase.FULFILLED:
            st.session_state.notice = dispatcher.alert_for(OperationKind.DELETE_USER) or f"User {selected} deleted."
        st.session_state.editing = None
        st.rerun()
    if c_new.button("Create a new user"):
        st.session_state.editing = "create"
        st.rerun()

state = dispatcher.store.state
if st.session_state.editing is None:
    render_user_detail(state.user)
else:
    creating = st.session_state.editing == "create"
    current = {} if creating else (state.user or {})
    roles = list(state.authorities or [ROLE_USER, ROLE_ADMIN])
    with st.form("user_form"):
        st.markdown("### Create a user" if creating else f"### Edit user [{user_login(current)}]")
        login = st.text_input("Login", value=user_login(current), disabled=not creating)
        first_name = st.text_input("First name", value=current.get("firstName") or "")
        last_name = st.text_input("Last name", value=current.get("lastName") or "")
        email = st.text_input("Email", value=current.get("email") or "")
        activated = st.checkbox("Activated", value=bool(current.get("activated", True)))
        lang_key = st.text_input("Language", value=current.get("langKey") or "en")
        authorities = st.multiselect(
            "Profiles",
            roles,
            default=[a for a in (current.get("authorities") or [ROLE_USER]) if a in roles],
        )
        submitted = st.form_submit_button("Save")
        cancelled = st.form_submit_button("Cancel")

    if cancelled:
        st.session_state.editing = None
        st.rerun()
    if submitted:
        payload = dict(current)
        payload.update(
            new_user(
                login.strip(),
                first_name=first_name.strip(),
                last_name=last_name.strip(),
                email=email.strip(),
                activated=activated,
                lang_key=lang_key.strip(),
                authorities=authorities,
            )
        )
        if creating:
            result = run(dispatcher.create_user(payload))
        else:
            result = run(dispatcher.update_user(payload))
        # The chained refetch has already cleared update_success by now
        if result.phase is Phase.FULFILLED:
            st.session_state.editing = None
            st.session_state.notice = dispatcher.alert_for(result.kind) or "User saved."
            log.info("Saved user %s", payload.get("login"))
        st.rerun()
