"""
Tests for user_table: row formatting and status rendering.
"""

from __future__ import annotations

from dataclasses import replace
from unittest.mock import MagicMock

from user_admin.domains.user_management.models import initial_state, new_user
from user_admin.ui.user_table import render_status, render_user_detail, render_user_table, users_to_rows


def test_users_to_rows() -> None:
    user = new_user("jdoe", first_name="John", last_name="Doe", email="j@x.io", authorities=["ROLE_USER", "ROLE_ADMIN"])
    user["id"] = 3
    rows = users_to_rows([user, "not a user"])
    assert rows == [
        {
            "ID": 3,
            "Login": "jdoe",
            "Email": "j@x.io",
            "Name": "John Doe",
            "Activated": True,
            "Profiles": "ROLE_USER, ROLE_ADMIN",
            "Modified": "",
        }
    ]
    assert users_to_rows(None) == []


def test_render_status() -> None:
    st = MagicMock()
    render_status(replace(initial_state(), error_message="down"), st=st)
    st.error.assert_called_once_with("down")
    st.success.assert_not_called()

    st = MagicMock()
    render_status(replace(initial_state(), update_success=True), notice="A user is created", st=st)
    st.success.assert_called_once_with("A user is created")
    st.error.assert_not_called()


def test_render_user_table_empty() -> None:
    st = MagicMock()
    render_user_table(initial_state(), st=st)
    st.info.assert_called_once()
    st.dataframe.assert_not_called()


def test_render_user_detail_skips_empty_user() -> None:
    st = MagicMock()
    render_user_detail({}, st=st)
    st.markdown.assert_not_called()
    render_user_detail(new_user("bob"), st=st)
    assert "bob" in st.markdown.call_args_list[0].args[0]
