"""Admin console for a remote user-administration API.

Layers:
- domains: view state, lifecycle events, the reducer and the state store
- infrastructure: HTTP client for the remote API
- orchestration: the async action dispatcher
- ui: Streamlit rendering helpers
"""

__version__ = "0.1.0"
