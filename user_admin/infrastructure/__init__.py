"""Infrastructure layer: IO against the remote user-admin API."""
