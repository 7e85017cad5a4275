"""
erp_console.navigation

Router boundary used by the session gate.

Responsibilities:
- Define the `Router` protocol (`navigate(path)`).
- Provide an in-memory history router for hosts without a browser history.
"""

from __future__ import annotations

from typing import Protocol

LOGIN_PATH = "/auth/login"


class Router(Protocol):
    def navigate(self, path: str) -> None: ...


class HistoryRouter:
    """
    Keeps a list of visited paths. Navigating to the current path is a no-op.
    """

    def __init__(self, current_path: str = "/") -> None:
        self.current_path = current_path
        self.history: list[str] = [current_path]

    def navigate(self, path: str) -> None:
        if path == self.current_path:
            return
        self.current_path = path
        self.history.append(path)

    @property
    def navigations(self) -> list[str]:
        return self.history[1:]


# --- Module Notes -----------------------------------------------------------
# The web layer uses `HistoryRouter` per request and turns a navigation into an
# HTTP redirect (see `web.deps.require_session`).
