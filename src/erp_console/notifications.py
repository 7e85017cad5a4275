"""
erp_console.notifications

User-facing notification sink.

Responsibilities:
- Define the `NotificationSink` protocol (`success`, `error`).
- Provide `ToastQueue`, a sink that buffers toasts for the current view and logs them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

from erp_console.observability.logging import get_logger

log = get_logger(__name__)


class NotificationSink(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


@dataclass(frozen=True, slots=True)
class Toast:
    level: Literal["success", "error"]
    message: str


class ToastQueue:
    def __init__(self) -> None:
        self._pending: list[Toast] = []

    def success(self, message: str) -> None:
        self._push(Toast(level="success", message=message))

    def error(self, message: str) -> None:
        self._push(Toast(level="error", message=message))

    def _push(self, toast: Toast) -> None:
        log.info("toast", level=toast.level, message=toast.message)
        self._pending.append(toast)

    @property
    def pending(self) -> tuple[Toast, ...]:
        return tuple(self._pending)

    def drain(self) -> list[Toast]:
        toasts, self._pending = self._pending, []
        return toasts


# --- Module Notes -----------------------------------------------------------
# Toasts are fire-and-forget: nothing waits on acknowledgment or retries delivery.
