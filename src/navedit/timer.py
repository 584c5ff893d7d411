"""Cancelable one-shot timer used for the sustained-press gesture."""

from __future__ import annotations

import asyncio
from typing import Callable, Protocol


class DwellTimer(Protocol):
    """A one-shot timer that can be cancelled before it fires."""

    @property
    def pending(self) -> bool: ...

    def start(self, delay_s: float, callback: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


class AsyncioDwellTimer:
    """DwellTimer backed by ``loop.call_later``.

    Starting again replaces any schedule that has not fired yet.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self, delay_s: float, callback: Callable[[], None]) -> None:
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()

        def fire() -> None:
            self._handle = None
            callback()

        self._handle = loop.call_later(delay_s, fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
