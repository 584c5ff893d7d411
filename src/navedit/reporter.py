"""Best-effort forwarding of move records to an analytics sink."""

from __future__ import annotations

import asyncio
import logging

from navedit.gateway import AnalyticsSink
from navedit.schemas import MoveRecord

logger = logging.getLogger(__name__)


class ChangeReporter:
    """Sends each MoveRecord as a detached task.

    ``report`` never raises and never waits for the sink. Sink failures are
    logged and dropped. While ``offline`` is set, records are only logged.
    """

    def __init__(self, sink: AnalyticsSink | None, *, offline: bool = False) -> None:
        self.sink = sink
        self.offline = offline
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def report(self, record: MoveRecord) -> asyncio.Task[None] | None:
        """Schedule delivery of ``record`` and return the task, if any."""
        if self.offline or self.sink is None:
            logger.info("Move recorded locally: %s", record.to_wire())
            return None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("No running event loop; dropping move record %s", record.to_wire())
            return None

        task = loop.create_task(self._send(self.sink, record))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for every outstanding report to finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _send(self, sink: AnalyticsSink, record: MoveRecord) -> None:
        try:
            await sink.record_move(record)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Failed to report move %s: %s", record.to_wire(), exc)
