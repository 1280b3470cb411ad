import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def running_loop() -> Optional[asyncio.AbstractEventLoop]:
    """Return the running event loop, or None when called outside one."""
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class IntervalTimer:
    """
    Repeating callback on the running event loop.

    The callback runs every `interval` seconds until cancel() is called.
    Starting an already running timer restarts it, so at most one task
    is ever firing.
    """

    def __init__(self, interval: float, callback: Callable[[], None]):
        self.interval = interval
        self.callback = callback
        self._task: Optional[asyncio.Task] = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> bool:
        """
        Start ticking. Returns False if there is no running event loop,
        in which case the caller has to drive the callback itself.
        """
        self.cancel()
        loop = running_loop()
        if loop is None:
            logger.debug("No running event loop; timer not started")
            return False
        self._task = loop.create_task(self._run())
        return True

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.callback()
