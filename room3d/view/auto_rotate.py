"""Timer-driven turntable rotation of the view."""

import asyncio
import logging
from typing import Callable, Optional

from .state import ViewState

logger = logging.getLogger(__name__)


class AutoRotator:
    """Spins a ViewState around its vertical axis on a periodic timer.

    Runs as an asyncio task on the same event loop that renders, so each
    step lands between frames. Only one rotation runs at a time: starting a
    new one cancels the previous task first.
    """

    def __init__(
        self,
        view: ViewState,
        interval: float = 0.05,
        step: float = 2.0,
        on_tick: Optional[Callable[[ViewState], None]] = None,
    ):
        """
        Initialize the rotator.

        Args:
            view: View state to mutate
            interval: Seconds between steps
            step: Degrees of yaw per step
            on_tick: Optional callback after each step (e.g. a repaint trigger)
        """
        if interval <= 0:
            raise ValueError("Auto-rotate interval must be positive")
        self.view = view
        self.interval = interval
        self.step = step
        self.on_tick = on_tick
        self.direction = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self) -> float:
        """Advance one step in the current direction; returns the new yaw."""
        self.view.spin(self.direction * self.step)
        if self.on_tick is not None:
            self.on_tick(self.view)
        return self.view.rotation_y

    def start(self, direction: int) -> asyncio.Task:
        """Start rotating. ``direction`` is 1 (right) or -1 (left).

        Must be called from a running event loop.
        """
        if direction not in (1, -1):
            raise ValueError(f"Direction must be 1 or -1, got {direction}")
        self.stop()
        self.direction = direction
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info(f"Auto-rotate started (direction={direction})")
        return self._task

    def stop(self) -> bool:
        """Cancel the running rotation. Returns True if one was running."""
        task, self._task = self._task, None
        if task is None or task.done():
            return False
        task.cancel()
        logger.info("Auto-rotate stopped")
        return True

    async def _run(self) -> None:
        try:
            while True:
                await asyncio.sleep(self.interval)
                self.tick()
        except asyncio.CancelledError:
            logger.debug("Auto-rotate task cancelled")
            raise
