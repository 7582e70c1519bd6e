from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .interfaces import Scheduler

log = logging.getLogger(__name__)


class DeferredAction:
    """Run ``action`` once after ``delay_ms`` unless cancelled first."""

    def __init__(
        self,
        scheduler: Optional[Scheduler],
        delay_ms: int,
        action: Callable[[], None],
    ) -> None:
        self.scheduler = scheduler
        self.delay_ms = delay_ms
        self.action = action
        self._after_id: Any = None

    @property
    def pending(self) -> bool:
        return self._after_id is not None

    def schedule(self) -> None:
        self.cancel()
        if self.scheduler is None or self.delay_ms <= 0:
            self.action()
            return
        self._after_id = self.scheduler.after(self.delay_ms, self._fire)

    def cancel(self) -> None:
        if self._after_id is not None:
            self.scheduler.after_cancel(self._after_id)
            self._after_id = None
            log.debug("Cancelled deferred action")

    def _fire(self) -> None:
        if self._after_id is None:
            return
        self._after_id = None
        self.action()
