"""
Cooperative Scheduling
======================
This module contains the cancellable continuation used by the Engine.

Why is this file needed?
------------------------
1. Responsiveness: A long computation is cut into short batches. Between two
   batches control goes back to the Qt event loop so that commands
   (stop, setParam, getSolution) can be processed.
2. Cancellation: The continuation is an explicit handle. Once cancelled it is
   guaranteed never to run, even if its timer event was already queued.

Classes:
    DeferredCall: Zero-delay, single-shot, cancellable callback.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class DeferredCall(QObject):
    """
    Runs `callback` once, the next time the event loop is idle.

    A zero-interval QTimer fires only after the pending events have been
    processed, which makes it the lowest priority "run later" facility of Qt.
    """

    def __init__(self, callback: Callable[[], None], parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._callback = callback
        self._pending = False

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(0)
        self._timer.timeout.connect(self._fire)

    @property
    def is_pending(self) -> bool:
        return self._pending

    def schedule(self) -> None:
        """Arm the callback. Scheduling an already pending call is a no-op."""
        if self._pending:
            return
        self._pending = True
        self._timer.start()

    def cancel(self) -> None:
        """Disarm the callback. Safe to call when nothing is pending."""
        self._pending = False
        self._timer.stop()

    def _fire(self) -> None:
        # A timeout that was already queued when cancel() ran lands here
        if not self._pending:
            logger.debug("Dropped a cancelled continuation.")
            return
        self._pending = False
        self._callback()
