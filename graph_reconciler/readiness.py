"""
    Readiness handshake — wait for the renderer to finish initializing.

    The renderer is probed once immediately and then up to ``max_retries``
    more times, one probe per scheduler tick.  Nothing here sleeps: each
    retry is handed to a ``Scheduler`` so the event thread stays free.
    The outcome (``READY`` or ``TIMED_OUT``) is delivered exactly once.
"""
import asyncio
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Optional

from graph_api.plugins.base import RendererPlugin

from .config import ReadinessConfig

logger = logging.getLogger(__name__)


class ReadinessOutcome(Enum):
    PENDING = "pending"
    READY = "ready"
    TIMED_OUT = "timed_out"


class Scheduler(ABC):
    """Timer abstraction: run a callback later on the caller's event thread."""

    @abstractmethod
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> None:
        ...


class ImmediateScheduler(Scheduler):
    """Runs callbacks synchronously, ignoring the delay."""

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> None:
        callback()


class AsyncioScheduler(Scheduler):
    """
    Schedules callbacks on an asyncio event loop.

    The loop is bound at construction: pass it explicitly, or build the
    scheduler from code already running inside the loop.

    Raises:
        RuntimeError: If ``loop`` is omitted and no event loop is running.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop or asyncio.get_running_loop()

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> None:
        self._loop.call_later(delay_s, callback)


class ReadinessWaiter:
    """
    Polls ``renderer.is_ready()`` and ``renderer.has_update_entry_point()``.

    Usage:
        waiter = ReadinessWaiter(renderer, AsyncioScheduler(loop))
        waiter.start(lambda outcome: ...)
    """

    def __init__(self, renderer: RendererPlugin, scheduler: Scheduler,
                 config: Optional[ReadinessConfig] = None):
        self._renderer = renderer
        self._scheduler = scheduler
        self._config = config or ReadinessConfig()
        self._attempts = 0
        self._outcome = ReadinessOutcome.PENDING
        self._callbacks: List[Callable[[ReadinessOutcome], None]] = []
        self._started = False

    @property
    def outcome(self) -> ReadinessOutcome:
        return self._outcome

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def done(self) -> bool:
        return self._outcome is not ReadinessOutcome.PENDING

    def start(self, callback: Optional[Callable[[ReadinessOutcome], None]] = None) -> None:
        """
        Begin polling.  ``callback`` receives the terminal outcome; if the
        waiter already finished it is called right away.
        """
        if callback is not None:
            if self.done:
                callback(self._outcome)
                return
            self._callbacks.append(callback)

        if self._started:
            return
        self._started = True
        self._check()

    def _probe(self) -> bool:
        try:
            return bool(self._renderer.is_ready()) and bool(self._renderer.has_update_entry_point())
        except Exception as exc:
            logger.debug("Readiness probe failed: %s", exc)
            return False

    def _check(self) -> None:
        if self.done:
            return
        self._attempts += 1
        if self._probe():
            logger.info("Renderer ready after %d probe(s).", self._attempts)
            self._finish(ReadinessOutcome.READY)
        elif self._attempts > self._config.max_retries:
            logger.error("Renderer not ready after %d retries.", self._config.max_retries)
            self._finish(ReadinessOutcome.TIMED_OUT)
        else:
            self._scheduler.call_later(self._config.delay_seconds, self._check)

    def _finish(self, outcome: ReadinessOutcome) -> None:
        self._outcome = outcome
        callbacks, self._callbacks = self._callbacks, []
        for cb in callbacks:
            try:
                cb(outcome)
            except Exception as exc:
                logger.error("Readiness callback failed: %s", exc)
