"""Cooperative scheduling primitives shared by the terminal engines.

Everything in the terminal runs on one thread. Work that has to happen later
(race countdown ticks, the page change after a solved puzzle) or off the key
path (puzzle resource loading) is handed to a ``Scheduler``:

- ``call_later`` registers a callback and returns a cancellable handle.
- ``submit`` starts a coroutine and reports its outcome to ``on_done`` as
  ``(result, None)`` or ``(None, exc)``.

``AsyncioScheduler`` is backed by a running event loop and is what the CLI
uses. ``ManualScheduler`` keeps a virtual clock that only moves when told to,
which makes timing behaviour reproducible in tests.
"""
from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Iterator, List, Protocol, Tuple

Callback = Callable[[], None]
TaskFactory = Callable[[], Awaitable[Any]]
DoneCallback = Callable[[Any, "BaseException | None"], None]


class TimerHandle(Protocol):
    """Handle returned by ``Scheduler.call_later``."""

    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """The minimal event-loop surface the engines depend on."""

    def now(self) -> float:
        ...

    def call_later(self, delay: float, callback: Callback) -> TimerHandle:
        ...

    def submit(self, factory: TaskFactory, on_done: DoneCallback) -> None:
        ...


@dataclass(slots=True)
class ManualTimer:
    """Timer entry owned by ManualScheduler."""

    due: float
    callback: Callback
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass(slots=True)
class _PendingTask:
    factory: TaskFactory
    on_done: DoneCallback


@dataclass
class ManualScheduler:
    """Virtual-clock scheduler; time advances only through ``advance``."""

    current: float = 0.0
    _timers: List[Tuple[float, int, ManualTimer]] = field(default_factory=list)
    _tasks: List[_PendingTask] = field(default_factory=list)
    _counter: Iterator[int] = field(default_factory=itertools.count)

    def now(self) -> float:
        return self.current

    def call_later(self, delay: float, callback: Callback) -> ManualTimer:
        timer = ManualTimer(due=self.current + max(0.0, delay), callback=callback)
        heapq.heappush(self._timers, (timer.due, next(self._counter), timer))
        return timer

    def submit(self, factory: TaskFactory, on_done: DoneCallback) -> None:
        self._tasks.append(_PendingTask(factory=factory, on_done=on_done))

    @property
    def pending_timers(self) -> int:
        """Number of timers that are scheduled and not cancelled."""
        return sum(1 for _, _, timer in self._timers if not timer.cancelled)

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.current + seconds
        while self._timers and self._timers[0][0] <= target:
            due, _, timer = heapq.heappop(self._timers)
            self.current = due
            if not timer.cancelled:
                timer.callback()
        self.current = target

    def run_pending(self) -> None:
        """Run every submitted coroutine to completion and report outcomes."""
        while self._tasks:
            task = self._tasks.pop(0)
            try:
                result = asyncio.run(_await(task.factory))
            except Exception as exc:  # reported through on_done
                task.on_done(None, exc)
            else:
                task.on_done(result, None)


async def _await(factory: TaskFactory) -> Any:
    return await factory()


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._tasks: set[asyncio.Task[Any]] = set()

    def now(self) -> float:
        return self._loop.time()

    def call_later(self, delay: float, callback: Callback) -> asyncio.TimerHandle:
        return self._loop.call_later(delay, callback)

    def submit(self, factory: TaskFactory, on_done: DoneCallback) -> None:
        task = self._loop.create_task(_await(factory))
        self._tasks.add(task)

        def _finish(finished: asyncio.Task[Any]) -> None:
            self._tasks.discard(finished)
            if finished.cancelled():
                return
            exc = finished.exception()
            if exc is not None:
                on_done(None, exc)
            else:
                on_done(finished.result(), None)

        task.add_done_callback(_finish)
