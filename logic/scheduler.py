"""
Deferred tasks for Vanish TicTacToe.

The session uses these for the pause before the bot moves and the pause
before a finished round is cleared. Everything runs on one thread: a
scheduler only decides *when* a callback runs, never runs two at once.
"""

import itertools
from typing import Callable, Optional, List


class DeferredTask:
    """
    A single-shot callback that can be cancelled before it fires.
    """

    def __init__(self, due: float, callback: Callable[[], None], name: str = ""):
        self.due = due
        self.callback = callback
        self.name = name or getattr(callback, "__name__", "task")
        self.cancelled = False
        self.fired = False
        self.seq = 0
        self.on_cancel: Optional[Callable[[], None]] = None

    @property
    def is_pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self):
        """Cancel the task. Does nothing if it already ran."""
        if not self.is_pending:
            return
        self.cancelled = True
        if self.on_cancel is not None:
            self.on_cancel()

    def run(self):
        if not self.is_pending:
            return
        self.fired = True
        self.callback()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "fired" if self.fired else "pending"
        return f"DeferredTask({self.name!r}, due={self.due:.2f}, {state})"


class Scheduler:
    """Interface the session schedules its deferred work through."""

    def call_later(self, delay: float, callback: Callable[[], None], name: str = "") -> DeferredTask:
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """
    Scheduler driven by an explicit clock.

    Tests move the clock with advance(); the console front-end calls
    run_next(sleep=time.sleep) to wait out each delay for real.
    """

    def __init__(self):
        self.now = 0.0
        self._tasks: List[DeferredTask] = []
        self._order = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None], name: str = "") -> DeferredTask:
        task = DeferredTask(self.now + max(delay, 0.0), callback, name)
        task.seq = next(self._order)
        self._tasks.append(task)
        return task

    @property
    def pending(self) -> List[DeferredTask]:
        """Pending tasks, earliest first."""
        self._tasks = [t for t in self._tasks if t.is_pending]
        return sorted(self._tasks, key=lambda t: (t.due, t.seq))

    def _pop_next(self, until: Optional[float]) -> Optional[DeferredTask]:
        pending = self.pending
        if not pending:
            return None
        task = pending[0]
        if until is not None and task.due > until:
            return None
        return task

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and run every task that comes due.

        Returns:
            Number of tasks run.
        """
        target = self.now + seconds
        ran = 0
        task = self._pop_next(target)
        while task is not None:
            self.now = max(self.now, task.due)
            task.run()
            ran += 1
            task = self._pop_next(target)
        self.now = target
        return ran

    def run_next(self, sleep: Optional[Callable[[float], None]] = None) -> bool:
        """
        Run the earliest pending task, waiting for it first if `sleep` is given.

        Args:
            sleep: Called with the wait (e.g. time.sleep); None skips waiting.

        Returns:
            True if a task ran.
        """
        task = self._pop_next(None)
        if task is None:
            return False

        wait = task.due - self.now
        if wait > 0 and sleep is not None:
            sleep(wait)
        self.now = max(self.now, task.due)
        task.run()
        return True
