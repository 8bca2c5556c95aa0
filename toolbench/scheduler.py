"""Lazy evaluation of small computations that depend on one another."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List


class Task:
    """A function call whose arguments may be results of other tasks.

    The call runs at most once; its result is kept.
    """

    def __init__(self, func: Callable[..., Any], args: tuple) -> None:
        self.func = func
        self.args = args
        self._result: Any = None
        self._done = False

    def execute(self) -> Any:
        """Run the task if it has not run yet and return its result."""
        if not self._done:
            values = [
                arg._resolve() if isinstance(arg, FutureResult) else arg
                for arg in self.args
            ]
            self._result = self.func(*values)
            self._done = True
        return self._result

    def is_done(self) -> bool:
        return self._done


@dataclass(frozen=True)
class FutureResult:
    """Stands for a task's result when given as an argument to another task."""

    task: Task

    def _resolve(self) -> Any:
        return self.task.execute()


class TaskScheduler:
    """Collects tasks and runs them on demand or all at once."""

    def __init__(self) -> None:
        self._tasks: List[Task] = []

    def add(self, func: Callable[..., Any], *args: Any) -> Task:
        """Register ``func(*args)``; FutureResult arguments are resolved when run."""
        task = Task(func, args)
        self._tasks.append(task)
        return task

    def _check(self, task: Task) -> None:
        if not any(known is task for known in self._tasks):
            raise ValueError("task does not belong to this scheduler")

    def get_future_result(self, task: Task) -> FutureResult:
        """Return a placeholder for ``task``'s result."""
        self._check(task)
        return FutureResult(task)

    def get_result(self, task: Task) -> Any:
        """Return ``task``'s result, running it and its dependencies if needed."""
        self._check(task)
        return task.execute()

    def execute_all(self) -> None:
        """Run every task not yet run, in the order they were added."""
        for task in self._tasks:
            if not task.is_done():
                task.execute()