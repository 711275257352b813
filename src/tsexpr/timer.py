"""Step timer threaded through evaluation for instrumentation."""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar

T = TypeVar("T")


class Timer(Protocol):
    def step(self, name: str, fn: Callable[["Timer"], T]) -> T:
        """Run ``fn`` as a named step and return its result."""
        ...


class NullTimer:
    """Timer that records nothing."""

    def step(self, name: str, fn: Callable[[Timer], T]) -> T:
        return fn(self)
