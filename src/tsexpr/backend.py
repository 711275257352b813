"""Boundary types shared with the time-series backend.

The evaluator only accumulates :class:`Request` values; executing them is
left to the :class:`Context` supplied by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .tags import TagGroup


@dataclass(frozen=True)
class Query:
    metric: str
    aggregator: str
    tags: TagGroup = field(default_factory=TagGroup)
    downsample: str | None = None
    rate: bool = False

    def __str__(self) -> str:
        parts = [self.aggregator]
        if self.downsample:
            parts.append(self.downsample)
        if self.rate:
            parts.append("rate")
        text = ":".join(parts) + ":" + self.metric
        if self.tags:
            text += str(self.tags)
        return text

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {
            "aggregator": self.aggregator,
            "metric": self.metric,
            "rate": self.rate,
        }
        if self.downsample:
            out["downsample"] = self.downsample
        if self.tags:
            out["tags"] = self.tags.to_dict()
        return out


@dataclass(frozen=True)
class Request:
    start: str
    queries: tuple[Query, ...] = ()
    end: str | None = None

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {
            "start": self.start,
            "queries": [q.to_dict() for q in self.queries],
        }
        if self.end is not None:
            out["end"] = self.end
        return out


class Context(Protocol):
    """Query context used by builtins to resolve backend data."""

    def query(self, request: Request) -> object:
        ...
