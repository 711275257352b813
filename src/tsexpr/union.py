"""Group union: pairing results from both sides of a binary operator."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .tags import TagGroup
from .values import Computation, Result, Value


@dataclass
class Union:
    """A compatible pair of operand values and the group they combine into."""

    a: Value
    b: Value
    group: TagGroup = field(default_factory=TagGroup)
    computations: list[Computation] = field(default_factory=list)

    def extend_computations(self, result: Result) -> None:
        self.computations.extend(result.computations)


def combinable(ga: TagGroup, gb: TagGroup) -> bool:
    return resolve_group(ga, gb) is not None


def resolve_group(ga: TagGroup, gb: TagGroup) -> TagGroup | None:
    """Group inherited by combining ``ga`` with ``gb``, or None if disjoint.

    An empty group defers to the other side; otherwise the more specific
    (superset) group wins.
    """
    if ga.is_empty:
        return gb
    if gb.is_empty or ga.equal(gb):
        return ga
    if ga.subset(gb):
        return gb
    if gb.subset(ga):
        return ga
    return None


def union(a: Sequence[Result], b: Sequence[Result]) -> list[Union]:
    """Match every combinable ``(ra, rb)`` pair, in row-major order.

    Pairs whose groups are disjoint produce nothing.
    """
    unions: list[Union] = []
    for ra in a:
        for rb in b:
            group = resolve_group(ra.group, rb.group)
            if group is None:
                continue
            u = Union(a=ra.value, b=rb.value, group=group)
            u.extend_computations(ra)
            u.extend_computations(rb)
            unions.append(u)
    return unions
