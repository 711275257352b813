"""Tag groups: the dimensional identity of a time series."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Final

from .errors import TagParseError

_TAG_SPAN_RE: Final = re.compile(r"{.*?}")


class TagGroup(Mapping[str, str]):
    """Immutable mapping of tag key to tag value.

    An empty group is unconstrained and combines with every other group.
    """

    __slots__ = ("_tags", "_hash")

    def __init__(self, tags: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._tags: dict[str, str] = {str(k): str(v) for k, v in dict(tags or {}).items()}
        self._hash: int | None = None

    def __getitem__(self, key: str) -> str:
        return self._tags[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._tags.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"TagGroup({self._tags!r})"

    def __str__(self) -> str:
        return "{" + self.tags() + "}"

    @property
    def is_empty(self) -> bool:
        return not self._tags

    def equal(self, other: Mapping[str, str]) -> bool:
        return self._tags == dict(other.items())

    def subset(self, other: Mapping[str, str]) -> bool:
        """True if every pair of this group is also present in ``other``."""
        for key, value in self._tags.items():
            if other.get(key) != value:
                return False
        return True

    def tags(self) -> str:
        return ",".join(f"{k}={self._tags[k]}" for k in sorted(self._tags))

    def to_dict(self) -> dict[str, str]:
        return dict(self._tags)

    @classmethod
    def parse(cls, text: str) -> "TagGroup":
        """Parse ``k=v,k2=v2`` into a group."""
        tags: dict[str, str] = {}
        for pair in text.split(","):
            parts = pair.split("=")
            if len(parts) != 2:
                raise TagParseError(f"opentsdb: bad tag: {pair}")
            key, value = parts[0].strip(), parts[1].strip()
            if not key or not value:
                raise TagParseError(f"opentsdb: bad tag: {pair}")
            if key in tags:
                raise TagParseError(f"opentsdb: duplicated tag: {key}")
            tags[key] = value
        return cls(tags)


def replace_tags(text: str, group: Mapping[str, str]) -> str:
    """Substitute group values into every ``{k=v,...}`` span of ``text``.

    Given ``cpu{host=*}`` and a group with ``host=web01`` this returns
    ``cpu{host=web01}``. Spans that are not tag lists are left untouched.
    """

    def substitute(match: re.Match[str]) -> str:
        span = match.group(0)
        try:
            tags = TagGroup.parse(span[1:-1]).to_dict()
        except TagParseError:
            return span
        for key in tags:
            if group.get(key):
                tags[key] = group[key]
        return str(TagGroup(tags))

    return _TAG_SPAN_RE.sub(substitute, text)
