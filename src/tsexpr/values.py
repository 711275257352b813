"""Runtime value model: Scalar, Number and Series plus grouped Results."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field

import numpy as np

from .ast import ValueType
from .tags import TagGroup, replace_tags

Timestamp = Hashable


def _freeze(samples) -> np.ndarray:
    out = np.array(samples, dtype=np.float64)
    out.flags.writeable = False
    return out


def marshal_float(value: float) -> float | str:
    """JSON form of a float with the IEEE-754 specials spelled out."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return value


@dataclass(frozen=True)
class Scalar:
    """Context-free number, not tied to any group."""

    value: float

    @property
    def type(self) -> ValueType:
        return ValueType.SCALAR

    def __float__(self) -> float:
        return float(self.value)

    def to_json(self) -> float | str:
        return marshal_float(float(self.value))


@dataclass(frozen=True)
class Number:
    """Number belonging to the group of its Result."""

    value: float

    @property
    def type(self) -> ValueType:
        return ValueType.NUMBER

    def __float__(self) -> float:
        return float(self.value)

    def to_json(self) -> float | str:
        return marshal_float(float(self.value))


class Series(Mapping[Timestamp, float]):
    """Read-only ordered mapping of timestamp to float64 sample.

    Samples live in a single float64 array aligned with ``timestamps`` so
    operators can broadcast across the whole series at once.
    """

    __slots__ = ("_timestamps", "_samples", "_index")

    def __init__(self, points: Mapping[Timestamp, float] | None = None) -> None:
        points = dict(points or {})
        self._timestamps: tuple[Timestamp, ...] = tuple(points)
        self._samples = _freeze([float(v) for v in points.values()])
        self._index = {ts: i for i, ts in enumerate(self._timestamps)}

    @classmethod
    def from_samples(cls, timestamps: Sequence[Timestamp], samples) -> "Series":
        samples = _freeze(samples)
        if samples.shape != (len(timestamps),):
            raise ValueError(
                f"series samples of shape {samples.shape} do not match {len(timestamps)} timestamps"
            )
        series = cls.__new__(cls)
        series._timestamps = tuple(timestamps)
        series._samples = samples
        series._index = {ts: i for i, ts in enumerate(series._timestamps)}
        return series

    @property
    def type(self) -> ValueType:
        return ValueType.SERIES

    @property
    def timestamps(self) -> tuple[Timestamp, ...]:
        return self._timestamps

    @property
    def samples(self):
        return self._samples

    def with_samples(self, samples) -> "Series":
        return Series.from_samples(self._timestamps, samples)

    def __getitem__(self, timestamp: Timestamp) -> float:
        return float(self._samples[self._index[timestamp]])

    def __iter__(self) -> Iterator[Timestamp]:
        return iter(self._timestamps)

    def __len__(self) -> int:
        return len(self._timestamps)

    def __repr__(self) -> str:
        return f"Series({dict(self.items())!r})"

    def to_json(self) -> dict[str, float | str]:
        values = self._samples.tolist()
        return {str(ts): marshal_float(v) for ts, v in zip(self._timestamps, values, strict=True)}


Value = Scalar | Number | Series


@dataclass(frozen=True)
class Computation:
    text: str
    value: float

    def to_dict(self) -> dict[str, object]:
        return {"text": self.text, "value": marshal_float(float(self.value))}


@dataclass
class Result:
    """One value per tag group, with the trace of how it was computed."""

    value: Value
    group: TagGroup = field(default_factory=TagGroup)
    computations: list[Computation] = field(default_factory=list)

    @property
    def type(self) -> ValueType:
        return self.value.type

    def add_computation(self, text: str, value: float) -> None:
        self.computations.append(Computation(replace_tags(text, self.group), float(value)))

    def to_dict(self) -> dict[str, object]:
        return {
            "value": self.value.to_json(),
            "group": self.group.to_dict(),
            "computations": [c.to_dict() for c in self.computations],
        }
