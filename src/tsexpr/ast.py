"""AST nodes consumed by the evaluator.

Trees are produced by an external parser. Every node renders back to
expression text that re-parses to an equivalent tree.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Union


class ValueType(str, Enum):
    SCALAR = "scalar"
    NUMBER = "number"
    SERIES = "series"
    STRING = "string"


@dataclass(frozen=True)
class Function:
    """Descriptor of a builtin: native call target plus declared types."""

    name: str
    call: Callable[..., list] = field(repr=False, compare=False)
    returns: ValueType
    args: tuple[ValueType, ...] = ()


def _format_number(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


@dataclass(frozen=True)
class NumberLiteral:
    value: float
    text: str | None = None

    def __str__(self) -> str:
        if self.text is not None:
            return self.text
        return _format_number(self.value)


@dataclass(frozen=True)
class StringLiteral:
    text: str

    def __str__(self) -> str:
        return json.dumps(self.text)


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: "Node"
    right: "Node"

    def __str__(self) -> str:
        return f"{self.left} {self.op} {self.right}"


@dataclass(frozen=True)
class UnaryOp:
    op: str
    arg: "Node"

    def __str__(self) -> str:
        return f"{self.op}{self.arg}"


@dataclass(frozen=True)
class FunctionCall:
    function: Function
    args: tuple["Node", ...] = ()

    def __str__(self) -> str:
        return f"{self.function.name}({', '.join(str(arg) for arg in self.args)})"

    @property
    def returns(self) -> ValueType:
        return self.function.returns


Node = Union[NumberLiteral, StringLiteral, BinaryOp, UnaryOp, FunctionCall]
