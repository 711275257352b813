"""Elementwise operator semantics over float64 values and sample arrays."""

from __future__ import annotations

import math
from typing import Callable, Final

import numpy as np

from .errors import UnknownOperator


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _truth(value: bool) -> float:
    return 1.0 if value else 0.0


_BINARY_OPS: Final[dict[str, Callable[[float, float], float]]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
    "==": lambda a, b: _truth(a == b),
    "!=": lambda a, b: _truth(a != b),
    "<": lambda a, b: _truth(a < b),
    "<=": lambda a, b: _truth(a <= b),
    ">": lambda a, b: _truth(a > b),
    ">=": lambda a, b: _truth(a >= b),
    "||": lambda a, b: _truth(a != 0 or b != 0),
    "&&": lambda a, b: _truth(a != 0 and b != 0),
}

_UNARY_OPS: Final[dict[str, Callable[[float], float]]] = {
    "!": lambda a: _truth(a == 0),
    "-": lambda a: -a,
}

_ARRAY_BINARY_OPS: Final[dict[str, Callable[[np.ndarray, np.ndarray], np.ndarray]]] = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.true_divide,
    "==": np.equal,
    "!=": np.not_equal,
    "<": np.less,
    "<=": np.less_equal,
    ">": np.greater,
    ">=": np.greater_equal,
    "||": lambda a, b: np.logical_or(a != 0, b != 0),
    "&&": lambda a, b: np.logical_and(a != 0, b != 0),
}

_ARRAY_UNARY_OPS: Final[dict[str, Callable[[np.ndarray], np.ndarray]]] = {
    "!": lambda a: a == 0,
    "-": np.negative,
}

BINARY_OPERATORS: Final[frozenset[str]] = frozenset(_BINARY_OPS)
UNARY_OPERATORS: Final[frozenset[str]] = frozenset(_UNARY_OPS)


def _lookup(table: dict, op: str):
    fn = table.get(op)
    if fn is None:
        raise UnknownOperator(op)
    return fn


def _as_array(value) -> np.ndarray:
    return np.asarray(value, dtype=np.float64)


def operate(op: str, a: float, b: float) -> float:
    """Apply binary ``op`` to two floats.

    Division follows IEEE-754: ``x/0`` is a signed infinity and ``0/0`` is
    NaN. Comparisons and ``||``/``&&`` yield 1.0 or 0.0.
    """
    return float(_lookup(_BINARY_OPS, op)(float(a), float(b)))


def operate_array(op: str, a, b) -> np.ndarray:
    """Like :func:`operate` but broadcasting over sample arrays."""
    fn = _lookup(_ARRAY_BINARY_OPS, op)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return _as_array(fn(_as_array(a), _as_array(b)))


def uoperate(op: str, a: float) -> float:
    return float(_lookup(_UNARY_OPS, op)(float(a)))


def uoperate_array(op: str, a) -> np.ndarray:
    return _as_array(_lookup(_ARRAY_UNARY_OPS, op)(_as_array(a)))
