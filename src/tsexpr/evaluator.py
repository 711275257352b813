"""Evaluator for parsed alert expressions over grouped time-series data."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from .ast import BinaryOp, FunctionCall, Node, NumberLiteral, StringLiteral, UnaryOp, ValueType
from .backend import Context, Request
from .errors import ExprError, UnknownNodeType, UnsupportedOperandTypes
from .operators import operate, operate_array, uoperate, uoperate_array
from .timer import NullTimer, Timer
from .union import Union, union
from .values import Number, Result, Scalar, Series

logger = logging.getLogger(__name__)


@dataclass
class EvaluationState:
    """Per-execution state handed to builtins.

    Owned by a single :func:`execute` call and discarded when it returns.
    """

    context: Context
    requests: list[Request] = field(default_factory=list)

    def add_request(self, request: Request) -> None:
        self.requests.append(request)


@dataclass
class Execution:
    results: list[Result] | None
    requests: list[Request] | None
    error: ExprError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> tuple[list[Result], list[Request]]:
        if self.error is not None:
            raise self.error
        if self.results is None or self.requests is None:
            raise ValueError("execution has neither results nor an error")
        return self.results, self.requests


class Expression:
    """A parsed expression tree ready to be executed."""

    def __init__(self, root: Node) -> None:
        self.root = root

    def __str__(self) -> str:
        return str(self.root)

    def __repr__(self) -> str:
        return f"Expression({str(self)!r})"

    def to_json(self) -> str:
        return json.dumps(str(self))

    def execute(self, context: Context, timer: Timer | None = None) -> Execution:
        return execute(self.root, context, timer)


def execute(root: Node, context: Context, timer: Timer | None = None) -> Execution:
    """Evaluate ``root`` against ``context`` and return one result per group.

    The first domain error raised anywhere in the walk aborts evaluation and
    is returned as ``Execution.error`` with no partial results. Any other
    exception is a defect and propagates. ``timer`` may be None to ignore
    timings.
    """
    state = EvaluationState(context=context)
    if timer is None:
        timer = NullTimer()
    try:
        results = timer.step("expr execute", lambda t: _walk(state, root, t))
    except ExprError as err:
        logger.debug("expr %s failed: %s", root, err)
        return Execution(results=None, requests=None, error=err)
    logger.debug("expr %s: %d results, %d requests", root, len(results), len(state.requests))
    return Execution(results=results, requests=state.requests)


def extract_scalar(results: list[Result]) -> float | list[Result]:
    """Return a bare float if ``results`` holds exactly one Scalar."""
    if len(results) == 1 and isinstance(results[0].value, Scalar):
        return float(results[0].value.value)
    return results


def _wrap(value: float) -> list[Result]:
    return [Result(value=Scalar(float(value)))]


def _walk(state: EvaluationState, node: Node, timer: Timer) -> list[Result]:
    if isinstance(node, NumberLiteral):
        return _wrap(node.value)
    if isinstance(node, BinaryOp):
        return _walk_binary(state, node, timer)
    if isinstance(node, UnaryOp):
        return _walk_unary(state, node, timer)
    if isinstance(node, FunctionCall):
        return _walk_func(state, node, timer)
    raise UnknownNodeType(node)


def _walk_binary(state: EvaluationState, node: BinaryOp, timer: Timer) -> list[Result]:
    ar = _walk(state, node.left, timer)
    br = _walk(state, node.right, timer)
    return [_combine(node, u) for u in union(ar, br)]


def _combine(node: BinaryOp, u: Union) -> Result:
    r = Result(value=u.a, group=u.group, computations=u.computations)
    a, b = u.a, u.b
    if isinstance(a, (Scalar, Number)) and isinstance(b, (Scalar, Number)):
        n = operate(node.op, a.value, b.value)
        r.add_computation(str(node), n)
        r.value = Scalar(n) if isinstance(a, Scalar) and isinstance(b, Scalar) else Number(n)
    elif isinstance(a, (Scalar, Number)) and isinstance(b, Series):
        r.value = b.with_samples(operate_array(node.op, a.value, b.samples))
    elif isinstance(a, Series) and isinstance(b, (Scalar, Number)):
        r.value = a.with_samples(operate_array(node.op, a.samples, b.value))
    else:
        raise UnsupportedOperandTypes(node.op, _type_name(a), _type_name(b))
    return r


def _walk_unary(state: EvaluationState, node: UnaryOp, timer: Timer) -> list[Result]:
    results = _walk(state, node.arg, timer)
    for r in results:
        value = r.value
        if isinstance(value, Scalar):
            r.value = Scalar(uoperate(node.op, value.value))
        elif isinstance(value, Number):
            r.value = Number(uoperate(node.op, value.value))
        elif isinstance(value, Series):
            r.value = value.with_samples(uoperate_array(node.op, value.samples))
        else:
            raise UnsupportedOperandTypes(node.op, _type_name(value))
    return results


def _resolve_argument(state: EvaluationState, arg: Node, timer: Timer) -> str | float | list[Result]:
    if isinstance(arg, StringLiteral):
        return arg.text
    if isinstance(arg, NumberLiteral):
        return float(arg.value)
    return extract_scalar(_walk(state, arg, timer))


def _walk_func(state: EvaluationState, node: FunctionCall, timer: Timer) -> list[Result]:
    args = [_resolve_argument(state, arg, timer) for arg in node.args]
    res = list(node.function.call(state, timer, *args))
    if node.returns is ValueType.NUMBER:
        text = str(node)
        for r in res:
            if not isinstance(r.value, Number):
                raise TypeError(
                    f"{node.function.name} is declared to return number, got {_type_name(r.value)}"
                )
            r.add_computation(text, r.value.value)
    return res


def _type_name(value: object) -> str:
    kind = getattr(value, "type", None)
    if isinstance(kind, ValueType):
        return kind.value
    return type(value).__name__
