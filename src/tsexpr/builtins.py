"""Static registry of builtin functions callable from expressions."""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterator, Mapping
from typing import Callable

from .ast import BinaryOp, Function, FunctionCall, Node, NumberLiteral, StringLiteral, UnaryOp, ValueType
from .errors import UnknownFunction

logger = logging.getLogger(__name__)


def _as_node(arg: object) -> Node:
    if isinstance(arg, str):
        return StringLiteral(arg)
    if isinstance(arg, numbers.Real) and not isinstance(arg, bool):
        return NumberLiteral(float(arg))
    if isinstance(arg, (NumberLiteral, StringLiteral, BinaryOp, UnaryOp, FunctionCall)):
        return arg
    raise TypeError(f"cannot use {type(arg).__name__} as a function argument")


class FunctionRegistry(Mapping[str, Function]):
    """Maps function names to typed callables sharing one contract.

    Every callable is invoked as ``fn(state, timer, *args)`` and returns a
    list of :class:`~tsexpr.values.Result`.
    """

    def __init__(self, functions: Mapping[str, Function] | None = None) -> None:
        self._functions: dict[str, Function] = dict(functions or {})

    def __getitem__(self, name: str) -> Function:
        return self._functions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def lookup(self, name: str) -> Function:
        try:
            return self._functions[name]
        except KeyError:
            raise UnknownFunction(name) from None

    def add(self, function: Function) -> Function:
        if function.name in self._functions:
            raise ValueError(f"function {function.name!r} is already registered")
        self._functions[function.name] = function
        logger.debug("registered %s -> %s", function.name, function.returns.value)
        return function

    def register(
        self,
        name: str,
        *,
        returns: ValueType,
        args: tuple[ValueType, ...] = (),
    ) -> Callable[[Callable[..., list]], Callable[..., list]]:
        def decorator(fn: Callable[..., list]) -> Callable[..., list]:
            self.add(Function(name=name, call=fn, returns=returns, args=tuple(args)))
            return fn

        return decorator

    def call(self, name: str, *args: object) -> FunctionCall:
        """Build a call node, wrapping plain str/number arguments as literals."""
        return FunctionCall(function=self.lookup(name), args=tuple(_as_node(arg) for arg in args))
