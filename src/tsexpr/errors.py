"""Structured error types for expression evaluation."""

from __future__ import annotations


class ExprError(Exception):
    """Base class for structured tsexpr errors."""


class TagParseError(ExprError, ValueError):
    """A ``k=v,...`` tag string could not be parsed."""


class UnknownFunction(ExprError, LookupError):
    """No function with the requested name is registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"expr: unknown function {name!r}")
        self.name = name


class ExprRuntimeError(ExprError):
    """Domain failure raised while walking an expression tree."""


class UnsupportedOperandTypes(ExprRuntimeError):
    """No operator rule exists for the operand variants."""

    def __init__(self, op: str, left: str, right: str | None = None) -> None:
        if right is None:
            message = f"expr: unsupported operand type for {op}: {left}"
        else:
            message = f"expr: unsupported operand types for {op}: {left} and {right}"
        super().__init__(message)
        self.op = op
        self.left = left
        self.right = right


class UnknownOperator(ExprRuntimeError):
    """Operator token outside the recognized set."""

    def __init__(self, op: str) -> None:
        super().__init__(f"expr: unknown operator {op}")
        self.op = op


class UnknownNodeType(ExprRuntimeError):
    def __init__(self, node: object) -> None:
        super().__init__(f"expr: unknown node type {type(node).__name__}")
        self.node = node


class FunctionError(ExprRuntimeError):
    """Failure reported by a builtin function.

    Builtins raise this (or any other :class:`ExprError`) to abort the
    evaluation; the exception is handed back unchanged by ``execute``.
    """

    def __init__(self, message: str, *, function: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.function = function

    def __str__(self) -> str:
        if self.function:
            return f"{self.function}: {self.message}"
        return self.message
