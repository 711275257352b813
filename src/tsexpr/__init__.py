"""tsexpr public API."""

from .ast import (
    BinaryOp,
    Function,
    FunctionCall,
    Node,
    NumberLiteral,
    StringLiteral,
    UnaryOp,
    ValueType,
)
from .backend import Context, Query, Request
from .builtins import FunctionRegistry
from .errors import (
    ExprError,
    ExprRuntimeError,
    FunctionError,
    TagParseError,
    UnknownFunction,
    UnknownNodeType,
    UnknownOperator,
    UnsupportedOperandTypes,
)
from .evaluator import EvaluationState, Execution, Expression, execute, extract_scalar
from .tags import TagGroup, replace_tags
from .timer import NullTimer, Timer
from .union import Union, union
from .values import Computation, Number, Result, Scalar, Series, marshal_float

__all__ = [
    "BinaryOp",
    "Function",
    "FunctionCall",
    "Node",
    "NumberLiteral",
    "StringLiteral",
    "UnaryOp",
    "ValueType",
    "Context",
    "Query",
    "Request",
    "FunctionRegistry",
    "ExprError",
    "ExprRuntimeError",
    "FunctionError",
    "TagParseError",
    "UnknownFunction",
    "UnknownNodeType",
    "UnknownOperator",
    "UnsupportedOperandTypes",
    "EvaluationState",
    "Execution",
    "Expression",
    "execute",
    "extract_scalar",
    "TagGroup",
    "replace_tags",
    "NullTimer",
    "Timer",
    "Union",
    "union",
    "Computation",
    "Number",
    "Result",
    "Scalar",
    "Series",
    "marshal_float",
]
