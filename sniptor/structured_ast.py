"""Syntax tree with a dedicated node class for each construct."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Operator(Enum):
    """Operators of unary and binary expressions, valued by their symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "=="
    LT = "<"
    GT = ">"

    @property
    def symbol(self) -> str:
        """The operator as written in source text."""
        return self.value


@dataclass(frozen=True)
class Parameter:
    """A typed formal parameter."""

    type: str
    name: str


@dataclass
class FunctionDeclaration:
    """A function with a return type, parameters and a body."""

    return_type: str
    name: str
    params: list[Parameter] = field(default_factory=list)
    body: list[Node] = field(default_factory=list)


@dataclass
class ProcedureDeclaration:
    """A procedure: parameters and a body, no return type."""

    name: str
    params: list[Parameter] = field(default_factory=list)
    body: list[Node] = field(default_factory=list)


@dataclass
class Assignment:
    """A typed assignment of an expression to a variable."""

    var_type: str
    var_name: str
    value: Node | None = None


@dataclass
class BinaryExpression:
    """An operator applied to two operands."""

    left: Node | None
    op: Operator
    right: Node | None


@dataclass
class UnaryExpression:
    """An operator applied to one operand."""

    op: Operator
    expr: Node | None


@dataclass
class Variable:
    """A reference to a named variable."""

    name: str


@dataclass
class Constant:
    """A literal constant kept as text."""

    value: str


@dataclass
class WhileLoop:
    """A loop running its body while the condition holds."""

    condition: Node | None
    body: list[Node] = field(default_factory=list)


@dataclass
class FunctionCall:
    """A call of a named function with arguments."""

    name: str
    arguments: list[Node] = field(default_factory=list)


Node = Union[
    FunctionDeclaration,
    ProcedureDeclaration,
    Assignment,
    BinaryExpression,
    UnaryExpression,
    Variable,
    Constant,
    WhileLoop,
    FunctionCall,
]


def _render(node: Node | None, indent: int, lines: list[str]) -> None:
    if node is None:
        return
    pad = "  " * indent
    match node:
        case FunctionDeclaration():
            lines.append(f"{pad}Function: {node.name} -> {node.return_type}")
            inner = "  " * (indent + 1)
            lines.extend(f"{inner}Param: {p.type} {p.name}" for p in node.params)
            for instruction in node.body:
                _render(instruction, indent + 1, lines)
        case Assignment():
            lines.append(f"{pad}Assign: {node.var_type} {node.var_name} =")
            _render(node.value, indent + 1, lines)
        case BinaryExpression():
            lines.append(f"{pad}Binary Op: {node.op.symbol}")
            _render(node.left, indent + 1, lines)
            _render(node.right, indent + 1, lines)
        case Variable():
            lines.append(f"{pad}Variable: {node.name}")
        case Constant():
            lines.append(f"{pad}Constant: {node.value}")
        case WhileLoop():
            lines.append(f"{pad}While:")
            _render(node.condition, indent + 1, lines)
            for instruction in node.body:
                _render(instruction, indent + 1, lines)
        case FunctionCall():
            lines.append(f"{pad}Call: {node.name}")
            for argument in node.arguments:
                _render(argument, indent + 1, lines)
        case _:
            lines.append(f"{pad}Unknown node type")


def format_ast(node: Node | None, indent: int = 0) -> str:
    """Render a tree as indented text, one construct per line."""
    lines: list[str] = []
    _render(node, indent, lines)
    return "".join(line + "\n" for line in lines)


def example_function() -> FunctionDeclaration:
    """Build the sample function ``int add(int x, float y)`` computing ``x + y``."""
    return FunctionDeclaration(
        return_type="int",
        name="add",
        params=[Parameter("int", "x"), Parameter("float", "y")],
        body=[
            Assignment(
                "int",
                "result",
                BinaryExpression(Variable("x"), Operator.ADD, Variable("y")),
            )
        ],
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the tree of the sample function."""
    del argv
    sys.stdout.write("AST Representation:\n")
    sys.stdout.write(format_ast(example_function(), 0))
    return 0