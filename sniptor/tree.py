"""Generic n-ary syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class ASTNodeType(IntEnum):
    """Kinds of syntax tree nodes."""

    PROGRAM = 0
    INSTRUCTION_LIST = 1
    VARIABLE_DECLARATION = 2
    VARIABLE_AFFECTATION = 3
    ARRAY_DECLARATION = 4
    LIST_INITIALIZATION = 5
    DICT_INITIALIZATION = 6
    EXPRESSION = 7
    FUNCTION_CALL = 8
    LITERAL = 9
    IDENTIFIER = 10
    TYPE = 11
    FUNCTION_DECL = 12
    PROCEDURE_DECL = 13
    PARAM_LIST = 14
    PARAM = 15
    ARGUMENT_LIST = 16
    ARGUMENT = 17


def node_type_name(node_type: ASTNodeType | int) -> str:
    """Return the display name of a node type, or "UNKNOWN"."""
    try:
        return ASTNodeType(node_type).name
    except ValueError:
        return "UNKNOWN"


@dataclass
class ASTNode:
    """A tree node with an optional value and any number of children."""

    type: ASTNodeType
    value: str | None = None
    num_value: int = 0
    real_value: float = 0.0
    children: list[ASTNode] = field(default_factory=list)

    def add_child(self, child: ASTNode) -> ASTNode:
        """Append a child and return this node."""
        self.children.append(child)
        return self

    def format(self, indent: int = 0) -> str:
        """Render the subtree as indented text, one node per line."""
        lines: list[str] = []

        def walk(node: ASTNode, depth: int) -> None:
            line = "  " * depth + f"Node type: {node_type_name(node.type)}"
            if node.value is not None:
                line += f", value: {node.value}"
            lines.append(line)
            for child in node.children:
                walk(child, depth + 1)

        walk(self, indent)
        return "".join(line + "\n" for line in lines)

    def print(self, indent: int = 0) -> None:
        """Write the rendered subtree to standard output."""
        print(self.format(indent), end="")