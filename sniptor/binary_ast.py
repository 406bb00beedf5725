"""Binary syntax tree with left/right children and a sibling chain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class NodeKind(Enum):
    """Kinds of binary tree nodes."""

    PROGRAM = auto()
    DECL = auto()
    CONST = auto()
    VAR = auto()
    BIN_OP = auto()
    UNARY_OP = auto()
    ID = auto()
    NUM = auto()
    REAL = auto()
    STRING = auto()
    BOOL = auto()
    ASSIGN = auto()
    CALL = auto()
    SHOW = auto()
    SEQ = auto()


class DataType(Enum):
    """Data types carried by tree nodes."""

    INT = auto()
    FLT = auto()
    CHR = auto()
    DBL = auto()
    STR = auto()
    BOL = auto()
    LST = auto()
    DICT = auto()
    UNKNOWN = auto()


_DECLARED_TYPES = {
    "int": DataType.INT,
    "flt": DataType.FLT,
    "str": DataType.STR,
    "bol": DataType.BOL,
}


@dataclass(eq=False)
class Node:
    """A tree node; ``next`` links nodes of the same list."""

    kind: NodeKind
    data_type: DataType = DataType.UNKNOWN
    value: str | None = None
    left: Node | None = None
    right: Node | None = None
    next: Node | None = None


def program_node(declarations: Node | None, instructions: Node | None) -> Node:
    """Build the root node holding declarations and instructions."""
    return Node(NodeKind.PROGRAM, left=declarations, right=instructions)


def declaration_node(type_name: str, name: str, expr: Node | None, is_const: bool) -> Node:
    """Build a variable or constant declaration initialised by ``expr``."""
    return Node(
        NodeKind.CONST if is_const else NodeKind.VAR,
        data_type=_DECLARED_TYPES.get(type_name, DataType.UNKNOWN),
        value=name,
        left=id_node(name),
        right=expr,
    )


def binop_node(op: str, left: Node | None, right: Node | None) -> Node:
    """Build a binary operation node."""
    return Node(NodeKind.BIN_OP, value=op, left=left, right=right)


def show_node(expr: Node | None) -> Node:
    """Build an output statement node."""
    return Node(NodeKind.SHOW, left=expr)


def id_node(name: str) -> Node:
    """Build an identifier node."""
    return Node(NodeKind.ID, value=name)


def num_node(value: int) -> Node:
    """Build an integer literal node."""
    return Node(NodeKind.NUM, data_type=DataType.INT, value=str(int(value)))


def real_node(value: float) -> Node:
    """Build a real literal node, its text with six decimals."""
    return Node(NodeKind.REAL, data_type=DataType.FLT, value=f"{float(value):f}")


def string_node(value: str) -> Node:
    """Build a string literal node."""
    return Node(NodeKind.STRING, data_type=DataType.STR, value=value)


def bool_node(value: bool) -> Node:
    """Build a boolean literal node."""
    return Node(NodeKind.BOOL, data_type=DataType.BOL, value="True" if value else "False")


def assign_node(name: str, expr: Node | None) -> Node:
    """Build an assignment of ``expr`` to ``name``."""
    return Node(NodeKind.ASSIGN, value=name, left=id_node(name), right=expr)


_PLAIN_LABELS = {
    NodeKind.PROGRAM: "PROGRAM",
    NodeKind.DECL: "DECL",
    NodeKind.SEQ: "SEQ",
    NodeKind.SHOW: "SHOW",
}

_VALUE_LABELS = {
    NodeKind.CONST: "CONST",
    NodeKind.VAR: "VAR",
    NodeKind.BIN_OP: "BIN_OP",
    NodeKind.ID: "ID",
    NodeKind.NUM: "NUM",
    NodeKind.REAL: "REAL",
    NodeKind.ASSIGN: "ASSIGN",
    NodeKind.STRING: "STRING",
    NodeKind.BOOL: "BOOL",
}


def _label(node: Node) -> str:
    if node.kind in _PLAIN_LABELS:
        return _PLAIN_LABELS[node.kind]
    if node.kind in _VALUE_LABELS:
        return f"{_VALUE_LABELS[node.kind]} ({node.value})"
    return "UNKNOWN"


def format_ast(node: Node | None, level: int = 0) -> str:
    """Render a tree as indented text; children one level deeper, siblings alongside.

    Raises ValueError if the tree refers back to a node still being rendered.
    """
    lines: list[str] = []
    active: set[int] = set()

    def walk(current: Node | None, depth: int) -> None:
        chain: list[int] = []
        while current is not None:
            key = id(current)
            if key in active:
                raise ValueError("cycle in syntax tree")
            active.add(key)
            chain.append(key)
            lines.append("  " * depth + _label(current))
            walk(current.left, depth + 1)
            walk(current.right, depth + 1)
            current = current.next
        active.difference_update(chain)

    walk(node, level)
    return "".join(line + "\n" for line in lines)