"""Build a binary syntax tree from a postfix intermediate file."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from sniptor.binary_ast import (
    Node,
    binop_node,
    bool_node,
    declaration_node,
    format_ast,
    id_node,
    num_node,
    program_node,
    real_node,
    string_node,
)

MAX_STACK = 100

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _argument(tokens: list[str], index: int, line: str) -> str:
    try:
        return tokens[index]
    except IndexError:
        raise ValueError(f"missing argument in line: {line.rstrip()!r}") from None


class _Builder:
    def __init__(self) -> None:
        self.stack: list[Node] = []
        self.head: Node | None = None
        self.tail: Node | None = None

    def push(self, node: Node) -> None:
        if len(self.stack) >= MAX_STACK:
            raise ValueError("expression stack overflow")
        self.stack.append(node)

    def pop(self) -> Node | None:
        return self.stack.pop() if self.stack else None

    def link(self, node: Node) -> None:
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def feed(self, line: str) -> None:
        tokens = line.split()
        if not tokens:
            return
        kind = tokens[0]
        if kind == "NUM":
            self.push(num_node(_leading_int(_argument(tokens, 1, line))))
        elif kind == "REAL":
            self.push(real_node(_leading_float(_argument(tokens, 1, line))))
        elif kind == "ID":
            self.push(id_node(_argument(tokens, 1, line)))
        elif kind == "STRING":
            if " " not in line:
                raise ValueError(f"missing string value in line: {line.rstrip()!r}")
            value = line.split(" ", 1)[1]
            self.push(string_node(value[:-1] if value.endswith("\n") else value))
        elif kind == "BOOL":
            self.push(bool_node(_argument(tokens, 1, line) == "True"))
        elif kind == "DECL":
            expr = self.pop()
            first = _argument(tokens, 1, line)
            if first == "CONST":
                decl = declaration_node(
                    _argument(tokens, 2, line), _argument(tokens, 3, line), expr, True
                )
            else:
                decl = declaration_node(first, _argument(tokens, 2, line), expr, False)
            self.link(decl)
        elif kind == "BIN_OP":
            op = _argument(tokens, 1, line)
            right = self.pop()
            left = self.pop()
            node = binop_node(op, left, right)
            self.link(node)
            self.push(node)


def build_ast(lines: Iterable[str]) -> Node:
    """Build a program tree from intermediate-code lines."""
    builder = _Builder()
    for line in lines:
        builder.feed(line)
    return program_node(builder.head, None)


def build_ast_from_file(path: str | Path) -> Node:
    """Build a program tree from an intermediate-code file."""
    with open(path, encoding="utf-8") as handle:
        return build_ast(handle)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the file named on the command line and print its tree."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: sniptor-build <fichier_intermediaire>")
        return 1
    try:
        ast = build_ast_from_file(args[0])
    except OSError:
        print("Erreur lors de la construction de l'AST")
        return 0
    try:
        text = format_ast(ast, 0)
    except ValueError as exc:
        print(f"Erreur : {exc}", file=sys.stderr)
        return 1
    print("AST genere:")
    print(text, end="")
    return 0