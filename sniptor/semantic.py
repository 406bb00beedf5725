"""Semantic checks over the generic syntax tree."""

from __future__ import annotations

from sniptor.symbols import SymbolTable
from sniptor.tree import ASTNode, ASTNodeType

ARITHMETIC_OPERATORS = frozenset({"+", "-", "*", "/", "%", "^"})
LOGICAL_OPERATORS = frozenset({"AND", "OR", "NOT", "XOR"})
COMPARISON_OPERATORS = frozenset({"> ", ">=", "< ", "<=", "==", "!="})
NUMERIC_TYPES = frozenset({"int", "flt", "dbl"})


class SemanticError(Exception):
    """Raised on the first semantic error found in a tree."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Erreur semantique : {message}")
        self.message = message


def infer_literal_type(value: str | None) -> str:
    """Guess the type of a literal from its text."""
    if value is None:
        return "UNKNOWN"
    is_num = True
    is_float = False
    for char in value:
        if char == ".":
            is_float = True
        elif not "0" <= char <= "9":
            is_num = False
            break
    if is_num:
        return "flt" if is_float else "int"
    if value in ("TRUE", "FALSE"):
        return "bol"
    if value[0] in ("\"", "'"):
        return "str"
    return "UNKNOWN"


def is_numeric_type(type_name: str) -> bool:
    """Return True for the numeric types int, flt and dbl."""
    return type_name in NUMERIC_TYPES


def types_compatible(first: str, second: str) -> bool:
    """Return True if two types may be compared with each other."""
    if first == second:
        return True
    if first == "int" and second in ("flt", "dbl"):
        return True
    return first in ("flt", "dbl") and second == "int"


def _operand_type(node: ASTNode | None, table: SymbolTable) -> str:
    if node is None:
        return ""
    if node.type == ASTNodeType.IDENTIFIER:
        return table.type_of(node.value) or "" if node.value is not None else ""
    if node.type == ASTNodeType.LITERAL:
        return infer_literal_type(node.value)
    return ""


def _check_expression(node: ASTNode, table: SymbolTable) -> None:
    op = node.value
    if op is None:
        return
    children = node.children
    left_type = _operand_type(children[0], table) if children else ""
    right_type = _operand_type(children[1], table) if len(children) >= 2 else ""

    if op in ARITHMETIC_OPERATORS:
        if not is_numeric_type(left_type) or not is_numeric_type(right_type):
            raise SemanticError("Operateur arithmetique sur type non numerique")
    if op in LOGICAL_OPERATORS:
        if left_type != "bol" or (len(children) >= 2 and right_type != "bol"):
            raise SemanticError("Operateur logique sur type non booleen")
    if op in COMPARISON_OPERATORS:
        if not types_compatible(left_type, right_type):
            raise SemanticError("Operateur de comparaison sur types incompatibles")


def _check_node(node: ASTNode, table: SymbolTable) -> None:
    if node.type == ASTNodeType.VARIABLE_AFFECTATION:
        name = node.children[0].value
        if table.type_of(name) is None:
            raise SemanticError("Affectation à une variable non declaree")
        if table.is_const(name):
            raise SemanticError("Modification d'une constante interdite")
    elif node.type == ASTNodeType.FUNCTION_CALL:
        name = node.children[0].value
        if not table.exists(name):
            raise SemanticError("Appel d'une fonction non declaree")
    elif node.type == ASTNodeType.EXPRESSION:
        _check_expression(node, table)


def analyse(node: ASTNode | None, table: SymbolTable) -> None:
    """Check a tree in pre-order against the symbol table; raise SemanticError on the first error."""
    if node is None:
        return
    _check_node(node, table)
    for child in node.children:
        analyse(child, table)