# sniptor

Building blocks for the front end of a compiler for Sniptor, a small
teaching language with typed declarations (`int`, `flt`, `str`, `bol`, ...),
constants, expressions, functions and procedures.

The package provides:

- `sniptor.symbols`: a symbol table (`SymbolTable`, `Symbol`) holding at
  most 100 entries by default. `SymbolTable.add` raises `SymbolError` when
  a name is declared twice or the table is full. Names longer than 49
  characters and type names longer than 19 are cut short. Lookups are
  `exists`, `type_of` (returns `None` for unknown names), `is_const`,
  `in`, `len` and iteration in declaration order.
- `sniptor.tree`: a general n-ary syntax tree (`ASTNode`, `ASTNodeType`,
  `node_type_name`). `ASTNode.format` returns an indented text dump and
  `ASTNode.print` writes it to standard output.
- `sniptor.semantic`: semantic checks over that tree. `analyse(node, table)`
  walks the tree in pre-order and raises `SemanticError` on the first
  problem: assigning to an undeclared variable or to a constant, calling an
  undeclared function, arithmetic on non-numeric operands, logical operators
  on non-boolean operands, or comparing incompatible types. The helpers
  `infer_literal_type`, `is_numeric_type` and `types_compatible` are public.
- `sniptor.binary_ast`: a left/right/next tree (`Node`, `NodeKind`,
  `DataType`) with constructors such as `num_node`, `real_node`, `id_node`,
  `string_node`, `bool_node`, `declaration_node`, `binop_node`,
  `assign_node`, `show_node` and `program_node`. `format_ast` renders it
  and raises `ValueError` if the tree contains a cycle.
- `sniptor.builder`: rebuilds a `binary_ast` tree from a line-oriented
  intermediate file (`build_ast` for an iterable of lines,
  `build_ast_from_file` for a path).
- `sniptor.structured_ast`: typed nodes (`FunctionDeclaration`,
  `ProcedureDeclaration`, `Assignment`, `BinaryExpression`,
  `UnaryExpression`, `Variable`, `Constant`, `WhileLoop`, `FunctionCall`,
  `Parameter`, `Operator`) with `format_ast`, and `example_function`, which
  builds a small sample function.

## Installation

```
pip install .
```

Python 3.10 or later is required; there are no runtime dependencies.

## Commands

### `sniptor-build`

Reads an intermediate file and prints the tree built from it:

```
sniptor-build program.txt
```

Each line of the file starts with a keyword, for example:

```
NUM 5
DECL int x
NUM 3
DECL CONST flt pi
```

Recognised keywords are `NUM`, `REAL`, `ID`, `STRING`, `BOOL`, `DECL`
(optionally followed by `CONST`) and `BIN_OP`; other lines are ignored.
`NUM`, `REAL`, `ID`, `STRING` and `BOOL` push a value on a stack of at most
100 entries. `DECL` pops one value as its initialiser and adds the
declaration to the program's list. `BIN_OP` pops two operands, adds the
operation to the program's list and pushes it back on the stack. A line
missing an argument raises `ValueError`.

With a wrong number of arguments the command prints a usage line and exits
with status 1. If the file cannot be opened it prints an error message and
exits with status 0.

### `sniptor-demo`

Prints the sample function from `example_function` (`add`, taking `int x`
and `float y`, assigning `x + y` to `result`):

```
sniptor-demo
```

## Using the library

```python
from sniptor.symbols import SymbolTable
from sniptor.tree import ASTNode, ASTNodeType
from sniptor.semantic import analyse, SemanticError

table = SymbolTable()
table.add("x", "int", False, 1)

expr = ASTNode(ASTNodeType.EXPRESSION, "+")
expr.add_child(ASTNode(ASTNodeType.IDENTIFIER, "x"))
expr.add_child(ASTNode(ASTNodeType.LITERAL, "2"))

try:
    analyse(expr, table)
except SemanticError as error:
    print(error)

expr.print()
```

## What the package does not do

There is no lexer or parser for Sniptor source text: trees are built with
the constructors above or, for `binary_ast`, from an intermediate file.
Nothing here generates code or runs programs.

## Running the tests

```
pip install ".[test]"
pytest
```