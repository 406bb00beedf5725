import pytest

from sniptor.binary_ast import NodeKind, format_ast
from sniptor.builder import build_ast, build_ast_from_file, main


def test_simple_declaration():
    prog = build_ast(["NUM 5\n", "DECL int x\n"])
    assert prog.kind is NodeKind.PROGRAM
    assert prog.right is None
    decl = prog.left
    assert decl.kind is NodeKind.VAR
    assert decl.value == "x"
    assert decl.right.kind is NodeKind.NUM and decl.right.value == "5"
    assert decl.next is None


def test_constant_declaration():
    decl = build_ast(["NUM 3\n", "DECL CONST int k\n"]).left
    assert decl.kind is NodeKind.CONST
    assert decl.value == "k"


def test_declarations_are_chained_in_order():
    prog = build_ast(["NUM 1\n", "DECL int a\n", "BOOL True\n", "DECL bol b\n"])
    assert prog.left.value == "a"
    assert prog.left.next.value == "b"
    assert prog.left.next.right.value == "True"


def test_string_keeps_spaces():
    decl = build_ast(['STRING "hello world"\n', "DECL str s\n"]).left
    assert decl.right.kind is NodeKind.STRING
    assert decl.right.value == '"hello world"'


def test_bool_false_and_id():
    prog = build_ast(["BOOL False\n", "DECL bol f\n", "ID f\n", "DECL bol g\n"])
    assert prog.left.right.value == "False"
    assert prog.left.next.right.kind is NodeKind.ID
    assert prog.left.next.right.value == "f"


def test_real_value():
    decl = build_ast(["REAL 2.5\n", "DECL flt r\n"]).left
    assert decl.right.value == "2.500000"


def test_num_uses_leading_digits():
    assert build_ast(["NUM 12abc\n", "DECL int n\n"]).left.right.value == "12"
    assert build_ast(["NUM abc\n", "DECL int n\n"]).left.right.value == "0"


def test_binop_is_linked_and_pushed():
    prog = build_ast(["NUM 1\n", "NUM 2\n", "BIN_OP +\n", "DECL int x\n"])
    op = prog.left
    assert op.kind is NodeKind.BIN_OP and op.value == "+"
    assert op.left.value == "1" and op.right.value == "2"
    assert op.next.kind is NodeKind.VAR
    assert op.next.right is op
    with pytest.raises(ValueError):
        format_ast(prog, 0)


def test_blank_and_unknown_lines_are_ignored():
    prog = build_ast(["\n", "SHOW x\n", "NUM 4\n", "DECL int y\n"])
    assert prog.left.value == "y"
    assert prog.left.next is None


def test_decl_with_empty_stack():
    decl = build_ast(["DECL int z\n"]).left
    assert decl.right is None


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        build_ast(["NUM\n"])
    with pytest.raises(ValueError):
        build_ast(["STRING\n"])


def test_stack_overflow_raises():
    with pytest.raises(ValueError):
        build_ast(["NUM 1\n"] * 101)


def test_build_from_file(tmp_path):
    path = tmp_path / "code.txt"
    path.write_text("NUM 5\nDECL int x\n", encoding="utf-8")
    prog = build_ast_from_file(path)
    assert prog.left.value == "x"
    assert prog.left.right.value == "5"


def test_build_from_missing_file(tmp_path):
    with pytest.raises(OSError):
        build_ast_from_file(tmp_path / "absent.txt")


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 0
    assert "Erreur lors de la construction de l'AST" in capsys.readouterr().out


def test_main_prints_tree(tmp_path, capsys):
    path = tmp_path / "code.txt"
    path.write_text("NUM 5\nDECL int x\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("AST genere:\n")
    assert out.endswith(format_ast(build_ast_from_file(path), 0))
    assert "  VAR (x)" in out