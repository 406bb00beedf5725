from sniptor.tree import ASTNode, ASTNodeType, node_type_name


def test_node_type_names():
    assert node_type_name(ASTNodeType.PROGRAM) == "PROGRAM"
    assert node_type_name(ASTNodeType.ARGUMENT) == "ARGUMENT"
    assert node_type_name(0) == "PROGRAM"


def test_unknown_node_type():
    assert node_type_name(999) == "UNKNOWN"
    assert node_type_name(-1) == "UNKNOWN"


def test_every_type_has_its_name():
    for kind in ASTNodeType:
        assert node_type_name(kind) == kind.name


def test_new_node_defaults():
    node = ASTNode(ASTNodeType.LITERAL, "42")
    assert node.value == "42"
    assert node.num_value == 0
    assert node.real_value == 0.0
    assert node.children == []


def test_add_child_returns_parent():
    parent = ASTNode(ASTNodeType.PROGRAM)
    child = ASTNode(ASTNodeType.IDENTIFIER, "x")
    result = parent.add_child(child)
    assert result is parent
    assert parent.children == [child]


def test_children_not_shared():
    a = ASTNode(ASTNodeType.PROGRAM)
    b = ASTNode(ASTNodeType.PROGRAM)
    a.add_child(ASTNode(ASTNodeType.TYPE, "int"))
    assert b.children == []


def test_format_tree():
    root = ASTNode(ASTNodeType.PROGRAM)
    decl = ASTNode(ASTNodeType.VARIABLE_DECLARATION)
    decl.add_child(ASTNode(ASTNodeType.TYPE, "int"))
    decl.add_child(ASTNode(ASTNodeType.IDENTIFIER, "x"))
    root.add_child(decl)
    assert root.format() == (
        "Node type: PROGRAM\n"
        "  Node type: VARIABLE_DECLARATION\n"
        "    Node type: TYPE, value: int\n"
        "    Node type: IDENTIFIER, value: x\n"
    )


def test_format_with_indent():
    node = ASTNode(ASTNodeType.LITERAL, "1")
    assert node.format(2) == "    Node type: LITERAL, value: 1\n"


def test_print_writes_format(capsys):
    root = ASTNode(ASTNodeType.PROGRAM).add_child(ASTNode(ASTNodeType.LITERAL, "7"))
    root.print(1)
    assert capsys.readouterr().out == root.format(1)