import pytest

from circuit_structure.expressions import ArrayAccess, ComponentAccess, Number, Variable
from circuit_structure.meta import Meta
from circuit_structure.statements import (
    AST,
    Assert,
    AssignOp,
    Block,
    ConstraintEquality,
    Declaration,
    Function,
    IfThenElse,
    Include,
    InitializationBlock,
    LogCall,
    LogExp,
    LogStr,
    Return,
    SignalElementType,
    SignalType,
    Substitution,
    Template,
    VariableKind,
    VariableType,
    While,
    build_log_call,
)


def m():
    return Meta(0, 1)


def num(value):
    return Number(m(), value)


def var(name):
    return Variable(m(), name)


def test_signal_operators():
    assert AssignOp.ASSIGN_SIGNAL.is_signal_operator()
    assert AssignOp.ASSIGN_CONSTRAINT_SIGNAL.is_signal_operator()
    assert not AssignOp.ASSIGN_VAR.is_signal_operator()


@pytest.mark.parametrize(
    "op, text",
    [
        (AssignOp.ASSIGN_VAR, "x = y"),
        (AssignOp.ASSIGN_SIGNAL, "x <-- y"),
        (AssignOp.ASSIGN_CONSTRAINT_SIGNAL, "x <== y"),
    ],
)
def test_assign_op_symbols(op, text):
    stmt = Substitution(m(), "x", [], op, var("y"))
    assert str(stmt) == text


@pytest.mark.parametrize(
    "xtype, text",
    [
        (VariableType.var(), "var"),
        (VariableType.component(), "component"),
        (VariableType.signal(SignalType.INTERMEDIATE), "signal"),
        (VariableType.signal(SignalType.INPUT), "signal input"),
        (VariableType.signal(SignalType.OUTPUT, SignalElementType.BINARY), "signal output"),
    ],
)
def test_variable_type_display(xtype, text):
    assert str(xtype) == text


def test_variable_type_validation():
    with pytest.raises(ValueError):
        VariableType(VariableKind.SIGNAL)
    with pytest.raises(ValueError):
        VariableType(VariableKind.VAR, SignalType.INPUT)
    assert VariableType(VariableKind.SIGNAL, SignalType.INPUT).element_type is SignalElementType.EMPTY


def test_declaration_display_and_default_constant():
    decl = Declaration(m(), VariableType.signal(SignalType.INPUT), "in", [num(2)])
    assert str(decl) == "signal input in"
    assert decl.is_constant is True


def test_substitution_display():
    stmt = Substitution(
        m(), "c", [ArrayAccess(num(1)), ComponentAccess("out")], AssignOp.ASSIGN_CONSTRAINT_SIGNAL, var("y")
    )
    assert str(stmt) == "c[1].out <== y"


def test_other_statement_displays():
    assert str(IfThenElse(m(), var("a"), Block(m()))) == "if a"
    assert str(IfThenElse(m(), var("a"), Block(m()), Block(m()))) == "if-else a"
    assert str(While(m(), var("a"), Block(m()))) == "while a"
    assert str(Return(m(), var("a"))) == "return a"
    assert str(Assert(m(), var("a"))) == "assert(a)"
    assert str(ConstraintEquality(m(), var("a"), var("b"))) == "a === b"
    assert str(Block(m(), [Return(m(), var("a"))])) == ""
    assert str(InitializationBlock(m(), VariableType.var())) == ""


def test_log_call_display():
    stmt = LogCall(m(), [LogStr("value"), LogExp(var("x"))])
    assert str(stmt) == "log(value, x)"


def test_statement_repr():
    assert repr(While(m(), var("a"), Block(m()))) == "Statement::While"
    assert repr(Block(m())) == "Statement::Block"


def test_build_log_call_splits_long_strings():
    text = "ab" * 300
    stmt = build_log_call(m(), [LogStr(text), LogExp(var("x"))])
    strings = [arg for arg in stmt.args if isinstance(arg, LogStr)]
    assert "".join(arg.message for arg in strings) == text
    assert all(len(arg.message) <= 230 for arg in strings)
    assert len(strings) == 3
    assert isinstance(stmt.args[-1], LogExp)


def test_build_log_call_drops_empty_string():
    stmt = build_log_call(m(), [LogStr(""), LogExp(var("x"))])
    assert len(stmt.args) == 1
    assert str(stmt.args[0]) == "x"


def _collect(node, out):
    out.append(node)
    for child in node._children() if hasattr(node, "_children") else node._subexpressions():
        _collect(child, out)
    return out


def test_fill_numbers_in_preorder():
    body = Block(
        m(),
        [
            IfThenElse(m(), var("a"), Block(m(), [Return(m(), num(1))]), Block(m())),
            Assert(m(), ConstraintEquality(m(), var("a"), var("b")).lhe),
        ],
    )
    next_id = body.fill(7, 0)
    nodes = _collect(body, [])
    assert [node.meta.elem_id for node in nodes] == list(range(len(nodes)))
    assert next_id == len(nodes)
    assert all(node.meta.file_id == 7 for node in nodes)


def test_substitution_fills_rhs_before_access():
    index = num(0)
    rhs = num(5)
    stmt = Substitution(m(), "x", [ArrayAccess(index)], AssignOp.ASSIGN_VAR, rhs)
    stmt.fill(1, 10)
    assert stmt.meta.elem_id == 10
    assert rhs.meta.elem_id < index.meta.elem_id


def test_log_call_fill_skips_strings():
    expr = var("x")
    stmt = LogCall(m(), [LogStr("s"), LogExp(expr)])
    assert stmt.fill(2, 0) == 2
    assert expr.meta.elem_id == 1


def test_ast_custom_gates_declared():
    body = Block(m())
    plain = Template(m(), "A", [], range(0, 0), body)
    gate = Template(m(), "B", [], range(0, 0), body, is_custom_gate=True)
    func = Function(m(), "f", ["x"], range(0, 1), body)
    assert AST(m(), definitions=[plain, func]).custom_gates_declared is False
    assert AST(m(), definitions=[plain, gate]).custom_gates_declared is True


def test_ast_decompose():
    meta = m()
    include = Include(m(), "lib.circom")
    func = Function(m(), "f", ["x"], range(0, 1), Block(m()))
    main = (["a"], var("Main"))
    ast = AST(meta, (2, 0, 8), True, [include], [func], main)
    assert ast.decompose() == (meta, (2, 0, 8), [include], [func], main)