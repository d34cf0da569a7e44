import pytest

from circuit_structure.expressions import (
    ArrayAccess,
    ArrayInLine,
    Call,
    ComponentAccess,
    InfixOp,
    InfixOpcode,
    InlineSwitchOp,
    Number,
    ParallelOp,
    PrefixOp,
    PrefixOpcode,
    Variable,
)
from circuit_structure.meta import Meta


def m():
    return Meta(0, 1)


def var(name, *access):
    return Variable(m(), name, list(access))


def num(value):
    return Number(m(), value)


def collect(expr):
    """Gather all metas of an expression tree, in no particular order."""
    found = [expr.meta]
    for attr in ("lhe", "rhe", "cond", "if_true", "if_false"):
        if hasattr(expr, attr):
            found.extend(collect(getattr(expr, attr)))
    for attr in ("args", "values"):
        for child in getattr(expr, attr, []):
            found.extend(collect(child))
    for acc in getattr(expr, "access", []):
        if isinstance(acc, ArrayAccess):
            found.extend(collect(acc.index))
    return found


def test_opcode_symbols_round_trip():
    for op in InfixOpcode:
        assert InfixOpcode(str(op)) is op
    for op in PrefixOpcode:
        assert PrefixOpcode(str(op)) is op
    assert str(InfixOpcode.INT_DIV) == "\\"
    assert str(PrefixOpcode.COMPLEMENT) == "~"


def test_infix_display():
    expr = InfixOp(m(), var("x"), InfixOpcode.ADD, num(1))
    assert str(expr) == "(x + 1)"
    assert repr(expr) == str(expr)


def test_prefix_and_parallel_display():
    expr = PrefixOp(m(), PrefixOpcode.BOOL_NOT, var("a"))
    assert str(expr) == "!(a)"
    assert str(ParallelOp(m(), var("c"))) == "parallel c"


def test_switch_display():
    expr = InlineSwitchOp(m(), var("c"), num(1), num(2))
    assert str(expr) == "(c? 1 : 2)"


def test_variable_with_accesses_display():
    expr = var("comp", ArrayAccess(num(3)), ComponentAccess("out"))
    assert str(expr) == "comp[3].out"


def test_call_and_array_display():
    call = Call(m(), "f", [var("a"), num(2)])
    assert str(call) == f"f({var('a')}, {num(2)})"
    array = ArrayInLine(m(), [num(4), num(5)])
    assert str(array) == "[4, 5]"
    assert str(Call(m(), "g", [])) == "g()"


def test_number_big_value():
    big = 21888242871839275222246405745257275088548364400416034343698204186575808495617
    assert str(num(big)) == str(big)


def test_fill_preorder_numbering():
    left = var("x")
    right = num(1)
    root = InfixOp(m(), left, InfixOpcode.MUL, right)
    next_id = root.fill(7, 10)
    assert next_id == 13
    assert (root.meta.elem_id, left.meta.elem_id, right.meta.elem_id) == (10, 11, 12)
    assert all(meta.require_file_id() == 7 for meta in collect(root))


def test_fill_numbers_every_node_uniquely():
    expr = InlineSwitchOp(
        m(),
        var("v", ArrayAccess(num(0)), ComponentAccess("o"), ArrayAccess(var("i"))),
        Call(m(), "f", [num(1), ArrayInLine(m(), [num(2), num(3)])]),
        PrefixOp(m(), PrefixOpcode.SUB, ParallelOp(m(), var("p"))),
    )
    metas = collect(expr)
    next_id = expr.fill(2)
    ids = sorted(meta.elem_id for meta in metas)
    assert ids == list(range(len(metas)))
    assert next_id == len(metas)
    assert {meta.file_id for meta in metas} == {2}


def test_fill_variable_access_order():
    first = num(0)
    second = var("j")
    expr = var("arr", ArrayAccess(first), ArrayAccess(second))
    expr.fill(1, 0)
    assert expr.meta.elem_id == 0
    assert first.meta.elem_id == 1
    assert second.meta.elem_id == 2


def test_expression_equality():
    assert InfixOp(m(), var("a"), InfixOpcode.ADD, num(1)) == InfixOp(
        m(), var("a"), InfixOpcode.ADD, num(1)
    )
    assert not var("a") == var("b")


@pytest.mark.parametrize("op", list(InfixOpcode))
def test_infix_display_uses_symbol(op):
    expr = InfixOp(m(), var("a"), op, var("b"))
    assert str(expr) == f"(a {op.value} b)"