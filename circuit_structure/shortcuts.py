"""Desugaring helpers that turn surface syntax into core statements."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

from .expressions import Access, Expression, InfixOp, InfixOpcode, Number, Variable
from .meta import Meta
from .statements import (
    AssignOp,
    Block,
    Declaration,
    InitializationBlock,
    Statement,
    Substitution,
    VariableType,
    While,
)


@dataclass
class Symbol:
    """A declared name with its array dimensions and optional initializer."""

    name: str
    dimensions: list[Expression] = field(default_factory=list)
    init: Optional[Expression] = None


def assign_with_op_shortcut(
    op: InfixOpcode,
    meta: Meta,
    variable: tuple[str, list[Access]],
    rhe: Expression,
) -> Substitution:
    """Rewrite `x op= e` as `x = x op e`."""
    name, access = variable
    current = Variable(copy.deepcopy(meta), name, copy.deepcopy(list(access)))
    infix = InfixOp(copy.deepcopy(meta), current, op, rhe)
    return Substitution(meta, name, list(access), AssignOp.ASSIGN_VAR, infix)


def plusplus(meta: Meta, variable: tuple[str, list[Access]]) -> Substitution:
    """Rewrite `x++` as `x = x + 1`."""
    one = Number(copy.deepcopy(meta), 1)
    return assign_with_op_shortcut(InfixOpcode.ADD, meta, variable, one)


def subsub(meta: Meta, variable: tuple[str, list[Access]]) -> Substitution:
    """Rewrite `x--` as `x = x - 1`."""
    one = Number(copy.deepcopy(meta), 1)
    return assign_with_op_shortcut(InfixOpcode.SUB, meta, variable, one)


def for_into_while(
    meta: Meta,
    init: Statement,
    cond: Expression,
    step: Statement,
    body: Statement,
) -> Block:
    """Rewrite a for loop as an initializer followed by a while loop."""
    while_body = Block(copy.deepcopy(body.meta), [body, step])
    loop = While(copy.deepcopy(meta), cond, while_body)
    return Block(meta, [init, loop])


def split_declaration_into_single_nodes(
    meta: Meta,
    xtype: VariableType,
    symbols,
    op: AssignOp,
) -> InitializationBlock:
    """Turn a multi-symbol declaration into single declarations and assignments."""
    initializations: list[Statement] = []
    for symbol in symbols:
        initializations.append(
            Declaration(copy.deepcopy(meta), xtype, symbol.name, list(symbol.dimensions))
        )
        if symbol.init is not None:
            initializations.append(
                Substitution(copy.deepcopy(meta), symbol.name, [], op, symbol.init)
            )
    return InitializationBlock(meta, xtype, initializations)