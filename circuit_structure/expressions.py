"""Expression nodes of the circuit syntax tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, Union

from .meta import Meta


class InfixOpcode(enum.Enum):
    """Binary operators; the value is the operator's source symbol."""

    MUL = "*"
    DIV = "/"
    ADD = "+"
    SUB = "-"
    POW = "**"
    INT_DIV = "\\"
    MOD = "%"
    SHIFT_L = "<<"
    SHIFT_R = ">>"
    LESSER_EQ = "<="
    GREATER_EQ = ">="
    LESSER = "<"
    GREATER = ">"
    EQ = "=="
    NOT_EQ = "!="
    BOOL_OR = "||"
    BOOL_AND = "&&"
    BIT_OR = "|"
    BIT_AND = "&"
    BIT_XOR = "^"

    def __str__(self) -> str:
        return self.value


class PrefixOpcode(enum.Enum):
    """Unary operators; the value is the operator's source symbol."""

    SUB = "-"
    BOOL_NOT = "!"
    COMPLEMENT = "~"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ComponentAccess:
    """Access to a named member of a component."""

    name: str

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass
class ArrayAccess:
    """Indexed access into an array."""

    index: Expression

    def __str__(self) -> str:
        return f"[{self.index}]"


Access = Union[ComponentAccess, ArrayAccess]


class Expression:
    """Base class of all expression nodes."""

    meta: Meta

    def _subexpressions(self) -> Iterator[Expression]:
        return iter(())

    def fill(self, file_id: int, elem_id: int = 0) -> int:
        """Number this node and its descendants in pre-order starting at
        elem_id, set their file id, and return the next unused id."""
        self.meta.elem_id = elem_id
        self.meta.file_id = file_id
        next_id = elem_id + 1
        for child in self._subexpressions():
            next_id = child.fill(file_id, next_id)
        return next_id

    def __repr__(self) -> str:
        return str(self)


def _join(values) -> str:
    return ", ".join(str(value) for value in values)


@dataclass(repr=False)
class InfixOp(Expression):
    meta: Meta
    lhe: Expression
    infix_op: InfixOpcode
    rhe: Expression

    def _subexpressions(self) -> Iterator[Expression]:
        yield self.lhe
        yield self.rhe

    def __str__(self) -> str:
        return f"({self.lhe} {self.infix_op} {self.rhe})"


@dataclass(repr=False)
class PrefixOp(Expression):
    meta: Meta
    prefix_op: PrefixOpcode
    rhe: Expression

    def _subexpressions(self) -> Iterator[Expression]:
        yield self.rhe

    def __str__(self) -> str:
        return f"{self.prefix_op}({self.rhe})"


@dataclass(repr=False)
class InlineSwitchOp(Expression):
    meta: Meta
    cond: Expression
    if_true: Expression
    if_false: Expression

    def _subexpressions(self) -> Iterator[Expression]:
        yield self.cond
        yield self.if_true
        yield self.if_false

    def __str__(self) -> str:
        return f"({self.cond}? {self.if_true} : {self.if_false})"


@dataclass(repr=False)
class ParallelOp(Expression):
    meta: Meta
    rhe: Expression

    def _subexpressions(self) -> Iterator[Expression]:
        yield self.rhe

    def __str__(self) -> str:
        return f"parallel {self.rhe}"


@dataclass(repr=False)
class Variable(Expression):
    meta: Meta
    name: str
    access: list[Access] = field(default_factory=list)

    def _subexpressions(self) -> Iterator[Expression]:
        for acc in self.access:
            if isinstance(acc, ArrayAccess):
                yield acc.index

    def __str__(self) -> str:
        return self.name + "".join(str(acc) for acc in self.access)


@dataclass(repr=False)
class Number(Expression):
    meta: Meta
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(repr=False)
class Call(Expression):
    meta: Meta
    id: str
    args: list[Expression] = field(default_factory=list)

    def _subexpressions(self) -> Iterator[Expression]:
        yield from self.args

    def __str__(self) -> str:
        return f"{self.id}({_join(self.args)})"


@dataclass(repr=False)
class ArrayInLine(Expression):
    meta: Meta
    values: list[Expression] = field(default_factory=list)

    def _subexpressions(self) -> Iterator[Expression]:
        yield from self.values

    def __str__(self) -> str:
        return f"[{_join(self.values)}]"