"""Statement, definition and program nodes of the circuit syntax tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from .expressions import Access, ArrayAccess, Expression
from .meta import Meta

Version = tuple[int, int, int]
MainComponent = tuple[list[str], Expression]

_LOG_CHUNK_LENGTH = 230


class AssignOp(enum.Enum):
    """Assignment operators; the value is the operator's source symbol."""

    ASSIGN_VAR = "="
    ASSIGN_SIGNAL = "<--"
    ASSIGN_CONSTRAINT_SIGNAL = "<=="

    def is_signal_operator(self) -> bool:
        return self in (AssignOp.ASSIGN_SIGNAL, AssignOp.ASSIGN_CONSTRAINT_SIGNAL)

    def __str__(self) -> str:
        return self.value


class SignalType(enum.Enum):
    """Direction of a signal; the value is its source keyword."""

    OUTPUT = "output"
    INPUT = "input"
    INTERMEDIATE = ""

    def __str__(self) -> str:
        return self.value


class SignalElementType(enum.Enum):
    """The kind of value a signal carries."""

    EMPTY = "empty"
    BINARY = "binary"
    FIELD_ELEMENT = "field_element"


class VariableKind(enum.Enum):
    """Whether a declared name is a variable, a signal or a component."""

    VAR = "var"
    SIGNAL = "signal"
    COMPONENT = "component"


@dataclass(frozen=True)
class VariableType:
    """The declared type of a name."""

    kind: VariableKind
    signal_type: Optional[SignalType] = None
    element_type: Optional[SignalElementType] = None

    def __post_init__(self) -> None:
        if self.kind is VariableKind.SIGNAL:
            if self.signal_type is None:
                raise ValueError("a signal type needs a signal direction")
            if self.element_type is None:
                object.__setattr__(self, "element_type", SignalElementType.EMPTY)
        elif self.signal_type is not None or self.element_type is not None:
            raise ValueError(f"{self.kind.value} types carry no signal information")

    @classmethod
    def var(cls) -> VariableType:
        return cls(VariableKind.VAR)

    @classmethod
    def component(cls) -> VariableType:
        return cls(VariableKind.COMPONENT)

    @classmethod
    def signal(
        cls,
        signal_type: SignalType,
        element_type: SignalElementType = SignalElementType.EMPTY,
    ) -> VariableType:
        return cls(VariableKind.SIGNAL, signal_type, element_type)

    def __str__(self) -> str:
        if self.kind is VariableKind.SIGNAL:
            if self.signal_type is SignalType.INTERMEDIATE:
                return "signal"
            return f"signal {self.signal_type}"
        return self.kind.value


@dataclass
class LogStr:
    """A literal string argument of a log call."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class LogExp:
    """An expression argument of a log call."""

    value: Expression

    def __str__(self) -> str:
        return str(self.value)


LogArgument = Union[LogStr, LogExp]
_Node = Union["Statement", Expression]


class Statement:
    """Base class of all statement nodes."""

    meta: Meta

    def _children(self) -> Iterator[_Node]:
        return iter(())

    def fill(self, file_id: int, elem_id: int = 0) -> int:
        """Number this node and its descendants in pre-order starting at
        elem_id, set their file id, and return the next unused id."""
        self.meta.elem_id = elem_id
        self.meta.file_id = file_id
        next_id = elem_id + 1
        for child in self._children():
            next_id = child.fill(file_id, next_id)
        return next_id

    def __repr__(self) -> str:
        return f"Statement::{type(self).__name__}"


def _array_indices(access: list[Access]) -> Iterator[Expression]:
    for acc in access:
        if isinstance(acc, ArrayAccess):
            yield acc.index


@dataclass(repr=False)
class IfThenElse(Statement):
    meta: Meta
    cond: Expression
    if_case: Statement
    else_case: Optional[Statement] = None

    def _children(self) -> Iterator[_Node]:
        yield self.cond
        yield self.if_case
        if self.else_case is not None:
            yield self.else_case

    def __str__(self) -> str:
        keyword = "if" if self.else_case is None else "if-else"
        return f"{keyword} {self.cond}"


@dataclass(repr=False)
class While(Statement):
    meta: Meta
    cond: Expression
    stmt: Statement

    def _children(self) -> Iterator[_Node]:
        yield self.cond
        yield self.stmt

    def __str__(self) -> str:
        return f"while {self.cond}"


@dataclass(repr=False)
class Return(Statement):
    meta: Meta
    value: Expression

    def _children(self) -> Iterator[_Node]:
        yield self.value

    def __str__(self) -> str:
        return f"return {self.value}"


@dataclass(repr=False)
class InitializationBlock(Statement):
    meta: Meta
    xtype: VariableType
    initializations: list[Statement] = field(default_factory=list)

    def _children(self) -> Iterator[_Node]:
        yield from self.initializations

    def __str__(self) -> str:
        return ""


@dataclass(repr=False)
class Declaration(Statement):
    meta: Meta
    xtype: VariableType
    name: str
    dimensions: list[Expression] = field(default_factory=list)
    is_constant: bool = True

    def _children(self) -> Iterator[_Node]:
        yield from self.dimensions

    def __str__(self) -> str:
        return f"{self.xtype} {self.name}"


@dataclass(repr=False)
class Substitution(Statement):
    meta: Meta
    var: str
    access: list[Access]
    op: AssignOp
    rhe: Expression

    def _children(self) -> Iterator[_Node]:
        yield self.rhe
        yield from _array_indices(self.access)

    def __str__(self) -> str:
        target = self.var + "".join(str(acc) for acc in self.access)
        return f"{target} {self.op} {self.rhe}"


@dataclass(repr=False)
class ConstraintEquality(Statement):
    meta: Meta
    lhe: Expression
    rhe: Expression

    def _children(self) -> Iterator[_Node]:
        yield self.lhe
        yield self.rhe

    def __str__(self) -> str:
        return f"{self.lhe} === {self.rhe}"


@dataclass(repr=False)
class LogCall(Statement):
    meta: Meta
    args: list[LogArgument] = field(default_factory=list)

    def _children(self) -> Iterator[_Node]:
        for arg in self.args:
            if isinstance(arg, LogExp):
                yield arg.value

    def __str__(self) -> str:
        return "log(" + ", ".join(str(arg) for arg in self.args) + ")"


@dataclass(repr=False)
class Block(Statement):
    meta: Meta
    stmts: list[Statement] = field(default_factory=list)

    def _children(self) -> Iterator[_Node]:
        yield from self.stmts

    def __str__(self) -> str:
        return ""


@dataclass(repr=False)
class Assert(Statement):
    meta: Meta
    arg: Expression

    def _children(self) -> Iterator[_Node]:
        yield self.arg

    def __str__(self) -> str:
        return f"assert({self.arg})"


def _split_string(text: str) -> list[LogStr]:
    return [
        LogStr(text[start:start + _LOG_CHUNK_LENGTH])
        for start in range(0, len(text), _LOG_CHUNK_LENGTH)
    ]


def build_log_call(meta: Meta, args) -> LogCall:
    """Build a log call, splitting long string arguments into bounded chunks."""
    new_args: list[LogArgument] = []
    for arg in args:
        if isinstance(arg, LogStr):
            new_args.extend(_split_string(arg.message))
        else:
            new_args.append(arg)
    return LogCall(meta, new_args)


@dataclass
class Template:
    """A template definition."""

    meta: Meta
    name: str
    args: list[str]
    arg_location: range
    body: Statement
    parallel: bool = False
    is_custom_gate: bool = False


@dataclass
class Function:
    """A function definition."""

    meta: Meta
    name: str
    args: list[str]
    arg_location: range
    body: Statement


Definition = Union[Template, Function]


@dataclass
class Include:
    """An include directive."""

    meta: Meta
    path: str


@dataclass
class AST:
    """A parsed program."""

    meta: Meta
    compiler_version: Optional[Version] = None
    custom_gates: bool = False
    includes: list[Include] = field(default_factory=list)
    definitions: list[Definition] = field(default_factory=list)
    main_component: Optional[MainComponent] = None
    custom_gates_declared: bool = field(init=False)

    def __post_init__(self) -> None:
        self.custom_gates_declared = any(
            isinstance(definition, Template) and definition.is_custom_gate
            for definition in self.definitions
        )

    def decompose(self):
        """Return (meta, compiler_version, includes, definitions, main_component)."""
        return (
            self.meta,
            self.compiler_version,
            self.includes,
            self.definitions,
            self.main_component,
        )