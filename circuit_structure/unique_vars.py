"""Renaming of declared variables so that every name is globally unique."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

from .errors import ParameterNameCollisionError, ShadowingVariableWarning
from .expressions import (
    ArrayAccess,
    ArrayInLine,
    Call,
    Expression,
    InfixOp,
    InlineSwitchOp,
    Number,
    ParallelOp,
    PrefixOp,
    Variable,
)
from .parameters import Parameters
from .statements import (
    Assert,
    Block,
    ConstraintEquality,
    Declaration,
    IfThenElse,
    InitializationBlock,
    LogCall,
    LogExp,
    Return,
    Statement,
    Substitution,
    While,
)

T = TypeVar("T")


class _Scopes(Generic[T]):
    """Nested name bindings; lookups search from the innermost scope out."""

    def __init__(self) -> None:
        self._blocks: list[dict[str, T]] = [{}]

    def get(self, name: str) -> Optional[T]:
        for block in reversed(self._blocks):
            if name in block:
                return block[name]
        return None

    def add(self, name: str, value: T) -> None:
        self._blocks[-1][name] = value

    def push(self) -> None:
        self._blocks.append({})

    def pop(self) -> None:
        self._blocks.pop()


@dataclass(frozen=True)
class _DeclarationSite:
    file_id: Optional[int]
    file_location: range


class _DeclarationEnvironment:
    def __init__(self) -> None:
        self.declarations: _Scopes[_DeclarationSite] = _Scopes()
        self.scoped_versions: _Scopes[int] = _Scopes()
        # Unscoped: None means the name has been declared exactly once.
        self.global_versions: dict[str, Optional[int]] = {}

    def add_declaration(
        self, name: str, file_id: Optional[int], file_location: range
    ) -> Optional[int]:
        """Record a declaration and return the version to give it, if any."""
        self.declarations.add(name, _DeclarationSite(file_id, file_location))
        return self._next_version(name)

    def current_version(self, name: str) -> Optional[int]:
        return self.scoped_versions.get(name)

    def _next_version(self, name: str) -> Optional[int]:
        if name not in self.global_versions:
            version = None
        elif self.global_versions[name] is None:
            version = 0
        else:
            version = self.global_versions[name] + 1
        self.global_versions[name] = version
        if version is not None:
            self.scoped_versions.add(name, version)
        return version

    @contextmanager
    def scope(self) -> Iterator[None]:
        self.declarations.push()
        self.scoped_versions.push()
        try:
            yield
        finally:
            self.declarations.pop()
            self.scoped_versions.pop()

    @classmethod
    def from_parameters(cls, parameters: Parameters) -> _DeclarationEnvironment:
        env = cls()
        for name in parameters:
            if env.add_declaration(name, parameters.file_id, parameters.file_location) is not None:
                raise ParameterNameCollisionError(
                    name, parameters.file_id, parameters.file_location
                )
        return env


def ensure_unique_variables(
    stmt: Statement, parameters: Parameters, reports: list
) -> None:
    """Rename declarations in a definition body so every name is unique.

    A name declared more than once gets a version suffix (`x.0`, `x.1`, ...)
    on every later declaration and on the uses in its scope. Declarations
    that shadow a visible one append a ShadowingVariableWarning to reports.
    Raises ParameterNameCollisionError if two parameters share a name.
    """
    if not isinstance(stmt, Block):
        raise TypeError("unique variable renaming expects a definition body block")
    env = _DeclarationEnvironment.from_parameters(parameters)
    _visit_statement(stmt, env, reports)


def _versioned(name: str, env: _DeclarationEnvironment) -> str:
    version = env.current_version(name)
    return name if version is None else f"{name}.{version}"


def _visit_statement(stmt: Statement, env: _DeclarationEnvironment, reports: list) -> None:
    if isinstance(stmt, Declaration):
        for size in stmt.dimensions:
            _visit_expression(size, env)
        previous = env.declarations.get(stmt.name)
        if previous is not None:
            reports.append(
                ShadowingVariableWarning(
                    stmt.name,
                    stmt.meta.file_id,
                    stmt.meta.location,
                    previous.file_id,
                    previous.file_location,
                )
            )
        version = env.add_declaration(stmt.name, stmt.meta.file_id, stmt.meta.location)
        if version is not None:
            stmt.name = f"{stmt.name}.{version}"
    elif isinstance(stmt, Substitution):
        stmt.var = _versioned(stmt.var, env)
        for access in stmt.access:
            if isinstance(access, ArrayAccess):
                _visit_expression(access.index, env)
        _visit_expression(stmt.rhe, env)
    elif isinstance(stmt, LogCall):
        for arg in stmt.args:
            if isinstance(arg, LogExp):
                _visit_expression(arg.value, env)
    elif isinstance(stmt, Return):
        _visit_expression(stmt.value, env)
    elif isinstance(stmt, ConstraintEquality):
        _visit_expression(stmt.lhe, env)
        _visit_expression(stmt.rhe, env)
    elif isinstance(stmt, Assert):
        _visit_expression(stmt.arg, env)
    elif isinstance(stmt, InitializationBlock):
        for init in stmt.initializations:
            _visit_statement(init, env, reports)
    elif isinstance(stmt, While):
        _visit_expression(stmt.cond, env)
        _visit_statement(stmt.stmt, env, reports)
    elif isinstance(stmt, Block):
        with env.scope():
            for inner in stmt.stmts:
                _visit_statement(inner, env, reports)
    elif isinstance(stmt, IfThenElse):
        _visit_expression(stmt.cond, env)
        _visit_statement(stmt.if_case, env, reports)
        if stmt.else_case is not None:
            _visit_statement(stmt.else_case, env, reports)
    else:
        raise TypeError(f"unknown statement {stmt!r}")


def _visit_expression(expr: Expression, env: _DeclarationEnvironment) -> None:
    if isinstance(expr, Variable):
        expr.name = _versioned(expr.name, env)
        for access in expr.access:
            if isinstance(access, ArrayAccess):
                _visit_expression(access.index, env)
    elif isinstance(expr, InfixOp):
        _visit_expression(expr.lhe, env)
        _visit_expression(expr.rhe, env)
    elif isinstance(expr, (PrefixOp, ParallelOp)):
        _visit_expression(expr.rhe, env)
    elif isinstance(expr, InlineSwitchOp):
        _visit_expression(expr.cond, env)
        _visit_expression(expr.if_true, env)
        _visit_expression(expr.if_false, env)
    elif isinstance(expr, Call):
        for arg in expr.args:
            _visit_expression(arg, env)
    elif isinstance(expr, ArrayInLine):
        for value in expr.values:
            _visit_expression(value, env)
    elif not isinstance(expr, Number):
        raise TypeError(f"unknown expression {expr!r}")