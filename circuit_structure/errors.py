"""Errors and warnings raised while building control-flow graphs."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class Severity(enum.Enum):
    """How serious a reported problem is."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Label:
    """A source location attached to a reported problem."""

    location: range
    file_id: int
    message: str
    primary: bool = True


class CFGError(Exception):
    """Base class of all control-flow graph construction problems."""

    severity: Severity = Severity.ERROR
    code: str = ""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name

    @property
    def report_message(self) -> str:
        """The headline shown when the problem is reported."""
        raise NotImplementedError

    @property
    def labels(self) -> tuple[Label, ...]:
        """Source locations that point at the problem."""
        return ()

    @property
    def notes(self) -> tuple[str, ...]:
        """Extra advice attached to the report."""
        return ()


class _LocatedError(CFGError):
    def __init__(
        self,
        name: str,
        message: str,
        file_id: Optional[int],
        file_location: range,
    ) -> None:
        super().__init__(name, message)
        self.file_id = file_id
        self.file_location = file_location

    _label_message = ""

    @property
    def labels(self) -> tuple[Label, ...]:
        if self.file_id is None:
            return ()
        return (Label(self.file_location, self.file_id, self._label_message),)


class UndefinedVariableError(_LocatedError):
    """A variable is read before it is declared or written."""

    code = "UninitializedSymbolInExpression"

    def __init__(
        self, name: str, file_id: Optional[int] = None, file_location: range = range(0)
    ) -> None:
        super().__init__(
            name,
            f"The variable `{name}` is read before it is declared/written.",
            file_id,
            file_location,
        )

    @property
    def report_message(self) -> str:
        return f"The variable `{self.name}` is used before it is defined."

    @property
    def _label_message(self) -> str:  # type: ignore[override]
        return f"The variable `{self.name}` is first seen here."


class InvalidVariableNameError(_LocatedError):
    """A variable name contains invalid characters."""

    code = "ParseFail"
    _label_message = "This variable name contains invalid characters."

    def __init__(
        self, name: str, file_id: Optional[int] = None, file_location: range = range(0)
    ) -> None:
        super().__init__(
            name,
            f"The variable name `{name}` contains invalid characters.",
            file_id,
            file_location,
        )

    @property
    def report_message(self) -> str:
        return f"Invalid variable name `{self.name}`."


class ShadowingVariableWarning(CFGError):
    """A declaration shadows an earlier declaration of the same name."""

    severity = Severity.WARNING
    code = "ShadowingVariable"

    def __init__(
        self,
        name: str,
        primary_file_id: Optional[int] = None,
        primary_location: range = range(0),
        secondary_file_id: Optional[int] = None,
        secondary_location: range = range(0),
    ) -> None:
        super().__init__(
            name,
            f"The declaration of the variable `{name}` shadows a previous declaration.",
        )
        self.primary_file_id = primary_file_id
        self.primary_location = primary_location
        self.secondary_file_id = secondary_file_id
        self.secondary_location = secondary_location

    @property
    def report_message(self) -> str:
        return f"Declaration of variable `{self.name}` shadows previous declaration."

    @property
    def labels(self) -> tuple[Label, ...]:
        labels = []
        if self.primary_file_id is not None:
            labels.append(
                Label(self.primary_location, self.primary_file_id, "Shadowing declaration here.")
            )
        if self.secondary_file_id is not None:
            labels.append(
                Label(
                    self.secondary_location,
                    self.secondary_file_id,
                    "Shadowed variable is declared here.",
                    primary=False,
                )
            )
        return tuple(labels)

    @property
    def notes(self) -> tuple[str, ...]:
        return (f"Consider renaming the second occurrence of `{self.name}`.",)


class ParameterNameCollisionError(_LocatedError):
    """Two parameters of a definition share a name."""

    severity = Severity.WARNING
    code = "ParameterNameCollision"
    _label_message = "Parameters declared here."

    def __init__(
        self, name: str, file_id: Optional[int] = None, file_location: range = range(0)
    ) -> None:
        super().__init__(
            name,
            f"Multiple parameters with the same name `{name}` in function or template definition.",
            file_id,
            file_location,
        )

    @property
    def report_message(self) -> str:
        return f"Parameter `{self.name}` declared multiple times."

    @property
    def notes(self) -> tuple[str, ...]:
        return (f"Rename the second occurrence of `{self.name}`.",)