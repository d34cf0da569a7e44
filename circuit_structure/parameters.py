"""Parameter lists of function and template definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from .statements import Definition


@dataclass
class Parameters:
    """The parameter names of a definition and where they are declared."""

    names: list[str] = field(default_factory=list)
    file_id: Optional[int] = None
    file_location: range = range(0)

    def __post_init__(self) -> None:
        self.names = list(self.names)

    @classmethod
    def from_definition(cls, definition: Definition) -> Parameters:
        """Collect the parameters of a template or function definition."""
        return cls(list(definition.args), definition.meta.file_id, definition.arg_location)

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.names