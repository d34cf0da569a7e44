"""Source metadata and analysis knowledge attached to syntax tree nodes."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Optional


class TypeReduction(enum.Enum):
    """The kind of value an expression reduces to."""

    VARIABLE = "variable"
    COMPONENT = "component"
    SIGNAL = "signal"


@dataclass
class TypeKnowledge:
    """What is known about the type an expression reduces to."""

    _reduces_to: Optional[TypeReduction] = field(default=None, init=False)

    @property
    def reduces_to(self) -> TypeReduction:
        if self._reduces_to is None:
            raise ValueError("type reduction looked at before being initialized")
        return self._reduces_to

    @reduces_to.setter
    def reduces_to(self, value: TypeReduction) -> None:
        self._reduces_to = value

    def is_var(self) -> bool:
        return self.reduces_to is TypeReduction.VARIABLE

    def is_component(self) -> bool:
        return self.reduces_to is TypeReduction.COMPONENT

    def is_signal(self) -> bool:
        return self.reduces_to is TypeReduction.SIGNAL


@dataclass
class MemoryKnowledge:
    """What is known about the memory layout of a value."""

    _concrete_dimensions: Optional[tuple[int, ...]] = field(default=None, init=False)
    _full_length: Optional[int] = field(default=None, init=False)
    _abstract_memory_address: Optional[int] = field(default=None, init=False)

    def set_concrete_dimensions(self, value) -> None:
        """Record the dimensions and derive the total number of elements."""
        dimensions = tuple(value)
        self._full_length = math.prod(dimensions)
        self._concrete_dimensions = dimensions

    @property
    def concrete_dimensions(self) -> tuple[int, ...]:
        if self._concrete_dimensions is None:
            raise ValueError("concrete dimensions looked at before being initialized")
        return self._concrete_dimensions

    @property
    def full_length(self) -> int:
        if self._full_length is None:
            raise ValueError("full length looked at before being initialized")
        return self._full_length

    @property
    def abstract_memory_address(self) -> int:
        if self._abstract_memory_address is None:
            raise ValueError("abstract memory address looked at before being initialized")
        return self._abstract_memory_address

    @abstract_memory_address.setter
    def abstract_memory_address(self, value: int) -> None:
        self._abstract_memory_address = value


@dataclass
class Meta:
    """Position and analysis data for a syntax tree node."""

    start: int
    end: int
    elem_id: int = 0
    location: Optional[range] = None
    file_id: Optional[int] = None
    component_inference: Optional[str] = None
    type_knowledge: TypeKnowledge = field(default_factory=TypeKnowledge)
    memory_knowledge: MemoryKnowledge = field(default_factory=MemoryKnowledge)

    def __post_init__(self) -> None:
        if self.location is None:
            self.location = range(self.start, self.end)

    def change_location(self, location: range, file_id: Optional[int]) -> None:
        self.location = location
        self.file_id = file_id

    def require_file_id(self) -> int:
        """Return the file id, raising if it has not been set."""
        if self.file_id is None:
            raise ValueError("empty file id accessed")
        return self.file_id