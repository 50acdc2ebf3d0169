"""Type representations used by the Medi type checker."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Tuple, Union


class HealthcareEntityKind(Enum):
    PATIENT = "patient"
    OBSERVATION = "observation"
    MEDICATION = "medication"


class PrimitiveType(Enum):
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"
    VOID = "void"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StructType:
    """A struct-like type whose fields are looked up by name."""

    fields: Mapping[str, "MediType"] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", dict(self.fields))


@dataclass(frozen=True)
class RecordType:
    """A record with ordered, named fields."""

    fields: Tuple[Tuple[str, "MediType"], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "fields", tuple((name, typ) for name, typ in self.fields)
        )


@dataclass(frozen=True)
class ListType:
    element: "MediType"


@dataclass(frozen=True)
class HealthcareEntityType:
    kind: HealthcareEntityKind


@dataclass(frozen=True)
class FunctionType:
    params: Tuple["MediType", ...]
    return_type: "MediType"

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))


MediType = Union[
    PrimitiveType,
    StructType,
    RecordType,
    ListType,
    HealthcareEntityType,
    FunctionType,
]