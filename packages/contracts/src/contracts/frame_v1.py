from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class QueryStatus(str, Enum):
    SCHEDULED = "Scheduled"
    RUNNING = "Running"
    COMPLETE = "Complete"
    FAILED = "Failed"
    CANCELLED = "Cancelled"
    TIMEOUT = "Timeout"
    UNKNOWN = "Unknown"

    @classmethod
    def from_remote(cls, value: Optional[str]) -> "QueryStatus":
        # New upstream statuses degrade to Unknown instead of failing
        for member in cls:
            if member.value == value:
                return member
        return cls.UNKNOWN

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset(
    {QueryStatus.COMPLETE, QueryStatus.FAILED, QueryStatus.CANCELLED, QueryStatus.TIMEOUT}
)


class QueryStatisticsV1(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    bytes_scanned: Optional[float] = None
    records_matched: Optional[float] = None
    records_scanned: Optional[float] = None


FieldValue = Union[str, float, int, bool, None]


class FieldV1(BaseModel):
    """One named, homogeneously typed column. None is the typed null."""

    name: str
    type: Literal["string", "number", "boolean"] = "string"
    values: list[FieldValue] = Field(default_factory=list)


class FrameV1(BaseModel):
    """Named table of equal-length columns, tagged with the caller's refId."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    ref_id: Optional[str] = None
    fields: list[FieldV1] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def equal_field_lengths(self) -> "FrameV1":
        lengths = {len(f.values) for f in self.fields}
        if len(lengths) > 1:
            raise ValueError(f"frame {self.name!r} has fields of different lengths: {sorted(lengths)}")
        return self

    @property
    def length(self) -> int:
        return len(self.fields[0].values) if self.fields else 0

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def column(self, name: str) -> FieldV1:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)

    def encode(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")
