from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


KNOWN_ACTIONS = (
    "DescribeLogGroups",
    "GetLogGroupFields",
    "StartQuery",
    "StopQuery",
    "GetQueryResults",
)

# A time bound may be a datetime, epoch millis, ISO-8601 or "now-15m"
TimeBound = Union[datetime, int, str]


class TimeRangeV1(BaseModel):
    """Dashboard-style time range applied to every StartQuery in a batch.

    Bounds are kept raw here; they are parsed and ordered by the collector so
    that an invalid range fails the affected request only, not the batch.
    """

    model_config = ConfigDict(populate_by_name=True)

    from_: TimeBound = Field(alias="from")
    to: TimeBound


class LogQueryV1(BaseModel):
    """One tagged request of a batch. Parameters are action specific."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ref_id: str = Field(min_length=1)
    # Kept as a plain string: unknown tags are reported per refId
    action: str = Field(min_length=1)

    log_group_name_prefix: Optional[str] = None
    limit: Optional[int] = None
    log_group_name: Optional[str] = None
    time: Optional[int] = None
    log_group_names: list[str] = Field(default_factory=list)
    query_string: str = ""
    query_id: Optional[str] = None

    @field_validator("log_group_names")
    @classmethod
    def clean_log_group_names(cls, v: list[str]) -> list[str]:
        return [x.strip() for x in v if x and x.strip()]


class LogQueryBatchV1(BaseModel):
    """
    Public input contract (v1).
    A batch of tagged log actions plus the time range used by StartQuery.
    """

    model_config = ConfigDict(populate_by_name=True)

    range: Optional[TimeRangeV1] = None
    queries: list[LogQueryV1] = Field(min_length=1)

    @field_validator("queries")
    @classmethod
    def unique_ref_ids(cls, v: list[LogQueryV1]) -> list[LogQueryV1]:
        seen: set[str] = set()
        for q in v:
            if q.ref_id in seen:
                raise ValueError(f"duplicate refId in batch: {q.ref_id}")
            seen.add(q.ref_id)
        return v
