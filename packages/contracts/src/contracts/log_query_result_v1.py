from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .frame_v1 import FrameV1


class QueryErrorV1(BaseModel):
    type: str  # InvalidTimeRange, InvalidParameters, RemoteServiceError, UnrecognizedAction
    message: str


class RefResultV1(BaseModel):
    """Frame-or-error outcome for a single refId."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ref_id: str
    frames: list[FrameV1] = Field(default_factory=list)
    error: Optional[QueryErrorV1] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LogQueryBatchResponseV1(BaseModel):
    # Keyed by refId, in request order
    results: dict[str, RefResultV1] = Field(default_factory=dict)
