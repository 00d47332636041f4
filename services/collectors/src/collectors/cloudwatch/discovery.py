"""Log group and field discovery, used to populate query editors."""
from __future__ import annotations

from typing import Optional

from contracts.frame_v1 import FieldV1, FrameV1

from .errors import InvalidParameters
from .frames import single_column_frame
from .insights_client import LogStoreClient
from .limits import DEFAULT_LOG_GROUPS_LIMIT, MAX_LOG_GROUPS_LIMIT


def describe_log_groups(
    client: LogStoreClient,
    *,
    prefix: Optional[str] = None,
    limit: int = DEFAULT_LOG_GROUPS_LIMIT,
    ref_id: Optional[str] = None,
) -> FrameV1:
    if not 1 <= limit <= MAX_LOG_GROUPS_LIMIT:
        raise InvalidParameters(f"limit must be between 1 and {MAX_LOG_GROUPS_LIMIT}, got {limit}")

    groups = client.describe_log_groups(prefix=prefix or None, limit=limit)
    names = [g.name for g in groups[:limit]]
    return single_column_frame("logGroups", "logGroupName", names, ref_id=ref_id)


def get_log_group_fields(
    client: LogStoreClient,
    *,
    log_group_name: Optional[str],
    time: Optional[int] = None,
    ref_id: str,
) -> FrameV1:
    if not log_group_name or not log_group_name.strip():
        raise InvalidParameters("GetLogGroupFields requires a logGroupName")

    descriptors = client.get_log_group_fields(log_group_name=log_group_name.strip(), time=time)
    return FrameV1(
        name=ref_id,
        ref_id=ref_id,
        fields=[
            FieldV1(name="name", type="string", values=[d.name for d in descriptors]),
            FieldV1(name="percent", type="number", values=[max(0, min(100, d.percent)) for d in descriptors]),
        ],
    )
