"""
Logs Insights query lifecycle: start, poll, stop.

The coordinator owns no job state. Every call is one round trip to CloudWatch
Logs and the status it reports is translated, never remembered:

    Submitting -> Scheduled | Running -> Complete | Failed | Cancelled | Timeout

Anything else CloudWatch reports maps to Unknown. Polling cadence and
cancellation are the caller's decisions.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from contracts.frame_v1 import FrameV1, QueryStatus

from ..structured_log import log_event
from .errors import InvalidParameters, InvalidTimeRange, RemoteServiceError
from .frames import build_results_frame, rows_from_results, single_column_frame
from .insights_client import LogStoreClient
from .limits import MAX_QUERY_LIMIT, ActionLimits
from .time_range import resolve_time_range, to_epoch_seconds

TIMESTAMP_PREFIX = "fields @timestamp | "

# StopQuery on a query that already finished
NOT_STOPPABLE_ERROR_CODE = "InvalidParameterException"


def with_timestamp_field(query_string: str) -> str:
    return TIMESTAMP_PREFIX + (query_string or "")


class QueryLifecycleCoordinator:
    def __init__(self, client: LogStoreClient, limits: Optional[ActionLimits] = None):
        self._client = client
        self._limits = limits or ActionLimits()

    def start_query(
        self,
        *,
        log_group_names: list[str],
        query_string: str,
        start: Any,
        end: Any,
        limit: Optional[int] = None,
        ref_id: str,
        now: Optional[datetime] = None,
    ) -> FrameV1:
        start_dt, end_dt = resolve_time_range(start, end, now=now)

        if not log_group_names:
            raise InvalidParameters("StartQuery requires at least one log group name")
        if len(log_group_names) > self._limits.max_log_groups:
            raise InvalidParameters(
                f"StartQuery accepts at most {self._limits.max_log_groups} log groups, got {len(log_group_names)}"
            )

        limit = self._limits.default_query_limit if limit is None else limit
        if not 1 <= limit <= MAX_QUERY_LIMIT:
            raise InvalidParameters(f"limit must be between 1 and {MAX_QUERY_LIMIT}, got {limit}")

        # CloudWatch takes whole seconds; a sub-second range would collapse to start == end
        start_epoch, end_epoch = to_epoch_seconds(start_dt), to_epoch_seconds(end_dt)
        if start_epoch >= end_epoch:
            raise InvalidTimeRange("Invalid time range: range must span at least one second")

        query_id = self._client.start_query(
            log_group_names=log_group_names,
            query_string=with_timestamp_field(query_string),
            start_epoch=start_epoch,
            end_epoch=end_epoch,
            limit=limit,
        )
        log_event("query_started", ref_id=ref_id, query_id=query_id, log_groups=len(log_group_names), limit=limit)

        return single_column_frame(ref_id, "queryId", [query_id], ref_id=ref_id)

    def stop_query(self, *, query_id: Optional[str], ref_id: Optional[str] = None) -> FrameV1:
        query_id = _require_query_id(query_id, "StopQuery")
        try:
            success = self._client.stop_query(query_id=query_id)
        except RemoteServiceError as e:
            if e.code != NOT_STOPPABLE_ERROR_CODE:
                raise
            log_event("query_stop_not_stoppable", query_id=query_id, error=e.message)
            success = False

        return single_column_frame("StopQueryResponse", "success", [success], type="boolean", ref_id=ref_id)

    def get_query_results(self, *, query_id: Optional[str], ref_id: str) -> FrameV1:
        query_id = _require_query_id(query_id, "GetQueryResults")
        job = self._client.get_query_results(query_id=query_id)
        status = QueryStatus.from_remote(job.status)
        rows = rows_from_results(job.rows)
        log_event(
            "query_results",
            ref_id=ref_id,
            query_id=query_id,
            status=status.value,
            terminal=status.is_terminal,
            rows=len(rows),
        )

        return build_results_frame(
            rows,
            name=ref_id,
            ref_id=ref_id,
            status=status,
            statistics=job.statistics,
        )


def _require_query_id(query_id: Optional[str], action: str) -> str:
    if not query_id or not query_id.strip():
        raise InvalidParameters(f"{action} requires a queryId")
    return query_id.strip()
