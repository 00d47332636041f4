"""
Log action dispatcher.

Routes each request of a batch by its action tag to the lifecycle coordinator
or to the discovery handlers and collects one frame-or-error result per refId:
 - A failing request only fails its own refId
 - Unknown action tags are reported as UnrecognizedAction
 - Requests fan out over a bounded thread pool and are joined before the
   response is assembled, in request order
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Optional

from contracts.frame_v1 import FrameV1
from contracts.log_query_result_v1 import LogQueryBatchResponseV1, QueryErrorV1, RefResultV1
from contracts.log_query_v1 import LogQueryBatchV1, LogQueryV1, TimeRangeV1

from ..structured_log import log_event
from . import discovery
from .errors import InvalidTimeRange, LogActionError, UnrecognizedAction
from .insights_client import LogStoreClient
from .lifecycle import QueryLifecycleCoordinator
from .limits import ActionLimits

Handler = Callable[[LogQueryV1, Optional[TimeRangeV1]], FrameV1]


class LogActionDispatcher:
    def __init__(
        self,
        client: LogStoreClient,
        limits: Optional[ActionLimits] = None,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self._client = client
        self._limits = limits or ActionLimits()
        self._coordinator = QueryLifecycleCoordinator(client, self._limits)
        self._now = now
        self._handlers: dict[str, Handler] = {
            "DescribeLogGroups": self._describe_log_groups,
            "GetLogGroupFields": self._get_log_group_fields,
            "StartQuery": self._start_query,
            "StopQuery": self._stop_query,
            "GetQueryResults": self._get_query_results,
        }

    @property
    def actions(self) -> list[str]:
        return list(self._handlers)

    def execute(self, batch: LogQueryBatchV1) -> LogQueryBatchResponseV1:
        workers = max(1, min(self._limits.max_concurrency, len(batch.queries)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self.execute_one, q, batch.range) for q in batch.queries]
            results = [f.result() for f in futures]

        return LogQueryBatchResponseV1(results={r.ref_id: r for r in results})

    def execute_one(self, query: LogQueryV1, time_range: Optional[TimeRangeV1] = None) -> RefResultV1:
        log_event("log_action_start", ref_id=query.ref_id, action=query.action)
        try:
            handler = self._handlers.get(query.action)
            if handler is None:
                raise UnrecognizedAction(query.action)
            frame = handler(query, time_range)
        except LogActionError as e:
            log_event(
                "log_action_error",
                ref_id=query.ref_id,
                action=query.action,
                error_type=e.error_type,
                error=e.message,
            )
            return RefResultV1(ref_id=query.ref_id, error=QueryErrorV1(type=e.error_type, message=e.message))

        log_event("log_action_done", ref_id=query.ref_id, action=query.action, rows=frame.length)
        return RefResultV1(ref_id=query.ref_id, frames=[frame])

    # ── handlers ─────────────────────────────────────────────────────

    def _describe_log_groups(self, query: LogQueryV1, _range: Optional[TimeRangeV1]) -> FrameV1:
        limit = self._limits.default_log_groups_limit if query.limit is None else query.limit
        return discovery.describe_log_groups(
            self._client, prefix=query.log_group_name_prefix, limit=limit, ref_id=query.ref_id
        )

    def _get_log_group_fields(self, query: LogQueryV1, _range: Optional[TimeRangeV1]) -> FrameV1:
        return discovery.get_log_group_fields(
            self._client,
            log_group_name=query.log_group_name,
            time=query.time,
            ref_id=query.ref_id,
        )

    def _start_query(self, query: LogQueryV1, time_range: Optional[TimeRangeV1]) -> FrameV1:
        if time_range is None:
            raise InvalidTimeRange("Invalid time range: StartQuery requires a time range")
        return self._coordinator.start_query(
            log_group_names=query.log_group_names,
            query_string=query.query_string,
            start=time_range.from_,
            end=time_range.to,
            limit=query.limit,
            ref_id=query.ref_id,
            now=self._now() if self._now else None,
        )

    def _stop_query(self, query: LogQueryV1, _range: Optional[TimeRangeV1]) -> FrameV1:
        return self._coordinator.stop_query(query_id=query.query_id, ref_id=query.ref_id)

    def _get_query_results(self, query: LogQueryV1, _range: Optional[TimeRangeV1]) -> FrameV1:
        return self._coordinator.get_query_results(query_id=query.query_id, ref_id=query.ref_id)
