from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import RemoteServiceError


@dataclass(frozen=True)
class LogGroup:
    name: str


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    percent: int


@dataclass(frozen=True)
class QueryJob:
    """Snapshot of one Insights query as reported by GetQueryResults."""

    query_id: str
    status: str
    rows: list[list[dict[str, str]]] = field(default_factory=list)
    statistics: dict[str, Any] = field(default_factory=dict)


class LogStoreClient(Protocol):
    """The five CloudWatch Logs calls the log actions depend on."""

    def describe_log_groups(self, *, prefix: Optional[str], limit: int) -> list[LogGroup]: ...

    def get_log_group_fields(self, *, log_group_name: str, time: Optional[int]) -> list[FieldDescriptor]: ...

    def start_query(
        self,
        *,
        log_group_names: list[str],
        query_string: str,
        start_epoch: int,
        end_epoch: int,
        limit: int,
    ) -> str: ...

    def stop_query(self, *, query_id: str) -> bool: ...

    def get_query_results(self, *, query_id: str) -> QueryJob: ...


def _remote_error(exc: Exception) -> RemoteServiceError:
    if isinstance(exc, ClientError):
        err = exc.response.get("Error", {})
        return RemoteServiceError(err.get("Code", "Unknown"), err.get("Message") or str(exc))
    return RemoteServiceError(type(exc).__name__, str(exc))


class CloudWatchLogsClient:
    """
    Wrapper over the CloudWatch Logs API.

    Responsibilities:
    - Issue exactly one API round trip per call (no polling, no retries here)
    - Normalize responses into small dataclasses
    - Surface every AWS failure as RemoteServiceError with the AWS message
    """

    def __init__(self, region: str, client: Any = None):
        # boto3 clients are thread-safe; one instance serves all workers
        self._client = client or boto3.client("logs", region_name=region)

    def describe_log_groups(self, *, prefix: Optional[str], limit: int) -> list[LogGroup]:
        kwargs: dict[str, Any] = {"limit": limit}
        if prefix:
            kwargs["logGroupNamePrefix"] = prefix
        try:
            resp = self._client.describe_log_groups(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise _remote_error(e) from e
        return [LogGroup(name=g["logGroupName"]) for g in resp.get("logGroups", []) if g.get("logGroupName")]

    def get_log_group_fields(self, *, log_group_name: str, time: Optional[int]) -> list[FieldDescriptor]:
        kwargs: dict[str, Any] = {"logGroupName": log_group_name}
        if time is not None:
            kwargs["time"] = time
        try:
            resp = self._client.get_log_group_fields(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise _remote_error(e) from e
        return [
            FieldDescriptor(name=f["name"], percent=int(f.get("percent", 0)))
            for f in resp.get("logGroupFields", [])
            if f.get("name")
        ]

    def start_query(
        self,
        *,
        log_group_names: list[str],
        query_string: str,
        start_epoch: int,
        end_epoch: int,
        limit: int,
    ) -> str:
        try:
            resp = self._client.start_query(
                logGroupNames=log_group_names,
                startTime=start_epoch,
                endTime=end_epoch,
                queryString=query_string,
                limit=limit,
            )
        except (ClientError, BotoCoreError) as e:
            raise _remote_error(e) from e
        return resp["queryId"]

    def stop_query(self, *, query_id: str) -> bool:
        try:
            resp = self._client.stop_query(queryId=query_id)
        except (ClientError, BotoCoreError) as e:
            raise _remote_error(e) from e
        return bool(resp.get("success", False))

    def get_query_results(self, *, query_id: str) -> QueryJob:
        try:
            resp = self._client.get_query_results(queryId=query_id)
        except (ClientError, BotoCoreError) as e:
            raise _remote_error(e) from e
        return QueryJob(
            query_id=query_id,
            status=resp.get("status", "Unknown"),
            rows=resp.get("results", []),
            statistics=resp.get("statistics", {}),
        )
