from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import pytest

from collectors.cloudwatch.errors import RemoteServiceError
from collectors.cloudwatch.insights_client import FieldDescriptor, LogGroup, QueryJob

FIXED_NOW = datetime(2026, 3, 20, 10, 0, 0, tzinfo=timezone.utc)


class FakeLogsClient:
    """Deterministic stand-in for CloudWatchLogsClient that records every call."""

    def __init__(self):
        self.calls: list[tuple[str, dict]] = []
        self.log_groups = [LogGroup("group_a"), LogGroup("group_b"), LogGroup("group_c")]
        self.fields = [
            FieldDescriptor("field_a", 100),
            FieldDescriptor("field_b", 30),
            FieldDescriptor("field_c", 55),
        ]
        self.query_id = "abcd-efgh-ijkl-mnop"
        self.stop_error: Optional[RemoteServiceError] = None
        self.errors: dict[str, RemoteServiceError] = {}
        self.job = QueryJob(
            query_id=self.query_id,
            status="Complete",
            rows=[
                [
                    {"field": "@timestamp", "value": "2020-03-20 10:37:23.000"},
                    {"field": "field_b", "value": "b_1"},
                    {"field": "@ptr", "value": "abcdefg"},
                ],
                [
                    {"field": "@timestamp", "value": "2020-03-20 10:40:43.000"},
                    {"field": "field_b", "value": "b_2"},
                    {"field": "@ptr", "value": "hijklmnop"},
                ],
            ],
            statistics={"bytesScanned": 512.0, "recordsMatched": 256.0, "recordsScanned": 1024.0},
        )

    def _record(self, name: str, **kwargs):
        self.calls.append((name, kwargs))
        if name in self.errors:
            raise self.errors[name]

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def describe_log_groups(self, *, prefix, limit):
        self._record("describe_log_groups", prefix=prefix, limit=limit)
        return list(self.log_groups)

    def get_log_group_fields(self, *, log_group_name, time):
        self._record("get_log_group_fields", log_group_name=log_group_name, time=time)
        return list(self.fields)

    def start_query(self, *, log_group_names, query_string, start_epoch, end_epoch, limit):
        self._record(
            "start_query",
            log_group_names=log_group_names,
            query_string=query_string,
            start_epoch=start_epoch,
            end_epoch=end_epoch,
            limit=limit,
        )
        return self.query_id

    def stop_query(self, *, query_id):
        self._record("stop_query", query_id=query_id)
        if self.stop_error is not None:
            raise self.stop_error
        return True

    def get_query_results(self, *, query_id):
        self._record("get_query_results", query_id=query_id)
        return self.job


@pytest.fixture
def fake_client() -> FakeLogsClient:
    return FakeLogsClient()


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
