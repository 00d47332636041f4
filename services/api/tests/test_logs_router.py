"""API tests for POST /v1/logs/query with a mocked boto3 logs client."""
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError
from fastapi.testclient import TestClient

from collectors.cloudwatch.insights_client import CloudWatchLogsClient
from collectors.cloudwatch.log_actions import LogActionDispatcher
from logs_api.app import app
from logs_api.routers.logs import get_dispatcher
from logs_api.settings import load_settings


@pytest.fixture
def boto_logs():
    logs = MagicMock()
    logs.describe_log_groups.return_value = {
        "logGroups": [{"logGroupName": "/aws/lambda/a"}, {"logGroupName": "/aws/lambda/b"}]
    }
    logs.start_query.return_value = {"queryId": "q-42"}
    return logs


@pytest.fixture
def api(boto_logs):
    dispatcher = LogActionDispatcher(CloudWatchLogsClient("us-east-1", client=boto_logs))
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(api):
    resp = api.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_list_actions(api):
    resp = api.get("/v1/logs/actions")
    assert resp.json()["actions"] == [
        "DescribeLogGroups",
        "GetLogGroupFields",
        "StartQuery",
        "StopQuery",
        "GetQueryResults",
    ]


def test_describe_log_groups(api, boto_logs):
    resp = api.post(
        "/v1/logs/query",
        json={"queries": [{"refId": "A", "action": "DescribeLogGroups", "logGroupNamePrefix": "/aws/lambda"}]},
    )
    assert resp.status_code == 200
    result = resp.json()["results"]["A"]
    assert result["refId"] == "A"
    assert result["error"] is None
    assert result["frames"][0]["fields"][0]["values"] == ["/aws/lambda/a", "/aws/lambda/b"]
    boto_logs.describe_log_groups.assert_called_once_with(limit=50, logGroupNamePrefix="/aws/lambda")


def test_mixed_batch_reports_errors_per_ref_id(api, boto_logs):
    boto_logs.stop_query.side_effect = ClientError(
        {"Error": {"Code": "AccessDeniedException", "Message": "User is not authorized"}}, "StopQuery"
    )
    resp = api.post(
        "/v1/logs/query",
        json={
            "range": {"from": "now-15m", "to": "now"},
            "queries": [
                {"refId": "A", "action": "StartQuery", "logGroupNames": ["/aws/lambda/a"], "queryString": "fields @message"},
                {"refId": "B", "action": "StopQuery", "queryId": "q-1"},
                {"refId": "C", "action": "Bogus"},
            ],
        },
    )
    assert resp.status_code == 200
    results = resp.json()["results"]
    assert results["A"]["frames"][0]["fields"][0] == {"name": "queryId", "type": "string", "values": ["q-42"]}
    assert results["B"]["error"] == {"type": "RemoteServiceError", "message": "User is not authorized"}
    assert results["C"]["error"]["type"] == "UnrecognizedAction"
    sent = boto_logs.start_query.call_args.kwargs
    assert sent["queryString"] == "fields @timestamp | fields @message"
    assert sent["endTime"] - sent["startTime"] == 900


def test_malformed_batch_is_422(api):
    resp = api.post("/v1/logs/query", json={"queries": []})
    assert resp.status_code == 422


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    monkeypatch.setenv("MAX_CONCURRENCY", "2")
    monkeypatch.setenv("DEFAULT_QUERY_LIMIT", "500")
    settings = load_settings()
    limits = settings.action_limits()
    assert settings.aws_region == "eu-west-1"
    assert limits.max_concurrency == 2
    assert limits.default_query_limit == 500
    assert limits.max_log_groups == 20


def test_out_of_range_time_bound_stays_per_ref_id(api, boto_logs):
    resp = api.post(
        "/v1/logs/query",
        json={
            "range": {"from": "99999999999999999999", "to": "now"},
            "queries": [
                {"refId": "A", "action": "StartQuery", "logGroupNames": ["/aws/lambda/a"]},
                {"refId": "B", "action": "DescribeLogGroups"},
            ],
        },
    )
    assert resp.status_code == 200
    results = resp.json()["results"]
    assert results["A"]["error"]["type"] == "InvalidTimeRange"
    assert results["B"]["error"] is None
    assert results["B"]["frames"][0]["refId"] == "B"
    boto_logs.start_query.assert_not_called()
