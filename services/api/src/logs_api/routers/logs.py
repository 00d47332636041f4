"""
Log query endpoints.

POST /v1/logs/query → run a batch of log actions, one result per refId
GET  /v1/logs/actions → supported action tags
"""
from __future__ import annotations

from functools import lru_cache

from fastapi import APIRouter, Depends

from contracts.log_query_result_v1 import LogQueryBatchResponseV1
from contracts.log_query_v1 import KNOWN_ACTIONS, LogQueryBatchV1
from collectors.cloudwatch.insights_client import CloudWatchLogsClient
from collectors.cloudwatch.log_actions import LogActionDispatcher

from ..settings import load_settings

router = APIRouter(prefix="/v1/logs", tags=["logs"])


@lru_cache(maxsize=None)
def _logs_client(region: str) -> CloudWatchLogsClient:
    return CloudWatchLogsClient(region)


def get_dispatcher() -> LogActionDispatcher:
    settings = load_settings()
    return LogActionDispatcher(_logs_client(settings.aws_region), settings.action_limits())


# ─── POST /v1/logs/query ───────────────────────────────────────────
@router.post("/query", response_model=LogQueryBatchResponseV1, response_model_by_alias=True)
def run_log_queries(
    batch: LogQueryBatchV1,
    dispatcher: LogActionDispatcher = Depends(get_dispatcher),
):
    # Handler failures are reported per refId; the request itself succeeds
    return dispatcher.execute(batch)


# ─── GET /v1/logs/actions ──────────────────────────────────────────
@router.get("/actions")
def list_actions():
    return {"actions": list(KNOWN_ACTIONS)}
