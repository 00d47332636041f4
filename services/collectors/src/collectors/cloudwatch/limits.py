from __future__ import annotations

from dataclasses import dataclass

DEFAULT_QUERY_LIMIT = 1000
MAX_QUERY_LIMIT = 10_000
DEFAULT_LOG_GROUPS_LIMIT = 50
MAX_LOG_GROUPS_LIMIT = 50
MAX_LOG_GROUPS = 20
DEFAULT_MAX_CONCURRENCY = 4


@dataclass(frozen=True)
class ActionLimits:
    default_query_limit: int = DEFAULT_QUERY_LIMIT
    default_log_groups_limit: int = DEFAULT_LOG_GROUPS_LIMIT
    max_log_groups: int = MAX_LOG_GROUPS
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
