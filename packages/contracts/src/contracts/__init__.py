from .log_query_v1 import KNOWN_ACTIONS, LogQueryBatchV1, LogQueryV1, TimeRangeV1
from .frame_v1 import FieldV1, FrameV1, QueryStatisticsV1, QueryStatus, TERMINAL_STATUSES
from .log_query_result_v1 import LogQueryBatchResponseV1, QueryErrorV1, RefResultV1

__all__ = [
    "KNOWN_ACTIONS",
    "LogQueryBatchV1",
    "LogQueryV1",
    "TimeRangeV1",
    "FieldV1",
    "FrameV1",
    "QueryStatisticsV1",
    "QueryStatus",
    "TERMINAL_STATUSES",
    "LogQueryBatchResponseV1",
    "QueryErrorV1",
    "RefResultV1",
]
