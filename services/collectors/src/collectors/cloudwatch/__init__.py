from .errors import InvalidParameters, InvalidTimeRange, LogActionError, RemoteServiceError, UnrecognizedAction
from .insights_client import CloudWatchLogsClient, FieldDescriptor, LogGroup, LogStoreClient, QueryJob
from .lifecycle import QueryLifecycleCoordinator
from .limits import ActionLimits
from .log_actions import LogActionDispatcher

__all__ = [
    "InvalidParameters",
    "InvalidTimeRange",
    "LogActionError",
    "RemoteServiceError",
    "UnrecognizedAction",
    "CloudWatchLogsClient",
    "FieldDescriptor",
    "LogGroup",
    "LogStoreClient",
    "QueryJob",
    "QueryLifecycleCoordinator",
    "ActionLimits",
    "LogActionDispatcher",
]
