import os
from pydantic import BaseModel

from collectors.cloudwatch.limits import ActionLimits


class Settings(BaseModel):
    aws_region: str = "us-east-1"

    # Query defaults
    default_query_limit: int = 1000
    default_log_groups_limit: int = 50
    max_log_groups: int = 20

    # Fan-out across the requests of one batch
    max_concurrency: int = 4

    def action_limits(self) -> ActionLimits:
        return ActionLimits(
            default_query_limit=self.default_query_limit,
            default_log_groups_limit=self.default_log_groups_limit,
            max_log_groups=self.max_log_groups,
            max_concurrency=self.max_concurrency,
        )


def load_settings() -> Settings:
    return Settings(
        aws_region=os.getenv("AWS_REGION", "us-east-1"),
        default_query_limit=int(os.getenv("DEFAULT_QUERY_LIMIT", "1000")),
        default_log_groups_limit=int(os.getenv("DEFAULT_LOG_GROUPS_LIMIT", "50")),
        max_log_groups=int(os.getenv("MAX_LOG_GROUPS", "20")),
        max_concurrency=int(os.getenv("MAX_CONCURRENCY", "4")),
    )
