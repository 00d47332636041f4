"""Turn CloudWatch Logs output into frames.

Insights returns every record as its own list of field/value cells, so two
rows of one result can carry different field sets. The results frame is built
in two passes: first the column layout (union of field names in first-seen
order), then one value per column per row with None where a row lacks the
field.
"""
from __future__ import annotations

from typing import Any, Optional

from contracts.frame_v1 import FieldV1, FrameV1, QueryStatisticsV1, QueryStatus

STATISTICS_KEYS = ("bytesScanned", "recordsMatched", "recordsScanned")


def rows_from_results(results: list[list[dict[str, str]]]) -> list[dict[str, Any]]:
    """
    CloudWatch returns rows like:
      [[{"field":"@timestamp","value":"..."}, {"field":"@message","value":"..."}], ...]
    Convert to:
      [{"@timestamp":"...", "@message":"..."}, ...]
    """
    out: list[dict[str, Any]] = []
    for row in results:
        item: dict[str, Any] = {}
        for cell in row:
            name = cell.get("field")
            if name:
                item[name] = cell.get("value")
        out.append(item)
    return out


def column_order(rows: list[dict[str, Any]]) -> list[str]:
    seen: dict[str, None] = {}
    for row in rows:
        for name in row:
            seen.setdefault(name, None)
    return list(seen)


def _statistics_meta(statistics: Optional[dict[str, Any]]) -> dict[str, float]:
    if not statistics:
        return {}
    stats = QueryStatisticsV1.model_validate({k: statistics.get(k) for k in STATISTICS_KEYS})
    return stats.model_dump(by_alias=True, exclude_none=True)


def build_results_frame(
    rows: list[dict[str, Any]],
    *,
    name: str,
    ref_id: Optional[str] = None,
    status: Optional[QueryStatus] = None,
    statistics: Optional[dict[str, Any]] = None,
) -> FrameV1:
    columns = column_order(rows)
    fields = [
        FieldV1(name=col, type="string", values=[row.get(col) for row in rows])
        for col in columns
    ]

    meta: dict[str, Any] = {}
    if status is not None:
        meta["status"] = status.value
    stats = _statistics_meta(statistics)
    if stats:
        meta["statistics"] = stats

    return FrameV1(name=name, ref_id=ref_id, fields=fields, meta=meta)


def single_column_frame(
    name: str,
    column: str,
    values: list[Any],
    *,
    type: str = "string",
    ref_id: Optional[str] = None,
) -> FrameV1:
    return FrameV1(name=name, ref_id=ref_id, fields=[FieldV1(name=column, type=type, values=list(values))])
