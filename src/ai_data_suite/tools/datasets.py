"""Dataset tools: list_tables, describe_table, query_data, create_visualization, generate_report."""

import re
from typing import Any, Dict, List, Optional

from ..models import Table, is_number
from ..stores import EntityStores, generate_id
from . import ToolHandler, not_found

# Leading numeric literal of a query operand, e.g. " 100 dollars" -> "100"
_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_operand(text: str) -> Optional[float]:
    """
    Parse the numeric prefix of a comparison operand.

    Returns:
        The number, or None if the operand does not start with one
    """
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return None
    return float(match.group(1))


def filter_rows(rows: List[Dict[str, Any]], query: str) -> List[Dict[str, Any]]:
    """
    Apply the minimal ``<field> > <number>`` predicate to rows.

    The query is lowercased and split on the first '>'. Rows whose field is
    missing or non-numeric are dropped, as are all rows when the operand is
    not a number. Queries without '>' return every row.
    """
    text = query.lower()
    if ">" not in text:
        return list(rows)

    field, operand = text.split(">", 1)
    field = field.strip()
    threshold = parse_operand(operand)
    if threshold is None:
        return []

    return [
        row for row in rows
        if is_number(row.get(field)) and row[field] > threshold
    ]


def column_statistics(table: Table) -> Dict[str, Dict[str, float]]:
    """Sum/avg/min/max per numeric column, skipping columns with no numeric values."""
    statistics = {}
    for column in table.numeric_columns():
        values = [row.get(column.name) for row in table.data]
        values = [v for v in values if is_number(v)]
        if not values:
            continue
        total = sum(values)
        statistics[column.name] = {
            "sum": total,
            "avg": total / len(values),
            "min": min(values),
            "max": max(values),
        }
    return statistics


class ListTablesTool(ToolHandler):
    def __init__(self, stores: EntityStores):
        super().__init__("list_tables", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        return {"success": True, "tables": self.stores.tables.names()}


class DescribeTableTool(ToolHandler):
    def __init__(self, stores: EntityStores):
        super().__init__("describe_table", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        table = self.stores.tables.get(arguments.get("tableName"))
        if not table:
            return not_found("Table")
        return {"success": True, "schema": table.to_dict()}


class QueryDataTool(ToolHandler):
    """Filter a table's rows with a one-predicate query language."""

    def __init__(self, stores: EntityStores, default_table: str = "users"):
        super().__init__("query_data", stores)
        self.default_table = default_table

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        table = self.stores.tables.get(arguments.get("tableName") or self.default_table)
        if not table:
            return not_found("Table")

        results = filter_rows(table.data, arguments["query"])
        return {
            "success": True,
            "data": [dict(row) for row in results],
            "count": len(results),
        }


class CreateVisualizationTool(ToolHandler):
    """Describe a chart over a data source. The chart is not persisted."""

    def __init__(self, stores: EntityStores):
        super().__init__("create_visualization", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        return {
            "success": True,
            "visualization": {
                "id": generate_id(),
                "type": arguments["type"],
                "title": arguments.get("title") or "Chart",
                "dataSource": arguments["dataSource"],
                "xAxis": arguments.get("xAxis"),
                "yAxis": arguments.get("yAxis"),
                "status": "created",
            },
        }


class GenerateReportTool(ToolHandler):
    """
    Summarize a table.

    Every report carries row and column counts. ``summary`` and
    ``statistical`` add column names and types; ``statistical`` also adds
    per-numeric-column statistics.
    """

    def __init__(self, stores: EntityStores):
        super().__init__("generate_report", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        table = self.stores.tables.get(arguments.get("tableName"))
        if not table:
            return not_found("Table")

        report_format = arguments.get("format")
        report: Dict[str, Any] = {
            "tableName": table.name,
            "rowCount": len(table.data),
            "columns": len(table.columns),
        }

        if report_format in ("summary", "statistical"):
            report["summary"] = {
                "columns": [c.name for c in table.columns],
                "types": [c.type for c in table.columns],
            }

        if report_format == "statistical":
            report["statistics"] = column_statistics(table)

        return {"success": True, "report": report}
