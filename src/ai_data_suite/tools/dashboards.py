"""Analytics dashboard tools."""

import random
import time
from typing import Any, Dict, Optional

from ..models import Dashboard
from ..stores import EntityStores, generate_id
from . import ToolHandler, not_found

# Operator recorded when filter_data is called without one
DEFAULT_FILTER_OPERATOR = "equals"


class ListDashboardsTool(ToolHandler):
    def __init__(self, stores: EntityStores):
        super().__init__("list_dashboards", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        dashboards = [{"id": d.id, "name": d.name} for d in self.stores.dashboards]
        return {"success": True, "dashboards": dashboards}


class CreateDashboardTool(ToolHandler):
    def __init__(self, stores: EntityStores):
        super().__init__("create_dashboard", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        dashboards = self.stores.dashboards
        dashboard = dashboards.add(Dashboard(id=dashboards.new_id(), name=arguments["name"]))
        return {"success": True, "dashboard": dashboard.to_dict()}


class FilterDataTool(ToolHandler):
    """Set the filter predicate for one field of a dashboard, replacing any previous one."""

    def __init__(self, stores: EntityStores):
        super().__init__("filter_data", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        dashboard = self.stores.dashboards.get(arguments.get("dashboardId"))
        if not dashboard:
            return not_found("Dashboard")

        dashboard.set_filter(
            arguments["field"],
            arguments.get("operator") or DEFAULT_FILTER_OPERATOR,
            arguments["value"],
        )
        return {"success": True, "filters": dashboard.to_dict()["filters"]}


class CreateViewTool(ToolHandler):
    def __init__(self, stores: EntityStores):
        super().__init__("create_view", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        return {
            "success": True,
            "view": {
                "id": generate_id(),
                "name": arguments["name"],
                "source": arguments["source"],
                "columns": list(arguments.get("columns") or []),
                "status": "created",
            },
        }


class GetMetricsTool(ToolHandler):
    """
    Report a value for each requested metric name.

    Values are placeholders drawn from [0, 1000); the dashboard id is not
    checked against the dashboard store.
    """

    def __init__(self, stores: EntityStores, rng: Optional[random.Random] = None):
        super().__init__("get_metrics", stores)
        self.rng = rng or random.Random()

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        metrics = [
            {"name": name, "value": self.rng.randrange(1000)}
            for name in arguments.get("metrics") or []
        ]
        return {"success": True, "metrics": metrics}


class ExportInsightsTool(ToolHandler):
    def __init__(self, stores: EntityStores):
        super().__init__("export_insights", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        export_format = arguments["format"]
        timestamp_ms = int(time.time() * 1000)
        return {
            "success": True,
            "export": {
                "dashboardId": arguments["dashboardId"],
                "format": export_format,
                "fileName": f"insights_{timestamp_ms}.{export_format}",
                "status": "ready",
            },
        }
