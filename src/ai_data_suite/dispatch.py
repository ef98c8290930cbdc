"""Dispatch engine: routes a tool name and argument bag to exactly one handler.

Every call path returns an envelope. Unknown tools, validation failures
and unexpected handler faults all come back as
``{"success": False, "error": ...}``; nothing is raised to the caller.
"""

import copy
import json
import random
from typing import Any, Dict, List, Optional

from .audit import AuditLogger
from .catalog import ALL_TOOLS
from .config import SuiteConfig
from .stores import EntityStores
from .tools import ToolHandler
from .tools.crm import (
    CreateContactTool,
    CreateFollowUpTool,
    ListContactsTool,
    ListFollowUpsTool,
    LogInteractionTool,
    SearchContactsTool,
    UpdateContactTool,
)
from .tools.dashboards import (
    CreateDashboardTool,
    CreateViewTool,
    ExportInsightsTool,
    FilterDataTool,
    GetMetricsTool,
    ListDashboardsTool,
)
from .tools.datasets import (
    CreateVisualizationTool,
    DescribeTableTool,
    GenerateReportTool,
    ListTablesTool,
    QueryDataTool,
)
from .validation import ArgumentValidator, ValidationError


class DispatchEngine:
    """Owns the entity stores and the name -> handler table."""

    def __init__(
        self,
        stores: Optional[EntityStores] = None,
        config: Optional[SuiteConfig] = None,
        audit_logger: Optional[AuditLogger] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Build an engine over explicitly constructed stores.

        Args:
            stores: Stores to operate on (default: fresh stores seeded from config.seed_path)
            config: Server configuration (default: SuiteConfig())
            audit_logger: Audit trail (default: AuditLogger(config.audit_log_path))
            rng: Random source for placeholder metrics
        """
        self.config = config or SuiteConfig()
        self.stores = stores or EntityStores.seeded(self.config.seed_path)
        if audit_logger is None:
            audit_logger = AuditLogger(self.config.audit_log_path)
        self.audit_logger = audit_logger

        s = self.stores
        # Every mapping explicit: adding a tool means editing the catalog and this dict
        self._handlers: Dict[str, ToolHandler] = {
            # Datasets
            "list_tables": ListTablesTool(s),
            "describe_table": DescribeTableTool(s),
            "query_data": QueryDataTool(s, default_table=self.config.default_table),
            "create_visualization": CreateVisualizationTool(s),
            "generate_report": GenerateReportTool(s),

            # Dashboards
            "list_dashboards": ListDashboardsTool(s),
            "create_dashboard": CreateDashboardTool(s),
            "filter_data": FilterDataTool(s),
            "create_view": CreateViewTool(s),
            "get_metrics": GetMetricsTool(s, rng=rng),
            "export_insights": ExportInsightsTool(s),

            # CRM
            "create_contact": CreateContactTool(s),
            "update_contact": UpdateContactTool(s),
            "list_contacts": ListContactsTool(s),
            "search_contacts": SearchContactsTool(s),
            "log_interaction": LogInteractionTool(s),
            "create_followup": CreateFollowUpTool(s),
            "list_followups": ListFollowUpsTool(s),
        }

    @property
    def handlers(self) -> Dict[str, ToolHandler]:
        return dict(self._handlers)

    def list_tools(self) -> List[Dict[str, Any]]:
        """Return the tool catalog in declaration order."""
        return copy.deepcopy(ALL_TOOLS)

    def invoke(self, name: str, arguments: Optional[dict] = None) -> Dict[str, Any]:
        """
        Execute a tool and return its result envelope.

        Args:
            name: Tool name (exact, case-sensitive)
            arguments: Argument bag; None is treated as empty

        Returns:
            ``{"success": True, ...payload}`` or ``{"success": False, "error": msg}``
        """
        handler = self._handlers.get(name) if isinstance(name, str) else None
        if not handler:
            self.audit_logger.log(str(name), "REJECTED", "unknown tool")
            return {"success": False, "error": f"Unknown tool: {name}"}

        if arguments is None:
            arguments = {}

        try:
            ArgumentValidator.validate(handler.input_schema, arguments)
            result = handler.run_tool(arguments)
        except ValidationError as e:
            self.audit_logger.log(name, "REJECTED", str(e))
            return {"success": False, "error": str(e)}
        except Exception as e:
            self.audit_logger.log(name, "FAILED", f"{type(e).__name__}: {e}")
            return {"success": False, "error": f"Error executing {name}: {type(e).__name__}: {e}"}

        if not result.get("success"):
            self.audit_logger.log(name, "FAILED", result.get("error", ""))
        elif not handler.read_only:
            self.audit_logger.log(name, "SUCCESS", _summarize(arguments))
        return result


def _summarize(arguments: dict) -> str:
    return json.dumps(arguments, sort_keys=True, default=str)
