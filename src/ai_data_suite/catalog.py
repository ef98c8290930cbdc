"""Tool catalog: the static descriptors advertised to MCP clients.

Descriptors are plain dicts in MCP ``Tool`` shape (name, description,
inputSchema, optional annotations). A descriptor without
``annotations.readOnlyHint`` may mutate state. Order here is the order
clients see.
"""

from typing import Any, Dict, List, Optional

from .models import FOLLOWUP_STATUSES, INTERACTION_TYPES

READ_ONLY = {"readOnlyHint": True}

VISUALIZATION_TYPES = ["bar", "line", "pie", "table"]
REPORT_FORMATS = ["summary", "detailed", "statistical"]
FILTER_OPERATORS = ["equals", "contains", "greater_than", "less_than"]
EXPORT_FORMATS = ["csv", "pdf", "excel"]


# Dataset tools
DATASET_TOOLS: List[Dict[str, Any]] = [
    {
        "name": "list_tables",
        "description": "List all tables in the database",
        "inputSchema": {"type": "object", "properties": {}},
        "annotations": READ_ONLY,
    },
    {
        "name": "describe_table",
        "description": "Get table schema and structure",
        "inputSchema": {
            "type": "object",
            "properties": {"tableName": {"type": "string", "description": "Table name"}},
            "required": ["tableName"],
        },
        "annotations": READ_ONLY,
    },
    {
        "name": "query_data",
        "description": "Query database with natural language",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Natural language query"},
                "tableName": {"type": "string", "description": "Table to query"},
            },
            "required": ["query"],
        },
        "annotations": READ_ONLY,
    },
    {
        "name": "create_visualization",
        "description": "Create a data visualization",
        "inputSchema": {
            "type": "object",
            "properties": {
                "type": {"type": "string", "enum": VISUALIZATION_TYPES},
                "dataSource": {"type": "string", "description": "Data source table"},
                "xAxis": {"type": "string", "description": "X-axis field"},
                "yAxis": {"type": "string", "description": "Y-axis field"},
                "title": {"type": "string", "description": "Chart title"},
            },
            "required": ["type", "dataSource"],
        },
    },
    {
        "name": "generate_report",
        "description": "Generate a database report",
        "inputSchema": {
            "type": "object",
            "properties": {
                "tableName": {"type": "string", "description": "Table to report on"},
                "format": {"type": "string", "enum": REPORT_FORMATS},
            },
            "required": ["tableName"],
        },
        "annotations": READ_ONLY,
    },
]

# Analytics dashboard tools
DASHBOARD_TOOLS: List[Dict[str, Any]] = [
    {
        "name": "list_dashboards",
        "description": "List all available dashboards",
        "inputSchema": {"type": "object", "properties": {}},
        "annotations": READ_ONLY,
    },
    {
        "name": "create_dashboard",
        "description": "Create a new analytics dashboard",
        "inputSchema": {
            "type": "object",
            "properties": {"name": {"type": "string", "description": "Dashboard name"}},
            "required": ["name"],
        },
    },
    {
        "name": "filter_data",
        "description": "Filter data on a dashboard",
        "inputSchema": {
            "type": "object",
            "properties": {
                "dashboardId": {"type": "string", "description": "Dashboard ID"},
                "field": {"type": "string", "description": "Field to filter"},
                "operator": {"type": "string", "enum": FILTER_OPERATORS},
                "value": {"type": "string", "description": "Filter value"},
            },
            "required": ["dashboardId", "field", "value"],
        },
    },
    {
        "name": "create_view",
        "description": "Create a custom data view",
        "inputSchema": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "View name"},
                "source": {"type": "string", "description": "Data source"},
                "columns": {"type": "array", "items": {"type": "string"}},
            },
            "required": ["name", "source"],
        },
    },
    {
        "name": "get_metrics",
        "description": "Get key metrics from a dashboard",
        "inputSchema": {
            "type": "object",
            "properties": {
                "dashboardId": {"type": "string", "description": "Dashboard ID"},
                "metrics": {"type": "array", "items": {"type": "string"}},
            },
            "required": ["dashboardId"],
        },
        "annotations": READ_ONLY,
    },
    {
        "name": "export_insights",
        "description": "Export analytics insights",
        "inputSchema": {
            "type": "object",
            "properties": {
                "dashboardId": {"type": "string", "description": "Dashboard ID"},
                "format": {"type": "string", "enum": EXPORT_FORMATS},
            },
            "required": ["dashboardId", "format"],
        },
        "annotations": READ_ONLY,
    },
]

# CRM tools
CRM_TOOLS: List[Dict[str, Any]] = [
    {
        "name": "create_contact",
        "description": "Create a new contact",
        "inputSchema": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Contact name"},
                "email": {"type": "string", "description": "Email address"},
                "phone": {"type": "string", "description": "Phone number"},
                "company": {"type": "string", "description": "Company name"},
                "role": {"type": "string", "description": "Job role"},
            },
            "required": ["name", "email"],
        },
    },
    {
        "name": "update_contact",
        "description": "Update contact information",
        "inputSchema": {
            "type": "object",
            "properties": {
                "contactId": {"type": "string", "description": "Contact ID"},
                "name": {"type": "string", "description": "New name"},
                "email": {"type": "string", "description": "New email"},
                "phone": {"type": "string", "description": "New phone"},
                "company": {"type": "string", "description": "New company"},
            },
            "required": ["contactId"],
        },
    },
    {
        "name": "list_contacts",
        "description": "List all contacts",
        "inputSchema": {
            "type": "object",
            "properties": {
                "company": {"type": "string", "description": "Filter by company"},
                "tag": {"type": "string", "description": "Filter by tag"},
            },
        },
        "annotations": READ_ONLY,
    },
    {
        "name": "search_contacts",
        "description": "Search contacts by name, email, or company",
        "inputSchema": {
            "type": "object",
            "properties": {"query": {"type": "string", "description": "Search query"}},
            "required": ["query"],
        },
        "annotations": READ_ONLY,
    },
    {
        "name": "log_interaction",
        "description": "Log an interaction with a contact",
        "inputSchema": {
            "type": "object",
            "properties": {
                "contactId": {"type": "string", "description": "Contact ID"},
                "type": {"type": "string", "enum": list(INTERACTION_TYPES)},
                "description": {"type": "string", "description": "Interaction details"},
            },
            "required": ["contactId", "type", "description"],
        },
    },
    {
        "name": "create_followup",
        "description": "Create a follow-up task for a contact",
        "inputSchema": {
            "type": "object",
            "properties": {
                "contactId": {"type": "string", "description": "Contact ID"},
                "title": {"type": "string", "description": "Task title"},
                "description": {"type": "string", "description": "Task description"},
                "dueDate": {"type": "string", "description": "Due date (YYYY-MM-DD)"},
            },
            "required": ["contactId", "title", "dueDate"],
        },
    },
    {
        "name": "list_followups",
        "description": "List follow-up tasks",
        "inputSchema": {
            "type": "object",
            "properties": {
                "contactId": {"type": "string", "description": "Filter by contact"},
                "status": {"type": "string", "enum": list(FOLLOWUP_STATUSES)},
            },
        },
        "annotations": READ_ONLY,
    },
]

ALL_TOOLS: List[Dict[str, Any]] = [*DATASET_TOOLS, *DASHBOARD_TOOLS, *CRM_TOOLS]

_BY_NAME = {tool["name"]: tool for tool in ALL_TOOLS}


def get_descriptor(name: str) -> Optional[Dict[str, Any]]:
    """Look up a tool descriptor by exact, case-sensitive name."""
    return _BY_NAME.get(name)


def is_read_only(descriptor: Dict[str, Any]) -> bool:
    """Absence of the readOnlyHint annotation means the tool may mutate."""
    return bool(descriptor.get("annotations", {}).get("readOnlyHint", False))
