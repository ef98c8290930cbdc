"""Tool handler base class shared by all dataset, dashboard and CRM tools."""

from typing import Any, Dict, Optional

from mcp.types import Tool, ToolAnnotations

from ..catalog import get_descriptor, is_read_only
from ..stores import EntityStores


def not_found(entity: str) -> Dict[str, Any]:
    """Failure envelope for a referenced entity missing from its store."""
    return {"success": False, "error": f"{entity} not found"}


class ToolHandler:
    """Base class for MCP tool handlers."""

    def __init__(self, name: str, stores: EntityStores):
        """
        Initialize tool handler with name and the stores it operates on.

        Raises:
            KeyError if the name is not declared in the tool catalog
        """
        descriptor = get_descriptor(name)
        if descriptor is None:
            raise KeyError(f"Tool not declared in catalog: {name}")
        self.name = name
        self.stores = stores
        self.descriptor = descriptor

    @property
    def input_schema(self) -> Dict[str, Any]:
        return self.descriptor["inputSchema"]

    @property
    def read_only(self) -> bool:
        return is_read_only(self.descriptor)

    def get_tool_description(self) -> Tool:
        """
        Get MCP tool description with input schema.

        Returns:
            Tool description for MCP
        """
        annotations: Optional[ToolAnnotations] = None
        if "annotations" in self.descriptor:
            annotations = ToolAnnotations(**self.descriptor["annotations"])
        return Tool(
            name=self.name,
            description=self.descriptor["description"],
            inputSchema=self.input_schema,
            annotations=annotations,
        )

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        """
        Execute the tool with already-validated arguments.

        Must be implemented by subclasses.

        Args:
            arguments: Tool arguments from MCP

        Returns:
            Result envelope: ``{"success": True, ...}`` or
            ``{"success": False, "error": ...}``
        """
        raise NotImplementedError
