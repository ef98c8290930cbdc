"""AI Data Suite: MCP server for datasets, analytics dashboards and a lightweight CRM."""

import asyncio
import sys

__version__ = "1.0.0"


async def main():
    """
    Main entry point for the MCP server.

    Sets up stdio-based MCP server and runs it.
    """
    from mcp.server.stdio import stdio_server

    from .server import app

    async with stdio_server() as (read_stream, write_stream):
        print("AI Data Suite MCP server running on stdio", file=sys.stderr)
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def run():
    """Synchronous wrapper for main() to use as console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nAI Data Suite server stopped.", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


__all__ = ["main", "run", "__version__"]
