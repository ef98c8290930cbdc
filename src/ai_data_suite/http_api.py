"""HTTP adapter: the same tool catalog and dispatch engine over FastAPI."""

import sys
from typing import Any, Optional

import uvicorn
from fastapi import Body, FastAPI

from . import __version__
from .config import SuiteConfig
from .dispatch import DispatchEngine


def create_app(engine: Optional[DispatchEngine] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        engine: Dispatch engine to serve (default: one built from the environment)

    Returns:
        FastAPI app with /health, /tools and /tools/{tool_name} routes
    """
    engine = engine or DispatchEngine(config=SuiteConfig.from_environment())

    app = FastAPI(title="AI Data Suite", version=__version__)
    app.state.engine = engine

    @app.get("/health")
    def health():
        return {"status": "ok", "tools": len(engine.handlers)}

    @app.get("/tools")
    def list_tools():
        """Tool catalog, verbatim and in declaration order."""
        return {"tools": engine.list_tools()}

    @app.post("/tools/{tool_name}")
    def call_tool(tool_name: str, arguments: Any = Body(default=None)):
        """Invoke a tool. Failures are envelopes, so the status is always 200."""
        return engine.invoke(tool_name, arguments)

    return app


def main():
    """Run the HTTP adapter with uvicorn on the configured host and port."""
    config = SuiteConfig.from_environment()
    app = create_app(DispatchEngine(config=config))
    print(f"AI Data Suite HTTP API on http://{config.http_host}:{config.http_port}", file=sys.stderr)

    try:
        uvicorn.run(app, host=config.http_host, port=config.http_port, log_level="warning")
    except KeyboardInterrupt:
        print("\nServer stopped", file=sys.stderr)


if __name__ == "__main__":
    main()
