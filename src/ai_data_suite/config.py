"""Server configuration loaded from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_AUDIT_LOG = Path.home() / ".ai-data-suite" / "audit.log"
DEFAULT_HTTP_PORT = 8092


@dataclass
class SuiteConfig:
    """Runtime settings for the tool server."""

    server_name: str = "ai-data-suite"
    default_table: str = "users"
    seed_path: Optional[str] = None  # None means the bundled seed file
    audit_log_path: Optional[str] = str(DEFAULT_AUDIT_LOG)  # None disables auditing
    http_host: str = "127.0.0.1"
    http_port: int = DEFAULT_HTTP_PORT

    @classmethod
    def from_environment(cls) -> 'SuiteConfig':
        """
        Load configuration from environment variables.

        Recognized variables:
            AI_DATA_SUITE_NAME, AI_DATA_SUITE_DEFAULT_TABLE, AI_DATA_SUITE_SEED,
            AI_DATA_SUITE_AUDIT_LOG (empty string disables the audit log),
            AI_DATA_SUITE_HTTP_HOST, AI_DATA_SUITE_HTTP_PORT

        Returns:
            SuiteConfig with defaults for anything unset or malformed
        """
        defaults = cls()

        audit_log = os.getenv('AI_DATA_SUITE_AUDIT_LOG')
        if audit_log is None:
            audit_log_path = defaults.audit_log_path
        else:
            audit_log_path = audit_log or None

        port = defaults.http_port
        port_value = os.getenv('AI_DATA_SUITE_HTTP_PORT')
        if port_value:
            try:
                port = int(port_value)
            except ValueError:
                # Invalid format, keep the default port
                pass

        return cls(
            server_name=os.getenv('AI_DATA_SUITE_NAME') or defaults.server_name,
            default_table=os.getenv('AI_DATA_SUITE_DEFAULT_TABLE') or defaults.default_table,
            seed_path=os.getenv('AI_DATA_SUITE_SEED') or None,
            audit_log_path=audit_log_path,
            http_host=os.getenv('AI_DATA_SUITE_HTTP_HOST') or defaults.http_host,
            http_port=port,
        )
