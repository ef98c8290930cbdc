"""Audit logging for tool invocations."""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class AuditLogger:
    """Append-only audit trail of state-changing and failed tool calls."""

    def __init__(self, log_path: Optional[str] = None):
        """
        Initialize audit logger.

        Args:
            log_path: Path to audit log file. None disables logging.
        """
        self.log_path = Path(log_path) if log_path else None

    @property
    def enabled(self) -> bool:
        return self.log_path is not None

    def log(self, tool: str, action: str, details: str):
        """
        Write audit log entry.

        Args:
            tool: Tool name
            action: Outcome (SUCCESS, FAILED, REJECTED)
            details: Additional details
        """
        if not self.enabled:
            return

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        log_entry = (
            f"[{timestamp}] TOOL={_single_line(tool)} ACTION={action} "
            f"DETAILS={_single_line(details)}\n"
        )

        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_path, 'a', encoding='utf-8') as f:
                f.write(log_entry)
        except Exception as e:
            print(f"Warning: Could not write to audit log: {e}", file=sys.stderr)


def _single_line(value) -> str:
    """Escape line breaks so one entry always occupies one line."""
    return str(value).replace("\\", "\\\\").replace("\r", "\\r").replace("\n", "\\n")
