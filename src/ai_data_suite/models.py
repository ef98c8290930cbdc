"""Entity types held by the in-memory stores."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set


INTERACTION_TYPES = ("call", "email", "meeting", "note")
FOLLOWUP_STATUSES = ("pending", "completed")

# Column types whose values take part in statistical reports
NUMERIC_COLUMN_TYPES = ("integer", "decimal")


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """
    Render a datetime as ISO-8601 UTC with a trailing 'Z'.

    Args:
        value: Datetime to render (naive values are assumed to be UTC)

    Returns:
        ISO string, or None if value is None
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def is_number(value: Any) -> bool:
    """True for int/float values, excluding booleans."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class Column:
    name: str
    type: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "type": self.type}


@dataclass
class Table:
    """A named tabular dataset. Rows are seed-only."""

    name: str
    columns: List[Column] = field(default_factory=list)
    data: List[Dict[str, Any]] = field(default_factory=list)

    def numeric_columns(self) -> List[Column]:
        return [c for c in self.columns if c.type in NUMERIC_COLUMN_TYPES]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "columns": [c.to_dict() for c in self.columns],
            "data": [dict(row) for row in self.data],
        }


@dataclass
class Widget:
    id: str
    type: str
    title: str
    dataSource: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "dataSource": self.dataSource,
        }


@dataclass
class Dashboard:
    """
    Analytics dashboard.

    Filters are keyed by field name; setting a filter for a field that
    already has one replaces it.
    """

    id: str
    name: str
    widgets: List[Widget] = field(default_factory=list)
    filters: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def set_filter(self, field_name: str, operator: str, value: Any) -> None:
        self.filters[field_name] = {"operator": operator, "value": value}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "widgets": [w.to_dict() for w in self.widgets],
            "filters": {k: dict(v) for k, v in self.filters.items()},
        }


@dataclass
class Contact:
    id: str
    name: str
    email: str
    phone: str = ""
    company: str = ""
    role: str = ""
    tags: Set[str] = field(default_factory=set)
    lastInteraction: datetime = field(default_factory=utcnow)
    createdAt: datetime = field(default_factory=utcnow)

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name, email and company."""
        needle = query.lower()
        return (
            needle in self.name.lower()
            or needle in self.email.lower()
            or needle in self.company.lower()
        )

    def touch(self, when: Optional[datetime] = None) -> None:
        self.lastInteraction = when or utcnow()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "company": self.company,
            "role": self.role,
            "tags": sorted(self.tags),
            "lastInteraction": format_timestamp(self.lastInteraction),
            "createdAt": format_timestamp(self.createdAt),
        }


@dataclass
class Interaction:
    """Append-only log entry for a Contact."""

    id: str
    contactId: str
    type: str
    description: str
    date: datetime = field(default_factory=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "contactId": self.contactId,
            "type": self.type,
            "description": self.description,
            "date": format_timestamp(self.date),
        }


@dataclass
class FollowUp:
    id: str
    contactId: str
    title: str
    dueDate: datetime
    description: str = ""
    status: str = "pending"
    createdAt: datetime = field(default_factory=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "contactId": self.contactId,
            "title": self.title,
            "description": self.description,
            "dueDate": format_timestamp(self.dueDate),
            "status": self.status,
            "createdAt": format_timestamp(self.createdAt),
        }
