"""Argument validation against catalog input schemas."""

from datetime import date, datetime, timezone
from typing import Any, Dict


class ValidationError(Exception):
    """Raised when tool arguments do not satisfy the tool's input schema."""
    pass


class ArgumentValidator:
    """Checks an argument bag against a tool's declared inputSchema."""

    @staticmethod
    def validate(schema: Dict[str, Any], arguments: Dict[str, Any]) -> None:
        """
        Validate required fields, primitive types and enum values.

        Fields not declared in the schema are ignored.

        Args:
            schema: JSON-schema-like ``inputSchema`` of the tool
            arguments: Argument bag supplied by the caller

        Raises:
            ValidationError if any declared constraint is violated
        """
        if not isinstance(arguments, dict):
            raise ValidationError("Arguments must be an object")

        properties = schema.get("properties", {})

        for name in schema.get("required", []):
            if arguments.get(name) is None:
                raise ValidationError(f"Missing required field: {name}")

        for name, spec in properties.items():
            value = arguments.get(name)
            if value is None:
                continue
            ArgumentValidator.validate_field(name, spec, value)

    @staticmethod
    def validate_field(name: str, spec: Dict[str, Any], value: Any) -> None:
        """
        Validate one field value against its property schema.

        Raises:
            ValidationError if value has the wrong type or is outside the enum
        """
        field_type = spec.get("type")

        if field_type == "string" and not isinstance(value, str):
            raise ValidationError(f"Field '{name}' must be a string")

        if field_type == "array":
            item_type = spec.get("items", {}).get("type")
            if not isinstance(value, list):
                raise ValidationError(f"Field '{name}' must be an array of {item_type or 'values'}s")
            if item_type == "string" and not all(isinstance(v, str) for v in value):
                raise ValidationError(f"Field '{name}' must be an array of strings")

        allowed = spec.get("enum")
        if allowed is not None and value not in allowed:
            raise ValidationError(
                f"Invalid value for '{name}': {value}. Expected one of: {', '.join(allowed)}"
            )


def parse_due_date(value: str) -> datetime:
    """
    Parse a due date into a UTC datetime.

    Accepts ``YYYY-MM-DD`` (midnight UTC) or a full ISO-8601 datetime
    (a trailing 'Z' is accepted; naive values are taken as UTC).

    Raises:
        ValidationError if the string is not a recognizable date
    """
    text = value.strip()
    try:
        parsed_date = date.fromisoformat(text)
        return datetime(parsed_date.year, parsed_date.month, parsed_date.day, tzinfo=timezone.utc)
    except ValueError:
        pass

    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        raise ValidationError(f"Invalid dueDate: {value}. Expected YYYY-MM-DD")
