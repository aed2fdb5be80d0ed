#!/usr/bin/env python3
"""
Collection Schemas

JSON Schema backed validation of parsed frontmatter records. Each content
collection binds one schema; validating a record returns the list of issues
found, empty when the record is accepted.

Date fields use the custom `coerced-date` format: the parser hands dates over
as strings and this layer decides whether they convert to a date.
"""

import json
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Union

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.exceptions import SchemaError


REQUIRED_MESSAGE = "Required"

FORMAT_CHECKER = FormatChecker()


def coerce_date(value: Union[str, date]) -> datetime:
    """
    Convert an ISO 8601 date or date-time string to a datetime.

    Args:
        value: Date string such as "2024-01-15" or "2024-01-15T10:00:00Z"

    Returns:
        Parsed datetime (midnight for date-only values)

    Raises:
        ValueError: If the value is not a recognizable date
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(value.strip())


@FORMAT_CHECKER.checks("coerced-date", raises=ValueError)
def is_coercible_date(instance: Any) -> bool:
    """Accept strings that coerce_date can parse; non-strings are left to the `type` keyword."""
    if not isinstance(instance, str):
        return True
    coerce_date(instance)
    return True


@dataclass
class SchemaIssue:
    """
    Single schema violation for a frontmatter record.

    Attributes:
        path: Field path segments leading to the offending value
        message: Human readable description of the violation
    """
    path: List[str]
    message: str

    @property
    def field_path(self) -> str:
        return ".".join(self.path)

    def format_issue(self) -> str:
        """Render as `<dotted field path>: <message>`."""
        return f"{self.field_path}: {self.message}"


class CollectionSchema:
    """Frontmatter schema for one content collection."""

    def __init__(self, schema: Dict[str, Any]):
        """
        Args:
            schema: JSON Schema (Draft 7) describing a frontmatter record

        Raises:
            ValueError: If the schema itself is not a valid JSON Schema
        """
        try:
            Draft7Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid collection schema: {e.message}")

        self.schema = schema
        self._validator = Draft7Validator(schema, format_checker=FORMAT_CHECKER)

    @classmethod
    def from_file(cls, schema_path: Path) -> "CollectionSchema":
        """
        Load a collection schema from a JSON file.

        Raises:
            ValueError: If the file cannot be read or is not a valid schema
        """
        try:
            schema = json.loads(Path(schema_path).read_text(encoding='utf-8'))
        except OSError as e:
            raise ValueError(f"Cannot read schema {schema_path}: {e}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON in {schema_path}: {e}")

        return cls(schema)

    def validate(self, record: Dict[str, Any]) -> List[SchemaIssue]:
        """
        Validate a frontmatter record.

        Args:
            record: Parsed frontmatter; left unmodified

        Returns:
            Issues ordered by field path, empty if the record is accepted
        """
        located = []
        missing_fields: Dict[tuple, Any] = {}

        for error in self._validator.iter_errors(record):
            path = list(error.absolute_path)

            if error.validator == "required":
                # One error per missing property, in the order the schema lists them
                location = tuple(path)
                if location not in missing_fields:
                    missing_fields[location] = iter(
                        [name for name in error.validator_value if name not in error.instance]
                    )
                path.append(next(missing_fields[location]))
                message = REQUIRED_MESSAGE
            else:
                message = error.message

            located.append((path, SchemaIssue(path=[str(part) for part in path], message=message)))

        # Stable sort; array indices compare numerically
        located.sort(key=lambda item: [(isinstance(part, int), part) for part in item[0]])
        return [issue for _, issue in located]
