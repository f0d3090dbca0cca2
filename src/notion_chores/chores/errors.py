# src/notion_chores/chores/errors.py

from __future__ import annotations

from typing import Any


class ChoreError(Exception):
    """Base class for everything the chore sync raises on purpose."""


class MissingPropertyError(ChoreError):
    def __init__(self, row_id: str, name: str) -> None:
        super().__init__(f"Page {row_id} does not contain the '{name}' property.")
        self.row_id = row_id
        self.name = name


class PropertyTypeMismatchError(ChoreError):
    def __init__(self, property_id: str, expected: str, actual: str) -> None:
        super().__init__(
            f"Property {property_id} is not a '{expected}' property, but it's '{actual}'."
        )
        self.property_id = property_id
        self.expected = expected
        self.actual = actual


class NoFrequencySetError(ChoreError):
    def __init__(self, row_id: str) -> None:
        super().__init__(f"{row_id} has no frequency set.")
        self.row_id = row_id


class UnknownFrequencyError(ChoreError):
    def __init__(self, row_id: str, label: str) -> None:
        super().__init__(f"Unknown frequency in {row_id}: '{label}'")
        self.row_id = row_id
        self.label = label


class UnsupportedRowTypeError(ChoreError):
    def __init__(self, row_id: str, object_type: str) -> None:
        super().__init__(f"Unsupported row type: {object_type} for row id {row_id}")
        self.row_id = row_id
        self.object_type = object_type


class NotionError(ChoreError):
    """
    Non-200 response from the Notion API.

    `body` is the decoded JSON error object when the response had one,
    otherwise the raw response text.
    """

    def __init__(self, status_code: int, body: Any) -> None:
        message = body.get("message") if isinstance(body, dict) else None
        super().__init__(f"Notion API error {status_code}: {message or body!r}")
        self.status_code = status_code
        self.body = body
