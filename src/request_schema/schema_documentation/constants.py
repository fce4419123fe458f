"""Shared documentation workbook constants."""

from __future__ import annotations

OPERATIONS_SHEET_NAME = "Operations"

OPERATION_COLUMNS: tuple[str, ...] = ("Operation", "Description", "Properties", "Required")
FIELD_COLUMNS: tuple[str, ...] = ("Path", "Type", "Required")
CONSTRAINT_COLUMNS: tuple[str, ...] = ("Description", "Enum", "Default")

# Excel limits sheet titles to 31 characters.
MAX_SHEET_TITLE_LENGTH = 31
