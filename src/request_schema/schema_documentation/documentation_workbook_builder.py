"""Excel schema documentation service."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from request_schema.operation_registry.registry_models import OperationDefinition
from request_schema.schema_generation.schema_models import LiteralValue

from .constants import (
    CONSTRAINT_COLUMNS,
    FIELD_COLUMNS,
    MAX_SHEET_TITLE_LENGTH,
    OPERATION_COLUMNS,
    OPERATIONS_SHEET_NAME,
)
from .documentation_models import FlattenedProperty
from .property_projection import flatten_properties

_INVALID_TITLE_CHARACTERS = re.compile(r"[\[\]:*?/\\]")


def generate_documentation_workbook(
    definitions: Sequence[OperationDefinition], output_path: Path | str
) -> Path:
    """Create the Excel workbook documenting every operation input schema.

    Returns:
      The resolved output path.
    """
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = OPERATIONS_SHEET_NAME

    _write_header_row(sheet, OPERATION_COLUMNS, row=1)
    used_titles = {OPERATIONS_SHEET_NAME}
    for row_index, definition in enumerate(definitions, start=2):
        fields = flatten_properties(definition.input_schema)
        title = _unique_sheet_title(definition.name, used_titles)
        sheet.cell(row=row_index, column=1, value=definition.name)
        sheet.cell(row=row_index, column=2, value=definition.description)
        sheet.cell(row=row_index, column=3, value=len(fields))
        sheet.cell(row=row_index, column=4, value=", ".join(definition.input_schema.required))
        _write_operation_sheet(workbook, title, fields)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return output_path.resolve()


def _write_operation_sheet(
    workbook: Workbook, title: str, fields: Sequence[FlattenedProperty]
) -> None:
    sheet = workbook.create_sheet(title)
    _write_group_headers(sheet, len(FIELD_COLUMNS), len(CONSTRAINT_COLUMNS))
    _write_header_row(sheet, FIELD_COLUMNS + CONSTRAINT_COLUMNS, row=2)
    for row_index, flattened in enumerate(fields, start=3):
        definition = flattened.definition
        values = (
            flattened.path,
            definition.type.value,
            "yes" if flattened.required else "no",
            definition.description or None,
            ", ".join(str(value) for value in definition.enum) if definition.enum else None,
            _render_default(definition.default),
        )
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)


def _write_header_row(sheet, columns: Sequence[str], *, row: int) -> None:
    for column_index, name in enumerate(columns, start=1):
        sheet.cell(row=row, column=column_index, value=name)
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )


def _write_group_headers(sheet, field_count: int, constraint_count: int) -> None:
    groups = [
        ("Field", 1, field_count),
        ("Constraints", field_count + 1, constraint_count),
    ]
    for label, start_column, count in groups:
        if count <= 0:
            continue
        end_column = start_column + count - 1
        start_letter = get_column_letter(start_column)
        end_letter = get_column_letter(end_column)
        sheet.merge_cells(f"{start_letter}1:{end_letter}1")
        sheet[f"{start_letter}1"].value = label
        sheet[f"{start_letter}1"].style = "Headline 1"


def _render_default(value: LiteralValue | None) -> LiteralValue | None:
    # openpyxl cells take plain str, not RawLiteral
    return str(value) if isinstance(value, str) else value


def _unique_sheet_title(name: str, used_titles: set[str]) -> str:
    base = _INVALID_TITLE_CHARACTERS.sub("_", name)[:MAX_SHEET_TITLE_LENGTH] or "operation"
    title = base
    counter = 2
    while title in used_titles:
        suffix = f"~{counter}"
        title = f"{base[: MAX_SHEET_TITLE_LENGTH - len(suffix)]}{suffix}"
        counter += 1
    used_titles.add(title)
    return title
