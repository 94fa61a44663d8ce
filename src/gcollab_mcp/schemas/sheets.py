"""Input models for Google Sheets tools."""

from typing import Any, Literal

from pydantic import Field

from gcollab_mcp.schemas.common import FormattedInput, ToolInput

CellValue = str | int | float | bool | None
MajorDimension = Literal["ROWS", "COLUMNS"]
ValueInputOption = Literal["RAW", "USER_ENTERED"]


class GetSpreadsheetInput(FormattedInput):
    spreadsheet_id: str = Field(
        ...,
        min_length=1,
        description="The ID of the Google Spreadsheet (found in the URL)",
    )
    include_grid_data: bool = Field(
        default=False,
        description=(
            "Whether Google should load grid data (can be large). "
            "Cell values are not returned; use sheets_get_values for them"
        ),
    )


class GetValuesInput(FormattedInput):
    spreadsheet_id: str = Field(..., min_length=1, description="The ID of the Google Spreadsheet")
    range: str = Field(
        ...,
        min_length=1,
        description="The A1 notation range to read (e.g., 'Sheet1!A1:D10' or 'A1:D10')",
    )
    major_dimension: MajorDimension = Field(
        default="ROWS", description="Whether to return data by rows or columns"
    )


class BatchGetValuesInput(FormattedInput):
    spreadsheet_id: str = Field(..., min_length=1, description="The ID of the Google Spreadsheet")
    ranges: list[str] = Field(
        ...,
        min_length=1,
        description="Array of A1 notation ranges to read (e.g., ['Sheet1!A1:D10', 'Sheet2!A1:B5'])",
    )
    major_dimension: MajorDimension = Field(
        default="ROWS", description="Whether to return data by rows or columns"
    )


class UpdateValuesInput(ToolInput):
    spreadsheet_id: str = Field(..., min_length=1, description="The ID of the Google Spreadsheet")
    range: str = Field(
        ...,
        min_length=1,
        description="The A1 notation range to update (e.g., 'Sheet1!A1:D10')",
    )
    values: list[list[CellValue]] = Field(
        ..., min_length=1, description="2D array of values to write (rows of cells)"
    )
    value_input_option: ValueInputOption = Field(
        default="USER_ENTERED",
        description=(
            "How to interpret input: 'RAW' for literal values, "
            "'USER_ENTERED' to parse formulas"
        ),
    )


class AppendValuesInput(UpdateValuesInput):
    insert_data_option: Literal["OVERWRITE", "INSERT_ROWS"] = Field(
        default="INSERT_ROWS",
        description="How to insert: 'INSERT_ROWS' adds new rows, 'OVERWRITE' overwrites existing",
    )


class CreateSpreadsheetInput(ToolInput):
    title: str = Field(
        ..., min_length=1, max_length=500, description="The title for the new spreadsheet"
    )
    sheet_titles: list[str] | None = Field(
        default=None,
        description="Optional array of sheet names to create (default: one sheet named 'Sheet1')",
    )


class BatchUpdateSpreadsheetInput(ToolInput):
    spreadsheet_id: str = Field(
        ..., min_length=1, description="The ID of the Google Spreadsheet to update"
    )
    requests: list[dict[str, Any]] = Field(
        ...,
        min_length=1,
        description=(
            "Array of batch update request objects "
            "(see Google Sheets API batchUpdate documentation)"
        ),
    )


class ClearValuesInput(ToolInput):
    spreadsheet_id: str = Field(..., min_length=1, description="The ID of the Google Spreadsheet")
    range: str = Field(
        ...,
        min_length=1,
        description="The A1 notation range to clear (e.g., 'Sheet1!A1:D10')",
    )
