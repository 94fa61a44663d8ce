"""Google Sheets tools: metadata, value reads and writes, structural updates."""

from typing import Any
from urllib.parse import quote

from gcollab_mcp.client import WorkspaceClient
from gcollab_mcp.constants import SHEETS_API_BASE
from gcollab_mcp.errors import RemoteResponseError
from gcollab_mcp.models import (
    AppendedValues,
    AppendUpdates,
    BatchValueRanges,
    ClearedValues,
    CreatedSpreadsheet,
    SheetInfo,
    SheetRef,
    SpreadsheetBatchUpdate,
    SpreadsheetInfo,
    UpdatedValues,
    ValueRange,
)
from gcollab_mcp.rendering import (
    batch_values_markdown,
    render,
    spreadsheet_markdown,
    values_markdown,
)
from gcollab_mcp.schemas.sheets import (
    AppendValuesInput,
    BatchGetValuesInput,
    BatchUpdateSpreadsheetInput,
    ClearValuesInput,
    CreateSpreadsheetInput,
    GetSpreadsheetInput,
    GetValuesInput,
    UpdateValuesInput,
)
from gcollab_mcp.tools.base import ToolDefinition, ToolResult


def _spreadsheet_url(spreadsheet_id: str) -> str:
    return f"{SHEETS_API_BASE}/spreadsheets/{spreadsheet_id}"


def _values_url(spreadsheet_id: str, cell_range: str, action: str = "") -> str:
    # A1 ranges contain '!' and ':' and sheet names may contain spaces
    return f"{_spreadsheet_url(spreadsheet_id)}/values/{quote(cell_range, safe='')}{action}"


def _to_sheet_info(sheet: dict[str, Any]) -> SheetInfo:
    props = sheet.get("properties") or {}
    grid = props.get("gridProperties") or {}
    return SheetInfo(
        sheet_id=props.get("sheetId"),
        title=props.get("title") or "Untitled",
        row_count=grid.get("rowCount") or 0,
        column_count=grid.get("columnCount") or 0,
    )


def _to_value_range(raw: dict[str, Any], default_dimension: str | None = None) -> ValueRange:
    return ValueRange(
        range=raw.get("range"),
        major_dimension=raw.get("majorDimension") or default_dimension,
        values=raw.get("values") or [],
    )


async def get_spreadsheet(client: WorkspaceClient, params: GetSpreadsheetInput) -> ToolResult:
    """Fetch spreadsheet properties and the list of sheets."""
    response = await client.request(
        "GET",
        _spreadsheet_url(params.spreadsheet_id),
        params={"includeGridData": str(params.include_grid_data).lower()},
    )

    props = response.get("properties") or {}
    result = SpreadsheetInfo(
        spreadsheet_id=response.get("spreadsheetId") or params.spreadsheet_id,
        title=props.get("title") or "Untitled",
        locale=props.get("locale") or "en_US",
        sheets=[_to_sheet_info(sheet) for sheet in response.get("sheets") or []],
        spreadsheet_url=response.get("spreadsheetUrl"),
    )
    text = render(result, params.response_format, spreadsheet_markdown)
    return ToolResult.of(result, text)


async def get_values(client: WorkspaceClient, params: GetValuesInput) -> ToolResult:
    response = await client.request(
        "GET",
        _values_url(params.spreadsheet_id, params.range),
        params={"majorDimension": params.major_dimension},
    )

    result = _to_value_range(response, params.major_dimension)
    if result.range is None:
        result.range = params.range
    text = render(result, params.response_format, values_markdown)
    return ToolResult.of(result, text)


async def batch_get_values(client: WorkspaceClient, params: BatchGetValuesInput) -> ToolResult:
    """Read several ranges in one request."""
    response = await client.request(
        "GET",
        f"{_spreadsheet_url(params.spreadsheet_id)}/values:batchGet",
        params={"ranges": params.ranges, "majorDimension": params.major_dimension},
    )

    result = BatchValueRanges(
        spreadsheet_id=response.get("spreadsheetId") or params.spreadsheet_id,
        value_ranges=[_to_value_range(vr) for vr in response.get("valueRanges") or []],
    )
    text = render(result, params.response_format, batch_values_markdown)
    return ToolResult.of(result, text)


async def update_values(client: WorkspaceClient, params: UpdateValuesInput) -> ToolResult:
    response = await client.request(
        "PUT",
        _values_url(params.spreadsheet_id, params.range),
        params={"valueInputOption": params.value_input_option},
        json_data={"range": params.range, "values": params.values},
    )

    result = UpdatedValues(
        spreadsheet_id=response.get("spreadsheetId") or params.spreadsheet_id,
        updated_range=response.get("updatedRange") or params.range,
        updated_rows=response.get("updatedRows") or 0,
        updated_columns=response.get("updatedColumns") or 0,
        updated_cells=response.get("updatedCells") or 0,
    )
    text = (
        "Values updated successfully.\n\n"
        f"**Range**: {result.updated_range}\n"
        f"**Cells updated**: {result.updated_cells} "
        f"({result.updated_rows} rows x {result.updated_columns} columns)"
    )
    return ToolResult.of(result, text)


async def append_values(client: WorkspaceClient, params: AppendValuesInput) -> ToolResult:
    """Append rows after the table found in the given range."""
    response = await client.request(
        "POST",
        _values_url(params.spreadsheet_id, params.range, ":append"),
        params={
            "valueInputOption": params.value_input_option,
            "insertDataOption": params.insert_data_option,
        },
        json_data={"range": params.range, "values": params.values},
    )

    updates = response.get("updates") or {}
    result = AppendedValues(
        spreadsheet_id=response.get("spreadsheetId") or params.spreadsheet_id,
        table_range=response.get("tableRange") or params.range,
        updates=AppendUpdates(
            updated_range=updates.get("updatedRange") or "",
            updated_rows=updates.get("updatedRows") or 0,
            updated_columns=updates.get("updatedColumns") or 0,
            updated_cells=updates.get("updatedCells") or 0,
        ),
    )
    text = (
        "Data appended successfully.\n\n"
        f"**Table range**: {result.table_range}\n"
        f"**Appended to**: {result.updates.updated_range}\n"
        f"**Rows added**: {result.updates.updated_rows}"
    )
    return ToolResult.of(result, text)


async def create_spreadsheet(
    client: WorkspaceClient, params: CreateSpreadsheetInput
) -> ToolResult:
    body: dict[str, Any] = {"properties": {"title": params.title}}
    if params.sheet_titles:
        body["sheets"] = [{"properties": {"title": title}} for title in params.sheet_titles]

    response = await client.request("POST", f"{SHEETS_API_BASE}/spreadsheets", json_data=body)

    spreadsheet_id = response.get("spreadsheetId")
    if not spreadsheet_id:
        raise RemoteResponseError("Failed to create spreadsheet: no spreadsheet ID returned")

    result = CreatedSpreadsheet(
        spreadsheet_id=spreadsheet_id,
        title=(response.get("properties") or {}).get("title") or params.title,
        spreadsheet_url=response.get("spreadsheetUrl"),
        sheets=[
            SheetRef(
                sheet_id=(sheet.get("properties") or {}).get("sheetId"),
                title=(sheet.get("properties") or {}).get("title"),
            )
            for sheet in response.get("sheets") or []
        ],
    )
    text = (
        "Spreadsheet created successfully.\n\n"
        f"**Title**: {result.title}\n"
        f"**ID**: {result.spreadsheet_id}\n"
        f"**URL**: {result.spreadsheet_url or 'N/A'}\n"
        f"**Sheets**: {', '.join(sheet.title or '' for sheet in result.sheets)}"
    )
    return ToolResult.of(result, text)


async def batch_update_spreadsheet(
    client: WorkspaceClient, params: BatchUpdateSpreadsheetInput
) -> ToolResult:
    response = await client.request(
        "POST",
        f"{_spreadsheet_url(params.spreadsheet_id)}:batchUpdate",
        json_data={"requests": params.requests},
    )

    result = SpreadsheetBatchUpdate(
        spreadsheet_id=response.get("spreadsheetId") or params.spreadsheet_id,
        replies=response.get("replies") or [],
    )
    text = (
        f"Batch update applied successfully to spreadsheet {result.spreadsheet_id}.\n\n"
        f"{len(result.replies)} operation(s) completed."
    )
    return ToolResult.of(result, text)


async def clear_values(client: WorkspaceClient, params: ClearValuesInput) -> ToolResult:
    response = await client.request(
        "POST", _values_url(params.spreadsheet_id, params.range, ":clear"), json_data={}
    )

    result = ClearedValues(
        spreadsheet_id=response.get("spreadsheetId") or params.spreadsheet_id,
        cleared_range=response.get("clearedRange") or params.range,
    )
    text = f"Values cleared successfully.\n\n**Cleared range**: {result.cleared_range}"
    return ToolResult.of(result, text)


SHEETS_TOOLS = [
    ToolDefinition(
        name="sheets_get_spreadsheet",
        title="Get Spreadsheet Info",
        description="""Retrieve metadata and the list of sheets from a Google Spreadsheet.

Cell values are not included; use sheets_get_values or sheets_batch_get_values for them.

Args:
  - spreadsheet_id (string): The ID of the Google Spreadsheet (found in the URL)
  - include_grid_data (boolean): Whether Google loads grid data; cell values are still
    not returned (default: false)
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')

Returns:
  {
    "spreadsheetId": string,
    "title": string,
    "locale": string,
    "sheets": [{ "sheetId", "title", "rowCount", "columnCount" }],
    "spreadsheetUrl": string
  }

Examples:
  - Get spreadsheet info: spreadsheet_id="1BxiMVs0XRA5nFMdKvBdBZjgmUUqptlbs74OgvE2upms\"""",
        input_model=GetSpreadsheetInput,
        handler=get_spreadsheet,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="sheets_get_values",
        title="Get Cell Values",
        description="""Read cell values from a specific range in a Google Spreadsheet.

Args:
  - spreadsheet_id (string): The ID of the Google Spreadsheet
  - range (string): A1 notation range (e.g., 'Sheet1!A1:D10', 'A1:D10', 'Sheet1')
  - major_dimension ('ROWS' | 'COLUMNS'): Return data by rows or columns (default: 'ROWS')
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')

Returns:
  {
    "range": string,
    "majorDimension": string,
    "values": [[...], ...]
  }

Examples:
  - Read a block: spreadsheet_id="...", range="Sheet1!A1:D10"
  - Read specific column: spreadsheet_id="...", range="Sheet1!A:A\"""",
        input_model=GetValuesInput,
        handler=get_values,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="sheets_batch_get_values",
        title="Batch Get Cell Values",
        description="""Read cell values from multiple ranges in a Google Spreadsheet in a single request.

Args:
  - spreadsheet_id (string): The ID of the Google Spreadsheet
  - ranges (array of strings): A1 notation ranges to read
  - major_dimension ('ROWS' | 'COLUMNS'): Return data by rows or columns (default: 'ROWS')
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')

Returns:
  {
    "spreadsheetId": string,
    "valueRanges": [{ "range", "majorDimension", "values" }]
  }

Examples:
  - Read multiple ranges: ranges=["Sheet1!A1:D10", "Sheet2!A:B"]""",
        input_model=BatchGetValuesInput,
        handler=batch_get_values,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="sheets_update_values",
        title="Update Cell Values",
        description="""Write cell values to a specific range in a Google Spreadsheet.

Args:
  - spreadsheet_id (string): The ID of the Google Spreadsheet
  - range (string): A1 notation range to update (e.g., 'Sheet1!A1:D10')
  - values (2D array): Rows of cell values (strings, numbers, booleans or null)
  - value_input_option ('RAW' | 'USER_ENTERED'): How to interpret input (default: 'USER_ENTERED')

Returns:
  {
    "spreadsheetId": string,
    "updatedRange": string,
    "updatedRows": number,
    "updatedColumns": number,
    "updatedCells": number
  }

Examples:
  - Write a row: range="Sheet1!A1:C1", values=[["Name", "Age", "City"]]
  - Write formula: range="Sheet1!C1", values=[["=SUM(A1:B1)"]]""",
        input_model=UpdateValuesInput,
        handler=update_values,
        destructive=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="sheets_append_values",
        title="Append Rows",
        description="""Append rows of data to the end of a table in a Google Spreadsheet.

Args:
  - spreadsheet_id (string): The ID of the Google Spreadsheet
  - range (string): A1 notation range locating the table (e.g., 'Sheet1!A:D')
  - values (2D array): Rows of cell values to append
  - value_input_option ('RAW' | 'USER_ENTERED'): How to interpret input (default: 'USER_ENTERED')
  - insert_data_option ('OVERWRITE' | 'INSERT_ROWS'): How to insert (default: 'INSERT_ROWS')

Returns:
  {
    "spreadsheetId": string,
    "tableRange": string,
    "updates": { "updatedRange", "updatedRows", "updatedColumns", "updatedCells" }
  }

Examples:
  - Append rows: range="Sheet1!A:D", values=[["Alice", 30, "Engineer", "NYC"]]""",
        input_model=AppendValuesInput,
        handler=append_values,
    ),
    ToolDefinition(
        name="sheets_create_spreadsheet",
        title="Create Spreadsheet",
        description="""Create a new Google Spreadsheet with optional sheet names.

Args:
  - title (string): The title for the new spreadsheet
  - sheet_titles (array of strings, optional): Sheet names to create (default: one sheet)

Returns:
  {
    "spreadsheetId": string,
    "title": string,
    "spreadsheetUrl": string,
    "sheets": [{ "sheetId", "title" }]
  }

Examples:
  - Simple: title="Q3 Report"
  - With sheets: title="Budget", sheet_titles=["Income", "Expenses", "Summary"]""",
        input_model=CreateSpreadsheetInput,
        handler=create_spreadsheet,
    ),
    ToolDefinition(
        name="sheets_batch_update",
        title="Batch Update Spreadsheet",
        description="""Apply batch updates to a Google Spreadsheet (formatting, charts, filters, sheets).

Args:
  - spreadsheet_id (string): The ID of the Google Spreadsheet to update
  - requests (array): Array of batch update request objects

Common request types:
  - addSheet: { addSheet: { properties: { title: "New Sheet" } } }
  - deleteSheet: { deleteSheet: { sheetId: 123 } }
  - repeatCell: { repeatCell: { range: {...}, cell: {...}, fields: "..." } }
  - autoResizeDimensions: { autoResizeDimensions: { dimensions: {...} } }

Returns:
  {
    "spreadsheetId": string,
    "replies": array
  }""",
        input_model=BatchUpdateSpreadsheetInput,
        handler=batch_update_spreadsheet,
        destructive=True,
    ),
    ToolDefinition(
        name="sheets_clear_values",
        title="Clear Cell Values",
        description="""Clear cell values from a specific range in a Google Spreadsheet (keeps formatting).

Args:
  - spreadsheet_id (string): The ID of the Google Spreadsheet
  - range (string): A1 notation range to clear (e.g., 'Sheet1!A1:D10')

Returns:
  {
    "spreadsheetId": string,
    "clearedRange": string
  }

Examples:
  - Clear entire sheet: range="Sheet1\"""",
        input_model=ClearValuesInput,
        handler=clear_values,
        destructive=True,
        idempotent=True,
    ),
]
