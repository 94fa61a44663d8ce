"""Google Docs tools: read, create and batch-update documents."""

from gcollab_mcp.client import WorkspaceClient
from gcollab_mcp.constants import CONTENT_TRUNCATED, DOCS_API_BASE
from gcollab_mcp.errors import RemoteResponseError
from gcollab_mcp.extractors import extract_document_text
from gcollab_mcp.models import CreatedDocument, DocumentBatchUpdate, DocumentContent
from gcollab_mcp.rendering import document_markdown, render
from gcollab_mcp.schemas.docs import (
    BatchUpdateDocumentInput,
    CreateDocumentInput,
    GetDocumentInput,
)
from gcollab_mcp.tools.base import ToolDefinition, ToolResult


async def get_document(client: WorkspaceClient, params: GetDocumentInput) -> ToolResult:
    """Fetch a document and flatten its body to plain text."""
    doc = await client.request("GET", f"{DOCS_API_BASE}/documents/{params.document_id}")

    result = DocumentContent(
        document_id=doc.get("documentId") or params.document_id,
        title=doc.get("title") or "Untitled",
        text_content=extract_document_text(doc.get("body")),
        revision_id=doc.get("revisionId"),
    )
    text = render(result, params.response_format, document_markdown, CONTENT_TRUNCATED)
    return ToolResult.of(result, text)


async def create_document(client: WorkspaceClient, params: CreateDocumentInput) -> ToolResult:
    """Create a document, then insert the initial body text if given."""
    created = await client.request(
        "POST", f"{DOCS_API_BASE}/documents", json_data={"title": params.title}
    )

    document_id = created.get("documentId")
    if not document_id:
        raise RemoteResponseError("Failed to create document: no document ID returned")

    if params.body_content:
        await client.request(
            "POST",
            f"{DOCS_API_BASE}/documents/{document_id}:batchUpdate",
            json_data={
                "requests": [
                    {
                        "insertText": {
                            "location": {"index": 1},
                            "text": params.body_content,
                        }
                    }
                ]
            },
        )

    result = CreatedDocument(
        document_id=document_id,
        title=created.get("title") or params.title,
        revision_id=created.get("revisionId"),
    )
    text = (
        "Document created successfully.\n\n"
        f"**Document ID**: {result.document_id}\n**Title**: {result.title}"
    )
    return ToolResult.of(result, text)


async def batch_update_document(
    client: WorkspaceClient, params: BatchUpdateDocumentInput
) -> ToolResult:
    """Apply raw Docs API batchUpdate requests."""
    response = await client.request(
        "POST",
        f"{DOCS_API_BASE}/documents/{params.document_id}:batchUpdate",
        json_data={"requests": params.requests},
    )

    result = DocumentBatchUpdate(
        document_id=response.get("documentId") or params.document_id,
        replies=response.get("replies") or [],
        write_control=response.get("writeControl"),
    )
    text = (
        f"Batch update applied successfully to document {result.document_id}.\n\n"
        f"{len(result.replies)} operation(s) completed."
    )
    return ToolResult.of(result, text)


DOCS_TOOLS = [
    ToolDefinition(
        name="docs_get_document",
        title="Get Google Document",
        description="""Retrieve the content of a Google Doc by its ID.

Args:
  - document_id (string): The ID of the Google Doc (found in the URL after /d/)
  - response_format ('markdown' | 'json'): Output format (default: 'markdown')

Returns:
  Document title, content, and metadata. Tables appear as [TABLE]. For JSON format:
  {
    "documentId": string,
    "title": string,
    "textContent": string,
    "revisionId": string
  }

Examples:
  - Get doc content: document_id="1BxiMVs0XRA5nFMdKvBdBZjgmUUqptlbs74OgvE2upms" (ID from the document URL)""",
        input_model=GetDocumentInput,
        handler=get_document,
        read_only=True,
        idempotent=True,
    ),
    ToolDefinition(
        name="docs_create_document",
        title="Create Google Document",
        description="""Create a new Google Doc with an optional initial body.

Args:
  - title (string): The title for the new document
  - body_content (string, optional): Initial text content for the document body

Returns:
  {
    "documentId": string,
    "title": string,
    "revisionId": string
  }

Examples:
  - Create empty doc: title="Meeting Notes"
  - Create with content: title="Draft", body_content="Hello World" (inserted at the start)""",
        input_model=CreateDocumentInput,
        handler=create_document,
    ),
    ToolDefinition(
        name="docs_batch_update",
        title="Batch Update Google Document",
        description="""Apply batch updates to a Google Doc (insert/update/delete text, formatting, images, tables).

Args:
  - document_id (string): The ID of the Google Doc to update
  - requests (array): Array of batch update request objects

Common request types:
  - insertText: { insertText: { location: { index: 1 }, text: "Hello" } }
  - deleteContentRange: { deleteContentRange: { range: { startIndex: 1, endIndex: 10 } } }
  - updateTextStyle: { updateTextStyle: { range: {...}, textStyle: {...}, fields: "bold" } }
  - insertTable: { insertTable: { rows: 3, columns: 3, location: {...} } }

Returns:
  {
    "documentId": string,
    "replies": array,
    "writeControl": object
  }""",
        input_model=BatchUpdateDocumentInput,
        handler=batch_update_document,
        destructive=True,
    ),
]
