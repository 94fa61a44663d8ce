"""Integration tests for the Google Docs tools against a mocked API."""

import json
from typing import Any

import pytest

from gcollab_mcp.client import WorkspaceClient
from gcollab_mcp.constants import CHARACTER_LIMIT, CONTENT_TRUNCATED
from gcollab_mcp.errors import NOT_FOUND
from gcollab_mcp.tools import TOOLS_BY_NAME, run_tool

DOCUMENT = {
    "documentId": "doc1",
    "title": "Meeting Notes",
    "revisionId": "rev42",
    "body": {
        "content": [
            {"sectionBreak": {}},
            {"paragraph": {"elements": [{"textRun": {"content": "Agenda\n"}}]}},
            {"table": {"rows": 1, "columns": 1}},
            {"paragraph": {"elements": [{"textRun": {"content": "Done.\n"}}]}},
        ]
    },
}


async def call(client: WorkspaceClient, name: str, **arguments: Any):
    return await run_tool(TOOLS_BY_NAME[name], client, arguments)


@pytest.mark.integration
class TestGetDocument:
    """Tests for docs_get_document."""

    @pytest.mark.asyncio
    async def test_should_render_markdown(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify the document is flattened into the markdown template."""
        google_api.add("GET", "/v1/documents/doc1", DOCUMENT)

        result = await call(workspace_client, "docs_get_document", document_id="doc1")

        assert result.text == (
            "# Meeting Notes\n\n**Document ID**: doc1\n**Revision ID**: rev42\n\n"
            "## Content\n\nAgenda\n[TABLE]Done.\n"
        )
        assert result.structured == {
            "documentId": "doc1",
            "title": "Meeting Notes",
            "textContent": "Agenda\n[TABLE]Done.\n",
            "revisionId": "rev42",
        }

    @pytest.mark.asyncio
    async def test_should_render_json(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify JSON output equals the structured content."""
        google_api.add("GET", "/v1/documents/doc1", DOCUMENT)

        result = await call(
            workspace_client, "docs_get_document", document_id="doc1", response_format="json"
        )

        assert json.loads(result.text) == result.structured

    @pytest.mark.asyncio
    async def test_should_default_missing_title(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify untitled documents get a placeholder title."""
        google_api.add("GET", "/v1/documents/doc1", {"documentId": "doc1"})

        result = await call(workspace_client, "docs_get_document", document_id="doc1")

        assert result.structured["title"] == "Untitled"
        assert result.structured["textContent"] == ""
        assert "**Revision ID**: N/A" in result.text

    @pytest.mark.asyncio
    async def test_should_truncate_long_documents(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify markdown is cut while structured content stays whole."""
        long_text = "x" * (CHARACTER_LIMIT + 100)
        google_api.add(
            "GET",
            "/v1/documents/doc1",
            {
                "documentId": "doc1",
                "title": "Long",
                "body": {
                    "content": [{"paragraph": {"elements": [{"textRun": {"content": long_text}}]}}]
                },
            },
        )

        result = await call(workspace_client, "docs_get_document", document_id="doc1")

        assert len(result.text) == CHARACTER_LIMIT + len(CONTENT_TRUNCATED)
        assert result.text.endswith(CONTENT_TRUNCATED)
        assert result.structured["textContent"] == long_text

    @pytest.mark.asyncio
    async def test_should_classify_missing_document(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify a 404 becomes the not-found message with no structured content."""
        result = await call(workspace_client, "docs_get_document", document_id="nope")

        assert result.text == NOT_FOUND
        assert result.structured is None
        assert result.is_error

    @pytest.mark.asyncio
    async def test_should_reject_invalid_arguments_before_calling_google(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify validation failures never reach the API."""
        result = await call(workspace_client, "docs_get_document", document_id="")

        assert result.text.startswith("Error: Invalid input: document_id")
        assert google_api.requests == []


@pytest.mark.integration
class TestCreateDocument:
    """Tests for docs_create_document."""

    @pytest.mark.asyncio
    async def test_should_create_empty_document(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify a title-only create makes a single call."""
        google_api.add(
            "POST", "/v1/documents", {"documentId": "new1", "title": "Notes", "revisionId": "r1"}
        )

        result = await call(workspace_client, "docs_create_document", title="Notes")

        assert len(google_api.requests) == 1
        assert google_api.last_json() == {"title": "Notes"}
        assert result.structured == {"documentId": "new1", "title": "Notes", "revisionId": "r1"}
        assert "**Document ID**: new1" in result.text

    @pytest.mark.asyncio
    async def test_should_insert_body_at_start(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify body content is inserted at index 1 after creation."""
        google_api.add("POST", "/v1/documents", {"documentId": "new1", "title": "Draft"})
        google_api.add("POST", "/v1/documents/new1:batchUpdate", {"documentId": "new1"})

        await call(
            workspace_client, "docs_create_document", title="Draft", body_content="Hello World"
        )

        assert google_api.last_json() == {
            "requests": [{"insertText": {"location": {"index": 1}, "text": "Hello World"}}]
        }

    @pytest.mark.asyncio
    async def test_should_fail_without_document_id(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify a create response without an ID is an error."""
        google_api.add("POST", "/v1/documents", {"title": "Draft"})

        result = await call(workspace_client, "docs_create_document", title="Draft")

        assert result.text == "Error: Failed to create document: no document ID returned"
        assert result.structured is None


@pytest.mark.integration
class TestBatchUpdateDocument:
    """Tests for docs_batch_update."""

    @pytest.mark.asyncio
    async def test_should_forward_requests_and_count_replies(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify requests are passed through unchanged."""
        requests = [
            {"insertText": {"location": {"index": 1}, "text": "Hi"}},
            {"deleteContentRange": {"range": {"startIndex": 5, "endIndex": 9}}},
        ]
        google_api.add(
            "POST",
            "/v1/documents/doc1:batchUpdate",
            {
                "documentId": "doc1",
                "replies": [{}, {}],
                "writeControl": {"requiredRevisionId": "r"},
            },
        )

        result = await call(
            workspace_client, "docs_batch_update", document_id="doc1", requests=requests
        )

        assert google_api.last_json() == {"requests": requests}
        assert result.structured["writeControl"] == {"requiredRevisionId": "r"}
        assert "2 operation(s) completed." in result.text

    @pytest.mark.asyncio
    async def test_should_report_bad_requests(
        self, workspace_client: WorkspaceClient, google_api: Any
    ) -> None:
        """Verify a 400 carries Google's explanation."""
        google_api.add_error(
            "POST", "/v1/documents/doc1:batchUpdate", 400, "Invalid requests[0].insertText"
        )

        result = await call(
            workspace_client,
            "docs_batch_update",
            document_id="doc1",
            requests=[{"insertText": {}}],
        )

        assert result.text.startswith("Error: Invalid request. ")
        assert "Invalid requests[0].insertText" in result.text
