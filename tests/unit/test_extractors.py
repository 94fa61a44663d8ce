"""Unit tests for document and message text extraction."""

import base64
import binascii

import pytest

from gcollab_mcp.extractors import (
    TABLE_PLACEHOLDER,
    decode_base64url,
    extract_document_text,
    extract_message_body,
    get_header,
    strip_html,
)


def encode(text: str) -> str:
    """Encode text the way Gmail does: URL-safe alphabet, no padding."""
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def paragraph(*runs: str) -> dict:
    return {"paragraph": {"elements": [{"textRun": {"content": run}} for run in runs]}}


@pytest.mark.unit
class TestExtractDocumentText:
    """Tests for extract_document_text()."""

    def test_should_concatenate_paragraph_runs_in_order(self) -> None:
        """Verify paragraph runs are joined with nothing inserted."""
        body = {"content": [paragraph("Hello ", "World\n"), paragraph("Second line\n")]}

        assert extract_document_text(body) == "Hello World\nSecond line\n"

    def test_should_replace_tables_with_placeholder(self) -> None:
        """Verify a table contributes one placeholder and is not walked."""
        table = {"table": {"tableRows": [{"tableCells": [{"content": [paragraph("cell")]}]}]}}
        body = {"content": [paragraph("Before\n"), table, paragraph("After\n")]}

        assert extract_document_text(body) == f"Before\n{TABLE_PLACEHOLDER}After\n"

    def test_should_skip_elements_without_text_runs(self) -> None:
        """Verify section breaks and inline objects contribute nothing."""
        body = {
            "content": [
                {"sectionBreak": {}},
                {"paragraph": {"elements": [{"inlineObjectElement": {}}, {"textRun": {}}]}},
                paragraph("Text\n"),
            ]
        }

        assert extract_document_text(body) == "Text\n"

    def test_should_return_empty_string_for_missing_body(self) -> None:
        """Verify None and empty bodies produce empty text."""
        assert extract_document_text(None) == ""
        assert extract_document_text({}) == ""
        assert extract_document_text({"content": []}) == ""


@pytest.mark.unit
class TestDecodeBase64Url:
    """Tests for decode_base64url()."""

    def test_should_decode_ascii_without_padding(self) -> None:
        """Verify unpadded URL-safe data decodes."""
        assert decode_base64url(encode("Hello, World")) == "Hello, World"

    def test_should_decode_utf8_text(self) -> None:
        """Verify multi-byte characters survive decoding."""
        text = "Grüße, 世界 ✓"
        assert decode_base64url(encode(text)) == text

    def test_should_translate_url_safe_alphabet(self) -> None:
        """Verify '-' and '_' map back to '+' and '/'."""
        raw = bytes([0xFB, 0xFF, 0xBF])
        data = base64.urlsafe_b64encode(raw).decode("ascii")

        assert "-" in data or "_" in data
        assert decode_base64url(data) == raw.decode("utf-8", errors="replace")

    def test_should_reject_invalid_data(self) -> None:
        """Verify characters outside the alphabet raise."""
        with pytest.raises(binascii.Error):
            decode_base64url("not*valid*base64")


@pytest.mark.unit
class TestStripHtml:
    """Tests for strip_html()."""

    def test_should_remove_tags_and_collapse_whitespace(self) -> None:
        """Verify markup is dropped and whitespace runs become one space."""
        html = "<html><body>\n  <p>Hello</p>\n\n<p>  World </p></body></html>"

        assert strip_html(html) == "Hello World"


@pytest.mark.unit
class TestExtractMessageBody:
    """Tests for extract_message_body()."""

    def test_should_use_inline_body_data(self) -> None:
        """Verify data on the root part is used directly."""
        payload = {"mimeType": "text/plain", "body": {"data": encode("Inline body")}}

        assert extract_message_body(payload) == "Inline body"

    def test_should_prefer_plain_text_over_html(self) -> None:
        """Verify a text/plain part wins even when HTML comes first."""
        payload = {
            "mimeType": "multipart/alternative",
            "body": {"size": 0},
            "parts": [
                {"mimeType": "text/html", "body": {"data": encode("<b>HTML</b>")}},
                {"mimeType": "text/plain", "body": {"data": encode("Plain")}},
            ],
        }

        assert extract_message_body(payload) == "Plain"

    def test_should_strip_html_when_no_plain_text(self) -> None:
        """Verify HTML-only bodies are stripped and collapsed."""
        payload = {
            "mimeType": "multipart/alternative",
            "parts": [
                {"mimeType": "text/html", "body": {"data": encode("<p>Hello</p>\n<p>there</p>")}}
            ],
        }

        assert extract_message_body(payload) == "Hello there"

    def test_should_recurse_into_nested_parts(self) -> None:
        """Verify bodies inside nested multiparts are found."""
        payload = {
            "mimeType": "multipart/mixed",
            "parts": [
                {
                    "mimeType": "multipart/alternative",
                    "parts": [{"mimeType": "text/plain", "body": {"data": encode("Nested")}}],
                },
                {"mimeType": "application/pdf", "filename": "a.pdf", "body": {"attachmentId": "x"}},
            ],
        }

        assert extract_message_body(payload) == "Nested"

    def test_should_return_empty_string_when_no_body(self) -> None:
        """Verify missing payloads and attachment-only trees give empty text."""
        payload = {
            "mimeType": "multipart/mixed",
            "parts": [{"mimeType": "image/png", "body": {"attachmentId": "att1"}}],
        }

        assert extract_message_body(None) == ""
        assert extract_message_body(payload) == ""


@pytest.mark.unit
class TestGetHeader:
    """Tests for get_header()."""

    def test_should_match_names_case_insensitively(self) -> None:
        """Verify header lookup ignores case."""
        headers = [{"name": "Subject", "value": "Hi"}, {"name": "FROM", "value": "a@b.c"}]

        assert get_header(headers, "subject") == "Hi"
        assert get_header(headers, "From") == "a@b.c"

    def test_should_return_none_when_absent(self) -> None:
        """Verify missing headers and header lists give None."""
        assert get_header([{"name": "To", "value": "x"}], "Cc") is None
        assert get_header(None, "Subject") is None
