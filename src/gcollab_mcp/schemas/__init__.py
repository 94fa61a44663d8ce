"""Input validation models for every tool.

Each model rejects unknown fields and enforces the documented ranges and
defaults. The same models produce the JSON schemas advertised to the host.
"""

from gcollab_mcp.schemas.common import FormattedInput, ToolInput
from gcollab_mcp.schemas.docs import (
    BatchUpdateDocumentInput,
    CreateDocumentInput,
    GetDocumentInput,
)
from gcollab_mcp.schemas.drive import (
    CreateCommentInput,
    DeleteCommentInput,
    GetFileInput,
    ListCommentsInput,
    ListFilesInput,
    ReplyToCommentInput,
    ResolveCommentInput,
    SearchFilesInput,
)
from gcollab_mcp.schemas.gmail import (
    GetMessageInput,
    GetThreadInput,
    ListLabelsInput,
    ListMessagesInput,
    ListThreadsInput,
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

__all__ = [
    "ToolInput",
    "FormattedInput",
    "GetDocumentInput",
    "CreateDocumentInput",
    "BatchUpdateDocumentInput",
    "ListCommentsInput",
    "CreateCommentInput",
    "ReplyToCommentInput",
    "ResolveCommentInput",
    "DeleteCommentInput",
    "ListFilesInput",
    "SearchFilesInput",
    "GetFileInput",
    "GetSpreadsheetInput",
    "GetValuesInput",
    "BatchGetValuesInput",
    "UpdateValuesInput",
    "AppendValuesInput",
    "CreateSpreadsheetInput",
    "BatchUpdateSpreadsheetInput",
    "ClearValuesInput",
    "ListMessagesInput",
    "GetMessageInput",
    "ListThreadsInput",
    "GetThreadInput",
    "ListLabelsInput",
]
