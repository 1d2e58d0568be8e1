"""Resource clients and data contracts for TheBrain API.

Each resource client wraps one API area and shares the facade's
``httpx.AsyncClient``.
"""

from __future__ import annotations

from .attachments import AttachmentsClient
from .base import ResourceClient
from .brain_access import BrainAccessClient
from .brains import BrainsClient
from .links import LinksClient
from .models import (
    AccessType,
    Attachment,
    AttachmentType,
    Brain,
    BrainAccessor,
    BrainStatistics,
    CreateLinkResponse,
    CreateThoughtResponse,
    EntityType,
    JsonPatchDocument,
    JsonPatchOperation,
    Link,
    LinkCreate,
    ModificationLog,
    Note,
    NoteUpdate,
    OperationType,
    RemoveBrainAccess,
    SearchOptions,
    SearchResult,
    SearchResultType,
    SetBrainAccess,
    Thought,
    ThoughtCreate,
    ThoughtGraph,
    ThoughtKind,
    User,
)
from .notes import NotesClient
from .notes_images import NotesImagesClient
from .search import SearchClient
from .thoughts import ThoughtsClient
from .users import UsersClient

__all__ = [
    # Clients
    "ResourceClient",
    "BrainsClient",
    "ThoughtsClient",
    "LinksClient",
    "AttachmentsClient",
    "NotesClient",
    "NotesImagesClient",
    "SearchClient",
    "UsersClient",
    "BrainAccessClient",
    # Enums
    "ThoughtKind",
    "AccessType",
    "EntityType",
    "OperationType",
    "SearchResultType",
    "AttachmentType",
    # Data contracts
    "Brain",
    "BrainStatistics",
    "BrainAccessor",
    "Thought",
    "ThoughtCreate",
    "CreateThoughtResponse",
    "ThoughtGraph",
    "Link",
    "LinkCreate",
    "CreateLinkResponse",
    "Attachment",
    "Note",
    "NoteUpdate",
    "ModificationLog",
    "SearchResult",
    "SearchOptions",
    "User",
    "SetBrainAccess",
    "RemoveBrainAccess",
    "JsonPatchOperation",
    "JsonPatchDocument",
]
