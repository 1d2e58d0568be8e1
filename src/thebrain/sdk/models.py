"""Data contracts for TheBrain API.

These are Pydantic models validated at the client boundary: every response
is parsed into one of them before it reaches the caller, and request bodies
are built from them. Field names are snake_case; the wire format uses the
camelCase aliases generated from them.
"""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Annotated, Any, Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    PositiveInt,
    StringConstraints,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

Uuid = Annotated[str, StringConstraints(pattern=UUID_PATTERN)]


# ---- Enums ------------------------------------------------------------------


class ThoughtKind(IntEnum):
    NORMAL = 1
    TYPE = 2
    EVENT = 3
    TAG = 4
    SYSTEM = 5


class AccessType(IntEnum):
    NONE = 0
    READER = 1
    WRITER = 2
    ADMIN = 3
    PUBLIC_READER = 4


class EntityType(IntEnum):
    UNKNOWN = -1
    BRAIN = 1
    THOUGHT = 2
    LINK = 3
    ATTACHMENT = 4
    BRAIN_SETTING = 5
    BRAIN_ACCESS_ENTRY = 6
    CALENDAR_EVENT = 7
    FIELD_INSTANCE = 8
    FIELD_DEFINITION = 9


class OperationType(IntEnum):
    ADD = 0
    REMOVE = 1
    REPLACE = 2
    MOVE = 3
    COPY = 4
    TEST = 5
    INVALID = 6


class SearchResultType(IntEnum):
    THOUGHT = 0
    LINK = 1
    NOTE = 2
    ATTACHMENT = 3
    THOUGHT_NAME = 4
    LINK_NAME = 5
    NOTE_CONTENT = 6
    ATTACHMENT_NAME = 7


class AttachmentType(IntEnum):
    FILE = 1
    URL = 2


# ---- Base models ------------------------------------------------------------


class ApiModel(BaseModel):
    """Base for all wire models: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_api(self) -> dict[str, Any]:
        """Serialize for the wire (aliases, JSON types, no unset nulls)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BaseEntity(ApiModel):
    id: Uuid
    brain_id: Uuid
    creation_date_time: datetime
    modification_date_time: datetime


class NamedEntity(BaseEntity):
    name: Optional[str] = None
    cleaned_up_name: Optional[str] = None


# ---- Brains -----------------------------------------------------------------


class Brain(ApiModel):
    """A brain. Every field may be omitted by the server, but any id that is
    present must be a UUID."""

    id: Optional[Uuid] = None
    name: Optional[str] = None
    home_thought_id: Optional[Uuid] = None
    brain_id: Optional[Uuid] = None
    creation_date_time: Optional[datetime] = None
    modification_date_time: Optional[datetime] = None


class BrainStatistics(ApiModel):
    brain_name: Optional[str] = None
    date_generated: datetime
    brain_id: Uuid
    thoughts: int
    forgotten_thoughts: int
    links: int
    links_per_thought: float
    thought_types: int
    link_types: int
    tags: int
    notes: int
    internal_files: int
    internal_folders: int
    external_files: int
    external_folders: int
    web_links: int
    assigned_icons: int
    internal_files_size: int
    icons_files_size: int


class BrainAccessor(ApiModel):
    accessor_id: Uuid
    name: Optional[str] = None
    is_organization_user: bool
    is_pending: bool
    access_type: AccessType


# ---- Thoughts ---------------------------------------------------------------


class Thought(NamedEntity):
    kind: ThoughtKind
    ac_type: int
    type_id: Optional[Uuid] = None
    label: Optional[str] = None
    position: Optional[float] = None
    source_thought_id: Optional[Uuid] = None
    relation: Optional[int] = None
    display_modification_date_time: Optional[datetime] = None
    forgotten_date_time: Optional[datetime] = None
    links_modification_date_time: Optional[datetime] = None
    foreground_color: Optional[str] = None
    background_color: Optional[str] = None


class ThoughtCreate(ApiModel):
    """Body of a create-thought request."""

    name: str
    kind: Optional[ThoughtKind] = None
    label: Optional[str] = None
    type_id: Optional[Uuid] = None
    source_thought_id: Optional[Uuid] = None
    relation: Optional[int] = None
    ac_type: Optional[AccessType] = None
    position: Optional[float] = None


class CreateThoughtResponse(ApiModel):
    id: Optional[str] = None


# ---- Links ------------------------------------------------------------------


class Link(NamedEntity):
    thought_id_a: Uuid
    thought_id_b: Uuid
    relation: int
    kind: int
    direction: int
    meaning: int
    type_id: Optional[Uuid] = None
    label: Optional[str] = None
    position: Optional[float] = None
    color: Optional[str] = None
    thickness: Optional[float] = None


class LinkCreate(ApiModel):
    """Body of a create-link request."""

    thought_id_a: Uuid
    thought_id_b: Uuid
    relation: int
    name: Optional[str] = None
    type_id: Optional[Uuid] = None
    label: Optional[str] = None


class CreateLinkResponse(ApiModel):
    id: Optional[str] = None


# ---- Attachments ------------------------------------------------------------


class Attachment(BaseEntity):
    source_id: Uuid
    source_type: EntityType
    name: Optional[str] = None
    type: int
    is_notes: bool = False
    position: Optional[float] = None
    type_id: Optional[Uuid] = None
    label: Optional[str] = None
    file_modification_date_time: Optional[datetime] = None
    data_length: Optional[int] = None
    location: Optional[str] = None


class ThoughtGraph(ApiModel):
    active_thought: Thought
    parents: Optional[list[Thought]] = None
    children: Optional[list[Thought]] = None
    jumps: Optional[list[Thought]] = None
    siblings: Optional[list[Thought]] = None
    tags: Optional[list[Thought]] = None
    type: Optional[Thought] = None
    links: Optional[list[Link]] = None
    attachments: Optional[list[Attachment]] = None


# ---- Notes ------------------------------------------------------------------


class Note(ApiModel):
    """Note content. The server derives ``html`` and ``text`` from
    ``markdown``."""

    brain_id: Uuid
    source_id: Uuid
    source_type: Optional[EntityType] = None
    id: Optional[Uuid] = None
    markdown: Optional[str] = None
    html: Optional[str] = None
    text: Optional[str] = None
    creation_date_time: Optional[datetime] = None
    modification_date_time: Optional[datetime] = None


class NoteUpdate(ApiModel):
    markdown: Optional[str] = None

    def to_api(self) -> dict[str, Any]:
        return {"markdown": self.markdown}


# ---- Modification logs ------------------------------------------------------


class ModificationLog(BaseEntity):
    source_id: Uuid
    source_type: EntityType
    mod_type: int
    old_value: Optional[str] = None
    new_value: Optional[str] = None
    user_id: Uuid
    sync_update_date_time: Optional[datetime] = None
    extra_a_id: Optional[Uuid] = None
    extra_a_type: Optional[EntityType] = None
    extra_b_id: Optional[Uuid] = None
    extra_b_type: Optional[EntityType] = None


# ---- Search -----------------------------------------------------------------


class SearchResult(ApiModel):
    id: Uuid
    type: Literal["thought", "link", "note", "attachment"]
    match_type: Literal["name", "content"]
    match_text: str
    score: float
    name: Optional[str] = None
    brain_id: Optional[Uuid] = None
    brain_name: Optional[str] = None
    match_position: Optional[int] = None
    match_length: Optional[int] = None
    created: Optional[datetime] = None
    modified: Optional[datetime] = None
    url: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None
    parent_thought_id: Optional[Uuid] = None
    parent_thought_name: Optional[str] = None
    source_thought: Optional[Thought] = None
    source_link: Optional[Link] = None
    search_result_type: Optional[SearchResultType] = None
    is_from_other_brain: Optional[bool] = None
    attachment_id: Optional[Uuid] = None
    entity_type: Optional[EntityType] = None
    source_type: Optional[EntityType] = None


class SearchOptions(ApiModel):
    max_results: PositiveInt = 30
    only_search_thought_names: bool = False
    exclude_brain_ids: list[Uuid] = Field(default_factory=list)


# ---- Users ------------------------------------------------------------------


class User(ApiModel):
    id: Uuid
    username: Optional[str] = None
    last_name: Optional[str] = None
    first_name: Optional[str] = None
    email_address: Optional[str] = None
    services_expiry: Optional[datetime] = None
    account_type: Optional[str] = None


# ---- Brain access requests --------------------------------------------------


class _AccessorIdentity(ApiModel):
    """Exactly one of email_address / user_id identifies the accessor."""

    email_address: Optional[EmailStr] = None
    user_id: Optional[Uuid] = None

    @model_validator(mode="after")
    def check_single_identity(self):
        if self.email_address and self.user_id:
            raise ValueError("Provide either emailAddress or userId, but not both")
        if not self.email_address and not self.user_id:
            raise ValueError("Either emailAddress or userId must be provided")
        return self


class SetBrainAccess(_AccessorIdentity):
    """Grant or change access. ``NONE`` cannot be granted."""

    access_type: AccessType

    @field_validator("access_type")
    @classmethod
    def validate_access_type(cls, v: AccessType) -> AccessType:
        if v == AccessType.NONE:
            raise ValueError("accessType must be between 1 (Reader) and 4 (PublicReader)")
        return v


class RemoveBrainAccess(_AccessorIdentity):
    pass


# ---- JSON Patch -------------------------------------------------------------


class JsonPatchOperation(ApiModel):
    """One RFC 6902 operation."""

    op: Literal["add", "remove", "replace", "move", "copy", "test"]
    path: str
    value: Any = None
    from_: Optional[str] = Field(default=None, alias="from")
    operation_type: Optional[OperationType] = None

    def to_api(self) -> dict[str, Any]:
        data: dict[str, Any] = {"op": self.op, "path": self.path}
        if self.op in ("add", "replace", "test") or "value" in self.model_fields_set:
            data["value"] = self.value
        if self.from_ is not None:
            data["from"] = self.from_
        if self.operation_type is not None:
            data["operationType"] = int(self.operation_type)
        return data


class JsonPatchDocument(ApiModel):
    """Wrapper form of a patch document; normalized to its operation list
    before sending."""

    operations: Optional[list[JsonPatchOperation]] = None
    contract_resolver: Any = None


__all__ = [
    "UUID_PATTERN",
    "Uuid",
    "ThoughtKind",
    "AccessType",
    "EntityType",
    "OperationType",
    "SearchResultType",
    "AttachmentType",
    "ApiModel",
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
