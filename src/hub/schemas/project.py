"""Project record schemas shared by every category."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Keys the store or the repository own; never taken from caller payloads.
RESERVED_KEYS = frozenset({"id", "createdAt", "updatedAt"})


class DocumentModel(BaseModel):
    """Base for models whose fields map to camelCase document keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExtensionModel(DocumentModel):
    """Category-specific structure.

    Every field is optional and unknown keys are kept, so documents written
    by other clients round-trip unchanged.
    """

    model_config = ConfigDict(extra="allow")


class Assignments(DocumentModel):
    project_owner: str | None = None
    lead_owner: str | None = None


class ProjectDraft(DocumentModel):
    """Fields a caller supplies when creating a project."""

    name: str = Field(min_length=1, max_length=200)
    organisation_id: str | None = None
    status: str = "planning"
    brief: str | None = None
    brief_html: str | None = None
    start_date: str | None = None
    due_date: str | None = None
    assigned_to: str | None = None
    budget: float | None = None
    costs: float | None = None
    assignments: Assignments = Field(default_factory=Assignments)
    extension: ExtensionModel = Field(default_factory=ExtensionModel)
    tasks: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v


class ProjectUpdate(DocumentModel):
    """Fields a caller may change on an existing project.

    Only the fields explicitly set are written; everything else is left
    untouched in the store.
    """

    name: str | None = Field(default=None, min_length=1, max_length=200)
    organisation_id: str | None = None
    status: str | None = None
    brief: str | None = None
    brief_html: str | None = None
    start_date: str | None = None
    due_date: str | None = None
    assigned_to: str | None = None
    budget: float | None = None
    costs: float | None = None
    assignments: Assignments | None = None
    extension: ExtensionModel | None = None
    tasks: list[str] | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Project name cannot be empty or whitespace only")
        return v


class ProjectRecord(DocumentModel):
    """A project as read back from a collection store.

    Reads are lenient: documents written without a name, status or
    timestamps (older clients never stamped them) still load.
    """

    id: str
    name: str = ""
    organisation_id: str | None = None
    status: str = ""
    brief: str | None = None
    brief_html: str | None = None
    start_date: str | None = None
    due_date: str | None = None
    assigned_to: str | None = None
    budget: float | None = None
    costs: float | None = None
    assignments: Assignments = Field(default_factory=Assignments)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    extension: ExtensionModel = Field(default_factory=ExtensionModel)
    tasks: list[str] = Field(default_factory=list)


def to_document(data: BaseModel | Mapping[str, Any], partial: bool = False) -> dict[str, Any]:
    """Convert a draft model or a raw mapping into a document payload.

    Models are dumped with camelCase keys; a partial dump keeps only the
    fields the caller explicitly set. Mappings are passed through as given,
    without validation. Reserved keys are dropped in both cases.
    """
    if isinstance(data, BaseModel):
        if partial:
            payload = data.model_dump(mode="json", by_alias=True, exclude_unset=True)
        else:
            payload = data.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        payload = dict(data)
    return {key: value for key, value in payload.items() if key not in RESERVED_KEYS}
