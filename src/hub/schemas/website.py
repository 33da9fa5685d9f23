"""Website project schemas."""

from pydantic import Field

from src.hub.schemas.project import (
    DocumentModel,
    ExtensionModel,
    ProjectDraft,
    ProjectRecord,
    ProjectUpdate,
)


class WebsiteCredentials(DocumentModel):
    staging_logins: str | None = None
    client_logins: str | None = None
    customer_db_files: list[str] | None = None
    client_files: list[str] | None = None


class WebsiteExtension(ExtensionModel):
    website_id: str | None = None
    credentials: WebsiteCredentials | None = None


class WebsiteProjectDraft(ProjectDraft):
    extension: WebsiteExtension = Field(default_factory=WebsiteExtension)


class WebsiteProjectUpdate(ProjectUpdate):
    extension: WebsiteExtension | None = None


class WebsiteProject(ProjectRecord):
    extension: WebsiteExtension = Field(default_factory=WebsiteExtension)
