"""Graphics project schemas."""

from pydantic import Field

from src.hub.schemas.project import (
    DocumentModel,
    ExtensionModel,
    ProjectDraft,
    ProjectRecord,
    ProjectUpdate,
)


class Typography(DocumentModel):
    primary_font: str | None = None
    secondary_font: str | None = None
    font_sizes: list[str] | None = None


class DesignRequirements(DocumentModel):
    color_palette: list[str] | None = None
    typography: Typography | None = None
    style_guide: bool | None = None
    brand_guidelines: str | None = None
    mood_board: bool | None = None


class PrintSpecifications(DocumentModel):
    paper_type: str | None = None
    finish: str | None = None
    quantity: int | None = None


class DigitalSpecifications(DocumentModel):
    file_size: str | None = None
    resolution: str | None = None
    color_mode: str | None = None


class Deliverables(DocumentModel):
    file_formats: list[str] | None = None
    dimensions: list[str] | None = None
    print_specifications: PrintSpecifications | None = None
    digital_specifications: DigitalSpecifications | None = None


class RevisionEntry(DocumentModel):
    date: str
    comments: str
    status: str


class Revisions(DocumentModel):
    allowed_revisions: int | None = None
    current_revision: int | None = None
    # Keyed by revision label; keys are kept verbatim
    revision_history: dict[str, RevisionEntry] | None = None


class Assets(DocumentModel):
    logos: list[str] | None = None
    images: list[str] | None = None
    illustrations: list[str] | None = None
    mockups: list[str] | None = None
    source_files: list[str] | None = None


class GraphicsExtension(ExtensionModel):
    graphics_type: str | None = None  # logo, branding, print, ...
    design_requirements: DesignRequirements | None = None
    deliverables: Deliverables | None = None
    revisions: Revisions | None = None
    assets: Assets | None = None


class GraphicsProjectDraft(ProjectDraft):
    extension: GraphicsExtension = Field(default_factory=GraphicsExtension)


class GraphicsProjectUpdate(ProjectUpdate):
    extension: GraphicsExtension | None = None


class GraphicsProject(ProjectRecord):
    extension: GraphicsExtension = Field(default_factory=GraphicsExtension)
