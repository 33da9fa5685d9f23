from src.hub.schemas.app import AppExtension, AppProject, AppProjectDraft, AppProjectUpdate
from src.hub.schemas.content import (
    ContentExtension,
    ContentProject,
    ContentProjectDraft,
    ContentProjectUpdate,
)
from src.hub.schemas.graphics import (
    GraphicsExtension,
    GraphicsProject,
    GraphicsProjectDraft,
    GraphicsProjectUpdate,
)
from src.hub.schemas.project import (
    Assignments,
    DocumentModel,
    ExtensionModel,
    ProjectDraft,
    ProjectRecord,
    ProjectUpdate,
    to_document,
)
from src.hub.schemas.seo import SeoExtension, SeoProject, SeoProjectDraft, SeoProjectUpdate
from src.hub.schemas.website import (
    WebsiteExtension,
    WebsiteProject,
    WebsiteProjectDraft,
    WebsiteProjectUpdate,
)

__all__ = [
    # Shared
    "Assignments",
    "DocumentModel",
    "ExtensionModel",
    "ProjectDraft",
    "ProjectRecord",
    "ProjectUpdate",
    "to_document",
    # Website
    "WebsiteExtension",
    "WebsiteProject",
    "WebsiteProjectDraft",
    "WebsiteProjectUpdate",
    # App
    "AppExtension",
    "AppProject",
    "AppProjectDraft",
    "AppProjectUpdate",
    # Graphics
    "GraphicsExtension",
    "GraphicsProject",
    "GraphicsProjectDraft",
    "GraphicsProjectUpdate",
    # SEO
    "SeoExtension",
    "SeoProject",
    "SeoProjectDraft",
    "SeoProjectUpdate",
    # Content
    "ContentExtension",
    "ContentProject",
    "ContentProjectDraft",
    "ContentProjectUpdate",
]
