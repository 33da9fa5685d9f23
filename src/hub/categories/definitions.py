"""The five project categories."""

from src.hub.categories.base import CategorySchema, FilterField, Option, TableColumn
from src.hub.models.enums import FilterOperator, ProjectCategory
from src.hub.schemas import (
    AppProject,
    AppProjectDraft,
    AppProjectUpdate,
    ContentProject,
    ContentProjectDraft,
    ContentProjectUpdate,
    GraphicsProject,
    GraphicsProjectDraft,
    GraphicsProjectUpdate,
    SeoProject,
    SeoProjectDraft,
    SeoProjectUpdate,
    WebsiteProject,
    WebsiteProjectDraft,
    WebsiteProjectUpdate,
)

ON_HOLD = Option("on-hold", "On Hold")
CANCELLED = Option("cancelled", "Cancelled")

WEBSITE = CategorySchema(
    category=ProjectCategory.WEBSITE,
    collection="websiteProjects",
    label="Website",
    record_model=WebsiteProject,
    draft_model=WebsiteProjectDraft,
    update_model=WebsiteProjectUpdate,
    statuses=(
        Option("planning", "Planning"),
        Option("design", "Design"),
        Option("development", "Development"),
        Option("testing", "Testing"),
        Option("review", "Client Review"),
        Option("completed", "Completed"),
        ON_HOLD,
        CANCELLED,
    ),
)

APP_TYPES = (
    Option("mobile", "Mobile"),
    Option("web", "Web"),
    Option("desktop", "Desktop"),
    Option("hybrid", "Hybrid"),
    Option("pwa", "PWA"),
    Option("other", "Other"),
)

APP_PLATFORMS = (
    Option("ios", "iOS"),
    Option("android", "Android"),
    Option("web", "Web"),
    Option("windows", "Windows"),
    Option("macos", "macOS"),
    Option("linux", "Linux"),
)

APP = CategorySchema(
    category=ProjectCategory.APP,
    collection="appProjects",
    label="App",
    record_model=AppProject,
    draft_model=AppProjectDraft,
    update_model=AppProjectUpdate,
    statuses=(
        Option("planning", "Planning"),
        Option("design", "Design"),
        Option("development", "Development"),
        Option("testing", "Testing"),
        Option("deployment", "Deployment"),
        Option("live", "Live"),
        Option("maintenance", "Maintenance"),
        ON_HOLD,
        CANCELLED,
    ),
    type_options=APP_TYPES,
    extra_filters=(
        FilterField("appType", "extension.appType", options=APP_TYPES),
        FilterField(
            "platform",
            "extension.platforms",
            FilterOperator.ARRAY_CONTAINS,
            options=APP_PLATFORMS,
        ),
    ),
    extra_columns=(
        TableColumn("App Type", "extension.appType"),
        TableColumn("Platforms", "extension.platforms", sortable=False),
    ),
)

GRAPHICS_TYPES = (
    Option("logo", "Logo Design"),
    Option("branding", "Branding"),
    Option("print", "Print Design"),
    Option("digital", "Digital Graphics"),
    Option("illustration", "Illustration"),
    Option("packaging", "Packaging"),
    Option("signage", "Signage"),
    Option("social-media", "Social Media Graphics"),
    Option("web", "Web Graphics"),
    Option("other", "Other"),
)

GRAPHICS = CategorySchema(
    category=ProjectCategory.GRAPHICS,
    collection="graphicsProjects",
    label="Graphics",
    record_model=GraphicsProject,
    draft_model=GraphicsProjectDraft,
    update_model=GraphicsProjectUpdate,
    statuses=(
        Option("planning", "Planning"),
        Option("in-progress", "In Progress"),
        Option("review", "Review"),
        Option("approved", "Approved"),
        Option("completed", "Completed"),
        ON_HOLD,
        CANCELLED,
    ),
    type_options=GRAPHICS_TYPES,
    extra_filters=(
        FilterField("graphicsType", "extension.graphicsType", options=GRAPHICS_TYPES),
    ),
    extra_columns=(TableColumn("Graphics Type", "extension.graphicsType"),),
)

SEO_TYPES = (
    Option("local", "Local"),
    Option("national", "National"),
    Option("international", "International"),
    Option("ecommerce", "E-commerce"),
    Option("technical", "Technical"),
    Option("content", "Content"),
    Option("other", "Other"),
)

SEO = CategorySchema(
    category=ProjectCategory.SEO,
    collection="seoProjects",
    label="SEO",
    record_model=SeoProject,
    draft_model=SeoProjectDraft,
    update_model=SeoProjectUpdate,
    statuses=(
        Option("planning", "Planning"),
        Option("research", "Research"),
        Option("implementation", "Implementation"),
        Option("monitoring", "Monitoring"),
        Option("reporting", "Reporting"),
        Option("completed", "Completed"),
        ON_HOLD,
        CANCELLED,
    ),
    type_options=SEO_TYPES,
    extra_filters=(
        FilterField("seoType", "extension.seoType", options=SEO_TYPES),
        FilterField("targetKeyword", "extension.targetKeywords", FilterOperator.ARRAY_CONTAINS),
    ),
    extra_columns=(TableColumn("SEO Type", "extension.seoType"),),
)

CONTENT_TYPES = (
    Option("blog", "Blog"),
    Option("social-media", "Social Media"),
    Option("email", "Email"),
    Option("website", "Website"),
    Option("video", "Video"),
    Option("podcast", "Podcast"),
    Option("ebook", "E-Book"),
    Option("whitepaper", "Whitepaper"),
    Option("case-study", "Case Study"),
    Option("infographic", "Infographic"),
    Option("other", "Other"),
)

CONTENT = CategorySchema(
    category=ProjectCategory.CONTENT,
    collection="contentProjects",
    label="Content",
    record_model=ContentProject,
    draft_model=ContentProjectDraft,
    update_model=ContentProjectUpdate,
    statuses=(
        Option("planning", "Planning"),
        Option("in-progress", "In Progress"),
        Option("review", "Review"),
        Option("approved", "Approved"),
        Option("published", "Published"),
        ON_HOLD,
        CANCELLED,
    ),
    type_options=CONTENT_TYPES,
    extra_filters=(FilterField("contentType", "extension.contentType", options=CONTENT_TYPES),),
    extra_columns=(TableColumn("Content Type", "extension.contentType"),),
)

CATEGORIES: dict[ProjectCategory, CategorySchema] = {
    schema.category: schema for schema in (WEBSITE, APP, GRAPHICS, SEO, CONTENT)
}


def get_category(category: ProjectCategory | str) -> CategorySchema:
    """Look up a category schema by enum member or value (e.g. ``"seo"``)."""
    try:
        return CATEGORIES[ProjectCategory(category)]
    except ValueError as e:
        raise ValueError(f"Unknown project category: {category!r}") from e
