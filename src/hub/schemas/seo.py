"""SEO project schemas."""

from pydantic import Field

from src.hub.schemas.project import (
    DocumentModel,
    ExtensionModel,
    ProjectDraft,
    ProjectRecord,
    ProjectUpdate,
)


class CompetitorAnalysis(DocumentModel):
    competitors: list[str] | None = None
    competitor_keywords: list[str] | None = None
    competitor_backlinks: list[str] | None = None


class SeoAudit(DocumentModel):
    technical_issues: list[str] | None = None
    content_issues: list[str] | None = None
    on_page_issues: list[str] | None = None
    off_page_issues: list[str] | None = None
    performance_issues: list[str] | None = None


class SeoStrategy(DocumentModel):
    keyword_strategy: str | None = None
    content_strategy: str | None = None
    link_building_strategy: str | None = None
    local_seo_strategy: str | None = None
    technical_seo_strategy: str | None = None


class SeoAnalytics(DocumentModel):
    analytics_setup: bool | None = None
    search_console_setup: bool | None = None
    conversion_tracking: bool | None = None
    goal_tracking: bool | None = None
    custom_reports: bool | None = None


class SeoReporting(DocumentModel):
    reporting_frequency: str | None = None
    key_metrics: list[str] | None = None
    custom_dashboard: bool | None = None
    client_access: bool | None = None


class SeoExtension(ExtensionModel):
    seo_type: str | None = None  # local, national, international, ...
    target_keywords: list[str] | None = None
    competitor_analysis: CompetitorAnalysis | None = None
    seo_audit: SeoAudit | None = None
    seo_strategy: SeoStrategy | None = None
    analytics: SeoAnalytics | None = None
    reporting: SeoReporting | None = None


class SeoProjectDraft(ProjectDraft):
    extension: SeoExtension = Field(default_factory=SeoExtension)


class SeoProjectUpdate(ProjectUpdate):
    extension: SeoExtension | None = None


class SeoProject(ProjectRecord):
    extension: SeoExtension = Field(default_factory=SeoExtension)
