"""Content project schemas."""

from pydantic import Field

from src.hub.schemas.project import (
    DocumentModel,
    ExtensionModel,
    ProjectDraft,
    ProjectRecord,
    ProjectUpdate,
)


class ContentStrategy(DocumentModel):
    target_audience: str | None = None
    goals: list[str] | None = None
    tone: str | None = None
    style: str | None = None
    key_messages: list[str] | None = None
    content_pillars: list[str] | None = None


class ContentCalendar(DocumentModel):
    frequency: str | None = None
    platforms: list[str] | None = None
    schedule: str | None = None
    topics: list[str] | None = None


class ContentCreation(DocumentModel):
    writers: list[str] | None = None
    editors: list[str] | None = None
    approvers: list[str] | None = None
    workflow: str | None = None
    guidelines: str | None = None


class ContentDistribution(DocumentModel):
    channels: list[str] | None = None
    schedule: str | None = None
    automation: bool | None = None
    promotion_strategy: str | None = None


class ContentPerformance(DocumentModel):
    metrics: list[str] | None = None
    tools: list[str] | None = None
    reporting_frequency: str | None = None
    benchmarks: list[str] | None = None


class ContentExtension(ExtensionModel):
    content_type: str | None = None  # blog, social-media, email, ...
    content_strategy: ContentStrategy | None = None
    content_calendar: ContentCalendar | None = None
    content_creation: ContentCreation | None = None
    content_distribution: ContentDistribution | None = None
    content_performance: ContentPerformance | None = None


class ContentProjectDraft(ProjectDraft):
    extension: ContentExtension = Field(default_factory=ContentExtension)


class ContentProjectUpdate(ProjectUpdate):
    extension: ContentExtension | None = None


class ContentProject(ProjectRecord):
    extension: ContentExtension = Field(default_factory=ContentExtension)
