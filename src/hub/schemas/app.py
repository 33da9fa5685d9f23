"""App project schemas."""

from pydantic import Field

from src.hub.schemas.project import (
    DocumentModel,
    ExtensionModel,
    ProjectDraft,
    ProjectRecord,
    ProjectUpdate,
)


class AppRequirements(DocumentModel):
    features: list[str] | None = None
    user_roles: list[str] | None = None
    integrations: list[str] | None = None
    security_requirements: list[str] | None = None
    performance_requirements: list[str] | None = None


class TechnicalSpecifications(DocumentModel):
    frontend_technology: str | None = None
    backend_technology: str | None = None
    database: str | None = None
    apis: list[str] | None = None
    hosting: str | None = None
    authentication: str | None = None
    third_party_services: list[str] | None = None


class DesignSpecifications(DocumentModel):
    wireframes: bool | None = None
    mockups: bool | None = None
    prototypes: bool | None = None
    design_system: bool | None = None
    brand_guidelines: str | None = None


class EnvironmentSetup(DocumentModel):
    development: bool | None = None
    staging: bool | None = None
    production: bool | None = None


class Development(DocumentModel):
    repository: str | None = None
    deployment_strategy: str | None = None
    cicd_pipeline: str | None = None
    testing_strategy: str | None = None
    environment_setup: EnvironmentSetup | None = None


class AppStoreListing(DocumentModel):
    app_store_submission: bool | None = None
    play_store_submission: bool | None = None
    app_store_id: str | None = None
    play_store_id: str | None = None
    app_store_url: str | None = None
    play_store_url: str | None = None
    app_version: str | None = None
    release_notes: str | None = None


class AppExtension(ExtensionModel):
    app_type: str | None = None  # mobile, web, desktop, ...
    platforms: list[str] | None = None  # ios, android, web, ...
    app_requirements: AppRequirements | None = None
    technical_specifications: TechnicalSpecifications | None = None
    design_specifications: DesignSpecifications | None = None
    development: Development | None = None
    app_store: AppStoreListing | None = None


class AppProjectDraft(ProjectDraft):
    extension: AppExtension = Field(default_factory=AppExtension)


class AppProjectUpdate(ProjectUpdate):
    extension: AppExtension | None = None


class AppProject(ProjectRecord):
    extension: AppExtension = Field(default_factory=AppExtension)
