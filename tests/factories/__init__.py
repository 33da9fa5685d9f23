"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import WebsiteProjectDraftFactory, ...
"""

from tests.factories.base import BaseDraftFactory, project_name
from tests.factories.projects import (
    AppProjectDraftFactory,
    ContentProjectDraftFactory,
    GraphicsProjectDraftFactory,
    SeoProjectDraftFactory,
    WebsiteProjectDraftFactory,
)

__all__ = [
    # Base
    "BaseDraftFactory",
    "project_name",
    # Projects
    "AppProjectDraftFactory",
    "ContentProjectDraftFactory",
    "GraphicsProjectDraftFactory",
    "SeoProjectDraftFactory",
    "WebsiteProjectDraftFactory",
]
