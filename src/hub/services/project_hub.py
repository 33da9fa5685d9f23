"""Project hub - one repository per category over a shared store."""

from collections.abc import Callable, Iterator
from datetime import datetime

from src.hub.categories import CATEGORIES, get_category
from src.hub.core.config import Settings, get_settings
from src.hub.core.logging import get_logger, setup_logging
from src.hub.models.base import utc_now
from src.hub.models.enums import ProjectCategory
from src.hub.repositories import ProjectRepository
from src.hub.schemas import AppProject, ContentProject, GraphicsProject, SeoProject, WebsiteProject
from src.hub.stores import CollectionStore, create_store

logger = get_logger(__name__)


class ProjectHub:
    """Entry point for the dashboard: the five category repositories.

    The store is passed in rather than looked up globally, so tests and
    alternative deployments can supply their own.
    """

    def __init__(
        self,
        store: CollectionStore,
        clock: Callable[[], datetime] = utc_now,
        collection_prefix: str = "",
    ):
        self.store = store
        self._repositories: dict[ProjectCategory, ProjectRepository] = {
            category: ProjectRepository(schema, store, clock, collection_prefix)
            for category, schema in CATEGORIES.items()
        }

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ProjectHub":
        """Configure logging and build a hub over the store selected in configuration."""
        if settings is None:
            settings = get_settings()
        setup_logging(debug=settings.debug)
        store = create_store(settings)
        logger.info(
            "Project hub ready",
            app=settings.app_name,
            env=settings.app_env,
            store_backend=settings.store_backend,
            collection_prefix=settings.collection_prefix or None,
        )
        return cls(store, collection_prefix=settings.collection_prefix)

    def repository(self, category: ProjectCategory | str) -> ProjectRepository:
        """Repository for a category given as enum member or value."""
        return self._repositories[get_category(category).category]

    def __iter__(self) -> Iterator[ProjectRepository]:
        return iter(self._repositories.values())

    @property
    def website(self) -> ProjectRepository[WebsiteProject]:
        return self._repositories[ProjectCategory.WEBSITE]

    @property
    def app(self) -> ProjectRepository[AppProject]:
        return self._repositories[ProjectCategory.APP]

    @property
    def graphics(self) -> ProjectRepository[GraphicsProject]:
        return self._repositories[ProjectCategory.GRAPHICS]

    @property
    def seo(self) -> ProjectRepository[SeoProject]:
        return self._repositories[ProjectCategory.SEO]

    @property
    def content(self) -> ProjectRepository[ContentProject]:
        return self._repositories[ProjectCategory.CONTENT]
