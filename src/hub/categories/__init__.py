"""Category schemas - one declarative descriptor per project category."""

from src.hub.categories.base import CategorySchema, FilterField, Option, TableColumn
from src.hub.categories.definitions import (
    APP,
    CATEGORIES,
    CONTENT,
    GRAPHICS,
    SEO,
    WEBSITE,
    get_category,
)

__all__ = [
    # Descriptor types
    "CategorySchema",
    "FilterField",
    "Option",
    "TableColumn",
    # Categories
    "APP",
    "CATEGORIES",
    "CONTENT",
    "GRAPHICS",
    "SEO",
    "WEBSITE",
    "get_category",
]
