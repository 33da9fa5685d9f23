"""Declarative category schema.

A ``CategorySchema`` carries everything that differs between the five
project categories: collection name, record models, status and type
options, declared filters and the extra table columns. The repository is
generic over it.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic.alias_generators import to_camel

from src.hub.models.enums import FilterOperator, ProjectCategory
from src.hub.schemas.project import ProjectDraft, ProjectRecord, ProjectUpdate
from src.hub.stores.base import QueryFilter


@dataclass(frozen=True)
class Option:
    """A selectable value with its display label."""

    value: str
    label: str


@dataclass(frozen=True)
class FilterField:
    """A filter the dashboard offers, mapped onto a document path.

    Args:
        name: Public filter key, e.g. ``platform``.
        path: Dotted document path the filter applies to.
        operator: ``equals`` or ``array_contains``.
        options: Values offered in the filter dropdown, if fixed.
    """

    name: str
    path: str
    operator: FilterOperator = FilterOperator.EQUALS
    options: tuple[Option, ...] = ()


@dataclass(frozen=True)
class TableColumn:
    header: str
    path: str
    sortable: bool = True


COMMON_FILTERS: tuple[FilterField, ...] = (
    FilterField("status", "status"),
    FilterField("organisationId", "organisationId"),
    FilterField("assignedTo", "assignedTo"),
    FilterField("tasks", "tasks", FilterOperator.ARRAY_CONTAINS),
)

COMMON_COLUMNS: tuple[TableColumn, ...] = (
    TableColumn("Project Name", "name"),
    TableColumn("Status", "status"),
    TableColumn("Start Date", "startDate"),
    TableColumn("Due Date", "dueDate"),
    TableColumn("Created", "createdAt"),
)


@dataclass(frozen=True)
class CategorySchema:
    category: ProjectCategory
    collection: str
    label: str
    record_model: type[ProjectRecord]
    draft_model: type[ProjectDraft]
    update_model: type[ProjectUpdate]
    statuses: tuple[Option, ...]
    type_options: tuple[Option, ...] = ()
    extra_filters: tuple[FilterField, ...] = ()
    extra_columns: tuple[TableColumn, ...] = ()
    _filters_by_name: dict[str, FilterField] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_name = {f.name: f for f in self.filters}
        object.__setattr__(self, "_filters_by_name", by_name)

    @property
    def filters(self) -> tuple[FilterField, ...]:
        return COMMON_FILTERS + self.extra_filters

    @property
    def columns(self) -> tuple[TableColumn, ...]:
        return COMMON_COLUMNS + self.extra_columns

    @property
    def status_values(self) -> tuple[str, ...]:
        return tuple(option.value for option in self.statuses)

    def status_label(self, value: str) -> str:
        """Display label for a status, falling back to the raw value."""
        for option in self.statuses:
            if option.value == value:
                return option.label
        return value

    def collection_name(self, prefix: str = "") -> str:
        return f"{prefix}{self.collection}"

    def get_filter(self, name: str) -> FilterField | None:
        """Find a declared filter by its public name (camelCase or snake_case)."""
        return self._filters_by_name.get(name) or self._filters_by_name.get(to_camel(name))

    def build_filters(self, filters: Mapping[str, Any] | None) -> list[QueryFilter]:
        """Translate a ``{name: value}`` mapping into store filter clauses.

        Blank values (``None`` or ``""``) are skipped, matching an unselected
        dropdown. Undeclared names become equality filters on that path.
        """
        clauses: list[QueryFilter] = []
        for name, value in (filters or {}).items():
            if value is None or value == "":
                continue
            declared = self.get_filter(name)
            if declared is not None:
                clauses.append(QueryFilter(declared.path, declared.operator, value))
            else:
                clauses.append(QueryFilter(name, FilterOperator.EQUALS, value))
        return clauses
