"""Turns a (category, type name) selection into what should be shown."""

from dataclasses import dataclass

from graphql import GraphQLSchema

from schema_explorer.categories import Category, root_type_name
from schema_explorer.index import TypeSummary, types_by_category
from schema_explorer.materializer import MaterializedType, materialize

DEFAULT_TYPE_NAME = "Query"


@dataclass(frozen=True)
class Selection:
    """Outcome of a navigation: a category listing, a single type, or nothing to show."""

    category: Category | None = None
    type_name: str | None = None
    listing: list[TypeSummary] | None = None
    type: MaterializedType | None = None

    @property
    def empty(self) -> bool:
        return self.listing is None and self.type is None


@dataclass(frozen=True)
class NavigationTarget:
    category: Category
    type_name: str | None = None


def selection_for_category(schema: GraphQLSchema, category: Category) -> NavigationTarget:
    """Target for picking a category: root categories open their root type, kinds open the listing."""
    if category.is_root:
        return NavigationTarget(category=category, type_name=root_type_name(schema, category) or category.label)
    return NavigationTarget(category=category)


def select(
    schema: GraphQLSchema,
    category: Category | None = None,
    type_name: str | None = None,
    *,
    sort: bool = False,
) -> Selection:
    """
    Resolve a navigation selection.

    A category without a type name lists that category. Without either, the query root
    type is shown. A type name the schema does not know yields an empty selection.

    Args:
        schema: The GraphQL schema
        category: Selected category, if any
        type_name: Selected type name, if any
        sort: Sort listings by name

    Returns:
        The selection to render
    """
    if category is not None and not type_name:
        return Selection(category=category, listing=types_by_category(schema, category, sort=sort))

    if not type_name:
        type_name = root_type_name(schema, Category.QUERY) or DEFAULT_TYPE_NAME

    materialized = materialize(schema, type_name)
    if materialized is None:
        return Selection(category=category, type_name=type_name)
    return Selection(category=materialized.category, type_name=type_name, type=materialized)
