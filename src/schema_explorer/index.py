"""Grouping of declared types into navigation categories."""

from dataclasses import dataclass, field

from graphql import GraphQLSchema
from pydantic import BaseModel

from schema_explorer import log
from schema_explorer.categories import ALL_CATEGORIES, Category
from schema_explorer.classifier import category_for_type
from schema_explorer.utils.graphql_type import get_declared_types


class TypeSummary(BaseModel):
    """One row of a category listing."""

    name: str
    description: str = ""


def _categorized_types(schema: GraphQLSchema) -> list[tuple[Category, TypeSummary]]:
    return [
        (category_for_type(schema, type_), TypeSummary(name=type_.name, description=type_.description or ""))
        for type_ in get_declared_types(schema)
    ]


def types_by_category(schema: GraphQLSchema, category: Category, *, sort: bool = False) -> list[TypeSummary]:
    """
    List the declared types belonging to one category.

    Args:
        schema: The GraphQL schema
        category: Category to filter on
        sort: Sort by name instead of keeping type map order

    Returns:
        Name and description of each matching type, each name exactly once
    """
    summaries = [summary for type_category, summary in _categorized_types(schema) if type_category == category]
    if sort:
        summaries.sort(key=lambda summary: summary.name)
    return summaries


def type_counts(schema: GraphQLSchema) -> dict[Category, int]:
    """Count declared types per category; every category is present, roots are counted only as roots."""
    counts = dict.fromkeys(ALL_CATEGORIES, 0)
    for category, _ in _categorized_types(schema):
        counts[category] += 1
    return counts


@dataclass(frozen=True)
class CategoryIndex:
    """Counts and listings of every category, built from one pass over the schema."""

    counts: dict[Category, int]
    listings: dict[Category, list[TypeSummary]] = field(default_factory=dict)

    @classmethod
    def build(cls, schema: GraphQLSchema, *, sort: bool = False) -> "CategoryIndex":
        listings: dict[Category, list[TypeSummary]] = {category: [] for category in ALL_CATEGORIES}
        for category, summary in _categorized_types(schema):
            listings[category].append(summary)
        if sort:
            for summaries in listings.values():
                summaries.sort(key=lambda summary: summary.name)

        counts = {category: len(summaries) for category, summaries in listings.items()}
        log.debug(f"Indexed {sum(counts.values())} types: {counts}")
        return cls(counts=counts, listings=listings)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def listing(self, category: Category) -> list[TypeSummary]:
        return list(self.listings.get(category, []))
