from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from faker import Faker
from graphql import GraphQLSchema
from hypothesis import strategies as st
from hypothesis.strategies import composite

from schema_explorer.categories import Category
from schema_explorer.parser import parse_schema

SCALAR_TYPES = ["String", "Int", "Float", "Boolean", "ID"]


class SchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    BLOG: Path = TESTS_DATA_DIR / "blog.graphql"
    CUSTOM_ROOTS: Path = TESTS_DATA_DIR / "custom_roots.graphql"
    INVALID: Path = TESTS_DATA_DIR / "invalid.graphql"
    SPLIT_DIR: Path = TESTS_DATA_DIR / "split"
    CONFIG: Path = TESTS_DATA_DIR / "explorer.yaml"


@pytest.fixture(scope="module")
def blog_schema() -> GraphQLSchema:
    assert SchemaData.BLOG.exists(), f"Missing test file: {SchemaData.BLOG}"
    schema = parse_schema(SchemaData.BLOG.read_text())
    assert schema is not None
    return schema


@pytest.fixture(scope="module")
def custom_roots_schema() -> GraphQLSchema:
    schema = parse_schema(SchemaData.CUSTOM_ROOTS.read_text())
    assert schema is not None
    return schema


@dataclass
class MockSchemaData:
    """A generated SDL document together with the category every declared type must get."""

    sdl: str
    expected: dict[str, Category] = field(default_factory=dict)

    def names_in(self, category: Category) -> set[str]:
        return {name for name, expected in self.expected.items() if expected == category}


@composite
def mock_sdl_strategy(draw: Callable[[st.SearchStrategy[Any]], Any]) -> MockSchemaData:
    """Generate a random SDL document with every kind of named type and a random subset of roots."""
    faker = Faker()

    def unique_name(suffix: str) -> str:
        return f"{faker.unique.word().capitalize()}{suffix}"

    definitions: list[str] = []
    expected: dict[str, Category] = {}

    interfaces = [unique_name("Interface") for _ in range(draw(st.integers(min_value=0, max_value=2)))]
    for name in interfaces:
        definitions.append(f"interface {name} {{ id: ID! }}")
        expected[name] = Category.INTERFACE

    objects = [unique_name("Object") for _ in range(draw(st.integers(min_value=0, max_value=3)))]
    for name in objects:
        implements = f" implements {' & '.join(interfaces)}" if interfaces and draw(st.booleans()) else ""
        scalar = draw(st.sampled_from(SCALAR_TYPES))
        definitions.append(f"type {name}{implements} {{ id: ID! value: [{scalar}!] }}")
        expected[name] = Category.OBJECT

    for _ in range(draw(st.integers(min_value=0, max_value=2))):
        name = unique_name("Enum")
        values = " ".join(faker.unique.word().upper() for _ in range(draw(st.integers(min_value=1, max_value=3))))
        definitions.append(f"enum {name} {{ {values} }}")
        expected[name] = Category.ENUM

    for _ in range(draw(st.integers(min_value=0, max_value=2))):
        name = unique_name("Scalar")
        definitions.append(f"scalar {name}")
        expected[name] = Category.SCALAR

    if objects:
        for _ in range(draw(st.integers(min_value=0, max_value=2))):
            name = unique_name("Union")
            definitions.append(f"union {name} = {' | '.join(objects)}")
            expected[name] = Category.UNION

    for _ in range(draw(st.integers(min_value=0, max_value=2))):
        name = unique_name("Input")
        definitions.append(f"input {name} {{ value: String }}")
        expected[name] = Category.INPUT_OBJECT

    roots = {
        "Query": Category.QUERY,
        "Mutation": Category.MUTATION,
        "Subscription": Category.SUBSCRIPTION,
    }
    for name, category in roots.items():
        if draw(st.booleans()):
            target = objects[0] if objects else "String"
            definitions.append(f"type {name} {{ entry: {target} }}")
            expected[name] = category

    return MockSchemaData(sdl="\n\n".join(definitions), expected=expected)
