from enum import Enum

from graphql import GraphQLSchema


class Category(str, Enum):
    """Navigation bucket of a named type: a root operation or a type kind."""

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"
    OBJECT = "object"
    INTERFACE = "interface"
    ENUM = "enum"
    SCALAR = "scalar"
    UNION = "union"
    INPUT_OBJECT = "input-object"

    @property
    def is_root(self) -> bool:
        return self in ROOT_CATEGORIES

    @property
    def label(self) -> str:
        """Sentence-case label, e.g. ``input-object`` -> ``Input object``."""
        words = self.value.split("-")
        return " ".join([words[0].capitalize(), *words[1:]])

    def __str__(self) -> str:
        return self.value


ROOT_CATEGORIES: tuple[Category, ...] = (
    Category.QUERY,
    Category.MUTATION,
    Category.SUBSCRIPTION,
)

TYPE_CATEGORIES: tuple[Category, ...] = (
    Category.OBJECT,
    Category.INTERFACE,
    Category.ENUM,
    Category.SCALAR,
    Category.UNION,
    Category.INPUT_OBJECT,
)

ALL_CATEGORIES: tuple[Category, ...] = ROOT_CATEGORIES + TYPE_CATEGORIES


def root_type_name(schema: GraphQLSchema, category: Category) -> str | None:
    """Return the configured root type name for a root category.

    Args:
        schema: The GraphQL schema
        category: Any category; kind categories always yield None

    Returns:
        The root type name, or None if the schema does not declare that root.
    """
    root_types = {
        Category.QUERY: schema.query_type,
        Category.MUTATION: schema.mutation_type,
        Category.SUBSCRIPTION: schema.subscription_type,
    }
    root_type = root_types.get(category)
    return root_type.name if root_type else None


def root_type_names(schema: GraphQLSchema) -> dict[Category, str]:
    """Map each declared root category to its type name."""
    names: dict[Category, str] = {}
    for category in ROOT_CATEGORIES:
        name = root_type_name(schema, category)
        if name is not None:
            names[category] = name
    return names
