from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
)

from schema_explorer.categories import Category, root_type_names

KIND_CATEGORIES: dict[type[GraphQLNamedType], Category] = {
    GraphQLObjectType: Category.OBJECT,
    GraphQLInterfaceType: Category.INTERFACE,
    GraphQLEnumType: Category.ENUM,
    GraphQLScalarType: Category.SCALAR,
    GraphQLUnionType: Category.UNION,
    GraphQLInputObjectType: Category.INPUT_OBJECT,
}


def kind_category(named_type: GraphQLNamedType) -> Category:
    """Map a named type to its structural kind category, ignoring root configuration.

    Raises:
        TypeError: If the type is not one of the six named type kinds
    """
    for kind, category in KIND_CATEGORIES.items():
        if isinstance(named_type, kind):
            return category
    raise TypeError(f"Unsupported named type kind: {type(named_type).__name__}")


def category_for_type(schema: GraphQLSchema, named_type: GraphQLNamedType) -> Category:
    """Classify a type object of the schema.

    Root operation names take precedence over the structural kind, in query,
    mutation, subscription order.
    """
    for category, name in root_type_names(schema).items():
        if named_type.name == name:
            return category
    return kind_category(named_type)


def classify(schema: GraphQLSchema, name: str) -> Category:
    """
    Determine the category of a named type.

    Args:
        schema: The GraphQL schema
        name: Name of a type known to the schema (built-in scalars included)

    Returns:
        The root category when the name is a configured root type, else its kind category

    Raises:
        KeyError: If the schema has no type with that name
    """
    named_type = schema.get_type(name)
    if named_type is None:
        raise KeyError(f"Type '{name}' not found in schema")
    return category_for_type(schema, named_type)
