from graphql import GraphQLNamedType, GraphQLSchema, is_specified_scalar_type, specified_scalar_types


def is_introspection_type(type_name: str) -> bool:
    return type_name.startswith("__")


def is_builtin_scalar_type(type_name: str) -> bool:
    return type_name in specified_scalar_types


def is_declared_type(named_type: GraphQLNamedType) -> bool:
    """Check whether a type in the type map was declared by the SDL document.

    graphql-core injects the introspection types and the specified scalars into
    every schema; neither counts as a declaration.
    """
    return not is_introspection_type(named_type.name) and not is_specified_scalar_type(named_type)


def get_declared_types(schema: GraphQLSchema) -> list[GraphQLNamedType]:
    """
    Extracts all named types declared by the SDL document, in type map order.

    Args:
        schema (GraphQLSchema): The GraphQL schema to extract named types from.
    Returns:
        list[GraphQLNamedType]: Declared object, interface, union, enum, scalar and input object types.
    """
    return [type_ for type_ in schema.type_map.values() if is_declared_type(type_)]
